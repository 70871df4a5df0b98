"""Text and numpy views of a packed mask buffer."""
import numpy as np

from ..errors import BitmaskValueError


def unpack(data, width: int, height: int) -> np.ndarray:
    """Unpack an LSB-first row-major buffer into a ``(height, width)`` bool array."""
    count = width * height
    raw = np.frombuffer(bytes(data), dtype=np.uint8)
    bits = np.unpackbits(raw, bitorder='little')[:count]
    return bits.reshape(height, width).astype(bool)


def pack(array) -> tuple[bytearray, int, int]:
    """Pack a 2D array-like into ``(buffer, width, height)``.

    Truthy cells become set bits.  Padding bits in the last byte are zero.
    """
    arr = np.asarray(array)
    if arr.ndim != 2:
        raise BitmaskValueError(f"expected a 2D array, got shape {arr.shape}")
    height, width = arr.shape
    packed = np.packbits(arr.astype(bool).ravel(), bitorder='little')
    return bytearray(packed.tobytes()), width, height


def to_bitstring(data, width: int, height: int) -> str:
    return ''.join('1' if bit else '0' for bit in unpack(data, width, height).ravel())


def to_ascii(data, width: int, height: int, on: str = '#', off: str = '.') -> str:
    rows = unpack(data, width, height)
    return '\n'.join(''.join(on if bit else off for bit in row) for row in rows)
