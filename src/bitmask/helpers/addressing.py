"""Byte sizing and bit addressing for row-major packed grids.

Bit ``n = x + y * width`` of a grid lives in byte ``n // 8`` at position
``n % 8``, least-significant bit first.
"""


def intceil(val: int, base: int = 8) -> int:
    """Return the smallest multiple of `base` that is >= `val`."""
    return (val + base - 1) // base * base


def bittobyte(bits: int) -> int:
    """Number of bytes needed to hold ``bits`` bits."""
    return intceil(bits) // 8


def index_and_shift(x: int, y: int, width: int) -> tuple[int, int]:
    """Byte index and in-byte offset of cell ``(x, y)``.

    No bounds checking: coordinates outside the grid map to whatever
    position the row-major formula produces, including negative ones.
    """
    pos = x + y * width
    return pos // 8, pos % 8
