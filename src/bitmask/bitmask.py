import numpy as np

from .debug import dbg
from .errors import BitmaskIndexError, BitmaskValueError
from .helpers.addressing import bittobyte, index_and_shift
from .helpers.blit import normalize_params
from .helpers.bounds import EMPTY_BOUNDS, Bounds, scan_bounds
from .helpers.render import pack, to_ascii, to_bitstring, unpack

logger = dbg("bitmask")


class Bitmask:
    """A fixed-size 2D grid of booleans packed one bit per cell.

    Cell ``(x, y)`` is bit ``x + y * width`` of :attr:`data`, least
    significant bit first within each byte.  The bounding box of the true
    cells is computed lazily and cached until the next mutation.

    :meth:`get` and :meth:`set` do not check their coordinates; use
    :meth:`get_checked` / :meth:`set_checked` when the caller has not
    clamped them already.
    """

    def __init__(self, width: int, height: int):
        self._check_size(width, height)
        self.width, self.height = width, height
        self.data = bytearray(bittobyte(width * height))
        self._active = False
        # a fresh buffer is all zeros, so the empty box is already correct
        self._dirty = False
        self._bounds = EMPTY_BOUNDS

    @staticmethod
    def _check_size(width, height):
        if width < 0 or height < 0:
            raise BitmaskValueError(f"mask size must be non-negative, got {width}x{height}")

    @classmethod
    def from_numpy(cls, array) -> "Bitmask":
        """Build a mask from a 2D array-like; truthy cells become true bits."""
        data, width, height = pack(array)
        mask = cls(width, height)
        mask.data[:] = data
        mask._dirty = True
        return mask

    # -- state ---------------------------------------------------------------
    @property
    def dirty(self) -> bool:
        """True when the cached bounds are stale."""
        return self._dirty

    @property
    def active(self) -> bool:
        return self._active

    def set_active(self, active: bool) -> None:
        """Tag the mask for the owner's bookkeeping; nothing here reads it."""
        if active == self._active:
            return
        self._active = active

    def __len__(self):
        return self.width * self.height

    def __contains__(self, coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def __repr__(self):
        return (
            f"Bitmask(width={self.width}, height={self.height}, "
            f"active={self._active}, dirty={self._dirty})"
        )

    def __eq__(self, other):
        if not isinstance(other, Bitmask):
            return NotImplemented
        if (self.width, self.height) != (other.width, other.height):
            return False
        # padding bits past width * height are not part of the grid
        return bool(np.array_equal(self.to_numpy(), other.to_numpy()))

    __hash__ = None

    def copy(self) -> "Bitmask":
        clone = Bitmask(self.width, self.height)
        clone.data[:] = self.data
        clone._active = self._active
        clone._dirty = self._dirty
        clone._bounds = self._bounds
        return clone

    # -- low-level primitives ------------------------------------------------
    def index_and_shift(self, x: int, y: int) -> tuple[int, int]:
        """Byte index and bit offset of ``(x, y)``. No bounds checking."""
        return index_and_shift(x, y, self.width)

    def _read_bit(self, x, y):
        index, shift = index_and_shift(x, y, self.width)
        return (self.data[index] >> shift) & 1 == 1

    def _write_bit(self, x, y, value):
        index, shift = index_and_shift(x, y, self.width)
        if value:
            self.data[index] |= 1 << shift
        else:
            self.data[index] &= ~(1 << shift)

    def get(self, x: int, y: int) -> bool:
        """Value of cell ``(x, y)``. CAN READ OUTSIDE THE GRID!

        Out-of-grid coordinates alias other cells through the row-major
        formula; a byte index past the buffer raises the buffer's IndexError.
        A negative byte index wraps to the end of the buffer the way Python
        indexing does, so ``get(-1, 0)`` reads the last bit of the last byte,
        a padding bit when ``width * height`` is not a multiple of 8.
        """
        return self._read_bit(x, y)

    def set(self, x: int, y: int, value: bool) -> None:
        """Write cell ``(x, y)``. CAN WRITE OUTSIDE THE GRID!

        Addressing is the same as :meth:`get`: off-grid cells alias other
        cells, negative byte indices wrap to the end of the buffer and an
        index past the end raises IndexError.
        """
        self._write_bit(x, y, value)
        self._dirty = True

    def get_checked(self, x: int, y: int) -> bool:
        if (x, y) not in self:
            raise BitmaskIndexError(x, y, self.width, self.height)
        return self.get(x, y)

    def set_checked(self, x: int, y: int, value: bool) -> None:
        if (x, y) not in self:
            raise BitmaskIndexError(x, y, self.width, self.height)
        self.set(x, y, value)

    # -- bulk operations -----------------------------------------------------
    def mark_region(self, x: int, y: int, w: int, h: int, value: bool) -> None:
        """Paint a rectangle, clamped to the grid.

        Nothing happens when the rectangle misses the grid entirely.
        """
        width, height = self.width, self.height
        if x + w < 1 or x > width - 1 or y + h < 1 or y > height - 1:
            logger.debug("mark_region (%d, %d, %d, %d) misses the grid", x, y, w, h)
            return
        diff_x = x - max(0, min(width - 1, x))
        diff_y = y - max(0, min(height - 1, y))
        x -= diff_x
        y -= diff_y
        # w and h become inclusive extents from here on
        w = max(0, min(width - 1, x + w + diff_x - 1) - x)
        h = max(0, min(height - 1, y + h + diff_y - 1) - y)

        for cx in range(x, x + w + 1):
            for cy in range(y, y + h + 1):
                self._write_bit(cx, cy, value)
        self._dirty = True

    def paste(self, source: "Bitmask", dx: int, dy: int, sx: int, sy: int, w: int, h: int) -> None:
        """Copy a ``w`` x ``h`` block of ``source`` at ``(sx, sy)`` to ``(dx, dy)``.

        Both rectangles are clipped to their own masks first.  ``source`` may
        be ``self``; cells are visited column by column, each column top to
        bottom, and every read sees earlier writes.
        """
        clamped = normalize_params(self, source, dx, dy, sx, sy, w, h)
        logger.debug("paste requested %s clamped to %s", (dx, dy, sx, sy, w, h), clamped)
        dx, dy, sx, sy, w, h = clamped
        diff_x, diff_y = sx - dx, sy - dy
        for i in range(dx, dx + w):
            for j in range(dy, dy + h):
                self._write_bit(i, j, source.get(i + diff_x, j + diff_y))
        self._dirty = True

    def shift(self, dx: int, dy: int) -> None:
        """Translate every bit by ``(dx, dy)``.

        Bits pushed past an edge are dropped and vacated cells become false.
        Positive ``dx`` moves right, positive ``dy`` moves down.
        """
        width, height = self.width, self.height
        read, write = self._read_bit, self._write_bit

        if dx > 0:
            # walk right to left so no column is overwritten before it is read
            for i in range(width - 1, dx - 1, -1):
                for j in range(height):
                    write(i, j, read(i - dx, j))
            for i in range(min(dx, width)):
                for j in range(height):
                    write(i, j, False)
        elif dx < 0:
            for i in range(0, width + dx):
                for j in range(height):
                    write(i, j, read(i - dx, j))
            for i in range(max(0, width + dx), width):
                for j in range(height):
                    write(i, j, False)

        if dy > 0:
            for i in range(height - 1, dy - 1, -1):
                for j in range(width):
                    write(j, i, read(j, i - dy))
            for i in range(min(dy, height)):
                for j in range(width):
                    write(j, i, False)
        elif dy < 0:
            for i in range(0, height + dy):
                for j in range(width):
                    write(j, i, read(j, i - dy))
            for i in range(max(0, height + dy), height):
                for j in range(width):
                    write(j, i, False)

        if dx or dy:
            logger.debug("shifted by (%d, %d)", dx, dy)
            self._dirty = True

    def invert(self) -> None:
        """Flip every bit of the buffer, padding bits included."""
        data = self.data
        for i in range(len(data)):
            data[i] ^= 0xFF
        self._dirty = True

    def reset(self, all_true: bool = False) -> None:
        """Clear the mask, or set every bit when ``all_true`` is given."""
        self.data[:] = (b'\xff' if all_true else b'\x00') * len(self.data)
        self._dirty = True

    def resize(self, width: int, height: int) -> None:
        """Change the grid size. The previous contents are discarded."""
        self._check_size(width, height)
        logger.debug("resize %dx%d -> %dx%d", self.width, self.height, width, height)
        self.width, self.height = width, height
        self.data = bytearray(bittobyte(width * height))
        self._dirty = True

    # -- bounds --------------------------------------------------------------
    def get_bounds(self) -> Bounds:
        """Bounding box of the true cells, recomputed only if the mask changed.

        Returns ``(left, top, right, bottom, width, height)``; an empty mask
        gives ``(0, 0, -1, -1, 0, 0)``.
        """
        if not self._dirty:
            return self._bounds
        self._bounds = scan_bounds(self._read_bit, self.width, self.height)
        self._dirty = False
        logger.debug("bounds recomputed: %s", self._bounds)
        return self._bounds

    # -- views ---------------------------------------------------------------
    def count(self) -> int:
        """Number of true cells in the grid."""
        return int(np.count_nonzero(self.to_numpy()))

    def to_numpy(self) -> np.ndarray:
        return unpack(self.data, self.width, self.height)

    def to_bitstring(self) -> str:
        return to_bitstring(self.data, self.width, self.height)

    def to_ascii(self, on: str = '#', off: str = '.') -> str:
        return to_ascii(self.data, self.width, self.height, on=on, off=off)
