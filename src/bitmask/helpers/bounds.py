from typing import Callable, NamedTuple


class Bounds(NamedTuple):
    """Inclusive bounding box of the true cells of a mask.

    ``width``/``height`` are ``right - left + 1`` and ``bottom - top + 1``;
    a mask with no true cell reports :data:`EMPTY_BOUNDS`.
    """
    left: int
    top: int
    right: int
    bottom: int
    width: int
    height: int

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


EMPTY_BOUNDS = Bounds(0, 0, -1, -1, 0, 0)


def scan_bounds(get: Callable[[int, int], bool], width: int, height: int) -> Bounds:
    """Locate the bounding box with four independent early-exit scans.

    Rows are scanned first (top ascending, bottom descending); columns are
    then scanned only within ``[top, bottom]``.
    """

    def row_has_bit(y):
        for x in range(width):
            if get(x, y):
                return True
        return False

    def column_has_bit(x, top, bottom):
        for y in range(top, bottom + 1):
            if get(x, y):
                return True
        return False

    top = 0
    for y in range(height):
        if row_has_bit(y):
            top = y
            break

    bottom = 0
    for y in range(height - 1, -1, -1):
        if row_has_bit(y):
            bottom = y
            break

    left = -1
    for x in range(width):
        if column_has_bit(x, top, bottom):
            left = x
            break

    right = -1
    for x in range(width - 1, -1, -1):
        if column_has_bit(x, top, bottom):
            right = x
            break

    if left == -1:
        return EMPTY_BOUNDS

    return Bounds(left, top, right, bottom, right - left + 1, bottom - top + 1)
