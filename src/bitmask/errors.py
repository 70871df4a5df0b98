class BitmaskError(Exception):
    """Base class for errors raised by the bitmask package."""


class BitmaskIndexError(BitmaskError, IndexError):
    """Raised by the checked accessors for a coordinate outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x, self.y = x, y
        self.width, self.height = width, height
        super().__init__(
            f"cell ({x}, {y}) out of mask bounds [0,{width}) x [0,{height})"
        )


class BitmaskValueError(BitmaskError, ValueError):
    """Raised for a negative mask size or input that is not a 2D grid."""
