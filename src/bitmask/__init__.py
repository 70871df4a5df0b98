from . import debug
from .bitmask import Bitmask
from .errors import BitmaskError, BitmaskIndexError, BitmaskValueError
from .helpers.bounds import EMPTY_BOUNDS, Bounds

__all__ = [
    "Bitmask",
    "BitmaskError",
    "BitmaskIndexError",
    "BitmaskValueError",
    "Bounds",
    "EMPTY_BOUNDS",
    "debug",
]
