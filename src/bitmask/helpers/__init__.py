from .addressing import bittobyte, index_and_shift, intceil
from .blit import normalize_params
from .bounds import EMPTY_BOUNDS, Bounds, scan_bounds
from .render import pack, to_ascii, to_bitstring, unpack

__all__ = [
    "bittobyte",
    "index_and_shift",
    "intceil",
    "normalize_params",
    "EMPTY_BOUNDS",
    "Bounds",
    "scan_bounds",
    "pack",
    "to_ascii",
    "to_bitstring",
    "unpack",
]
