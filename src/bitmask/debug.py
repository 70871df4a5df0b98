"""Debug logging switch for the bitmask package.

Use `enable(True)` (or set env BITMASK_DEBUG=1) to see bounds recomputation,
resize, paste clamping and shift records from every module in the package.

Helpers:
- dbg(name): namespaced logger under "src.bitmask.<name>"
- enable(flag): turn logging on/off for the package
- is_enabled(): check the flag

By default the package is quiet; enabling debug attaches a stream handler
to the package logger with a timestamped format.
"""

import logging
import os
import threading

LOGGER_NAME = "src.bitmask"

_ENABLED = bool(int(os.getenv("BITMASK_DEBUG", "0") or "0"))
_LOCK = threading.Lock()


def enable(flag: bool = True, *, level: int = logging.DEBUG) -> None:
    """Enable or disable debug logging for the bitmask package."""
    global _ENABLED
    with _LOCK:
        _ENABLED = bool(flag)
        lg = logging.getLogger(LOGGER_NAME)
        if _ENABLED:
            # Idempotent handler setup
            if not any(isinstance(h, logging.StreamHandler) for h in lg.handlers):
                h = logging.StreamHandler()
                fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
                h.setFormatter(logging.Formatter(fmt=fmt, datefmt="%H:%M:%S"))
                lg.addHandler(h)
            lg.setLevel(level)
        else:
            lg.setLevel(logging.WARNING)


def is_enabled() -> bool:
    return _ENABLED


def dbg(name: str) -> logging.Logger:
    """Return a child logger under the package namespace."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


if _ENABLED:
    enable(True)
