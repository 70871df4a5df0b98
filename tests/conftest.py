import logging

import pytest

from src.bitmask import Bitmask
from src.bitmask import debug


def pytest_addoption(parser):
    parser.addoption(
        "--bitmask-debug",
        action="store_true",
        help="Stream bitmask debug logging during tests",
    )


def pytest_configure(config):
    if config.getoption("--bitmask-debug"):
        debug.enable(True, level=logging.DEBUG)


# ---------------------------------------------------------------------------
# Mask fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mask32():
    """A cleared 32x32 mask."""
    mask = Bitmask(32, 32)
    mask.reset()
    return mask


@pytest.fixture
def full32():
    """A 32x32 mask with every bit set."""
    mask = Bitmask(32, 32)
    mask.reset(True)
    return mask


@pytest.fixture(params=[(1, 1), (3, 5), (8, 8), (13, 7), (32, 2)])
def size(request):
    """Grid sizes with and without padding bits in the last byte."""
    return request.param
