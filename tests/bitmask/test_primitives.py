import pytest

from src.bitmask import Bitmask, BitmaskError, BitmaskIndexError, BitmaskValueError


def test_data_length_rounds_up_to_bytes(size):
    w, h = size
    mask = Bitmask(w, h)
    assert len(mask.data) == (w * h + 7) // 8


def test_index_and_shift_is_row_major_lsb_first():
    mask = Bitmask(10, 4)
    assert mask.index_and_shift(0, 0) == (0, 0)
    assert mask.index_and_shift(7, 0) == (0, 7)
    assert mask.index_and_shift(8, 0) == (1, 0)
    assert mask.index_and_shift(3, 2) == (2, 7)  # pos 23


def test_set_writes_expected_bit():
    mask = Bitmask(10, 4)
    mask.set(3, 2, True)
    assert mask.data[2] == 0b1000_0000
    mask.set(0, 1, True)  # pos 10
    assert mask.data[1] == 0b0000_0100


def test_set_get_round_trip_every_cell(size):
    w, h = size
    mask = Bitmask(w, h)
    mask.reset()
    for y in range(h):
        for x in range(w):
            mask.set(x, y, True)
            assert mask.get(x, y)
    assert all(mask.get(x, y) for y in range(h) for x in range(w))
    for y in range(h):
        for x in range(w):
            mask.set(x, y, False)
            assert not mask.get(x, y)
    assert mask.count() == 0


def test_set_leaves_other_bits_alone():
    mask = Bitmask(9, 9)
    mask.reset()
    mask.set(2, 3, True)
    mask.set(4, 4, True)
    mask.set(2, 3, False)
    assert mask.get(4, 4)
    assert mask.count() == 1


def test_set_always_marks_dirty():
    mask = Bitmask(4, 4)
    mask.get_bounds()
    assert not mask.dirty
    mask.set(0, 0, False)  # value unchanged
    assert mask.dirty


def test_unchecked_access_aliases_neighbouring_row():
    mask = Bitmask(5, 3)
    mask.reset()
    mask.set(5, 0, True)
    assert mask.get(0, 1)
    mask.set(-1, 2, True)
    assert mask.get(4, 1)


def test_unchecked_access_past_buffer_raises_buffer_error():
    mask = Bitmask(8, 1)
    with pytest.raises(IndexError):
        mask.get(0, 2)


def test_checked_accessors_reject_out_of_grid():
    mask = Bitmask(5, 3)
    mask.reset()
    with pytest.raises(BitmaskIndexError) as excinfo:
        mask.get_checked(5, 0)
    assert (excinfo.value.x, excinfo.value.y) == (5, 0)
    with pytest.raises(IndexError):
        mask.set_checked(-1, 0, True)
    assert mask.count() == 0
    mask.set_checked(4, 2, True)
    assert mask.get_checked(4, 2)


def test_contains():
    mask = Bitmask(5, 3)
    assert (0, 0) in mask
    assert (4, 2) in mask
    assert (5, 2) not in mask
    assert (0, -1) not in mask


def test_negative_size_rejected():
    with pytest.raises(BitmaskError):
        Bitmask(-1, 4)
    with pytest.raises(ValueError) as excinfo:
        Bitmask(4, -1)
    assert isinstance(excinfo.value, BitmaskValueError)


def test_set_active_is_plain_flag():
    mask = Bitmask(4, 4)
    assert not mask.active
    mask.get_bounds()
    mask.set_active(True)
    assert mask.active
    assert not mask.dirty
    mask.set_active(True)
    assert mask.active
    mask.set_active(False)
    assert not mask.active


def test_negative_byte_index_wraps_to_buffer_end():
    mask = Bitmask(5, 3)  # 15 bits, bit 7 of the last byte is padding
    mask.reset()
    mask.data[-1] |= 0b1000_0000
    assert mask.index_and_shift(-1, 0) == (-1, 7)
    assert mask.get(-1, 0)
    assert mask.count() == 0
