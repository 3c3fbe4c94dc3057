import pytest

from minic_ir.bitmap import BitMap


def test_new_bitmap_is_clear():
    bm = BitMap(16)
    assert not any(bm.test(i) for i in range(16))


def test_set_and_test():
    bm = BitMap(20)
    bm.set(3)
    bm.set(17)
    assert bm.test(3)
    assert bm.test(17)
    assert [i for i in range(20) if bm.test(i)] == [3, 17]


def test_reset_clears_only_that_bit():
    bm = BitMap(16)
    for i in (0, 1, 2, 9):
        bm.set(i)
    bm.reset(1)
    assert [i for i in range(16) if bm.test(i)] == [0, 2, 9]


def test_set_twice_is_idempotent():
    bm = BitMap(8)
    bm.set(5)
    bm.set(5)
    bm.reset(5)
    assert not bm.test(5)


def test_capacity_rounds_up_to_whole_bytes():
    bm = BitMap(10)
    assert len(bm) == (10 // 8 + 1) * 8
    bm.set(len(bm) - 1)
    assert bm.test(len(bm) - 1)


def test_zero_capacity_still_holds_one_byte():
    bm = BitMap(0)
    bm.set(7)
    assert bm.test(7)


def test_out_of_range_raises():
    bm = BitMap(8)
    with pytest.raises(IndexError):
        bm.set(len(bm))
    with pytest.raises(IndexError):
        bm.test(-1)
    with pytest.raises(IndexError):
        bm.reset(1000)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BitMap(-1)