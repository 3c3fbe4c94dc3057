import pytest

from minic_ir.indexset import IndexSet


def make(*members, count=0):
    s = IndexSet()
    if count:
        s.init(count, False)
    for m in members:
        s.set(m)
    return s


def test_new_set_is_empty():
    s = IndexSet()
    assert s.is_empty()
    assert s.count == 0
    assert str(s) == ""


def test_init_true_fills_prefix():
    s = IndexSet()
    s.init(4, True)
    assert list(s) == list(range(4))
    assert s.count == 4


def test_init_false_clears():
    s = IndexSet()
    s.init(5, True)
    s.init(3, False)
    assert s.is_empty()
    assert s.count == 3


def test_init_range():
    s = IndexSet()
    s.init_range(2, 5, True)
    assert list(s) == [2, 3, 4]
    s.init_range(3, 4, False)
    assert list(s) == [2, 4]


def test_set_get_reset():
    s = IndexSet()
    s.set(7)
    assert s.get(7)
    assert 7 in s
    s.reset(7)
    assert not s.get(7)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        IndexSet().set(-1)


def test_binary_operations():
    a = make(1, 2, 3, count=4)
    b = make(2, 3, 5, count=8)
    assert list(a & b) == [2, 3]
    assert list(a | b) == [1, 2, 3, 5]
    assert list(a - b) == [1]
    assert list(a ^ b) == [1, 5]
    assert (a & b).count == b.count
    assert (a | b).count == b.count


def test_invert_within_count():
    a = make(0, 2, count=4)
    inv = ~a
    assert list(inv) == [1, 3]
    assert inv.count == 4
    assert list(~inv) == list(a)


def test_equality_ignores_count():
    assert make(1, 2, count=3) == make(1, 2, count=10)
    assert not (make(1) == make(2))


def test_min_max():
    s = make(4, 9, 1)
    assert s.min() == 1
    assert s.max() == 9


def test_min_max_empty_raise():
    with pytest.raises(ValueError):
        IndexSet().max()
    with pytest.raises(ValueError):
        IndexSet().min()


def test_str_format():
    assert str(make(3, 1)) == "1 3 "


def test_clear():
    s = make(1, 2)
    s.clear()
    assert s.is_empty()
    assert len(s) == 0