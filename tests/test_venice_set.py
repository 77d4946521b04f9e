import pytest

from algokit.venice_set import VeniceSet


def test_min_tracks_inserted_values():
    values = [7, 3, 9, 3]
    s = VeniceSet()
    for v in values:
        s.add(v)
    assert len(s) == len(values)
    assert s.min() == min(values)


def test_update_all_lowers_every_element():
    values = [10, 4, 6]
    delta = 5
    s = VeniceSet()
    for v in values:
        s.add(v)
    s.update_all(delta)
    assert s.min() == min(values) - delta
    assert (min(values) - delta) in s


def test_remove_uses_current_values():
    s = VeniceSet()
    s.add(5)
    s.update_all(2)
    s.remove(5 - 2)
    assert len(s) == 0
    with pytest.raises(ValueError):
        s.min()


def test_remove_one_duplicate_keeps_other():
    s = VeniceSet()
    s.add(2)
    s.add(2)
    s.add(8)
    s.remove(2)
    assert s.min() == 2
    s.remove(2)
    assert s.min() == 8


def test_remove_missing_raises():
    s = VeniceSet()
    s.add(1)
    with pytest.raises(KeyError):
        s.remove(2)