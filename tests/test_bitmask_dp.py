import math

import pytest

from algokit.bitmask_dp import booster_tour, shortest_tour


def test_booster_sample():
    assert booster_tour([(1, 1), (0, 1)], [(1, 0)]) == pytest.approx(2.5)


def test_booster_single_town():
    assert booster_tour([(3, 4)], []) == pytest.approx(2 * math.hypot(3, 4))


def test_booster_chest_never_hurts_optional():
    without = booster_tour([(5, 0), (0, 5)], [])
    with_chest = booster_tour([(5, 0), (0, 5)], [(100, 100)])
    assert with_chest == pytest.approx(without)


def test_booster_nothing_to_visit():
    assert booster_tour([], []) == 0.0


def test_shortest_tour_sample():
    assert shortest_tour((1, 1), [(2, 3), (5, 5), (9, 4), (6, 5)]) == 24


def test_shortest_tour_single_point():
    assert shortest_tour((0, 0), [(3, 7)]) == 2 * (3 + 7)


def test_shortest_tour_order_independent():
    points = [(2, 3), (5, 5), (9, 4), (6, 5)]
    assert shortest_tour((1, 1), points) == shortest_tour((1, 1), list(reversed(points)))


def test_shortest_tour_empty():
    assert shortest_tour((4, 4), []) == 0