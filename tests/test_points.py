"""Tests for deterministic point selection."""

import pytest
from core import rng
from core.errors import InsufficientPoints
from core.points import Point, select_points


def test_point_unpacks():
    x, y = Point(3, 9)
    assert (x, y) == (3, 9)


def test_point_is_frozen():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


def test_selects_lowest_x_first():
    pool = [Point(5, 50), Point(1, 10), Point(3, 30), Point(2, 20)]
    assert select_points(pool, 3) == [Point(1, 10), Point(2, 20), Point(3, 30)]


def test_first_seen_wins_among_duplicates():
    pool = [Point(2, 200), Point(1, 10), Point(2, 222), Point(3, 30)]
    chosen = select_points(pool, 3)
    assert chosen == [Point(1, 10), Point(2, 200), Point(3, 30)]


def test_deterministic():
    rng.set_seed(3)
    pool = [Point(rng.randint(1, 20), rng.randbelow(1000)) for _ in range(40)]
    assert select_points(pool, 5) == select_points(pool, 5)
    assert select_points(list(pool), 5) == select_points(pool, 5)


def test_all_selected_x_distinct():
    pool = [Point(x % 4 + 1, x) for x in range(20)]
    chosen = select_points(pool, 4)
    assert [p.x for p in chosen] == [1, 2, 3, 4]
    assert [p.y for p in chosen] == [0, 1, 2, 3]


def test_exact_k_pool():
    pool = [Point(1, 1)]
    assert select_points(pool, 1) == [Point(1, 1)]


def test_insufficient_distinct_x():
    pool = [Point(1, 1), Point(1, 2), Point(2, 3)]
    with pytest.raises(InsufficientPoints) as exc:
        select_points(pool, 3)
    assert exc.value.required == 3
    assert exc.value.available == 2


def test_empty_pool():
    with pytest.raises(InsufficientPoints):
        select_points([], 1)


def test_k_must_be_positive():
    with pytest.raises(ValueError):
        select_points([Point(1, 1)], 0)


def test_zero_x_in_pool_is_selected_first():
    pool = [Point(2, 2), Point(0, 5), Point(1, 1)]
    assert select_points(pool, 2) == [Point(0, 5), Point(1, 1)]
