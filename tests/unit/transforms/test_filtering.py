"""Unit tests for date range filtering.

Property checks run over seeded random series and ranges so failures are
reproducible.
"""

import random
from datetime import date, timedelta
from decimal import Decimal

import pytest

from stockview.models import DateRange, PricePoint
from stockview.transforms import filter_by_date_range

BASE_DAY = date(2024, 1, 1)


def make_point(day: date, close: str = "100") -> PricePoint:
    return PricePoint(
        date=day,
        open=Decimal("100"),
        high=Decimal("101"),
        low=Decimal("99"),
        close=Decimal(close),
        volume=1000,
    )


def random_series(rng: random.Random) -> list[PricePoint]:
    offsets = sorted(rng.sample(range(120), rng.randint(0, 40)))
    return [make_point(BASE_DAY + timedelta(days=o)) for o in offsets]


def random_range(rng: random.Random) -> DateRange:
    def bound() -> date | None:
        if rng.random() < 0.25:
            return None
        return BASE_DAY + timedelta(days=rng.randint(-10, 130))

    return DateRange(start=bound(), end=bound())


def is_subsequence(sub: list, seq: list) -> bool:
    it = iter(seq)
    return all(any(x is y for y in it) for x in sub)


SEEDS = list(range(60))


@pytest.mark.parametrize("seed", SEEDS)
def test_result_is_ordered_subsequence_matching_predicate(seed):
    rng = random.Random(seed)
    points = random_series(rng)
    r = random_range(rng)

    result = filter_by_date_range(points, r)

    assert is_subsequence(result, points)
    for p in result:
        assert r.start is None or p.date >= r.start
        assert r.end is None or p.date <= r.end
    # nothing matching was dropped
    expected = [p for p in points if r.contains(p.date)]
    assert result == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_filter_is_idempotent(seed):
    rng = random.Random(seed)
    points = random_series(rng)
    r = random_range(rng)

    once = filter_by_date_range(points, r)
    assert filter_by_date_range(once, r) == once


@pytest.mark.parametrize("seed", SEEDS)
def test_inverted_range_yields_empty(seed):
    rng = random.Random(seed)
    points = random_series(rng)
    start = BASE_DAY + timedelta(days=rng.randint(1, 120))
    end = start - timedelta(days=rng.randint(1, 30))

    assert filter_by_date_range(points, DateRange(start=start, end=end)) == []


@pytest.mark.parametrize("seed", SEEDS[:20])
def test_open_range_returns_everything(seed):
    rng = random.Random(seed)
    points = random_series(rng)

    assert filter_by_date_range(points, DateRange()) == points
    assert filter_by_date_range(points, None) == points


def test_does_not_mutate_input():
    points = [make_point(BASE_DAY + timedelta(days=i)) for i in range(5)]
    snapshot = list(points)

    result = filter_by_date_range(points, DateRange(start=BASE_DAY + timedelta(days=2)))

    assert points == snapshot
    assert result is not points


def test_open_range_returns_copy():
    points = [make_point(BASE_DAY)]
    result = filter_by_date_range(points, DateRange())
    assert result == points
    assert result is not points


def test_empty_input():
    assert filter_by_date_range([], DateRange(start=BASE_DAY, end=BASE_DAY)) == []


def test_middle_point_selected():
    points = [
        make_point(date(2024, 1, 5), "10"),
        make_point(date(2024, 1, 10), "20"),
        make_point(date(2024, 1, 15), "30"),
    ]

    result = filter_by_date_range(
        points, DateRange(start=date(2024, 1, 6), end=date(2024, 1, 12))
    )

    assert result == [points[1]]


def test_single_day_range():
    points = [make_point(date(2024, 1, d)) for d in (1, 2, 3)]
    result = filter_by_date_range(points, DateRange(start=date(2024, 1, 2), end=date(2024, 1, 2)))
    assert [p.date for p in result] == [date(2024, 1, 2)]
