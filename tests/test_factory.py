"""Tests for interval factories."""

import threading
from datetime import date, datetime, timezone

import pytest

from calrange import (
    DateTimeline,
    IntegerFormat,
    IntegerTimeline,
    IntervalFactory,
    InvalidRangeError,
    IsoDateFormat,
    NullArgumentError,
    between,
    on_timeline,
    on_traditional_timeline,
    since,
    traditional_timeline,
    until,
)


def test_factory_requires_timeline() -> None:
    with pytest.raises(NullArgumentError, match="timeline"):
        IntervalFactory(None)


def test_factory_keeps_timeline() -> None:
    timeline = IntegerTimeline()

    assert on_timeline(timeline).timeline is timeline


def test_between(ints: IntervalFactory[int]) -> None:
    interval = ints.between(1, 5)

    assert interval.is_finite()
    assert interval.start.value == 1
    assert interval.end.value == 5
    assert interval.timeline is ints.timeline


@pytest.mark.parametrize(("start", "end"), [(None, 5), (1, None), (None, None)])
def test_between_requires_both_values(
    ints: IntervalFactory[int], start: int | None, end: int | None
) -> None:
    with pytest.raises(NullArgumentError, match="Missing"):
        ints.between(start, end)


def test_between_rejects_start_after_end(ints: IntervalFactory[int]) -> None:
    with pytest.raises(InvalidRangeError):
        ints.between(5, 1)


def test_since_and_until(ints: IntervalFactory[int]) -> None:
    assert ints.since(10).start.value == 10
    assert ints.since(10).end.is_infinite
    assert ints.until(10).start.is_infinite
    assert ints.until(10).end.value == 10

    with pytest.raises(NullArgumentError, match="start"):
        ints.since(None)
    with pytest.raises(NullArgumentError, match="end"):
        ints.until(None)


def test_parse(ints: IntervalFactory[int]) -> None:
    assert ints.parse("1/5", IntegerFormat()) == ints.between(1, 5)
    assert ints.parse("-∞/5", IntegerFormat()) == ints.until(5)
    assert ints.parse("1/+∞", IntegerFormat()) == ints.since(1)
    worded = ints.parse("from 1 to 5", IntegerFormat(), "from {0} to {1}")
    assert worded == ints.between(1, 5)


def test_parse_rejects_start_after_end(ints: IntervalFactory[int]) -> None:
    with pytest.raises(InvalidRangeError):
        ints.parse("5/1", IntegerFormat())


def test_parse_dates() -> None:
    dates = on_timeline(DateTimeline())

    interval = dates.parse("2024-01-01/2024-02-01", IsoDateFormat())

    assert interval == dates.between(date(2024, 1, 1), date(2024, 2, 1))
    assert interval.contains(date(2024, 1, 31))


def test_traditional_factory() -> None:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    end = datetime(2024, 1, 2, tzinfo=timezone.utc)

    assert on_traditional_timeline() is on_traditional_timeline()
    assert on_traditional_timeline().timeline is traditional_timeline()
    assert between(start, end) == on_traditional_timeline().between(start, end)
    assert since(start).end.is_infinite
    assert until(end).start.is_infinite
    assert since(start).abuts(until(start))


def test_traditional_factory_concurrent_first_use() -> None:
    results: list[IntervalFactory[datetime]] = []

    def fetch() -> None:
        results.append(on_traditional_timeline())

    threads = [threading.Thread(target=fetch) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert {id(result) for result in results} == {id(on_traditional_timeline())}
