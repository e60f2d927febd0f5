"""Tests for the stock timelines."""

import threading
from datetime import date, datetime, timedelta, timezone

import pytest

from calrange import (
    DateTimeline,
    DateTimeTimeline,
    IntegerTimeline,
    traditional_timeline,
)


def test_integer_timeline_orders_and_steps() -> None:
    timeline = IntegerTimeline()

    assert timeline.compare(1, 2) < 0
    assert timeline.compare(2, 1) > 0
    assert timeline.compare(7, 7) == 0
    assert timeline.step_forward(1) == 2
    assert timeline.step_backwards(1) == 0


def test_bounded_integer_timeline_exhausts() -> None:
    timeline = IntegerTimeline(min_value=-5, max_value=5)

    assert timeline.step_forward(4) == 5
    assert timeline.step_forward(5) is None
    assert timeline.step_backwards(-4) == -5
    assert timeline.step_backwards(-5) is None


def test_bounded_integer_timeline_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError, match="min_value"):
        IntegerTimeline(min_value=3, max_value=2)


def test_timelines_compare_structurally() -> None:
    assert IntegerTimeline() == IntegerTimeline()
    assert IntegerTimeline(max_value=10) != IntegerTimeline()
    assert DateTimeline() == DateTimeline()


def test_date_timeline_steps_days() -> None:
    timeline = DateTimeline()

    assert timeline.step_forward(date(2024, 2, 28)) == date(2024, 2, 29)
    assert timeline.step_backwards(date(2024, 3, 1)) == date(2024, 2, 29)
    assert timeline.compare(date(2024, 1, 1), date(2023, 12, 31)) > 0
    assert timeline.step_forward(date.max) is None
    assert timeline.step_backwards(date.min) is None


def test_datetime_timeline_steps_microseconds() -> None:
    timeline = DateTimeTimeline()
    moment = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    assert timeline.step_forward(moment) == moment + timedelta(microseconds=1)
    assert timeline.step_backwards(moment) == moment - timedelta(microseconds=1)
    assert timeline.compare(moment, moment) == 0
    assert timeline.step_forward(datetime.max) is None
    assert timeline.step_backwards(datetime.min) is None


@pytest.mark.parametrize(
    ("timeline", "value"),
    [
        (IntegerTimeline(), 42),
        (DateTimeline(), date(2000, 1, 1)),
        (DateTimeTimeline(), datetime(2000, 1, 1, 0, 0, 0, 999999)),
    ],
)
def test_steps_are_mutual_inverses(timeline, value) -> None:
    assert timeline.step_backwards(timeline.step_forward(value)) == value
    assert timeline.step_forward(timeline.step_backwards(value)) == value


def test_traditional_timeline_is_a_singleton() -> None:
    results: list[DateTimeTimeline] = []

    def fetch() -> None:
        results.append(traditional_timeline())

    threads = [threading.Thread(target=fetch) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(result is traditional_timeline() for result in results)
