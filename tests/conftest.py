"""Shared fixtures for calrange tests."""

import pytest
from typing_extensions import override

from calrange import (
    Boundary,
    ChronoInterval,
    IntegerTimeline,
    IntervalFactory,
    Timeline,
    on_timeline,
)


class BoundaryInterval(ChronoInterval[int]):
    """Interval with arbitrary boundaries, including open starts and closed ends."""

    def __init__(
        self, start: Boundary[int], end: Boundary[int], timeline: Timeline[int]
    ) -> None:
        self._start = start
        self._end = end
        self._timeline = timeline

    @property
    @override
    def start(self) -> Boundary[int]:
        return self._start

    @property
    @override
    def end(self) -> Boundary[int]:
        return self._end

    @property
    @override
    def timeline(self) -> Timeline[int]:
        return self._timeline


@pytest.fixture
def ints() -> IntervalFactory[int]:
    """Factory for intervals on an unbounded integer timeline."""
    return on_timeline(IntegerTimeline())


@pytest.fixture
def bounded() -> IntervalFactory[int]:
    """Factory for intervals on the integers 0 to 100."""
    return on_timeline(IntegerTimeline(min_value=0, max_value=100))


@pytest.fixture
def make_interval():
    """Build intervals from raw boundaries, by default on unbounded integers."""

    def _make(
        start: Boundary[int],
        end: Boundary[int],
        timeline: Timeline[int] | None = None,
    ) -> ChronoInterval[int]:
        return BoundaryInterval(start, end, timeline or IntegerTimeline())

    return _make
