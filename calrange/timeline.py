"""Timelines define the order and discrete stepping of timepoints.

A timeline is the only place which knows how values of some type are ordered.
Intervals never compare their boundaries directly but always ask their
timeline, so any type can be used as a timepoint as long as a timeline can be
written for it.
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Generic, TypeVar

from typing_extensions import override

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_ONE_DAY = timedelta(days=1)
_ONE_MICROSECOND = timedelta(microseconds=1)


class Timeline(ABC, Generic[T]):
    """A discrete total order over timepoints of type T.

    Implementations must be pure: the same arguments always yield the same
    result and no internal state is ever mutated. This allows a single
    timeline to be shared by any number of intervals and threads.
    """

    @abstractmethod
    def compare(self, first: T, second: T) -> int:
        """Return a negative, zero or positive number as first is before, equal
        to or after second."""

    @abstractmethod
    def step_forward(self, timepoint: T) -> T | None:
        """Return the immediate successor, or None at the end of the domain."""

    @abstractmethod
    def step_backwards(self, timepoint: T) -> T | None:
        """Return the immediate predecessor, or None at the start of the domain."""


def _sign(first: date, second: date) -> int:
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


@dataclass(frozen=True)
class IntegerTimeline(Timeline[int]):
    """Integers with unit steps, optionally limited to [min_value, max_value]."""

    min_value: int | None = None
    max_value: int | None = None

    def __post_init__(self) -> None:
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise ValueError(
                f"Timeline min_value ({self.min_value}) must be <= "
                f"max_value ({self.max_value})"
            )

    @override
    def compare(self, first: int, second: int) -> int:
        return (first > second) - (first < second)

    @override
    def step_forward(self, timepoint: int) -> int | None:
        if self.max_value is not None and timepoint >= self.max_value:
            return None
        return timepoint + 1

    @override
    def step_backwards(self, timepoint: int) -> int | None:
        if self.min_value is not None and timepoint <= self.min_value:
            return None
        return timepoint - 1


@dataclass(frozen=True)
class DateTimeline(Timeline[date]):
    """Calendar dates stepping one day at a time."""

    @override
    def compare(self, first: date, second: date) -> int:
        return _sign(first, second)

    @override
    def step_forward(self, timepoint: date) -> date | None:
        if timepoint == date.max:
            return None
        return timepoint + _ONE_DAY

    @override
    def step_backwards(self, timepoint: date) -> date | None:
        if timepoint == date.min:
            return None
        return timepoint - _ONE_DAY


@dataclass(frozen=True)
class DateTimeTimeline(Timeline[datetime]):
    """Datetimes stepping one microsecond, the finest resolution of the type.

    Naive and timezone-aware values must not be mixed on the same intervals
    since Python refuses to order them against each other.
    """

    @override
    def compare(self, first: datetime, second: datetime) -> int:
        return _sign(first, second)

    @override
    def step_forward(self, timepoint: datetime) -> datetime | None:
        try:
            return timepoint + _ONE_MICROSECOND
        except OverflowError:
            return None

    @override
    def step_backwards(self, timepoint: datetime) -> datetime | None:
        try:
            return timepoint - _ONE_MICROSECOND
        except OverflowError:
            return None


_TRADITIONAL_LOCK = threading.Lock()
_traditional: DateTimeTimeline | None = None


def traditional_timeline() -> DateTimeTimeline:
    """Return the process-wide timeline for `datetime` values.

    The timeline is created on first use and then lives for the rest of the
    process.
    """
    global _traditional
    if _traditional is None:
        with _TRADITIONAL_LOCK:
            if _traditional is None:
                _LOGGER.debug("Creating traditional datetime timeline")
                _traditional = DateTimeTimeline()
    return _traditional
