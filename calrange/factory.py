"""Factories create intervals on a fixed timeline.

A factory binds a timeline once so that it does not have to be passed on
every call:

    >>> ints = on_timeline(IntegerTimeline())
    >>> ints.between(1, 5).contains(3)
    True
    >>> ints.parse("1/5", IntegerFormat())
    SimpleInterval([1/5))

For `datetime` values there is a ready-made factory on the traditional
timeline, also reachable through the module level `between`, `since` and
`until` functions.
"""

import logging
import threading
from datetime import datetime
from typing import Generic, TypeVar

from .boundary import Boundary
from .exceptions import NullArgumentError
from .formats import PointParser
from .interval import SimpleInterval
from .pattern import parse
from .timeline import Timeline, traditional_timeline

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class IntervalFactory(Generic[T]):
    """Creates simple intervals on a single timeline."""

    __slots__ = ("_timeline",)

    def __init__(self, timeline: Timeline[T]) -> None:
        if timeline is None:
            raise NullArgumentError("Missing timeline")
        self._timeline = timeline

    @property
    def timeline(self) -> Timeline[T]:
        return self._timeline

    def between(self, start: T, end: T) -> SimpleInterval[T]:
        """Create a half-open interval with inclusive start and exclusive end.

        Raises:
            NullArgumentError: If start or end is missing
            InvalidRangeError: If start is after end
        """
        if start is None:
            raise NullArgumentError("Missing start")
        if end is None:
            raise NullArgumentError("Missing end")
        return SimpleInterval(start, end, self._timeline)

    def since(self, start: T) -> SimpleInterval[T]:
        """Create an interval from start (inclusive) into the infinite future."""
        if start is None:
            raise NullArgumentError("Missing start")
        return SimpleInterval(start, None, self._timeline)

    def until(self, end: T) -> SimpleInterval[T]:
        """Create an interval from the infinite past until end (exclusive)."""
        if end is None:
            raise NullArgumentError("Missing end")
        return SimpleInterval(None, end, self._timeline)

    def parse(
        self, text: str, parser: PointParser[T], pattern: str | None = None
    ) -> SimpleInterval[T]:
        """Parse text as interval on this timeline.

        Without a pattern the parser's own interval pattern is used, falling
        back to "{0}/{1}". The pattern may contain alternatives separated by
        "|".

        Raises:
            EmptyInputError: If the text is empty
            ParseError: If the text does not match the pattern
            InvalidRangeError: If the parsed start is after the parsed end
        """
        return parse(text, self._create, parser, pattern)

    def _create(self, start: Boundary[T], end: Boundary[T]) -> SimpleInterval[T]:
        return SimpleInterval(start.temporal, end.temporal, self._timeline)

    def __repr__(self) -> str:
        return f"IntervalFactory({self._timeline!r})"


def on_timeline(timeline: Timeline[T]) -> IntervalFactory[T]:
    """Return a new factory for intervals on the given timeline."""
    return IntervalFactory(timeline)


_TRADITIONAL_LOCK = threading.Lock()
_traditional_factory: IntervalFactory[datetime] | None = None


def on_traditional_timeline() -> IntervalFactory[datetime]:
    """Return the process-wide factory for `datetime` intervals."""
    global _traditional_factory
    if _traditional_factory is None:
        with _TRADITIONAL_LOCK:
            if _traditional_factory is None:
                _LOGGER.debug("Creating traditional interval factory")
                _traditional_factory = IntervalFactory(traditional_timeline())
    return _traditional_factory


def between(start: datetime, end: datetime) -> SimpleInterval[datetime]:
    """Create a half-open `datetime` interval on the traditional timeline."""
    return on_traditional_timeline().between(start, end)


def since(start: datetime) -> SimpleInterval[datetime]:
    """Create a `datetime` interval from start into the infinite future."""
    return on_traditional_timeline().since(start)


def until(end: datetime) -> SimpleInterval[datetime]:
    """Create a `datetime` interval from the infinite past until end."""
    return on_traditional_timeline().until(end)
