"""Half-open intervals on a timeline and the relations between them."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from typing_extensions import override

from .boundary import Boundary
from .exceptions import InvalidRangeError, NullArgumentError
from .formats import PointPrinter
from .pattern import render
from .timeline import Timeline
from .util import INFINITE_FUTURE_GLYPH, INFINITE_PAST_GLYPH

T = TypeVar("T")


class ChronoInterval(ABC, Generic[T]):
    """The relational contract shared by all interval types.

    Subclasses only supply their boundaries and timeline. Every relation is
    evaluated here against those, so open and closed boundaries of any
    interval type are handled the same way: an open start is converted to its
    inclusive equivalent and a closed end to its exclusive equivalent by a
    single step on the timeline. A step which runs off the end of the domain
    is a normal outcome, not an error.
    """

    @property
    @abstractmethod
    def start(self) -> Boundary[T]:
        """Return the lower boundary."""

    @property
    @abstractmethod
    def end(self) -> Boundary[T]:
        """Return the upper boundary."""

    @property
    @abstractmethod
    def timeline(self) -> Timeline[T]:
        """Return the timeline which orders the boundaries."""

    def is_finite(self) -> bool:
        """Return True if neither boundary is infinite."""
        return not (self.start.is_infinite or self.end.is_infinite)

    def is_empty(self) -> bool:
        """Return True if this finite interval contains no timepoint at all."""
        if not self.is_finite():
            return False
        return self.timeline.compare(self.start.value, self.end.value) == 0

    def contains(self, item: "T | ChronoInterval[T]") -> bool:
        """Return True if the timepoint or interval lies within this interval."""
        if isinstance(item, ChronoInterval):
            return self._contains_interval(item)
        return self._contains_point(item)

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def _contains_point(self, temporal: T | None) -> bool:
        if temporal is None:
            raise NullArgumentError("Missing timepoint")
        timeline = self.timeline
        start, end = self.start, self.end
        if not start.is_infinite and timeline.compare(temporal, start.value) < 0:
            return False
        if not end.is_infinite:
            return timeline.compare(end.value, temporal) > 0
        return True

    def _contains_interval(self, other: "ChronoInterval[T]") -> bool:
        if not other.is_finite():
            return False

        timeline = self.timeline
        start_a = self.start.temporal
        start_b = other.start.temporal
        if other.start.is_open:
            start_b = timeline.step_forward(other.start.value)

        if start_b is None:
            return False
        if start_a is not None and timeline.compare(start_a, start_b) > 0:
            return False

        end_a = self.end.temporal
        if end_a is None:
            return True

        end_b = other.end.value
        if other.end.is_open and timeline.compare(start_b, end_b) == 0:
            # A single instant is contained if it lies before our end
            return timeline.compare(start_b, end_a) < 0

        if other.end.is_closed:
            end_b = timeline.step_forward(end_b)
            if end_b is None:
                return False
        return timeline.compare(end_a, end_b) >= 0

    def is_after(self, item: "T | ChronoInterval[T]") -> bool:
        """Return True if this interval starts after the timepoint or interval."""
        if isinstance(item, ChronoInterval):
            return item.is_before(self)
        if item is None:
            raise NullArgumentError("Missing timepoint")
        if self.start.is_infinite:
            return False
        return self.timeline.compare(self.start.value, item) > 0

    def is_before(self, item: "T | ChronoInterval[T]") -> bool:
        """Return True if this interval ends before the timepoint or interval."""
        if isinstance(item, ChronoInterval):
            return self._is_before_interval(item)
        if item is None:
            raise NullArgumentError("Missing timepoint")
        if self.end.is_infinite:
            return False
        return self.timeline.compare(self.end.value, item) <= 0

    def _is_before_interval(self, other: "ChronoInterval[T]") -> bool:
        if other.start.is_infinite or self.end.is_infinite:
            return False

        start_b: T | None = other.start.value
        if other.start.is_open:
            start_b = self.timeline.step_forward(other.start.value)
        if start_b is None:
            # The other interval starts beyond the end of the domain
            return True
        return self.timeline.compare(self.end.value, start_b) <= 0

    def abuts(self, other: "ChronoInterval[T]") -> bool:
        """Return True if exactly one end of this interval meets the other one.

        Both intervals must be non-empty and must neither overlap nor leave a
        gap. Two intervals which are infinite on the same side never abut
        since there is no finite point where they could touch.
        """
        if self.is_empty() or other.is_empty():
            return False

        timeline = self.timeline
        start_a = self.start.temporal
        start_b = other.start.temporal
        if start_b is not None and other.start.is_open:
            start_b = timeline.step_forward(start_b)

        end_a = self.end.temporal
        end_b = other.end.temporal
        if end_b is not None and other.end.is_closed:
            end_b = timeline.step_forward(end_b)

        if end_a is None or start_b is None:
            return (
                start_a is not None
                and end_b is not None
                and timeline.compare(start_a, end_b) == 0
            )
        if start_a is None or end_b is None:
            return timeline.compare(end_a, start_b) == 0

        return (timeline.compare(end_a, start_b) == 0) ^ (
            timeline.compare(start_a, end_b) == 0
        )

    def intersects(self, other: "ChronoInterval[T]") -> bool:
        """Return True if both intervals share at least one timepoint."""
        if self.is_empty() or other.is_empty():
            return False
        return not (self.is_before(other) or self.is_after(other))


class SimpleInterval(ChronoInterval[T]):
    """A half-open interval with inclusive start and exclusive end.

    Infinite boundaries are the only exception to the half-open state. The
    interval only borrows its timeline, many intervals share the same one.

    Example:
        >>> ints = on_timeline(IntegerTimeline())
        >>> interval = ints.between(1, 5)
        >>> 3 in interval, 5 in interval
        (True, False)
    """

    __slots__ = ("_start", "_end", "_timeline")

    def __init__(self, start: T | None, end: T | None, timeline: Timeline[T]) -> None:
        """Create an interval, None meaning an infinite start or end.

        Raises:
            NullArgumentError: If the timeline is missing
            InvalidRangeError: If the start is after the end
        """
        if timeline is None:
            raise NullArgumentError("Missing timeline")
        if start is not None and end is not None and timeline.compare(start, end) > 0:
            raise InvalidRangeError(f"Start after end: {start}/{end}")
        self._start: Boundary[T] = (
            Boundary.infinite_past() if start is None else Boundary.closed(start)
        )
        self._end: Boundary[T] = (
            Boundary.infinite_future() if end is None else Boundary.open(end)
        )
        self._timeline = timeline

    @classmethod
    def _of_boundaries(
        cls, start: Boundary[T], end: Boundary[T], timeline: Timeline[T]
    ) -> "SimpleInterval[T]":
        """Create an interval from boundaries without any validation.

        Callers must pass a closed or infinite start and an open or infinite
        end which is not before the start.
        """
        interval = cls.__new__(cls)
        interval._start = start
        interval._end = end
        interval._timeline = timeline
        return interval

    @property
    @override
    def start(self) -> Boundary[T]:
        return self._start

    @property
    @override
    def end(self) -> Boundary[T]:
        return self._end

    @property
    @override
    def timeline(self) -> Timeline[T]:
        return self._timeline

    def _inclusive_start(self, boundary: Boundary[T]) -> Boundary[T] | None:
        if not boundary.is_open:
            return boundary
        stepped = self._timeline.step_forward(boundary.value)
        return None if stepped is None else Boundary.closed(stepped)

    def _exclusive_end(self, boundary: Boundary[T]) -> Boundary[T]:
        if not boundary.is_closed:
            return boundary
        stepped = self._timeline.step_forward(boundary.value)
        return Boundary.infinite_future() if stepped is None else Boundary.open(stepped)

    def find_intersection(
        self, other: ChronoInterval[T]
    ) -> "SimpleInterval[T] | None":
        """Return the common part of both intervals or None if there is none."""
        if self.is_empty() or other.is_empty():
            return None

        timeline = self._timeline

        start = self._inclusive_start(other.start)
        if start is None:
            return None
        if start.is_infinite:
            start = self._start
        elif not self._start.is_infinite:
            if timeline.compare(self._start.value, start.value) >= 0:
                start = self._start

        end = self._exclusive_end(other.end)
        if end.is_infinite:
            end = self._end
        elif not self._end.is_infinite:
            if timeline.compare(self._end.value, end.value) < 0:
                end = self._end

        if (
            not start.is_infinite
            and not end.is_infinite
            and timeline.compare(start.value, end.value) > 0
        ):
            return None

        intersection = SimpleInterval._of_boundaries(start, end, timeline)
        return None if intersection.is_empty() else intersection

    def print(self, printer: PointPrinter[T], pattern: str | None = None) -> str:
        """Render this interval as text using an interval pattern.

        Without a pattern the printer's own interval pattern is used, falling
        back to "{0}/{1}".
        """
        return render(self, printer, pattern)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SimpleInterval):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and self._timeline == other._timeline
        )

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"SimpleInterval({self})"

    def __str__(self) -> str:
        """Technical notation for debugging such as [1/5) or (-∞/5)."""
        if self._start.is_infinite:
            text = f"({INFINITE_PAST_GLYPH}/"
        else:
            text = f"[{self._start.value}/"
        if self._end.is_infinite:
            return f"{text}{INFINITE_FUTURE_GLYPH})"
        return f"{text}{self._end.value})"
