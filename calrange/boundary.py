"""Boundaries describe one edge of an interval."""

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import InfiniteBoundaryError, NullArgumentError
from .util import INFINITE_FUTURE_GLYPH, INFINITE_PAST_GLYPH

T = TypeVar("T")


class BoundaryKind(enum.Enum):
    """The kind of an interval edge."""

    CLOSED = "closed"
    """Inclusive edge at a timepoint."""

    OPEN = "open"
    """Exclusive edge at a timepoint."""

    INFINITE_PAST = "infinite_past"
    """No lower bound."""

    INFINITE_FUTURE = "infinite_future"
    """No upper bound."""


_INFINITE_KINDS = (BoundaryKind.INFINITE_PAST, BoundaryKind.INFINITE_FUTURE)


@dataclass(frozen=True)
class Boundary(Generic[T]):
    """An immutable interval edge.

    Finite boundaries always carry a timepoint and infinite boundaries never
    do. Boundaries know nothing about ordering, comparisons are the business
    of the timeline an interval lives on.
    """

    kind: BoundaryKind
    temporal: T | None = None

    def __post_init__(self) -> None:
        if self.kind in _INFINITE_KINDS:
            if self.temporal is not None:
                raise InfiniteBoundaryError(
                    f"Infinite boundary must not carry a timepoint: {self.temporal!r}"
                )
        elif self.temporal is None:
            raise NullArgumentError(f"Missing timepoint for {self.kind.value} boundary")

    @classmethod
    def closed(cls, temporal: T) -> "Boundary[T]":
        """Create an inclusive boundary."""
        return cls(BoundaryKind.CLOSED, temporal)

    @classmethod
    def open(cls, temporal: T) -> "Boundary[T]":
        """Create an exclusive boundary."""
        return cls(BoundaryKind.OPEN, temporal)

    @classmethod
    def infinite_past(cls) -> "Boundary[T]":
        return cls(BoundaryKind.INFINITE_PAST)

    @classmethod
    def infinite_future(cls) -> "Boundary[T]":
        return cls(BoundaryKind.INFINITE_FUTURE)

    @property
    def is_infinite(self) -> bool:
        return self.kind in _INFINITE_KINDS

    @property
    def is_open(self) -> bool:
        return self.kind is BoundaryKind.OPEN

    @property
    def is_closed(self) -> bool:
        return self.kind is BoundaryKind.CLOSED

    @property
    def value(self) -> T:
        """Return the timepoint of a finite boundary.

        Raises:
            InfiniteBoundaryError: If the boundary is infinite
        """
        if self.temporal is None:
            raise InfiniteBoundaryError(f"Boundary {self} has no timepoint")
        return self.temporal

    def __str__(self) -> str:
        if self.kind is BoundaryKind.INFINITE_PAST:
            return INFINITE_PAST_GLYPH
        if self.kind is BoundaryKind.INFINITE_FUTURE:
            return INFINITE_FUTURE_GLYPH
        return f"{self.kind.value}({self.temporal})"
