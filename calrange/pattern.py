"""Rendering and parsing of intervals with interval patterns.

An interval pattern is a template like "{0}/{1}" or "from {0} to {1}" where
`{0}` stands for the formatted start and `{1}` for the formatted end. All
other characters are literals. Infinite boundaries are written as "-∞" and
"+∞" instead of a formatted timepoint.

For parsing, a pattern may list several alternatives separated by "|", for
example "{0}/{1}|{0} - {1}". The first alternative matching the whole text
wins.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from .boundary import Boundary
from .exceptions import EmptyInputError, NullArgumentError, ParseError, RenderError
from .formats import PointParser, PointPrinter
from .util import (
    DEFAULT_INTERVAL_PATTERN,
    END_PLACEHOLDER,
    INFINITE_FUTURE_GLYPH,
    INFINITE_PAST_GLYPH,
    OR_SEPARATOR,
    START_PLACEHOLDER,
)

if TYPE_CHECKING:
    from .interval import ChronoInterval

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
IntervalT = TypeVar("IntervalT")

IntervalBuilder = Callable[[Boundary[T], Boundary[T]], IntervalT]


def interval_pattern(point_format: Any) -> str:
    """Return the interval pattern a point format prefers.

    Formats carrying locale knowledge expose it as an `interval_pattern`
    attribute, all others get "{0}/{1}".
    """
    return getattr(point_format, "interval_pattern", None) or DEFAULT_INTERVAL_PATTERN


def render(
    interval: "ChronoInterval[T]",
    printer: PointPrinter[T],
    pattern: str | None = None,
) -> str:
    """Render an interval as text.

    Raises:
        NullArgumentError: If the printer is missing
        RenderError: If the printer fails on one of the timepoints
    """
    if printer is None:
        raise NullArgumentError("Missing printer")
    if pattern is None:
        pattern = interval_pattern(printer)

    parts: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        if pattern.startswith(START_PLACEHOLDER, i):
            parts.append(_render_boundary(interval.start, printer, INFINITE_PAST_GLYPH))
            i += len(START_PLACEHOLDER)
        elif pattern.startswith(END_PLACEHOLDER, i):
            parts.append(_render_boundary(interval.end, printer, INFINITE_FUTURE_GLYPH))
            i += len(END_PLACEHOLDER)
        else:
            parts.append(pattern[i])
            i += 1
    return "".join(parts)


def _render_boundary(
    boundary: Boundary[T], printer: PointPrinter[T], glyph: str
) -> str:
    if boundary.is_infinite:
        return glyph
    try:
        return printer.format(boundary.value)
    except Exception as err:
        raise RenderError(
            f"Failed to print timepoint {boundary.value!r}: {err}"
        ) from err


def parse(
    text: str,
    builder: IntervalBuilder[T, IntervalT],
    parser: PointParser[T],
    pattern: str | None = None,
) -> IntervalT:
    """Parse text as an interval.

    The builder receives the start boundary (closed or infinite past) and the
    end boundary (open or infinite future) and creates the interval.

    Raises:
        NullArgumentError: If the parser is missing
        EmptyInputError: If the text is empty
        ParseError: If the text does not match the pattern
    """
    if parser is None:
        raise NullArgumentError("Missing parser")
    if not text:
        raise EmptyInputError()
    if pattern is None:
        pattern = interval_pattern(parser)

    failures: list[ParseError] = []
    for alternative in pattern.split(OR_SEPARATOR):
        try:
            start, end = _parse_boundaries(text, parser, alternative)
        except ParseError as err:
            _LOGGER.debug("Pattern %r does not match %r: %s", alternative, text, err)
            failures.append(err)
            continue
        return builder(start, end)

    # Report the alternative which got furthest into the text
    raise max(failures, key=lambda err: err.offset)


def _parse_point(parser: PointParser[T], text: str, position: int) -> tuple[T, int]:
    try:
        return parser.parse(text, position)
    except ParseError:
        raise
    except ValueError as err:
        raise ParseError(f"Invalid timepoint: {err}", position) from err


def _parse_boundaries(
    text: str, parser: PointParser[T], pattern: str
) -> tuple[Boundary[T], Boundary[T]]:
    start: Boundary[T] | None = None
    end: Boundary[T] | None = None
    position = 0
    i = 0
    n = len(pattern)

    while i < n:
        if pattern.startswith(START_PLACEHOLDER, i):
            if text.startswith(INFINITE_PAST_GLYPH, position):
                start = Boundary.infinite_past()
                position += len(INFINITE_PAST_GLYPH)
            else:
                value, position = _parse_point(parser, text, position)
                start = Boundary.closed(value)
            i += len(START_PLACEHOLDER)
        elif pattern.startswith(END_PLACEHOLDER, i):
            if text.startswith(INFINITE_FUTURE_GLYPH, position):
                end = Boundary.infinite_future()
                position += len(INFINITE_FUTURE_GLYPH)
            else:
                value, position = _parse_point(parser, text, position)
                end = Boundary.open(value)
            i += len(END_PLACEHOLDER)
        else:
            literal = pattern[i]
            if position >= len(text) or text[position] != literal:
                raise ParseError(f"Literal '{literal}' expected", position)
            position += 1
            i += 1

    if position < len(text):
        raise ParseError(f"Unparsed trailing text: {text[position:]!r}", position)
    if start is None or end is None:
        raise ParseError("Pattern must contain both {0} and {1}", position)
    return start, end
