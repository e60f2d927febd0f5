"""Point formats print single timepoints to text and parse them back.

Interval rendering and parsing only needs these two narrow capabilities, so
any calendar or locale machinery can be plugged in by implementing the
`PointPrinter` and `PointParser` protocols. A few stock formats for integers
and ISO-8601 dates and datetimes are included.
"""

import re
from datetime import date, datetime
from typing import Protocol, TypeVar

from dateutil.parser import isoparse

from .exceptions import PointParseError

T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)

_INTEGER = re.compile(r"[+-]?\d+")
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_ISO_DATETIME = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:T\d{2}(?::\d{2}(?::\d{2}(?:[.,]\d{1,6})?)?)?"
    # Offsets only follow a time and need the colon, so "-2024" after a
    # time is left for the next literal
    r"(?:Z|[+-]\d{2}:\d{2})?)?"
)


class PointPrinter(Protocol[T_contra]):
    """Prints a timepoint as text."""

    def format(self, value: T_contra) -> str:
        ...


class PointParser(Protocol[T_co]):
    """Parses a timepoint from text starting at a given position.

    Returns the parsed value and the position just after the consumed text.
    Raises `PointParseError` with the offset of the failure.
    """

    def parse(self, text: str, position: int) -> tuple[T_co, int]:
        ...


class _RegexFormat:
    """Base class for formats which locate a timepoint with a regex."""

    regex: re.Pattern[str]
    kind = "timepoint"

    def __init__(self, interval_pattern: str | None = None) -> None:
        """
        Args:
            interval_pattern: Pattern used when rendering or parsing intervals
                without an explicit pattern, e.g. "{0} - {1}"
        """
        self.interval_pattern = interval_pattern

    def _match(self, text: str, position: int) -> tuple[str, int]:
        match = self.regex.match(text, position)
        if match is None:
            raise PointParseError(f"Expected {self.kind}", position)
        return match.group(0), match.end()


class IntegerFormat(_RegexFormat):
    """Decimal integers with an optional sign."""

    regex = _INTEGER
    kind = "integer"

    def format(self, value: int) -> str:
        return str(value)

    def parse(self, text: str, position: int) -> tuple[int, int]:
        token, end = self._match(text, position)
        return int(token), end


class IsoDateFormat(_RegexFormat):
    """Calendar dates in ISO-8601 extended format (YYYY-MM-DD)."""

    regex = _ISO_DATE
    kind = "ISO date"

    def format(self, value: date) -> str:
        return value.isoformat()

    def parse(self, text: str, position: int) -> tuple[date, int]:
        token, end = self._match(text, position)
        try:
            return isoparse(token).date(), end
        except ValueError as err:
            raise PointParseError(f"Invalid date '{token}': {err}", position) from err


class IsoDateTimeFormat(_RegexFormat):
    """Datetimes in ISO-8601 extended format, e.g. 2024-05-01T12:30:00+02:00.

    Parsing is delegated to dateutil which accepts reduced precision and
    both offset styles.
    """

    regex = _ISO_DATETIME
    kind = "ISO datetime"

    def format(self, value: datetime) -> str:
        return value.isoformat()

    def parse(self, text: str, position: int) -> tuple[datetime, int]:
        token, end = self._match(text, position)
        try:
            return isoparse(token), end
        except ValueError as err:
            raise PointParseError(
                f"Invalid datetime '{token}': {err}", position
            ) from err
