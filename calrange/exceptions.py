"""Exceptions for the calrange library."""


class IntervalError(Exception):
    """Base exception for all calrange errors."""


class NullArgumentError(IntervalError, TypeError):
    """Exception raised when a required argument is missing (None)."""


class InvalidRangeError(IntervalError, ValueError):
    """Exception raised when an interval start is after its end."""


class InfiniteBoundaryError(IntervalError, ValueError):
    """Exception raised when asking an infinite boundary for its value."""


class ParseError(IntervalError, ValueError):
    """Exception raised when text can not be interpreted as an interval.

    The 'offset' attribute contains the position in the text where the
    parser gave up, which is useful for pointing at the offending
    character in an error message.
    """

    def __init__(self, message: str, offset: int) -> None:
        """Initialize the ParseError with a message and error offset."""
        super().__init__(f"{message} (at offset {offset})")
        self.message = message
        self.offset = offset


class EmptyInputError(ParseError):
    """Exception raised when parsing an empty text."""

    def __init__(self, message: str = "Empty text can not be parsed") -> None:
        super().__init__(message, 0)


class PointParseError(ParseError):
    """Exception raised by a point parser for an unparsable timepoint."""


class RenderError(IntervalError):
    """Exception raised when a point printer fails while rendering an interval."""
