from .boundary import Boundary, BoundaryKind
from .exceptions import (
    EmptyInputError,
    InfiniteBoundaryError,
    IntervalError,
    InvalidRangeError,
    NullArgumentError,
    ParseError,
    PointParseError,
    RenderError,
)
from .factory import (
    IntervalFactory,
    between,
    on_timeline,
    on_traditional_timeline,
    since,
    until,
)
from .formats import (
    IntegerFormat,
    IsoDateFormat,
    IsoDateTimeFormat,
    PointParser,
    PointPrinter,
)
from .interval import ChronoInterval, SimpleInterval
from .pattern import parse, render
from .timeline import (
    DateTimeline,
    DateTimeTimeline,
    IntegerTimeline,
    Timeline,
    traditional_timeline,
)

__all__ = [
    "Timeline",
    "IntegerTimeline",
    "DateTimeline",
    "DateTimeTimeline",
    "traditional_timeline",
    "Boundary",
    "BoundaryKind",
    "ChronoInterval",
    "SimpleInterval",
    "IntervalFactory",
    "on_timeline",
    "on_traditional_timeline",
    "between",
    "since",
    "until",
    "render",
    "parse",
    "PointPrinter",
    "PointParser",
    "IntegerFormat",
    "IsoDateFormat",
    "IsoDateTimeFormat",
    "IntervalError",
    "NullArgumentError",
    "InvalidRangeError",
    "InfiniteBoundaryError",
    "ParseError",
    "EmptyInputError",
    "PointParseError",
    "RenderError",
]
