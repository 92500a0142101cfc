import logging
from importlib.resources import files

from .errors import (
    EmptyIntervalError,
    IncompatibleOrderingError,
    IntervalError,
    InvalidEndpointsError,
)
from .formatting import FormatOptions, describe, format_bounds, format_interval
from .interval import (
    EMPTY,
    BoundedInterval,
    EmptyInterval,
    Interval,
    comparator_ordered,
    empty,
    natural_ordered,
)
from .ordering import NATURAL, Ordering
from .policy import CLOSED, CLOSED_OPEN, OPEN, OPEN_CLOSED, EndpointPolicy
from .temporal import day_of, duration_of, month_of, spanning
from .typed import char_interval, float_interval, int_interval

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

__all__ = [
    "Interval",
    "BoundedInterval",
    "EmptyInterval",
    "EMPTY",
    "EndpointPolicy",
    "OPEN",
    "CLOSED",
    "OPEN_CLOSED",
    "CLOSED_OPEN",
    "Ordering",
    "NATURAL",
    "natural_ordered",
    "comparator_ordered",
    "empty",
    "int_interval",
    "float_interval",
    "char_interval",
    "spanning",
    "day_of",
    "month_of",
    "duration_of",
    "FormatOptions",
    "format_bounds",
    "format_interval",
    "describe",
    "IntervalError",
    "InvalidEndpointsError",
    "IncompatibleOrderingError",
    "EmptyIntervalError",
    "docs",
]
