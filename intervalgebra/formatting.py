"""Render intervals in mathematical bracket notation.

Kept apart from the interval types so that anything holding a start, an end
and an ``EndpointPolicy`` can share the same rendering.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from intervalgebra.policy import EndpointPolicy

if TYPE_CHECKING:
    from intervalgebra.interval import Interval


@dataclass(frozen=True, kw_only=True)
class FormatOptions:
    separator: str = ", "
    empty_symbol: str = "∅"
    label: str = ""


DEFAULT_FORMAT = FormatOptions()
DESCRIBE_FORMAT = FormatOptions(label="Interval: ")


def format_bounds(
    start: Any,
    end: Any,
    policy: EndpointPolicy,
    options: FormatOptions = DEFAULT_FORMAT,
) -> str:
    """Format raw endpoints, e.g. ``format_bounds(4, 6, OPEN_CLOSED) == "(4, 6]"``."""
    return (
        f"{options.label}{policy.start_symbol}{start}"
        f"{options.separator}{end}{policy.end_symbol}"
    )


def format_interval(
    interval: "Interval[Any]", options: FormatOptions = DEFAULT_FORMAT
) -> str:
    # Import at runtime to avoid circular dependency
    from intervalgebra.interval import EmptyInterval

    if isinstance(interval, EmptyInterval):
        return f"{options.label}{options.empty_symbol}"
    return format_bounds(interval.minimum, interval.maximum, interval.policy, options)


def describe(interval: "Interval[Any]") -> str:
    """Labelled rendering such as ``"Interval: [2, 6]"``."""
    return format_interval(interval, DESCRIBE_FORMAT)
