"""Factories that pin the element type of a naturally ordered interval.

Mixing element types silently (``natural_ordered(1, "9")``) only fails later,
inside a comparison. These factories reject the wrong type up front.
"""

import math
from typing import Any

from intervalgebra.interval import BoundedInterval, natural_ordered
from intervalgebra.policy import EndpointPolicy


def _type_error(kind: str, edge: str, value: Any, hint: str) -> TypeError:
    return TypeError(
        f"{kind} interval {edge} must be {hint}.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def int_interval(
    minimum: int, maximum: int, policy: EndpointPolicy = EndpointPolicy.CLOSED
) -> BoundedInterval[int]:
    """Interval over integers. ``bool`` is rejected even though it subclasses int."""
    for edge, value in (("minimum", minimum), ("maximum", maximum)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise _type_error("Int", edge, value, "an int")
    return natural_ordered(minimum, maximum, policy)


def float_interval(
    minimum: float, maximum: float, policy: EndpointPolicy = EndpointPolicy.CLOSED
) -> BoundedInterval[float]:
    """Interval over floats; ints are accepted and converted.

    Raises:
        ValueError: If an endpoint is NaN, which has no place in a total order
    """
    bounds: list[float] = []
    for edge, value in (("minimum", minimum), ("maximum", maximum)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _type_error("Float", edge, value, "a float or int")
        if isinstance(value, float) and math.isnan(value):
            raise ValueError(
                f"Float interval {edge} must not be NaN.\n"
                f"NaN compares false against everything, so it cannot bound "
                f"an interval.\n"
                f"Hint: use float('-inf') / float('inf') for unbounded ends."
            )
        bounds.append(float(value))
    return natural_ordered(bounds[0], bounds[1], policy)


def char_interval(
    minimum: str, maximum: str, policy: EndpointPolicy = EndpointPolicy.CLOSED
) -> BoundedInterval[str]:
    """Interval over single characters, ordered by code point."""
    for edge, value in (("minimum", minimum), ("maximum", maximum)):
        if not isinstance(value, str) or len(value) != 1:
            raise _type_error("Char", edge, value, "a single-character str")
    return natural_ordered(minimum, maximum, policy)
