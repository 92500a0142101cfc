"""Interval algebra over ``BoundedInterval`` and ``EmptyInterval``.

Every operation matches on the two cases explicitly; the empty set has no
bounds and is handled before any bound comparison.

Conventions for a missing (``None``) operand:
- predicates return False
- ``intersection(a, None)`` returns ``a`` (intersecting with the universe)
- ``compare(a, None)`` returns 1, so absent sorts below every interval

Combining two bounded intervals requires equal orderings; anything else
raises ``IncompatibleOrderingError``. The empty interval is compatible with
every ordering.
"""

import logging
from typing import Any, TypeVar

from intervalgebra.errors import IncompatibleOrderingError
from intervalgebra.interval import EMPTY, BoundedInterval, EmptyInterval, Interval
from intervalgebra.policy import EndpointPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _require_compatible(a: BoundedInterval[Any], b: BoundedInterval[Any]) -> None:
    if a.ordering != b.ordering:
        logger.debug("incompatible orderings %r and %r", a.ordering, b.ordering)
        raise IncompatibleOrderingError(a.ordering, b.ordering)


def is_degenerate(interval: Interval[Any]) -> bool:
    """True when both bounds compare equal."""
    match interval:
        case EmptyInterval():
            return False
        case BoundedInterval(minimum=lo, maximum=hi, ordering=ordering):
            return ordering.compare(lo, hi) == 0
    raise TypeError(f"Expected an interval, got {type(interval).__name__!r}")


def is_empty(interval: Interval[Any]) -> bool:
    """True when no value lies in the interval.

    A degenerate interval is non-empty only when both ends are inclusive.
    """
    match interval:
        case EmptyInterval():
            return True
        case BoundedInterval(minimum=lo, maximum=hi, ordering=ordering):
            c = ordering.compare(lo, hi)
            if c > 0:
                return True
            if c < 0:
                return False
            return not (interval.start_inclusive and interval.end_inclusive)
    raise TypeError(f"Expected an interval, got {type(interval).__name__!r}")


def on_start_endpoint(interval: Interval[T], value: T | None) -> bool:
    if value is None or isinstance(interval, EmptyInterval):
        return False
    return (
        interval.start_inclusive
        and interval.ordering.compare(interval.minimum, value) == 0
    )


def on_end_endpoint(interval: Interval[T], value: T | None) -> bool:
    if value is None or isinstance(interval, EmptyInterval):
        return False
    return (
        interval.end_inclusive
        and interval.ordering.compare(interval.maximum, value) == 0
    )


def contains(interval: Interval[T], value: T | None) -> bool:
    if value is None or isinstance(interval, EmptyInterval):
        return False

    cs = interval.ordering.compare(value, interval.minimum)
    ce = interval.ordering.compare(value, interval.maximum)

    after_start = cs >= 0 if interval.start_inclusive else cs > 0
    before_end = ce <= 0 if interval.end_inclusive else ce < 0
    return after_start and before_end


def contains_interval(outer: Interval[T], inner: Interval[T] | None) -> bool:
    """True when every value of ``inner`` lies in ``outer``."""
    match outer, inner:
        case _, None:
            return False
        case EmptyInterval(), _:
            return is_empty(inner)
        case BoundedInterval(), EmptyInterval():
            return True
        case BoundedInterval(), BoundedInterval():
            _require_compatible(outer, inner)
            compare = outer.ordering.compare

            start_cmp = compare(inner.minimum, outer.minimum)
            start_ok = start_cmp > 0 or (
                start_cmp == 0
                and (not inner.start_inclusive or outer.start_inclusive)
            )

            end_cmp = compare(inner.maximum, outer.maximum)
            end_ok = end_cmp < 0 or (
                end_cmp == 0 and (not inner.end_inclusive or outer.end_inclusive)
            )
            return start_ok and end_ok
    raise TypeError(f"Expected intervals, got {type(outer).__name__!r}")


def is_contained_by(inner: Interval[T], outer: Interval[T] | None) -> bool:
    match inner, outer:
        case _, None:
            return False
        case EmptyInterval(), _:
            return True
        case BoundedInterval(), BoundedInterval():
            _require_compatible(inner, outer)
    return contains_interval(outer, inner)


def overlaps(a: Interval[T], b: Interval[T] | None) -> bool:
    """True when the two intervals share at least one value."""
    match a, b:
        case _, None:
            return False
        case (EmptyInterval(), _) | (_, EmptyInterval()):
            return False
        case BoundedInterval(), BoundedInterval():
            _require_compatible(a, b)
            if is_empty(a) or is_empty(b):
                return False
            compare = a.ordering.compare

            start_vs_end = compare(a.minimum, b.maximum)
            if start_vs_end > 0:
                return False
            if start_vs_end == 0 and not (a.start_inclusive and b.end_inclusive):
                return False

            end_vs_start = compare(a.maximum, b.minimum)
            if end_vs_start < 0:
                return False
            return end_vs_start != 0 or (a.end_inclusive and b.start_inclusive)
    raise TypeError(f"Expected intervals, got {type(a).__name__!r}")


def intersection(a: Interval[T], b: Interval[T] | None) -> Interval[T] | None:
    """Common part of ``a`` and ``b``, or None when they do not overlap.

    At an end where both operands share the same bound, the result is
    inclusive only if both operands are.
    """
    match a, b:
        case _, None:
            return a
        case (EmptyInterval(), _) | (_, EmptyInterval()):
            return EMPTY
        case BoundedInterval(), BoundedInterval():
            _require_compatible(a, b)
            if not overlaps(a, b):
                return None
            compare = a.ordering.compare

            start_cmp = compare(a.minimum, b.minimum)
            if start_cmp > 0:
                start, start_inclusive = a.minimum, a.start_inclusive
            elif start_cmp < 0:
                start, start_inclusive = b.minimum, b.start_inclusive
            else:
                start = a.minimum
                start_inclusive = a.start_inclusive and b.start_inclusive

            end_cmp = compare(a.maximum, b.maximum)
            if end_cmp < 0:
                end, end_inclusive = a.maximum, a.end_inclusive
            elif end_cmp > 0:
                end, end_inclusive = b.maximum, b.end_inclusive
            else:
                end = a.maximum
                end_inclusive = a.end_inclusive and b.end_inclusive

            return BoundedInterval(
                minimum=start,
                maximum=end,
                policy=EndpointPolicy.from_flags(start_inclusive, end_inclusive),
                ordering=a.ordering,
            )
    raise TypeError(f"Expected intervals, got {type(a).__name__!r}")


def starts_after(interval: Interval[T], value: T | None) -> bool:
    """True when every value of the interval is greater than ``value``."""
    if value is None or isinstance(interval, EmptyInterval):
        return False
    c = interval.ordering.compare(interval.minimum, value)
    if c > 0:
        return True
    if c < 0:
        return False
    return not interval.start_inclusive


def starts_after_strictly(interval: Interval[T], value: T | None) -> bool:
    """True when the start is inclusive and lies after ``value``."""
    if value is None or isinstance(interval, EmptyInterval):
        return False
    return (
        interval.start_inclusive
        and interval.ordering.compare(interval.minimum, value) > 0
    )


def ends_before(interval: Interval[T], value: T | None) -> bool:
    """True when every value of the interval is less than ``value``."""
    if value is None or isinstance(interval, EmptyInterval):
        return False
    c = interval.ordering.compare(interval.maximum, value)
    if c < 0:
        return True
    if c > 0:
        return False
    return not interval.end_inclusive


def ends_before_strictly(interval: Interval[T], value: T | None) -> bool:
    """True when the end is inclusive and lies before ``value``."""
    if value is None or isinstance(interval, EmptyInterval):
        return False
    return (
        interval.end_inclusive
        and interval.ordering.compare(interval.maximum, value) < 0
    )


def compare(a: Interval[T], b: Interval[T] | None) -> int:
    """Total order: by minimum, maximum, then start and end inclusiveness.

    At equal bound values an inclusive end sorts after an exclusive one, so
    ``[2, 6] > (2, 6] > (2, 6)``. The empty interval sorts below every
    bounded interval.
    """
    match a, b:
        case _, None:
            return 1
        case EmptyInterval(), EmptyInterval():
            return 0
        case EmptyInterval(), _:
            return -1
        case _, EmptyInterval():
            return 1
        case BoundedInterval(), BoundedInterval():
            _require_compatible(a, b)
            ordering = a.ordering
            return (
                _sign(ordering.compare(a.minimum, b.minimum))
                or _sign(ordering.compare(a.maximum, b.maximum))
                or _sign(a.start_inclusive - b.start_inclusive)
                or _sign(a.end_inclusive - b.end_inclusive)
            )
    raise TypeError(f"Expected intervals, got {type(a).__name__!r}")
