"""Exceptions raised by intervalgebra.

All of them derive from ``ValueError`` through ``IntervalError`` so callers
that already guard construction with ``except ValueError`` keep working.
"""

from typing import Any


class IntervalError(ValueError):
    """Base class for interval algebra failures."""


class InvalidEndpointsError(IntervalError):
    """Raised when an interval's start sorts after its end."""

    def __init__(self, start: Any, end: Any):
        self.start: Any = start
        self.end: Any = end
        super().__init__(
            f"Illegal interval endpoints: [start={start}] > [end={end}]\n"
            f"The start of an interval must not sort after its end under the "
            f"interval's ordering.\n"
            f"Hint: swap the arguments, or use empty() for the empty set."
        )


class IncompatibleOrderingError(IntervalError):
    """Raised when two intervals with different orderings are combined."""

    def __init__(self, left: Any, right: Any):
        self.left: Any = left
        self.right: Any = right
        super().__init__(
            f"Cannot combine intervals ordered by different orderings.\n"
            f"Got: {left!r} and {right!r}\n"
            f"Hint: build both intervals with the same Ordering instance, or "
            f"give equivalent orderings the same name:\n"
            f"  Ordering.by_key(len, name='by-length')"
        )


class EmptyIntervalError(IntervalError):
    """Raised when reading a bound of the empty interval."""

    def __init__(self, bound: str):
        self.bound: str = bound
        super().__init__(
            f"The empty interval has no {bound}.\n"
            f"Hint: check interval.is_empty() before reading its bounds."
        )
