import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typing_extensions import override

from intervalgebra.errors import EmptyIntervalError, InvalidEndpointsError
from intervalgebra.ordering import EMPTY_ORDERING, NATURAL, Ordering
from intervalgebra.policy import EndpointPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Interval(Generic[T]):
    """Common interface of ``BoundedInterval`` and ``EmptyInterval``.

    The two concrete cases form a closed sum; every operation below is
    implemented once in ``intervalgebra.algebra`` by matching on them.
    """

    minimum: T
    maximum: T
    policy: EndpointPolicy
    ordering: Ordering[T]

    @property
    def start_inclusive(self) -> bool:
        return self.policy.start_inclusive

    @property
    def end_inclusive(self) -> bool:
        return self.policy.end_inclusive

    @property
    def start_exclusive(self) -> bool:
        return self.policy.start_exclusive

    @property
    def end_exclusive(self) -> bool:
        return self.policy.end_exclusive

    def is_degenerate(self) -> bool:
        return algebra.is_degenerate(self)

    def is_empty(self) -> bool:
        return algebra.is_empty(self)

    def on_start_endpoint(self, value: T | None) -> bool:
        return algebra.on_start_endpoint(self, value)

    def on_end_endpoint(self, value: T | None) -> bool:
        return algebra.on_end_endpoint(self, value)

    def contains(self, value: T | None) -> bool:
        return algebra.contains(self, value)

    def __contains__(self, value: object) -> bool:
        return algebra.contains(self, value)

    def contains_interval(self, other: "Interval[T] | None") -> bool:
        return algebra.contains_interval(self, other)

    def is_contained_by(self, other: "Interval[T] | None") -> bool:
        return algebra.is_contained_by(self, other)

    def overlaps(self, other: "Interval[T] | None") -> bool:
        return algebra.overlaps(self, other)

    def intersection(self, other: "Interval[T] | None") -> "Interval[T] | None":
        """Return the common part of both intervals, or None if they are disjoint.

        A missing ``other`` acts as the universe and returns ``self``.
        """
        return algebra.intersection(self, other)

    def __and__(self, other: "Interval[T]") -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        result = algebra.intersection(self, other)
        return EMPTY if result is None else result

    def starts_after(self, value: T | None) -> bool:
        return algebra.starts_after(self, value)

    def starts_after_strictly(self, value: T | None) -> bool:
        return algebra.starts_after_strictly(self, value)

    def ends_before(self, value: T | None) -> bool:
        return algebra.ends_before(self, value)

    def ends_before_strictly(self, value: T | None) -> bool:
        return algebra.ends_before_strictly(self, value)

    def compare(self, other: "Interval[T] | None") -> int:
        """Three-way comparison returning -1, 0 or 1."""
        return algebra.compare(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return algebra.compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return algebra.compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return algebra.compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return algebra.compare(self, other) >= 0

    def format(self) -> str:
        # Import at runtime to avoid circular dependency
        from intervalgebra.formatting import format_interval

        return format_interval(self)

    @override
    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, kw_only=True)
class BoundedInterval(Interval[T]):
    minimum: T
    maximum: T
    policy: EndpointPolicy = EndpointPolicy.CLOSED
    ordering: Ordering[T] = NATURAL

    def __post_init__(self) -> None:
        if self.minimum is None or self.maximum is None:
            raise TypeError(
                f"Interval endpoints must not be None.\n"
                f"Got minimum={self.minimum!r}, maximum={self.maximum!r}\n"
                f"Hint: use empty() for the empty interval."
            )
        if not isinstance(self.policy, EndpointPolicy):
            raise TypeError(
                f"Interval policy must be an EndpointPolicy.\n"
                f"Got {type(self.policy).__name__!r}: {self.policy!r}\n"
                f"Hint: EndpointPolicy.CLOSED, EndpointPolicy.OPEN, ..."
            )
        if not isinstance(self.ordering, Ordering):
            raise TypeError(
                f"Interval ordering must be an Ordering.\n"
                f"Got {type(self.ordering).__name__!r}: {self.ordering!r}\n"
                f"Hint: wrap plain cmp functions with Ordering.from_cmp(cmp)."
            )
        if self.ordering.compare(self.minimum, self.maximum) > 0:
            logger.debug(
                "rejecting endpoints %r > %r under %r",
                self.minimum,
                self.maximum,
                self.ordering,
            )
            raise InvalidEndpointsError(self.minimum, self.maximum)


class EmptyInterval(Interval[Any]):
    """The empty set. Use ``EMPTY`` or ``empty()`` rather than instantiating."""

    _instance: "EmptyInterval | None" = None

    def __new__(cls) -> "EmptyInterval":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def minimum(self) -> Any:  # pyright: ignore[reportIncompatibleVariableOverride]
        raise EmptyIntervalError("minimum")

    @property
    def maximum(self) -> Any:  # pyright: ignore[reportIncompatibleVariableOverride]
        raise EmptyIntervalError("maximum")

    @property
    def policy(self) -> EndpointPolicy:  # pyright: ignore[reportIncompatibleVariableOverride]
        return EndpointPolicy.OPEN

    @property
    def ordering(self) -> Ordering[Any]:  # pyright: ignore[reportIncompatibleVariableOverride]
        return EMPTY_ORDERING

    @override
    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptyInterval()


def natural_ordered(
    minimum: T, maximum: T, policy: EndpointPolicy = EndpointPolicy.CLOSED
) -> BoundedInterval[T]:
    """Interval over values with an intrinsic order (numbers, strings, dates...).

    Raises:
        InvalidEndpointsError: If ``minimum > maximum``
    """
    return BoundedInterval(minimum=minimum, maximum=maximum, policy=policy)


def comparator_ordered(
    minimum: T,
    maximum: T,
    policy: EndpointPolicy,
    comparator: "Ordering[T] | Callable[[T, T], int]",
) -> BoundedInterval[T]:
    """Interval whose endpoints are ordered by ``comparator``.

    Args:
        comparator: An ``Ordering``, or a plain ``cmp(a, b) -> int`` function
            which is wrapped with ``Ordering.from_cmp``

    Raises:
        InvalidEndpointsError: If ``minimum`` sorts after ``maximum``

    Example:
        >>> by_len = Ordering.by_key(len, name="by-length")
        >>> comparator_ordered("a", "ccc", EndpointPolicy.CLOSED, by_len).contains("zz")
        True
    """
    if not isinstance(comparator, Ordering):
        comparator = Ordering.from_cmp(comparator)
    return BoundedInterval(
        minimum=minimum, maximum=maximum, policy=policy, ordering=comparator
    )


def empty() -> EmptyInterval:
    return EMPTY


from intervalgebra import algebra  # noqa: E402
