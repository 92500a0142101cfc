"""Total orderings used to compare interval endpoints.

An ``Ordering`` pairs a three-way comparison function with an identity key.
Intervals may only be combined when their orderings are equal, and equality
looks at the identity key alone: two ``Ordering`` objects wrapping different
lambdas are compatible if they were given the same name, and incompatible
otherwise.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], int]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class Ordering(Generic[T]):
    compare: Comparator[T] = field(compare=False)
    identity: Hashable

    def __call__(self, a: T, b: T) -> int:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return f"Ordering({self.identity!r})"

    @property
    def sort_key(self) -> Callable[[T], Any]:
        """Key function for ``sorted``/``min``/``max`` under this ordering."""
        return cmp_to_key(self.compare)

    def reversed(self) -> "Ordering[T]":
        """Return the descending counterpart of this ordering."""
        forward = self.compare
        return Ordering(
            compare=lambda a, b: forward(b, a),
            identity=("reversed", self.identity),
        )

    @classmethod
    def natural(cls) -> "Ordering[Any]":
        """The intrinsic ``<``/``>`` order of the values themselves."""
        return NATURAL

    @classmethod
    def by_key(
        cls, key: Callable[[T], Any], name: Hashable | None = None
    ) -> "Ordering[T]":
        """Order values by the natural order of ``key(value)``.

        Example:
            >>> by_length = Ordering.by_key(len, name="by-length")
            >>> by_length("abc", "xy")
            1
        """
        return cls(
            compare=lambda a, b: _natural_compare(key(a), key(b)),
            identity=name if name is not None else ("by_key", key),
        )

    @classmethod
    def from_cmp(
        cls, cmp: Comparator[T], name: Hashable | None = None
    ) -> "Ordering[T]":
        """Wrap a classic three-way ``cmp(a, b)`` function.

        Without a ``name`` the function object itself is the identity, so
        orderings built from the same function are compatible.
        """
        return cls(compare=cmp, identity=name if name is not None else cmp)


NATURAL: Ordering[Any] = Ordering(compare=_natural_compare, identity="natural")

# Used only by the empty interval, which has no bounds to compare.
EMPTY_ORDERING: Ordering[Any] = Ordering(compare=lambda a, b: 0, identity="empty")
