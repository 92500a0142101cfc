import logging
from dataclasses import FrozenInstanceError

import pytest

from intervalgebra import (
    CLOSED,
    CLOSED_OPEN,
    NATURAL,
    OPEN,
    OPEN_CLOSED,
    BoundedInterval,
    EndpointPolicy,
    IntervalError,
    InvalidEndpointsError,
    Ordering,
    comparator_ordered,
    natural_ordered,
)


def by_abs(a: int, b: int) -> int:
    return (abs(a) > abs(b)) - (abs(a) < abs(b))


class TestConstruction:
    """Factories validate endpoints and fill in the ordering."""

    def test_natural_ordered_defaults(self) -> None:
        interval = natural_ordered(2, 6)

        assert interval.minimum == 2
        assert interval.maximum == 6
        assert interval.policy is CLOSED
        assert interval.ordering is NATURAL

    def test_reversed_endpoints_rejected(self) -> None:
        with pytest.raises(InvalidEndpointsError) as excinfo:
            natural_ordered(6, 2, CLOSED)

        assert excinfo.value.start == 6
        assert excinfo.value.end == 2
        assert str(excinfo.value).startswith(
            "Illegal interval endpoints: [start=6] > [end=2]"
        )

    def test_rejected_endpoints_are_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="intervalgebra.interval"):
            with pytest.raises(InvalidEndpointsError):
                natural_ordered(6, 2, CLOSED)

        assert "rejecting endpoints 6 > 2 under Ordering('natural')" in caplog.text

    def test_invalid_endpoints_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            natural_ordered("z", "a", OPEN)
        assert issubclass(InvalidEndpointsError, IntervalError)

    def test_equal_endpoints_allowed_for_every_policy(self) -> None:
        for policy in EndpointPolicy:
            assert natural_ordered(4, 4, policy).is_degenerate()

    def test_none_endpoint_rejected(self) -> None:
        with pytest.raises(TypeError):
            natural_ordered(None, 4)

    def test_policy_type_checked(self) -> None:
        with pytest.raises(TypeError):
            natural_ordered(1, 4, "closed")  # pyright: ignore[reportArgumentType]

    def test_comparator_ordered_validates_with_comparator(self) -> None:
        """-5 > 3 by absolute value even though -5 < 3 naturally."""
        with pytest.raises(InvalidEndpointsError):
            comparator_ordered(-5, 3, CLOSED, by_abs)

        interval = comparator_ordered(3, -5, CLOSED, by_abs)
        assert interval.contains(-4)
        assert not interval.contains(-6)

    def test_plain_cmp_is_wrapped(self) -> None:
        interval = comparator_ordered(1, 3, CLOSED, by_abs)

        assert isinstance(interval.ordering, Ordering)
        assert interval.ordering == Ordering.from_cmp(by_abs)

    def test_ordering_type_checked(self) -> None:
        with pytest.raises(TypeError):
            BoundedInterval(minimum=1, maximum=2, ordering=by_abs)  # pyright: ignore[reportArgumentType]

    def test_immutable(self) -> None:
        interval = natural_ordered(1, 2)

        with pytest.raises(FrozenInstanceError):
            interval.minimum = 0  # pyright: ignore[reportAttributeAccessIssue]


class TestValueSemantics:
    def test_equality_and_hash(self) -> None:
        assert natural_ordered(1, 5, OPEN) == natural_ordered(1, 5, OPEN)
        assert natural_ordered(1, 5, OPEN) != natural_ordered(1, 5, CLOSED)
        assert len({natural_ordered(1, 5), natural_ordered(1, 5)}) == 1

    def test_different_orderings_are_not_equal(self) -> None:
        assert natural_ordered(1, 5) != comparator_ordered(1, 5, CLOSED, by_abs)

    def test_inclusiveness_properties(self) -> None:
        interval = natural_ordered(1, 5, CLOSED_OPEN)

        assert interval.start_inclusive
        assert not interval.end_inclusive
        assert not interval.start_exclusive
        assert interval.end_exclusive


class TestEmptiness:
    def test_open_degenerate_is_empty(self) -> None:
        interval = natural_ordered(4, 4, OPEN)

        assert interval.is_empty()
        assert interval.is_degenerate()

    def test_closed_degenerate_is_not_empty(self) -> None:
        interval = natural_ordered(4, 4, CLOSED)

        assert not interval.is_empty()
        assert interval.is_degenerate()

    @pytest.mark.parametrize("policy", [OPEN_CLOSED, CLOSED_OPEN])
    def test_half_open_degenerate_is_empty(self, policy: EndpointPolicy) -> None:
        assert natural_ordered(4, 4, policy).is_empty()

    def test_proper_interval(self) -> None:
        interval = natural_ordered(1, 2, OPEN)

        assert not interval.is_empty()
        assert not interval.is_degenerate()


class TestContains:
    @pytest.mark.parametrize("policy", list(EndpointPolicy))
    def test_endpoints_follow_policy(self, policy: EndpointPolicy) -> None:
        interval = natural_ordered(2, 6, policy)

        assert interval.contains(2) is policy.start_inclusive
        assert interval.contains(6) is policy.end_inclusive

    def test_interior_and_exterior(self) -> None:
        interval = natural_ordered(2, 6, OPEN)

        assert interval.contains(4)
        assert interval.contains(2.5)
        assert not interval.contains(1)
        assert not interval.contains(7)

    def test_none_is_never_contained(self) -> None:
        assert not natural_ordered(2, 6).contains(None)

    def test_in_operator(self) -> None:
        interval = natural_ordered("b", "d", CLOSED_OPEN)

        assert "b" in interval
        assert "c" in interval
        assert "d" not in interval

    def test_on_endpoints(self) -> None:
        closed = natural_ordered(2, 6, CLOSED)
        open_ = natural_ordered(2, 6, OPEN)

        assert closed.on_start_endpoint(2)
        assert closed.on_end_endpoint(6)
        assert not closed.on_start_endpoint(6)
        assert not closed.on_end_endpoint(2)
        assert not open_.on_start_endpoint(2)
        assert not open_.on_end_endpoint(6)
        assert not closed.on_start_endpoint(None)
        assert not closed.on_end_endpoint(None)


class TestStartsAfterEndsBefore:
    """The strict variants require an inclusive endpoint."""

    def test_starts_after(self) -> None:
        closed = natural_ordered(4, 8, CLOSED)
        open_ = natural_ordered(4, 8, OPEN)

        assert closed.starts_after(3)
        assert not closed.starts_after(5)
        assert not closed.starts_after(4)
        assert open_.starts_after(4)
        assert not closed.starts_after(None)

    def test_starts_after_strictly(self) -> None:
        closed = natural_ordered(4, 8, CLOSED)
        open_ = natural_ordered(4, 8, OPEN)

        assert closed.starts_after_strictly(3)
        assert not closed.starts_after_strictly(4)
        assert not open_.starts_after_strictly(3)
        assert not open_.starts_after_strictly(4)
        assert not closed.starts_after_strictly(None)

    def test_ends_before(self) -> None:
        closed = natural_ordered(4, 8, CLOSED)
        open_ = natural_ordered(4, 8, OPEN)

        assert closed.ends_before(9)
        assert not closed.ends_before(7)
        assert not closed.ends_before(8)
        assert open_.ends_before(8)
        assert not closed.ends_before(None)

    def test_ends_before_strictly(self) -> None:
        closed = natural_ordered(4, 8, CLOSED)
        open_ = natural_ordered(4, 8, OPEN)

        assert closed.ends_before_strictly(9)
        assert not closed.ends_before_strictly(8)
        assert not open_.ends_before_strictly(9)
        assert not open_.ends_before_strictly(8)
        assert not closed.ends_before_strictly(None)
