from enum import Enum


class EndpointPolicy(Enum):
    """Which of an interval's two endpoints belong to it.

    Each member's value is ``(start_inclusive, end_inclusive)``.
    """

    OPEN = (False, False)
    CLOSED = (True, True)
    OPEN_CLOSED = (False, True)
    CLOSED_OPEN = (True, False)

    @property
    def start_inclusive(self) -> bool:
        return self.value[0]

    @property
    def end_inclusive(self) -> bool:
        return self.value[1]

    @property
    def start_exclusive(self) -> bool:
        return not self.start_inclusive

    @property
    def end_exclusive(self) -> bool:
        return not self.end_inclusive

    @property
    def start_symbol(self) -> str:
        return "[" if self.start_inclusive else "("

    @property
    def end_symbol(self) -> str:
        return "]" if self.end_inclusive else ")"

    @classmethod
    def from_flags(cls, start_inclusive: bool, end_inclusive: bool) -> "EndpointPolicy":
        """Return the policy for a pair of inclusiveness flags."""
        if start_inclusive and end_inclusive:
            return cls.CLOSED
        if not start_inclusive and not end_inclusive:
            return cls.OPEN
        if not start_inclusive:
            return cls.OPEN_CLOSED
        return cls.CLOSED_OPEN

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


OPEN = EndpointPolicy.OPEN
CLOSED = EndpointPolicy.CLOSED
OPEN_CLOSED = EndpointPolicy.OPEN_CLOSED
CLOSED_OPEN = EndpointPolicy.CLOSED_OPEN
