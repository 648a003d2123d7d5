"""Random source port."""

from typing import Protocol


class RandomSource(Protocol):
    """Source of pseudo-random numbers. random.Random satisfies this."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...

    def random(self) -> float:
        """Return a random float in [0.0, 1.0)."""
        ...
