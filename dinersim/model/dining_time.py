"""Inclusive range of dining durations.

A DiningTime is shared by every person drawn from the same arrival
configuration; each person interpolates it once to fix their own duration.
"""

from __future__ import annotations

from dataclasses import dataclass

from dinersim.errors import InvalidRangeError


@dataclass(frozen=True)
class DiningTime:
    """Lower and upper bound of a dining duration, in simulation time units.

    Attributes:
        lower_bound: Shortest possible duration.
        upper_bound: Longest possible duration.

    Raises:
        InvalidRangeError: If lower_bound > upper_bound.
    """

    lower_bound: float
    upper_bound: float

    def __post_init__(self) -> None:
        if self.lower_bound > self.upper_bound:
            raise InvalidRangeError(
                f"lower_bound must be <= upper_bound, got {self.lower_bound} > {self.upper_bound}"
            )

    @property
    def span(self) -> float:
        return self.upper_bound - self.lower_bound

    def interpolate(self, u: float) -> float:
        """Map a uniform sample in [0, 1) onto the range."""
        return self.lower_bound + u * (self.upper_bound - self.lower_bound)
