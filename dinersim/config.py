"""Simulation configuration.

Both config types are frozen dataclasses validated on construction, so a
bad value fails where it is written rather than part-way through a run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dinersim.errors import InvalidTimeStepError
from dinersim.model.table import Table


@dataclass(frozen=True)
class PartyGeneratorConfig:
    """Parameters of the stochastic party source.

    Attributes:
        arrival_rate: Probability that a party arrives on any given tick.
        min_party_size: Smallest party generated.
        max_party_size: Largest party generated.
        min_dining_time: Lower bound of every member's dining duration.
        max_dining_time: Upper bound of every member's dining duration.
        min_age: Youngest patron age.
        max_age: Oldest patron age.
    """

    arrival_rate: float = 0.4
    min_party_size: int = 1
    max_party_size: int = 6
    min_dining_time: float = 30.0
    max_dining_time: float = 90.0
    min_age: int = 18
    max_age: int = 80

    def __post_init__(self) -> None:
        if not (0.0 <= self.arrival_rate <= 1.0):
            raise ValueError(f"arrival_rate must be in [0.0, 1.0], got {self.arrival_rate}")
        if self.min_party_size < 1:
            raise ValueError(f"min_party_size must be >= 1, got {self.min_party_size}")
        if self.min_party_size > self.max_party_size:
            raise ValueError(
                f"min_party_size must be <= max_party_size, got "
                f"{self.min_party_size} > {self.max_party_size}"
            )
        if self.min_age > self.max_age:
            raise ValueError(f"min_age must be <= max_age, got {self.min_age} > {self.max_age}")


@dataclass(frozen=True)
class SimulationConfig:
    """Everything needed to build and run one isolated simulation.

    Attributes:
        table_capacities: Seats per table, in table-list order. Tables are
            numbered from 1 in this order.
        duration: Closing time; the run stops once the clock reaches it.
        time_step: Clock advance per tick.
        seed: Seed for the run's randomizer.
        generator: Arrival and party parameters.
    """

    table_capacities: tuple[int, ...] = (2, 2, 4, 4, 6)
    duration: float = 240.0
    time_step: float = 5.0
    seed: int | str = "restaurant-sim"
    generator: PartyGeneratorConfig = field(default_factory=PartyGeneratorConfig)

    def __post_init__(self) -> None:
        if not self.table_capacities:
            raise ValueError("at least one table is required")
        if self.time_step <= 0:
            raise InvalidTimeStepError(f"time_step must be > 0, got {self.time_step}")
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0, got {self.duration}")

    @property
    def total_capacity(self) -> int:
        return sum(self.table_capacities)

    def build_tables(self) -> list[Table]:
        """Fresh tables for one run, ids 1..n in configured order."""
        return [Table(i, capacity) for i, capacity in enumerate(self.table_capacities, start=1)]
