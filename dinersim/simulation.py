"""Simulation driver: configuration -> engine -> stepping loop.

Each Simulation owns its restaurant, party source and randomizer. Nothing
is shared at module level, so any number of simulations can run side by
side in one process (parameter sweeps, tests).

Example::

    config = SimulationConfig(table_capacities=(2, 2, 4, 4, 6), seed=7)
    sim = Simulation.from_config(config)
    summary = sim.run()
    print(summary)
    sim.trace.to_csv("trace.csv")
"""

from __future__ import annotations

import logging

from dinersim.config import SimulationConfig
from dinersim.core.restaurant import Restaurant
from dinersim.errors import InvalidTimeStepError
from dinersim.instrumentation.summary import SimulationSummary
from dinersim.instrumentation.trace import SimulationTrace, TickRecord
from dinersim.load.party_generator import PartyGenerator
from dinersim.load.party_source import PartySource
from dinersim.load.randomizer import SeededRandomizer

logger = logging.getLogger(__name__)


class Simulation:
    """Runs a restaurant against a party source until closing time.

    Every tick pulls at most one party from the source, enqueues it, and
    steps the restaurant once. At least one tick always runs.

    Args:
        restaurant: The engine to drive.
        party_source: Polled once per tick for a new arrival. None means
            no arrivals beyond what is already queued.
        duration: Closing time.
        time_step: Clock advance per tick.
        check_invariants: Verify the seating relation after every tick.
    """

    def __init__(
        self,
        restaurant: Restaurant,
        party_source: PartySource | None,
        duration: float,
        time_step: float,
        check_invariants: bool = False,
    ):
        if time_step <= 0:
            raise InvalidTimeStepError(f"time_step must be > 0, got {time_step}")
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        self.restaurant = restaurant
        self.party_source = party_source
        self.duration = duration
        self.time_step = time_step
        self.check_invariants = check_invariants

        self._trace = SimulationTrace()
        self._summary: SimulationSummary | None = None
        self._parties_arrived = 0
        self._patrons_arrived = 0
        self._patrons_served = 0

    @classmethod
    def from_config(cls, config: SimulationConfig, check_invariants: bool = False) -> Simulation:
        """Build an isolated simulation (tables, seeded randomizer, generator) from config."""
        randomizer = SeededRandomizer.create_from_seed(config.seed)
        return cls(
            restaurant=Restaurant(config.build_tables()),
            party_source=PartyGenerator(randomizer, config.generator),
            duration=config.duration,
            time_step=config.time_step,
            check_invariants=check_invariants,
        )

    @property
    def trace(self) -> SimulationTrace:
        return self._trace

    @property
    def summary(self) -> SimulationSummary | None:
        """Summary of the last run, or None before run() is called."""
        return self._summary

    @property
    def patrons_served(self) -> int:
        return self._patrons_served

    def run(self) -> SimulationSummary:
        restaurant = self.restaurant
        logger.info(
            "Starting simulation: %d tables, %d seats, duration=%s, time_step=%s",
            len(restaurant.tables), restaurant.total_capacity, self.duration, self.time_step,
        )

        self.tick()
        while restaurant.current_time < self.duration:
            self.tick()

        self._summary = self._build_summary()
        logger.info("Simulation complete\n%s", self._summary)
        return self._summary

    def tick(self) -> TickRecord:
        """Pull one arrival, step the restaurant once, and record the result."""
        restaurant = self.restaurant

        arrived = self.party_source.generate_party() if self.party_source is not None else None
        if arrived is not None:
            restaurant.enqueue(arrived)
            self._parties_arrived += 1
            self._patrons_arrived += arrived.size

        result = restaurant.step(self.time_step)
        self._patrons_served += result.departed_count
        if self.check_invariants:
            restaurant.check_invariants()

        record = TickRecord(
            time=result.time,
            arrived_party_size=arrived.size if arrived is not None else 0,
            departed=result.departed_count,
            parties_seated=len(result.seated),
            patrons_seated=result.seated_count,
            occupied_tables=restaurant.occupied_table_count,
            seated=restaurant.total_seated_patrons,
            waiting_patrons=restaurant.waiting_patron_count,
            waiting_parties=restaurant.waiting_party_count,
            departed_ids=tuple(p.id for p in result.departed),
            seated_ids=tuple(p.id for party in result.seated for p in party),
        )
        self._trace.append(record)

        logger.info(
            "Time: %g | Occupied tables: %d/%d | Seated: %d | Waiting: %d (%d parties) | Total arrived: %d",
            record.time, record.occupied_tables, len(restaurant.tables), record.seated,
            record.waiting_patrons, record.waiting_parties, self._patrons_arrived,
        )
        return record

    def _build_summary(self) -> SimulationSummary:
        stats = self.restaurant.stats
        waits = self.restaurant.wait_times
        return SimulationSummary(
            duration=stats.current_time,
            ticks=len(self._trace),
            tables=stats.tables,
            total_capacity=stats.total_capacity,
            parties_arrived=self._parties_arrived,
            patrons_arrived=self._patrons_arrived,
            parties_seated=stats.parties_admitted,
            patrons_seated=stats.patrons_admitted,
            patrons_served=self._patrons_served,
            still_seated=stats.seated,
            still_waiting_patrons=stats.waiting_patrons,
            still_waiting_parties=stats.waiting_parties,
            table_turns=stats.table_turns,
            mean_wait=waits.mean(),
            p90_wait=waits.percentile(0.90),
            max_wait=waits.max(),
            peak_waiting_parties=stats.peak_waiting_parties,
        )
