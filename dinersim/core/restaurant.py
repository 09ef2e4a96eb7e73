"""The time-stepped seating engine.

Restaurant owns a fixed list of tables, a FIFO waiting queue and a clock.
Each tick (:meth:`Restaurant.step`) runs three phases in a fixed order:

1. advance the clock,
2. evict every table whose slowest diner has finished,
3. admit waiting parties from the head of the queue.

Evicting before admitting lets a table vacated in this tick take a
waiting party in the same tick.

Admission rules:

- A party only sits at a completely empty table; partially occupied
  tables are never topped up with strangers.
- Tables are scanned in list order and the first one large enough wins
  (first-fit, not best-fit).
- The queue is served strictly first-come-first-served. If the head party
  cannot be seated, nobody behind it is seated either, even when a table
  that would fit them is free (head-of-line blocking).

Example::

    tables = [Table(1, 2), Table(2, 4)]
    restaurant = Restaurant(tables)
    restaurant.enqueue(party)
    results = restaurant.run(duration=240, time_step=5)
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from dinersim.core.seating import SeatingLedger
from dinersim.errors import InvalidTimeStepError
from dinersim.instrumentation.data import Data
from dinersim.model.party import Party
from dinersim.model.person import Person
from dinersim.model.table import Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """What happened during one tick.

    Attributes:
        time: Clock value after the tick's advance.
        departed: People evicted this tick, table by table.
        seated: Parties admitted this tick, in queue order.
    """

    time: float
    departed: tuple[Person, ...] = ()
    seated: tuple[Party, ...] = ()

    @property
    def departed_count(self) -> int:
        return len(self.departed)

    @property
    def seated_count(self) -> int:
        """Number of people (not parties) seated this tick."""
        return sum(p.size for p in self.seated)


@dataclass(frozen=True)
class RestaurantStats:
    """Frozen snapshot of restaurant statistics.

    Attributes:
        name: Restaurant name.
        current_time: Clock value when the snapshot was taken.
        tables: Number of tables.
        total_capacity: Sum of all table capacities.
        occupied_tables: Tables with at least one occupant.
        seated: People currently seated.
        waiting_parties: Parties in the queue.
        waiting_patrons: People in the queue.
        parties_admitted: Parties seated since the start.
        patrons_admitted: People seated since the start.
        patrons_departed: People evicted since the start.
        table_turns: Times a table was vacated.
        total_wait_time: Sum of queue waits of admitted parties.
        peak_waiting_parties: Longest queue observed.
        peak_seated: Most people seated at once.
        utilization: Fraction of seats in use (0.0 to 1.0).
    """

    name: str
    current_time: float
    tables: int
    total_capacity: int
    occupied_tables: int
    seated: int
    waiting_parties: int
    waiting_patrons: int
    parties_admitted: int
    patrons_admitted: int
    patrons_departed: int
    table_turns: int
    total_wait_time: float
    peak_waiting_parties: int
    peak_seated: int
    utilization: float


@dataclass
class _QueuedParty:
    """Internal: a party waiting for a table."""

    party: Party
    enqueued_at: float


class Restaurant:
    """Seating engine over a fixed set of tables.

    All seating goes through a private :class:`SeatingLedger`, so after
    every public call each person's ``seated_at`` agrees with the table
    occupant lists.

    Args:
        tables: Tables in scan order. Ids must be unique.
        name: Identifier for logging and stats.

    Raises:
        ValueError: If no tables are given or table ids repeat.
    """

    def __init__(self, tables: Iterable[Table], name: str = "Restaurant") -> None:
        tables = list(tables)
        if not tables:
            raise ValueError("a restaurant needs at least one table")
        ids = [t.id for t in tables]
        if len(set(ids)) != len(ids):
            raise ValueError(f"table ids must be unique, got {ids}")

        self.name = name
        self._tables: tuple[Table, ...] = tuple(tables)
        self._ledger = SeatingLedger()
        self._waiting: deque[_QueuedParty] = deque()
        self._current_time = 0.0

        # Stats counters
        self._parties_admitted = 0
        self._patrons_admitted = 0
        self._patrons_departed = 0
        self._table_turns = 0
        self._peak_waiting_parties = 0
        self._peak_seated = 0
        self.wait_times = Data()

    # --- Read-only queries ---

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def tables(self) -> tuple[Table, ...]:
        return self._tables

    @property
    def ledger(self) -> SeatingLedger:
        return self._ledger

    @property
    def waiting_queue(self) -> tuple[Party, ...]:
        """Waiting parties, head first."""
        return tuple(q.party for q in self._waiting)

    @property
    def waiting_party_count(self) -> int:
        return len(self._waiting)

    @property
    def waiting_patron_count(self) -> int:
        return sum(q.party.size for q in self._waiting)

    @property
    def occupied_table_count(self) -> int:
        return sum(1 for t in self._tables if not t.is_empty)

    @property
    def total_seated_patrons(self) -> int:
        return sum(t.occupant_count for t in self._tables)

    @property
    def total_capacity(self) -> int:
        return sum(t.capacity for t in self._tables)

    @property
    def stats(self) -> RestaurantStats:
        """Frozen snapshot of current restaurant statistics."""
        seated = self.total_seated_patrons
        return RestaurantStats(
            name=self.name,
            current_time=self._current_time,
            tables=len(self._tables),
            total_capacity=self.total_capacity,
            occupied_tables=self.occupied_table_count,
            seated=seated,
            waiting_parties=self.waiting_party_count,
            waiting_patrons=self.waiting_patron_count,
            parties_admitted=self._parties_admitted,
            patrons_admitted=self._patrons_admitted,
            patrons_departed=self._patrons_departed,
            table_turns=self._table_turns,
            total_wait_time=self.wait_times.sum(),
            peak_waiting_parties=self._peak_waiting_parties,
            peak_seated=self._peak_seated,
            utilization=seated / self.total_capacity,
        )

    def check_invariants(self) -> None:
        """Raise SeatingError if the seating relation or capacities are broken."""
        waiting_people = (p for q in self._waiting for p in q.party)
        self._ledger.verify(self._tables, waiting_people)

    # --- Queue and admission ---

    def enqueue(self, party: Party) -> None:
        """Append ``party`` to the tail of the waiting queue. The queue is unbounded."""
        self._waiting.append(_QueuedParty(party=party, enqueued_at=self._current_time))
        self._peak_waiting_parties = max(self._peak_waiting_parties, len(self._waiting))
        logger.debug(
            "[%s] t=%s enqueued %r (queue depth %d)",
            self.name, self._current_time, party, len(self._waiting),
        )

    def find_available_table(self, party_size: int) -> Table | None:
        """First empty table, in list order, with at least ``party_size`` seats."""
        for table in self._tables:
            if table.is_empty and table.capacity >= party_size:
                return table
        return None

    def admit_party(self, party: Party) -> bool:
        """Seat the whole of ``party`` at an available table.

        Does not touch the waiting queue.

        Returns:
            True if seated; False if no empty table is large enough.

        Raises:
            SeatingError: If seating fails after a table was found. This
                means the seating relation is already inconsistent.
        """
        table = self.find_available_table(party.size)
        if table is None:
            return False
        self._ledger.seat_party(party, table, now=self._current_time)
        self._parties_admitted += 1
        self._patrons_admitted += party.size
        self._peak_seated = max(self._peak_seated, self._ledger.seated_count)
        logger.debug("[%s] t=%s seated %r at table %s", self.name, self._current_time, party, table.id)
        return True

    # --- Tick phases ---

    def advance_clock(self, time_step: float) -> None:
        """Move the clock forward by ``time_step``.

        Raises:
            InvalidTimeStepError: If time_step is not positive.
        """
        if time_step <= 0:
            raise InvalidTimeStepError(f"time_step must be > 0, got {time_step}")
        self._current_time += time_step

    def evict_due_patrons(self) -> tuple[Person, ...]:
        """Clear every table whose slowest diner has finished.

        A table leaves as a group: it is cleared once the clock reaches
        the longest ``actual_dining_time`` among its occupants, and never
        before, even for members who finished earlier. The comparison is
        against the absolute clock, not the time spent at the table, so a
        group seated late in service can leave on the very next tick.

        Returns:
            Everyone who left, so callers can count departures directly.
        """
        departed: list[Person] = []
        for table in self._tables:
            if table.is_empty:
                continue
            longest = max(p.actual_dining_time for p in table.occupants)
            if self._current_time >= longest:
                departed.extend(self._ledger.evict_all(table))
                self._table_turns += 1
        self._patrons_departed += len(departed)
        return tuple(departed)

    def admit_waiting_parties(self) -> tuple[Party, ...]:
        """Seat queued parties in arrival order until the head cannot be seated.

        Returns:
            The parties admitted, in queue order.
        """
        admitted: list[Party] = []
        while self._waiting:
            head = self._waiting[0]
            if not self.admit_party(head.party):
                logger.debug(
                    "[%s] t=%s head of line %r blocked, %d party(ies) behind it",
                    self.name, self._current_time, head.party, len(self._waiting) - 1,
                )
                break
            self._waiting.popleft()
            self.wait_times.add_stat(self._current_time - head.enqueued_at, self._current_time)
            admitted.append(head.party)
        return tuple(admitted)

    def step(self, time_step: float) -> StepResult:
        """Run one tick: advance the clock, evict, then admit."""
        self.advance_clock(time_step)
        departed = self.evict_due_patrons()
        seated = self.admit_waiting_parties()
        return StepResult(time=self._current_time, departed=departed, seated=seated)

    def run(self, duration: float, time_step: float) -> list[StepResult]:
        """Step until the clock reaches ``duration``.

        At least one step always runs, including when ``duration`` is 0 or
        the clock is already past it.

        Raises:
            ValueError: If duration is negative.
            InvalidTimeStepError: If time_step is not positive.
        """
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        results = [self.step(time_step)]
        while self._current_time < duration:
            results.append(self.step(time_step))
        return results

    def __repr__(self) -> str:
        return (
            f"Restaurant({self.name!r}, t={self._current_time}, "
            f"occupied={self.occupied_table_count}/{len(self._tables)}, "
            f"waiting={self.waiting_party_count})"
        )
