"""Single owner of the person <-> table seating relation.

A person's ``seated_at`` and a table's occupant list describe the same
fact from two sides. SeatingLedger is the only code that writes either
side, and every write updates both before returning, so after any ledger
call ``person.seated_at is table`` holds exactly when ``table`` lists
``person``.

The private seating state of the model objects belongs to this module:
``Table._occupants``, ``Table._seated_since`` and ``Person._seated_at``
are set up by the model constructors and written only by this module.
The model classes expose them through read-only properties.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dinersim.errors import (
    AlreadySeatedError,
    NotSeatedError,
    SeatingError,
    TableFullError,
)
from dinersim.model.party import Party
from dinersim.model.person import Person
from dinersim.model.table import Table

logger = logging.getLogger(__name__)


class SeatingLedger:
    """Performs every seat and unseat as one atomic update of both sides."""

    def __init__(self) -> None:
        self._seated_count = 0

    @property
    def seated_count(self) -> int:
        """Number of people currently seated through this ledger."""
        return self._seated_count

    def try_admit(self, person: Person, table: Table, now: float = 0.0) -> bool:
        """Seat ``person`` if ``table`` has a free seat.

        Returns:
            True if seated, False if the table is full. A rejected call
            changes nothing.

        Raises:
            AlreadySeatedError: If the person is already seated anywhere.
        """
        self._require_unseated(person)
        if table.is_full:
            return False
        self._link(person, table, now)
        return True

    def seat(self, person: Person, table: Table, now: float = 0.0) -> None:
        """Seat ``person`` at ``table``.

        Raises:
            AlreadySeatedError: If the person is already seated anywhere.
            TableFullError: If the table has no free seat.
        """
        if not self.try_admit(person, table, now):
            raise TableFullError(f"Table {table.id} is full ({table.capacity} seats)")

    def seat_party(self, party: Party, table: Table, now: float = 0.0) -> None:
        """Seat every member of ``party`` at an empty ``table``.

        All checks run before the first member is seated, so a failure
        leaves the relation untouched rather than half a party at a table.

        Raises:
            AlreadySeatedError: If any member is already seated.
            TableFullError: If the table is not empty or is too small.
        """
        for person in party:
            self._require_unseated(person)
        if not table.is_empty:
            raise TableFullError(
                f"Table {table.id} already holds {table.occupant_count} patron(s); "
                "parties do not share tables"
            )
        if party.size > table.capacity:
            raise TableFullError(
                f"Table {table.id} seats {table.capacity}, party has {party.size}"
            )
        for person in party:
            self._link(person, table, now)

    def unseat(self, person: Person) -> Table:
        """Remove ``person`` from their table and return that table.

        Raises:
            NotSeatedError: If the person is not seated, or their table
                does not list them.
        """
        table = person.seated_at
        if table is None:
            raise NotSeatedError(f"{person.name} is not seated")
        if not table.holds(person):
            logger.error("%s claims table %s but is not among its occupants", person.name, table.id)
            raise NotSeatedError(f"{person.name} is not among the occupants of table {table.id}")
        self._unlink(person, table)
        if table.is_empty:
            table._seated_since = None
        return table

    def evict_all(self, table: Table) -> tuple[Person, ...]:
        """Clear ``table`` and every evicted person's ``seated_at`` together.

        Returns:
            The evicted people in the order they were seated.

        Raises:
            SeatingError: If an occupant does not point back at this table.
        """
        evicted = table.occupants
        for person in evicted:
            if person.seated_at is not table:
                logger.error(
                    "Occupant %s of table %s points at %r", person.name, table.id, person.seated_at
                )
                raise SeatingError(
                    f"{person.name} sits at table {table.id} but is recorded at {person.seated_at!r}"
                )
        for person in evicted:
            self._unlink(person, table)
        table._seated_since = None
        if evicted:
            logger.debug("Table %s cleared: %d patron(s) left", table.id, len(evicted))
        return evicted

    def verify(self, tables: Iterable[Table], people: Iterable[Person] = ()) -> None:
        """Check the bidirectional and capacity invariants.

        Every occupant of every table must point back at it, no person may
        appear at two tables, and no table may exceed its capacity. Any
        extra ``people`` given must either be unseated or be listed by the
        table they point at.

        Raises:
            SeatingError: On the first violation found.
        """
        seen: dict[int, Table] = {}
        for table in tables:
            if table.occupant_count > table.capacity:
                raise SeatingError(
                    f"Table {table.id} holds {table.occupant_count} of {table.capacity} seats"
                )
            for person in table.occupants:
                if id(person) in seen:
                    raise SeatingError(
                        f"{person.name} listed at tables {seen[id(person)].id} and {table.id}"
                    )
                seen[id(person)] = table
                if person.seated_at is not table:
                    raise SeatingError(
                        f"{person.name} listed at table {table.id} but recorded at {person.seated_at!r}"
                    )
        for person in people:
            table = person.seated_at
            if table is not None and seen.get(id(person)) is not table:
                raise SeatingError(f"{person.name} recorded at table {table.id} but not listed there")

    def _require_unseated(self, person: Person) -> None:
        if person.seated_at is not None:
            raise AlreadySeatedError(
                f"{person.name} is already sitting at table {person.seated_at.id}"
            )

    def _link(self, person: Person, table: Table, now: float) -> None:
        if table.is_empty:
            table._seated_since = now
        table._occupants.append(person)
        person._seated_at = table
        self._seated_count += 1

    def _unlink(self, person: Person, table: Table) -> None:
        table._occupants.remove(person)
        person._seated_at = None
        self._seated_count -= 1
