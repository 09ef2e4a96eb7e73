"""Fixed-capacity table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dinersim.errors import InvalidCapacityError

if TYPE_CHECKING:
    from dinersim.model.person import Person


class Table:
    """A table with a fixed number of seats.

    Tables are passive: occupants are added and removed only by
    :class:`~dinersim.core.seating.SeatingLedger`, which updates each
    person's ``seated_at`` in the same operation. Everything public on this
    class is a query.

    Args:
        id: Unique table identifier.
        capacity: Number of seats (must be > 0).

    Raises:
        InvalidCapacityError: If capacity is not positive.
    """

    __slots__ = ("_id", "_capacity", "_occupants", "_seated_since")

    def __init__(self, id: int, capacity: int) -> None:
        if capacity <= 0:
            raise InvalidCapacityError(f"capacity must be > 0, got {capacity}")
        self._id = id
        self._capacity = capacity
        self._occupants: list[Person] = []
        self._seated_since: float | None = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def occupants(self) -> tuple[Person, ...]:
        """Snapshot of the people currently seated, in seating order."""
        return tuple(self._occupants)

    @property
    def occupant_count(self) -> int:
        return len(self._occupants)

    @property
    def seats_free(self) -> int:
        return self._capacity - len(self._occupants)

    @property
    def is_empty(self) -> bool:
        return not self._occupants

    @property
    def is_full(self) -> bool:
        return len(self._occupants) >= self._capacity

    @property
    def seated_since(self) -> float | None:
        """Simulation time the current group sat down; None when empty."""
        return self._seated_since

    def holds(self, person: Person) -> bool:
        return any(p is person for p in self._occupants)

    def __repr__(self) -> str:
        return f"Table(id={self._id}, {len(self._occupants)}/{self._capacity})"
