"""An individual patron."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dinersim.load.randomizer import Randomizer
    from dinersim.model.dining_time import DiningTime
    from dinersim.model.table import Table


class Person:
    """A patron with a fixed dining duration.

    The actual dining duration is sampled exactly once, at construction,
    by drawing a single ``float()`` from the randomizer and interpolating
    the person's DiningTime with it.

    ``seated_at`` is read-only here. It is written only by
    :class:`~dinersim.core.seating.SeatingLedger`, together with the
    table's occupant list, so the two sides never disagree.

    Attributes:
        id: Unique patron identifier.
        name: Display name.
        age: Age in years.
        dining_time: The range the duration was drawn from.
        actual_dining_time: The sampled duration.
    """

    __slots__ = ("id", "name", "age", "dining_time", "actual_dining_time", "_seated_at")

    def __init__(
        self,
        id: int,
        name: str,
        age: int,
        dining_time: DiningTime,
        randomizer: Randomizer,
    ) -> None:
        self.id = id
        self.name = name
        self.age = age
        self.dining_time = dining_time
        self.actual_dining_time = dining_time.interpolate(randomizer.float())
        self._seated_at: Table | None = None

    @property
    def seated_at(self) -> Table | None:
        """The table this person currently occupies, or None."""
        return self._seated_at

    @property
    def is_seated(self) -> bool:
        return self._seated_at is not None

    def __repr__(self) -> str:
        where = f"table {self._seated_at.id}" if self._seated_at is not None else "unseated"
        return f"Person(id={self.id}, name={self.name!r}, dining={self.actual_dining_time:.1f}, {where})"
