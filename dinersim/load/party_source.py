"""Party source capability and a scripted implementation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from dinersim.model.party import Party


@runtime_checkable
class PartySource(Protocol):
    """Anything that can be polled once per tick for a newly arrived party."""

    def generate_party(self) -> Party | None: ...


class ScheduledPartySource:
    """Returns a fixed sequence of arrivals, one entry per call.

    ``None`` entries are ticks with no arrival. Once the schedule is used
    up every further call returns ``None``.
    """

    def __init__(self, schedule: Iterable[Party | None]) -> None:
        self._schedule = list(schedule)
        self._index = 0

    @property
    def remaining(self) -> int:
        return max(len(self._schedule) - self._index, 0)

    def generate_party(self) -> Party | None:
        if self._index >= len(self._schedule):
            return None
        party = self._schedule[self._index]
        self._index += 1
        return party
