"""A group of people who arrive, wait and sit together."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dinersim.errors import EmptyPartyError
from dinersim.model.person import Person


class Party:
    """Ordered, non-empty, fixed group of people.

    ``size`` is the member count and is what tables are matched against.

    Raises:
        EmptyPartyError: If no members are given.
        ValueError: If the same person is listed twice.
    """

    __slots__ = ("_members",)

    def __init__(self, members: Iterable[Person]) -> None:
        members = tuple(members)
        if not members:
            raise EmptyPartyError("a party needs at least one member")
        if len({id(m) for m in members}) != len(members):
            raise ValueError("a person may appear only once in a party")
        self._members = members

    @property
    def members(self) -> tuple[Person, ...]:
        return self._members

    @property
    def size(self) -> int:
        """Number of people in the party."""
        return len(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._members)

    def __repr__(self) -> str:
        ids = ", ".join(str(m.id) for m in self._members)
        return f"Party(size={self.size}, members=[{ids}])"
