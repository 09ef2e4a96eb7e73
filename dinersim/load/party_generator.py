"""Stochastic party arrivals.

PartyGenerator is the default :class:`PartySource`. On each call it flips
a biased coin (``arrival_rate``) to decide whether a party arrives; if one
does, it draws the party size and, for each member, an age, a name and a
dining duration. Every draw comes from the injected randomizer, so a run
is fully determined by its seed.
"""

from __future__ import annotations

import logging

from dinersim.config import PartyGeneratorConfig
from dinersim.load.randomizer import Randomizer, uniform_int
from dinersim.model.dining_time import DiningTime
from dinersim.model.party import Party
from dinersim.model.person import Person

logger = logging.getLogger(__name__)

FIRST_NAMES = (
    "Ada", "Ben", "Chloe", "Dev", "Elena", "Farid", "Grace", "Hiro",
    "Ines", "Jonas", "Kemi", "Luca", "Maya", "Noor", "Omar", "Priya",
    "Quinn", "Rosa", "Sami", "Tess", "Umar", "Vera", "Wen", "Yara",
)


class PartyGenerator:
    """Produces at most one newly arrived party per call.

    Patron ids are assigned sequentially starting at 1 and are unique for
    the lifetime of the generator. All people share one DiningTime built
    from the config bounds.

    Args:
        randomizer: Uniform sample source.
        config: Arrival and party parameters.
    """

    def __init__(self, randomizer: Randomizer, config: PartyGeneratorConfig | None = None):
        self._randomizer = randomizer
        self.config = config or PartyGeneratorConfig()
        self._dining_time = DiningTime(self.config.min_dining_time, self.config.max_dining_time)
        self._next_patron_id = 1
        self.parties_generated: int = 0

    @property
    def dining_time(self) -> DiningTime:
        return self._dining_time

    @property
    def next_patron_id(self) -> int:
        """Id the next generated person will receive."""
        return self._next_patron_id

    @property
    def patrons_generated(self) -> int:
        return self._next_patron_id - 1

    def generate_party(self) -> Party | None:
        if self._randomizer.float() >= self.config.arrival_rate:
            return None

        size = uniform_int(self._randomizer, self.config.min_party_size, self.config.max_party_size)
        party = Party(self._make_person() for _ in range(size))
        self.parties_generated += 1
        logger.debug("Generated %r", party)
        return party

    def _make_person(self) -> Person:
        patron_id = self._next_patron_id
        self._next_patron_id += 1
        age = uniform_int(self._randomizer, self.config.min_age, self.config.max_age)
        name = FIRST_NAMES[uniform_int(self._randomizer, 0, len(FIRST_NAMES) - 1)]
        return Person(
            id=patron_id,
            name=f"{name} #{patron_id}",
            age=age,
            dining_time=self._dining_time,
            randomizer=self._randomizer,
        )
