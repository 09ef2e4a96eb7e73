"""Arrival and randomness sources for simulations."""

from dinersim.load.party_generator import PartyGenerator
from dinersim.load.party_source import PartySource, ScheduledPartySource
from dinersim.load.randomizer import (
    Randomizer,
    SeededRandomizer,
    SequenceRandomizer,
    uniform_int,
)

__all__ = [
    "PartyGenerator",
    "PartySource",
    "Randomizer",
    "ScheduledPartySource",
    "SeededRandomizer",
    "SequenceRandomizer",
    "uniform_int",
]
