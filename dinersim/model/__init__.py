"""Passive entities of the dining model."""

from dinersim.model.dining_time import DiningTime
from dinersim.model.party import Party
from dinersim.model.person import Person
from dinersim.model.table import Table

__all__ = [
    "DiningTime",
    "Party",
    "Person",
    "Table",
]
