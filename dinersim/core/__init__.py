"""Seating engine: the ledger that owns the seating relation and the restaurant loop."""

from dinersim.core.restaurant import Restaurant, RestaurantStats, StepResult
from dinersim.core.seating import SeatingLedger

__all__ = [
    "Restaurant",
    "RestaurantStats",
    "SeatingLedger",
    "StepResult",
]
