"""Exception types raised by dinersim.

Construction errors subclass ``ValueError`` so callers that already guard
argument validation with ``except ValueError`` keep working. Seating errors
subclass ``RuntimeError``: they mean the seating relation was asked to do
something that would break it, and they always propagate out of a tick.
"""

from __future__ import annotations

__all__ = [
    "AlreadySeatedError",
    "DinerSimError",
    "EmptyPartyError",
    "InvalidCapacityError",
    "InvalidRangeError",
    "InvalidTimeStepError",
    "NotSeatedError",
    "SeatingError",
    "TableFullError",
]


class DinerSimError(Exception):
    """Base class for every error raised by dinersim."""


class InvalidRangeError(DinerSimError, ValueError):
    """A DiningTime was given a lower bound above its upper bound."""


class InvalidCapacityError(DinerSimError, ValueError):
    """A Table was given a capacity that is not positive."""


class EmptyPartyError(DinerSimError, ValueError):
    """A Party was constructed without members."""


class InvalidTimeStepError(DinerSimError, ValueError):
    """The clock was asked to advance by a non-positive amount."""


class SeatingError(DinerSimError, RuntimeError):
    """The person/table seating relation is, or would become, inconsistent."""


class AlreadySeatedError(SeatingError):
    """Attempted to seat a person who is already seated somewhere."""


class TableFullError(SeatingError):
    """Attempted to seat a person at a table with no free seat."""


class NotSeatedError(SeatingError):
    """Attempted to unseat a person the seating relation does not place at a table."""
