"""Uniform random sources.

The engine never imports ``random`` directly. Anything that needs
randomness receives a :class:`Randomizer`, so tests can substitute a
scripted sequence and runs with the same seed replay exactly.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Randomizer(Protocol):
    """Source of uniform floats in [0, 1)."""

    def float(self) -> float: ...


class SeededRandomizer:
    """Randomizer backed by a private ``random.Random`` instance.

    Each instance owns its own generator state, so two simulations in the
    same process never perturb each other. String and int seeds are both
    accepted; equal seeds produce equal streams.
    """

    def __init__(self, seed: int | str | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def create_from_seed(cls, seed: int | str) -> SeededRandomizer:
        return cls(seed)

    @property
    def seed(self) -> int | str | None:
        return self._seed

    def float(self) -> float:
        return self._rng.random()

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], derived from a single ``float()`` draw."""
        return uniform_int(self, low, high)


class SequenceRandomizer:
    """Replays a fixed list of samples; raises once it runs out.

    Intended for tests and worked examples where every draw must be known.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        for v in self._values:
            if not (0.0 <= v < 1.0):
                raise ValueError(f"samples must be in [0, 1), got {v}")
        self._index = 0

    @property
    def draws(self) -> int:
        return self._index

    def float(self) -> float:
        if self._index >= len(self._values):
            raise IndexError(f"SequenceRandomizer exhausted after {self._index} draws")
        value = self._values[self._index]
        self._index += 1
        return value


def uniform_int(randomizer: Randomizer, low: int, high: int) -> int:
    """Uniform integer in [low, high] using one draw from ``randomizer``."""
    if low > high:
        raise ValueError(f"low must be <= high, got {low} > {high}")
    return low + min(int(randomizer.float() * (high - low + 1)), high - low)
