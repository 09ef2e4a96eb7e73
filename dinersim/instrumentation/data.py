"""Time-stamped sample storage.

The restaurant records one sample per admitted party: the time it was
seated and how long it waited in the queue. Reports need the mean, the
worst case, a high percentile and the total.
"""

from __future__ import annotations

import pandas as pd


class Data:
    """``(time, value)`` samples in the order they were recorded."""

    def __init__(self) -> None:
        self._samples: list[tuple[float, float]] = []

    def add_stat(self, value: float, time: float) -> None:
        """Record ``value`` observed at simulation time ``time``."""
        self._samples.append((float(time), value))

    @property
    def values(self) -> list[tuple[float, float]]:
        return self._samples

    def mean(self) -> float:
        """Mean of the sample values; 0.0 when nothing was recorded."""
        if not self._samples:
            return 0.0
        return sum(v for _, v in self._samples) / len(self._samples)

    def max(self) -> float:
        return max((v for _, v in self._samples), default=0.0)

    def percentile(self, p: float) -> float:
        """Linearly interpolated percentile for ``p`` in [0, 1]; 0.0 when empty."""
        ordered = sorted(v for _, v in self._samples)
        if not ordered:
            return 0.0
        if p <= 0:
            return float(ordered[0])
        if p >= 1:
            return float(ordered[-1])
        pos = p * (len(ordered) - 1)
        lo = int(pos)
        hi = min(lo + 1, len(ordered) - 1)
        frac = pos - lo
        return float(ordered[lo] * (1.0 - frac) + ordered[hi] * frac)

    def count(self) -> int:
        return len(self._samples)

    def sum(self) -> float:
        return sum(v for _, v in self._samples)

    def to_dataframe(self, value_name: str = "value") -> pd.DataFrame:
        """Samples as a two-column DataFrame: ``time`` and ``value_name``."""
        return pd.DataFrame(self._samples, columns=["time", value_name])

    def __len__(self) -> int:
        return len(self._samples)

    def __bool__(self) -> bool:
        return bool(self._samples)
