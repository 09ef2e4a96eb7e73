"""Per-tick trace of a simulation run.

A trace holds one :class:`TickRecord` per tick. Two runs with the same
seed, arrivals and tables produce equal traces, which is how determinism
is checked.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

import pandas as pd


@dataclass(frozen=True)
class TickRecord:
    """Restaurant state at the end of one tick.

    Attributes:
        time: Clock value after the tick.
        arrived_party_size: Size of the party that arrived this tick, 0 if none.
        departed: People who left this tick.
        parties_seated: Parties admitted this tick.
        patrons_seated: People admitted this tick.
        occupied_tables: Tables with occupants after the tick.
        seated: People seated after the tick.
        waiting_patrons: People queued after the tick.
        waiting_parties: Parties queued after the tick.
        departed_ids: Ids of the people who left, in eviction order.
        seated_ids: Ids of the people admitted, in seating order.
    """

    time: float
    arrived_party_size: int
    departed: int
    parties_seated: int
    patrons_seated: int
    occupied_tables: int
    seated: int
    waiting_patrons: int
    waiting_parties: int
    departed_ids: tuple[int, ...] = ()
    seated_ids: tuple[int, ...] = ()


@dataclass
class SimulationTrace:
    """Ordered tick records for a run."""

    records: list[TickRecord] = field(default_factory=list)

    def append(self, record: TickRecord) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, index: int) -> TickRecord:
        return self.records[index]

    def column(self, name: str) -> list:
        return [getattr(r, name) for r in self.records]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per tick, one column per TickRecord field."""
        columns = [f.name for f in fields(TickRecord)]
        return pd.DataFrame([asdict(r) for r in self.records], columns=columns)

    def to_csv(self, path: str | Path) -> Path:
        """Write the trace as CSV. Parent directories are created automatically."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_dataframe().to_csv(path, index=False)
        return path
