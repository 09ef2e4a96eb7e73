"""Summary generated after a simulation run completes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class SimulationSummary:
    """Totals for one run.

    Returned by Simulation.run() and also accessible via Simulation.summary.
    ``patrons_served`` counts departures as the engine reports them, so a
    table vacated and refilled in the same tick is counted in full.
    """
    duration: float
    ticks: int
    tables: int
    total_capacity: int
    parties_arrived: int
    patrons_arrived: int
    parties_seated: int
    patrons_seated: int
    patrons_served: int
    still_seated: int
    still_waiting_patrons: int
    still_waiting_parties: int
    table_turns: int
    mean_wait: float
    p90_wait: float
    max_wait: float
    peak_waiting_parties: int

    def __str__(self) -> str:
        lines = [
            "Simulation Summary (closing time)",
            f"  Duration: {self.duration:g} ({self.ticks} ticks)",
            f"  Tables: {self.tables} ({self.total_capacity} seats)",
            f"  Total patrons arrived: {self.patrons_arrived} in {self.parties_arrived} parties",
            f"  Patrons seated: {self.patrons_seated} in {self.parties_seated} parties",
            f"  Patrons served and left: {self.patrons_served}",
            f"  Still seated at closing: {self.still_seated}",
            f"  Turned away (still waiting): {self.still_waiting_patrons} "
            f"in {self.still_waiting_parties} parties",
            f"  Table turns: {self.table_turns}",
            f"  Wait: mean={self.mean_wait:.1f} p90={self.p90_wait:.1f} max={self.max_wait:.1f}",
            f"  Peak queue: {self.peak_waiting_parties} parties",
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "duration": self.duration,
            "ticks": self.ticks,
            "tables": self.tables,
            "total_capacity": self.total_capacity,
            "arrived": {"parties": self.parties_arrived, "patrons": self.patrons_arrived},
            "seated": {"parties": self.parties_seated, "patrons": self.patrons_seated},
            "patrons_served": self.patrons_served,
            "still_seated": self.still_seated,
            "still_waiting": {
                "parties": self.still_waiting_parties,
                "patrons": self.still_waiting_patrons,
            },
            "table_turns": self.table_turns,
            "wait": {"mean": self.mean_wait, "p90": self.p90_wait, "max": self.max_wait},
            "peak_waiting_parties": self.peak_waiting_parties,
        }
