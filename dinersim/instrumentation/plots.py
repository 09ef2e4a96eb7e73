"""Matplotlib charts for simulation traces."""

from __future__ import annotations

from pathlib import Path

from dinersim.instrumentation.trace import SimulationTrace


def plot_trace(trace: SimulationTrace, path: str | Path, title: str = "Restaurant occupancy") -> Path:
    """Save a chart of seated and waiting patrons over time.

    Uses the non-interactive Agg backend so it works without a display.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    times = trace.column("time")
    fig, (ax_people, ax_tables) = plt.subplots(2, 1, figsize=(10, 6), sharex=True)

    ax_people.plot(times, trace.column("seated"), label="Seated")
    ax_people.plot(times, trace.column("waiting_patrons"), label="Waiting")
    ax_people.set_ylabel("Patrons")
    ax_people.set_title(title)
    ax_people.legend()
    ax_people.grid(True, alpha=0.3)

    ax_tables.step(times, trace.column("occupied_tables"), where="post", label="Occupied tables")
    ax_tables.step(times, trace.column("waiting_parties"), where="post", label="Waiting parties")
    ax_tables.set_xlabel("Time")
    ax_tables.set_ylabel("Count")
    ax_tables.legend()
    ax_tables.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
