"""Measurement and reporting components."""

from dinersim.instrumentation.data import Data
from dinersim.instrumentation.plots import plot_trace
from dinersim.instrumentation.summary import SimulationSummary
from dinersim.instrumentation.trace import SimulationTrace, TickRecord

__all__ = [
    "Data",
    "SimulationSummary",
    "SimulationTrace",
    "TickRecord",
    "plot_trace",
]
