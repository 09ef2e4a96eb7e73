"""dinersim: time-stepped simulation of a seated-dining restaurant.

Tables of fixed capacity, parties arriving over time, a first-come
first-served waiting queue, and departures once the slowest diner at a
table has finished.
"""

import logging

from dinersim.config import PartyGeneratorConfig, SimulationConfig
from dinersim.core import Restaurant, RestaurantStats, SeatingLedger, StepResult
from dinersim.errors import (
    AlreadySeatedError,
    DinerSimError,
    EmptyPartyError,
    InvalidCapacityError,
    InvalidRangeError,
    InvalidTimeStepError,
    NotSeatedError,
    SeatingError,
    TableFullError,
)
from dinersim.instrumentation import (
    Data,
    SimulationSummary,
    SimulationTrace,
    TickRecord,
    plot_trace,
)
from dinersim.load import (
    PartyGenerator,
    PartySource,
    Randomizer,
    ScheduledPartySource,
    SeededRandomizer,
    SequenceRandomizer,
)
from dinersim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_module_level,
)
from dinersim.model import DiningTime, Party, Person, Table
from dinersim.simulation import Simulation

logging.getLogger("dinersim").addHandler(logging.NullHandler())

__all__ = [
    # Model
    "DiningTime",
    "Party",
    "Person",
    "Table",
    # Engine
    "Restaurant",
    "RestaurantStats",
    "SeatingLedger",
    "StepResult",
    "Simulation",
    # Configuration
    "PartyGeneratorConfig",
    "SimulationConfig",
    # Load
    "PartyGenerator",
    "PartySource",
    "Randomizer",
    "ScheduledPartySource",
    "SeededRandomizer",
    "SequenceRandomizer",
    # Instrumentation
    "Data",
    "SimulationSummary",
    "SimulationTrace",
    "TickRecord",
    "plot_trace",
    # Errors
    "AlreadySeatedError",
    "DinerSimError",
    "EmptyPartyError",
    "InvalidCapacityError",
    "InvalidRangeError",
    "InvalidTimeStepError",
    "NotSeatedError",
    "SeatingError",
    "TableFullError",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_module_level",
]
