"""
Performance Calculator Models
=============================

Component records, the complete drone configuration and simulation results.
"""

from .components import (
    BatteryChemistry,
    FrameLayout,
    Environment,
    Frame,
    Battery,
    Motor,
    Esc,
    Propeller,
    DroneConfiguration,
    INPUT_RANGES,
)
from .results import (
    StatusLevel,
    Validations,
    SimulationResult,
    get_status,
    format_flight_time,
)

__all__ = [
    "BatteryChemistry",
    "FrameLayout",
    "Environment",
    "Frame",
    "Battery",
    "Motor",
    "Esc",
    "Propeller",
    "DroneConfiguration",
    "INPUT_RANGES",
    "StatusLevel",
    "Validations",
    "SimulationResult",
    "get_status",
    "format_flight_time",
]
