"""
Drone Performance Calculator Module
===================================

Physics-based performance estimator for multirotor drones. Given a
frame, battery, motors, ESCs and propellers it estimates hover and
full-throttle operating points, flight time, thrust-to-weight ratio,
electrical losses and motor temperature, and checks the design against
component limits.

Features:
---------
- ISA-based air density at altitude and ambient temperature
- Battery voltage sag from pack internal resistance
- Propeller thrust/power from measured or estimated Ct/Cp
- Coaxial layouts
- First-order motor thermal model
- Ten pass/fail design checks
- Performance curves, matplotlib charts and pandas comparison tables
- Step-by-step calculation trace

Usage:
------
    from src.performance_calculator import run_full_simulation, default_quad

    result = run_full_simulation(default_quad())
    print(result.summary())

    # Partial configurations are completed with defaults
    result = run_full_simulation({"battery": {"cellsS": 6, "capacityMah": 1300}})
"""

from .config import PerformanceCalculatorConfig, DEFAULT_CONFIG
from .models.components import (
    BatteryChemistry,
    FrameLayout,
    Environment,
    Frame,
    Battery,
    Motor,
    Esc,
    Propeller,
    DroneConfiguration,
)
from .models.results import (
    StatusLevel,
    Validations,
    SimulationResult,
    get_status,
    format_flight_time,
)
from .simulation import run_full_simulation
from .curves import (
    PerformanceCurve,
    thrust_vs_throttle,
    efficiency_vs_throttle,
    flight_time_vs_payload,
)
from .comparison import COMPARISON_METRICS, compare_results, best_configuration
from .plotting import PerformancePlotter
from .data.component_database import (
    BATTERY_DATABASE,
    MOTOR_DATABASE,
    PROPELLER_DATABASE,
    ESC_DATABASE,
    FRAME_PRESETS,
    ENVIRONMENT_PRESETS,
    get_battery,
    get_motor,
    get_propeller,
    get_esc,
    list_batteries,
    list_motors,
    list_propellers,
    list_escs,
    list_motors_for_cells,
    build_configuration,
    default_quad,
)
from .debugger import CalculationDebugger, CalculationStep
from .debug_trace import trace_simulation

__all__ = [
    # Simulation
    "run_full_simulation",
    "SimulationResult",
    "Validations",
    # Configuration
    "DroneConfiguration",
    "Environment",
    "Frame",
    "Battery",
    "Motor",
    "Esc",
    "Propeller",
    "PerformanceCalculatorConfig",
    "DEFAULT_CONFIG",
    # Enums
    "BatteryChemistry",
    "FrameLayout",
    "StatusLevel",
    # Summary helpers
    "get_status",
    "format_flight_time",
    # Curves, plots and comparison
    "PerformanceCurve",
    "thrust_vs_throttle",
    "efficiency_vs_throttle",
    "flight_time_vs_payload",
    "PerformancePlotter",
    "COMPARISON_METRICS",
    "compare_results",
    "best_configuration",
    # Database access
    "BATTERY_DATABASE",
    "MOTOR_DATABASE",
    "PROPELLER_DATABASE",
    "ESC_DATABASE",
    "FRAME_PRESETS",
    "ENVIRONMENT_PRESETS",
    "get_battery",
    "get_motor",
    "get_propeller",
    "get_esc",
    "list_batteries",
    "list_motors",
    "list_propellers",
    "list_escs",
    "list_motors_for_cells",
    "build_configuration",
    "default_quad",
    # Debugger
    "CalculationDebugger",
    "CalculationStep",
    "trace_simulation",
]
