"""
Debug Trace Functions
=====================

Run a simulation with every input, constant and intermediate value
recorded for hand verification.
"""

from typing import Any, Mapping, Optional, Tuple, Union

from .debugger import CalculationDebugger
from .config import (
    GRAVITY,
    SEA_LEVEL_PRESSURE,
    SEA_LEVEL_TEMP,
    LAPSE_RATE,
    AIR_GAS_CONSTANT,
    PerformanceCalculatorConfig,
    DEFAULT_CONFIG,
)
from .models.components import DroneConfiguration
from .models.results import SimulationResult
from .simulation import run_full_simulation


# (section, field, symbol, unit) of the inputs listed at the top of a trace
_TRACED_INPUTS = [
    ("environment", "altitude", "h", "m"),
    ("environment", "temperature", "T_ambient", "°C"),
    ("frame", "motor_count", "N", "motors"),
    ("frame", "layout", "layout", ""),
    ("frame", "frame_weight", "m_frame", "g"),
    ("frame", "payload_weight", "m_payload", "g"),
    ("frame", "payload_current", "I_payload", "A"),
    ("frame", "wheelbase_mm", "wheelbase", "mm"),
    ("battery", "chemistry", "chemistry", ""),
    ("battery", "cells_s", "S", "cells"),
    ("battery", "cells_p", "P", "cells"),
    ("battery", "capacity_mah", "C_cell", "mAh"),
    ("battery", "c_rating", "C_rating", "C"),
    ("battery", "burst_c", "C_burst", "C"),
    ("battery", "internal_resistance_mohm", "R_cell", "mΩ"),
    ("battery", "weight_g", "m_battery", "g"),
    ("battery", "discharge_depth", "DoD", "%"),
    ("motor", "kv", "Kv", "RPM/V"),
    ("motor", "resistance", "Rm", "Ω"),
    ("motor", "no_load_current", "I0", "A"),
    ("motor", "max_current", "I_motor_max", "A"),
    ("motor", "weight_g", "m_motor", "g"),
    ("motor", "thermal_resistance", "R_th", "°C/W"),
    ("esc", "continuous_a", "I_esc", "A"),
    ("esc", "resistance_mohm", "R_esc", "mΩ"),
    ("esc", "wire_awg", "AWG", ""),
    ("esc", "wire_length_cm", "L_wire", "cm"),
    ("propeller", "diameter_in", "D", "in"),
    ("propeller", "pitch_in", "pitch", "in"),
    ("propeller", "blades", "blades", ""),
    ("propeller", "ct", "Ct_measured", ""),
    ("propeller", "cp", "Cp_measured", ""),
]


def trace_simulation(
    drone: Union[DroneConfiguration, Mapping[str, Any]],
    config: Optional[PerformanceCalculatorConfig] = None
) -> Tuple[SimulationResult, CalculationDebugger]:
    """
    Run a full simulation and record every calculation step.

    Inputs are recorded as given, before defaults are applied; the
    calculation steps show the values actually used.

    Parameters:
    ----------
    drone : DroneConfiguration or mapping
        Configuration to simulate

    config : PerformanceCalculatorConfig, optional
        Model assumptions and thresholds

    Returns:
    -------
    tuple[SimulationResult, CalculationDebugger]
        The result and the debugger holding the trace
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    drone = DroneConfiguration.from_dict(drone)

    debugger = CalculationDebugger()
    debugger.start(
        battery=drone.battery.configuration_string,
        motor=f"{drone.motor.kv}Kv" if drone.motor.kv else "default",
        propeller=f"{drone.propeller.diameter_in}x{drone.propeller.pitch_in}",
        frame=f"{drone.frame.motor_count} motors, {drone.frame.layout.value}",
    )

    debugger.start_section("INPUT PARAMETERS")
    for section, name, symbol, unit in _TRACED_INPUTS:
        value = getattr(getattr(drone, section), name)
        if hasattr(value, "value"):
            value = value.value
        debugger.add_input(symbol, value, unit, description=f"{section}.{name}")

    debugger.start_section("CONSTANTS AND ASSUMPTIONS")
    debugger.add_constant("g", GRAVITY, "m/s²")
    debugger.add_constant("P0", SEA_LEVEL_PRESSURE, "Pa", "Sea level pressure")
    debugger.add_constant("T0", SEA_LEVEL_TEMP, "K", "Sea level temperature")
    debugger.add_constant("L", LAPSE_RATE, "K/m", "Temperature lapse rate")
    debugger.add_constant("R_air", AIR_GAS_CONSTANT, "J/(kg·K)", "Specific gas constant of air")
    debugger.add_constant("eta_motor", cfg.assumed_motor_efficiency, "",
                          "Assumed motor efficiency for current estimate")
    debugger.add_constant("k_coax", cfg.coaxial_factor, "", "Coaxial thrust factor")
    debugger.add_constant("tau", cfg.thermal_time_constant_s, "s", "Motor thermal time constant")

    result = run_full_simulation(drone, config=cfg, debugger=debugger)

    debugger.start_section("VALIDATION")
    for passed, label in result.checklist():
        debugger.add_step(
            category="Validation",
            description=label,
            result="PASS" if passed else "FAIL",
            result_name="check",
        )

    debugger.finish()
    return result, debugger
