"""
Performance Calculator Calculations Module
==========================================

Pure functions for the physical models. Inputs and outputs are plain
floats; none of these functions raise for finite inputs.
"""

from .atmosphere import calc_pressure, calc_air_density

from .electrical import (
    BatteryLoadState,
    WireLoss,
    calc_motor_rpm,
    calc_battery_voltage_under_load,
    calc_wire_resistance,
    calc_wire_loss,
    calc_resistive_loss,
    calc_motor_elec_power,
    calc_motor_efficiency,
    calc_motor_current,
)

from .propulsion import (
    PropCoefficients,
    calc_thrust,
    calc_prop_power,
    estimate_prop_coefficients,
    calc_coaxial_factor,
)

from .thermal import calc_steady_state_rise, calc_motor_temp

from .performance import (
    calc_hover_throttle,
    calc_flight_time,
    calc_thrust_to_weight_ratio,
    calc_system_efficiency,
    calc_max_prop_diameter_mm,
)

__all__ = [
    # Atmosphere
    "calc_pressure",
    "calc_air_density",
    # Electrical
    "BatteryLoadState",
    "WireLoss",
    "calc_motor_rpm",
    "calc_battery_voltage_under_load",
    "calc_wire_resistance",
    "calc_wire_loss",
    "calc_resistive_loss",
    "calc_motor_elec_power",
    "calc_motor_efficiency",
    "calc_motor_current",
    # Propulsion
    "PropCoefficients",
    "calc_thrust",
    "calc_prop_power",
    "estimate_prop_coefficients",
    "calc_coaxial_factor",
    # Thermal
    "calc_steady_state_rise",
    "calc_motor_temp",
    # Performance
    "calc_hover_throttle",
    "calc_flight_time",
    "calc_thrust_to_weight_ratio",
    "calc_system_efficiency",
    "calc_max_prop_diameter_mm",
]
