"""
Performance Curves
==================

Sweeps derived from a simulation result, used for the dashboard charts:

- Thrust per motor vs throttle
- Propeller efficiency (g/W) vs throttle
- Hover flight time vs added payload

Each function is a pure function of the configuration and its result and
returns a PerformanceCurve holding numpy arrays.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import numpy as np
import pandas as pd

from .config import (
    GRAVITY,
    INCH_TO_M,
    DEFAULT_CONFIG,
    DEFAULT_MOTOR_COUNT,
    DEFAULT_PROP_DIAMETER_IN,
    DEFAULT_DISCHARGE_DEPTH_PCT,
    PerformanceCalculatorConfig,
)
from .models.components import DroneConfiguration, as_number
from .models.results import SimulationResult
from .calculations.propulsion import calc_thrust, calc_prop_power, calc_coaxial_factor
from .calculations.performance import calc_hover_throttle, calc_flight_time


# Payload sweeps only keep plausible flight times (minutes)
MAX_CHART_FLIGHT_TIME_MIN = 120.0


@dataclass(frozen=True)
class PerformanceCurve:
    """
    A named x/y series with an optional highlighted operating point.

    Attributes:
    ----------
    name : str
        Curve title

    x, y : np.ndarray
        Sample points

    x_label, y_label : str
        Axis labels with units

    marker_x, marker_y : float, optional
        Operating point to highlight (hover throttle, configured payload)
    """
    name: str
    x: np.ndarray
    y: np.ndarray
    x_label: str
    y_label: str
    marker_x: Optional[float] = None
    marker_y: Optional[float] = None

    def __len__(self) -> int:
        return len(self.x)

    @property
    def has_marker(self) -> bool:
        return self.marker_x is not None and self.marker_y is not None

    def to_frame(self) -> pd.DataFrame:
        """Samples as a two-column DataFrame named after the axis labels."""
        return pd.DataFrame({self.x_label: self.x, self.y_label: self.y})


def _prop_diameter_m(drone: DroneConfiguration) -> float:
    return (as_number(drone.propeller.diameter_in) or DEFAULT_PROP_DIAMETER_IN) * INCH_TO_M


def _thrust_g(ct: float, rho: float, rps, diameter_m: float):
    return calc_thrust(ct, rho, rps, diameter_m) / GRAVITY * 1000.0


def thrust_vs_throttle(
    drone: Union[DroneConfiguration, Mapping[str, Any]],
    result: SimulationResult,
    step: float = 5
) -> PerformanceCurve:
    """
    Static thrust per motor from 0 to 100% throttle.

    Motor speed is taken as max RPM scaled linearly by throttle. The marker
    sits at the hover throttle.
    """
    drone = DroneConfiguration.from_dict(drone)
    diameter_m = _prop_diameter_m(drone)

    throttle = np.arange(0.0, 100.0 + step / 2, step)
    rps = result.max_rpm * (throttle / 100.0) / 60.0
    thrust = _thrust_g(result.ct, result.air_density, rps, diameter_m)

    hover_rps = result.max_rpm * (result.hover_throttle / 100.0) / 60.0
    return PerformanceCurve(
        name="Thrust vs Throttle",
        x=throttle,
        y=thrust,
        x_label="Throttle (%)",
        y_label="Thrust per motor (g)",
        marker_x=result.hover_throttle,
        marker_y=float(_thrust_g(result.ct, result.air_density, hover_rps, diameter_m)),
    )


def efficiency_vs_throttle(
    drone: Union[DroneConfiguration, Mapping[str, Any]],
    result: SimulationResult,
    step: float = 5
) -> PerformanceCurve:
    """
    Propeller efficiency (grams of thrust per shaft watt) from 10 to 100%.

    Efficiency falls with throttle since thrust grows with n² but power
    with n³. Points with no shaft power are reported as 0.
    """
    drone = DroneConfiguration.from_dict(drone)
    diameter_m = _prop_diameter_m(drone)

    throttle = np.arange(10.0, 100.0 + step / 2, step)
    rps = result.max_rpm * (throttle / 100.0) / 60.0
    thrust = _thrust_g(result.ct, result.air_density, rps, diameter_m)
    power = calc_prop_power(result.cp, result.air_density, rps, diameter_m)

    efficiency = np.zeros_like(throttle)
    np.divide(thrust, power, out=efficiency, where=power > 0)

    return PerformanceCurve(
        name="Propeller Efficiency vs Throttle",
        x=throttle,
        y=efficiency,
        x_label="Throttle (%)",
        y_label="Efficiency (g/W)",
    )


def flight_time_vs_payload(
    drone: Union[DroneConfiguration, Mapping[str, Any]],
    result: SimulationResult,
    max_payload_g: float = 2000,
    step: float = 100,
    config: Optional[PerformanceCalculatorConfig] = None
) -> PerformanceCurve:
    """
    Hover flight time as payload is added to the configured vehicle.

    Hover current is scaled from the simulated hover point by
    (throttle / hover throttle)^1.5. Only flight times between 0 and
    120 minutes are kept. The marker sits at the configured payload.

    Parameters:
    ----------
    drone : DroneConfiguration or mapping
        Configuration that produced the result

    result : SimulationResult
        Simulation of the configuration

    max_payload_g : float
        Largest added payload (g)

    step : float
        Payload increment (g)

    config : PerformanceCalculatorConfig, optional
        Supplies the coaxial factor

    Returns:
    -------
    PerformanceCurve
        Added payload (g) against flight time (min)
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    drone = DroneConfiguration.from_dict(drone)

    num_motors = as_number(drone.frame.motor_count) or DEFAULT_MOTOR_COUNT
    coax_factor = calc_coaxial_factor(drone.frame.is_coaxial, cfg.coaxial_factor)
    max_thrust_per_motor_n = (result.max_total_thrust_g / 1000.0 * GRAVITY) / num_motors
    discharge = (as_number(drone.battery.discharge_depth) or DEFAULT_DISCHARGE_DEPTH_PCT) / 100.0
    hover_fraction = result.hover_throttle / 100.0

    payloads = []
    times = []
    if hover_fraction > 0:
        for payload in np.arange(0.0, max_payload_g + step / 2, step):
            total_kg = result.total_weight_kg + payload / 1000.0
            throttle = calc_hover_throttle(
                total_kg, num_motors, max_thrust_per_motor_n, coax_factor
            ) / 100.0
            ratio = throttle / hover_fraction
            current = result.hover_total_current * ratio * math.sqrt(ratio)
            flight_time = calc_flight_time(result.total_capacity_mah, discharge, current)
            if 0 < flight_time < MAX_CHART_FLIGHT_TIME_MIN:
                payloads.append(payload)
                times.append(flight_time)

    x = np.array(payloads, dtype=float)
    y = np.array(times, dtype=float)

    marker_x = as_number(drone.frame.payload_weight) or 0.0
    marker_y = float(np.interp(marker_x, x, y)) if len(x) else None

    return PerformanceCurve(
        name="Flight Time vs Payload",
        x=x,
        y=y,
        x_label="Added payload (g)",
        y_label="Flight time (min)",
        marker_x=marker_x,
        marker_y=marker_y,
    )
