"""
Flight Performance Calculations
===============================

Whole-vehicle figures derived from the component models:
- Hover throttle
- Flight time
- Thrust-to-weight ratio
- System efficiency (g/W)
- Maximum propeller size for a frame
"""

import math

from ..config import (
    GRAVITY,
    WHEELBASE_PROP_FACTORS,
    DEFAULT_WHEELBASE_PROP_FACTOR,
)


def calc_hover_throttle(
    total_weight_kg: float,
    num_motors: float,
    max_thrust_per_motor_n: float,
    coaxial_factor: float
) -> float:
    """
    Calculate hover throttle percentage.

    Static thrust scales roughly with throttle², so
        throttle = sqrt(required thrust per motor / max thrust per motor)

    Parameters:
    ----------
    total_weight_kg : float
        All-up weight (kg)

    num_motors : float
        Number of motors

    max_thrust_per_motor_n : float
        Thrust of one motor at full throttle (N)

    coaxial_factor : float
        1.0 for flat layouts, ~0.85 for coaxial

    Returns:
    -------
    float
        Hover throttle (0-100%). 100 when the motors produce no thrust,
        meaning hover is not achievable.
    """
    if max_thrust_per_motor_n <= 0:
        return 100.0

    effective_motors = num_motors * coaxial_factor
    if effective_motors <= 0:
        return 100.0

    required_thrust = total_weight_kg * GRAVITY
    thrust_per_motor = required_thrust / effective_motors

    throttle_ratio = math.sqrt(max(0.0, thrust_per_motor / max_thrust_per_motor_n))
    return min(100.0, max(0.0, throttle_ratio * 100.0))


def calc_flight_time(
    capacity_mah: float,
    discharge_fraction: float,
    total_current_a: float
) -> float:
    """
    Calculate flight time at a constant current draw.

    t = (capacity × discharge depth) / (I × 1000) × 60

    Parameters:
    ----------
    capacity_mah : float
        Pack capacity (mAh)

    discharge_fraction : float
        Usable fraction of capacity (0-1), e.g. 0.8

    total_current_a : float
        Total current draw (A)

    Returns:
    -------
    float
        Flight time (min); infinite when no current is drawn
    """
    if total_current_a <= 0:
        return math.inf
    usable_capacity = capacity_mah * discharge_fraction
    return (usable_capacity / (total_current_a * 1000.0)) * 60.0


def calc_thrust_to_weight_ratio(total_thrust_n: float, total_weight_kg: float) -> float:
    """Thrust-to-weight ratio; 0 for a weightless vehicle."""
    if total_weight_kg <= 0:
        return 0.0
    return total_thrust_n / (total_weight_kg * GRAVITY)


def calc_system_efficiency(thrust_n: float, power_w: float) -> float:
    """Grams of thrust per watt of electrical power; 0 without power."""
    if power_w <= 0:
        return 0.0
    return (thrust_n * 1000.0 / GRAVITY) / power_w


def calc_max_prop_diameter_mm(wheelbase_mm: float, motor_count: int) -> float:
    """
    Largest propeller that fits the frame without blade overlap.

    Motor counts without a known geometry use a factor of 0.5.
    """
    factor = WHEELBASE_PROP_FACTORS.get(motor_count, DEFAULT_WHEELBASE_PROP_FACTOR)
    return wheelbase_mm * factor
