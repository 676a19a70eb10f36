"""
Thermal Calculations
====================

First-order motor winding temperature model:

    T(t) = T_ambient + P_loss × R_th × (1 - e^(-t/τ))

The steady-state rise is P_loss × R_th; τ is a fixed time constant that
is representative of small BLDC motors.
"""

import math

from ..config import THERMAL_TIME_CONSTANT_S


def calc_steady_state_rise(copper_loss_w: float, thermal_resistance_cw: float) -> float:
    """Steady-state temperature rise above ambient (°C)."""
    return copper_loss_w * thermal_resistance_cw


def calc_motor_temp(
    ambient_c: float,
    copper_loss_w: float,
    thermal_resistance_cw: float,
    duration_s: float,
    time_constant_s: float = THERMAL_TIME_CONSTANT_S
) -> float:
    """
    Estimate motor temperature after running for a given time.

    Parameters:
    ----------
    ambient_c : float
        Ambient temperature (°C)

    copper_loss_w : float
        I²R winding loss (W)

    thermal_resistance_cw : float
        Winding-to-ambient thermal resistance (°C/W), typically 8-15

    duration_s : float
        Run time (s); negative values are treated as 0

    time_constant_s : float
        Thermal time constant (s)

    Returns:
    -------
    float
        Motor temperature (°C); exactly ambient at t = 0
    """
    duration = max(0.0, duration_s)
    if duration == 0:
        return ambient_c
    rise = calc_steady_state_rise(copper_loss_w, thermal_resistance_cw)
    return ambient_c + rise * (1.0 - math.exp(-duration / time_constant_s))
