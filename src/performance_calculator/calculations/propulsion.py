"""
Propulsion Calculations
=======================

Propeller thrust and power from the standard coefficient equations:

    T = Ct × ρ × n² × D⁴
    P = Cp × ρ × n³ × D⁵

with n in revolutions per second and D in meters. When measured
coefficients are not available they are estimated from prop geometry.
"""

from dataclasses import dataclass

from ..config import (
    CT_BASE,
    CT_PITCH_SLOPE,
    CP_BASE,
    CP_PITCH_SLOPE,
    THREE_BLADE_CT_FACTOR,
    THREE_BLADE_CP_FACTOR,
    CT_RANGE,
    CP_RANGE,
    COAXIAL_FACTOR,
)


@dataclass(frozen=True)
class PropCoefficients:
    """Dimensionless thrust and power coefficients."""
    ct: float
    cp: float


def calc_thrust(ct: float, rho: float, rps: float, diameter_m: float) -> float:
    """
    Calculate propeller thrust.

    Parameters:
    ----------
    ct : float
        Thrust coefficient (typically 0.08-0.15)

    rho : float
        Air density (kg/m³)

    rps : float
        Revolutions per second

    diameter_m : float
        Propeller diameter (m)

    Returns:
    -------
    float
        Thrust (N)
    """
    d2 = diameter_m * diameter_m
    return ct * rho * rps * rps * d2 * d2


def calc_prop_power(cp: float, rho: float, rps: float, diameter_m: float) -> float:
    """
    Calculate mechanical power absorbed by the propeller.

    Parameters:
    ----------
    cp : float
        Power coefficient

    rho : float
        Air density (kg/m³)

    rps : float
        Revolutions per second

    diameter_m : float
        Propeller diameter (m)

    Returns:
    -------
    float
        Shaft power (W)
    """
    d2 = diameter_m * diameter_m
    return cp * rho * rps * rps * rps * d2 * d2 * diameter_m


def estimate_prop_coefficients(
    diameter_in: float,
    pitch_in: float,
    blades: int
) -> PropCoefficients:
    """
    Estimate Ct and Cp from propeller geometry.

    Empirical fit to typical hobby propellers:
        Ct = 0.075 + 0.045 × (pitch/diameter)
        Cp = 0.025 + 0.035 × (pitch/diameter)

    3-blade props get ~15% more Ct and ~25% more Cp. Results are clamped
    to Ct 0.04-0.22 and Cp 0.015-0.12 after the blade correction.

    Parameters:
    ----------
    diameter_in : float
        Diameter (inches)

    pitch_in : float
        Pitch (inches)

    blades : int
        Number of blades (2 or 3)

    Returns:
    -------
    PropCoefficients
        Estimated coefficients
    """
    pitch_ratio = pitch_in / diameter_in if diameter_in else 0.0

    ct = CT_BASE + CT_PITCH_SLOPE * pitch_ratio
    cp = CP_BASE + CP_PITCH_SLOPE * pitch_ratio

    if blades == 3:
        ct *= THREE_BLADE_CT_FACTOR
        cp *= THREE_BLADE_CP_FACTOR

    ct = max(CT_RANGE[0], min(CT_RANGE[1], ct))
    cp = max(CP_RANGE[0], min(CP_RANGE[1], cp))

    return PropCoefficients(ct=ct, cp=cp)


def calc_coaxial_factor(is_coaxial: bool, factor: float = COAXIAL_FACTOR) -> float:
    """Effective motor count multiplier: 0.85 for coaxial, 1.0 for flat."""
    return factor if is_coaxial else 1.0
