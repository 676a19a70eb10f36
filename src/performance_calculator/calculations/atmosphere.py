"""
Atmosphere Calculations
=======================

Air density from altitude and ambient temperature.

Pressure follows the ISA troposphere barometric formula, while the density
uses the ambient temperature the user entered rather than the ISA
temperature at that altitude. This gives the density of a non-standard day
at the pressure of the given altitude.
"""

from ..config import (
    SEA_LEVEL_PRESSURE,
    SEA_LEVEL_TEMP,
    LAPSE_RATE,
    TROPOPAUSE_ALTITUDE_M,
    AIR_GAS_CONSTANT,
    GRAVITY,
    MOLAR_MASS_AIR,
    UNIVERSAL_GAS_CONSTANT,
    KELVIN_OFFSET,
)


# Barometric exponent g·M/(R·L) ≈ 5.2559
PRESSURE_EXPONENT = (GRAVITY * MOLAR_MASS_AIR) / (UNIVERSAL_GAS_CONSTANT * LAPSE_RATE)


def calc_pressure(altitude_m: float) -> float:
    """
    Calculate static pressure at altitude.

    P = P0 × (1 - L×h/T0)^(g·M/(R·L))

    Parameters:
    ----------
    altitude_m : float
        Altitude above sea level (m), clamped to 0-11000 m

    Returns:
    -------
    float
        Static pressure (Pa)
    """
    alt = max(0.0, min(altitude_m, TROPOPAUSE_ALTITUDE_M))
    return SEA_LEVEL_PRESSURE * (1.0 - (LAPSE_RATE * alt) / SEA_LEVEL_TEMP) ** PRESSURE_EXPONENT


def calc_air_density(altitude_m: float, temp_c: float) -> float:
    """
    Calculate air density at altitude and ambient temperature.

    ρ = P(h) / (R_specific × T_ambient)

    Parameters:
    ----------
    altitude_m : float
        Altitude above sea level (m), clamped to 0-11000 m

    temp_c : float
        Ambient temperature (°C)

    Returns:
    -------
    float
        Air density (kg/m³). 0.0 for temperatures at or below absolute zero.

    Example:
    -------
        calc_air_density(0, 15)      # ~1.225 kg/m³
        calc_air_density(1600, 15)   # ~1.03 kg/m³ (Denver)
    """
    temp_k = temp_c + KELVIN_OFFSET
    if not temp_k > 0:
        return 0.0
    return calc_pressure(altitude_m) / (AIR_GAS_CONSTANT * temp_k)
