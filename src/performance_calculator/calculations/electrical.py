"""
Electrical Calculations
=======================

Motor, battery and wiring electrical approximations:
- Motor RPM with back-EMF drop
- Battery voltage sag under load
- Wire and ESC resistive losses
- Motor electrical power, efficiency and current back-calculation
"""

from dataclasses import dataclass
from typing import Any

from ..config import AWG_RESISTANCE, DEFAULT_AWG
from ..models.components import BatteryChemistry


@dataclass(frozen=True)
class BatteryLoadState:
    """Pack terminal voltage and sag at a given current."""
    voltage: float      # V
    sag_volts: float    # V


@dataclass(frozen=True)
class WireLoss:
    """Resistance and I²R loss of one motor lead."""
    resistance: float   # Ω
    power_loss: float   # W


def calc_motor_rpm(
    kv: float,
    voltage: float,
    current: float,
    resistance: float
) -> float:
    """
    Calculate motor RPM accounting for the winding voltage drop.

    RPM = Kv × max(0, V - I × Rm)

    Parameters:
    ----------
    kv : float
        Motor velocity constant (RPM/V)

    voltage : float
        Supply voltage (V)

    current : float
        Motor current (A)

    resistance : float
        Winding resistance (Ω)

    Returns:
    -------
    float
        Motor speed (RPM), never negative
    """
    back_emf = voltage - current * resistance
    return kv * max(0.0, back_emf)


def calc_battery_voltage_under_load(
    cells: int,
    chemistry: Any,
    current_a: float,
    capacity_mah: float,
    c_rating: float,
    internal_resistance_mohm: float
) -> BatteryLoadState:
    """
    Calculate pack voltage under load.

    V_sag = I × (R_cell × Series)
    V = max(V_min × Series, V_nominal × Series - V_sag)

    Parameters:
    ----------
    cells : int
        Cells in series

    chemistry : BatteryChemistry or str
        Cell chemistry; unknown names are treated as LiPo

    current_a : float
        Total pack current (A)

    capacity_mah : float
        Pack capacity (mAh). Not used by the resistive model.

    c_rating : float
        Continuous C-rating. Not used by the resistive model.

    internal_resistance_mohm : float
        Internal resistance per cell (mΩ)

    Returns:
    -------
    BatteryLoadState
        Loaded voltage (floored at the chemistry cutoff) and sag
    """
    chem = BatteryChemistry.from_name(chemistry)
    nominal_voltage = chem.nominal_voltage * cells
    min_voltage = chem.min_voltage * cells

    # Series string: resistances add
    total_resistance = (internal_resistance_mohm / 1000.0) * cells
    sag_volts = current_a * total_resistance

    voltage = max(min_voltage, nominal_voltage - sag_volts)
    return BatteryLoadState(voltage=voltage, sag_volts=sag_volts)


def calc_wire_resistance(awg: int, length_cm: float) -> float:
    """
    Resistance of a copper lead (Ω).

    Gauges outside the table fall back to AWG 14.
    """
    resistance_per_m = AWG_RESISTANCE.get(awg, AWG_RESISTANCE[DEFAULT_AWG])
    return resistance_per_m * (length_cm / 100.0)


def calc_wire_loss(awg: int, length_cm: float, current_a: float) -> WireLoss:
    """
    Calculate motor lead resistance and power loss.

    P = I² × R

    Parameters:
    ----------
    awg : int
        Wire gauge

    length_cm : float
        Lead length (cm)

    current_a : float
        Current through the lead (A)

    Returns:
    -------
    WireLoss
        Lead resistance (Ω) and loss (W)
    """
    resistance = calc_wire_resistance(awg, length_cm)
    power_loss = current_a * current_a * resistance
    return WireLoss(resistance=resistance, power_loss=power_loss)


def calc_resistive_loss(current_a: float, resistance_ohm: float) -> float:
    """I²R loss (W) for ESC switching and motor copper losses."""
    return current_a * current_a * resistance_ohm


def calc_motor_elec_power(voltage: float, current: float) -> float:
    """Electrical input power P = V × I (W)."""
    return voltage * current


def calc_motor_efficiency(mech_power: float, elec_power: float) -> float:
    """
    Motor efficiency as mechanical out / electrical in.

    Returns 0 when there is no electrical input and never exceeds 1.
    """
    if elec_power <= 0:
        return 0.0
    return min(1.0, max(0.0, mech_power / elec_power))


def calc_motor_current(
    mech_power: float,
    voltage: float,
    no_load_current: float,
    efficiency: float
) -> float:
    """
    Estimate motor current needed for a shaft power.

    I ≈ P_mech / (V × η) + I0

    The efficiency is an assumed constant; solving the motor equations for
    current would need an iterative solve against the prop load.

    Parameters:
    ----------
    mech_power : float
        Shaft power (W)

    voltage : float
        Supply voltage (V)

    no_load_current : float
        Motor no-load current (A)

    efficiency : float
        Assumed motor efficiency (0-1)

    Returns:
    -------
    float
        Motor current (A); the no-load current when V × η is not positive
    """
    denominator = voltage * efficiency
    if denominator <= 0:
        return no_load_current
    return mech_power / denominator + no_load_current
