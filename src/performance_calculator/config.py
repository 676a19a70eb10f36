"""
Performance Calculator Configuration
====================================

Contains physical constants, lookup tables, default component values and
model assumptions for multirotor performance calculations.

All internal calculations use SI units:
- Voltage: V
- Current: A
- Resistance: Ohms (battery/ESC inputs given in mΩ)
- Temperature: Celsius
- Mass: kg (inputs given in g)
- Length: m (propeller inputs given in inches, wires in cm)
- Power: W

Usage:
------
    from src.performance_calculator.config import PerformanceCalculatorConfig

    config = PerformanceCalculatorConfig(min_twr=2.5)
    ok, message = config.validate()
"""

from dataclasses import dataclass


# =============================================================================
# Physical Constants
# =============================================================================

# Gravitational acceleration (m/s²)
GRAVITY = 9.80665

# ISA sea level pressure (Pa)
SEA_LEVEL_PRESSURE = 101325.0

# ISA sea level temperature (K) - 15°C
SEA_LEVEL_TEMP = 288.15

# ISA troposphere lapse rate (K/m)
LAPSE_RATE = 0.0065

# Top of the ISA troposphere (m) - barometric formula valid below this
TROPOPAUSE_ALTITUDE_M = 11000.0

# Specific gas constant for dry air (J/(kg·K))
AIR_GAS_CONSTANT = 287.058

# Molar mass of dry air (kg/mol)
MOLAR_MASS_AIR = 0.0289644

# Universal gas constant (J/(mol·K))
UNIVERSAL_GAS_CONSTANT = 8.31447

# Celsius to Kelvin offset
KELVIN_OFFSET = 273.15

# Unit conversions
INCH_TO_M = 0.0254
INCH_TO_MM = 25.4


# =============================================================================
# Lookup Tables
# =============================================================================

# Battery chemistry cell voltages (V): nominal, max (full charge), min (cutoff)
CHEMISTRY_VOLTAGES = {
    "LiPo": {"nominal": 3.7, "max": 4.2, "min": 3.3},
    "Li-ion": {"nominal": 3.6, "max": 4.2, "min": 2.8},
    "LiHV": {"nominal": 3.85, "max": 4.35, "min": 3.3},
}

# Copper wire resistance per meter (Ω/m) at 20°C by AWG gauge
AWG_RESISTANCE = {
    10: 0.003277,
    12: 0.005211,
    14: 0.008286,
    16: 0.01317,
    18: 0.02095,
    20: 0.03331,
    22: 0.05296,
    26: 0.0668,
}

# Gauge used when the requested AWG is not in the table
DEFAULT_AWG = 14

# Largest prop diameter as a fraction of wheelbase, by motor count.
# Follows from the motor-to-motor spacing of a regular polygon frame.
WHEELBASE_PROP_FACTORS = {
    3: 0.866,
    4: 0.707,
    6: 0.5,
    8: 0.38,
}

# Factor used for motor counts not in the table
DEFAULT_WHEELBASE_PROP_FACTOR = 0.5


# =============================================================================
# Propeller Coefficient Estimation
# =============================================================================

# Ct = CT_BASE + CT_PITCH_SLOPE × (pitch / diameter)
CT_BASE = 0.075
CT_PITCH_SLOPE = 0.045

# Cp = CP_BASE + CP_PITCH_SLOPE × (pitch / diameter)
CP_BASE = 0.025
CP_PITCH_SLOPE = 0.035

# 3-blade props: ~15% more thrust, ~25% more power at the same RPM
THREE_BLADE_CT_FACTOR = 1.15
THREE_BLADE_CP_FACTOR = 1.25

# Plausible coefficient ranges for hobby propellers
CT_RANGE = (0.04, 0.22)
CP_RANGE = (0.015, 0.12)


# =============================================================================
# Model Assumptions
# =============================================================================

# Lower rotor of a coaxial pair works in the upper rotor's downwash
COAXIAL_FACTOR = 0.85

# Typical BLDC efficiency used to back-calculate current from shaft power
ASSUMED_MOTOR_EFFICIENCY = 0.85

# First-order motor thermal time constant (s) for small BLDC motors
THERMAL_TIME_CONSTANT_S = 120.0

# Duration used for the motor temperature estimate (s)
THERMAL_EVAL_DURATION_S = 300.0

# Validation thresholds
MIN_TWR = 2.0
MAX_MOTOR_TEMP_C = 80.0
MAX_HOVER_THROTTLE_PCT = 60.0


# =============================================================================
# Component Defaults
# =============================================================================
# Substituted for any field that is missing (or zero) in a configuration.

DEFAULT_ALTITUDE_M = 0.0
DEFAULT_TEMPERATURE_C = 25.0

DEFAULT_MOTOR_COUNT = 4
DEFAULT_WHEELBASE_MM = 350.0

DEFAULT_CHEMISTRY = "LiPo"
DEFAULT_CELLS_S = 4
DEFAULT_CELLS_P = 1
DEFAULT_CAPACITY_MAH = 5000.0
DEFAULT_C_RATING = 20.0
DEFAULT_BURST_C = 40.0
DEFAULT_INTERNAL_RESISTANCE_MOHM = 5.0
DEFAULT_DISCHARGE_DEPTH_PCT = 80.0

DEFAULT_KV = 920.0
DEFAULT_MOTOR_RESISTANCE = 0.1
DEFAULT_NO_LOAD_CURRENT = 0.5
DEFAULT_MOTOR_MAX_CURRENT = 30.0
DEFAULT_MOTOR_MAX_POWER = 400.0
DEFAULT_MOTOR_WEIGHT_G = 60.0
DEFAULT_MOTOR_THERMAL_RESISTANCE = 10.0

DEFAULT_ESC_CONTINUOUS_A = 30.0
DEFAULT_ESC_BURST_A = 40.0
DEFAULT_ESC_RESISTANCE_MOHM = 1.0
DEFAULT_ESC_WEIGHT_G = 10.0
DEFAULT_WIRE_LENGTH_CM = 20.0

DEFAULT_MIN_CELLS = 2
DEFAULT_MAX_CELLS = 6

DEFAULT_PROP_DIAMETER_IN = 10.0
DEFAULT_PROP_PITCH_IN = 4.5
DEFAULT_PROP_BLADES = 2
DEFAULT_PROP_WEIGHT_G = 15.0


# =============================================================================
# Configuration Dataclass
# =============================================================================

@dataclass
class PerformanceCalculatorConfig:
    """
    Model assumptions and validation thresholds for the simulation.

    The defaults reproduce the reference calculator. Changing them is
    intended for what-if studies (e.g. a stricter TWR requirement for
    racing builds).

    Attributes:
    ----------
    assumed_motor_efficiency : float
        Motor efficiency used to back-calculate current from shaft power.

    coaxial_factor : float
        Thrust derating applied to coaxial layouts.

    thermal_time_constant_s : float
        Motor thermal time constant (s).

    thermal_eval_duration_s : float
        Time at hover used for the motor temperature estimate (s).

    min_twr : float
        Minimum acceptable thrust-to-weight ratio.

    max_motor_temp_c : float
        Motor temperature limit (°C).

    max_hover_throttle_pct : float
        Hover throttle limit (%).
    """
    assumed_motor_efficiency: float = ASSUMED_MOTOR_EFFICIENCY
    coaxial_factor: float = COAXIAL_FACTOR
    thermal_time_constant_s: float = THERMAL_TIME_CONSTANT_S
    thermal_eval_duration_s: float = THERMAL_EVAL_DURATION_S
    min_twr: float = MIN_TWR
    max_motor_temp_c: float = MAX_MOTOR_TEMP_C
    max_hover_throttle_pct: float = MAX_HOVER_THROTTLE_PCT

    def validate(self) -> tuple[bool, str]:
        """Validate configuration values."""
        errors = []

        if not 0.0 < self.assumed_motor_efficiency <= 1.0:
            errors.append("Assumed motor efficiency must be in (0, 1]")
        if not 0.0 < self.coaxial_factor <= 1.0:
            errors.append("Coaxial factor must be in (0, 1]")
        if self.thermal_time_constant_s <= 0:
            errors.append("Thermal time constant must be positive")
        if self.thermal_eval_duration_s < 0:
            errors.append("Thermal evaluation duration cannot be negative")
        if self.min_twr <= 0:
            errors.append("Minimum TWR must be positive")
        if self.max_motor_temp_c < 40 or self.max_motor_temp_c > 200:
            errors.append("Max motor temperature should be 40-200°C")
        if not 0.0 < self.max_hover_throttle_pct <= 100.0:
            errors.append("Max hover throttle must be in (0, 100]%")

        if errors:
            return False, "; ".join(errors)
        return True, ""


# =============================================================================
# Default Configuration Instance
# =============================================================================

DEFAULT_CONFIG = PerformanceCalculatorConfig()
