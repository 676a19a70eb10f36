"""
Drone Component Models
======================

Immutable records describing a multirotor build: environment, frame,
battery, motor, ESC and propeller, plus the DroneConfiguration that groups
the six sections handed to the simulation.

Field names are snake_case. Mappings coming from the outside (JSON files,
UI state) may use the camelCase names of the original calculator
("cellsS", "wireAwg", ...); DroneConfiguration.from_dict accepts both.
"""

import math
import re
from dataclasses import dataclass, field, fields, replace, asdict
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..config import (
    CHEMISTRY_VOLTAGES,
    DEFAULT_ALTITUDE_M,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_MOTOR_COUNT,
    DEFAULT_WHEELBASE_MM,
    DEFAULT_CELLS_S,
    DEFAULT_CELLS_P,
    DEFAULT_CAPACITY_MAH,
    DEFAULT_C_RATING,
    DEFAULT_BURST_C,
    DEFAULT_INTERNAL_RESISTANCE_MOHM,
    DEFAULT_DISCHARGE_DEPTH_PCT,
    DEFAULT_KV,
    DEFAULT_MOTOR_RESISTANCE,
    DEFAULT_NO_LOAD_CURRENT,
    DEFAULT_MOTOR_MAX_CURRENT,
    DEFAULT_MOTOR_MAX_POWER,
    DEFAULT_MOTOR_WEIGHT_G,
    DEFAULT_MOTOR_THERMAL_RESISTANCE,
    DEFAULT_ESC_CONTINUOUS_A,
    DEFAULT_ESC_BURST_A,
    DEFAULT_ESC_RESISTANCE_MOHM,
    DEFAULT_ESC_WEIGHT_G,
    DEFAULT_AWG,
    DEFAULT_WIRE_LENGTH_CM,
    DEFAULT_MIN_CELLS,
    DEFAULT_MAX_CELLS,
    DEFAULT_PROP_DIAMETER_IN,
    DEFAULT_PROP_PITCH_IN,
    DEFAULT_PROP_BLADES,
    DEFAULT_PROP_WEIGHT_G,
)


class BatteryChemistry(Enum):
    """Battery cell chemistry types."""
    LIPO = "LiPo"      # Lithium Polymer (standard 4.2V)
    LI_ION = "Li-ion"  # Cylindrical Li-ion (18650/21700 packs)
    LIHV = "LiHV"      # High-voltage LiPo (4.35V)

    @classmethod
    def from_name(cls, value: Any) -> "BatteryChemistry":
        """
        Resolve a chemistry from its name.

        Unknown or missing names resolve to LiPo, matching how free-form
        chemistry strings have always been treated.
        """
        if isinstance(value, cls):
            return value
        for chemistry in cls:
            if chemistry.value == value:
                return chemistry
        return cls.LIPO

    @property
    def nominal_voltage(self) -> float:
        """Nominal cell voltage (V)."""
        return CHEMISTRY_VOLTAGES[self.value]["nominal"]

    @property
    def max_voltage(self) -> float:
        """Full-charge cell voltage (V)."""
        return CHEMISTRY_VOLTAGES[self.value]["max"]

    @property
    def min_voltage(self) -> float:
        """Cutoff cell voltage (V)."""
        return CHEMISTRY_VOLTAGES[self.value]["min"]


class FrameLayout(Enum):
    """Rotor arrangement."""
    FLAT = "flat"          # One rotor per arm
    COAXIAL = "coaxial"    # Stacked rotor pairs sharing downwash

    @classmethod
    def from_name(cls, value: Any) -> "FrameLayout":
        """Resolve a layout from its name; anything but 'coaxial' is flat."""
        if isinstance(value, cls):
            return value
        return cls.COAXIAL if value == cls.COAXIAL.value else cls.FLAT


# =============================================================================
# Key Conversion
# =============================================================================

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_snake(name: str) -> str:
    """Convert 'internalResistanceMohm' to 'internal_resistance_mohm'."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    """Convert 'internal_resistance_mohm' to 'internalResistanceMohm'."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _is_number(value: Any) -> bool:
    """True for int/float values (bool excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_number(value: Any) -> Optional[float]:
    """
    Numeric value of a configuration field as a float.

    Numeric strings are parsed; integers too large for a float become
    ±inf. Anything else (None, NaN, bools, unparsable text) gives None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float) and not math.isnan(value):
        return value
    return None


def _section_from_mapping(cls, data: Optional[Mapping[str, Any]]):
    """
    Build a component record from a mapping, ignoring unknown keys.

    A section that is not a mapping is treated as missing.
    """
    if isinstance(data, cls):
        return data
    if not isinstance(data, Mapping):
        return cls()
    known = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in data.items():
        if not isinstance(key, str):
            continue
        name = camel_to_snake(key)
        if name in known:
            kwargs[name] = value
    return cls(**kwargs)


def _section_to_dict(section) -> Dict[str, Any]:
    """Convert a component record to a camelCase mapping."""
    result = {}
    for key, value in asdict(section).items():
        if isinstance(value, Enum):
            value = value.value
        result[snake_to_camel(key)] = value
    return result


# =============================================================================
# Component Records
# =============================================================================

@dataclass(frozen=True)
class Environment:
    """
    Operating environment.

    Attributes:
    ----------
    altitude : float
        Altitude above sea level (m)

    temperature : float
        Ambient temperature (°C)
    """
    altitude: float = DEFAULT_ALTITUDE_M
    temperature: Optional[float] = DEFAULT_TEMPERATURE_C
    name: str = ""


@dataclass(frozen=True)
class Frame:
    """
    Airframe and payload.

    Attributes:
    ----------
    motor_count : int
        Number of motors (3, 4, 6 or 8)

    layout : FrameLayout
        Flat or coaxial rotor arrangement

    frame_weight : float
        Frame weight excluding motors, battery and ESCs (g)

    payload_weight : float
        Cameras, gimbals, accessories (g)

    payload_current : float
        Current drawn by payload devices (A)

    wheelbase_mm : float
        Diagonal motor-to-motor distance (mm)
    """
    motor_count: int = DEFAULT_MOTOR_COUNT
    layout: FrameLayout = FrameLayout.FLAT
    frame_weight: float = 0.0
    payload_weight: float = 0.0
    payload_current: float = 0.0
    wheelbase_mm: float = DEFAULT_WHEELBASE_MM
    name: str = ""

    def __post_init__(self):
        """Normalize free-form layout names."""
        object.__setattr__(self, "layout", FrameLayout.from_name(self.layout))

    @property
    def is_coaxial(self) -> bool:
        """Whether rotors are stacked in coaxial pairs."""
        return self.layout == FrameLayout.COAXIAL


@dataclass(frozen=True)
class Battery:
    """
    Battery pack.

    Attributes:
    ----------
    chemistry : BatteryChemistry
        Cell chemistry (sets nominal/max/min cell voltage)

    cells_s : int
        Cells in series

    cells_p : int
        Cells in parallel

    capacity_mah : float
        Capacity of one parallel group (mAh); pack = capacity × cells_p

    c_rating : float
        Continuous discharge C-rating

    burst_c : float
        Burst discharge C-rating

    internal_resistance_mohm : float
        Internal resistance per cell (mΩ)

    weight_g : float
        Pack weight (g)

    discharge_depth : float
        Usable capacity before cutoff (%)
    """
    chemistry: BatteryChemistry = BatteryChemistry.LIPO
    cells_s: int = DEFAULT_CELLS_S
    cells_p: int = DEFAULT_CELLS_P
    capacity_mah: float = DEFAULT_CAPACITY_MAH
    c_rating: float = DEFAULT_C_RATING
    burst_c: float = DEFAULT_BURST_C
    internal_resistance_mohm: float = DEFAULT_INTERNAL_RESISTANCE_MOHM
    weight_g: float = 0.0
    discharge_depth: float = DEFAULT_DISCHARGE_DEPTH_PCT
    name: str = ""

    def __post_init__(self):
        """Normalize free-form chemistry names."""
        object.__setattr__(
            self, "chemistry", BatteryChemistry.from_name(self.chemistry)
        )

    @property
    def configuration_string(self) -> str:
        """Pack arrangement, e.g. '4S1P'."""
        return f"{self.cells_s}S{self.cells_p}P"


@dataclass(frozen=True)
class Motor:
    """
    Brushless motor.

    Attributes:
    ----------
    kv : float
        Velocity constant (RPM/V)

    resistance : float
        Winding resistance (Ω)

    no_load_current : float
        No-load current (A)

    max_current : float
        Maximum continuous current (A)

    max_power : float
        Maximum power (W)

    weight_g : float
        Motor weight (g)

    thermal_resistance : float
        Winding-to-ambient thermal resistance (°C/W)

    min_cells, max_cells : int
        Supported battery voltage range (S)

    stator_diameter, stator_height : float
        Stator size (mm), informational
    """
    kv: float = DEFAULT_KV
    resistance: float = DEFAULT_MOTOR_RESISTANCE
    no_load_current: float = DEFAULT_NO_LOAD_CURRENT
    max_current: float = DEFAULT_MOTOR_MAX_CURRENT
    max_power: float = DEFAULT_MOTOR_MAX_POWER
    weight_g: float = DEFAULT_MOTOR_WEIGHT_G
    thermal_resistance: float = DEFAULT_MOTOR_THERMAL_RESISTANCE
    min_cells: int = DEFAULT_MIN_CELLS
    max_cells: int = DEFAULT_MAX_CELLS
    stator_diameter: Optional[float] = None
    stator_height: Optional[float] = None
    name: str = ""


@dataclass(frozen=True)
class Esc:
    """
    Electronic speed controller and motor leads.

    Attributes:
    ----------
    continuous_a : float
        Continuous current rating (A)

    burst_a : float
        Burst current rating (A)

    resistance_mohm : float
        On-resistance (mΩ)

    weight_g : float
        Weight per ESC (g)

    wire_awg : int
        Motor lead gauge (AWG)

    wire_length_cm : float
        Motor-to-ESC lead length (cm)

    min_cells, max_cells : int
        Supported battery voltage range (S)
    """
    continuous_a: float = DEFAULT_ESC_CONTINUOUS_A
    burst_a: float = DEFAULT_ESC_BURST_A
    resistance_mohm: float = DEFAULT_ESC_RESISTANCE_MOHM
    weight_g: float = DEFAULT_ESC_WEIGHT_G
    wire_awg: int = DEFAULT_AWG
    wire_length_cm: float = DEFAULT_WIRE_LENGTH_CM
    min_cells: int = DEFAULT_MIN_CELLS
    max_cells: int = DEFAULT_MAX_CELLS
    name: str = ""


@dataclass(frozen=True)
class Propeller:
    """
    Propeller.

    Attributes:
    ----------
    diameter_in : float
        Diameter (inches)

    pitch_in : float
        Pitch (inches)

    blades : int
        Blade count (2 or 3)

    weight_g : float
        Weight per prop (g)

    ct, cp : float or None
        Measured thrust/power coefficients; estimated from geometry
        when not given
    """
    diameter_in: float = DEFAULT_PROP_DIAMETER_IN
    pitch_in: float = DEFAULT_PROP_PITCH_IN
    blades: int = DEFAULT_PROP_BLADES
    weight_g: float = DEFAULT_PROP_WEIGHT_G
    ct: Optional[float] = None
    cp: Optional[float] = None
    name: str = ""

    @property
    def size_string(self) -> str:
        """Prop size, e.g. '10x4.5'."""
        return f"{self.diameter_in:g}x{self.pitch_in:g}"


# =============================================================================
# Input Ranges
# =============================================================================
# (section, field) -> (min, max); None means unbounded on that side

INPUT_RANGES = {
    ("environment", "temperature"): (-20, 50),
    ("environment", "altitude"): (0, 11000),
    ("frame", "motor_count"): (3, 8),
    ("frame", "wheelbase_mm"): (50, None),
    ("frame", "frame_weight"): (0, None),
    ("frame", "payload_weight"): (0, None),
    ("frame", "payload_current"): (0, None),
    ("battery", "cells_s"): (1, 12),
    ("battery", "cells_p"): (1, 4),
    ("battery", "capacity_mah"): (100, None),
    ("battery", "c_rating"): (1, None),
    ("battery", "burst_c"): (1, None),
    ("battery", "internal_resistance_mohm"): (0, None),
    ("battery", "weight_g"): (0, None),
    ("battery", "discharge_depth"): (50, 95),
    ("motor", "kv"): (50, None),
    ("motor", "resistance"): (0, None),
    ("motor", "no_load_current"): (0, None),
    ("motor", "max_current"): (1, None),
    ("motor", "max_power"): (1, None),
    ("motor", "weight_g"): (0, None),
    ("motor", "thermal_resistance"): (1, 30),
    ("motor", "min_cells"): (1, 12),
    ("motor", "max_cells"): (1, 14),
    ("esc", "continuous_a"): (1, None),
    ("esc", "burst_a"): (1, None),
    ("esc", "resistance_mohm"): (0, None),
    ("esc", "weight_g"): (0, None),
    ("esc", "wire_awg"): (10, 26),
    ("esc", "wire_length_cm"): (1, None),
    ("esc", "min_cells"): (1, 12),
    ("esc", "max_cells"): (1, 14),
    ("propeller", "diameter_in"): (3, 40),
    ("propeller", "pitch_in"): (1, 15),
    ("propeller", "blades"): (2, 3),
    ("propeller", "weight_g"): (0, None),
    ("propeller", "ct"): (0, 0.3),
    ("propeller", "cp"): (0, 0.2),
}


# =============================================================================
# Drone Configuration
# =============================================================================

SECTION_NAMES = ("environment", "frame", "battery", "esc", "motor", "propeller")


@dataclass(frozen=True)
class DroneConfiguration:
    """
    Complete drone configuration handed to the simulation.

    Every section and every field has a default, so a partially specified
    configuration is always complete.

    Example:
    -------
        drone = DroneConfiguration.from_dict({
            "battery": {"cellsS": 6, "capacityMah": 1300},
            "propeller": {"diameterIn": 5, "pitchIn": 4.3, "blades": 3},
        })
        drone = drone.replace_section("frame", payload_weight=250)
    """
    environment: Environment = field(default_factory=Environment)
    frame: Frame = field(default_factory=Frame)
    battery: Battery = field(default_factory=Battery)
    esc: Esc = field(default_factory=Esc)
    motor: Motor = field(default_factory=Motor)
    propeller: Propeller = field(default_factory=Propeller)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DroneConfiguration":
        """
        Build a configuration from a (possibly partial) mapping.

        Section keys are the six section names; field keys may be camelCase
        or snake_case. Unknown keys are ignored.

        Raises:
        ------
        TypeError
            If data is not a mapping
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise TypeError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        return cls(
            environment=_section_from_mapping(Environment, data.get("environment")),
            frame=_section_from_mapping(Frame, data.get("frame")),
            battery=_section_from_mapping(Battery, data.get("battery")),
            esc=_section_from_mapping(Esc, data.get("esc")),
            motor=_section_from_mapping(Motor, data.get("motor")),
            propeller=_section_from_mapping(Propeller, data.get("propeller")),
        )

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Convert to a mapping of sections with camelCase field names."""
        return {
            name: _section_to_dict(getattr(self, name))
            for name in SECTION_NAMES
        }

    def replace_section(self, section: str, **updates) -> "DroneConfiguration":
        """Return a copy with some fields of one section replaced."""
        if section not in SECTION_NAMES:
            raise KeyError(f"Unknown configuration section: {section}")
        current = getattr(self, section)
        return replace(self, **{section: replace(current, **updates)})

    def validate(self) -> tuple[bool, str]:
        """
        Check inputs against the supported ranges.

        The simulation accepts any values; this is for callers that want to
        flag implausible input before presenting results.
        """
        errors = []

        for (section, name), (low, high) in INPUT_RANGES.items():
            value = getattr(getattr(self, section), name)
            if value is None:
                continue
            if not _is_number(value):
                errors.append(f"{section}.{name} must be a number")
                continue
            if low is not None and value < low:
                errors.append(f"{section}.{name} below minimum {low}")
            if high is not None and value > high:
                errors.append(f"{section}.{name} above maximum {high}")

        for section in ("motor", "esc"):
            component = getattr(self, section)
            low, high = component.min_cells, component.max_cells
            if _is_number(low) and _is_number(high) and low > high:
                errors.append(f"{section}.min_cells greater than {section}.max_cells")

        if errors:
            return False, "; ".join(errors)
        return True, ""
