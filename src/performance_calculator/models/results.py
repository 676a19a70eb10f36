"""
Simulation Result Models
========================

Immutable records returned by run_full_simulation: the flat set of derived
performance metrics and the validation checklist. Field names are
snake_case; to_dict() produces the camelCase names consumed by dashboards,
export and charts.
"""

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List, Tuple

from .components import snake_to_camel


class StatusLevel(Enum):
    """Dashboard status for a metric."""
    SAFE = "safe"
    CAUTION = "caution"
    DANGER = "danger"


def get_status(
    value: float,
    caution_threshold: float,
    danger_threshold: float,
    invert_direction: bool = False
) -> StatusLevel:
    """
    Classify a value against caution and danger thresholds.

    By default higher values are worse (temperature, current). With
    invert_direction lower values are worse (TWR).
    """
    if invert_direction:
        if value < danger_threshold:
            return StatusLevel.DANGER
        if value < caution_threshold:
            return StatusLevel.CAUTION
        return StatusLevel.SAFE

    if value > danger_threshold:
        return StatusLevel.DANGER
    if value > caution_threshold:
        return StatusLevel.CAUTION
    return StatusLevel.SAFE


def format_flight_time(minutes: float) -> str:
    """Format minutes as '1h 5m', '12m 30s' or '12 min'; '—' if unknown."""
    if not math.isfinite(minutes) or minutes <= 0:
        return "—"
    if minutes >= 60:
        hours = int(minutes // 60)
        mins = math.floor(minutes % 60 + 0.5)
        return f"{hours}h {mins}m"
    whole = math.floor(minutes)
    secs = math.floor((minutes - whole) * 60 + 0.5)
    return f"{whole}m {secs}s" if secs > 0 else f"{whole} min"


@dataclass(frozen=True)
class Validations:
    """
    Pass/fail design checks.

    Attributes:
    ----------
    motor_current_ok : bool
        Hover current per motor below the motor's max current

    esc_current_ok : bool
        Hover current per motor below the ESC continuous rating

    battery_discharge_ok : bool
        Hover total current below the pack's continuous rating

    battery_burst_ok : bool
        Full-throttle current below the pack's burst rating

    prop_size_ok : bool
        Prop fits the frame wheelbase

    twr_ok : bool
        Thrust-to-weight ratio at least the minimum

    motor_temp_ok : bool
        Motor temperature after the evaluation period below the limit

    hover_throttle_ok : bool
        Hover throttle below the limit

    esc_voltage_ok : bool
        Battery cell count within the ESC range

    motor_voltage_ok : bool
        Battery cell count within the motor range
    """
    motor_current_ok: bool
    esc_current_ok: bool
    battery_discharge_ok: bool
    battery_burst_ok: bool
    prop_size_ok: bool
    twr_ok: bool
    motor_temp_ok: bool
    hover_throttle_ok: bool
    esc_voltage_ok: bool
    motor_voltage_ok: bool

    @property
    def all_valid(self) -> bool:
        """True when every check passes."""
        return all(passed for _, passed in self.items())

    def items(self) -> List[Tuple[str, bool]]:
        """(name, passed) pairs in declaration order."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def failed_checks(self) -> List[str]:
        """Names of the checks that did not pass."""
        return [name for name, passed in self.items() if not passed]

    def to_dict(self) -> Dict[str, bool]:
        """Checks keyed by their camelCase names (e.g. 'motorCurrentOk')."""
        return {snake_to_camel(name): passed for name, passed in self.items()}


# Field names whose camelCase export is not a plain conversion
_EXPORT_NAMES = {
    "hover_rpm": "hoverRPM",
    "max_rpm": "maxRPM",
    "motor_temp_5min": "motorTemp5min",
}


@dataclass(frozen=True)
class SimulationResult:
    """
    Complete set of derived performance metrics for one configuration.

    Units are given in each field comment. Hover thrust per motor and the
    max thrust figures are in grams-force for display; internal thrust
    calculations use Newtons.
    """
    # Environment
    air_density: float                  # kg/m³

    # Weight
    total_weight_kg: float
    total_weight_g: float

    # Hover performance
    hover_throttle: float               # %
    hover_rpm: float
    hover_current_per_motor: float      # A
    hover_total_current: float          # A
    hover_total_power: float            # W
    hover_efficiency: float             # g/W
    hover_thrust_per_motor: float       # g
    hover_battery_voltage: float        # V
    hover_battery_sag: float            # V
    flight_time_min: float              # min

    # Max performance
    max_thrust_per_motor_g: float
    max_total_thrust_g: float
    max_rpm: float
    max_current_per_motor: float        # A
    max_total_current_draw: float       # A
    max_battery_voltage: float          # V
    max_battery_sag: float              # V
    twr: float

    # Losses
    wire_loss_per_motor: float          # W
    total_wire_loss: float              # W
    esc_power_loss: float               # W (all ESCs)
    copper_loss_per_motor: float        # W

    # Thermal
    motor_temp_5min: float              # °C

    # Efficiency
    motor_efficiency: float             # 0-1

    # Battery
    nominal_voltage: float              # V
    max_voltage: float                  # V
    max_continuous_current: float       # A
    total_capacity_mah: float

    # Limits
    motor_min_cells: float
    motor_max_cells: float
    esc_min_cells: float
    esc_max_cells: float
    battery_cells: float

    # Propeller coefficients used
    ct: float
    cp: float

    # Validations
    validations: Validations
    max_burst_current: float            # A
    max_prop_diameter_mm: float
    prop_diameter_mm: float

    @property
    def all_valid(self) -> bool:
        """True when every validation check passes."""
        return self.validations.all_valid

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a flat mapping with camelCase metric names.

        Validations are nested under 'validations' and the aggregate is
        included as 'allValid'.
        """
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "validations":
                value = value.to_dict()
            result[_EXPORT_NAMES.get(f.name, snake_to_camel(f.name))] = value
        result["allValid"] = self.all_valid
        return result

    def status_levels(self) -> Dict[str, StatusLevel]:
        """Dashboard status of the headline metrics."""
        return {
            "hover_throttle": get_status(self.hover_throttle, 50, 70),
            "twr": get_status(self.twr, 2.5, 2.0, invert_direction=True),
            "battery_current": get_status(
                self.hover_total_current,
                self.max_continuous_current * 0.7,
                self.max_continuous_current * 0.9,
            ),
            "motor_temp": get_status(self.motor_temp_5min, 80, 120),
        }

    def checklist(self) -> List[Tuple[bool, str]]:
        """Validation checks with human-readable labels."""
        v = self.validations
        return [
            (v.motor_current_ok, f"Motor current {self.hover_current_per_motor:.1f}A < max"),
            (v.esc_current_ok, "ESC current within rating"),
            (v.battery_discharge_ok, "Battery discharge < C-rating"),
            (v.battery_burst_ok, f"Max current < burst ({self.max_burst_current:.1f}A)"),
            (v.esc_voltage_ok,
             f"ESC voltage: {self.battery_cells:g}S vs {self.esc_min_cells:g}-{self.esc_max_cells:g}S"),
            (v.motor_voltage_ok,
             f"Motor voltage: {self.battery_cells:g}S vs {self.motor_min_cells:g}-{self.motor_max_cells:g}S"),
            (v.twr_ok, f"TWR >= 2.0 ({self.twr:.2f})"),
            (v.prop_size_ok, f"Propeller size < max ({self.max_prop_diameter_mm:.0f}mm)"),
            (v.motor_temp_ok, f"Motor temp < 80°C ({self.motor_temp_5min:.0f}°C)"),
            (v.hover_throttle_ok, f"Hover throttle < 60% ({self.hover_throttle:.1f}%)"),
        ]

    def summary(self) -> str:
        """Return a formatted multi-section summary string."""
        status = self.status_levels()
        lines = [
            f"Flight Time: {format_flight_time(self.flight_time_min)}"
            f"  [{status['hover_throttle'].value}]",
            f"  Hover throttle: {self.hover_throttle:.1f}%",
            f"  Current/motor: {self.hover_current_per_motor:.1f}A, "
            f"total: {self.hover_total_current:.1f}A",
            f"  Efficiency: {self.hover_efficiency:.1f} g/W",
            f"Thrust/Weight: {self.twr:.2f}:1  [{status['twr'].value}]",
            f"  Max thrust: {self.max_total_thrust_g:.0f}g, "
            f"weight: {self.total_weight_g:.0f}g",
            f"  Max RPM: {self.max_rpm:.0f}, hover RPM: {self.hover_rpm:.0f}",
            f"Electrical  [{status['battery_current'].value}]",
            f"  Battery voltage: {self.hover_battery_voltage:.1f}V "
            f"(sag {self.hover_battery_sag:.2f}V)",
            f"  Max current: {self.max_total_current_draw:.1f}A",
            f"  ESC loss: {self.esc_power_loss:.1f}W, "
            f"hover power: {self.hover_total_power:.0f}W",
            f"Motor Temp (5 min): {self.motor_temp_5min:.0f}°C"
            f"  [{status['motor_temp'].value}]",
            f"  Copper loss: {self.copper_loss_per_motor:.1f}W, "
            f"motor efficiency: {self.motor_efficiency * 100:.1f}%",
            "Checks:",
        ]
        for passed, label in self.checklist():
            lines.append(f"  [{'OK' if passed else 'FAIL'}] {label}")
        lines.append("All checks passed" if self.all_valid else "Some checks failed")
        return "\n".join(lines)
