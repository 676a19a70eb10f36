"""
Model Tests
===========

Component records, configuration conversion and validation, and the
result records' summary helpers.
"""

import math
import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.performance_calculator import (
    BatteryChemistry,
    FrameLayout,
    Battery,
    Frame,
    Propeller,
    DroneConfiguration,
    Validations,
    StatusLevel,
    get_status,
    format_flight_time,
    run_full_simulation,
    default_quad,
)
from src.performance_calculator.models.components import camel_to_snake, snake_to_camel, as_number


class TestEnums(unittest.TestCase):
    """Chemistry and layout lookups."""

    def test_chemistry_voltages(self):
        self.assertEqual(BatteryChemistry.LIPO.nominal_voltage, 3.7)
        self.assertEqual(BatteryChemistry.LIHV.max_voltage, 4.35)
        self.assertEqual(BatteryChemistry.LI_ION.min_voltage, 2.8)

    def test_chemistry_from_name(self):
        self.assertIs(BatteryChemistry.from_name("Li-ion"), BatteryChemistry.LI_ION)
        self.assertIs(BatteryChemistry.from_name(BatteryChemistry.LIHV), BatteryChemistry.LIHV)

    def test_unknown_chemistry_is_lipo(self):
        self.assertIs(BatteryChemistry.from_name("NiMH"), BatteryChemistry.LIPO)
        self.assertIs(BatteryChemistry.from_name(None), BatteryChemistry.LIPO)

    def test_layout_from_name(self):
        self.assertIs(FrameLayout.from_name("coaxial"), FrameLayout.COAXIAL)
        self.assertIs(FrameLayout.from_name("flat"), FrameLayout.FLAT)
        self.assertIs(FrameLayout.from_name("x8"), FrameLayout.FLAT)


class TestComponentRecords(unittest.TestCase):
    """Record construction and normalization."""

    def test_frame_layout_normalized(self):
        frame = Frame(motor_count=8, layout="coaxial")
        self.assertIs(frame.layout, FrameLayout.COAXIAL)
        self.assertTrue(frame.is_coaxial)
        self.assertFalse(Frame().is_coaxial)

    def test_battery_chemistry_normalized(self):
        battery = Battery(chemistry="LiHV", cells_s=6, cells_p=2)
        self.assertIs(battery.chemistry, BatteryChemistry.LIHV)
        self.assertEqual(battery.configuration_string, "6S2P")

    def test_propeller_size_string(self):
        self.assertEqual(Propeller(diameter_in=5.1, pitch_in=4.6).size_string, "5.1x4.6")

    def test_records_are_immutable(self):
        with self.assertRaises(AttributeError):
            Frame().motor_count = 6


class TestKeyConversion(unittest.TestCase):

    def test_camel_to_snake(self):
        self.assertEqual(camel_to_snake("internalResistanceMohm"), "internal_resistance_mohm")
        self.assertEqual(camel_to_snake("cellsS"), "cells_s")
        self.assertEqual(camel_to_snake("kv"), "kv")

    def test_snake_to_camel(self):
        self.assertEqual(snake_to_camel("wire_awg"), "wireAwg")
        self.assertEqual(snake_to_camel("cells_s"), "cellsS")


class TestNumericCoercion(unittest.TestCase):
    """Field values as numbers for the simulation."""

    def test_numbers_become_floats(self):
        self.assertEqual(as_number(4), 4.0)
        self.assertIsInstance(as_number(4), float)
        self.assertEqual(as_number(0.12), 0.12)
        self.assertEqual(as_number(0), 0.0)

    def test_numeric_strings(self):
        self.assertEqual(as_number("6"), 6.0)
        self.assertEqual(as_number(" 1.5 "), 1.5)
        self.assertEqual(as_number("-20"), -20.0)

    def test_huge_integers_become_infinite(self):
        self.assertEqual(as_number(10 ** 400), math.inf)
        self.assertEqual(as_number(-(10 ** 400)), -math.inf)

    def test_non_numbers(self):
        for value in (None, "four", "", True, [4], {"cells": 4}, float("nan"), "nan"):
            with self.subTest(value=value):
                self.assertIsNone(as_number(value))


class TestDroneConfiguration(unittest.TestCase):
    """Mapping conversion, section replacement and range validation."""

    def test_from_camel_case(self):
        drone = DroneConfiguration.from_dict({
            "battery": {"cellsS": 6, "capacityMah": 1300, "internalResistanceMohm": 3},
            "frame": {"layout": "coaxial", "motorCount": 8},
        })
        self.assertEqual(drone.battery.cells_s, 6)
        self.assertEqual(drone.battery.capacity_mah, 1300)
        self.assertEqual(drone.battery.internal_resistance_mohm, 3)
        self.assertTrue(drone.frame.is_coaxial)

    def test_from_snake_case(self):
        drone = DroneConfiguration.from_dict({"esc": {"wire_awg": 12, "continuous_a": 45}})
        self.assertEqual(drone.esc.wire_awg, 12)
        self.assertEqual(drone.esc.continuous_a, 45)

    def test_unknown_keys_ignored(self):
        drone = DroneConfiguration.from_dict({
            "motor": {"kv": 1750, "poles": 14},
            "gimbal": {"weightG": 200},
        })
        self.assertEqual(drone.motor.kv, 1750)

    def test_missing_sections_default(self):
        self.assertEqual(DroneConfiguration.from_dict({}), DroneConfiguration())

    def test_non_mapping_rejected(self):
        with self.assertRaises(TypeError):
            DroneConfiguration.from_dict([("battery", {})])

    def test_non_mapping_section_is_missing(self):
        drone = DroneConfiguration.from_dict({"battery": [], "frame": 5, "motor": "2212"})
        self.assertEqual(drone, DroneConfiguration())

    def test_non_string_keys_ignored(self):
        drone = DroneConfiguration.from_dict({"battery": {4: "cells", "cellsS": 6}})
        self.assertEqual(drone.battery.cells_s, 6)

    def test_dict_round_trip(self):
        drone = default_quad()
        data = drone.to_dict()
        self.assertEqual(data["frame"]["layout"], "flat")
        self.assertEqual(data["battery"]["chemistry"], "LiPo")
        self.assertIn("wireAwg", data["esc"])
        self.assertEqual(DroneConfiguration.from_dict(data), drone)

    def test_replace_section(self):
        drone = default_quad().replace_section("battery", cells_s=6)
        self.assertEqual(drone.battery.cells_s, 6)
        self.assertEqual(drone.battery.capacity_mah, 5000)
        self.assertEqual(default_quad().battery.cells_s, 4)

    def test_replace_unknown_section(self):
        with self.assertRaises(KeyError):
            default_quad().replace_section("gimbal", weight_g=100)

    def test_default_quad_valid(self):
        ok, message = default_quad().validate()
        self.assertTrue(ok, message)

    def test_out_of_range_reported(self):
        drone = default_quad().replace_section("battery", discharge_depth=99)
        ok, message = drone.validate()
        self.assertFalse(ok)
        self.assertIn("battery.discharge_depth", message)

    def test_non_numeric_reported(self):
        drone = DroneConfiguration.from_dict({"motor": {"kv": "fast"}})
        ok, message = drone.validate()
        self.assertFalse(ok)
        self.assertIn("motor.kv must be a number", message)

    def test_cell_range_order_reported(self):
        drone = default_quad().replace_section("esc", min_cells=6, max_cells=3)
        ok, message = drone.validate()
        self.assertFalse(ok)
        self.assertIn("esc.min_cells", message)


class TestStatusHelpers(unittest.TestCase):
    """Dashboard status levels and flight time formatting."""

    def test_higher_is_worse(self):
        self.assertIs(get_status(40, 50, 70), StatusLevel.SAFE)
        self.assertIs(get_status(60, 50, 70), StatusLevel.CAUTION)
        self.assertIs(get_status(75, 50, 70), StatusLevel.DANGER)

    def test_inverted(self):
        self.assertIs(get_status(3.0, 2.5, 2.0, invert_direction=True), StatusLevel.SAFE)
        self.assertIs(get_status(2.2, 2.5, 2.0, invert_direction=True), StatusLevel.CAUTION)
        self.assertIs(get_status(1.5, 2.5, 2.0, invert_direction=True), StatusLevel.DANGER)

    def test_format_flight_time(self):
        self.assertEqual(format_flight_time(90), "1h 30m")
        self.assertEqual(format_flight_time(12.5), "12m 30s")
        self.assertEqual(format_flight_time(12), "12 min")

    def test_format_rounds_half_up(self):
        # 22.5 s and 30.5 min are exact in binary
        self.assertEqual(format_flight_time(12.375), "12m 23s")
        self.assertEqual(format_flight_time(90.5), "1h 31m")

    def test_format_unknown_flight_time(self):
        self.assertEqual(format_flight_time(math.inf), "—")
        self.assertEqual(format_flight_time(0), "—")
        self.assertEqual(format_flight_time(-3), "—")


class TestResultRecords(unittest.TestCase):
    """Validations and SimulationResult helpers."""

    def test_validations_helpers(self):
        checks = dict.fromkeys([
            "motor_current_ok", "esc_current_ok", "battery_discharge_ok",
            "battery_burst_ok", "prop_size_ok", "twr_ok", "motor_temp_ok",
            "hover_throttle_ok", "esc_voltage_ok", "motor_voltage_ok",
        ], True)
        self.assertTrue(Validations(**checks).all_valid)

        checks["twr_ok"] = False
        validations = Validations(**checks)
        self.assertFalse(validations.all_valid)
        self.assertEqual(validations.failed_checks(), ["twr_ok"])
        self.assertFalse(validations.to_dict()["twrOk"])
        self.assertEqual(len(validations.items()), 10)

    def test_summary_and_checklist(self):
        result = run_full_simulation(default_quad())
        checklist = result.checklist()
        self.assertEqual(len(checklist), 10)

        summary = result.summary()
        self.assertIn("Flight Time:", summary)
        self.assertIn("Thrust/Weight:", summary)
        self.assertIn("[FAIL] Propeller size", summary)
        self.assertIn("Some checks failed", summary)

    def test_status_levels(self):
        result = run_full_simulation(default_quad())
        levels = result.status_levels()
        self.assertEqual(set(levels), {"hover_throttle", "twr", "battery_current", "motor_temp"})
        self.assertIs(levels["hover_throttle"], StatusLevel.SAFE)
        self.assertIs(levels["twr"], StatusLevel.SAFE)
        self.assertIs(levels["motor_temp"], StatusLevel.SAFE)


if __name__ == "__main__":
    unittest.main(verbosity=2)
