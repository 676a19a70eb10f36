"""
Physics Model Tests
===================

Checks the atmosphere, electrical, propulsion, thermal and whole-vehicle
calculations against hand-computed values and published reference points.

Reference points:
- ISA sea level density 1.225 kg/m³ at 15°C
- Denver (1600m) density ~1.0 kg/m³
- RPM = Kv × (V - I × Rm)
"""

import math
import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.performance_calculator.config import GRAVITY
from src.performance_calculator.models.components import BatteryChemistry
from src.performance_calculator.calculations import (
    calc_pressure,
    calc_air_density,
    calc_motor_rpm,
    calc_battery_voltage_under_load,
    calc_wire_resistance,
    calc_wire_loss,
    calc_resistive_loss,
    calc_motor_elec_power,
    calc_motor_efficiency,
    calc_motor_current,
    calc_thrust,
    calc_prop_power,
    estimate_prop_coefficients,
    calc_coaxial_factor,
    calc_steady_state_rise,
    calc_motor_temp,
    calc_hover_throttle,
    calc_flight_time,
    calc_thrust_to_weight_ratio,
    calc_system_efficiency,
    calc_max_prop_diameter_mm,
)


class TestAtmosphere(unittest.TestCase):
    """Air density and pressure."""

    def test_sea_level_standard_day(self):
        """ISA sea level density at 15°C."""
        self.assertAlmostEqual(calc_air_density(0, 15), 1.225, places=2)

    def test_denver_density(self):
        rho = calc_air_density(1600, 15)
        self.assertGreater(rho, 0.9)
        self.assertLess(rho, 1.1)

    def test_high_altitude_freezing(self):
        rho = calc_air_density(4000, 0)
        self.assertGreater(rho, 0.5)
        self.assertLess(rho, 0.82)

    def test_density_decreases_with_altitude(self):
        densities = [calc_air_density(h, 20) for h in (0, 1000, 2000, 4000, 8000)]
        for lower, higher in zip(densities, densities[1:]):
            self.assertGreater(lower, higher)

    def test_hot_day_lowers_density(self):
        self.assertLess(calc_air_density(0, 35), calc_air_density(0, 15))

    def test_altitude_clamped(self):
        """Below sea level and above the tropopause use the range limits."""
        self.assertEqual(calc_pressure(-500), calc_pressure(0))
        self.assertEqual(calc_pressure(20000), calc_pressure(11000))

    def test_absolute_zero_gives_zero_density(self):
        self.assertEqual(calc_air_density(0, -273.15), 0.0)
        self.assertEqual(calc_air_density(0, -300), 0.0)

    def test_bounded_in_normal_range(self):
        """Finite, positive and below 1.5 kg/m³ for 0-11000 m and -20..50°C."""
        for altitude in (0, 500, 3000, 7000, 11000):
            for temp in (-20, -5, 0, 15, 25, 35, 50):
                with self.subTest(altitude=altitude, temp=temp):
                    rho = calc_air_density(altitude, temp)
                    self.assertTrue(math.isfinite(rho))
                    self.assertGreater(rho, 0)
                    self.assertLess(rho, 1.5)


class TestElectrical(unittest.TestCase):
    """Motor, battery and wiring electrical models."""

    def test_rpm_with_back_emf(self):
        # 920 × (14.8 - 10 × 0.1) = 12696
        self.assertAlmostEqual(calc_motor_rpm(920, 14.8, 10, 0.1), 12696, places=6)

    def test_rpm_at_zero_current(self):
        self.assertAlmostEqual(calc_motor_rpm(920, 14.8, 0, 0.1), 920 * 14.8, places=6)

    def test_rpm_never_negative(self):
        self.assertEqual(calc_motor_rpm(920, 5, 100, 0.5), 0.0)

    def test_battery_sag_under_load(self):
        state = calc_battery_voltage_under_load(4, "LiPo", 40, 5000, 20, 5)
        self.assertGreater(state.voltage, 13)
        self.assertLess(state.voltage, 15.5)
        # 40A × 5mΩ × 4 cells
        self.assertAlmostEqual(state.sag_volts, 0.8, places=9)

    def test_battery_no_sag_at_zero_current(self):
        state = calc_battery_voltage_under_load(4, BatteryChemistry.LIPO, 0, 5000, 20, 5)
        self.assertEqual(state.sag_volts, 0)
        self.assertAlmostEqual(state.voltage, 14.8, places=6)

    def test_battery_voltage_floored_at_cutoff(self):
        state = calc_battery_voltage_under_load(4, "LiPo", 1000, 5000, 20, 5)
        self.assertAlmostEqual(state.voltage, 3.3 * 4, places=6)
        self.assertGreater(state.sag_volts, 14.8)

    def test_unknown_chemistry_uses_lipo(self):
        unknown = calc_battery_voltage_under_load(4, "NiMH", 10, 5000, 20, 5)
        lipo = calc_battery_voltage_under_load(4, "LiPo", 10, 5000, 20, 5)
        self.assertEqual(unknown, lipo)

    def test_li_ion_nominal_voltage(self):
        state = calc_battery_voltage_under_load(6, "Li-ion", 0, 16000, 5, 15)
        self.assertAlmostEqual(state.voltage, 3.6 * 6, places=6)

    def test_wire_loss_14awg(self):
        loss = calc_wire_loss(14, 30, 20)
        self.assertGreater(loss.resistance, 0)
        self.assertGreater(loss.power_loss, 0)
        self.assertLess(loss.power_loss, 5)
        self.assertAlmostEqual(loss.power_loss, 20 * 20 * loss.resistance, places=12)

    def test_unknown_gauge_uses_14awg(self):
        self.assertEqual(calc_wire_resistance(99, 20), calc_wire_resistance(14, 20))

    def test_thicker_wire_has_lower_resistance(self):
        self.assertLess(calc_wire_resistance(10, 20), calc_wire_resistance(18, 20))

    def test_resistive_loss(self):
        self.assertAlmostEqual(calc_resistive_loss(10, 0.0015), 0.15, places=9)

    def test_elec_power(self):
        self.assertAlmostEqual(calc_motor_elec_power(14.8, 10), 148, places=9)

    def test_efficiency_ratio(self):
        self.assertAlmostEqual(calc_motor_efficiency(80, 100), 0.8, places=9)

    def test_efficiency_zero_input(self):
        self.assertEqual(calc_motor_efficiency(80, 0), 0)

    def test_efficiency_clamped(self):
        self.assertEqual(calc_motor_efficiency(110, 100), 1.0)
        self.assertEqual(calc_motor_efficiency(-5, 100), 0.0)

    def test_motor_current(self):
        # 100W / (14.8V × 0.85) + 0.5A
        expected = 100 / (14.8 * 0.85) + 0.5
        self.assertAlmostEqual(calc_motor_current(100, 14.8, 0.5, 0.85), expected, places=9)

    def test_motor_current_without_voltage(self):
        """No supply voltage leaves only the no-load current."""
        self.assertEqual(calc_motor_current(100, 0, 0.5, 0.85), 0.5)


class TestPropulsion(unittest.TestCase):
    """Propeller thrust, power and coefficient estimates."""

    def test_thrust_10in_8000rpm(self):
        thrust = calc_thrust(0.11, 1.225, 8000 / 60, 10 * 0.0254)
        self.assertGreater(thrust, 3)
        self.assertLess(thrust, 10)

    def test_zero_rps_zero_thrust(self):
        self.assertEqual(calc_thrust(0.11, 1.225, 0, 0.254), 0)
        self.assertEqual(calc_prop_power(0.047, 1.225, 0, 0.254), 0)

    def test_prop_power_range(self):
        power = calc_prop_power(0.047, 1.225, 8000 / 60, 10 * 0.0254)
        self.assertGreater(power, 10)
        self.assertLess(power, 200)

    def test_thrust_scales_with_rps_squared(self):
        base = calc_thrust(0.1, 1.2, 100, 0.25)
        self.assertAlmostEqual(calc_thrust(0.1, 1.2, 200, 0.25) / base, 4.0, places=9)

    def test_power_scales_with_rps_cubed(self):
        base = calc_prop_power(0.05, 1.2, 100, 0.25)
        self.assertAlmostEqual(calc_prop_power(0.05, 1.2, 200, 0.25) / base, 8.0, places=9)

    def test_huge_inputs_overflow_to_infinity(self):
        self.assertTrue(math.isinf(calc_thrust(0.1, 1.2, 1e200, 1.0)))

    def test_estimate_10x45(self):
        coeffs = estimate_prop_coefficients(10, 4.5, 2)
        self.assertGreater(coeffs.ct, 0.08)
        self.assertLess(coeffs.ct, 0.15)
        self.assertGreater(coeffs.cp, 0.02)
        self.assertLess(coeffs.cp, 0.08)
        self.assertAlmostEqual(coeffs.ct, 0.075 + 0.045 * 0.45, places=12)
        self.assertAlmostEqual(coeffs.cp, 0.025 + 0.035 * 0.45, places=12)

    def test_three_blade_higher_coefficients(self):
        two = estimate_prop_coefficients(5, 4, 2)
        three = estimate_prop_coefficients(5, 4, 3)
        self.assertGreater(three.ct, two.ct)
        self.assertGreater(three.cp, two.cp)

    def test_estimate_clamped(self):
        steep = estimate_prop_coefficients(5, 50, 3)
        self.assertEqual(steep.ct, 0.22)
        self.assertEqual(steep.cp, 0.12)

    def test_zero_diameter_uses_base_coefficients(self):
        coeffs = estimate_prop_coefficients(0, 4.5, 2)
        self.assertAlmostEqual(coeffs.ct, 0.075, places=12)
        self.assertAlmostEqual(coeffs.cp, 0.025, places=12)

    def test_coaxial_factor(self):
        self.assertEqual(calc_coaxial_factor(True), 0.85)
        self.assertEqual(calc_coaxial_factor(False), 1.0)
        self.assertEqual(calc_coaxial_factor(True, 0.9), 0.9)


class TestThermal(unittest.TestCase):
    """First-order motor temperature model."""

    def test_reasonable_temp_after_5_minutes(self):
        temp = calc_motor_temp(25, 5, 10, 300)
        self.assertGreater(temp, 25)
        self.assertLess(temp, 100)
        expected = 25 + 50 * (1 - math.exp(-300 / 120))
        self.assertAlmostEqual(temp, expected, places=9)

    def test_ambient_at_time_zero(self):
        self.assertEqual(calc_motor_temp(25, 5, 10, 0), 25)

    def test_negative_duration_is_ambient(self):
        self.assertEqual(calc_motor_temp(25, 5, 10, -60), 25)

    def test_approaches_steady_state(self):
        steady = 25 + calc_steady_state_rise(5, 10)
        self.assertAlmostEqual(calc_motor_temp(25, 5, 10, 1e6), steady, places=6)

    def test_zero_loss_no_rise(self):
        self.assertEqual(calc_motor_temp(30, 0, 10, 300), 30)


class TestVehiclePerformance(unittest.TestCase):
    """Hover throttle, flight time, TWR and geometry limits."""

    def test_hover_throttle_typical_quad(self):
        throttle = calc_hover_throttle(1.5, 4, 10, 1.0)
        self.assertGreater(throttle, 25)
        self.assertLess(throttle, 70)
        expected = math.sqrt((1.5 * GRAVITY / 4) / 10) * 100
        self.assertAlmostEqual(throttle, expected, places=9)

    def test_hover_throttle_no_thrust(self):
        self.assertEqual(calc_hover_throttle(1.5, 4, 0, 1.0), 100)

    def test_hover_throttle_no_motors(self):
        self.assertEqual(calc_hover_throttle(1.5, 0, 10, 1.0), 100)

    def test_hover_throttle_clamped(self):
        self.assertEqual(calc_hover_throttle(100, 4, 1, 1.0), 100)
        self.assertEqual(calc_hover_throttle(-1, 4, 10, 1.0), 0)

    def test_coaxial_needs_more_throttle(self):
        flat = calc_hover_throttle(2, 8, 10, 1.0)
        coax = calc_hover_throttle(2, 8, 10, 0.85)
        self.assertGreater(coax, flat)

    def test_flight_time_12_minutes(self):
        self.assertAlmostEqual(calc_flight_time(5000, 0.8, 20), 12.0, places=9)

    def test_flight_time_infinite_without_current(self):
        self.assertEqual(calc_flight_time(5000, 0.8, 0), math.inf)

    def test_twr(self):
        self.assertAlmostEqual(calc_thrust_to_weight_ratio(40, 1.5), 2.72, places=2)

    def test_twr_weightless(self):
        self.assertEqual(calc_thrust_to_weight_ratio(40, 0), 0)

    def test_system_efficiency(self):
        # 1 kgf of thrust for 100W
        self.assertAlmostEqual(calc_system_efficiency(GRAVITY, 100), 10.0, places=9)
        self.assertEqual(calc_system_efficiency(10, 0), 0)

    def test_max_prop_diameter(self):
        self.assertAlmostEqual(calc_max_prop_diameter_mm(350, 4), 350 * 0.707, places=9)
        self.assertAlmostEqual(calc_max_prop_diameter_mm(600, 6), 300, places=9)
        self.assertAlmostEqual(calc_max_prop_diameter_mm(600, 5), 300, places=9)


if __name__ == "__main__":
    unittest.main(verbosity=2)
