"""
Curve, Plot and Comparison Tests
================================

Performance sweeps, matplotlib charts (Agg backend, nothing is shown) and
the pandas comparison table.
"""

import sys
from pathlib import Path
import unittest

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.performance_calculator import (
    run_full_simulation,
    default_quad,
    build_configuration,
    thrust_vs_throttle,
    efficiency_vs_throttle,
    flight_time_vs_payload,
    PerformancePlotter,
    COMPARISON_METRICS,
    compare_results,
    best_configuration,
)


class TestPerformanceCurves(unittest.TestCase):
    """Thrust, efficiency and payload sweeps."""

    @classmethod
    def setUpClass(cls):
        cls.drone = default_quad()
        cls.result = run_full_simulation(cls.drone)

    def test_thrust_curve_shape(self):
        curve = thrust_vs_throttle(self.drone, self.result)
        self.assertEqual(len(curve), 21)
        self.assertEqual(curve.x[0], 0)
        self.assertEqual(curve.x[-1], 100)
        self.assertEqual(curve.y[0], 0)
        self.assertTrue(np.all(np.diff(curve.y) > 0))

    def test_thrust_curve_ends_at_max_thrust(self):
        curve = thrust_vs_throttle(self.drone, self.result)
        self.assertAlmostEqual(curve.y[-1], self.result.max_thrust_per_motor_g, places=6)

    def test_thrust_curve_marks_hover(self):
        curve = thrust_vs_throttle(self.drone, self.result)
        self.assertTrue(curve.has_marker)
        self.assertEqual(curve.marker_x, self.result.hover_throttle)
        self.assertAlmostEqual(curve.marker_y, self.result.hover_thrust_per_motor, places=6)

    def test_efficiency_curve(self):
        curve = efficiency_vs_throttle(self.drone, self.result)
        self.assertEqual(curve.x[0], 10)
        self.assertEqual(curve.x[-1], 100)
        self.assertEqual(len(curve), 19)
        self.assertTrue(np.all(curve.y > 0))
        # Thrust ∝ n², power ∝ n³
        self.assertTrue(np.all(np.diff(curve.y) < 0))
        self.assertFalse(curve.has_marker)

    def test_efficiency_zero_without_power(self):
        result = run_full_simulation(default_quad().replace_section("environment", temperature=-300))
        curve = efficiency_vs_throttle(default_quad(), result)
        self.assertTrue(np.all(curve.y == 0))

    def test_flight_time_falls_with_payload(self):
        curve = flight_time_vs_payload(self.drone, self.result)
        self.assertGreater(len(curve), 1)
        self.assertEqual(curve.x[0], 0)
        self.assertAlmostEqual(curve.y[0], self.result.flight_time_min, places=6)
        self.assertTrue(np.all(np.diff(curve.y) < 0))
        self.assertTrue(np.all((curve.y > 0) & (curve.y < 120)))

    def test_flight_time_marker_at_payload(self):
        drone = self.drone.replace_section("frame", payload_weight=300)
        result = run_full_simulation(drone)
        curve = flight_time_vs_payload(drone, result)
        self.assertEqual(curve.marker_x, 300)
        self.assertIsNotNone(curve.marker_y)

    def test_curve_to_frame(self):
        frame = thrust_vs_throttle(self.drone, self.result).to_frame()
        self.assertIsInstance(frame, pd.DataFrame)
        self.assertEqual(list(frame.columns), ["Throttle (%)", "Thrust per motor (g)"])

    def test_accepts_mapping(self):
        mapping = self.drone.to_dict()
        curve = thrust_vs_throttle(mapping, self.result)
        np.testing.assert_allclose(curve.y, thrust_vs_throttle(self.drone, self.result).y)


class TestComparison(unittest.TestCase):
    """Comparison table across configurations."""

    @classmethod
    def setUpClass(cls):
        long_range = build_configuration(
            battery="4S 5200mAh 50C", motor="2212 920KV", esc="30A BLHeli_S",
            propeller="1045", frame='7" Long Range',
        )
        freestyle = build_configuration(
            battery="6S 1300mAh 95C", motor="2207 1750KV", esc="45A BLHeli_32",
            propeller="5045 Tri", frame='5" Freestyle',
        )
        cls.results = {
            "Reference": run_full_simulation(default_quad()),
            "Long range": run_full_simulation(long_range),
            "Freestyle": run_full_simulation(freestyle),
        }

    def test_table_shape(self):
        table = compare_results(self.results)
        self.assertEqual(table.shape, (len(COMPARISON_METRICS), 3))
        self.assertEqual(list(table.columns), ["Reference", "Long range", "Freestyle"])
        self.assertEqual(list(table.index), [label for label, _ in COMPARISON_METRICS])

    def test_table_values(self):
        table = compare_results(self.results)
        reference = self.results["Reference"]
        self.assertEqual(table.loc["Flight time (min)", "Reference"], reference.flight_time_min)
        self.assertEqual(table.loc["Thrust/weight", "Reference"], reference.twr)

    def test_empty_comparison(self):
        table = compare_results({})
        self.assertEqual(table.shape, (len(COMPARISON_METRICS), 0))

    def test_best_configuration(self):
        best = best_configuration(self.results, metric="twr", require_valid=False)
        twrs = {label: r.twr for label, r in self.results.items()}
        self.assertEqual(best, max(twrs, key=twrs.get))

    def test_best_configuration_none_valid(self):
        reference = {"Reference": self.results["Reference"]}
        self.assertEqual(best_configuration(reference), "")


class TestPlotter(unittest.TestCase):
    """Chart generation on the Agg backend."""

    @classmethod
    def setUpClass(cls):
        cls.drone = default_quad()
        cls.result = run_full_simulation(cls.drone)
        cls.plotter = PerformancePlotter()

    def tearDown(self):
        plt.close("all")

    def test_thrust_curve_new_figure(self):
        fig = self.plotter.plot_thrust_curve(self.drone, self.result)
        ax = fig.axes[0]
        self.assertEqual(ax.get_xlabel(), "Throttle (%)")
        self.assertEqual(ax.get_title(), "Thrust vs Throttle")
        # Curve plus hover marker
        self.assertEqual(len(ax.lines), 2)

    def test_draws_on_given_axes(self):
        fig, ax = plt.subplots()
        returned = self.plotter.plot_efficiency_curve(self.drone, self.result, ax=ax)
        self.assertIs(returned, fig)
        self.assertEqual(len(ax.lines), 1)

    def test_flight_time_chart(self):
        fig = self.plotter.plot_flight_time_curve(self.drone, self.result)
        self.assertEqual(fig.axes[0].get_ylabel(), "Flight time (min)")

    def test_dashboard(self):
        fig = self.plotter.plot_dashboard(self.drone, self.result)
        self.assertEqual(len(fig.axes), 3)
        self.assertTrue(any("TWR" in text.get_text() for text in fig.texts))

    def test_comparison_chart(self):
        results = {"A": self.result, "B": run_full_simulation(
            self.drone.replace_section("battery", cells_p=2, weight_g=960))}
        fig = self.plotter.plot_comparison(results)
        visible = [ax for ax in fig.axes if ax.get_visible()]
        self.assertEqual(len(visible), len(COMPARISON_METRICS))

    def test_comparison_subset(self):
        fig = self.plotter.plot_comparison(
            {"A": self.result}, metrics=("Flight time (min)", "Thrust/weight")
        )
        visible = [ax for ax in fig.axes if ax.get_visible()]
        self.assertEqual(len(visible), 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
