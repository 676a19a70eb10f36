"""
Performance Calculator Plotting Module
======================================

Matplotlib charts for a simulated configuration:

- Thrust vs throttle, with the hover point highlighted
- Propeller efficiency vs throttle
- Flight time vs added payload, with the configured payload highlighted
- A three-panel dashboard of all of the above
- Side-by-side bar comparison of several configurations

Usage:
-----
    from src.performance_calculator import PerformancePlotter, run_full_simulation

    result = run_full_simulation(drone)
    plotter = PerformancePlotter()
    plotter.plot_dashboard(drone, result)
    plt.show()
"""

from typing import Any, Mapping, Optional, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .config import PerformanceCalculatorConfig, DEFAULT_CONFIG
from .models.components import DroneConfiguration
from .models.results import SimulationResult
from .curves import (
    PerformanceCurve,
    thrust_vs_throttle,
    efficiency_vs_throttle,
    flight_time_vs_payload,
)
from .comparison import compare_results


class PerformancePlotter:
    """
    Drone performance visualization class.

    Each plot method draws on the given axes, or on a new figure when no
    axes are given, and returns the figure.

    Example:
    -------
        plotter = PerformancePlotter()
        plotter.plot_thrust_curve(drone, result)
        plotter.plot_comparison({"4S": result_4s, "6S": result_6s})
        plt.show()
    """

    # =========================================================================
    # Default Plot Styling
    # =========================================================================

    DEFAULT_FIGURE_SIZE = (8, 5)
    DASHBOARD_FIGURE_SIZE = (16, 5)
    LINE_COLOR = 'tab:blue'
    EFFICIENCY_COLOR = 'tab:green'
    FLIGHT_TIME_COLOR = 'tab:orange'
    MARKER_COLOR = 'tab:red'

    def __init__(self, config: Optional[PerformanceCalculatorConfig] = None):
        """
        Initialize the plotter.

        Parameters:
        ----------
        config : PerformanceCalculatorConfig, optional
            Model assumptions used for the payload sweep. Uses default if
            not specified.
        """
        self.config = config if config is not None else DEFAULT_CONFIG

    def _axes(self, ax: Optional[Axes], figsize) -> Tuple[Figure, Axes]:
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize or self.DEFAULT_FIGURE_SIZE)
        else:
            fig = ax.get_figure()
        return fig, ax

    def plot_curve(
        self,
        curve: PerformanceCurve,
        color: Optional[str] = None,
        marker_label: str = "",
        figsize: Optional[Tuple[int, int]] = None,
        ax: Optional[Axes] = None
    ) -> Figure:
        """
        Plot a single performance curve.

        Parameters:
        ----------
        curve : PerformanceCurve
            Series to draw.

        color : str, optional
            Line color.

        marker_label : str
            Legend label for the highlighted point. The point is drawn
            only when the curve has one.

        figsize : tuple, optional
            Figure size.

        ax : Axes, optional
            Existing axes.

        Returns:
        -------
        Figure
            Matplotlib figure object.
        """
        fig, ax = self._axes(ax, figsize)

        ax.plot(curve.x, curve.y, color=color or self.LINE_COLOR, linewidth=2)
        if curve.has_marker:
            ax.plot(
                curve.marker_x, curve.marker_y, 'o',
                color=self.MARKER_COLOR, markersize=7,
                label=marker_label or None,
            )
            if marker_label:
                ax.legend(loc='best')

        ax.set_xlabel(curve.x_label)
        ax.set_ylabel(curve.y_label)
        ax.set_title(curve.name)
        ax.grid(True, alpha=0.3)

        return fig

    # =========================================================================
    # Individual Charts
    # =========================================================================

    def plot_thrust_curve(
        self,
        drone: Union[DroneConfiguration, Mapping[str, Any]],
        result: SimulationResult,
        figsize: Optional[Tuple[int, int]] = None,
        ax: Optional[Axes] = None
    ) -> Figure:
        """Thrust per motor vs throttle with the hover point marked."""
        curve = thrust_vs_throttle(drone, result)
        return self.plot_curve(
            curve,
            marker_label=f"Hover ({result.hover_throttle:.0f}%)",
            figsize=figsize,
            ax=ax,
        )

    def plot_efficiency_curve(
        self,
        drone: Union[DroneConfiguration, Mapping[str, Any]],
        result: SimulationResult,
        figsize: Optional[Tuple[int, int]] = None,
        ax: Optional[Axes] = None
    ) -> Figure:
        """Propeller g/W vs throttle."""
        curve = efficiency_vs_throttle(drone, result)
        return self.plot_curve(curve, color=self.EFFICIENCY_COLOR, figsize=figsize, ax=ax)

    def plot_flight_time_curve(
        self,
        drone: Union[DroneConfiguration, Mapping[str, Any]],
        result: SimulationResult,
        figsize: Optional[Tuple[int, int]] = None,
        ax: Optional[Axes] = None
    ) -> Figure:
        """Flight time vs added payload with the configured payload marked."""
        curve = flight_time_vs_payload(drone, result, config=self.config)
        return self.plot_curve(
            curve,
            color=self.FLIGHT_TIME_COLOR,
            marker_label="Current payload",
            figsize=figsize,
            ax=ax,
        )

    # =========================================================================
    # Dashboard and Comparison
    # =========================================================================

    def plot_dashboard(
        self,
        drone: Union[DroneConfiguration, Mapping[str, Any]],
        result: SimulationResult,
        figsize: Optional[Tuple[int, int]] = None
    ) -> Figure:
        """
        Draw the thrust, efficiency and flight time charts side by side.

        The figure title carries flight time, TWR and whether every
        validation check passed.
        """
        fig, (ax_thrust, ax_eff, ax_time) = plt.subplots(
            1, 3, figsize=figsize or self.DASHBOARD_FIGURE_SIZE
        )

        self.plot_thrust_curve(drone, result, ax=ax_thrust)
        self.plot_efficiency_curve(drone, result, ax=ax_eff)
        self.plot_flight_time_curve(drone, result, ax=ax_time)

        status = "all checks passed" if result.all_valid else "some checks failed"
        fig.suptitle(
            f"Flight time {result.flight_time_min:.1f} min | "
            f"TWR {result.twr:.2f} | {status}"
        )
        fig.tight_layout()

        return fig

    def plot_comparison(
        self,
        results: Mapping[str, SimulationResult],
        metrics: Optional[Tuple[str, ...]] = None,
        figsize: Optional[Tuple[int, int]] = None
    ) -> Figure:
        """
        Bar charts comparing headline metrics across configurations.

        Parameters:
        ----------
        results : mapping
            Simulation results keyed by configuration label.

        metrics : tuple, optional
            Metric labels (rows of the comparison table) to draw. All
            comparison metrics if not specified.

        figsize : tuple, optional
            Figure size.

        Returns:
        -------
        Figure
            Matplotlib figure object.
        """
        table = compare_results(results)
        if metrics is not None:
            table = table.loc[list(metrics)]

        n = len(table.index)
        cols = min(4, max(1, n))
        rows = max(1, -(-n // cols))
        fig, axes = plt.subplots(
            rows, cols,
            figsize=figsize or (4 * cols, 3.5 * rows),
            squeeze=False,
        )

        for ax, (metric, row) in zip(axes.flat, table.iterrows()):
            ax.bar(row.index.astype(str), row.values, color=self.LINE_COLOR)
            ax.set_title(metric)
            ax.grid(True, axis='y', alpha=0.3)
            ax.tick_params(axis='x', labelrotation=30)

        for ax in list(axes.flat)[n:]:
            ax.set_visible(False)

        fig.tight_layout()
        return fig
