"""
Configuration Comparison
========================

Tabulates headline metrics of several simulated configurations side by
side, one column per configuration.
"""

from typing import Dict, List, Mapping, Tuple

import pandas as pd

from .models.results import SimulationResult


# (row label, SimulationResult attribute)
COMPARISON_METRICS: List[Tuple[str, str]] = [
    ("Total weight (g)", "total_weight_g"),
    ("Flight time (min)", "flight_time_min"),
    ("Hover throttle (%)", "hover_throttle"),
    ("Thrust/weight", "twr"),
    ("Max thrust (g)", "max_total_thrust_g"),
    ("Hover power (W)", "hover_total_power"),
    ("Efficiency (g/W)", "hover_efficiency"),
    ("Motor temp 5min (°C)", "motor_temp_5min"),
]


def compare_results(results: Mapping[str, SimulationResult]) -> pd.DataFrame:
    """
    Build a comparison table of simulation results.

    Parameters:
    ----------
    results : mapping
        Simulation results keyed by configuration label, in display order

    Returns:
    -------
    pd.DataFrame
        Rows are the COMPARISON_METRICS labels, columns the configuration
        labels. An empty mapping gives a table with the metric rows and no
        columns.
    """
    data: Dict[str, List[float]] = {
        label: [float(getattr(result, attr)) for _, attr in COMPARISON_METRICS]
        for label, result in results.items()
    }
    index = [name for name, _ in COMPARISON_METRICS]
    table = pd.DataFrame(data, index=index)
    table.index.name = "Metric"
    return table


def best_configuration(
    results: Mapping[str, SimulationResult],
    metric: str = "flight_time_min",
    require_valid: bool = True
) -> str:
    """
    Label of the configuration with the highest value of a metric.

    Parameters:
    ----------
    results : mapping
        Simulation results keyed by configuration label

    metric : str
        SimulationResult attribute to maximize

    require_valid : bool
        Only consider configurations that pass every validation check

    Returns:
    -------
    str
        Best label, or "" when no configuration qualifies
    """
    candidates = {
        label: getattr(result, metric)
        for label, result in results.items()
        if result.all_valid or not require_valid
    }
    if not candidates:
        return ""
    return max(candidates, key=candidates.get)
