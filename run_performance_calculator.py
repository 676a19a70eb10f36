#!/usr/bin/env python3
"""
Drone Performance Calculator Launcher
=====================================

Console front end for the multirotor performance calculator.

Simulates a drone configuration and prints flight time, hover and
full-throttle figures, losses, motor temperature and the design checklist.

Features:
- Load a configuration from JSON (camelCase or snake_case keys)
- Default reference quad when no file is given
- Optional step-by-step calculation trace
- Optional performance charts

Usage:
    python run_performance_calculator.py
    python run_performance_calculator.py my_quad.json --trace
    python run_performance_calculator.py --battery "6S 1300mAh 95C" \\
        --motor "2207 1750KV" --esc "45A BLHeli_32" --prop "5045 Tri" \\
        --frame '5" Freestyle' --plot

Requirements:
    - Python 3.9+
    - numpy
    - matplotlib
    - pandas
"""

import argparse
import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from src.performance_calculator import (
    DroneConfiguration,
    run_full_simulation,
    trace_simulation,
    default_quad,
    build_configuration,
)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Estimate multirotor flight performance from its components."
    )
    parser.add_argument("config", nargs="?", help="JSON configuration file")
    parser.add_argument("--battery", help="Battery name from the component database")
    parser.add_argument("--motor", help="Motor name from the component database")
    parser.add_argument("--esc", help="ESC name from the component database")
    parser.add_argument("--prop", help="Propeller name from the component database")
    parser.add_argument("--frame", help="Frame preset name")
    parser.add_argument("--environment", help="Environment preset name")
    parser.add_argument("--trace", action="store_true", help="Print the calculation trace")
    parser.add_argument("--plot", action="store_true", help="Show performance charts")
    return parser.parse_args(argv)


def _load_configuration(args) -> DroneConfiguration:
    parts = (args.battery, args.motor, args.esc, args.prop)
    if any(parts):
        if not all(parts):
            raise ValueError("--battery, --motor, --esc and --prop must be given together")
        return build_configuration(
            battery=args.battery,
            motor=args.motor,
            propeller=args.prop,
            esc=args.esc,
            frame=args.frame,
            environment=args.environment,
        )

    if args.config is None:
        return default_quad()

    with open(args.config, 'r') as f:
        data = json.load(f)
    return DroneConfiguration.from_dict(data)


def main(argv=None) -> int:
    """Run the calculator from the command line."""
    args = _parse_args(argv)

    print("=" * 60)
    print("Drone Performance Calculator")
    print("=" * 60)
    print()

    try:
        drone = _load_configuration(args)
    except (OSError, ValueError, TypeError, KeyError) as e:
        print(f"[ERROR] Could not load configuration: {e}")
        return 1

    ok, message = drone.validate()
    if not ok:
        print(f"[WARNING] {message}")
        print()

    if args.trace:
        result, debugger = trace_simulation(drone)
        print(debugger.get_report())
        print()
    else:
        result = run_full_simulation(drone, verbose=True)

    print(result.summary())

    if args.plot:
        import matplotlib.pyplot as plt
        from src.performance_calculator import PerformancePlotter

        PerformancePlotter().plot_dashboard(drone, result)
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
