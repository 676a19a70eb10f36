"""
Drone Performance Calculator - Main Package
===========================================

Tools for multirotor drone design analysis.

This package provides:
- Performance Calculator (performance_calculator): flight time, hover and
  full-throttle performance, losses, motor temperature and design checks
  for a complete drone configuration

Author: DroneEfficiencyOptimizer Team
"""

__version__ = "0.2.0"
__author__ = "DroneEfficiencyOptimizer Team"
