"""
Performance Calculator Data Module
==================================

Stock component database, presets and lookup functions.
"""

from .component_database import (
    BATTERY_DATABASE,
    MOTOR_DATABASE,
    PROPELLER_DATABASE,
    ESC_DATABASE,
    FRAME_PRESETS,
    ENVIRONMENT_PRESETS,
    get_battery,
    get_motor,
    get_propeller,
    get_esc,
    get_frame_preset,
    get_environment_preset,
    list_batteries,
    list_motors,
    list_propellers,
    list_escs,
    list_frame_presets,
    list_environment_presets,
    list_motors_for_cells,
    build_configuration,
    default_quad,
)

__all__ = [
    "BATTERY_DATABASE",
    "MOTOR_DATABASE",
    "PROPELLER_DATABASE",
    "ESC_DATABASE",
    "FRAME_PRESETS",
    "ENVIRONMENT_PRESETS",
    "get_battery",
    "get_motor",
    "get_propeller",
    "get_esc",
    "get_frame_preset",
    "get_environment_preset",
    "list_batteries",
    "list_motors",
    "list_propellers",
    "list_escs",
    "list_frame_presets",
    "list_environment_presets",
    "list_motors_for_cells",
    "build_configuration",
    "default_quad",
]
