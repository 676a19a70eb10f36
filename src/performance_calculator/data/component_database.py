"""
Component Database
==================

Stock batteries, motors, propellers, ESCs, frame presets and environment
presets for quick configuration. Specifications are typical values for
generic hobby-grade parts; measured propeller coefficients are static
thrust stand figures.
"""

from typing import Dict, List, Optional

from ..models.components import (
    BatteryChemistry,
    FrameLayout,
    Environment,
    Frame,
    Battery,
    Motor,
    Esc,
    Propeller,
    DroneConfiguration,
)


# =============================================================================
# Batteries
# =============================================================================

def _lipo(name, cells, capacity, c_rating, burst_c, weight, ir_mohm,
          chemistry=BatteryChemistry.LIPO) -> Battery:
    return Battery(
        chemistry=chemistry,
        cells_s=cells,
        cells_p=1,
        capacity_mah=capacity,
        c_rating=c_rating,
        burst_c=burst_c,
        internal_resistance_mohm=ir_mohm,
        weight_g=weight,
        name=name,
    )


BATTERY_DATABASE: Dict[str, Battery] = {
    battery.name: battery for battery in [
        # Racing packs
        _lipo("3S 1300mAh 95C", 3, 1300, 95, 190, 155, 3),
        _lipo("4S 1300mAh 95C", 4, 1300, 95, 190, 205, 3),
        _lipo("4S 1550mAh 100C", 4, 1550, 100, 200, 220, 2.5),
        _lipo("6S 1100mAh 95C", 6, 1100, 95, 190, 190, 3),
        _lipo("6S 1300mAh 95C", 6, 1300, 95, 190, 235, 3),
        # Endurance packs
        _lipo("4S 5000mAh 20C", 4, 5000, 20, 40, 480, 5),
        _lipo("4S 5200mAh 50C", 4, 5200, 50, 100, 580, 3),
        _lipo("6S 5000mAh 25C", 6, 5000, 25, 50, 720, 4),
        _lipo("6S 10000mAh 25C", 6, 10000, 25, 50, 1300, 3),
        _lipo("6S 16000mAh Li-ion", 6, 16000, 5, 10, 1400, 15,
              chemistry=BatteryChemistry.LI_ION),
    ]
}


# =============================================================================
# Motors
# =============================================================================

def _motor(name, kv, resistance, no_load, max_current, max_power, weight,
           stator_d, stator_h, min_cells, max_cells) -> Motor:
    return Motor(
        kv=kv,
        resistance=resistance,
        no_load_current=no_load,
        max_current=max_current,
        max_power=max_power,
        weight_g=weight,
        min_cells=min_cells,
        max_cells=max_cells,
        stator_diameter=stator_d,
        stator_height=stator_h,
        name=name,
    )


MOTOR_DATABASE: Dict[str, Motor] = {
    motor.name: motor for motor in [
        # 5" class and smaller
        _motor("1806 2300KV", 2300, 0.120, 0.6, 20, 250, 20, 18, 6, 2, 3),
        _motor("2204 2300KV", 2300, 0.095, 0.7, 28, 380, 25, 22, 4, 2, 4),
        _motor("2206 2300KV", 2300, 0.072, 0.8, 36, 580, 32, 22, 6, 3, 4),
        _motor("2207 1750KV", 1750, 0.065, 0.6, 38, 620, 34, 22, 7, 4, 6),
        _motor("2207 2550KV", 2550, 0.055, 1.0, 42, 720, 36, 22, 7, 3, 4),
        _motor("2306 1700KV", 1700, 0.080, 0.5, 32, 500, 31, 23, 6, 4, 6),
        # Camera platforms and long range
        _motor("2212 920KV", 920, 0.120, 0.4, 20, 280, 56, 22, 12, 2, 4),
        _motor("2212 1000KV", 1000, 0.110, 0.5, 22, 300, 55, 22, 12, 2, 4),
        _motor("2814 700KV", 700, 0.085, 0.3, 25, 420, 98, 28, 14, 3, 6),
        _motor("3508 380KV", 380, 0.155, 0.3, 18, 350, 135, 35, 8, 3, 6),
        _motor("3510 700KV", 700, 0.070, 0.4, 30, 550, 128, 35, 10, 4, 8),
        # Heavy lift
        _motor("4006 380KV", 380, 0.200, 0.2, 15, 280, 120, 40, 6, 4, 8),
        _motor("4010 370KV", 370, 0.130, 0.3, 20, 400, 178, 40, 10, 4, 8),
        _motor("5008 340KV", 340, 0.120, 0.3, 22, 450, 230, 50, 8, 6, 12),
        _motor("U8 Lite 100KV", 100, 0.320, 0.2, 40, 2400, 450, 85, 15, 6, 12),
    ]
}


# =============================================================================
# Propellers (measured Ct/Cp)
# =============================================================================

PROPELLER_DATABASE: Dict[str, Propeller] = {
    prop.name: prop for prop in [
        Propeller(5.0, 3.0, 2, 4, ct=0.11, cp=0.045, name="5030"),
        Propeller(5.0, 4.0, 2, 5, ct=0.12, cp=0.055, name="5040"),
        Propeller(5.0, 4.5, 3, 7, ct=0.14, cp=0.070, name="5045 Tri"),
        Propeller(5.0, 5.0, 2, 5, ct=0.13, cp=0.065, name="5050"),
        Propeller(6.0, 3.0, 2, 7, ct=0.10, cp=0.040, name="6030"),
        Propeller(6.0, 4.5, 2, 9, ct=0.12, cp=0.055, name="6045"),
        Propeller(7.0, 3.5, 2, 10, ct=0.11, cp=0.045, name="7035"),
        Propeller(8.0, 4.5, 2, 12, ct=0.11, cp=0.050, name="8045"),
        Propeller(9.4, 5.0, 2, 14, ct=0.11, cp=0.048, name="9450"),
        Propeller(10.0, 4.5, 2, 16, ct=0.11, cp=0.047, name="1045"),
        Propeller(10.0, 4.7, 2, 17, ct=0.12, cp=0.050, name="1047"),
        Propeller(11.0, 4.7, 2, 19, ct=0.11, cp=0.046, name="1147"),
        Propeller(12.0, 3.8, 2, 20, ct=0.10, cp=0.040, name="1238"),
        Propeller(13.0, 4.5, 2, 22, ct=0.11, cp=0.044, name="1345"),
        Propeller(15.0, 5.5, 2, 30, ct=0.11, cp=0.046, name="1555"),
        Propeller(28.0, 9.2, 2, 90, ct=0.10, cp=0.042, name="28x9.2"),
    ]
}


# =============================================================================
# ESCs
# =============================================================================

ESC_DATABASE: Dict[str, Esc] = {
    esc.name: esc for esc in [
        Esc(20, 25, 2.5, 5, min_cells=2, max_cells=4, name="20A BLHeli_S"),
        Esc(30, 40, 1.5, 7, min_cells=2, max_cells=4, name="30A BLHeli_S"),
        Esc(35, 45, 1.2, 8, min_cells=3, max_cells=6, name="35A BLHeli_32"),
        Esc(45, 55, 1.0, 10, min_cells=3, max_cells=6, name="45A BLHeli_32"),
        Esc(50, 65, 0.8, 12, min_cells=3, max_cells=6, name="50A ESC"),
        Esc(60, 80, 0.7, 18, min_cells=3, max_cells=8, name="60A ESC"),
        Esc(80, 100, 0.5, 30, min_cells=3, max_cells=8, name="80A ESC"),
        # One board shared by all four motors; weight is the whole board
        Esc(45, 55, 1.0, 32, min_cells=3, max_cells=6, name="4-in-1 45A"),
    ]
}


# =============================================================================
# Frame and Environment Presets
# =============================================================================

FRAME_PRESETS: Dict[str, Frame] = {
    frame.name: frame for frame in [
        Frame(4, FrameLayout.FLAT, 120, 180, 0, 225, name='5" Freestyle'),
        Frame(4, FrameLayout.FLAT, 200, 300, 0, 300, name='7" Long Range'),
        Frame(4, FrameLayout.FLAT, 100, 200, 0, 150, name="Cinewhoop"),
    ]
}

ENVIRONMENT_PRESETS: Dict[str, Environment] = {
    env.name: env for env in [
        Environment(0, 15, name="Sea Level / Std Day"),
        Environment(0, 35, name="Hot Day (35°C)"),
        Environment(2000, 10, name="High Altitude (2000m)"),
    ]
}


# =============================================================================
# Lookup Functions
# =============================================================================

def get_battery(name: str) -> Optional[Battery]:
    """Get a battery by name (e.g. "4S 5000mAh 20C")."""
    return BATTERY_DATABASE.get(name)


def get_motor(name: str) -> Optional[Motor]:
    """Get a motor by name (e.g. "2212 920KV")."""
    return MOTOR_DATABASE.get(name)


def get_propeller(name: str) -> Optional[Propeller]:
    """Get a propeller by name (e.g. "1045")."""
    return PROPELLER_DATABASE.get(name)


def get_esc(name: str) -> Optional[Esc]:
    """Get an ESC by name (e.g. "30A BLHeli_S")."""
    return ESC_DATABASE.get(name)


def get_frame_preset(name: str) -> Optional[Frame]:
    return FRAME_PRESETS.get(name)


def get_environment_preset(name: str) -> Optional[Environment]:
    return ENVIRONMENT_PRESETS.get(name)


def list_batteries() -> List[str]:
    return sorted(BATTERY_DATABASE.keys())


def list_motors() -> List[str]:
    return sorted(MOTOR_DATABASE.keys())


def list_propellers() -> List[str]:
    return sorted(PROPELLER_DATABASE.keys())


def list_escs() -> List[str]:
    return sorted(ESC_DATABASE.keys())


def list_frame_presets() -> List[str]:
    return sorted(FRAME_PRESETS.keys())


def list_environment_presets() -> List[str]:
    return sorted(ENVIRONMENT_PRESETS.keys())


def list_motors_for_cells(cells: int) -> List[str]:
    """
    List motors rated for a battery cell count.

    Parameters:
    ----------
    cells : int
        Series cell count of the battery

    Returns:
    -------
    List[str]
        Names of motors whose min_cells <= cells <= max_cells
    """
    return sorted([
        name for name, motor in MOTOR_DATABASE.items()
        if motor.min_cells <= cells <= motor.max_cells
    ])


def _lookup(table: Dict, name: str, kind: str):
    item = table.get(name)
    if item is None:
        raise KeyError(f"Unknown {kind}: {name!r}")
    return item


def build_configuration(
    battery: str,
    motor: str,
    propeller: str,
    esc: str,
    frame: Optional[str] = None,
    environment: Optional[str] = None
) -> DroneConfiguration:
    """
    Assemble a configuration from database component names.

    Parameters:
    ----------
    battery, motor, propeller, esc : str
        Names in the corresponding databases

    frame : str, optional
        Frame preset name; default frame if not specified

    environment : str, optional
        Environment preset name; sea level at 25°C if not specified

    Returns:
    -------
    DroneConfiguration
        Configuration built from the named components

    Raises:
    ------
    KeyError
        If a name is not in its database
    """
    return DroneConfiguration(
        environment=(
            _lookup(ENVIRONMENT_PRESETS, environment, "environment preset")
            if environment is not None else Environment()
        ),
        frame=_lookup(FRAME_PRESETS, frame, "frame preset") if frame is not None else Frame(),
        battery=_lookup(BATTERY_DATABASE, battery, "battery"),
        motor=_lookup(MOTOR_DATABASE, motor, "motor"),
        esc=_lookup(ESC_DATABASE, esc, "ESC"),
        propeller=_lookup(PROPELLER_DATABASE, propeller, "propeller"),
    )


def default_quad() -> DroneConfiguration:
    """
    The reference quadcopter: 4S 5000mAh pack, 2212 920KV motors, 30A ESCs
    and 10x4.5 props on a 350mm flat frame at sea level, 25°C.

    The propeller has no measured coefficients, so Ct/Cp are estimated.
    """
    return DroneConfiguration(
        environment=Environment(altitude=0, temperature=25),
        frame=Frame(
            motor_count=4,
            layout=FrameLayout.FLAT,
            frame_weight=300,
            payload_weight=0,
            payload_current=0,
            wheelbase_mm=350,
        ),
        battery=Battery(
            chemistry=BatteryChemistry.LIPO,
            cells_s=4,
            cells_p=1,
            capacity_mah=5000,
            c_rating=20,
            burst_c=40,
            internal_resistance_mohm=5,
            weight_g=480,
            discharge_depth=80,
        ),
        motor=Motor(
            kv=920,
            resistance=0.12,
            no_load_current=0.4,
            max_current=20,
            max_power=280,
            weight_g=56,
            thermal_resistance=10,
            stator_diameter=22,
            stator_height=12,
        ),
        esc=Esc(
            continuous_a=30,
            burst_a=40,
            resistance_mohm=1.5,
            weight_g=8,
            wire_awg=14,
            wire_length_cm=20,
        ),
        propeller=Propeller(diameter_in=10, pitch_in=4.5, blades=2, weight_g=15),
    )
