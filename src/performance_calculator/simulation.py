"""
Full Performance Simulation
===========================

Composes the atmosphere, electrical, propulsion and thermal models into
hover and full-throttle operating points, flight time, thrust-to-weight
ratio, losses and the validation checklist.

The simulation is a pure function of its inputs: the same configuration
always produces an equal SimulationResult, and nothing is cached between
calls.

Usage:
------
    from src.performance_calculator import run_full_simulation

    result = run_full_simulation({
        "battery": {"cellsS": 4, "capacityMah": 5000, "weightG": 480},
        "frame": {"frameWeight": 300},
    })
    print(f"{result.flight_time_min:.1f} min, TWR {result.twr:.2f}")
"""

from typing import Any, Mapping, Optional, Union

from .config import (
    GRAVITY,
    INCH_TO_M,
    INCH_TO_MM,
    DEFAULT_CONFIG,
    DEFAULT_ALTITUDE_M,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_MOTOR_COUNT,
    DEFAULT_WHEELBASE_MM,
    DEFAULT_CELLS_S,
    DEFAULT_CELLS_P,
    DEFAULT_CAPACITY_MAH,
    DEFAULT_C_RATING,
    DEFAULT_BURST_C,
    DEFAULT_INTERNAL_RESISTANCE_MOHM,
    DEFAULT_DISCHARGE_DEPTH_PCT,
    DEFAULT_KV,
    DEFAULT_MOTOR_RESISTANCE,
    DEFAULT_NO_LOAD_CURRENT,
    DEFAULT_MOTOR_MAX_CURRENT,
    DEFAULT_MOTOR_WEIGHT_G,
    DEFAULT_MOTOR_THERMAL_RESISTANCE,
    DEFAULT_ESC_CONTINUOUS_A,
    DEFAULT_ESC_RESISTANCE_MOHM,
    DEFAULT_ESC_WEIGHT_G,
    DEFAULT_AWG,
    DEFAULT_WIRE_LENGTH_CM,
    DEFAULT_MIN_CELLS,
    DEFAULT_MAX_CELLS,
    DEFAULT_PROP_DIAMETER_IN,
    DEFAULT_PROP_PITCH_IN,
    DEFAULT_PROP_BLADES,
    DEFAULT_PROP_WEIGHT_G,
    PerformanceCalculatorConfig,
)
from .models.components import DroneConfiguration, as_number
from .models.results import SimulationResult, Validations
from .calculations.atmosphere import calc_air_density
from .calculations.electrical import (
    calc_motor_rpm,
    calc_battery_voltage_under_load,
    calc_wire_loss,
    calc_resistive_loss,
    calc_motor_elec_power,
    calc_motor_efficiency,
    calc_motor_current,
)
from .calculations.propulsion import (
    calc_thrust,
    calc_prop_power,
    estimate_prop_coefficients,
    calc_coaxial_factor,
)
from .calculations.thermal import calc_motor_temp
from .calculations.performance import (
    calc_hover_throttle,
    calc_flight_time,
    calc_thrust_to_weight_ratio,
    calc_system_efficiency,
    calc_max_prop_diameter_mm,
)
from .debugger import CalculationDebugger


def _or_default(value: Any, default: float) -> float:
    """Substitute the default for missing, zero or non-numeric values."""
    number = as_number(value)
    return number if number else default


def _record(debugger: Optional[CalculationDebugger], **step) -> None:
    """Add a step to the debugger when one is attached."""
    if debugger is not None:
        debugger.add_step(**step)


def run_full_simulation(
    drone: Union[DroneConfiguration, Mapping[str, Any]],
    config: Optional[PerformanceCalculatorConfig] = None,
    debugger: Optional[CalculationDebugger] = None,
    verbose: bool = False
) -> SimulationResult:
    """
    Run a full performance simulation for a drone configuration.

    Missing, zero or non-numeric component values are replaced by the
    documented defaults (4S1P 5000mAh LiPo, 920Kv motor, 30A ESC, 10x4.5
    prop, ...). Numeric strings are accepted. An explicitly given
    temperature of 0°C is kept.

    Parameters:
    ----------
    drone : DroneConfiguration or mapping
        Complete or partial configuration. Mappings may use camelCase or
        snake_case field names.

    config : PerformanceCalculatorConfig, optional
        Model assumptions and validation thresholds. Uses defaults if not
        specified.

    debugger : CalculationDebugger, optional
        Records every calculation step when given.

    verbose : bool
        Print a warning for each failed validation check.

    Returns:
    -------
    SimulationResult
        All calculated performance metrics and validations
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    drone = DroneConfiguration.from_dict(drone)

    environment = drone.environment
    frame = drone.frame
    battery = drone.battery
    motor = drone.motor
    esc = drone.esc
    propeller = drone.propeller

    # -------------------------------------------------------------------------
    # Environment
    # -------------------------------------------------------------------------
    if debugger is not None:
        debugger.start_section("ENVIRONMENT")

    altitude = _or_default(environment.altitude, DEFAULT_ALTITUDE_M)
    temp_c = as_number(environment.temperature)
    if temp_c is None:
        temp_c = DEFAULT_TEMPERATURE_C
    rho = calc_air_density(altitude, temp_c)
    _record(
        debugger,
        category="Atmosphere",
        description="Air density at altitude and ambient temperature",
        formula="rho = P0*(1 - L*h/T0)^(g*M/(R*L)) / (R_air * T_ambient)",
        variables={"h": altitude, "T_ambient_C": temp_c},
        result=rho,
        result_name="rho",
        result_unit="kg/m³",
    )

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------
    num_motors = _or_default(frame.motor_count, DEFAULT_MOTOR_COUNT)
    coax_factor = calc_coaxial_factor(frame.is_coaxial, cfg.coaxial_factor)
    frame_weight_kg = _or_default(frame.frame_weight, 0.0) / 1000.0
    payload_weight_kg = _or_default(frame.payload_weight, 0.0) / 1000.0
    payload_current = _or_default(frame.payload_current, 0.0)
    wheelbase_mm = _or_default(frame.wheelbase_mm, DEFAULT_WHEELBASE_MM)

    chemistry = battery.chemistry
    cells = _or_default(battery.cells_s, DEFAULT_CELLS_S)
    parallel = _or_default(battery.cells_p, DEFAULT_CELLS_P)
    capacity_mah = _or_default(battery.capacity_mah, DEFAULT_CAPACITY_MAH) * parallel
    c_rating = _or_default(battery.c_rating, DEFAULT_C_RATING)
    burst_c = _or_default(battery.burst_c, DEFAULT_BURST_C)
    internal_r = _or_default(
        battery.internal_resistance_mohm, DEFAULT_INTERNAL_RESISTANCE_MOHM
    )
    battery_weight_kg = _or_default(battery.weight_g, 0.0) / 1000.0
    discharge_depth = _or_default(battery.discharge_depth, DEFAULT_DISCHARGE_DEPTH_PCT) / 100.0
    nominal_voltage = chemistry.nominal_voltage * cells
    max_voltage = chemistry.max_voltage * cells
    max_continuous_current = (capacity_mah / 1000.0) * c_rating

    kv = _or_default(motor.kv, DEFAULT_KV)
    motor_resistance = _or_default(motor.resistance, DEFAULT_MOTOR_RESISTANCE)
    no_load_current = _or_default(motor.no_load_current, DEFAULT_NO_LOAD_CURRENT)
    max_motor_current = _or_default(motor.max_current, DEFAULT_MOTOR_MAX_CURRENT)
    motor_weight_g = _or_default(motor.weight_g, DEFAULT_MOTOR_WEIGHT_G)
    thermal_resistance = _or_default(
        motor.thermal_resistance, DEFAULT_MOTOR_THERMAL_RESISTANCE
    )
    motor_min_cells = _or_default(motor.min_cells, DEFAULT_MIN_CELLS)
    motor_max_cells = _or_default(motor.max_cells, DEFAULT_MAX_CELLS)

    esc_max_current = _or_default(esc.continuous_a, DEFAULT_ESC_CONTINUOUS_A)
    esc_resistance = _or_default(esc.resistance_mohm, DEFAULT_ESC_RESISTANCE_MOHM) / 1000.0
    esc_weight_g = _or_default(esc.weight_g, DEFAULT_ESC_WEIGHT_G)
    wire_awg = _or_default(esc.wire_awg, DEFAULT_AWG)
    wire_length_cm = _or_default(esc.wire_length_cm, DEFAULT_WIRE_LENGTH_CM)
    esc_min_cells = _or_default(esc.min_cells, DEFAULT_MIN_CELLS)
    esc_max_cells = _or_default(esc.max_cells, DEFAULT_MAX_CELLS)

    prop_diameter_in = _or_default(propeller.diameter_in, DEFAULT_PROP_DIAMETER_IN)
    prop_pitch_in = _or_default(propeller.pitch_in, DEFAULT_PROP_PITCH_IN)
    prop_blades = _or_default(propeller.blades, DEFAULT_PROP_BLADES)
    prop_weight_g = _or_default(propeller.weight_g, DEFAULT_PROP_WEIGHT_G)

    # Measured coefficients win; a missing one is estimated on its own
    ct = as_number(propeller.ct)
    cp = as_number(propeller.cp)
    if not ct or not cp:
        estimate = estimate_prop_coefficients(prop_diameter_in, prop_pitch_in, prop_blades)
        ct = ct or estimate.ct
        cp = cp or estimate.cp
    if debugger is not None:
        debugger.add_step(
            category="Propeller",
            description="Thrust and power coefficients",
            formula="measured, else Ct = 0.075 + 0.045*P/D, Cp = 0.025 + 0.035*P/D",
            variables={"D_in": prop_diameter_in, "P_in": prop_pitch_in, "blades": prop_blades},
            result=f"Ct={ct:.4f}, Cp={cp:.4f}",
            result_name="coefficients",
        )

    prop_diameter_m = prop_diameter_in * INCH_TO_M

    # -------------------------------------------------------------------------
    # Total Weight
    # -------------------------------------------------------------------------
    if debugger is not None:
        debugger.start_section("WEIGHT")

    per_motor_weight_g = motor_weight_g + esc_weight_g + prop_weight_g
    total_weight_kg = (
        frame_weight_kg + payload_weight_kg + battery_weight_kg
        + (per_motor_weight_g * num_motors) / 1000.0
    )
    total_weight_g = total_weight_kg * 1000.0
    _record(
        debugger,
        category="Weight",
        description="All-up weight",
        formula="m = frame + payload + battery + (motor + esc + prop) * N",
        variables={
            "frame_kg": frame_weight_kg,
            "payload_kg": payload_weight_kg,
            "battery_kg": battery_weight_kg,
            "per_motor_g": per_motor_weight_g,
            "N": num_motors,
        },
        result=total_weight_kg,
        result_name="m",
        result_unit="kg",
    )

    # -------------------------------------------------------------------------
    # Full Throttle
    # -------------------------------------------------------------------------
    if debugger is not None:
        debugger.start_section("FULL THROTTLE")

    # Full-charge voltage, back-EMF drop at no-load current only
    max_rpm = calc_motor_rpm(kv, max_voltage, no_load_current, motor_resistance)
    max_rps = max_rpm / 60.0
    max_thrust_per_motor = calc_thrust(ct, rho, max_rps, prop_diameter_m)
    max_total_thrust = max_thrust_per_motor * num_motors * coax_factor
    max_total_thrust_g = (max_total_thrust / GRAVITY) * 1000.0
    twr = calc_thrust_to_weight_ratio(max_total_thrust, total_weight_kg)
    _record(
        debugger,
        category="Full Throttle",
        description="Motor speed at full-charge voltage",
        formula="RPM = Kv * (V_max - I0 * Rm)",
        variables={"Kv": kv, "V_max": max_voltage, "I0": no_load_current, "Rm": motor_resistance},
        result=max_rpm,
        result_name="RPM_max",
        result_unit="RPM",
    )
    _record(
        debugger,
        category="Full Throttle",
        description="Thrust per motor at full throttle",
        formula="T = Ct * rho * n^2 * D^4",
        variables={"Ct": ct, "rho": rho, "n": max_rps, "D": prop_diameter_m},
        result=max_thrust_per_motor,
        result_name="T_max",
        result_unit="N",
    )
    _record(
        debugger,
        category="Full Throttle",
        description="Thrust-to-weight ratio",
        formula="TWR = T_max * N * k_coax / (m * g)",
        variables={"N": num_motors, "k_coax": coax_factor, "m": total_weight_kg},
        result=twr,
        result_name="TWR",
    )

    # -------------------------------------------------------------------------
    # Hover
    # -------------------------------------------------------------------------
    if debugger is not None:
        debugger.start_section("HOVER")

    hover_throttle = calc_hover_throttle(
        total_weight_kg, num_motors, max_thrust_per_motor, coax_factor
    )
    # Zero throttle means zero speed, even when max_rps overflowed to inf
    hover_rps = 0.0 if hover_throttle == 0 else max_rps * (hover_throttle / 100.0)
    hover_rpm = hover_rps * 60.0
    hover_thrust_per_motor = calc_thrust(ct, rho, hover_rps, prop_diameter_m)
    hover_mech_power = calc_prop_power(cp, rho, hover_rps, prop_diameter_m)
    _record(
        debugger,
        category="Hover",
        description="Hover throttle",
        formula="throttle = sqrt((m*g / (N*k_coax)) / T_max) * 100",
        variables={"m": total_weight_kg, "T_max": max_thrust_per_motor},
        result=hover_throttle,
        result_name="throttle",
        result_unit="%",
        comment="Static thrust scales with throttle squared",
    )
    _record(
        debugger,
        category="Hover",
        description="Shaft power per motor at hover",
        formula="P = Cp * rho * n^3 * D^5",
        variables={"Cp": cp, "rho": rho, "n": hover_rps, "D": prop_diameter_m},
        result=hover_mech_power,
        result_name="P_mech",
        result_unit="W",
    )

    hover_current_per_motor = calc_motor_current(
        hover_mech_power, nominal_voltage, no_load_current, cfg.assumed_motor_efficiency
    )
    hover_total_current = hover_current_per_motor * num_motors + payload_current
    _record(
        debugger,
        category="Hover",
        description="Hover current",
        formula="I = P_mech / (V_nom * eta) + I0; I_total = I * N + I_payload",
        variables={
            "V_nom": nominal_voltage,
            "eta": cfg.assumed_motor_efficiency,
            "I0": no_load_current,
            "I_payload": payload_current,
            "I_motor": hover_current_per_motor,
        },
        result=hover_total_current,
        result_name="I_total",
        result_unit="A",
    )

    hover_battery = calc_battery_voltage_under_load(
        cells, chemistry, hover_total_current, capacity_mah, c_rating, internal_r
    )
    hover_elec_power_per_motor = calc_motor_elec_power(
        hover_battery.voltage, hover_current_per_motor
    )
    hover_total_power = (
        hover_elec_power_per_motor * num_motors
        + payload_current * hover_battery.voltage
    )
    hover_efficiency = calc_system_efficiency(
        hover_thrust_per_motor * num_motors * coax_factor, hover_total_power
    )
    _record(
        debugger,
        category="Hover",
        description="Battery voltage under hover load",
        formula="V = max(V_min*S, V_nom*S - I_total * R_cell * S)",
        variables={
            "S": cells,
            "R_cell_mohm": internal_r,
            "I_total": hover_total_current,
            "sag_V": hover_battery.sag_volts,
        },
        result=hover_battery.voltage,
        result_name="V_hover",
        result_unit="V",
    )
    _record(
        debugger,
        category="Hover",
        description="System efficiency at hover",
        formula="eta_sys = thrust_g / P_total",
        variables={"P_total": hover_total_power},
        result=hover_efficiency,
        result_name="eta_sys",
        result_unit="g/W",
    )

    flight_time = calc_flight_time(capacity_mah, discharge_depth, hover_total_current)
    _record(
        debugger,
        category="Endurance",
        description="Hover flight time",
        formula="t = C * DoD / (I_total * 1000) * 60",
        variables={"C_mAh": capacity_mah, "DoD": discharge_depth, "I_total": hover_total_current},
        result=flight_time,
        result_name="t_flight",
        result_unit="min",
    )

    # -------------------------------------------------------------------------
    # Full Throttle Current
    # -------------------------------------------------------------------------
    max_mech_power = calc_prop_power(cp, rho, max_rps, prop_diameter_m)
    max_current_per_motor = calc_motor_current(
        max_mech_power, nominal_voltage, no_load_current, cfg.assumed_motor_efficiency
    )
    max_total_current_draw = max_current_per_motor * num_motors + payload_current
    max_battery = calc_battery_voltage_under_load(
        cells, chemistry, max_total_current_draw, capacity_mah, c_rating, internal_r
    )
    _record(
        debugger,
        category="Full Throttle",
        description="Full-throttle current draw",
        formula="I = Cp*rho*n^3*D^5 / (V_nom * eta) + I0; I_total = I * N + I_payload",
        variables={"P_mech": max_mech_power, "N": num_motors},
        result=max_total_current_draw,
        result_name="I_max_total",
        result_unit="A",
    )

    # -------------------------------------------------------------------------
    # Losses and Thermal
    # -------------------------------------------------------------------------
    if debugger is not None:
        debugger.start_section("LOSSES AND THERMAL")

    wire_loss = calc_wire_loss(wire_awg, wire_length_cm, hover_current_per_motor)
    total_wire_loss = wire_loss.power_loss * num_motors
    esc_power_loss = calc_resistive_loss(hover_current_per_motor, esc_resistance) * num_motors
    copper_loss = calc_resistive_loss(hover_current_per_motor, motor_resistance)
    motor_temp = calc_motor_temp(
        temp_c,
        copper_loss,
        thermal_resistance,
        cfg.thermal_eval_duration_s,
        cfg.thermal_time_constant_s,
    )
    motor_efficiency = calc_motor_efficiency(hover_mech_power, hover_elec_power_per_motor)
    _record(
        debugger,
        category="Losses",
        description="Motor lead loss per motor",
        formula="P = I^2 * R_wire",
        variables={"AWG": wire_awg, "L_cm": wire_length_cm, "R_wire": wire_loss.resistance},
        result=wire_loss.power_loss,
        result_name="P_wire",
        result_unit="W",
    )
    _record(
        debugger,
        category="Losses",
        description="ESC conduction loss (all ESCs)",
        formula="P = I^2 * R_esc * N",
        variables={"R_esc": esc_resistance},
        result=esc_power_loss,
        result_name="P_esc",
        result_unit="W",
    )
    _record(
        debugger,
        category="Thermal",
        description="Motor temperature after hover period",
        formula="T = T_amb + I^2*Rm * R_th * (1 - exp(-t/tau))",
        variables={
            "P_cu": copper_loss,
            "R_th": thermal_resistance,
            "t": cfg.thermal_eval_duration_s,
            "tau": cfg.thermal_time_constant_s,
        },
        result=motor_temp,
        result_name="T_motor",
        result_unit="°C",
    )

    # -------------------------------------------------------------------------
    # Validations
    # -------------------------------------------------------------------------
    max_burst_current = (capacity_mah / 1000.0) * burst_c
    max_prop_diameter_mm = calc_max_prop_diameter_mm(wheelbase_mm, num_motors)
    prop_diameter_mm = prop_diameter_in * INCH_TO_MM

    validations = Validations(
        motor_current_ok=hover_current_per_motor < max_motor_current,
        esc_current_ok=hover_current_per_motor < esc_max_current,
        battery_discharge_ok=hover_total_current < max_continuous_current,
        battery_burst_ok=max_total_current_draw < max_burst_current,
        prop_size_ok=prop_diameter_mm <= max_prop_diameter_mm,
        twr_ok=twr >= cfg.min_twr,
        motor_temp_ok=motor_temp < cfg.max_motor_temp_c,
        hover_throttle_ok=hover_throttle < cfg.max_hover_throttle_pct,
        esc_voltage_ok=esc_min_cells <= cells <= esc_max_cells,
        motor_voltage_ok=motor_min_cells <= cells <= motor_max_cells,
    )

    if verbose:
        for name in validations.failed_checks():
            print(f"Warning: validation check '{name}' failed")

    return SimulationResult(
        air_density=rho,
        total_weight_kg=total_weight_kg,
        total_weight_g=total_weight_g,
        hover_throttle=hover_throttle,
        hover_rpm=hover_rpm,
        hover_current_per_motor=hover_current_per_motor,
        hover_total_current=hover_total_current,
        hover_total_power=hover_total_power,
        hover_efficiency=hover_efficiency,
        hover_thrust_per_motor=(hover_thrust_per_motor / GRAVITY) * 1000.0,
        hover_battery_voltage=hover_battery.voltage,
        hover_battery_sag=hover_battery.sag_volts,
        flight_time_min=flight_time,
        max_thrust_per_motor_g=(max_thrust_per_motor / GRAVITY) * 1000.0,
        max_total_thrust_g=max_total_thrust_g,
        max_rpm=max_rpm,
        max_current_per_motor=max_current_per_motor,
        max_total_current_draw=max_total_current_draw,
        max_battery_voltage=max_battery.voltage,
        max_battery_sag=max_battery.sag_volts,
        twr=twr,
        wire_loss_per_motor=wire_loss.power_loss,
        total_wire_loss=total_wire_loss,
        esc_power_loss=esc_power_loss,
        copper_loss_per_motor=copper_loss,
        motor_temp_5min=motor_temp,
        motor_efficiency=motor_efficiency,
        nominal_voltage=nominal_voltage,
        max_voltage=max_voltage,
        max_continuous_current=max_continuous_current,
        total_capacity_mah=capacity_mah,
        motor_min_cells=motor_min_cells,
        motor_max_cells=motor_max_cells,
        esc_min_cells=esc_min_cells,
        esc_max_cells=esc_max_cells,
        battery_cells=cells,
        ct=ct,
        cp=cp,
        validations=validations,
        max_burst_current=max_burst_current,
        max_prop_diameter_mm=max_prop_diameter_mm,
        prop_diameter_mm=prop_diameter_mm,
    )
