"""
Mars Lander Simulation - Main Entry Point

This module implements the simulation driver with:
- One Simulation object per lander (no module-level carry-over)
- Correct execution order per timestep
- Data logging
- Logging framework for diagnostics

Per-step order:
    forces -> integrator -> autopilot -> attitude stabiliser
    -> parachute loss check -> fuel consumption -> time advance
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple, Union

from . import constants as C
from .attitude import stabilize_attitude
from .autopilot import Autopilot
from .config import SimulationConfig, create_default_config
from .forces import compute_forces, safe_to_deploy_parachute
from .integrators import create_integrator
from .scenarios import Scenario, get_scenario
from .state import LanderState, ParachuteStatus
from .types import AutopilotCommand, ForceBreakdown
from .validation import (
    ValidationError,
    compute_specific_energy,
    validate_energy_conservation,
    validate_state,
)

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass
class SimulationLog:
    """Container for logged simulation data."""
    time: List[float] = field(default_factory=list)
    altitude: List[float] = field(default_factory=list)  # m
    radial_velocity: List[float] = field(default_factory=list)  # m/s
    ground_speed: List[float] = field(default_factory=list)  # m/s
    speed: List[float] = field(default_factory=list)  # m/s
    throttle: List[float] = field(default_factory=list)
    fuel: List[float] = field(default_factory=list)  # fraction
    mass: List[float] = field(default_factory=list)  # kg
    parachute_status: List[str] = field(default_factory=list)
    autopilot_engaged: List[bool] = field(default_factory=list)
    gravity_magnitude: List[float] = field(default_factory=list)  # N
    drag_magnitude: List[float] = field(default_factory=list)  # N
    thrust_magnitude: List[float] = field(default_factory=list)  # N

    def append(self, state: LanderState, forces: ForceBreakdown, engaged: bool = False):
        """Log data from current timestep."""
        self.time.append(state.t)
        self.altitude.append(state.altitude)
        self.radial_velocity.append(state.radial_velocity)
        self.ground_speed.append(state.ground_speed)
        self.speed.append(state.speed)
        self.throttle.append(state.throttle)
        self.fuel.append(state.fuel)
        self.mass.append(state.mass)
        self.parachute_status.append(state.parachute_status.value)
        self.autopilot_engaged.append(bool(engaged))
        self.gravity_magnitude.append(forces['gravity_magnitude'])
        self.drag_magnitude.append(forces['drag_magnitude'])
        self.thrust_magnitude.append(forces['thrust_magnitude'])

    def __len__(self) -> int:
        return len(self.time)


@dataclass
class Simulation:
    """
    Everything one simulated lander owns.

    Built by create_simulation() so that state, integrator history and
    autopilot latches always start from the same scenario together.
    """
    state: LanderState
    integrator: object
    autopilot: Optional[Autopilot]
    scenario: Scenario
    config: SimulationConfig
    dt: float

    @property
    def engaged(self) -> bool:
        return self.autopilot is not None and self.autopilot.engaged


class StepOutput(NamedTuple):
    """Diagnostics from one simulation_step() call."""
    forces: ForceBreakdown
    command: Optional[AutopilotCommand]


def create_simulation(scenario: Union[int, str, Scenario] = 1,
                      config: SimulationConfig = None) -> Simulation:
    """
    Build a fresh simulation for a scenario.

    Args:
        scenario: Scenario index, name, or Scenario instance
        config: SimulationConfig instance. If None a default is created.

    Returns:
        Simulation with new state, integrator and autopilot
    """
    if config is None:
        config = create_default_config()
    scenario = get_scenario(scenario)
    dt = config.dt if config.dt is not None else scenario.dt

    autopilot = None
    if scenario.autopilot_enabled:
        autopilot = Autopilot(initial_altitude=scenario.initial_altitude,
                              kp=config.autopilot_kp)

    return Simulation(
        state=scenario.create_state(),
        integrator=create_integrator(config.integration_method),
        autopilot=autopilot,
        scenario=scenario,
        config=config,
        dt=dt,
    )


def simulation_step(sim: Simulation) -> StepOutput:
    """
    Advance the simulation by one fixed timestep, mutating sim.state.

    Returns:
        StepOutput with the forces used for the step and the autopilot command
    """
    state = sim.state
    dt = sim.dt

    # 1. Forces at the start of the step
    forces = compute_forces(state)

    # 2. Integrate translational motion
    state.position, state.velocity = sim.integrator.advance(
        state.position, state.velocity, forces['acceleration'], dt
    )

    # 3. Autopilot sees the integrated state and sets throttle for the next step
    command = None
    if state.autopilot_enabled and sim.autopilot is not None:
        position, velocity = state.position, state.velocity
        command = sim.autopilot.update(
            altitude=state.altitude,
            radial_velocity=state.radial_velocity,
            g_force_magnitude=forces['gravity_magnitude'],
            throttle=state.throttle,
            parachute_status=state.parachute_status,
            deploy_is_safe=lambda: safe_to_deploy_parachute(position, velocity),
        )
        state.throttle = command.throttle
        state.parachute_status = command.parachute_status

    # 4. Attitude stabilisation
    if state.stabilized_attitude:
        state.orientation = stabilize_attitude(state.position)

    # 5. Parachute tears off if loads exceed its limits
    if (state.parachute_status == ParachuteStatus.DEPLOYED
            and not safe_to_deploy_parachute(state.position, state.velocity)):
        state.parachute_status = ParachuteStatus.LOST
        logger.warning(f"Parachute lost at t={state.t:.1f}s, "
                       f"h={state.altitude:.1f}m, v={state.speed:.1f}m/s")

    # 6. Fuel consumption
    state.fuel = max(0.0, state.fuel - dt * (C.FUEL_RATE_AT_MAX_THRUST * state.throttle)
                     / C.FUEL_CAPACITY)

    state.t += dt
    return StepOutput(forces, command)


def check_termination(state: LanderState, max_time: float) -> Tuple[bool, str]:
    """
    Check termination conditions.

    Touchdown is a single altitude threshold (half the lander size); it is
    classified by the impact speeds at that instant.

    Returns:
        (should_terminate, reason)
    """
    if state.altitude < C.LANDER_SIZE / 2.0:
        descent_rate = -state.radial_velocity
        ground_speed = state.ground_speed
        if (ground_speed > C.MAX_IMPACT_GROUND_SPEED
                or descent_rate > C.MAX_IMPACT_DESCENT_RATE):
            return True, (f"Crashed: descent rate {descent_rate:.2f} m/s, "
                          f"ground speed {ground_speed:.2f} m/s")
        return True, (f"Landed safely: descent rate {descent_rate:.2f} m/s, "
                      f"ground speed {ground_speed:.2f} m/s")

    if state.t >= max_time:
        return True, f"Maximum simulation time reached ({max_time:.1f}s)"

    return False, ""


def run_simulation(scenario: Union[int, str, Scenario] = 1,
                   config: SimulationConfig = None,
                   max_time: float = None,
                   verbose: bool = None) -> tuple:
    """
    Run a scenario to touchdown or timeout.

    Args:
        scenario: Scenario index, name, or Scenario instance
        config: SimulationConfig instance. If None a default is created.
        max_time: Maximum simulation time. Overrides config.max_time if given.
        verbose: Print progress updates. Overrides config.verbose if given.

    Returns:
        (final_state, log, termination_reason) tuple
    """
    if config is None:
        config = create_default_config()
    if max_time is None:
        max_time = config.max_time
    if verbose is None:
        verbose = config.verbose

    sim = create_simulation(scenario, config)
    state = sim.state
    log = SimulationLog()

    logger.info(f"Starting simulation: scenario={sim.scenario.name}, dt={sim.dt}s, "
                f"max_time={max_time}s, method={config.integration_method}")
    logger.debug(f"Initial state: {state}")

    if verbose:
        print("\n" + "=" * 80)
        print(f"MARS LANDER | {sim.scenario.description} | dt={sim.dt}s | T_max={max_time}s")
        print("=" * 80)
        print(f"{'Time (s)':^10} | {'Alt (km)':^10} | {'V_r (m/s)':^10} | "
              f"{'Throttle':^9} | {'Fuel (%)':^9} | {'Chute':<12}")
        print("-" * 80)

    start_time = time.time()
    step_count = 0
    last_print_time = 0.0
    E_ref = None
    coast_steps = 0

    while True:
        should_terminate, reason = check_termination(state, max_time)
        if should_terminate:
            logger.info(f"Simulation terminated: {reason}")
            if verbose:
                print(f"\nTermination: {reason}")
            break

        try:
            validate_state(state)
        except ValidationError as e:
            logger.error(f"Validation failed: {e}")
            if verbose:
                print(f"\nValidation Error: {e}")
            reason = f"Validation failure: {e}"
            break

        forces, _ = simulation_step(sim)
        log.append(state, forces, sim.engaged)
        step_count += 1

        # Energy is conserved only while coasting in vacuum
        if forces['thrust_magnitude'] == 0.0 and forces['density'] == 0.0:
            E_current = compute_specific_energy(state.position, state.velocity)
            if E_ref is None:
                E_ref, coast_steps = E_current, 0
            else:
                coast_steps += 1
                if coast_steps >= config.energy_check_interval:
                    _validate_energy(E_current, E_ref, config.energy_tolerance, state.t)
                    E_ref, coast_steps = E_current, 0
        else:
            E_ref = None

        if verbose and state.t - last_print_time >= 100.0:
            _print_status(state)
            last_print_time = state.t

    elapsed = time.time() - start_time
    _log_completion(state, step_count, elapsed, verbose)

    return state, log, reason


def _validate_energy(E_current: float, E_ref: float, tolerance: float, t: float):
    """Helper to validate and log energy conservation."""
    energy_result = validate_energy_conservation(E_current, E_ref, tolerance)
    if not energy_result['valid']:
        logger.warning(f"Energy drift at t={t:.1f}s: "
                       f"relative_error={energy_result['relative_error']:.2e}, "
                       f"dE={energy_result['dE']:.2e} J/kg")


def _print_status(state: LanderState):
    """Print a formatted status row."""
    msg = (f"{state.t:10.1f} | {state.altitude/1000:10.3f} | "
           f"{state.radial_velocity:10.2f} | {state.throttle:9.3f} | "
           f"{state.fuel*100:9.1f} | {state.parachute_status.value:<12}")
    print(msg)
    logger.info(msg)


def _log_completion(state: LanderState, steps: int, elapsed: float, verbose: bool):
    """Log and print run statistics."""
    logger.info(f"Simulation complete: {steps} steps in {elapsed:.2f}s")
    logger.info(f"Final state: {state}")

    if verbose:
        print("-" * 80)
        print("SIMULATION COMPLETED")
        print("-" * 80)
        print(f"Final Time:        {state.t:.2f} s")
        print(f"Final Altitude:    {state.altitude:.2f} m")
        print(f"Final Descent Rate:{-state.radial_velocity:8.2f} m/s")
        print(f"Final Fuel:        {state.fuel*100:.1f} %")
        print(f"Parachute:         {state.parachute_status.value}")
        print("-" * 80)
        print(f"Steps:       {steps:,}")
        print(f"Wall Time:   {elapsed:.2f} s")
        print(f"Performance: {steps/elapsed:.0f} steps/s" if elapsed > 0 else "Performance: N/A")
        print("=" * 80)
