"""
Mars Lander Descent Simulation Package

Simulates a Mars lander under gravity, atmospheric and parachute drag and
engine thrust, with an optional closed-loop descent autopilot.

Modules:
    - constants: Planetary constants and lander parameters
    - utils: Vector helpers (magnitude, unit vector, radial velocity)
    - frames: Euler angle / rotation matrix conversions
    - state: Lander state dataclass
    - forces: Atmosphere, gravity, drag, thrust, parachute safety
    - attitude: 3-axis attitude stabiliser
    - integrators: Position-Verlet (and Euler) integration
    - autopilot: Parachute and throttle descent controller
    - scenarios: Built-in initial conditions
    - validation: State sanity and energy checks
    - main: Simulation driver
"""

from .state import LanderState, ParachuteStatus
from .autopilot import Autopilot, AutopilotNotInitializedError
from .integrators import VerletIntegrator, EulerIntegrator, InvalidTimestepError, create_integrator
from .scenarios import Scenario, SCENARIOS, get_scenario
from .main import run_simulation, create_simulation, simulation_step, Simulation, SimulationLog
from .config import SimulationConfig, create_default_config, create_test_config

__version__ = "1.0.0"
__author__ = "Mars Lander Simulation Team"

__all__ = [
    'LanderState',
    'ParachuteStatus',
    'Autopilot',
    'AutopilotNotInitializedError',
    'VerletIntegrator',
    'EulerIntegrator',
    'InvalidTimestepError',
    'create_integrator',
    'Scenario',
    'SCENARIOS',
    'get_scenario',
    'run_simulation',
    'create_simulation',
    'simulation_step',
    'Simulation',
    'SimulationLog',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
]
