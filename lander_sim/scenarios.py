"""
Mars Lander Simulation - Scenario Table

Initial conditions for the six built-in scenarios. Positions and
velocities are in the planet-centred frame, orientation in xyz Euler
degrees.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

import numpy as np

from . import constants as C
from .state import LanderState, ParachuteStatus
from .utils import altitude


@dataclass(frozen=True)
class Scenario:
    """Initial conditions and flags for one scenario."""
    name: str
    description: str
    position: Tuple[float, float, float]
    velocity: Tuple[float, float, float]
    orientation: Tuple[float, float, float]
    dt: float = C.DT
    stabilized_attitude: bool = False
    autopilot_enabled: bool = False
    fuel: float = field(default=1.0)

    @property
    def initial_altitude(self) -> float:
        """Starting altitude above the mean radius (m)."""
        return altitude(np.array(self.position))

    def create_state(self) -> LanderState:
        """Fresh LanderState at this scenario's initial conditions."""
        return LanderState(
            position=np.array(self.position, dtype=np.float64),
            velocity=np.array(self.velocity, dtype=np.float64),
            orientation=np.array(self.orientation, dtype=np.float64),
            fuel=self.fuel,
            throttle=0.0,
            parachute_status=ParachuteStatus.NOT_DEPLOYED,
            autopilot_enabled=self.autopilot_enabled,
            stabilized_attitude=self.stabilized_attitude,
            t=0.0,
        )


SCENARIOS = (
    Scenario(
        name="circular_orbit",
        description="circular orbit",
        position=(1.2 * C.MARS_RADIUS, 0.0, 0.0),
        velocity=(0.0, -3247.087385863725, 0.0),
        orientation=(0.0, 90.0, 0.0),
    ),
    Scenario(
        name="descent_10km",
        description="descent from 10km",
        position=(0.0, -(C.MARS_RADIUS + 10000.0), 0.0),
        velocity=(0.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
        stabilized_attitude=True,
        autopilot_enabled=True,
    ),
    Scenario(
        name="elliptical_orbit",
        description="elliptical orbit, thrust changes orbital plane",
        position=(0.0, 0.0, 1.2 * C.MARS_RADIUS),
        velocity=(3500.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
    ),
    Scenario(
        name="polar_launch",
        description="polar launch at escape velocity (but drag prevents escape)",
        position=(0.0, 0.0, C.MARS_RADIUS + C.LANDER_SIZE / 2.0),
        velocity=(0.0, 0.0, 5027.0),
        orientation=(0.0, 0.0, 0.0),
    ),
    Scenario(
        name="aerobraking_orbit",
        description="elliptical orbit that clips the atmosphere and decays",
        position=(0.0, 0.0, C.MARS_RADIUS + 100000.0),
        velocity=(4000.0, 0.0, 0.0),
        orientation=(0.0, 90.0, 0.0),
    ),
    Scenario(
        name="descent_200km",
        description="descent from 200km",
        position=(0.0, -(C.MARS_RADIUS + C.EXOSPHERE), 0.0),
        velocity=(0.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
        stabilized_attitude=True,
        autopilot_enabled=True,
    ),
)


def get_scenario(key: Union[int, str, Scenario]) -> Scenario:
    """
    Look up a scenario by index or name.

    Raises:
        KeyError: If no scenario matches
    """
    if isinstance(key, Scenario):
        return key
    if isinstance(key, (int, np.integer)) and not isinstance(key, bool):
        if 0 <= key < len(SCENARIOS):
            return SCENARIOS[key]
        raise KeyError(f"Scenario index out of range: {key}")
    for scenario in SCENARIOS:
        if scenario.name == key:
            return scenario
    raise KeyError(f"Unknown scenario: {key!r}")
