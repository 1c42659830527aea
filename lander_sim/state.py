"""
Mars Lander Simulation - Lander State

This module defines the mutable lander state owned by the simulation
driver. The integrator writes position/velocity, the autopilot writes
throttle/parachute status, the attitude stabiliser writes orientation and
the driver's bookkeeping writes fuel and time.
"""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from . import constants as C
from .utils import altitude, ground_speed, radial_velocity


class ParachuteStatus(Enum):
    NOT_DEPLOYED = "not_deployed"
    DEPLOYED = "deployed"
    LOST = "lost"


@dataclass
class LanderState:
    """
    Complete state of one simulated lander.

    Attributes:
        position: Position in planet-centred frame (m) [3]
        velocity: Velocity in planet-centred frame (m/s) [3]
        orientation: xyz Euler angles (degrees) [3]
        fuel: Remaining fuel as a fraction of tank capacity [0, 1]
        throttle: Engine throttle command [0, 1]
        parachute_status: Parachute deployment state
        autopilot_enabled: Run the autopilot each step
        stabilized_attitude: Run the attitude stabiliser each step
        t: Simulation time (s)
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    fuel: float = 1.0
    throttle: float = 0.0
    parachute_status: ParachuteStatus = ParachuteStatus.NOT_DEPLOYED
    autopilot_enabled: bool = False
    stabilized_attitude: bool = False
    t: float = 0.0

    def __post_init__(self):
        """Ensure arrays are numpy arrays with correct dtype."""
        for attr in ['position', 'velocity', 'orientation']:
            setattr(self, attr, np.asarray(getattr(self, attr), dtype=np.float64))
        self.fuel = float(self.fuel)
        self.throttle = float(self.throttle)
        self.t = float(self.t)

    def copy(self) -> 'LanderState':
        """Create a deep copy of the state."""
        return LanderState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            orientation=self.orientation.copy(),
            fuel=self.fuel,
            throttle=self.throttle,
            parachute_status=self.parachute_status,
            autopilot_enabled=self.autopilot_enabled,
            stabilized_attitude=self.stabilized_attitude,
            t=self.t,
        )

    @property
    def altitude(self) -> float:
        """Altitude above the Mars mean radius (m)."""
        return altitude(self.position)

    @property
    def speed(self) -> float:
        """Magnitude of velocity (m/s)."""
        return float(np.linalg.norm(self.velocity))

    @property
    def radial_velocity(self) -> float:
        """Climb rate, negative when descending (m/s)."""
        return radial_velocity(self.position, self.velocity)

    @property
    def ground_speed(self) -> float:
        """Horizontal speed (m/s)."""
        return ground_speed(self.position, self.velocity)

    @property
    def mass(self) -> float:
        """Total lander mass including remaining fuel (kg)."""
        return C.UNLOADED_LANDER_MASS + self.fuel * C.FUEL_DENSITY * C.FUEL_CAPACITY

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"LanderState(t={self.t:.1f}s, "
            f"alt={self.altitude/1000:.3f}km, "
            f"v_r={self.radial_velocity:.2f}m/s, "
            f"fuel={self.fuel*100:.1f}%, "
            f"throttle={self.throttle:.3f}, "
            f"chute={self.parachute_status.value})"
        )
