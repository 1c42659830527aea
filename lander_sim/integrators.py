"""
Mars Lander Simulation - Numerical Integration

This module implements the translational integrators. The default is a
position-Verlet scheme: symplectic, O(1) per step, and driven only by the
two most recent positions and the current acceleration. The first call has
no lagged position yet, so it is bootstrapped with a constant-acceleration
Taylor step.

Each integrator instance owns its history; build one per simulated lander
and call reset() when a new scenario starts.
"""

import logging
from typing import Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class InvalidTimestepError(ValueError):
    """Raised when dt is non-positive or changes after bootstrap."""
    pass


def check_timestep(dt: float) -> float:
    """Validate a time step, returning it as float."""
    if not np.isfinite(dt) or dt <= 0:
        raise InvalidTimestepError(f"Time step dt must be positive, got {dt}")
    return float(dt)


def _central_difference_velocity(position: np.ndarray, previous_position: np.ndarray,
                                 acceleration: np.ndarray, dt: float) -> np.ndarray:
    # v = (2x' - x_prev + a dt^2 - x_prev) / (2 dt), kept unsimplified
    return (2 * position - previous_position + acceleration * dt * dt
            - previous_position) * 0.5 * 1 / dt


class VerletIntegrator:
    """
    Position-Verlet integrator with a bootstrap first step.

    Bootstrap (first call):
        x_prev = x
        x'     = x_prev + v dt + 0.5 a dt^2

    Steady state:
        x'     = 2 x - x_prev + a dt^2
        x_prev = x

    In both branches the velocity is back-derived from the new position:
        v' = (2 x' - x_prev + a dt^2 - x_prev) / (2 dt)

    The recurrence assumes a fixed dt, so the step is locked on bootstrap
    and a different dt afterwards is rejected.
    """

    method = "verlet"

    def __init__(self):
        self.previous_position: Optional[np.ndarray] = None
        self.bootstrapped = False
        self.dt: Optional[float] = None

    def reset(self):
        """Forget the position history; the next call bootstraps again."""
        self.previous_position = None
        self.bootstrapped = False
        self.dt = None

    def advance(self, position: np.ndarray, velocity: np.ndarray,
                acceleration: np.ndarray, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Advance position and velocity by one step.

        Args:
            position: Current position (m) [3]
            velocity: Current velocity (m/s) [3]
            acceleration: Net acceleration (m/s^2) [3]
            dt: Time step (s)

        Returns:
            (new_position, new_velocity)

        Raises:
            InvalidTimestepError: If dt <= 0 or dt differs from the bootstrap dt
        """
        dt = check_timestep(dt)
        position = np.asarray(position, dtype=np.float64)
        velocity = np.asarray(velocity, dtype=np.float64)
        acceleration = np.asarray(acceleration, dtype=np.float64)

        if not self.bootstrapped:
            self.previous_position = position.copy()
            new_position = self.previous_position + velocity * dt + 0.5 * dt * dt * acceleration
            self.dt = dt
            self.bootstrapped = True
            logger.debug(f"Verlet bootstrap: dt={dt}s")
        else:
            if dt != self.dt:
                raise InvalidTimestepError(
                    f"Time step changed after bootstrap: {self.dt} -> {dt}; "
                    f"call reset() to re-bootstrap"
                )
            current_position = position.copy()
            new_position = 2 * current_position - self.previous_position + acceleration * dt * dt
            self.previous_position = current_position

        new_velocity = _central_difference_velocity(
            new_position, self.previous_position, acceleration, dt
        )
        return new_position, new_velocity


class EulerIntegrator:
    """
    Explicit first-order Euler integrator, for testing/comparison.

    Not symplectic: orbits spiral outwards. Keeps no history.
    """

    method = "euler"

    def reset(self):
        """Nothing to forget."""

    def advance(self, position: np.ndarray, velocity: np.ndarray,
                acceleration: np.ndarray, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Advance position and velocity by one step.

        Returns:
            (new_position, new_velocity)
        """
        dt = check_timestep(dt)
        position = np.asarray(position, dtype=np.float64)
        velocity = np.asarray(velocity, dtype=np.float64)
        new_position = position + dt * velocity
        new_velocity = velocity + dt * np.asarray(acceleration, dtype=np.float64)
        return new_position, new_velocity


INTEGRATORS = {
    'verlet': VerletIntegrator,
    'euler': EulerIntegrator,
}


def create_integrator(method: str = 'verlet'):
    """
    Build a fresh integrator.

    Args:
        method: Integration method ('verlet' or 'euler')

    Returns:
        Integrator instance with an advance(position, velocity, acceleration, dt) method
    """
    try:
        return INTEGRATORS[method]()
    except KeyError:
        raise ValueError(f"Unknown integration method: {method}") from None
