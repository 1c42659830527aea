"""
Mars Lander Simulation - Force Computations

This module implements the physical sub-models the integrator and the
autopilot consume:
- Exponential Mars atmosphere
- Central gravity
- Quadratic drag on the lander body and the parachute
- Engine thrust (body +z axis, rotated to the world frame)
- Parachute deployment safety check
"""

import numpy as np

from . import constants as C
from .frames import body_to_world
from .state import LanderState, ParachuteStatus
from .types import ForceBreakdown
from .utils import altitude, magnitude, magnitude_squared, unit_vector


# =============================================================================
# ATMOSPHERE MODEL
# =============================================================================

def atmospheric_density(position: np.ndarray) -> float:
    """
    Atmospheric density at a position (kg/m^3).

    rho = RHO_0 * exp(-h / H_SCALE) inside the atmosphere, zero above the
    exosphere. Altitudes below the surface are treated as zero.
    """
    h = max(0.0, altitude(position))
    if h > C.EXOSPHERE:
        return 0.0
    return float(C.RHO_0 * np.exp(-h / C.H_SCALE))


# =============================================================================
# FORCE MODELS
# =============================================================================

def compute_gravity_force(position: np.ndarray, mass: float) -> np.ndarray:
    """
    Compute gravitational force.

        F = -G M m / |r|^2 * r_hat

    Returns the zero vector at the planet centre.
    """
    r2 = magnitude_squared(position)
    if r2 < C.ZERO_TOLERANCE:
        return np.zeros(3)
    return -(C.GRAVITY * C.MARS_MASS * mass / r2) * unit_vector(position)


def compute_drag_force(position: np.ndarray, velocity: np.ndarray,
                       parachute_status: ParachuteStatus = ParachuteStatus.NOT_DEPLOYED,
                       density: float = None) -> np.ndarray:
    """
    Compute aerodynamic drag on the lander and, if deployed, the parachute.

        F_drag = -0.5 * rho * Cd * A * |v|^2 * v_hat

    Args:
        position: Position (m)
        velocity: Velocity (m/s)
        parachute_status: Parachute drag is added only when DEPLOYED
        density: Precomputed density; looked up from position if None

    Returns:
        Drag force vector (N)
    """
    if density is None:
        density = atmospheric_density(position)
    v2 = magnitude_squared(velocity)
    v_hat = unit_vector(velocity)

    drag = -0.5 * density * C.DRAG_COEF_LANDER * C.LANDER_DRAG_AREA * v2 * v_hat
    if parachute_status == ParachuteStatus.DEPLOYED:
        drag = drag - 0.5 * density * C.DRAG_COEF_CHUTE * C.CHUTE_DRAG_AREA * v2 * v_hat
    return drag


def compute_thrust_force(throttle: float, orientation: np.ndarray,
                         fuel: float = 1.0) -> np.ndarray:
    """
    Compute engine thrust in the world frame.

    The engine fires along the body +z axis with magnitude
    throttle * MAX_THRUST. An empty tank produces no thrust.

    Args:
        throttle: Throttle setting (0.0 to 1.0)
        orientation: xyz Euler angles (degrees)
        fuel: Remaining fuel fraction

    Returns:
        Thrust force vector (N)
    """
    if fuel <= 0.0:
        return np.zeros(3)
    throttle = float(np.clip(throttle, 0.0, 1.0))
    thrust_body = throttle * C.MAX_THRUST * C.BODY_THRUST_AXIS
    return body_to_world(thrust_body, orientation)


def parachute_drag_magnitude(position: np.ndarray, velocity: np.ndarray) -> float:
    """Drag the full parachute canopy would carry at the current state (N)."""
    return (0.5 * C.DRAG_COEF_CHUTE * atmospheric_density(position)
            * C.CHUTE_CANOPY_AREA * magnitude_squared(velocity))


def safe_to_deploy_parachute(position: np.ndarray, velocity: np.ndarray) -> bool:
    """
    Check whether the parachute would survive deployment.

    Unsafe if the canopy drag exceeds MAX_PARACHUTE_DRAG, or if the lander is
    inside the atmosphere faster than MAX_PARACHUTE_SPEED.
    """
    if parachute_drag_magnitude(position, velocity) > C.MAX_PARACHUTE_DRAG:
        return False
    if magnitude(velocity) > C.MAX_PARACHUTE_SPEED and altitude(position) < C.EXOSPHERE:
        return False
    return True


def compute_forces(state: LanderState) -> ForceBreakdown:
    """
    Compute all forces and return as a dictionary for logging/analysis.

    Args:
        state: Current lander state

    Returns:
        ForceBreakdown with per-term vectors, magnitudes and the net acceleration
    """
    mass = state.mass
    density = atmospheric_density(state.position)

    gravity = compute_gravity_force(state.position, mass)
    drag = compute_drag_force(state.position, state.velocity,
                              state.parachute_status, density=density)
    thrust = compute_thrust_force(state.throttle, state.orientation, state.fuel)
    total = gravity + drag + thrust

    return {
        'gravity': gravity,
        'drag': drag,
        'thrust': thrust,
        'total': total,
        'acceleration': total / mass,
        'density': density,
        'mass': mass,
        'gravity_magnitude': magnitude(gravity),
        'drag_magnitude': magnitude(drag),
        'thrust_magnitude': magnitude(thrust),
    }
