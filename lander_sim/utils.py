"""
Mars Lander Simulation - Vector Utility Functions

Vectors are plain numpy arrays of shape (3,) in the planet-centred
Cartesian frame. Arithmetic is numpy arithmetic; this module adds the
handful of named operations shared by the force model, the integrator
and the autopilot.
"""

import numpy as np

from . import constants as C


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a float64 3-vector."""
    return np.array([x, y, z], dtype=np.float64)


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Scalar product."""
    return float(np.dot(a, b))


def magnitude(v: np.ndarray) -> float:
    """Euclidean length |v|."""
    return float(np.linalg.norm(v))


def magnitude_squared(v: np.ndarray) -> float:
    """Squared length |v|^2 (no square root)."""
    return float(np.dot(v, v))


def unit_vector(v: np.ndarray) -> np.ndarray:
    """
    Return v / |v|.

    A zero-length (or numerically zero) input returns the zero vector
    rather than raising or producing NaN, so forces built on the direction
    of a vanishing vector (drag at rest, gravity at the origin) vanish too.

    Args:
        v: Vector of shape (3,)

    Returns:
        Unit vector, or zeros(3) if |v| < ZERO_TOLERANCE
    """
    norm = np.linalg.norm(v)
    if norm < C.ZERO_TOLERANCE:
        return np.zeros(3)
    return np.asarray(v, dtype=np.float64) / norm


def altitude(position: np.ndarray) -> float:
    """Height above the Mars mean radius (m)."""
    return magnitude(position) - C.MARS_RADIUS


def radial_velocity(position: np.ndarray, velocity: np.ndarray) -> float:
    """Velocity component along the local vertical (rate of change of altitude)."""
    return dot(velocity, unit_vector(position))


def ground_speed(position: np.ndarray, velocity: np.ndarray) -> float:
    """Magnitude of the velocity component perpendicular to the local vertical."""
    up = unit_vector(position)
    horizontal = velocity - np.dot(velocity, up) * up
    return magnitude(horizontal)
