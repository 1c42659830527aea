"""
Mars Lander Simulation - Attitude Stabilisation

Ideal 3-axis stabiliser: snaps the lander so its base points at the planet
and the engine (body +z) thrusts straight up along the local vertical.
"""

import numpy as np

from . import constants as C
from .frames import matrix_to_euler_xyz
from .utils import unit_vector


def local_vertical_frame(position: np.ndarray) -> np.ndarray:
    """
    Build the orthonormal (out, left, up) frame at a position.

    up is the local vertical. left is horizontal; over the poles, where the
    vertical has no x/y component, it is taken from the z component instead.

    Returns:
        3x3 rotation matrix with columns [out, left, up]
    """
    up = unit_vector(position)
    if not np.any(up):
        up = C.BODY_THRUST_AXIS.copy()

    if abs(up[0]) < C.SMALL_NUM and abs(up[1]) < C.SMALL_NUM:
        left = np.array([-up[2], 0.0, 0.0])
    else:
        left = np.array([-up[1], up[0], 0.0])
    left = unit_vector(left)
    out = np.cross(left, up)

    return np.column_stack([out, left, up])


def stabilize_attitude(position: np.ndarray) -> np.ndarray:
    """
    Orientation that aligns the body +z axis with the local vertical.

    Args:
        position: Lander position (m)

    Returns:
        xyz Euler angles (degrees)
    """
    return matrix_to_euler_xyz(local_vertical_frame(position))
