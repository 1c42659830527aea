"""
Mars Lander Simulation - Reference Frame Transformations

The lander orientation is stored as xyz Euler angles in degrees. The
rotation matrix R = Rx(a) @ Ry(b) @ Rz(c) maps body-frame vectors into the
planet-centred world frame.
"""

import numpy as np

from . import constants as C


def euler_xyz_to_matrix(angles_deg: np.ndarray) -> np.ndarray:
    """
    Convert xyz Euler angles to a body-to-world rotation matrix.

    Args:
        angles_deg: Euler angles [a, b, c] in degrees

    Returns:
        3x3 rotation matrix
    """
    a, b, c = np.radians(np.asarray(angles_deg, dtype=np.float64))
    ca, sa = np.cos(a), np.sin(a)
    cb, sb = np.cos(b), np.sin(b)
    cc, sc = np.cos(c), np.sin(c)

    return np.array([
        [cb * cc,                 -cb * sc,                 sb],
        [sa * sb * cc + ca * sc,  -sa * sb * sc + ca * cc, -sa * cb],
        [-ca * sb * cc + sa * sc,  ca * sb * sc + sa * cc,  ca * cb],
    ])


def matrix_to_euler_xyz(R: np.ndarray) -> np.ndarray:
    """
    Decompose a rotation matrix into xyz Euler angles.

    At gimbal lock (b = +/-90 deg) the third angle is set to zero and the
    whole in-plane rotation is carried by the first.

    Args:
        R: 3x3 rotation matrix

    Returns:
        Euler angles [a, b, c] in degrees
    """
    sb = float(np.clip(R[0, 2], -1.0, 1.0))
    b = np.arcsin(sb)

    if abs(abs(sb) - 1.0) < C.SMALL_NUM:
        a = np.arctan2(R[2, 1], R[1, 1])
        c = 0.0
    else:
        a = np.arctan2(-R[1, 2], R[2, 2])
        c = np.arctan2(-R[0, 1], R[0, 0])

    return np.degrees(np.array([a, b, c]))


def body_to_world(vector_body: np.ndarray, orientation: np.ndarray) -> np.ndarray:
    """Rotate a body-frame vector into the world frame."""
    return euler_xyz_to_matrix(orientation) @ np.asarray(vector_body, dtype=np.float64)
