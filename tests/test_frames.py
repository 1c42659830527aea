import pytest
import numpy as np
from lander_sim import frames


@pytest.mark.parametrize('angles', [
    [0.0, 0.0, 0.0],
    [10.0, 20.0, 30.0],
    [-45.0, 60.0, 120.0],
    [170.0, -30.0, -90.0],
])
def test_euler_round_trip(angles):
    R = frames.euler_xyz_to_matrix(angles)
    back = frames.matrix_to_euler_xyz(R)
    np.testing.assert_allclose(back, angles, atol=1e-9)


def test_rotation_matrix_is_orthonormal():
    R = frames.euler_xyz_to_matrix([33.0, -12.0, 71.0])
    np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(R) == pytest.approx(1.0)


def test_single_axis_rotations():
    z = np.array([0.0, 0.0, 1.0])
    np.testing.assert_allclose(frames.body_to_world(z, [90.0, 0.0, 0.0]), [0.0, -1.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(frames.body_to_world(z, [0.0, 90.0, 0.0]), [1.0, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(frames.body_to_world(z, [0.0, 0.0, 90.0]), z, atol=1e-12)


@pytest.mark.parametrize('b', [90.0, -90.0])
def test_gimbal_lock_reconstructs_matrix(b):
    R = frames.euler_xyz_to_matrix([25.0, b, 40.0])
    angles = frames.matrix_to_euler_xyz(R)
    assert angles[2] == 0.0
    np.testing.assert_allclose(frames.euler_xyz_to_matrix(angles), R, atol=1e-7)
