import pytest
import numpy as np
from lander_sim import attitude, frames
from lander_sim import constants as C


@pytest.mark.parametrize('position', [
    [0.0, -(C.MARS_RADIUS + 10000.0), 0.0],
    [C.MARS_RADIUS, 0.0, 0.0],
    [0.0, 0.0, C.MARS_RADIUS],
    [0.0, 0.0, -C.MARS_RADIUS],
    [1.0e6, -2.0e6, 2.5e6],
])
def test_stabilized_thrust_axis_points_up(position):
    position = np.array(position)
    orientation = attitude.stabilize_attitude(position)
    thrust_axis = frames.body_to_world(C.BODY_THRUST_AXIS, orientation)
    np.testing.assert_allclose(thrust_axis, position / np.linalg.norm(position), atol=1e-9)


def test_local_vertical_frame_is_rotation():
    R = attitude.local_vertical_frame(np.array([1.0e6, 3.0e6, -0.5e6]))
    np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(R) == pytest.approx(1.0)


def test_degenerate_position_gives_valid_orientation():
    orientation = attitude.stabilize_attitude(np.zeros(3))
    assert np.all(np.isfinite(orientation))
