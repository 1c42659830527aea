import pytest
import numpy as np
from lander_sim import utils
from lander_sim import constants as C


def test_vec3():
    v = utils.vec3(1, 2, 3)
    assert v.dtype == np.float64
    np.testing.assert_array_equal(v, [1.0, 2.0, 3.0])


def test_magnitudes():
    v = np.array([3.0, 4.0, 12.0])
    assert utils.magnitude(v) == pytest.approx(13.0)
    assert utils.magnitude_squared(v) == pytest.approx(169.0)
    assert utils.dot(v, np.array([1.0, 0.0, 0.0])) == 3.0


def test_unit_vector():
    u = utils.unit_vector(np.array([0.0, -5.0, 0.0]))
    np.testing.assert_allclose(u, [0.0, -1.0, 0.0])


def test_unit_vector_of_zero_is_zero():
    u = utils.unit_vector(np.zeros(3))
    np.testing.assert_array_equal(u, np.zeros(3))
    assert not np.any(np.isnan(u))


def test_altitude():
    assert utils.altitude(np.array([0.0, 0.0, C.MARS_RADIUS + 250.0])) == pytest.approx(250.0)


def test_radial_velocity_and_ground_speed():
    r = np.array([C.MARS_RADIUS, 0.0, 0.0])
    v = np.array([-10.0, 4.0, 3.0])
    assert utils.radial_velocity(r, v) == pytest.approx(-10.0)
    assert utils.ground_speed(r, v) == pytest.approx(5.0)


def test_radial_velocity_at_origin_is_zero():
    assert utils.radial_velocity(np.zeros(3), np.array([1.0, 2.0, 3.0])) == 0.0
