import pytest
import numpy as np
from lander_sim import integrators, forces
from lander_sim import constants as C
from lander_sim.scenarios import get_scenario
from lander_sim.utils import magnitude


def test_bootstrap_step_from_rest():
    integ = integrators.VerletIntegrator()
    p0 = np.array([1.0, 2.0, 3.0])
    a = np.array([0.0, 0.0, -3.7])
    dt = 0.1
    p1, v1 = integ.advance(p0, np.zeros(3), a, dt)
    np.testing.assert_allclose(p1, p0 + 0.5 * a * dt * dt, rtol=0, atol=1e-12)
    np.testing.assert_allclose(v1, a * dt, rtol=0, atol=1e-12)
    assert integ.bootstrapped is True
    np.testing.assert_array_equal(integ.previous_position, p0)


def test_steady_state_matches_constant_acceleration_kinematics():
    integ = integrators.VerletIntegrator()
    p0 = np.array([10.0, -5.0, 2.0])
    a = np.array([0.3, -1.2, 0.8])
    dt = 0.1
    p, v = p0.copy(), np.zeros(3)
    for n in range(1, 8):
        p, v = integ.advance(p, v, a, dt)
        t = n * dt
        np.testing.assert_allclose(p, p0 + 0.5 * a * t * t, rtol=0, atol=1e-10)
        np.testing.assert_allclose(v, a * t, rtol=0, atol=1e-10)


def test_bootstrap_uses_initial_velocity():
    integ = integrators.VerletIntegrator()
    p0 = np.zeros(3)
    v0 = np.array([3.0, 0.0, 0.0])
    p1, v1 = integ.advance(p0, v0, np.zeros(3), 0.5)
    np.testing.assert_allclose(p1, [1.5, 0.0, 0.0])
    np.testing.assert_allclose(v1, v0)


def test_velocity_formula_is_central_difference():
    """v' = (2x' - x_prev + a dt^2 - x_prev) / (2 dt) in the steady state."""
    integ = integrators.VerletIntegrator()
    dt = 0.2
    a = np.array([0.0, -1.0, 0.5])
    p0 = np.array([0.0, 100.0, 0.0])
    p1, v1 = integ.advance(p0, np.array([1.0, 0.0, 0.0]), a, dt)
    p2, v2 = integ.advance(p1, v1, a, dt)
    np.testing.assert_allclose(p2, 2 * p1 - p0 + a * dt * dt)
    expected_v = (2 * p2 - p1 + a * dt * dt - p1) * 0.5 / dt
    np.testing.assert_allclose(v2, expected_v)


def test_advance_does_not_mutate_inputs():
    integ = integrators.VerletIntegrator()
    p = np.array([1.0, 1.0, 1.0])
    v = np.array([0.5, 0.0, 0.0])
    a = np.array([0.0, -1.0, 0.0])
    p_before, v_before = p.copy(), v.copy()
    integ.advance(p, v, a, 0.1)
    integ.advance(p, v, a, 0.1)
    np.testing.assert_array_equal(p, p_before)
    np.testing.assert_array_equal(v, v_before)


@pytest.mark.parametrize('dt', [0.0, -0.1, float('nan')])
def test_invalid_dt(dt):
    integ = integrators.VerletIntegrator()
    with pytest.raises(integrators.InvalidTimestepError):
        integ.advance(np.zeros(3), np.zeros(3), np.zeros(3), dt)


def test_dt_change_after_bootstrap_rejected():
    integ = integrators.VerletIntegrator()
    p, v = integ.advance(np.zeros(3), np.zeros(3), np.zeros(3), 0.1)
    with pytest.raises(integrators.InvalidTimestepError):
        integ.advance(p, v, np.zeros(3), 0.05)


def test_reset_allows_new_dt():
    integ = integrators.VerletIntegrator()
    p, v = integ.advance(np.zeros(3), np.zeros(3), np.zeros(3), 0.1)
    integ.reset()
    assert integ.bootstrapped is False
    assert integ.previous_position is None
    p, v = integ.advance(p, v, np.zeros(3), 0.05)
    assert integ.dt == 0.05


def test_invalid_timestep_is_value_error():
    assert issubclass(integrators.InvalidTimestepError, ValueError)


def test_euler_step():
    integ = integrators.EulerIntegrator()
    p0 = np.array([1.0, 0.0, 0.0])
    v0 = np.array([0.0, 2.0, 0.0])
    a = np.array([0.0, 0.0, -1.0])
    p1, v1 = integ.advance(p0, v0, a, 0.1)
    np.testing.assert_allclose(p1, [1.0, 0.2, 0.0])
    np.testing.assert_allclose(v1, [0.0, 2.0, -0.1])


def test_euler_invalid_dt():
    with pytest.raises(integrators.InvalidTimestepError):
        integrators.EulerIntegrator().advance(np.zeros(3), np.zeros(3), np.zeros(3), 0.0)


def test_create_integrator():
    assert isinstance(integrators.create_integrator(), integrators.VerletIntegrator)
    assert isinstance(integrators.create_integrator('verlet'), integrators.VerletIntegrator)
    assert isinstance(integrators.create_integrator('euler'), integrators.EulerIntegrator)


def test_create_integrator_unknown_method():
    with pytest.raises(ValueError):
        integrators.create_integrator('rk4')


def test_create_integrator_returns_fresh_instance():
    a = integrators.create_integrator()
    b = integrators.create_integrator()
    a.advance(np.zeros(3), np.zeros(3), np.zeros(3), 0.1)
    assert b.bootstrapped is False


def test_euler_and_verlet_agree_over_short_horizon():
    a = np.array([0.0, 0.0, -C.G_SURFACE])
    p_v, v_v = np.zeros(3), np.array([5.0, 0.0, 0.0])
    p_e, v_e = p_v.copy(), v_v.copy()
    verlet = integrators.create_integrator("verlet")
    euler = integrators.create_integrator("euler")
    for _ in range(10):
        p_v, v_v = verlet.advance(p_v, v_v, a, 0.01)
        p_e, v_e = euler.advance(p_e, v_e, a, 0.01)
    np.testing.assert_allclose(p_e, p_v, atol=5e-3)
    np.testing.assert_allclose(v_e, v_v, atol=1e-3)


def _gravity_acceleration(r):
    return forces.compute_gravity_force(r, 1.0)


@pytest.mark.slow
def test_circular_orbit_radius_stays_within_one_percent():
    scenario = get_scenario('circular_orbit')
    r = np.array(scenario.position, dtype=float)
    v = np.array(scenario.velocity, dtype=float)
    r0 = magnitude(r)
    period = 2.0 * np.pi * r0 / magnitude(v)
    n_steps = int(np.ceil(period / scenario.dt))

    integ = integrators.VerletIntegrator()
    r_min = r_max = r0
    for _ in range(n_steps):
        r, v = integ.advance(r, v, _gravity_acceleration(r), scenario.dt)
        r_norm = magnitude(r)
        r_min = min(r_min, r_norm)
        r_max = max(r_max, r_norm)

    assert (r_max - r0) / r0 < 0.01
    assert (r0 - r_min) / r0 < 0.01
    # Back near the start after one period
    assert magnitude(r - np.array(scenario.position)) / r0 < 0.01
