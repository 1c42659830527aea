"""Tests for the built-in scenario table."""
import pytest
import numpy as np
from lander_sim import constants as C
from lander_sim.scenarios import SCENARIOS, Scenario, get_scenario
from lander_sim.state import ParachuteStatus


def test_six_scenarios_with_unique_names():
    assert len(SCENARIOS) == 6
    assert len({s.name for s in SCENARIOS}) == 6


def test_lookup_by_index_and_name():
    assert get_scenario(1) is get_scenario("descent_10km")
    assert get_scenario(0).name == "circular_orbit"
    assert get_scenario(SCENARIOS[4]) is SCENARIOS[4]


@pytest.mark.parametrize('key', [6, -1, "moon_landing", True])
def test_unknown_scenario(key):
    with pytest.raises(KeyError):
        get_scenario(key)


def test_descent_scenarios_use_autopilot():
    for name in ("descent_10km", "descent_200km"):
        s = get_scenario(name)
        assert s.autopilot_enabled
        assert s.stabilized_attitude
    assert get_scenario("descent_10km").initial_altitude == pytest.approx(10000.0)
    assert get_scenario("descent_200km").initial_altitude == pytest.approx(C.EXOSPHERE)


def test_circular_orbit_speed():
    s = get_scenario("circular_orbit")
    r = np.linalg.norm(s.position)
    v = np.linalg.norm(s.velocity)
    assert v == pytest.approx(np.sqrt(C.MU_MARS / r), rel=1e-6)


def test_create_state_is_fresh():
    s = get_scenario("descent_10km")
    a = s.create_state()
    b = s.create_state()
    a.position[1] = 0.0
    assert b.position[1] == pytest.approx(-(C.MARS_RADIUS + 10000.0))
    assert b.parachute_status is ParachuteStatus.NOT_DEPLOYED
    assert b.throttle == 0.0
    assert b.fuel == 1.0


def test_custom_scenario():
    s = Scenario(name="hover", description="hover test",
                 position=(0.0, 0.0, C.MARS_RADIUS + 100.0),
                 velocity=(0.0, 0.0, 0.0), orientation=(0.0, 0.0, 0.0),
                 dt=0.05)
    assert s.initial_altitude == pytest.approx(100.0)
    assert s.create_state().autopilot_enabled is False
