"""Tests for the lander state container."""
import pytest
import numpy as np
from lander_sim import constants as C
from lander_sim.state import LanderState, ParachuteStatus


def make_state(**kwargs):
    defaults = dict(
        position=[0.0, -(C.MARS_RADIUS + 1000.0), 0.0],
        velocity=[3.0, 20.0, 4.0],
        orientation=[0.0, 0.0, 90.0],
    )
    defaults.update(kwargs)
    return LanderState(**defaults)


def test_defaults():
    state = LanderState()
    assert state.fuel == 1.0
    assert state.throttle == 0.0
    assert state.parachute_status is ParachuteStatus.NOT_DEPLOYED
    assert state.autopilot_enabled is False
    assert state.t == 0.0


def test_lists_coerced_to_arrays():
    state = make_state()
    assert isinstance(state.position, np.ndarray)
    assert state.velocity.dtype == np.float64


def test_derived_quantities():
    state = make_state()
    assert state.altitude == pytest.approx(1000.0)
    # position is along -y, so +20 m/s in y is a descent
    assert state.radial_velocity == pytest.approx(-20.0)
    assert state.ground_speed == pytest.approx(5.0)
    assert state.speed == pytest.approx(np.sqrt(9.0 + 400.0 + 16.0))


def test_mass_tracks_fuel():
    assert make_state(fuel=1.0).mass == pytest.approx(200.0)
    assert make_state(fuel=0.25).mass == pytest.approx(125.0)
    assert make_state(fuel=0.0).mass == pytest.approx(C.UNLOADED_LANDER_MASS)


def test_copy_is_independent():
    state = make_state(parachute_status=ParachuteStatus.DEPLOYED)
    clone = state.copy()
    clone.position[0] = 123.0
    clone.fuel = 0.1
    assert state.position[0] == 0.0
    assert state.fuel == 1.0
    assert clone.parachute_status is ParachuteStatus.DEPLOYED


def test_str_summary():
    text = str(make_state())
    assert "alt=1.000km" in text
    assert "chute=not_deployed" in text
