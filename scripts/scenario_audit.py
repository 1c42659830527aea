"""
Scenario audit report: run each built-in scenario and print its outcome.
"""

from __future__ import annotations

import argparse
from collections import OrderedDict
from pathlib import Path
import sys

import numpy as np

if __package__ in (None, ""):
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from lander_sim import constants as C
from lander_sim.config import create_test_config
from lander_sim.main import run_simulation
from lander_sim.scenarios import SCENARIOS, get_scenario


def _status_transitions(times, statuses, alts, v_rs):
    out = []
    prev = None
    for t, s, h, v in zip(times, statuses, alts, v_rs):
        if s != prev:
            out.append((float(t), str(s), float(h), float(v)))
            prev = s
    return out


def _fuel_usage_by_status(statuses, fuel):
    usage = OrderedDict()
    if len(statuses) < 2:
        return usage

    start_idx = 0
    for i in range(1, len(statuses)):
        if statuses[i] != statuses[start_idx]:
            s = str(statuses[start_idx])
            usage[s] = usage.get(s, 0.0) + max(0.0, float(fuel[start_idx] - fuel[i - 1]))
            start_idx = i

    s = str(statuses[start_idx])
    usage[s] = usage.get(s, 0.0) + max(0.0, float(fuel[start_idx] - fuel[-1]))
    return usage


def _orbital_elements(position, velocity):
    r = np.asarray(position, dtype=float)
    v = np.asarray(velocity, dtype=float)
    r_mag = float(np.linalg.norm(r))
    v_mag = float(np.linalg.norm(v))
    energy = 0.5 * v_mag * v_mag - C.MU_MARS / r_mag
    a = -C.MU_MARS / (2.0 * energy) if abs(energy) > 1e-9 else float("inf")
    h_mag = float(np.linalg.norm(np.cross(r, v)))
    if a > 0 and np.isfinite(a):
        ecc = np.sqrt(max(0.0, 1.0 - h_mag * h_mag / (C.MU_MARS * a)))
        periapsis = a * (1.0 - ecc) - C.MARS_RADIUS
        apoapsis = a * (1.0 + ecc) - C.MARS_RADIUS
    else:
        ecc = float("nan")
        periapsis = float("nan")
        apoapsis = float("nan")
    return {
        "a_km": a / 1000.0,
        "ecc": ecc,
        "periapsis_km": periapsis / 1000.0,
        "apoapsis_km": apoapsis / 1000.0,
        "speed_mps": v_mag,
    }


def audit_scenario(scenario, max_time: float, dt: float = None):
    cfg = create_test_config(max_time=max_time, dt=dt)
    state, log, reason = run_simulation(scenario, config=cfg)
    scenario = get_scenario(scenario)

    print("=" * 88)
    print(f"{scenario.name}: {scenario.description}")
    print(f"Termination: {reason}")
    print("-" * 88)

    t = np.array(log.time)
    if len(t) == 0:
        print("No telemetry recorded.")
        return state, reason

    statuses = [
        f"{chute}{' +autopilot' if engaged else ''}"
        for chute, engaged in zip(log.parachute_status, log.autopilot_engaged)
    ]
    print("Status Transitions:")
    for tt, s, h, v in _status_transitions(t, statuses, log.altitude, log.radial_velocity):
        print(f"  t={tt:9.1f}s | {s:24s} | alt={h/1000:9.3f} km | v_r={v:9.2f} m/s")
    print("-" * 88)
    usage = _fuel_usage_by_status(statuses, log.fuel)
    if any(burned > 0.0 for burned in usage.values()):
        print("Fuel Usage by Status:")
        for s, burned in usage.items():
            print(f"  {s:24s} : {burned*100:6.1f} %")
        print("-" * 88)

    orb = _orbital_elements(state.position, state.velocity)
    if np.isfinite(orb["ecc"]):
        print("Final Orbital Elements:")
        print(f"  a         = {orb['a_km']:.2f} km")
        print(f"  e         = {orb['ecc']:.5f}")
        print(f"  periapsis = {orb['periapsis_km']:.2f} km")
        print(f"  apoapsis  = {orb['apoapsis_km']:.2f} km")
    print(f"  speed     = {orb['speed_mps']:.1f} m/s")
    return state, reason


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run scenarios and print an audit summary.")
    parser.add_argument("--scenario", "-s", default=None,
                        help="Scenario index or name (default: all)")
    parser.add_argument("--dt", type=float, default=None, help="Integration timestep (s)")
    parser.add_argument("--max-time", type=float, default=2000.0, help="Maximum simulated time (s)")
    args = parser.parse_args(argv)

    if args.scenario is None:
        keys = range(len(SCENARIOS))
    else:
        keys = [int(args.scenario) if args.scenario.isdigit() else args.scenario]

    for key in keys:
        audit_scenario(key, args.max_time, args.dt)
    print("=" * 88)


if __name__ == "__main__":
    main()
