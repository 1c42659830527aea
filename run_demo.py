"""Demo script: run the 10 km descent and show the autopilot timeline."""
from lander_sim.main import run_simulation
import numpy as np

state, log, reason = run_simulation("descent_10km", verbose=True)

print("\n\n===== DESCENT TRACKING DETAILS =====")
if len(log.time) > 0:
    times = np.array(log.time)
    alts = np.array(log.altitude) / 1000.0
    v_r = np.array(log.radial_velocity)
    throttle = np.array(log.throttle)
    fuel = np.array(log.fuel) * 100.0
    chute = log.parachute_status
    engaged = log.autopilot_engaged
    print(f"Log entries: {len(log.time)}")
    print(f"Time range: {times[0]:.1f}s - {times[-1]:.1f}s")
    print(f"Peak descent rate: {-np.min(v_r):.1f} m/s")
    print(f"Final descent rate: {-v_r[-1]:.2f} m/s")
    print(f"Fuel used: {fuel[0] - fuel[-1]:.1f} %")
    print(f"Outcome: {reason}")
    print()
    print("Descent Timeline:")
    prev = None
    for i in range(len(times)):
        phase = (chute[i], engaged[i])
        if phase != prev:
            print(f"  t={times[i]:8.1f}s | Alt={alts[i]:8.3f} km | "
                  f"V_r={v_r[i]:8.2f} m/s | Throttle={throttle[i]:5.3f} | "
                  f"Chute: {chute[i]:<12} | Autopilot: {'on' if engaged[i] else 'off'}")
            prev = phase
