"""
Mars Lander Simulation - Physical Constants and Lander Parameters

This module defines the planetary constants, lander specifications and
numerical tolerances used throughout the simulation.

Units are SI throughout, except fuel (fraction of tank capacity, litres for
the capacity itself) and orientation (degrees).
"""

import numpy as np

# =============================================================================
# MARS PARAMETERS
# =============================================================================

# Universal gravitational constant (m^3 kg^-1 s^-2)
GRAVITY = 6.673e-11

# Mars mass (kg) and mean radius (m)
MARS_MASS = 6.42e23
MARS_RADIUS = 3386000.0

# Standard gravitational parameter (m^3/s^2)
MU_MARS = GRAVITY * MARS_MASS

# Surface gravity (m/s^2)
G_SURFACE = MU_MARS / (MARS_RADIUS * MARS_RADIUS)

# Top of the atmosphere (m above surface); vacuum beyond this
EXOSPHERE = 200000.0

# Exponential atmosphere model: rho = RHO_0 * exp(-h / H_SCALE)
RHO_0 = 0.017      # kg/m^3 at the surface
H_SCALE = 11000.0  # m

# =============================================================================
# LANDER PARAMETERS
# =============================================================================

LANDER_SIZE = 1.0             # m (base radius)
UNLOADED_LANDER_MASS = 100.0  # kg
FUEL_CAPACITY = 100.0         # l
FUEL_DENSITY = 1.0            # kg/l
FUEL_RATE_AT_MAX_THRUST = 0.5  # l/s

# Engine can hover a fully fuelled lander at 2/3 throttle at the surface
MAX_THRUST = 1.5 * (FUEL_DENSITY * FUEL_CAPACITY + UNLOADED_LANDER_MASS) * G_SURFACE

# =============================================================================
# AERODYNAMICS
# =============================================================================

DRAG_COEF_LANDER = 1.0
DRAG_COEF_CHUTE = 2.0

# Lander frontal area used by the drag model (m^2)
LANDER_DRAG_AREA = 3.14159265 * LANDER_SIZE * LANDER_SIZE

# Effective parachute area used by the drag model (m^2)
CHUTE_DRAG_AREA = 20.0

# Parachute canopy area used by the deployment safety check (m^2):
# five panels of 2L x 2L
CHUTE_CANOPY_AREA = 5.0 * 2.0 * LANDER_SIZE * 2.0 * LANDER_SIZE

# Structural limits of the parachute
MAX_PARACHUTE_DRAG = 20000.0  # N
MAX_PARACHUTE_SPEED = 500.0   # m/s

# =============================================================================
# TOUCHDOWN LIMITS
# =============================================================================

MAX_IMPACT_GROUND_SPEED = 1.0  # m/s (horizontal)
MAX_IMPACT_DESCENT_RATE = 1.0  # m/s (vertical)

# =============================================================================
# AUTOPILOT
# =============================================================================

# Proportional gain of the descent throttle law
AUTOPILOT_KP = 0.05

# Fraction of initial altitude at which powered descent engages
AUTOPILOT_ENGAGE_FRACTION = 0.5

# Descent-rate offset the law drives towards at zero altitude (m/s)
AUTOPILOT_TARGET_DESCENT_RATE = 0.5

# Parachute deployment altitude schedule:
# chute_engage = alt_engage - (initial_altitude - CHUTE_REFERENCE_ALTITUDE) / CHUTE_SCHEDULE_DIVISOR
CHUTE_REFERENCE_ALTITUDE = 10000.0  # m
CHUTE_SCHEDULE_DIVISOR = 1.943

# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

DT = 0.1            # s
MAX_TIME = 20000.0  # s

# Body axis along which the engine thrusts
BODY_THRUST_AXIS = np.array([0.0, 0.0, 1.0])

# =============================================================================
# NUMERICAL TOLERANCES
# =============================================================================

ZERO_TOLERANCE = 1e-10   # Near-zero check for divisions/normalizations
SMALL_NUM = 1e-7         # Near-pole check for attitude frame construction
ENERGY_TOLERANCE = 1e-3  # Relative energy conservation tolerance


def print_config():
    """Print configuration summary."""
    print("=" * 60)
    print("Mars Lander Configuration")
    print("=" * 60)
    print(f"Mars radius: {MARS_RADIUS/1000:,.0f} km")
    print(f"Surface gravity: {G_SURFACE:.3f} m/s^2")
    print(f"Unloaded mass: {UNLOADED_LANDER_MASS:.0f} kg")
    print(f"Fuel capacity: {FUEL_CAPACITY:.0f} l")
    print(f"Max thrust: {MAX_THRUST:.1f} N")
    print(f"Autopilot Kp: {AUTOPILOT_KP}")
    print("=" * 60)
