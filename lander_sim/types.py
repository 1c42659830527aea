"""
Mars Lander Simulation - Type Definitions

This module provides TypedDict and NamedTuple definitions for structured
return types.
"""

from typing import NamedTuple, TypedDict

import numpy as np
from numpy.typing import NDArray

from .state import ParachuteStatus


class ForceBreakdown(TypedDict):
    """Return type for force computation details (planet-centred frame)."""
    gravity: NDArray[np.float64]  # Gravity force vector (N)
    drag: NDArray[np.float64]  # Lander + parachute drag force vector (N)
    thrust: NDArray[np.float64]  # Thrust force vector (N)
    total: NDArray[np.float64]  # Total force vector (N)
    acceleration: NDArray[np.float64]  # total / mass (m/s^2)
    density: float  # Atmospheric density at the lander (kg/m^3)
    mass: float  # Lander mass (kg)
    gravity_magnitude: float  # Gravity force magnitude (N)
    drag_magnitude: float  # Drag force magnitude (N)
    thrust_magnitude: float  # Thrust force magnitude (N)


class AutopilotCommand(NamedTuple):
    """Return type of Autopilot.update()."""
    throttle: float  # Throttle command (0.0 to 1.0)
    parachute_status: ParachuteStatus  # Parachute state after this step
    engaged: bool  # Whether powered descent is engaged
