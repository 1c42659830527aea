"""
Mars Lander Simulation - Validation Checks

This module implements state sanity checks run by the driver every step:
- Finite position/velocity/orientation
- Position not deep inside the planet
- Throttle and fuel within [0, 1]

and an energy-conservation check for unpowered flight in vacuum.

Abort on violation.
"""

from typing import Optional, Tuple

import numpy as np

from . import constants as C
from .state import LanderState


class ValidationError(Exception):
    """Raised when a physics validation check fails."""
    pass


def check_finite(state: LanderState) -> bool:
    """
    Check that no vector component is NaN or infinite.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    for name in ('position', 'velocity', 'orientation'):
        value = getattr(state, name)
        if not np.all(np.isfinite(value)):
            raise ValidationError(f"Non-finite {name}: {value}")
    return True


def check_position_valid(position: np.ndarray) -> bool:
    """
    Check that position is physically valid (not deep inside Mars).

    Touchdown is detected long before this, so a violation means the
    integration has gone wrong.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    r_norm = np.linalg.norm(position)
    if r_norm < C.MARS_RADIUS * 0.5:
        raise ValidationError(
            f"Position inside Mars: |r| = {r_norm/1000:.2f} km, "
            f"R_Mars = {C.MARS_RADIUS/1000:.2f} km"
        )
    return True


def check_throttle_valid(throttle: float) -> bool:
    """
    Check that the throttle command lies in [0, 1].

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not 0.0 <= throttle <= 1.0:
        raise ValidationError(f"Throttle out of range: {throttle}")
    return True


def check_fuel_valid(fuel: float) -> bool:
    """
    Check that the fuel fraction lies in [0, 1].

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not 0.0 <= fuel <= 1.0:
        raise ValidationError(f"Fuel fraction out of range: {fuel}")
    return True


def validate_state(state: LanderState, abort_on_error: bool = True) -> Tuple[bool, Optional[str]]:
    """
    Perform all validation checks on a state.

    Args:
        state: State to validate
        abort_on_error: If True, raise exception on first error
    """
    try:
        check_finite(state)
        check_position_valid(state.position)
        check_throttle_valid(state.throttle)
        check_fuel_valid(state.fuel)
        return True, None
    except ValidationError as e:
        if abort_on_error:
            raise
        return False, str(e)


def compute_specific_energy(position: np.ndarray, velocity: np.ndarray) -> float:
    """
    Compute specific orbital energy.

    E = v^2/2 - mu/r

    Mass-independent, so it stays constant while coasting even though
    the lander's mass is not fixed over a whole run.

    Returns:
        Specific orbital energy (J/kg)
    """
    r_norm = np.linalg.norm(position)
    if r_norm < C.ZERO_TOLERANCE:
        return 0.0
    v_norm = np.linalg.norm(velocity)
    return float(0.5 * v_norm ** 2 - C.MU_MARS / r_norm)


def validate_energy_conservation(E_current: float, E_previous: float,
                                 tolerance: float = None) -> dict:
    """
    Validate energy conservation across an unpowered, drag-free interval.

    Args:
        E_current: Current specific energy (J/kg)
        E_previous: Specific energy at the start of the interval (J/kg)
        tolerance: Relative tolerance (default ENERGY_TOLERANCE)

    Returns:
        Dictionary with validation results
    """
    if tolerance is None:
        tolerance = C.ENERGY_TOLERANCE

    if abs(E_previous) < C.ZERO_TOLERANCE:
        return {'valid': True, 'dE': 0.0, 'relative_error': 0.0,
                'message': 'Energy too small to validate'}

    dE = E_current - E_previous
    relative_error = abs(dE / E_previous)

    return {
        'valid': relative_error < tolerance,
        'dE': float(dE),
        'relative_error': float(relative_error),
        'message': f"Energy error: {relative_error:.2e} (tol={tolerance:.2e})"
    }
