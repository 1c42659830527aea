"""
Mars Lander Simulation - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing different simulation parameters to be passed without modifying
global constants.
"""

from dataclasses import dataclass
from typing import Optional

from . import constants as C
from .integrators import INTEGRATORS, check_timestep


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for simulation parameters.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Invalid values are rejected at construction, before any step runs.
    """

    # ── 1. Simulation timing ─────────────────────────────────────────────
    # None means "use the scenario's own dt"
    dt: Optional[float] = None
    max_time: float = C.MAX_TIME

    # ── 2. Numerics ──────────────────────────────────────────────────────
    integration_method: str = "verlet"

    # ── 3. Autopilot ─────────────────────────────────────────────────────
    autopilot_kp: float = C.AUTOPILOT_KP

    # ── 4. Diagnostics ───────────────────────────────────────────────────
    energy_check_interval: int = 100  # steps
    energy_tolerance: float = C.ENERGY_TOLERANCE

    # ── 5. Misc ──────────────────────────────────────────────────────────
    verbose: bool = True

    def __post_init__(self):
        if self.dt is not None:
            check_timestep(self.dt)
        if self.max_time <= 0:
            raise ValueError(f"max_time must be positive, got {self.max_time}")
        if self.integration_method not in INTEGRATORS:
            raise ValueError(f"Unknown integration method: {self.integration_method}")
        if self.autopilot_kp <= 0:
            raise ValueError(f"autopilot_kp must be positive, got {self.autopilot_kp}")
        if self.energy_check_interval < 1:
            raise ValueError("energy_check_interval must be at least 1")


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(max_time: float = 10.0, **overrides) -> SimulationConfig:
    """Create a fast config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(max_time=max_time, verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
