"""
Mars Lander Simulation - Descent Autopilot

Closed-loop descent controller with two independent sub-machines driven by
the same altitude signal:

Parachute:  NOT_DEPLOYED -> DEPLOYED once below the deployment altitude
            and the safety check passes (retried every step otherwise).
            DEPLOYED and LOST are never left.

Throttle:   DISENGAGED -> ENGAGED once below the engagement altitude. The
            radial velocity at that instant is latched and biases the
            altitude gain, so a lander engaging at high descent rate gets a
            harder braking schedule.

Once engaged, the throttle follows a proportional-plus-offset law that
tracks a target descent rate falling linearly with altitude:

    w  = g_force / MAX_THRUST                    (hover throttle)
    Kh = -(0.7 / Kp + 0.5 + v_engaged) / h_engage
    e  = -(0.5 + Kh * h + v_radial)
    P  = Kp * e
    throttle = 0 if P <= -w, w + P if P < 1 - w, else 1

All state lives on the Autopilot instance; build one per lander.
"""

import logging
from typing import Callable, Optional

from . import constants as C
from .state import ParachuteStatus
from .types import AutopilotCommand

logger = logging.getLogger(__name__)


class AutopilotNotInitializedError(RuntimeError):
    """Raised when the autopilot is used before initial_altitude is set."""
    pass


class Autopilot:
    """
    Gain-scheduled descent controller.

    Args:
        initial_altitude: Scenario starting altitude (m). May be given later
            through reset().
        kp: Proportional gain
        max_thrust: Engine thrust at full throttle (N)
    """

    def __init__(self, initial_altitude: Optional[float] = None,
                 kp: float = C.AUTOPILOT_KP, max_thrust: float = C.MAX_THRUST):
        if kp <= 0:
            raise ValueError(f"Autopilot gain kp must be positive, got {kp}")
        if max_thrust <= 0:
            raise ValueError(f"max_thrust must be positive, got {max_thrust}")
        self.kp = kp
        self.max_thrust = max_thrust
        self.initial_altitude: Optional[float] = None
        self.engaged = False
        self.velocity_at_engagement: Optional[float] = None
        if initial_altitude is not None:
            self.reset(initial_altitude)

    def reset(self, initial_altitude: float):
        """Start a new scenario: capture the initial altitude and disengage."""
        if initial_altitude <= 0:
            raise ValueError(f"initial_altitude must be positive, got {initial_altitude}")
        self.initial_altitude = float(initial_altitude)
        self.engaged = False
        self.velocity_at_engagement = None

    # -------------------------------------------------------------------------
    # Schedules
    # -------------------------------------------------------------------------

    def _require_initialized(self):
        if self.initial_altitude is None:
            raise AutopilotNotInitializedError(
                "Autopilot used before initial_altitude was captured; call reset() first"
            )

    @property
    def engage_altitude(self) -> float:
        """Altitude below which powered descent engages (m)."""
        self._require_initialized()
        return C.AUTOPILOT_ENGAGE_FRACTION * self.initial_altitude

    @property
    def chute_altitude(self) -> float:
        """Altitude below which the parachute is deployed (m)."""
        return self.engage_altitude - (
            self.initial_altitude - C.CHUTE_REFERENCE_ALTITUDE
        ) / C.CHUTE_SCHEDULE_DIVISOR

    def altitude_gain(self) -> float:
        """Kh, scheduled on the engagement altitude and latched velocity."""
        if not self.engaged:
            raise RuntimeError("Altitude gain is undefined before engagement")
        return -((0.7) * (1 / self.kp) + C.AUTOPILOT_TARGET_DESCENT_RATE
                 + self.velocity_at_engagement) / self.engage_altitude

    # -------------------------------------------------------------------------
    # Control law
    # -------------------------------------------------------------------------

    def power_output(self, altitude: float, radial_velocity: float) -> float:
        """Proportional term Kp * e of the engaged law."""
        kh = self.altitude_gain()
        e = -(C.AUTOPILOT_TARGET_DESCENT_RATE + kh * altitude + radial_velocity)
        return self.kp * e

    def throttle_law(self, altitude: float, radial_velocity: float,
                     g_force_magnitude: float) -> float:
        """
        Throttle demanded by the engaged law, saturated to [0, 1].

        The branches meet at P = -w (throttle 0) and P = 1 - w (throttle 1),
        so the output is continuous in altitude and velocity.
        """
        weight_throttle = g_force_magnitude / self.max_thrust
        power_output = self.power_output(altitude, radial_velocity)

        if power_output <= -weight_throttle:
            return 0.0
        elif power_output < 1 - weight_throttle:
            return weight_throttle + power_output
        else:
            return 1.0

    def update(self, altitude: float, radial_velocity: float, g_force_magnitude: float,
               throttle: float, parachute_status: ParachuteStatus,
               deploy_is_safe: Callable[[], bool]) -> AutopilotCommand:
        """
        Run one autopilot step.

        Args:
            altitude: Current altitude (m)
            radial_velocity: Current climb rate, negative when descending (m/s)
            g_force_magnitude: Magnitude of the gravity force on the lander (N)
            throttle: Current throttle, returned unchanged while disengaged
            parachute_status: Current parachute status
            deploy_is_safe: Zero-argument safety gate, consulted only when
                the parachute is NOT_DEPLOYED and below deployment altitude

        Returns:
            AutopilotCommand(throttle, parachute_status, engaged)

        Raises:
            AutopilotNotInitializedError: If initial_altitude was never set
        """
        self._require_initialized()
        h = altitude

        if parachute_status == ParachuteStatus.NOT_DEPLOYED and h < self.chute_altitude:
            if deploy_is_safe():
                parachute_status = ParachuteStatus.DEPLOYED
                logger.info(f"Parachute deployed at h={h:.1f}m, v_r={radial_velocity:.2f}m/s")

        if not self.engaged:
            if h < self.engage_altitude:
                self.engaged = True
                self.velocity_at_engagement = float(radial_velocity)
                logger.info(f"Autopilot engaged at h={h:.1f}m, "
                            f"v_engaged={self.velocity_at_engagement:.2f}m/s")
        else:
            throttle = self.throttle_law(h, radial_velocity, g_force_magnitude)

        return AutopilotCommand(float(throttle), parachute_status, self.engaged)
