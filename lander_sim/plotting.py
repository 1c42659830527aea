"""
Mars Lander Simulation - Telemetry Plots

Renders the logged descent telemetry (altitude, radial velocity, throttle,
fuel) to PNG files with the non-interactive Agg backend.
"""

import os
from dataclasses import dataclass
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np


@dataclass
class TrajectoryData:
    """Container for processed telemetry used in plotting.

    Attributes:
        time: Time array in seconds
        altitude: Altitude array in kilometres
        radial_velocity: Climb rate in m/s
        speed: Velocity magnitude in m/s
        throttle: Throttle command [0, 1]
        fuel: Fuel remaining in percent
        engaged: Autopilot engagement flags
    """
    time: np.ndarray
    altitude: np.ndarray
    radial_velocity: np.ndarray
    speed: np.ndarray
    throttle: np.ndarray
    fuel: np.ndarray
    engaged: np.ndarray

    @property
    def engagement_time(self):
        """Time of autopilot engagement, or None."""
        idx = np.flatnonzero(self.engaged)
        return float(self.time[idx[0]]) if idx.size else None


def extract_log_data(log) -> TrajectoryData:
    """Convert a SimulationLog into numpy arrays in plotting units."""
    return TrajectoryData(
        time=np.asarray(log.time, dtype=float),
        altitude=np.asarray(log.altitude, dtype=float) / 1000.0,
        radial_velocity=np.asarray(log.radial_velocity, dtype=float),
        speed=np.asarray(log.speed, dtype=float),
        throttle=np.asarray(log.throttle, dtype=float),
        fuel=np.asarray(log.fuel, dtype=float) * 100.0,
        engaged=np.asarray(log.autopilot_engaged, dtype=bool),
    )


def _mark_engagement(ax, data: TrajectoryData):
    t_engage = data.engagement_time
    if t_engage is not None:
        ax.axvline(t_engage, color="tab:red", linestyle="--", linewidth=1.0,
                   label="Autopilot engaged")


def _save(fig, output_dir: str, name: str) -> str:
    path = os.path.join(output_dir, name)
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def plot_altitude(data: TrajectoryData, output_dir: str) -> str:
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(data.time, data.altitude, color="tab:blue")
    _mark_engagement(ax, data)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Altitude (km)")
    ax.set_title("Altitude")
    ax.grid(True, alpha=0.3)
    return _save(fig, output_dir, "altitude.png")


def plot_descent_profile(data: TrajectoryData, output_dir: str) -> str:
    """Descent rate against altitude: the autopilot tracks a line through -0.5 m/s at h=0."""
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(data.altitude, -data.radial_velocity, color="tab:purple")
    ax.set_xlabel("Altitude (km)")
    ax.set_ylabel("Descent rate (m/s)")
    ax.set_title("Descent profile")
    ax.invert_xaxis()
    ax.grid(True, alpha=0.3)
    return _save(fig, output_dir, "descent_profile.png")


def plot_velocity(data: TrajectoryData, output_dir: str) -> str:
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(data.time, data.radial_velocity, label="Radial velocity")
    ax.plot(data.time, data.speed, label="Speed", alpha=0.7)
    _mark_engagement(ax, data)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Velocity (m/s)")
    ax.set_title("Velocity")
    ax.legend()
    ax.grid(True, alpha=0.3)
    return _save(fig, output_dir, "velocity.png")


def plot_throttle_and_fuel(data: TrajectoryData, output_dir: str) -> str:
    fig, ax1 = plt.subplots(figsize=(8, 5))
    ax1.plot(data.time, data.throttle, color="tab:orange", label="Throttle")
    ax1.set_ylim(-0.05, 1.05)
    ax1.set_xlabel("Time (s)")
    ax1.set_ylabel("Throttle")
    _mark_engagement(ax1, data)

    ax2 = ax1.twinx()
    ax2.plot(data.time, data.fuel, color="tab:green", label="Fuel")
    ax2.set_ylabel("Fuel (%)")
    ax1.set_title("Throttle and fuel")
    ax1.grid(True, alpha=0.3)
    return _save(fig, output_dir, "throttle_fuel.png")


def generate_all_plots(log, output_dir: str) -> List[str]:
    """
    Write every telemetry plot for a run.

    Args:
        log: SimulationLog from run_simulation()
        output_dir: Directory to write PNG files into (created if missing)

    Returns:
        Paths of the written files
    """
    os.makedirs(output_dir, exist_ok=True)
    data = extract_log_data(log)
    if data.time.size == 0:
        return []
    return [
        plot_altitude(data, output_dir),
        plot_velocity(data, output_dir),
        plot_descent_profile(data, output_dir),
        plot_throttle_and_fuel(data, output_dir),
    ]
