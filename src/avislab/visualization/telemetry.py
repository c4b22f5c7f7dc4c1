"""
On-screen flight telemetry.

The formatter is a pure function of post-tick state: it never feeds back into
the simulation, and identical inputs always give identical text.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from avislab.core.integrator import FlightStep
from avislab.dynamics.frame import Transform

MS_TO_KMH = 3.6


def angle_360_to_plus_minus_180(angle_deg: float) -> float:
    """
    Map an angle from [0, 360) to (-180, 180].

    >>> angle_360_to_plus_minus_180(270.0)
    -90.0
    >>> angle_360_to_plus_minus_180(180.0)
    180.0
    """
    return angle_deg - 360.0 if angle_deg > 180.0 else angle_deg


def _vec(v: NDArray[np.float64]) -> str:
    return "({:.1f}, {:.1f}, {:.1f})".format(*(float(c) for c in v))


def _whole(angle_deg: float) -> int:
    # Halves round away from zero
    return int(math.copysign(math.floor(abs(angle_deg) + 0.5), angle_deg))


@dataclass(frozen=True)
class TelemetrySnapshot:
    """
    Four named lines of debug text for the overlay.

    Attributes
    ----------
    acceleration : str
        Body-frame acceleration vector and magnitude
    speed : str
        Body-frame velocity and forward speed in km/h
    angle_of_attack : str
        Angle of attack in degrees
    attitude : str
        Pitch, roll and heading in (-180, 180]
    """
    acceleration: str
    speed: str
    angle_of_attack: str
    attitude: str

    def lines(self) -> tuple[str, str, str, str]:
        """Fields in display order."""
        return (self.acceleration, self.speed, self.angle_of_attack, self.attitude)


def format_telemetry(step: FlightStep, transform: Transform) -> TelemetrySnapshot:
    """
    Render telemetry text for one tick.

    Parameters
    ----------
    step : FlightStep
        Result of the tick
    transform : Transform
        Post-tick world transform (for attitude)

    Returns
    -------
    TelemetrySnapshot
    """
    accel = step.local_acceleration
    velocity_kmh = step.local_velocity * MS_TO_KMH
    forward_kmh = step.forward_speed * MS_TO_KMH
    pitch, heading, roll = transform.euler_angles()

    return TelemetrySnapshot(
        acceleration=f"Accel[{_vec(accel)}={np.linalg.norm(accel):.2f} m/s²]",
        speed=(
            f"Speed[{_vec(velocity_kmh)}={np.linalg.norm(velocity_kmh):.2f} km/h], "
            f"F.Speed[{forward_kmh:.2f} km/h]"
        ),
        angle_of_attack=f"Angle of attack [{step.angle_of_attack_deg:.2f}]",
        attitude=(
            f"Pitch[{_whole(angle_360_to_plus_minus_180(pitch))}], "
            f"Roll[{_whole(angle_360_to_plus_minus_180(roll))}], "
            f"Heading[{_whole(angle_360_to_plus_minus_180(heading))}]"
        ),
    )
