"""
Body-frame force terms of the bird flight model.

Every term is expressed in the bird's local axes (+x right, +y up, +z
forward) and evaluated from the velocity at the start of the tick.

Physical units:
- Forces: Newtons [N]
- Velocities: meters per second [m/s]
- Angles: degrees [deg]

The model is a tunable approximation, not exact aerodynamics: coefficients
are dimensionless multipliers of speed squared and carry no density or area.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from .frame import FORWARD, UP, Transform

# Below this airspeed the angle of attack is reported as zero [m/s]
AOA_MIN_SPEED = 0.1
EPSILON_VELOCITY = 1e-12

STANDARD_GRAVITY = 9.81  # [m/s²]

BACKWARD = -FORWARD
DOWN = -UP


def signed_square(v: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Component-wise ``sign(v) * v²``.

    Used for quadratic drag so that each axis' drag opposes motion on that
    axis.
    """
    v = np.asarray(v, dtype=np.float64)
    return np.abs(v) * v


def angle_of_attack_deg(local_velocity: NDArray[np.float64]) -> float:
    """
    Signed angle of attack [deg].

    The unsigned angle between the forward axis and the velocity projected
    onto the body y-z plane. Positive when the bird is sinking (v.y < 0),
    negative otherwise.

    Parameters
    ----------
    local_velocity : NDArray[np.float64]
        Body-frame velocity [m/s] (3,)

    Returns
    -------
    float
        Angle of attack in [-180, 180]. Straight backward flight gives -180.0.
        Exactly 0.0 when |v| < AOA_MIN_SPEED
        or when the velocity has no y-z component.
    """
    v = np.asarray(local_velocity, dtype=np.float64)
    if np.linalg.norm(v) < AOA_MIN_SPEED:
        return 0.0

    projected = np.array([0.0, v[1], v[2]])
    norm = np.linalg.norm(projected)
    if norm < EPSILON_VELOCITY:
        return 0.0

    angle = float(np.degrees(np.arccos(np.clip(projected[2] / norm, -1.0, 1.0))))
    if angle == 0.0:
        return 0.0
    sign = 1.0 if v[1] < 0 else -1.0
    return sign * angle


def thrust_force(thrust_input: float, brake_input: float, max_thrust_n: float) -> NDArray[np.float64]:
    """Thrust along local forward: ``(thrust - brake) * max_thrust_n``."""
    return FORWARD * ((thrust_input - brake_input) * max_thrust_n)


def lift_force(forward_speed: float, lift_coefficient: float, max_lift_n: float) -> NDArray[np.float64]:
    """
    Lift along local up.

    Magnitude is ``forward_speed² * lift_coefficient`` capped at
    `max_lift_n`; the bird never generates more lift than it needs to hold
    its own weight.
    """
    return UP * min(max_lift_n, forward_speed * forward_speed * lift_coefficient)


def gravity_force(transform: Transform, mass: float, g: float = STANDARD_GRAVITY) -> NDArray[np.float64]:
    """World gravity ``(0, -g, 0) * mass`` rotated into the body frame."""
    return transform.inverse_transform_vector(DOWN * (g * mass))


def body_drag_force(
    local_velocity_squared: NDArray[np.float64],
    body_drag_factors: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Per-axis quadratic body drag ``-(v2 ⊙ factors)``.

    Parameters
    ----------
    local_velocity_squared : NDArray[np.float64]
        Output of :func:`signed_square` for the body-frame velocity (3,)
    body_drag_factors : NDArray[np.float64]
        Drag factor per body axis (3,). Forward is usually much smaller than
        sideways and vertical.
    """
    return -(np.asarray(local_velocity_squared, dtype=np.float64)
             * np.asarray(body_drag_factors, dtype=np.float64))


def induced_drag_force(forward_speed: float, drag_coefficient: float) -> NDArray[np.float64]:
    """Lift-induced drag along local backward: ``forward_speed² * drag_coefficient``."""
    return BACKWARD * (forward_speed * forward_speed * drag_coefficient)


@dataclass(frozen=True)
class ForceBreakdown:
    """
    Individual body-frame forces of one tick [N].

    Attributes
    ----------
    thrust, lift, gravity, body_drag, induced_drag : NDArray[np.float64]
        Force vectors (3,)
    """
    thrust: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    lift: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    gravity: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    body_drag: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    induced_drag: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))

    TERMS = ("thrust", "lift", "gravity", "body_drag", "induced_drag")

    @property
    def drag(self) -> NDArray[np.float64]:
        """Body drag plus induced drag."""
        return self.body_drag + self.induced_drag

    @property
    def total(self) -> NDArray[np.float64]:
        """Resultant force."""
        return self.thrust + self.lift + self.gravity + self.body_drag + self.induced_drag

    def as_dict(self) -> dict[str, NDArray[np.float64]]:
        """Force vectors keyed by term name, in TERMS order."""
        return {name: getattr(self, name) for name in self.TERMS}
