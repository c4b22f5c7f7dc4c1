"""
Kinematic state of a single bird.

Velocity is stored in the body frame; only displacement and orientation are
applied in the world frame.
"""
from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .frame import FORWARD, Transform

# Birds spawn already flying forward [m/s]
SPAWN_FORWARD_SPEED = 10.0


class VehicleState:
    """
    Body-frame velocity plus world transform.

    State Variables
    ---------------
    - local_velocity : NDArray[np.float64]
        Velocity in body frame [m/s] (3,)
    - transform : Transform
        World position and orientation
    """
    __slots__ = ("local_velocity", "transform")

    def __init__(
        self,
        local_velocity: NDArray[np.float64] | None = None,
        transform: Transform | None = None,
    ) -> None:
        self.local_velocity = (FORWARD * SPAWN_FORWARD_SPEED if local_velocity is None
                               else np.asarray(local_velocity, dtype=np.float64).copy())
        self.transform = Transform() if transform is None else transform

    @classmethod
    def spawn(
        cls,
        position: NDArray[np.float64] | None = None,
        orientation: NDArray[np.float64] | None = None,
        forward_speed: float = SPAWN_FORWARD_SPEED,
    ) -> VehicleState:
        """State at spawn: flying straight ahead at `forward_speed`."""
        return cls(FORWARD * float(forward_speed), Transform(position, orientation))

    @property
    def forward_speed(self) -> float:
        """Body-frame z velocity [m/s]."""
        return float(self.local_velocity[2])

    @property
    def airspeed(self) -> float:
        """Velocity magnitude [m/s]."""
        return float(np.linalg.norm(self.local_velocity))

    @property
    def world_velocity(self) -> NDArray[np.float64]:
        """Velocity in world frame [m/s] (3,)."""
        return self.transform.transform_vector(self.local_velocity)

    def copy(self) -> VehicleState:
        return VehicleState(self.local_velocity, self.transform.copy())

    def __repr__(self) -> str:
        return f"VehicleState(local_velocity={self.local_velocity}, transform={self.transform!r})"
