"""
World transform of a flying body: position plus quaternion orientation.

Axis convention (body and world): +x right, +y up, +z forward.

All physical quantities use SI units:
- Position: meters [m]
- Angles: degrees [deg] unless stated otherwise
"""
from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.transform import Rotation as ScR
from scipy.spatial.transform import Slerp

from avislab.utils.orientation import IDENTITY, look_rotation, quaternion_to_euler
from avislab.utils.validation import validate_vector3

# Constants
QUATERNION_EPSILON = 1e-12

# Intrinsic order for control-input rotations: pitch (x), yaw (y), roll (z)
LOCAL_ROTATION_ORDER = "XYZ"

RIGHT = np.array([1.0, 0.0, 0.0])
UP = np.array([0.0, 1.0, 0.0])
FORWARD = np.array([0.0, 0.0, 1.0])


def quat_normalize(q: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Return unit quaternion (float64).

    Parameters
    ----------
    q : NDArray[np.float64]
        Quaternion in scalar-last format [x, y, z, w].

    Returns
    -------
    NDArray[np.float64]
        Normalized unit quaternion. Returns [0, 0, 0, 1] if input norm is zero.
    """
    q = np.asarray(q, dtype=np.float64)
    n = np.linalg.norm(q)
    if n < QUATERNION_EPSILON:
        warnings.warn(
            "Zero-norm quaternion detected. Returning identity quaternion [0,0,0,1].",
            RuntimeWarning,
            stacklevel=2
        )
        return IDENTITY.copy()
    return q / n


class Transform:
    """
    Position and orientation of a body in the world frame.

    State Variables
    ---------------
    - position : NDArray[np.float64]
        Body origin in world frame [m] (3,)
    - rotation : scipy.spatial.transform.Rotation
        Body->world rotation, so that v_world = rotation.apply(v_body)

    Notes
    -----
    Only direction vectors are converted between frames; points are not.
    There is no scale, so direction conversion preserves length.
    """
    __slots__ = ("position", "rotation")

    def __init__(
        self,
        position: NDArray[np.float64] | None = None,
        orientation: NDArray[np.float64] | None = None,
    ) -> None:
        """
        Parameters
        ----------
        position : NDArray[np.float64] | None
            World position [m] (3,). Defaults to the origin.
        orientation : NDArray[np.float64] | None
            Quaternion [x,y,z,w] (4,). Will be normalized. Defaults to identity.
        """
        self.position = (np.zeros(3, dtype=np.float64) if position is None
                         else validate_vector3(position, "position"))
        q = IDENTITY if orientation is None else quat_normalize(orientation)
        self.rotation = ScR.from_quat(q)

    @property
    def quaternion(self) -> NDArray[np.float64]:
        """Orientation quaternion [x, y, z, w]."""
        return self.rotation.as_quat()

    @property
    def forward(self) -> NDArray[np.float64]:
        """Body +z axis in world frame."""
        return self.rotation.apply(FORWARD)

    @property
    def up(self) -> NDArray[np.float64]:
        """Body +y axis in world frame."""
        return self.rotation.apply(UP)

    @property
    def right(self) -> NDArray[np.float64]:
        """Body +x axis in world frame."""
        return self.rotation.apply(RIGHT)

    def rotation_world(self) -> NDArray[np.float64]:
        """
        Get rotation matrix from body to world frame.

        Returns
        -------
        NDArray[np.float64]
            3x3 rotation matrix R such that v_world = R @ v_body
        """
        return self.rotation.as_matrix()

    def transform_vector(self, v_local: NDArray[np.float64]) -> NDArray[np.float64]:
        """Convert a direction from body frame to world frame."""
        return self.rotation.apply(np.asarray(v_local, dtype=np.float64))

    def inverse_transform_vector(self, v_world: NDArray[np.float64]) -> NDArray[np.float64]:
        """Convert a direction from world frame to body frame."""
        return self.rotation.apply(np.asarray(v_world, dtype=np.float64), inverse=True)

    def translate(self, delta_world: NDArray[np.float64]) -> None:
        """Move the origin by a world-frame displacement [m]."""
        self.position += np.asarray(delta_world, dtype=np.float64)

    def rotate_local(self, pitch: float, yaw: float, roll: float, degrees: bool = True) -> None:
        """
        Apply a rotation expressed in the body's own axes.

        The three angles are combined into one rotation, taken intrinsically
        in the fixed order pitch (about x), then yaw (about the new y), then
        roll (about the new z), and composed after the current orientation.

        Parameters
        ----------
        pitch, yaw, roll : float
            Rotation angles [deg, or rad if degrees=False]
        """
        if pitch == 0.0 and yaw == 0.0 and roll == 0.0:
            return
        delta = ScR.from_euler(LOCAL_ROTATION_ORDER, [pitch, yaw, roll], degrees=degrees)
        self.rotation = self.rotation * delta

    def look_target(self, forward_world: NDArray[np.float64]) -> ScR | None:
        """
        Orientation that points the nose along `forward_world` using the
        current up axis as the up hint.

        Returns None when no such orientation is defined (zero direction, or
        direction parallel to the current up axis).
        """
        q = look_rotation(forward_world, self.up)
        return None if q is None else ScR.from_quat(q)

    def slerp_toward(self, target: ScR, fraction: float) -> None:
        """
        Spherically interpolate the orientation toward `target`.

        Parameters
        ----------
        target : Rotation
            Goal orientation (body->world)
        fraction : float
            Interpolation parameter, clamped to [0, 1]. 0 keeps the current
            orientation, 1 snaps to the target.
        """
        t = float(np.clip(fraction, 0.0, 1.0))
        if t <= 0.0:
            return
        keys = ScR.concatenate([self.rotation, target])
        self.rotation = Slerp([0.0, 1.0], keys)([t])[0]

    def euler_angles(self) -> tuple[float, float, float]:
        """
        Engine-style Euler angles in [0, 360) degrees.

        Returns
        -------
        tuple[float, float, float]
            (pitch, heading, roll)
        """
        return quaternion_to_euler(self.quaternion, degrees=True)

    def copy(self) -> Transform:
        """Independent copy (snapshot) of this transform."""
        return Transform(self.position, self.quaternion)

    def __repr__(self) -> str:
        return f"Transform(position={self.position}, quaternion={self.quaternion})"
