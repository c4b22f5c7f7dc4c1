"""
Orientation helpers in the game-engine axis convention.

Axes are +x right, +y up, +z forward (nose). Quaternions are scalar-last
[x, y, z, w], as expected by scipy and by :class:`avislab.dynamics.frame.Transform`.

Euler angles follow the engine convention used for spawning and for the
on-screen readout: pitch about x, heading (yaw) about y, roll about z, with
the composite rotation R = R_y(heading) @ R_x(pitch) @ R_z(roll).

Examples
--------
>>> from avislab.utils.orientation import orientation_from_euler, look_rotation
>>> q = orientation_from_euler(pitch=-10, heading=45)
>>> q = look_rotation(forward=[1, 0, 1], up=[0, 1, 0])
"""
from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.transform import Rotation as R

# Minimum norm for a direction to define a look rotation
DIRECTION_EPSILON = 1e-9

# Engine Euler sequence (intrinsic Y, then X, then Z)
ENGINE_EULER_ORDER = "YXZ"


IDENTITY: NDArray[np.float64] = np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float64)
"""Identity quaternion [0, 0, 0, 1] representing no rotation."""


def orientation_from_euler(
    pitch: float = 0.0,
    heading: float = 0.0,
    roll: float = 0.0,
    degrees: bool = True,
) -> NDArray[np.float64]:
    """
    Create orientation quaternion from engine-style Euler angles.

    Parameters
    ----------
    pitch : float
        Rotation about the right (x) axis. Positive pitches the nose down.
    heading : float
        Rotation about the up (y) axis.
    roll : float
        Rotation about the forward (z) axis.
    degrees : bool
        If True (default), angles are in degrees. If False, radians.

    Returns
    -------
    NDArray[np.float64]
        Quaternion [x, y, z, w]

    Examples
    --------
    >>> q = orientation_from_euler(heading=90)   # nose toward +x
    """
    rot = R.from_euler(ENGINE_EULER_ORDER, [heading, pitch, roll], degrees=degrees)
    return rot.as_quat()


def look_rotation(
    forward: tuple[float, float, float] | list[float] | NDArray,
    up: tuple[float, float, float] | list[float] | NDArray = (0.0, 1.0, 0.0),
) -> NDArray[np.float64] | None:
    """
    Orientation whose +z axis points along `forward` and whose +y axis is
    as close to `up` as possible.

    Parameters
    ----------
    forward : array-like
        Desired nose direction in world frame. Need not be normalized.
    up : array-like
        Up hint in world frame.

    Returns
    -------
    NDArray[np.float64] | None
        Quaternion [x, y, z, w], or None when `forward` is (near) zero or
        parallel to `up`, since no unique rotation exists then.
    """
    fwd = np.asarray(forward, dtype=np.float64)
    fwd_norm = np.linalg.norm(fwd)
    if fwd_norm < DIRECTION_EPSILON:
        return None
    z_new = fwd / fwd_norm

    x_new = np.cross(np.asarray(up, dtype=np.float64), z_new)
    x_norm = np.linalg.norm(x_new)
    if x_norm < DIRECTION_EPSILON:
        return None
    x_new = x_new / x_norm
    y_new = np.cross(z_new, x_new)

    R_mat = np.column_stack([x_new, y_new, z_new])
    return R.from_matrix(R_mat).as_quat()


def quaternion_to_euler(
    q: NDArray[np.float64],
    degrees: bool = True,
) -> tuple[float, float, float]:
    """
    Convert quaternion to engine-style Euler angles.

    Parameters
    ----------
    q : NDArray[np.float64]
        Quaternion [x, y, z, w]
    degrees : bool
        If True, return degrees in [0, 360). Otherwise radians in [0, 2π).

    Returns
    -------
    tuple[float, float, float]
        (pitch, heading, roll)
    """
    heading, pitch, roll = R.from_quat(q).as_euler(ENGINE_EULER_ORDER, degrees=degrees)
    full_turn = 360.0 if degrees else 2.0 * np.pi
    angles = np.mod([pitch, heading, roll], full_turn)
    # mod() of a tiny negative rounds up to exactly one full turn
    pitch, heading, roll = np.where(angles >= full_turn, 0.0, angles)
    return float(pitch), float(heading), float(roll)


def describe_orientation(q: NDArray[np.float64]) -> str:
    """
    Get human-readable description of an orientation.

    Examples
    --------
    >>> describe_orientation([0, 0, 0, 1])
    'Pitch: 0.0°, Heading: 0.0°, Roll: 0.0°'
    """
    pitch, heading, roll = quaternion_to_euler(q, degrees=True)
    return f"Pitch: {pitch:.1f}°, Heading: {heading:.1f}°, Roll: {roll:.1f}°"
