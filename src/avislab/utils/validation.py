"""
Validation utilities for flight parameters and per-tick inputs.

Configuration mistakes (zero mass, negative drag) raise immediately so a bad
tuning never reaches the integrator. Values that are legal but likely to
misbehave numerically only emit a RuntimeWarning.
"""
from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import NDArray


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Validate that a scalar value is positive.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages
    strict : bool
        If True, raise ValueError. If False, issue warning.

    Raises
    ------
    ValueError
        If strict=True and value <= 0 (or is not finite)
    """
    if not math.isfinite(value) or value <= 0:
        msg = f"{name} must be positive, got {value}"
        if strict:
            raise ValueError(msg)
        else:
            warnings.warn(msg, RuntimeWarning, stacklevel=2)


def validate_non_negative(value: float, name: str) -> None:
    """Validate that a value is finite and non-negative."""
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_unit_interval(value: float, name: str) -> None:
    """Validate that a value lies in [0, 1]."""
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must lie in [0, 1], got {value}")


def validate_finite(value: float, name: str) -> None:
    """Validate that a scalar is neither NaN nor infinite."""
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def validate_vector3(v: NDArray[np.float64], name: str) -> NDArray[np.float64]:
    """
    Coerce to a finite float64 vector of shape (3,).

    Returns
    -------
    NDArray[np.float64]
        A fresh copy of the input as float64.

    Raises
    ------
    ValueError
        If shape is not (3,) or any component is not finite
    """
    arr = np.array(v, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must be finite, got {arr}")
    return arr


def validate_quaternion(q: NDArray[np.float64], tol: float = 1e-6) -> None:
    """
    Validate that array is a unit quaternion.

    Parameters
    ----------
    q : NDArray[np.float64]
        Quaternion [x, y, z, w]
    tol : float
        Tolerance for unit norm check

    Raises
    ------
    ValueError
        If quaternion shape is invalid
    """
    q = np.asarray(q, dtype=np.float64)
    if q.shape != (4,):
        raise ValueError(f"Quaternion must have shape (4,), got {q.shape}")

    norm = np.linalg.norm(q)
    if abs(norm - 1.0) > tol:
        warnings.warn(
            f"Quaternion not normalized: |q| = {norm:.6f}. "
            "Consider normalizing before use.",
            RuntimeWarning,
            stacklevel=2
        )


def validate_timestep(dt: float, max_dt: float = 1.0) -> None:
    """
    Validate a fixed tick length.

    A zero timestep is allowed and produces an identity tick.

    Parameters
    ----------
    dt : float
        Time step [s]
    max_dt : float
        Maximum reasonable timestep [s]

    Raises
    ------
    ValueError
        If timestep is negative, NaN or infinite
    """
    if not math.isfinite(dt):
        raise ValueError(f"Timestep must be finite, got {dt}")
    if dt < 0:
        raise ValueError(f"Timestep must be non-negative, got {dt}")
    if dt > max_dt:
        warnings.warn(
            f"Large timestep {dt}s may cause instability. "
            f"Consider using dt < {max_dt}s.",
            RuntimeWarning,
            stacklevel=2
        )
