"""Utility functions for avislab simulations.

Parameter/history file helpers live in :mod:`avislab.utils.io`.
"""

from .orientation import (
    IDENTITY,
    describe_orientation,
    look_rotation,
    orientation_from_euler,
    quaternion_to_euler,
)
from .validation import (
    validate_finite,
    validate_non_negative,
    validate_positive,
    validate_quaternion,
    validate_timestep,
    validate_unit_interval,
    validate_vector3,
)

__all__ = [
    "IDENTITY",
    "orientation_from_euler",
    "look_rotation",
    "quaternion_to_euler",
    "describe_orientation",
    "validate_positive",
    "validate_non_negative",
    "validate_unit_interval",
    "validate_finite",
    "validate_vector3",
    "validate_quaternion",
    "validate_timestep",
]
