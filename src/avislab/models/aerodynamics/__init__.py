"""
Aerodynamics models module.

Contains coefficient curves used by the flight model:
- Constant lift/drag coefficients (default tuning)
- Polynomial bird-wing fits versus angle of attack
"""

from .coefficients import (
    BIRD_DRAG_POLYNOMIAL,
    BIRD_LIFT_POLYNOMIAL,
    LIFT_TO_DRAG_SCALE,
    CoefficientModel,
    ConstantCoefficient,
    CurveType,
    PolynomialCoefficient,
    create_coefficient_models,
)

__all__ = [
    "CoefficientModel",
    "ConstantCoefficient",
    "PolynomialCoefficient",
    "CurveType",
    "BIRD_LIFT_POLYNOMIAL",
    "BIRD_DRAG_POLYNOMIAL",
    "LIFT_TO_DRAG_SCALE",
    "create_coefficient_models",
]
