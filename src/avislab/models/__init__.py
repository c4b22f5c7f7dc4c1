"""
avislab physics models.

Models encapsulate the mathematics (coefficient curves); the force terms in
``avislab.dynamics.forces`` evaluate them each tick.
"""

from .aerodynamics import (
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
    "create_coefficient_models",
]
