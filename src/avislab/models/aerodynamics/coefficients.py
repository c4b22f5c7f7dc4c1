"""
Lift and drag coefficient curves as functions of angle of attack.

The flight model looks coefficients up through a small callable interface so
that the tuning can move from flat constants to measured curves without
touching the integrator.

Models implemented:
- CONSTANT: flat coefficient, independent of angle of attack (active tuning)
- POLYNOMIAL: cubic fit of bird wing data versus angle of attack [deg]

The polynomial fits come from regressing sampled points of published lift and
drag curves for a bird wing:

    lift:  (-4, 0.15) (0, 0.9) (4, 1.3) (8, 1.48) (9, 1.49) (10, 1.48) (14, 1.3)
    drag:  (-2, 0.18) (0, 0.19) (4, 0.25) (8, 0.35) (10, 0.42) (12, 0.6) (14, 1.1)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import numpy as np

# With the constant tuning, lift coefficient = LIFT_TO_DRAG_SCALE * drag coefficient
LIFT_TO_DRAG_SCALE = 1000.0


class CoefficientModel(Protocol):
    """Protocol for a dimensionless coefficient as a function of angle of attack."""

    def __call__(self, angle_of_attack_deg: float) -> float:
        """
        Evaluate the coefficient.

        Parameters
        ----------
        angle_of_attack_deg : float
            Angle of attack [deg]. Positive when the bird is sinking.
        """
        ...


class CurveType(Enum):
    """Available coefficient curve families."""

    CONSTANT = "constant"
    POLYNOMIAL = "polynomial"


@dataclass(frozen=True)
class ConstantCoefficient:
    """Coefficient that ignores angle of attack."""

    value: float

    def __call__(self, angle_of_attack_deg: float) -> float:
        return float(self.value)


@dataclass(frozen=True)
class PolynomialCoefficient:
    """
    Polynomial coefficient curve.

    Attributes
    ----------
    coefficients : tuple[float, ...]
        Polynomial coefficients, highest power first (``numpy.polyval`` order).
    """

    coefficients: tuple[float, ...]

    def __post_init__(self):
        if len(self.coefficients) == 0:
            raise ValueError("Polynomial needs at least one coefficient")
        object.__setattr__(self, "coefficients", tuple(float(c) for c in self.coefficients))

    def __call__(self, angle_of_attack_deg: float) -> float:
        return float(np.polyval(self.coefficients, angle_of_attack_deg))


BIRD_LIFT_POLYNOMIAL = PolynomialCoefficient((
    8.887064785e-5, -9.398102638e-3, 1.439482893e-1, 8.857717866e-1,
))
"""Cubic fit of bird lift coefficient versus angle of attack [deg]."""

BIRD_DRAG_POLYNOMIAL = PolynomialCoefficient((
    7.279089406e-4, -7.467534083e-3, 2.119913811e-2, 2.330367864e-1,
))
"""Cubic fit of bird drag coefficient versus angle of attack [deg]."""


def create_coefficient_models(
    curve_type: CurveType | str = CurveType.CONSTANT,
    drag_coefficient: float = 0.001,
) -> tuple[CoefficientModel, CoefficientModel]:
    """
    Factory for a (lift, drag) coefficient pair.

    Parameters
    ----------
    curve_type : CurveType | str
        Curve family. Strings are matched against ``CurveType`` values.
    drag_coefficient : float
        Flat drag coefficient used by the CONSTANT family. Lift is
        ``LIFT_TO_DRAG_SCALE * drag_coefficient``.

    Returns
    -------
    tuple[CoefficientModel, CoefficientModel]
        (lift_curve, drag_curve)

    Examples
    --------
    >>> lift, drag = create_coefficient_models("polynomial")
    >>> round(lift(9.0), 2)
    1.48
    """
    if isinstance(curve_type, str):
        curve_type = CurveType(curve_type.lower())

    if curve_type is CurveType.CONSTANT:
        return (
            ConstantCoefficient(LIFT_TO_DRAG_SCALE * drag_coefficient),
            ConstantCoefficient(drag_coefficient),
        )
    if curve_type is CurveType.POLYNOMIAL:
        return BIRD_LIFT_POLYNOMIAL, BIRD_DRAG_POLYNOMIAL

    raise ValueError(f"Unknown curve type: {curve_type}")
