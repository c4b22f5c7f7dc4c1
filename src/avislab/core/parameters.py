"""
Designer-tunable parameters of a bird.

Parameters are fixed after spawn. They are validated on construction so a
broken tuning (zero mass, negative drag) fails where it is written, not as
NaNs several seconds into a flight.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

import numpy as np
from numpy.typing import NDArray

from avislab.dynamics.forces import STANDARD_GRAVITY
from avislab.models.aerodynamics.coefficients import (
    LIFT_TO_DRAG_SCALE,
    CoefficientModel,
    CurveType,
    create_coefficient_models,
)
from avislab.utils.validation import (
    validate_non_negative,
    validate_positive,
    validate_unit_interval,
)


@dataclass(frozen=True)
class BirdParameters:
    """
    Tuning of the bird flight model.

    Attributes
    ----------
    mass_kg : float
        Body mass [kg]. Must be positive.
    max_thrust_n : float
        Thrust at full thrust input [N]
    max_roll_rate_dps, max_pitch_rate_dps, max_yaw_rate_dps : float
        Rotation rates at full stick deflection [deg/s]
    body_drag_factors : tuple[float, float, float]
        Quadratic body drag per body axis (x, y, z) [-]. 0.1 is the body
        drag of a bird of this size; forward drag is usually tuned lower than
        sideways and vertical so the bird carves turns but coasts forward.
    drag_coefficient : float
        Flat drag coefficient [-]. Also sets the default lift coefficient
        (LIFT_TO_DRAG_SCALE times this value).
    rotate_into_wind_lerp_factor : float
        How fast the nose swings into the relative wind, per (m/s · s).
        Must lie in [0, 1].
    max_lift_n : float
        Upper bound on lift magnitude [N]. Defaults to 9.81.
    gravity : float
        Gravitational acceleration [m/s²]
    lift_curve, drag_curve : CoefficientModel | None
        Coefficient versus angle of attack. None selects the constant
        coefficients derived from `drag_coefficient`.

    Examples
    --------
    >>> params = BirdParameters(mass_kg=0.4, body_drag_factors=(0.5, 0.5, 0.05))
    >>> params.lift_coefficient(5.0)
    1.0
    """

    mass_kg: float = 1.0
    max_thrust_n: float = 10.0
    max_roll_rate_dps: float = 180.0
    max_pitch_rate_dps: float = 90.0
    max_yaw_rate_dps: float = 90.0
    body_drag_factors: tuple[float, float, float] = (0.1, 0.1, 0.1)
    drag_coefficient: float = 0.001
    rotate_into_wind_lerp_factor: float = 0.7
    max_lift_n: float = STANDARD_GRAVITY
    gravity: float = STANDARD_GRAVITY
    lift_curve: CoefficientModel | None = field(default=None, compare=False)
    drag_curve: CoefficientModel | None = field(default=None, compare=False)

    def __post_init__(self):
        validate_positive(self.mass_kg, "mass_kg")
        validate_non_negative(self.max_thrust_n, "max_thrust_n")
        validate_non_negative(self.max_roll_rate_dps, "max_roll_rate_dps")
        validate_non_negative(self.max_pitch_rate_dps, "max_pitch_rate_dps")
        validate_non_negative(self.max_yaw_rate_dps, "max_yaw_rate_dps")
        validate_non_negative(self.drag_coefficient, "drag_coefficient")
        validate_unit_interval(self.rotate_into_wind_lerp_factor, "rotate_into_wind_lerp_factor")
        validate_non_negative(self.max_lift_n, "max_lift_n")
        validate_non_negative(self.gravity, "gravity")

        factors = tuple(float(f) for f in self.body_drag_factors)
        if len(factors) != 3:
            raise ValueError(f"body_drag_factors must have 3 entries, got {len(factors)}")
        for axis, f in zip("xyz", factors):
            validate_non_negative(f, f"body_drag_factors[{axis}]")
        object.__setattr__(self, "body_drag_factors", factors)

    @property
    def body_drag(self) -> NDArray[np.float64]:
        """Body drag factors as an array (3,)."""
        return np.array(self.body_drag_factors, dtype=np.float64)

    def lift_coefficient(self, angle_of_attack_deg: float) -> float:
        """Lift coefficient at the given angle of attack [deg]."""
        if self.lift_curve is None:
            return LIFT_TO_DRAG_SCALE * self.drag_coefficient
        return float(self.lift_curve(angle_of_attack_deg))

    def induced_drag_coefficient(self, angle_of_attack_deg: float) -> float:
        """Lift-induced drag coefficient at the given angle of attack [deg]."""
        if self.drag_curve is None:
            return self.drag_coefficient
        return float(self.drag_curve(angle_of_attack_deg))

    def with_changes(self, **changes: Any) -> BirdParameters:
        """Copy with some fields replaced (validated again)."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BirdParameters:
        """
        Build parameters from plain data (e.g. parsed JSON).

        An optional ``"curves"`` key selects a coefficient curve family
        (``"constant"`` or ``"polynomial"``).

        Raises
        ------
        ValueError
            On unknown keys or invalid values
        """
        data = dict(data)
        curves = data.pop("curves", None)

        known = {f.name for f in fields(cls)} - {"lift_curve", "drag_curve"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown parameter(s): {sorted(unknown)}. Valid options: {sorted(known)}")

        if "body_drag_factors" in data:
            data["body_drag_factors"] = tuple(data["body_drag_factors"])

        if isinstance(curves, str):
            curves = CurveType(curves.lower())
        # Constant curves stay None so the lookup follows drag_coefficient
        if curves is not None and curves is not CurveType.CONSTANT:
            data["lift_curve"], data["drag_curve"] = create_coefficient_models(curves)

        return cls(**data)
