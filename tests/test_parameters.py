import math

import numpy as np
import pytest

from avislab.core.controls import NEUTRAL, ControlInputs, ResetEdge
from avislab.core.parameters import BirdParameters
from avislab.models.aerodynamics import PolynomialCoefficient


class TestBirdParameters:

    def test_defaults(self, default_params):
        p = default_params
        assert p.mass_kg == 1.0
        assert p.max_thrust_n == 10.0
        assert p.max_roll_rate_dps == 180.0
        assert p.max_pitch_rate_dps == 90.0
        assert p.max_yaw_rate_dps == 90.0
        assert np.allclose(p.body_drag, [0.1, 0.1, 0.1])
        assert p.rotate_into_wind_lerp_factor == 0.7
        assert p.max_lift_n == pytest.approx(9.81)

    def test_constant_coefficients(self, default_params):
        # Lift coefficient is 1000x the drag coefficient
        assert default_params.lift_coefficient(12.0) == pytest.approx(1.0)
        assert default_params.induced_drag_coefficient(12.0) == pytest.approx(0.001)

    @pytest.mark.parametrize("field,value", [
        ("mass_kg", 0.0),
        ("mass_kg", -1.0),
        ("max_thrust_n", -5.0),
        ("drag_coefficient", -0.001),
        ("rotate_into_wind_lerp_factor", 1.5),
        ("gravity", math.nan),
    ])
    def test_invalid_values_raise(self, field, value):
        with pytest.raises(ValueError):
            BirdParameters(**{field: value})

    def test_body_drag_needs_three_axes(self):
        with pytest.raises(ValueError, match="3 entries"):
            BirdParameters(body_drag_factors=(0.1, 0.1))

    def test_body_drag_factors_are_tuple(self):
        p = BirdParameters(body_drag_factors=[0.5, 0.5, 0.05])
        assert p.body_drag_factors == (0.5, 0.5, 0.05)

    def test_frozen(self, default_params):
        with pytest.raises(AttributeError):
            default_params.mass_kg = 2.0

    def test_with_changes_revalidates(self, default_params):
        heavier = default_params.with_changes(mass_kg=2.5)
        assert heavier.mass_kg == 2.5
        assert default_params.mass_kg == 1.0
        with pytest.raises(ValueError):
            default_params.with_changes(mass_kg=0.0)

    def test_from_dict(self):
        p = BirdParameters.from_dict({"mass_kg": 0.4, "body_drag_factors": [0.5, 0.5, 0.05]})
        assert p.mass_kg == 0.4
        assert p.body_drag_factors == (0.5, 0.5, 0.05)

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="wingspan"):
            BirdParameters.from_dict({"wingspan": 1.2})

    def test_from_dict_polynomial_curves(self):
        p = BirdParameters.from_dict({"curves": "polynomial"})
        assert isinstance(p.lift_curve, PolynomialCoefficient)
        # Curve lift at 9 degrees is close to the 1.49 sample peak
        assert p.lift_coefficient(9.0) == pytest.approx(1.49, abs=0.05)

    def test_constant_curves_follow_drag_coefficient(self):
        p = BirdParameters.from_dict({"curves": "constant"})
        assert p.lift_curve is None and p.drag_curve is None

        retuned = p.with_changes(drag_coefficient=0.002)
        assert retuned.lift_coefficient(0.0) == pytest.approx(2.0)
        assert retuned.induced_drag_coefficient(0.0) == pytest.approx(0.002)

    def test_from_dict_unknown_curve_family(self):
        with pytest.raises(ValueError):
            BirdParameters.from_dict({"curves": "spline"})


class TestControlInputs:

    def test_neutral(self):
        assert NEUTRAL == ControlInputs(0.0, 0.0, 0.0, 0.0, 0.0)
        assert NEUTRAL.net_thrust == 0.0

    def test_net_thrust(self):
        assert ControlInputs(thrust=0.75, brake=0.25).net_thrust == pytest.approx(0.5)

    def test_clamped(self):
        c = ControlInputs(thrust=2.0, brake=-1.0, roll=-3.0, pitch=0.4, yaw=7.0).clamped()
        assert c == ControlInputs(thrust=1.0, brake=0.0, roll=-1.0, pitch=0.4, yaw=1.0)

    def test_non_finite_raises(self):
        with pytest.raises(ValueError, match="pitch"):
            ControlInputs(pitch=math.nan)
        with pytest.raises(ValueError, match="thrust"):
            ControlInputs(thrust=math.inf)


def test_reset_edge_fires_once_per_press():
    edge = ResetEdge()
    presses = [False, True, True, True, False, True, False]
    fired = [edge.update(p) for p in presses]
    assert fired == [False, True, False, False, False, True, False]
