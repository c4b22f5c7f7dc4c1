import numpy as np
import pytest

from avislab.core.integrator import FlightStep
from avislab.dynamics.forces import ForceBreakdown
from avislab.dynamics.frame import Transform
from avislab.utils.orientation import orientation_from_euler
from avislab.visualization.telemetry import (
    TelemetrySnapshot,
    _whole,
    angle_360_to_plus_minus_180,
    format_telemetry,
)


def make_step(velocity=(0.0, 0.0, 10.0), acceleration=(0.0, 0.0, -0.1), aoa=0.0):
    return FlightStep(
        local_velocity=np.array(velocity),
        local_acceleration=np.array(acceleration),
        forces=ForceBreakdown(),
        angle_of_attack_deg=aoa,
        dt=0.02,
    )


@pytest.mark.parametrize("angle,expected", [
    (0.0, 0.0),
    (90.0, 90.0),
    (180.0, 180.0),
    (180.5, -179.5),
    (270.0, -90.0),
    (359.0, -1.0),
])
def test_angle_360_to_plus_minus_180(angle, expected):
    assert angle_360_to_plus_minus_180(angle) == pytest.approx(expected)


def test_level_flight_lines():
    snap = format_telemetry(make_step(), Transform())
    assert snap.lines() == (
        "Accel[(0.0, 0.0, -0.1)=0.10 m/s²]",
        "Speed[(0.0, 0.0, 36.0)=36.00 km/h], F.Speed[36.00 km/h]",
        "Angle of attack [0.00]",
        "Pitch[0], Roll[0], Heading[0]",
    )


def test_speed_line_uses_full_vector_and_forward_component():
    step = make_step(velocity=(3.0, 0.0, 4.0))
    snap = format_telemetry(step, Transform())
    assert snap.speed == "Speed[(10.8, 0.0, 14.4)=18.00 km/h], F.Speed[14.40 km/h]"


def test_angle_of_attack_two_decimals():
    snap = format_telemetry(make_step(aoa=12.3456), Transform())
    assert snap.angle_of_attack == "Angle of attack [12.35]"


def test_attitude_is_signed_whole_degrees():
    t = Transform(orientation=orientation_from_euler(pitch=-10.0, heading=-90.0, roll=30.0))
    snap = format_telemetry(make_step(), t)
    assert snap.attitude == "Pitch[-10], Roll[30], Heading[-90]"


def test_formatter_is_pure():
    step = make_step(velocity=(1.0, -2.0, 8.0), acceleration=(0.5, -9.0, 0.2), aoa=14.0)
    t = Transform(orientation=orientation_from_euler(heading=45.0))
    first = format_telemetry(step, t)
    second = format_telemetry(step, t)
    assert first == second
    assert isinstance(first, TelemetrySnapshot)
    assert len(first.lines()) == 4


@pytest.mark.parametrize("angle, expected", [
    (0.5, 1), (-0.5, -1), (2.5, 3), (-2.5, -3), (0.49, 0), (-0.2, 0), (179.6, 180),
])
def test_whole_degrees_round_half_away_from_zero(angle, expected):
    assert _whole(angle) == expected
