"""
Verification Test Suite for avislab.

These tests compare integrated flights against analytical solutions of
the same force model.

Test Categories:
- Kinematic: Free fall, constant thrust, constant turn rate
- Aerodynamic: Quadratic drag deceleration, terminal forward speed

Because the integrator is explicit Euler with the position update using the
new velocity, discrete closed forms are exact up to round-off and
continuous solutions agree to first order in dt.
"""

import numpy as np
import pytest

from avislab.core.controls import NEUTRAL
from avislab.core.integrator import FlightIntegrator
from avislab.core.parameters import BirdParameters
from avislab.dynamics.vehicle import VehicleState


# -----------------------------------------------------------------------------
# Test Configuration
# -----------------------------------------------------------------------------

POSITION_TOLERANCE = 1e-9  # meters, discrete closed forms
VELOCITY_TOLERANCE = 1e-9  # m/s, discrete closed forms


# -----------------------------------------------------------------------------
# Common Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def ballistic_params():
    """No lift, no drag, no steering assist: gravity is the only force."""
    return BirdParameters(
        drag_coefficient=0.0,
        body_drag_factors=(0.0, 0.0, 0.0),
        rotate_into_wind_lerp_factor=0.0,
    )


@pytest.fixture
def weightless_params():
    """No gravity and no lift, so only thrust and drag act along the nose."""
    return BirdParameters(gravity=0.0, max_lift_n=0.0, rotate_into_wind_lerp_factor=0.0)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def _fly(params, state, duration, dt, controls=NEUTRAL):
    """Advance `state` with constant input and return it."""
    integrator = FlightIntegrator(params)
    n_steps = int(round(duration / dt))
    for _ in range(n_steps):
        integrator.advance(state, controls, dt)
    return state


def _hovering_state(altitude=100.0):
    """Bird at rest at the given altitude, level attitude."""
    return VehicleState.spawn(position=np.array([0.0, altitude, 0.0]), forward_speed=0.0)


def _relative_error(computed: float, analytical: float) -> float:
    """Compute relative error, handling zero case."""
    if abs(analytical) < 1e-12:
        return abs(computed - analytical)
    return abs(computed - analytical) / abs(analytical)


@pytest.fixture
def fly():
    """Constant-input flight runner: ``fly(params, state, duration, dt, controls)``."""
    return _fly


@pytest.fixture
def hovering_state():
    """Factory for a bird at rest: ``hovering_state(altitude)``."""
    return _hovering_state


@pytest.fixture
def relative_error():
    return _relative_error
