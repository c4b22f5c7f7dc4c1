import os
import sys

import matplotlib

# Get the path to the project root (one level up from 'tests')
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, 'src')

# Add 'src' to sys.path
sys.path.insert(0, src_path)

# Non-interactive backend so plot tests never open windows
matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from avislab.core.parameters import BirdParameters  # noqa: E402
from avislab.core.simulation import BirdSimulation  # noqa: E402


@pytest.fixture
def default_params():
    """Default bird tuning (1 kg, 10 N thrust, body drag 0.1 on all axes)."""
    return BirdParameters()


@pytest.fixture
def no_wind_assist_params():
    """Default tuning without the rotate-into-wind assist, so attitude only follows input."""
    return BirdParameters(rotate_into_wind_lerp_factor=0.0)


@pytest.fixture
def sim(default_params):
    """Simulation spawned at the origin flying +z at 10 m/s."""
    return BirdSimulation(params=default_params)


class RecordingSink:
    """Collects animation parameters and overlay lines pushed by a simulation."""

    def __init__(self):
        self.floats: list[tuple[str, float]] = []
        self.shown: list[tuple[str, ...]] = []

    def set_float(self, name, value):
        self.floats.append((name, value))

    def show(self, lines):
        self.shown.append(tuple(lines))


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def level_state():
    """Spawn state as plain arrays: origin, identity attitude, 10 m/s forward."""
    return {
        "position": np.zeros(3),
        "orientation": np.array([0.0, 0.0, 0.0, 1.0]),
        "velocity": np.array([0.0, 0.0, 10.0]),
    }
