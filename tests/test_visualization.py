"""
Tests for the plotting module.

Covers:
- All plot types (trajectory, kinematics, forces, angle of attack)
- Saving to disk
- Error handling for missing columns
"""
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for testing
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest
from matplotlib.figure import Figure

from avislab.dynamics.forces import ForceBreakdown
from avislab.visualization import plotting


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def dummy_csv(tmp_path):
    """Create a logger-shaped CSV for a bird circling at constant altitude."""
    fn = tmp_path / "flight.csv"
    t = np.linspace(0, 10, 100)
    data = {
        "t": t,
        "bird.p_x": 20 * np.sin(t),
        "bird.p_y": 50 + 0.1 * t,
        "bird.p_z": 20 * np.cos(t),
        "bird.v_x": np.zeros_like(t),
        "bird.v_y": 0.1 * np.ones_like(t),
        "bird.v_z": 10 * np.ones_like(t),
        "bird.a_x": -5 * np.ones_like(t),
        "bird.a_y": np.zeros_like(t),
        "bird.a_z": np.zeros_like(t),
        "bird.aoa": np.sin(t) * 5,
    }
    for term in ForceBreakdown.TERMS:
        for axis in "xyz":
            data[f"bird.F_{term}_{axis}"] = np.random.randn(len(t))
    pd.DataFrame(data).to_csv(fn, index=False)
    return str(fn)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


# =============================================================================
# Tests
# =============================================================================

@pytest.mark.parametrize("plot_fn", [
    plotting.plot_trajectory_3d,
    plotting.plot_velocity_and_acceleration,
    plotting.plot_force_breakdown,
    plotting.plot_angle_of_attack,
])
def test_plot_returns_figure(dummy_csv, plot_fn):
    fig = plot_fn(dummy_csv, "bird", show=False)
    assert isinstance(fig, Figure)


def test_plot_saves_file(dummy_csv, tmp_path):
    out = tmp_path / "plots" / "trajectory.png"
    plotting.plot_trajectory_3d(dummy_csv, "bird", save_path=str(out), show=False)
    assert out.exists()


def test_force_breakdown_has_axis_subplots(dummy_csv):
    fig = plotting.plot_force_breakdown(dummy_csv, "bird", show=False)
    assert len(fig.axes) == 3
    assert len(fig.axes[0].get_lines()) == len(ForceBreakdown.TERMS)


def test_velocity_magnitude_toggle(dummy_csv):
    with_mag = plotting.plot_velocity_and_acceleration(dummy_csv, "bird", show=False)
    without = plotting.plot_velocity_and_acceleration(dummy_csv, "bird", show=False, magnitude=False)
    assert len(with_mag.axes[0].get_lines()) == 4
    assert len(without.axes[0].get_lines()) == 3


def test_missing_bird_raises(dummy_csv):
    with pytest.raises(KeyError, match="not found"):
        plotting.plot_trajectory_3d(dummy_csv, "eagle", show=False)


def test_first_column_must_be_time(tmp_path):
    fn = tmp_path / "bad.csv"
    pd.DataFrame({"x": [1.0, 2.0], "bird.p_x": [0.0, 1.0]}).to_csv(fn, index=False)
    with pytest.raises(ValueError, match="First column"):
        plotting.plot_angle_of_attack(str(fn), "bird", show=False)
