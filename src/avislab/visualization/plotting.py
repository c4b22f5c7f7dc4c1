"""
matplotlib plots of a flight log written by :class:`avislab.logger.FlightLogger`.

Every function takes the CSV path and the bird name used as column prefix,
and returns the figure so callers can tweak it further.
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  (registers 3D projection)

from avislab.dynamics.forces import ForceBreakdown

FORCE_COLORS = {
    "thrust": "#1a73e8",
    "lift": "#34a853",
    "gravity": "#5f6368",
    "body_drag": "#fbbc05",
    "induced_drag": "#ea4335",
}


def _load_log(filepath: str) -> tuple[np.ndarray, pd.DataFrame]:
    """
    Read a flight log.

    Returns
    -------
    t : (N,) array
        Time vector.
    log : pd.DataFrame
        All logged columns, one row per logged tick.
    """
    log = pd.read_csv(filepath)
    if log.columns[0] != "t":
        raise ValueError(f"First column must be time 't', got '{log.columns[0]}'.")
    return log["t"].to_numpy(dtype=float), log


def _columns(log: pd.DataFrame, names: Iterable[str]) -> list[np.ndarray]:
    names = list(names)
    missing = [n for n in names if n not in log.columns]
    if missing:
        raise KeyError(f"Column(s) {missing} not found in CSV.")
    return [log[n].to_numpy(dtype=float) for n in names]


def _finish(fig: Figure, save_path: str | None, show: bool) -> Figure:
    fig.tight_layout()
    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=180, bbox_inches="tight")
    if show:
        plt.show()
    return fig


def plot_trajectory_3d(
    csv_path: str,
    bird_name: str,
    save_path: str | None = None,
    show: bool = True,
) -> Figure:
    """
    Plot the 3D flight path of a bird and its altitude over time.

    The world frame is y-up, so the 3D axes show (x, z, y) to keep altitude
    vertical on screen.

    Parameters
    ----------
    csv_path : str
        Path to logger CSV.
    bird_name : str
        Simulation name used as column prefix (e.g., 'bird').
    save_path : str | None
        If given, save the figure to this path (png/svg).
    show : bool
        Whether to call plt.show().

    Returns
    -------
    fig : Figure
    """
    t, log = _load_log(csv_path)
    px, py, pz = _columns(log, [f"{bird_name}.p_{a}" for a in "xyz"])

    fig = plt.figure(figsize=(10, 6))
    gs = fig.add_gridspec(2, 2, height_ratios=[2.0, 1.0])
    ax3d = fig.add_subplot(gs[0, :], projection="3d")
    axy = fig.add_subplot(gs[1, :])

    ax3d.plot(px, pz, py, lw=2.0, color="#1a73e8")
    ax3d.scatter(px[0], pz[0], py[0], color="#34a853", s=40, label="start")
    ax3d.scatter(px[-1], pz[-1], py[-1], color="#ea4335", s=40, label="end")
    ax3d.set_xlabel("x [m]"); ax3d.set_ylabel("z [m]"); ax3d.set_zlabel("altitude y [m]")
    ax3d.set_title(f"3D flight path - {bird_name}")
    ax3d.legend(loc="best")

    axy.plot(t, py, color="#1a73e8", lw=2)
    axy.set_xlabel("t [s]"); axy.set_ylabel("y [m]")
    axy.grid(True, alpha=0.3)
    axy.set_title("Altitude vs time")

    return _finish(fig, save_path, show)


def plot_velocity_and_acceleration(
    csv_path: str,
    bird_name: str,
    save_path: str | None = None,
    show: bool = True,
    magnitude: bool = True,
) -> Figure:
    """
    Plot body-frame velocity and acceleration components (and magnitudes).

    Parameters
    ----------
    csv_path : str
    bird_name : str
    save_path : str | None
    show : bool
    magnitude : bool
        Also draw |v| and |a|.

    Returns
    -------
    fig : Figure
    """
    t, log = _load_log(csv_path)
    V = np.column_stack(_columns(log, [f"{bird_name}.v_{a}" for a in "xyz"]))
    A = np.column_stack(_columns(log, [f"{bird_name}.a_{a}" for a in "xyz"]))

    fig, axes = plt.subplots(2, 1, figsize=(10, 7), sharex=True)

    for k, (axis, color) in enumerate(zip("xyz", ["#1a73e8", "#34a853", "#fbbc05"])):
        axes[0].plot(t, V[:, k], label=f"v_{axis}", color=color)
        axes[1].plot(t, A[:, k], label=f"a_{axis}", color=color)
    if magnitude:
        axes[0].plot(t, np.linalg.norm(V, axis=1), label="|v|", color="#ea4335", lw=2.0, alpha=0.8)
        axes[1].plot(t, np.linalg.norm(A, axis=1), label="|a|", color="#ea4335", lw=2.0, alpha=0.8)

    axes[0].set_ylabel("velocity [m/s]")
    axes[0].set_title(f"Body-frame velocity - {bird_name}")
    axes[1].set_xlabel("t [s]"); axes[1].set_ylabel("accel [m/s²]")
    axes[1].set_title("Body-frame acceleration")
    for ax in axes:
        ax.grid(True, alpha=0.3)
        ax.legend(loc="best")

    return _finish(fig, save_path, show)


def plot_force_breakdown(
    csv_path: str,
    bird_name: str,
    save_path: str | None = None,
    show: bool = True,
) -> Figure:
    """
    Plot each body-frame force term, one subplot per axis.

    Returns
    -------
    fig : Figure
    """
    t, log = _load_log(csv_path)

    fig, axes = plt.subplots(3, 1, figsize=(10, 8), sharex=True)
    for k, axis in enumerate("xyz"):
        for term in ForceBreakdown.TERMS:
            (series,) = _columns(log, [f"{bird_name}.F_{term}_{axis}"])
            axes[k].plot(t, series, label=term, color=FORCE_COLORS[term])
        axes[k].set_ylabel(f"F_{axis} [N]")
        axes[k].grid(True, alpha=0.3)
    axes[0].legend(loc="best", ncol=len(ForceBreakdown.TERMS))
    axes[0].set_title(f"Force breakdown (body frame) - {bird_name}")
    axes[-1].set_xlabel("t [s]")

    return _finish(fig, save_path, show)


def plot_angle_of_attack(
    csv_path: str,
    bird_name: str,
    save_path: str | None = None,
    show: bool = True,
) -> Figure:
    """Plot angle of attack and forward speed over time."""
    t, log = _load_log(csv_path)
    aoa, vz = _columns(log, [f"{bird_name}.aoa", f"{bird_name}.v_z"])

    fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    ax.plot(t, aoa, color="#1a73e8", label="angle of attack")
    ax.set_xlabel("t [s]"); ax.set_ylabel("AoA [deg]")
    ax.grid(True, alpha=0.3)
    ax2 = ax.twinx()
    ax2.plot(t, vz, color="#ea4335", alpha=0.8, label="forward speed")
    ax2.set_ylabel("forward speed [m/s]")
    ax.set_title(f"Angle of attack - {bird_name}")

    return _finish(fig, save_path, show)
