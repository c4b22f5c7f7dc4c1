"""
Bird simulation: owns one bird's state and advances it tick by tick.

Wraps the flight integrator with the host-facing pieces: animation and
overlay sinks, the reset button, trigger events, CSV logging with automatic
output organization, and an offline run loop.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path
from typing import Protocol

import numpy as np
from numpy.typing import NDArray

from avislab.core.collision import TriggerResponse
from avislab.core.controls import NEUTRAL, ControlInputs, ResetEdge
from avislab.core.integrator import FlightIntegrator, FlightStep
from avislab.core.parameters import BirdParameters
from avislab.dynamics.vehicle import SPAWN_FORWARD_SPEED, VehicleState
from avislab.logger import FlightLogger
from avislab.utils.orientation import describe_orientation
from avislab.utils.validation import validate_quaternion
from avislab.visualization.telemetry import TelemetrySnapshot, format_telemetry

# Outputs go to <output_dir>/<name>[_timestamp]/{logs,plots}
DEFAULT_OUTPUT_DIR = Path("output")
OUTPUT_SUBDIRS = ("logs", "plots")
LOG_FILENAME = "flight.csv"

# Animator parameter that receives forward speed every tick
SPEED_PARAMETER = "Speed m:s"

# Unity's default fixed timestep [s]
DEFAULT_DT = 0.02


class AnimationSink(Protocol):
    """Receives named float parameters (e.g. an animator)."""

    def set_float(self, name: str, value: float) -> None:
        ...


class OverlaySink(Protocol):
    """Displays up to four lines of debug text per tick."""

    def show(self, lines: Sequence[str]) -> None:
        ...


class BirdSimulation:
    """
    Single-bird flight simulation.

    Parameters
    ----------
    params : BirdParameters | None
        Tuning. Defaults to ``BirdParameters()``.
    name : str
        Bird name, used as CSV column prefix.
    position : NDArray[np.float64] | None
        Spawn position in world frame [m] (3,)
    orientation : NDArray[np.float64] | None
        Spawn orientation quaternion [x, y, z, w]
    forward_speed : float
        Spawn forward speed [m/s]
    animation_sink : AnimationSink | None
        Receives ``SPEED_PARAMETER`` after each tick.
    overlay_sink : OverlaySink | None
        Receives the telemetry lines after each tick.
    trigger_response : TriggerResponse | None
        Handler for trigger entries. Defaults to a 10 m upward bump.
    simulation_name : str | None
        If given, logging is enabled immediately under this name.
    output_dir : Path | str | None
        Base directory for outputs. Defaults to "./output".
    auto_timestamp : bool
        Append a timestamp to the output folder name.
    auto_save_plots : bool
        Generate plots after :meth:`run` when logging is enabled.

    Attributes
    ----------
    state : VehicleState
        Current bird state (owned exclusively by this simulation)
    t : float
        Simulated time [s]
    last_step : FlightStep | None
        Result of the most recent tick
    telemetry : TelemetrySnapshot | None
        Telemetry of the most recent tick
    logger : FlightLogger | None
        Data logger, or None if logging disabled

    Examples
    --------
    >>> sim = BirdSimulation()
    >>> step = sim.advance(0.02, ControlInputs(thrust=1.0, pitch=-0.2))
    >>> sim.telemetry.lines()[2]
    'Angle of attack [0.00]'
    """

    def __init__(
        self,
        params: BirdParameters | None = None,
        name: str = "bird",
        position: NDArray[np.float64] | None = None,
        orientation: NDArray[np.float64] | None = None,
        forward_speed: float = SPAWN_FORWARD_SPEED,
        animation_sink: AnimationSink | None = None,
        overlay_sink: OverlaySink | None = None,
        trigger_response: TriggerResponse | None = None,
        simulation_name: str | None = None,
        output_dir: Path | str | None = None,
        auto_timestamp: bool = True,
        auto_save_plots: bool = False,
    ) -> None:
        self.params = BirdParameters() if params is None else params
        self.name = name
        self.integrator = FlightIntegrator(self.params)
        self.animation_sink = animation_sink
        self.overlay_sink = overlay_sink
        self.trigger_response = TriggerResponse() if trigger_response is None else trigger_response

        if orientation is not None:
            validate_quaternion(orientation)
        self._spawn = VehicleState.spawn(position, orientation, forward_speed)
        self.state = self._spawn.copy()
        self.t = 0.0
        self.ticks = 0
        self.last_step: FlightStep | None = None
        self.telemetry: TelemetrySnapshot | None = None
        self.termination_callback: Callable[[BirdSimulation], bool] | None = None
        self._reset_edge = ResetEdge()

        # Output configuration
        self._simulation_name = simulation_name
        self._output_dir = Path(output_dir) if output_dir else DEFAULT_OUTPUT_DIR
        self._auto_timestamp = auto_timestamp
        self._auto_save_plots = auto_save_plots
        self.output_path: Path | None = None
        self.logger: FlightLogger | None = None

        if simulation_name is not None:
            self.enable_logging(simulation_name)

    @classmethod
    def with_logging(
        cls,
        name: str,
        params: BirdParameters | None = None,
        output_dir: Path | str | None = None,
        auto_save_plots: bool = True,
        **kwargs,
    ) -> BirdSimulation:
        """
        Convenience factory to create a simulation with logging pre-enabled.

        Extra keyword arguments are passed to the constructor.
        """
        return cls(
            params=params,
            simulation_name=name,
            output_dir=output_dir,
            auto_timestamp=True,
            auto_save_plots=auto_save_plots,
            **kwargs,
        )

    # --- Logging ---

    def enable_logging(self, name: str | None = None) -> Path:
        """
        Enable data logging with automatic output organization.

        Creates ``output_dir/<name>[_timestamp]/logs/flight.csv`` and a
        ``plots/`` sibling.

        Raises
        ------
        ValueError
            If no simulation name available
        """
        if name is not None:
            self._simulation_name = name

        if self._simulation_name is None:
            raise ValueError(
                "Simulation name required for logging: pass simulation_name "
                "to the constructor or a name to enable_logging()."
            )

        stamp = f"_{datetime.now():%Y%m%d_%H%M%S}" if self._auto_timestamp else ""
        self.output_path = self._output_dir / f"{self._simulation_name}{stamp}"
        for sub in OUTPUT_SUBDIRS:
            (self.output_path / sub).mkdir(parents=True, exist_ok=True)

        if self.logger is not None:
            self.logger.close()
        self.logger = FlightLogger(self.output_path / "logs" / LOG_FILENAME)

        print(f"[Simulation] Logging enabled: {self.output_path}")
        return self.output_path

    def disable_logging(self) -> None:
        """Disable logging and close any open log file."""
        if self.logger is not None:
            self.logger.close()
            self.logger = None
            print("[Simulation] Logging disabled")

    # --- Per-tick interface ---

    @property
    def forward_speed(self) -> float:
        """Current body-frame forward speed [m/s]."""
        return self.state.forward_speed

    def advance(self, dt: float, controls: ControlInputs = NEUTRAL) -> FlightStep:
        """
        Advance the bird by one fixed tick.

        Parameters
        ----------
        dt : float
            Tick length [s]
        controls : ControlInputs
            Pilot input sampled for this tick

        Returns
        -------
        FlightStep
            Result of the tick (also stored in ``last_step``)
        """
        step = self.integrator.advance(self.state, controls, dt)
        self.t += dt
        self.ticks += 1
        self.last_step = step

        if self.animation_sink is not None:
            self.animation_sink.set_float(SPEED_PARAMETER, step.forward_speed)

        self.telemetry = format_telemetry(step, self.state.transform)
        if self.overlay_sink is not None:
            self.overlay_sink.show(self.telemetry.lines())

        if self.logger is not None:
            self.logger.log(self)

        return step

    def poll_reset(self, pressed: bool) -> bool:
        """
        Feed the reset button state; resets on the press edge only.

        Returns
        -------
        bool
            True if a reset happened this call
        """
        if self._reset_edge.update(pressed):
            self.reset()
            return True
        return False

    def reset(self) -> None:
        """Restore the spawn state and clear per-run bookkeeping."""
        self.state = self._spawn.copy()
        self.t = 0.0
        self.ticks = 0
        self.last_step = None
        self.telemetry = None
        print(
            f"[Simulation] '{self.name}' reset to spawn at {self.state.transform.position} "
            f"({describe_orientation(self.state.transform.quaternion)})"
        )

    def on_trigger_enter(self, other: str = "") -> None:
        """Report that the bird entered a trigger volume named `other`."""
        self.trigger_response.respond(self.state.transform, other)

    # --- Offline runs ---

    def set_termination_callback(self, fn: Callable[[BirdSimulation], bool]) -> None:
        """
        Set custom termination condition, checked after every tick.

        Examples
        --------
        >>> sim.set_termination_callback(lambda s: s.state.transform.position[1] < 0.0)
        """
        self.termination_callback = fn

    def run(
        self,
        controller: Callable[[float], ControlInputs] | ControlInputs = NEUTRAL,
        duration: float = 10.0,
        dt: float = DEFAULT_DT,
        log_interval: float = 1.0,
    ) -> None:
        """
        Run fixed ticks for `duration` seconds.

        Parameters
        ----------
        controller : Callable[[float], ControlInputs] | ControlInputs
            Input per tick as a function of simulated time, or a constant sample.
        duration : float
            Simulated duration [s]
        dt : float
            Fixed tick length [s]. Must be positive.
        log_interval : float
            Interval [s] for printing progress. Set to <= 0 to disable.
        """
        if not dt > 0:
            raise ValueError(f"run() needs a positive timestep, got {dt}")

        if isinstance(controller, ControlInputs):
            constant = controller
            controller = lambda t: constant  # noqa: E731

        n_ticks = int(round(float(duration) / dt))
        last_log_time = self.t

        # Starting state, unless an earlier tick already logged it
        if self.logger is not None and self.logger.rows_logged == 0:
            self.logger.log(self)

        print(f"[Simulation] Starting run: {duration}s duration, dt={dt}s ({n_ticks} ticks)")

        try:
            for _ in range(n_ticks):
                self.advance(dt, controller(self.t))

                if self.termination_callback and self.termination_callback(self):
                    print(f"[Simulation] Terminated at t={self.t:.6f}s")
                    break

                if log_interval > 0 and (self.t - last_log_time) >= log_interval:
                    p = self.state.transform.position
                    print(
                        f"[Simulation] t={self.t:6.2f}s | alt={p[1]:8.2f}m, "
                        f"fwd={self.forward_speed:6.2f}m/s"
                    )
                    last_log_time = self.t
        finally:
            if self.logger:
                self.logger.flush()

            if self._auto_save_plots and self.logger is not None:
                print("[Simulation] Auto-generating plots...")
                self.save_plots()

    # --- Plotting ---

    def save_plots(self, show: bool = False) -> None:
        """
        Generate and save standard flight plots from logged data.

        Raises
        ------
        RuntimeError
            If logging is not enabled or nothing was logged yet
        """
        if self.logger is None or self.output_path is None:
            raise RuntimeError(
                "Logging must be enabled to save plots. "
                "Call enable_logging() or use BirdSimulation.with_logging()."
            )

        from avislab.visualization.plotting import (
            plot_angle_of_attack,
            plot_force_breakdown,
            plot_trajectory_3d,
            plot_velocity_and_acceleration,
        )

        csv_path = self.logger.filepath
        plots_dir = self.output_path / "plots"

        self.logger.flush()
        if not csv_path.exists():
            raise RuntimeError(
                f"No log file found at {csv_path}. "
                "Has the simulation been run yet?"
            )

        plot_trajectory_3d(str(csv_path), self.name,
                           save_path=str(plots_dir / f"{self.name}_trajectory_3d.png"), show=show)
        plot_velocity_and_acceleration(str(csv_path), self.name,
                                       save_path=str(plots_dir / f"{self.name}_velocity_acceleration.png"),
                                       show=show, magnitude=False)
        plot_force_breakdown(str(csv_path), self.name,
                             save_path=str(plots_dir / f"{self.name}_force_breakdown.png"), show=show)
        plot_angle_of_attack(str(csv_path), self.name,
                             save_path=str(plots_dir / f"{self.name}_angle_of_attack.png"), show=show)

        print(f"[Simulation] Plots saved to: {plots_dir}")

    def history_row(self) -> dict[str, float]:
        """Flat snapshot of the current state, for :func:`avislab.utils.io.save_flight_history`."""
        p = self.state.transform.position
        v = self.state.local_velocity
        pitch, heading, roll = self.state.transform.euler_angles()
        return {
            "t": self.t,
            "x": float(p[0]), "y": float(p[1]), "z": float(p[2]),
            "v_x": float(v[0]), "v_y": float(v[1]), "v_z": float(v[2]),
            "pitch": pitch, "heading": heading, "roll": roll,
            "aoa": 0.0 if self.last_step is None else self.last_step.angle_of_attack_deg,
        }
