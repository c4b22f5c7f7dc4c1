
"""
Scenario API: Fluent interface for defining and running bird flights.
"""
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np

from avislab.core.controls import NEUTRAL, ControlInputs
from avislab.core.parameters import BirdParameters
from avislab.core.simulation import DEFAULT_DT, BirdSimulation
from avislab.dynamics.vehicle import SPAWN_FORWARD_SPEED
from avislab.utils.orientation import orientation_from_euler

TIMESTEP_PRESETS = {
    "default": DEFAULT_DT,   # engine default fixed step
    "fine": 1.0 / 120.0,
    "coarse": 1.0 / 30.0,
}


class FlightScenario:
    """
    Build and run a single-bird flight.

    Examples
    --------
    >>> (FlightScenario("banking_turn")
    ...     .configure(body_drag_factors=(0.5, 0.5, 0.05))
    ...     .set_initial_state(altitude=50.0, heading=90.0)
    ...     .set_controls(ControlInputs(thrust=0.6, roll=0.3))
    ...     .run(duration=20.0))
    """

    def __init__(self, name: str, output_dir: str = "output", logging: bool = True):
        self.name = name
        self._output_dir = Path(output_dir)
        self._logging = logging
        self._params = BirdParameters()
        self._position = np.zeros(3)
        self._euler = (0.0, 0.0, 0.0)  # pitch, heading, roll [deg]
        self._forward_speed = SPAWN_FORWARD_SPEED
        self._controller: Callable[[float], ControlInputs] | ControlInputs = NEUTRAL
        self._dt = TIMESTEP_PRESETS["default"]
        self._show_plots = False
        self._save_plots = False
        self.simulation: BirdSimulation | None = None

    def configure(self, params: BirdParameters | None = None, **overrides) -> 'FlightScenario':
        """
        Set tuning parameters, either a full BirdParameters or field overrides.
        """
        if params is not None:
            self._params = params
        if overrides:
            self._params = self._params.with_changes(**overrides)
        return self

    def set_initial_state(
        self,
        altitude: float | None = None,
        position: list[float] | None = None,
        pitch: float = 0.0,
        heading: float = 0.0,
        roll: float = 0.0,
        forward_speed: float | None = None,
    ) -> 'FlightScenario':
        """
        Set the spawn state.

        `altitude` overrides the y component of `position`. Angles are
        engine-style Euler angles in degrees.
        """
        if position is not None:
            self._position = np.array(position, dtype=float)
        if altitude is not None:
            self._position[1] = float(altitude)
        self._euler = (float(pitch), float(heading), float(roll))
        if forward_speed is not None:
            self._forward_speed = float(forward_speed)
        return self

    def set_controls(
        self,
        controller: Callable[[float], ControlInputs] | ControlInputs,
    ) -> 'FlightScenario':
        """Constant input, or a function of simulated time returning input."""
        self._controller = controller
        return self

    def configure_timestep(self, preset: str = "default", dt: float | None = None) -> 'FlightScenario':
        """
        Choose the fixed tick length.

        Presets: 'default' (0.02 s), 'fine' (1/120 s), 'coarse' (1/30 s).
        An explicit `dt` wins over the preset.
        """
        if dt is not None:
            self._dt = float(dt)
        elif preset in TIMESTEP_PRESETS:
            self._dt = TIMESTEP_PRESETS[preset]
        else:
            raise ValueError(f"Unknown timestep preset '{preset}'. Options: {list(TIMESTEP_PRESETS)}")
        return self

    def enable_plotting(self, show: bool = False) -> 'FlightScenario':
        """
        Save plots at the end of the run.

        Parameters
        ----------
        show : bool
            If True, also display plots interactively.
        """
        self._save_plots = True
        self._show_plots = show
        return self

    def build(self) -> BirdSimulation:
        """Create the simulation without running it."""
        pitch, heading, roll = self._euler
        orientation = orientation_from_euler(pitch=pitch, heading=heading, roll=roll)
        if self._logging:
            sim = BirdSimulation.with_logging(
                name=self.name,
                params=self._params,
                output_dir=self._output_dir,
                auto_save_plots=False,  # handled in run()
                position=self._position,
                orientation=orientation,
                forward_speed=self._forward_speed,
            )
        else:
            sim = BirdSimulation(
                params=self._params,
                position=self._position,
                orientation=orientation,
                forward_speed=self._forward_speed,
            )
        self.simulation = sim
        return sim

    def run(self, duration: float = 10.0, log_interval: float = 1.0) -> BirdSimulation:
        print(f"Running Scenario: {self.name}")
        sim = self.build()
        sim.run(self._controller, duration=duration, dt=self._dt, log_interval=log_interval)

        if self._save_plots and sim.logger is not None:
            print("[Scenario] Generating plots...")
            sim.save_plots(show=self._show_plots)

        return sim
