"""
Fixed-step flight integrator for a bird-like body.

One call to :meth:`FlightIntegrator.advance` moves a :class:`VehicleState`
forward by exactly one tick. The force model works entirely in the body
frame; only the displacement and orientation touch the world frame.

Per-tick order
--------------
1. Signed squared velocity for quadratic drag
2. Swing the nose toward the relative wind (steering assist)
3. Angle of attack from the pre-tick velocity
4. Accumulate thrust, lift, gravity, body drag and induced drag
5. Explicit Euler velocity update
6. Rotate by the pilot's pitch/yaw/roll input
7. Translate by the new velocity in world frame
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from avislab.core.controls import ControlInputs
from avislab.core.parameters import BirdParameters
from avislab.dynamics.forces import (
    ForceBreakdown,
    angle_of_attack_deg,
    body_drag_force,
    gravity_force,
    induced_drag_force,
    lift_force,
    signed_square,
    thrust_force,
)
from avislab.dynamics.vehicle import VehicleState
from avislab.utils.validation import validate_timestep


@dataclass(frozen=True)
class FlightStep:
    """
    Outcome of one integrator tick.

    Attributes
    ----------
    local_velocity : NDArray[np.float64]
        Body-frame velocity after the tick [m/s] (3,)
    local_acceleration : NDArray[np.float64]
        Body-frame acceleration used for the tick [m/s²] (3,)
    forces : ForceBreakdown
        Individual body-frame forces [N]
    angle_of_attack_deg : float
        Angle of attack evaluated from the pre-tick velocity [deg]
    dt : float
        Tick length [s]
    """
    local_velocity: NDArray[np.float64]
    local_acceleration: NDArray[np.float64]
    forces: ForceBreakdown
    angle_of_attack_deg: float
    dt: float

    @property
    def forward_speed(self) -> float:
        """New body-frame forward speed [m/s]."""
        return float(self.local_velocity[2])


class FlightIntegrator:
    """
    Explicit-Euler force integrator with a rotate-into-wind assist.

    Parameters
    ----------
    params : BirdParameters
        Tuning of the bird

    Examples
    --------
    >>> integrator = FlightIntegrator(BirdParameters())
    >>> state = VehicleState.spawn()
    >>> step = integrator.advance(state, ControlInputs(thrust=1.0), dt=0.02)
    >>> step.forward_speed < 10.0
    True
    """

    def __init__(self, params: BirdParameters | None = None) -> None:
        self.params = BirdParameters() if params is None else params

    def rotate_into_wind(self, state: VehicleState, dt: float) -> None:
        """
        Slerp the orientation toward the relative wind.

        The target points the nose along the world velocity while keeping the
        current up axis as reference. The slerp fraction grows with airspeed:
        ``rotate_into_wind_lerp_factor * |v| * dt``, clamped to [0, 1].
        Nothing happens when the target is undefined (no velocity, or
        velocity straight along the up axis).
        """
        fraction = self.params.rotate_into_wind_lerp_factor * state.airspeed * dt
        if fraction <= 0.0:
            return

        transform = state.transform
        target = transform.look_target(transform.transform_vector(state.local_velocity))
        if target is None:
            return
        transform.slerp_toward(target, fraction)

    def compute_forces(
        self,
        state: VehicleState,
        controls: ControlInputs,
        angle_of_attack: float,
    ) -> ForceBreakdown:
        """
        Body-frame forces for the current velocity and orientation [N].

        Gravity is rotated into the body frame using the orientation as it
        stands when this is called.
        """
        p = self.params
        v = state.local_velocity
        forward_speed = float(v[2])

        return ForceBreakdown(
            thrust=thrust_force(controls.thrust, controls.brake, p.max_thrust_n),
            lift=lift_force(forward_speed, p.lift_coefficient(angle_of_attack), p.max_lift_n),
            gravity=gravity_force(state.transform, p.mass_kg, p.gravity),
            body_drag=body_drag_force(signed_square(v), p.body_drag),
            induced_drag=induced_drag_force(forward_speed, p.induced_drag_coefficient(angle_of_attack)),
        )

    def advance(self, state: VehicleState, controls: ControlInputs, dt: float) -> FlightStep:
        """
        Advance `state` in place by one tick.

        Parameters
        ----------
        state : VehicleState
            Bird state. Velocity, position and orientation are updated.
        controls : ControlInputs
            Pilot input for this tick
        dt : float
            Fixed tick length [s]. Zero gives an identity tick.

        Returns
        -------
        FlightStep
            New velocity, acceleration and force breakdown

        Raises
        ------
        ValueError
            If `dt` is negative or not finite
        """
        validate_timestep(dt)
        p = self.params
        prev_velocity = state.local_velocity.copy()

        self.rotate_into_wind(state, dt)

        aoa = angle_of_attack_deg(prev_velocity)
        forces = self.compute_forces(state, controls, aoa)
        accel = forces.total / p.mass_kg

        new_velocity = prev_velocity + accel * dt

        pitch_delta = controls.pitch * p.max_pitch_rate_dps * dt
        yaw_delta = controls.yaw * p.max_yaw_rate_dps * dt
        roll_delta = -controls.roll * p.max_roll_rate_dps * dt
        state.transform.rotate_local(pitch_delta, yaw_delta, roll_delta)

        state.transform.translate(state.transform.transform_vector(new_velocity * dt))
        state.local_velocity = new_velocity

        return FlightStep(
            local_velocity=new_velocity.copy(),
            local_acceleration=accel,
            forces=forces,
            angle_of_attack_deg=aoa,
            dt=float(dt),
        )
