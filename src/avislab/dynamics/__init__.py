from .frame import Transform, quat_normalize
from .vehicle import SPAWN_FORWARD_SPEED, VehicleState
from .forces import (
    ForceBreakdown,
    angle_of_attack_deg,
    body_drag_force,
    gravity_force,
    induced_drag_force,
    lift_force,
    signed_square,
    thrust_force,
)
