"""
Trigger response, kept apart from force integration.

The host reports trigger volumes the bird enters; the response bumps the bird
clear of the obstacle instead of resolving contact physically.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass

from avislab.dynamics.frame import UP, Transform

# World-space bump applied when the bird flies into a trigger [m]
DEFAULT_TRIGGER_LIFT = 10.0


@dataclass
class TriggerResponse:
    """
    Lift the bird straight up when it enters a trigger.

    Attributes
    ----------
    lift : float
        World-up displacement applied per hit [m]
    hits : int
        Number of triggers handled so far
    """
    lift: float = DEFAULT_TRIGGER_LIFT
    hits: int = 0

    def respond(self, transform: Transform, other: str = "") -> None:
        """
        Handle one trigger entry.

        Parameters
        ----------
        transform : Transform
            Bird transform, moved in place
        other : str
            Name of the trigger, for the report
        """
        self.hits += 1
        warnings.warn(
            f"HIT {other}".rstrip() + f" at {transform.position}",
            RuntimeWarning,
            stacklevel=2
        )
        transform.translate(UP * self.lift)
