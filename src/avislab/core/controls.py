"""
Control input sample read once per tick, and reset-button edge detection.
"""
from __future__ import annotations

from dataclasses import dataclass

from avislab.utils.validation import validate_finite


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, float(value)))


@dataclass(frozen=True)
class ControlInputs:
    """
    One tick of pilot input.

    Attributes
    ----------
    thrust, brake : float
        Throttle and air-brake axes, nominally in [0, 1]
    roll, pitch, yaw : float
        Stick axes, nominally in [-1, 1]

    Notes
    -----
    The input source is expected to clamp its axes; use :meth:`clamped` when
    it does not.
    """

    thrust: float = 0.0
    brake: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    def __post_init__(self):
        for name in ("thrust", "brake", "roll", "pitch", "yaw"):
            validate_finite(getattr(self, name), name)

    def clamped(self) -> ControlInputs:
        """Copy with every axis clamped to its natural range."""
        return ControlInputs(
            thrust=_clamp(self.thrust, 0.0, 1.0),
            brake=_clamp(self.brake, 0.0, 1.0),
            roll=_clamp(self.roll, -1.0, 1.0),
            pitch=_clamp(self.pitch, -1.0, 1.0),
            yaw=_clamp(self.yaw, -1.0, 1.0),
        )

    @property
    def net_thrust(self) -> float:
        """Thrust minus brake, in [-1, 1] for clamped input."""
        return self.thrust - self.brake


NEUTRAL = ControlInputs()
"""All axes centred, no thrust."""


class ResetEdge:
    """
    Rising-edge detector for a held reset button.

    ``update(True)`` returns True only on the first tick the button is seen
    pressed; holding it does not retrigger.
    """

    def __init__(self) -> None:
        self._was_pressed = False

    def update(self, pressed: bool) -> bool:
        fired = bool(pressed) and not self._was_pressed
        self._was_pressed = bool(pressed)
        return fired
