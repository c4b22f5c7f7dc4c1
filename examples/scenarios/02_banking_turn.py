"""
Example 02: Banking Turn
Rolls into a bank, holds it with a little back-pressure, and rolls out.
The overlay lines are printed instead of drawn on screen.
"""

from avislab import BirdParameters, BirdSimulation, ControlInputs
from avislab.utils.orientation import orientation_from_euler


class PrintOverlay:
    """Prints telemetry once every `every` ticks."""

    def __init__(self, every=25):
        self.every = every
        self._ticks = 0

    def show(self, lines):
        self._ticks += 1
        if self._ticks % self.every == 0:
            print(" | ".join(lines))


def pilot(t):
    if t < 0.5:
        return ControlInputs(thrust=0.8, roll=0.5)
    if t < 4.0:
        return ControlInputs(thrust=0.8, pitch=-0.15)
    if t < 4.5:
        return ControlInputs(thrust=0.8, roll=-0.5)
    return ControlInputs(thrust=0.8)


def run_demo():
    print("\n--- Banking turn ---")

    # Low forward drag so the bird carves the turn instead of skidding
    params = BirdParameters(body_drag_factors=(0.5, 0.5, 0.05))

    sim = BirdSimulation.with_logging(
        "02_banking_turn",
        params=params,
        position=[0.0, 100.0, 0.0],
        orientation=orientation_from_euler(heading=45.0),
        overlay_sink=PrintOverlay(),
    )
    sim.run(pilot, duration=6.0, dt=0.02, log_interval=1.0)

    print(f"Heading after turn: {sim.telemetry.attitude}")
    print(f"Results saved to: {sim.output_path}")


if __name__ == "__main__":
    run_demo()
