"""
Example 01: Level Flight using the Scenario API.

A bird spawns at 50 m flying forward at 10 m/s and holds a constant
throttle. Lift caps at its weight, so altitude holds while drag bleeds the
forward speed down to the thrust-drag balance.
"""
import sys
from pathlib import Path

# Setup path for local development (not needed if installed via pip)
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from avislab.api.scenario import FlightScenario
from avislab.core.controls import ControlInputs


def run_example():
    # Half throttle: balance speed is sqrt(5 / 0.101) = 7.0 m/s
    scenario = (
        FlightScenario(name="01_level_flight")
        .set_initial_state(altitude=50.0)
        .set_controls(ControlInputs(thrust=0.5))
        .enable_plotting(show=True)
    )
    sim = scenario.run(duration=10.0)

    print(f"Final forward speed: {sim.forward_speed:.2f} m/s")
    print(f"Simulation complete. Results saved to {sim.output_path}")


if __name__ == "__main__":
    run_example()
