from .scenario import TIMESTEP_PRESETS, FlightScenario

__all__ = ["FlightScenario", "TIMESTEP_PRESETS"]
