"""
avislab - Fixed-step flight model for bird-like game characters.

Core Components
---------------
BirdSimulation : Owns one bird and advances it tick by tick
FlightIntegrator : Body-frame force integration and attitude update
BirdParameters : Designer-tunable flight parameters
ControlInputs : One tick of pilot input
Transform : World position and orientation

Telemetry
---------
format_telemetry : Four lines of on-screen flight data
angle_360_to_plus_minus_180 : Angle readout normalization

Examples
--------
>>> from avislab import BirdSimulation, ControlInputs
>>> sim = BirdSimulation()
>>> for _ in range(50):
...     sim.advance(0.02, ControlInputs(thrust=0.5, roll=0.2))
"""

__version__ = "0.1.0"

# Dynamics
from avislab.dynamics.forces import ForceBreakdown
from avislab.dynamics.frame import Transform
from avislab.dynamics.vehicle import VehicleState

# Aerodynamic coefficient curves
from avislab.models.aerodynamics import (
    ConstantCoefficient,
    CurveType,
    PolynomialCoefficient,
    create_coefficient_models,
)

# Core simulation classes
from avislab.core import (
    BirdParameters,
    BirdSimulation,
    ControlInputs,
    FlightIntegrator,
    FlightStep,
    TriggerResponse,
)

# Telemetry
from avislab.visualization.telemetry import (
    TelemetrySnapshot,
    angle_360_to_plus_minus_180,
    format_telemetry,
)

# Logging
from avislab.logger import FlightLogger
from avislab.api.scenario import FlightScenario

__all__ = [
    # Version
    "__version__",
    # Dynamics
    "Transform",
    "VehicleState",
    "ForceBreakdown",
    # Models
    "ConstantCoefficient",
    "PolynomialCoefficient",
    "CurveType",
    "create_coefficient_models",
    # Core
    "BirdParameters",
    "BirdSimulation",
    "ControlInputs",
    "FlightIntegrator",
    "FlightStep",
    "TriggerResponse",
    # Telemetry
    "TelemetrySnapshot",
    "angle_360_to_plus_minus_180",
    "format_telemetry",
    # Logging
    "FlightLogger",
    # API
    "FlightScenario",
]
