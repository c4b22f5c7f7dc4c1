from .parameters import BirdParameters
from .controls import NEUTRAL, ControlInputs, ResetEdge
from .integrator import FlightIntegrator, FlightStep
from .collision import TriggerResponse
from .simulation import SPEED_PARAMETER, AnimationSink, BirdSimulation, OverlaySink
