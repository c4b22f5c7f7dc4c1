"""
Telemetry text and post-flight plots.

Plotting needs matplotlib and is imported on demand:

>>> from avislab.visualization import plotting
"""

from .telemetry import (
    TelemetrySnapshot,
    angle_360_to_plus_minus_180,
    format_telemetry,
)

__all__ = [
    "TelemetrySnapshot",
    "angle_360_to_plus_minus_180",
    "format_telemetry",
]
