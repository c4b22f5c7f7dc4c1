"""
CSV logging of flight ticks.

Rows are kept in memory and written in batches. The logger works as a
context manager, or opens its file lazily on the first logged row.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, TextIO

import numpy as np

from avislab.dynamics.forces import ForceBreakdown

# Column suffixes per logged field; an empty list means a single scalar column
FIELD_COMPONENTS: dict[str, list[str]] = {
    "p": list("xyz"),
    "q": list("xyzw"),
    "v": list("xyz"),
    "a": list("xyz"),
    "aoa": [],
    "F": [f"{term}_{axis}" for term in ForceBreakdown.TERMS for axis in "xyz"],
}
DEFAULT_FIELDS = ["p", "q", "v", "a", "aoa", "F"]


def field_values(sim: Any, field: str) -> np.ndarray:
    """
    Current value of one logged field as a flat array.

    Before the first tick there is no step yet: acceleration, angle of attack
    and forces are reported as zeros.
    """
    step = sim.last_step
    transform = sim.state.transform
    if field == "p":
        return transform.position
    if field == "q":
        return transform.quaternion
    if field == "v":
        return sim.state.local_velocity
    if field == "a":
        return np.zeros(3) if step is None else step.local_acceleration
    if field == "aoa":
        return np.array([0.0 if step is None else step.angle_of_attack_deg])
    if field == "F":
        forces = ForceBreakdown() if step is None else step.forces
        return np.concatenate([vec for vec in forces.as_dict().values()])
    raise KeyError(field)


class FlightLogger:
    """
    Buffered CSV logger for a :class:`~avislab.core.simulation.BirdSimulation`.

    Parameters
    ----------
    filepath : str | Path
        Output CSV file path
    buffer_size : int
        Rows kept in memory before they are written.
    fields : list[str] | None
        Fields to log, any of "p" world position, "q" orientation quaternion,
        "v" body-frame velocity, "a" body-frame acceleration, "aoa" angle of
        attack, "F" body-frame force breakdown. Default: all of them.

    Notes
    -----
    Columns are named ``<bird>.<field>_<component>``, e.g. ``bird.p_y`` or
    ``bird.F_lift_y``; the first column is time ``t``.

    Examples
    --------
    >>> with FlightLogger("flight.csv") as logger:
    ...     for _ in range(100):
    ...         sim.advance(0.02, controls)
    ...         logger.log(sim)
    """

    def __init__(
        self,
        filepath: str | Path,
        buffer_size: int = 1000,
        fields: list[str] | None = None
    ) -> None:
        self.filepath = Path(filepath)
        self.buffer_size = max(1, int(buffer_size))
        self.fields = list(DEFAULT_FIELDS) if fields is None else list(fields)

        unknown = [f for f in self.fields if f not in FIELD_COMPONENTS]
        if unknown:
            raise ValueError(
                f"Invalid fields: {unknown}. Valid options: {list(FIELD_COMPONENTS)}"
            )

        self._pending: list[list[str]] = []
        self._stream: TextIO | None = None
        self._csv: Any = None
        self._has_header = False
        self.rows_logged = 0

        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self) -> FlightLogger:
        self._open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _open(self) -> None:
        self._stream = open(self.filepath, "w", newline="", encoding="utf-8")
        self._csv = csv.writer(self._stream)
        self._has_header = False
        self.rows_logged = 0

    def columns(self, bird_name: str) -> list[str]:
        """Header row for a bird called `bird_name`."""
        header = ["t"]
        for field in self.fields:
            suffixes = FIELD_COMPONENTS[field]
            if not suffixes:
                header.append(f"{bird_name}.{field}")
            else:
                header.extend(f"{bird_name}.{field}_{s}" for s in suffixes)
        return header

    def row(self, sim: Any) -> list[str]:
        """Formatted data row for the current state of `sim`."""
        values = [f"{sim.t:.10f}"]
        for field in self.fields:
            values.extend(f"{x:.10e}" for x in field_values(sim, field))
        return values

    def log(self, sim: Any) -> None:
        """
        Append the current state of `sim`.

        The header is written, and flushed, on the first call. Rows reach the
        disk whenever `buffer_size` of them are pending. `rows_logged` counts
        every row appended since the file was opened.
        """
        if self._stream is None:
            self._open()

        if not self._has_header:
            self._csv.writerow(self.columns(sim.name))
            self._stream.flush()
            self._has_header = True

        self._pending.append(self.row(sim))
        self.rows_logged += 1
        if len(self._pending) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Write pending rows to disk."""
        if self._csv is None or not self._pending:
            return
        self._csv.writerows(self._pending)
        self._stream.flush()
        self._pending.clear()

    def close(self) -> None:
        """Write pending rows and close the file."""
        self.flush()
        if self._stream is not None:
            self._stream.close()
        self._stream = None
        self._csv = None
