import csv

import numpy as np
import pytest

from avislab.core.controls import ControlInputs
from avislab.core.simulation import BirdSimulation
from avislab.dynamics.vehicle import VehicleState
from avislab.logger import FlightLogger


# --- Mock Objects for Isolation ---
class MockSim:
    def __init__(self, name="bird"):
        self.name = name
        self.t = 0.0
        self.state = VehicleState.spawn(position=np.array([1.0, 2.0, 3.0]))
        self.last_step = None


def read_rows(path):
    with open(path, "r", newline="") as f:
        return list(csv.reader(f))


# --- Tests ---

def test_logger_basic_io(tmp_path):
    """Logger creates the file and writes header + data."""
    log_path = tmp_path / "basic.csv"

    with FlightLogger(str(log_path), buffer_size=1) as logger:
        logger.log(MockSim())

    rows = read_rows(log_path)
    assert len(rows) == 2

    header = rows[0]
    # t + p(3) + q(4) + v(3) + a(3) + aoa + F(5 terms * 3)
    assert len(header) == 30
    assert header[0] == "t"
    assert "bird.p_y" in header
    assert "bird.q_w" in header
    assert "bird.aoa" in header
    assert "bird.F_induced_drag_z" in header

    values = dict(zip(header, rows[1]))
    assert float(values["t"]) == 0.0
    assert float(values["bird.p_y"]) == pytest.approx(2.0)
    assert float(values["bird.v_z"]) == pytest.approx(10.0)
    # Nothing integrated yet
    assert float(values["bird.a_z"]) == 0.0
    assert float(values["bird.F_lift_y"]) == 0.0


def test_logger_buffering(tmp_path):
    """Rows are buffered until the buffer fills or flush is called."""
    log_path = tmp_path / "buffer.csv"
    logger = FlightLogger(str(log_path), buffer_size=5)
    sim = MockSim()

    for _ in range(4):
        logger.log(sim)
    # Header only
    assert len(read_rows(log_path)) == 1

    logger.log(sim)
    assert len(read_rows(log_path)) == 6

    logger.log(sim)
    logger.flush()
    assert len(read_rows(log_path)) == 7
    assert logger.rows_logged == 6
    logger.close()


def test_logger_field_selection(tmp_path):
    log_path = tmp_path / "fields.csv"
    with FlightLogger(log_path, fields=["p", "aoa"]) as logger:
        logger.log(MockSim("gull"))

    header = read_rows(log_path)[0]
    assert header == ["t", "gull.p_x", "gull.p_y", "gull.p_z", "gull.aoa"]


def test_logger_invalid_field(tmp_path):
    with pytest.raises(ValueError, match="Invalid fields"):
        FlightLogger(tmp_path / "bad.csv", fields=["p", "omega"])


def test_logger_with_simulation(tmp_path, default_params):
    """Logged forces and acceleration come from the last tick."""
    log_path = tmp_path / "sim.csv"
    sim = BirdSimulation(params=default_params)
    with FlightLogger(log_path) as logger:
        sim.advance(0.1, ControlInputs(thrust=1.0))
        logger.log(sim)

    header, row = read_rows(log_path)
    values = {k: float(v) for k, v in zip(header, row)}
    assert values["t"] == pytest.approx(0.1)
    assert values["bird.F_thrust_z"] == pytest.approx(10.0)
    assert values["bird.F_gravity_y"] == pytest.approx(-9.81)
    assert values["bird.a_z"] == pytest.approx(-0.1)
    assert values["bird.v_z"] == pytest.approx(9.99)
