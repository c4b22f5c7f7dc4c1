# src/avislab/utils/io.py
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from avislab.core.parameters import BirdParameters


def save_flight_history(history: List[Dict[str, Any]], filepath: str) -> None:
    """
    Saves a list of per-tick dicts to a CSV file.

    Args:
        history: List of dicts, e.g., [{'t': 0.02, 'forward_speed': 9.99}, ...]
        filepath: Destination path (e.g., 'results/glide.csv')
    """
    if not history:
        raise ValueError("Flight history is empty. Nothing to save.")

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(history)
    df.to_csv(path, index=False)
    print(f"Flight history saved to {path.absolute()}")


def load_bird_parameters(filepath: str) -> BirdParameters:
    """
    Load tuning parameters from a JSON object of BirdParameters fields.

    Unknown keys raise ValueError; missing keys keep their defaults.
    """
    path = Path(filepath)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return BirdParameters.from_dict(data)


def save_bird_parameters(params: BirdParameters, filepath: str) -> None:
    """Write the scalar tuning of `params` as JSON (coefficient curves are not stored)."""
    data = asdict(params)
    data.pop("lift_curve", None)
    data.pop("drag_curve", None)
    data["body_drag_factors"] = list(data["body_drag_factors"])

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
