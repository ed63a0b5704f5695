import os
from typing import Optional, Tuple

import numpy as np
import pandas as pd

INPUT_COLUMN = "input"
TARGET_COLUMN = "target"


def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def load_training_csv(
    path: str,
    input_col: str = INPUT_COLUMN,
    target_col: str = TARGET_COLUMN,
) -> Tuple[np.ndarray, np.ndarray]:
    """Read training pairs from a CSV with an input and a target column."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Training data not found: {path}")

    df = pd.read_csv(path)
    missing = [col for col in (input_col, target_col) if col not in df.columns]
    if missing:
        raise ValueError(f"Column(s) {missing} not found in {path}.")

    df = df[[input_col, target_col]].dropna()
    return df[input_col].to_numpy(dtype=float), df[target_col].to_numpy(dtype=float)


def write_training_csv(inputs, targets, path: str) -> str:
    ensure_dir(os.path.dirname(path))
    n_rows = min(len(inputs), len(targets))
    pd.DataFrame(
        {
            INPUT_COLUMN: np.asarray(inputs, dtype=float)[:n_rows],
            TARGET_COLUMN: np.asarray(targets, dtype=float)[:n_rows],
        }
    ).to_csv(path, index=False)
    return path


def make_linear_data(
    slope: float,
    intercept: float,
    n_rows: int = 50,
    x_min: float = -5.0,
    x_max: float = 5.0,
    noise: float = 0.0,
    seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Sample points on y = slope * x + intercept with optional gaussian noise."""
    rng = np.random.default_rng(seed)
    x = rng.uniform(x_min, x_max, size=n_rows)
    y = slope * x + intercept
    if noise > 0:
        y = y + rng.normal(0.0, noise, size=n_rows)
    return x, y
