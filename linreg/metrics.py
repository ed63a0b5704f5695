import numpy as np


def regression_metrics(pred: np.ndarray, target: np.ndarray) -> dict:
    pred = np.asarray(pred, dtype=float)
    target = np.asarray(target, dtype=float)

    if pred.shape != target.shape:
        raise ValueError("Pred and target must have the same shape.")
    if pred.size == 0:
        raise ValueError("Cannot compute metrics on empty arrays.")

    diff = pred - target
    mse = float(np.mean(diff ** 2))
    mae = float(np.mean(np.abs(diff)))

    ss_res = float(np.sum(diff ** 2))
    ss_tot = float(np.sum((target - np.mean(target)) ** 2))
    # Constant targets: perfect fit scores 1, anything else 0, as sklearn does.
    if ss_tot == 0:
        r2 = 1.0 if ss_res == 0 else 0.0
    else:
        r2 = 1.0 - ss_res / ss_tot

    return {
        "mse": mse,
        "rmse": float(np.sqrt(mse)),
        "mae": mae,
        "r2": r2,
    }
