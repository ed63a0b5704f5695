import argparse
import os
from datetime import datetime

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression
from sklearn.metrics import mean_squared_error, r2_score

from linreg.dataset import ensure_dir, load_training_csv
from linreg.lin_reg import LinearRegressionSGD


DEFAULT_RESULTS_DIR = "results"


def compare_linear(train_in, train_out, epochs: int = 10000, lr: float = 0.01, seed=None):
    """Fit the SGD trainer and sklearn's closed-form solver on the same pairs."""
    custom = LinearRegressionSGD(seed=seed).load(train_in, train_out)
    custom.fit(epochs, lr)

    # Truncated pairs, so both models see identical data.
    X = custom.train_in.reshape(-1, 1)
    y = custom.train_out
    sk_model = LinearRegression().fit(X, y)

    custom_pred = custom.predict(custom.train_in)
    sk_pred = sk_model.predict(X)

    metrics = pd.DataFrame(
        [
            {
                "model": "custom",
                "mse": mean_squared_error(y, custom_pred),
                "r2": r2_score(y, custom_pred),
            },
            {
                "model": "sklearn",
                "mse": mean_squared_error(y, sk_pred),
                "r2": r2_score(y, sk_pred),
            },
        ]
    )

    coef = pd.DataFrame(
        [
            {"model": "custom", "weight": custom.weight, "bias": custom.bias},
            {"model": "sklearn", "weight": float(sk_model.coef_[0]), "bias": float(sk_model.intercept_)},
        ]
    )

    return custom, sk_model, custom_pred, sk_pred, metrics, coef


def plot_fit(train_in, train_out, custom, sk_model, out_path: str) -> None:
    train_in = np.asarray(train_in, dtype=float)
    grid = np.linspace(train_in.min(), train_in.max(), 100)

    plt.figure(figsize=(7, 5))
    plt.scatter(train_in, train_out, s=20, alpha=0.8, label="training data")
    plt.plot(grid, custom.predict(grid), label="custom SGD")
    plt.plot(grid, sk_model.predict(grid.reshape(-1, 1)), "--", label="sklearn")
    plt.xlabel("Input")
    plt.ylabel("Output")
    plt.title("Linear Fit Comparison")
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    plt.close()


def run_comparison(train_in, train_out, results_dir: str, epochs: int, lr: float, seed=None) -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = os.path.join(results_dir, "compare", timestamp)
    ensure_dir(out_dir)

    custom, sk_model, custom_pred, sk_pred, metrics, coef = compare_linear(
        train_in, train_out, epochs=epochs, lr=lr, seed=seed
    )

    metrics.to_csv(os.path.join(out_dir, "metrics.csv"), index=False)
    coef.to_csv(os.path.join(out_dir, "coefficients.csv"), index=False)

    preds = pd.DataFrame(
        {
            "input": custom.train_in,
            "y_true": custom.train_out,
            "custom_pred": custom_pred,
            "sklearn_pred": sk_pred,
        }
    )
    preds.to_csv(os.path.join(out_dir, "predictions.csv"), index=False)

    plot_fit(custom.train_in, custom.train_out, custom, sk_model, os.path.join(out_dir, "linear_fit.png"))

    print(f"Saved: {out_dir}")
    return out_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare the SGD trainer with sklearn LinearRegression.")
    parser.add_argument("--input", required=True, help="CSV with input and target columns.")
    parser.add_argument(
        "--results-dir",
        default=DEFAULT_RESULTS_DIR,
        help="Directory to save outputs.",
    )
    parser.add_argument("--epochs", type=int, default=10000, help="Number of SGD epochs.")
    parser.add_argument("--lr", type=float, default=0.01, help="Learning rate.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for shuffling.")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    train_in, train_out = load_training_csv(args.input)
    run_comparison(train_in, train_out, args.results_dir, args.epochs, args.lr, args.seed)


if __name__ == "__main__":
    main()
