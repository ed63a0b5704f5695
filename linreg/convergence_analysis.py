import argparse
import os
import time
from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import pandas as pd
from sklearn.linear_model import LinearRegression
from sklearn.metrics import mean_squared_error

from linreg.dataset import ensure_dir, load_training_csv
from linreg.lin_reg import LinearRegressionSGD
from linreg.metrics import regression_metrics


DEFAULT_RESULTS_DIR = "results/figures"
LEARNING_RATES = [0.001, 0.01, 0.05]


def plot_loss_curves(loss_map: Dict[float, List[float]], out_path: str, title: str) -> None:
    plt.figure(figsize=(8, 5))
    for lr, losses in loss_map.items():
        plt.plot(losses, label=f"lr={lr}")
    plt.xlabel("Epoch")
    plt.ylabel("MSE")
    plt.yscale("log")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    plt.close()


def plot_param_evolution(model: LinearRegressionSGD, out_path: str, title: str) -> None:
    if not model.weight_history:
        return
    plt.figure(figsize=(8, 5))
    plt.plot(model.weight_history, label="weight")
    plt.plot(model.bias_history, label="bias")
    plt.xlabel("Epoch")
    plt.ylabel("Parameter Value")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    plt.close()


def plot_speed_comparison(times: Dict[str, float], losses: Dict[str, float], out_path: str, title: str) -> None:
    labels = list(times.keys())
    time_vals = [times[label] for label in labels]
    loss_vals = [losses[label] for label in labels]

    plt.figure(figsize=(9, 4))
    plt.subplot(1, 2, 1)
    plt.bar(labels, time_vals, color=["#4c72b0", "#55a868"])
    plt.ylabel("Fit Time (s)")
    plt.title("Convergence Speed")

    plt.subplot(1, 2, 2)
    plt.bar(labels, loss_vals, color=["#4c72b0", "#55a868"])
    plt.ylabel("Final Loss")
    plt.title("Final Loss")

    plt.suptitle(title)
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    plt.close()


def run_linear_analysis(
    train_in,
    train_out,
    results_dir: str,
    epochs: int,
    learning_rates: Optional[List[float]] = None,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Train once per learning rate and save loss, parameter and timing figures.

    Returns one row of final metrics per learning rate.
    """
    ensure_dir(results_dir)
    learning_rates = learning_rates or LEARNING_RATES

    loss_map: Dict[float, List[float]] = {}
    rows = []

    for lr in learning_rates:
        model = LinearRegressionSGD(seed=seed).load(train_in, train_out)
        start = time.perf_counter()
        model.fit(epochs, lr)
        elapsed = time.perf_counter() - start
        loss_map[lr] = model.loss_history

        row = {"learning_rate": lr, "weight": model.weight, "bias": model.bias, "fit_time": elapsed}
        row.update(regression_metrics(model.predict(model.train_in), model.train_out))
        rows.append(row)

        plot_param_evolution(
            model,
            os.path.join(results_dir, f"linear_params_lr{lr}.png"),
            f"Parameter Evolution (lr={lr})",
        )

    plot_loss_curves(
        loss_map,
        os.path.join(results_dir, "linear_loss_curves.png"),
        "SGD Loss Curves",
    )

    custom = LinearRegressionSGD(seed=seed).load(train_in, train_out)
    start = time.perf_counter()
    custom.fit(epochs, 0.01)
    custom_time = time.perf_counter() - start
    custom_loss = mean_squared_error(custom.train_out, custom.predict(custom.train_in))

    X = custom.train_in.reshape(-1, 1)
    sk_model = LinearRegression()
    start = time.perf_counter()
    sk_model.fit(X, custom.train_out)
    sk_time = time.perf_counter() - start
    sk_loss = mean_squared_error(custom.train_out, sk_model.predict(X))

    plot_speed_comparison(
        {"custom": custom_time, "sklearn": sk_time},
        {"custom": custom_loss, "sklearn": sk_loss},
        os.path.join(results_dir, "linear_speed_comparison.png"),
        "Linear Regression Speed Comparison",
    )

    summary = pd.DataFrame(rows)
    summary.to_csv(os.path.join(results_dir, "convergence_summary.csv"), index=False)
    print(f"Saved: {results_dir}")
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convergence analysis for the SGD trainer.")
    parser.add_argument("--input", required=True, help="CSV with input and target columns.")
    parser.add_argument(
        "--results-dir",
        default=DEFAULT_RESULTS_DIR,
        help="Directory to save figures.",
    )
    parser.add_argument(
        "--epochs",
        type=int,
        default=1000,
        help="Number of SGD epochs per learning rate.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for shuffling.")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    train_in, train_out = load_training_csv(args.input)
    run_linear_analysis(train_in, train_out, args.results_dir, args.epochs, seed=args.seed)


if __name__ == "__main__":
    main()
