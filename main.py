import argparse
import os
from typing import Optional, Sequence

from linreg.compare_models import DEFAULT_RESULTS_DIR, run_comparison
from linreg.config import TrainingConfig, load_config
from linreg.convergence_analysis import run_linear_analysis
from linreg.dataset import load_training_csv
from linreg.lin_reg import LinearRegressionSGD


def resolve_config(args: argparse.Namespace) -> TrainingConfig:
    config = load_config(args.config) if args.config else TrainingConfig()

    if args.input:
        config.data_path = args.input
    if args.epochs is not None:
        config.epochs = args.epochs
    if args.lr is not None:
        config.learning_rate = args.lr
    if args.seed is not None:
        config.seed = args.seed
    if args.decimals is not None:
        config.num_decimals = args.decimals

    if config.data_path:
        train_in, train_out = load_training_csv(config.data_path)
        config.train_in = train_in.tolist()
        config.train_out = train_out.tolist()

    return config


def train_model(config: TrainingConfig) -> LinearRegressionSGD:
    model = LinearRegressionSGD(seed=config.seed)
    model.load(config.train_in, config.train_out)
    model.fit(config.epochs, config.learning_rate)
    return model


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Train a linear regression model with SGD and print predictions.")
    parser.add_argument(
        "--mode",
        choices=["predict", "all", "compare", "convergence"],
        default="predict",
        help="predict: range predictions, all: training inputs, compare/convergence: analysis outputs.",
    )
    parser.add_argument("--config", default=None, help="JSON training config.")
    parser.add_argument("--input", default=None, help="CSV of training pairs (input,target).")
    parser.add_argument("--epochs", type=int, default=None, help="Number of training epochs.")
    parser.add_argument("--lr", type=float, default=None, help="Learning rate.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for shuffling.")
    parser.add_argument("--decimals", type=int, default=None, help="Decimals in printed output.")
    parser.add_argument(
        "--results-dir",
        default=DEFAULT_RESULTS_DIR,
        help="Directory for compare/convergence outputs.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    config = resolve_config(args)

    if args.mode == "compare":
        run_comparison(
            config.train_in, config.train_out, args.results_dir, config.epochs, config.learning_rate, config.seed
        )
        return

    if args.mode == "convergence":
        run_linear_analysis(
            config.train_in,
            config.train_out,
            os.path.join(args.results_dir, "figures"),
            config.epochs,
            seed=config.seed,
        )
        return

    model = train_model(config)

    if args.mode == "all":
        model.predict_all(num_decimals=config.num_decimals)
        return

    model.predict_range(config.range_min, config.range_max, config.step, num_decimals=config.num_decimals)


if __name__ == "__main__":
    main()
