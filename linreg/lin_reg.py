from typing import List, Optional, Sequence, TextIO, Tuple

import numpy as np

from linreg.errors import InvalidRange, NoTrainingData
from linreg.output import report_error, write_predictions


class LinearRegressionSGD:
    """Univariate linear regression fitted with stochastic gradient descent.

    Model: y_hat = weight * x + bias

    Each epoch visits the training pairs in a freshly shuffled order and
    updates the parameters after every single pair:
        error = y - y_hat
        weight += lr * error * x
        bias += lr * error

    Parameters are never reset by ``fit``; repeated calls keep adjusting them.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.train_in: np.ndarray = np.zeros(0, dtype=float)
        self.train_out: np.ndarray = np.zeros(0, dtype=float)
        self.train_order: np.ndarray = np.zeros(0, dtype=np.int64)
        self.bias: float = 0.0
        self.weight: float = 0.0
        self.loss_history: list[float] = []
        self.weight_history: list[float] = []
        self.bias_history: list[float] = []
        self.rng = np.random.default_rng(seed)

    def num_training_sets(self) -> int:
        return int(self.train_order.shape[0])

    def load(self, inputs: Sequence[float], targets: Sequence[float]) -> "LinearRegressionSGD":
        """Store training pairs, truncating the longer sequence to match the shorter."""
        train_in = np.asarray(inputs, dtype=float).ravel()
        train_out = np.asarray(targets, dtype=float).ravel()

        n_sets = min(train_in.shape[0], train_out.shape[0])
        self.train_in = train_in[:n_sets].copy()
        self.train_out = train_out[:n_sets].copy()
        self.train_order = np.arange(n_sets)

        self.loss_history = []
        self.weight_history = []
        self.bias_history = []
        return self

    def shuffle(self) -> None:
        self.train_order = self.rng.permutation(self.num_training_sets())

    def optimize(self, x: float, reference: float, learning_rate: float) -> None:
        """Apply one gradient step for a single training pair."""
        error = reference - self.predict(x)
        self.weight += learning_rate * error * x
        self.bias += learning_rate * error

    def fit(self, epochs: int, learning_rate: float) -> "LinearRegressionSGD":
        """Run ``epochs`` full passes of per-example SGD over the stored pairs.

        Args:
            epochs: Number of passes, must be positive.
            learning_rate: Fraction of the error applied per update.
        """
        if int(epochs) != epochs or epochs < 1:
            raise ValueError("epochs must be a positive integer.")
        if self.num_training_sets() == 0:
            return self

        train_in = self.train_in.tolist()
        train_out = self.train_out.tolist()

        for _ in range(int(epochs)):
            self.shuffle()
            for idx in self.train_order.tolist():
                self.optimize(train_in[idx], train_out[idx], learning_rate)

            self.loss_history.append(self.mse(self.train_in, self.train_out))
            self.weight_history.append(self.weight)
            self.bias_history.append(self.bias)

        return self

    def predict(self, x):
        return self.weight * x + self.bias

    def mse(self, inputs: Sequence[float], targets: Sequence[float]) -> float:
        inputs = np.asarray(inputs, dtype=float)
        targets = np.asarray(targets, dtype=float)
        return float(np.mean((targets - self.predict(inputs)) ** 2))

    def range_points(self, min_value: float, max_value: float, step: float = 1.0) -> List[Tuple[float, float]]:
        """Return (input, prediction) pairs for min_value, min_value + step, ... <= max_value."""
        if min_value >= max_value or step <= 0:
            raise InvalidRange()

        # Tolerance keeps max_value when it lands on a step boundary up to rounding.
        n_steps = int(np.floor((max_value - min_value) / step + 1e-9))
        inputs = min_value + step * np.arange(n_steps + 1)
        return [(float(x), float(self.predict(x))) for x in inputs]

    def predict_range(
        self,
        min_value: float,
        max_value: float,
        step: float = 1.0,
        sink: Optional[TextIO] = None,
        num_decimals: int = 1,
    ) -> List[Tuple[float, float]]:
        """Print predictions over [min_value, max_value] to ``sink``.

        An invalid range is reported on stderr and nothing is printed.
        """
        try:
            points = self.range_points(min_value, max_value, step)
        except InvalidRange as exc:
            report_error(exc)
            return []

        write_predictions(points, sink, num_decimals)
        return points

    def training_points(self) -> List[Tuple[float, float]]:
        if self.num_training_sets() == 0:
            raise NoTrainingData()
        return [(float(x), float(self.predict(x))) for x in self.train_in]

    def predict_all(self, sink: Optional[TextIO] = None, num_decimals: int = 1) -> List[Tuple[float, float]]:
        """Print predictions for every stored training input, in stored order."""
        try:
            points = self.training_points()
        except NoTrainingData as exc:
            report_error(exc)
            return []

        write_predictions(points, sink, num_decimals)
        return points
