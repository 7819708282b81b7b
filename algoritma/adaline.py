"""ADALINE: a single linear neuron trained with the perceptron update rule."""

from __future__ import annotations

from collections.abc import Sequence

MAX_ITERATIONS = 500


class Adaline:
    """A linear classifier with one weight per feature plus a bias.

    The bias is stored as the last weight. Every weight starts at 1.
    """

    def __init__(
        self, n_features: int, learning_rate: float = 0.01, accuracy: float = 1e-5
    ) -> None:
        if learning_rate <= 0:
            raise ValueError("learning rate must be positive")
        if n_features < 1:
            raise ValueError("there must be at least one feature")
        self.learning_rate = learning_rate
        self.accuracy = accuracy
        self.weights = [1.0] * (n_features + 1)

    @property
    def n_features(self) -> int:
        return len(self.weights) - 1

    def __str__(self) -> str:
        return "<" + ", ".join(f"{weight:g}" for weight in self.weights) + ">"

    def _check_size(self, x: Sequence[float]) -> None:
        if len(x) != self.n_features:
            raise ValueError(
                "number of features in x does not match the model's dimension"
            )

    def net_input(self, x: Sequence[float]) -> float:
        """Neuron output before activation: bias plus the weighted features."""
        self._check_size(x)
        return self.weights[-1] + sum(w * v for w, v in zip(self.weights, x))

    def predict(self, x: Sequence[float]) -> int:
        """Predicted class, +1 or -1."""
        return self.activation(self.net_input(x))

    def fit_one(self, x: Sequence[float], y: int) -> float:
        """Update the weights from one sample; return the correction factor."""
        error = y - self.predict(x)
        correction = self.learning_rate * error
        for index, value in enumerate(x):
            self.weights[index] += correction * value
        self.weights[-1] += correction
        return correction

    def fit(self, xs: Sequence[Sequence[float]], ys: Sequence[int]) -> int:
        """Train on all samples until the mean correction is within the accuracy.

        Returns the number of passes made; a result below ``MAX_ITERATIONS``
        means training converged.
        """
        if len(xs) != len(ys):
            raise ValueError("xs and ys must have the same length")
        if not xs:
            raise ValueError("there must be at least one sample")
        mean_error = 1.0
        iterations = 0
        while iterations < MAX_ITERATIONS and mean_error > self.accuracy:
            mean_error = sum(abs(self.fit_one(x, y)) for x, y in zip(xs, ys)) / len(xs)
            iterations += 1
        return iterations

    @staticmethod
    def activation(x: float) -> int:
        """Heaviside step mapped to +1 for positive input and -1 otherwise."""
        value = float(x)
        if value > 0:
            return 1
        return -1