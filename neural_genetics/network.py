"""
NeuralNetwork: an ordered stack of layers trained by mini-batch SGD.

The network owns no learning arithmetic itself; it sequences the layers:
  forward:        first -> last, each output feeding the next layer
  backward:       last -> first, threading the downstream layer through
  delta_weights:  first -> last, each layer fed the previous layer's output
  update_weights: once per mini-batch on every layer
"""

import logging
import numpy as np
from typing import List, Optional

from .layers import Layer
from .types import DataPiece, Dataset

logger = logging.getLogger(__name__)


class NeuralNetwork:
    """Feed-forward network with fixed topology and hyperparameters."""

    def __init__(
        self,
        layers: List[Layer],
        learning_rate: float,
        epochs: int,
        batch_size: int,
        rng: Optional[np.random.Generator] = None,
    ):
        self.layers = layers
        self.learning_rate = learning_rate
        self.epochs = epochs
        self.batch_size = batch_size
        self.rng = rng if rng is not None else np.random.default_rng()

    def summary(self) -> str:
        return "\n".join(
            f"Dense layer: {layer.neurons_count} neurons" for layer in self.layers
        )

    def print_summary(self) -> None:
        print(self.summary())

    # ================================================================
    # TRAINING
    # ================================================================

    def train(self, dataset: Dataset) -> float:
        """Run `epochs` passes of shuffled mini-batch training.

        Returns the total squared error (sum of (expected - actual)^2 / 2
        over every output of every item) of the final epoch. An empty
        dataset leaves the network untouched and returns 0.0.
        """
        error = 0.0
        for epoch in range(self.epochs):
            shuffled = dataset.shuffled(self.rng)
            error = 0.0
            for start in range(0, len(shuffled), self.batch_size):
                batch = shuffled[start:start + self.batch_size]
                for item in batch:
                    predictions = self._forward(item.input)
                    error += float(
                        np.sum((item.output.body - predictions.body) ** 2) / 2
                    )
                    self._backward(item.output)
                    self._delta_weights(item.input)
                for layer in self.layers:
                    layer.update_weights()
            logger.debug("Epoch %d, error %.6f", epoch + 1, error)
        return error

    def predict(self, input: DataPiece) -> np.ndarray:
        """Single forward pass. Returns a copy of the output body."""
        return self._forward(input).body.copy()

    # ================================================================
    # PASSES
    # ================================================================

    def _forward(self, network_input: DataPiece) -> DataPiece:
        data = network_input
        for layer in self.layers:
            data = layer.forward(data)
        return data

    def _backward(self, expected: DataPiece) -> None:
        data = expected
        downstream: Optional[Layer] = None
        for layer in reversed(self.layers):
            data = layer.backward(data, downstream)
            downstream = layer

    def _delta_weights(self, row: DataPiece) -> None:
        data = row
        for layer in self.layers:
            data = layer.delta_weights(data, self.learning_rate)

    def __repr__(self):
        sizes = [str(layer.neurons_count) for layer in self.layers]
        return (
            f"NeuralNetwork(layers=[{', '.join(sizes)}], lr={self.learning_rate}, "
            f"epochs={self.epochs}, batch={self.batch_size})"
        )
