"""
Dense layers: the fully-connected building block of the network.

A layer is NOT just a weight matrix. Within one training step it:
  1. Evaluates its neurons on an input and caches the output (forward)
  2. Computes each neuron's delta from the downstream error (backward)
  3. Accumulates weight deltas and nudges biases right away (delta_weights)
  4. Commits the accumulated weight deltas once per mini-batch (update_weights)

Neurons are stored row-wise: weights[j] is neuron j's weight vector.
Every phase is one vectorised numpy operation over all neurons and weights,
so a phase has fully completed before the next one starts.
"""

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .activation import ActivationFunction, ActivationKind, get_activation_function
from .types import DataPiece, DataSize


class LayerKind(Enum):
    DENSE = "dense"


@dataclass
class Neuron:
    """Snapshot of one neuron. weights / weights_delta are live row views."""

    weights: np.ndarray
    weights_delta: np.ndarray
    bias: float
    delta: float


class Dense:
    """Fully-connected layer of sigmoid (or fallback) neurons."""

    kind = LayerKind.DENSE

    def __init__(
        self,
        input_size: int,
        neurons_count: int,
        function_raw: int = ActivationKind.SIGMOID,
        rng: Optional[np.random.Generator] = None,
    ):
        if rng is None:
            rng = np.random.default_rng()
        self.input_size = input_size
        self.function: ActivationFunction = get_activation_function(int(function_raw))

        self.weights: np.ndarray = rng.uniform(-1.0, 1.0, size=(neurons_count, input_size))
        self.weights_delta: np.ndarray = np.zeros((neurons_count, input_size))
        self.biases: np.ndarray = np.zeros(neurons_count)
        self.deltas: np.ndarray = np.zeros(neurons_count)

        # Cached between forward, backward and delta phases of one step
        self.output = DataPiece(DataSize.one_d(neurons_count), np.zeros(neurons_count))

    @property
    def neurons_count(self) -> int:
        return self.weights.shape[0]

    @property
    def neurons(self) -> List[Neuron]:
        return [
            Neuron(
                weights=self.weights[j],
                weights_delta=self.weights_delta[j],
                bias=float(self.biases[j]),
                delta=float(self.deltas[j]),
            )
            for j in range(self.neurons_count)
        ]

    # ================================================================
    # FORWARD
    # ================================================================

    def forward(self, input: DataPiece) -> DataPiece:
        """out_j = activation(bias_j + sum_i weights[j, i] * input_i)."""
        weighted = self.weights @ input.body + self.biases
        self.output.body[:] = self.function.activation(weighted)
        return self.output

    # ================================================================
    # BACKWARD
    # ================================================================

    def backward(self, input: DataPiece, downstream: Optional["Dense"]) -> DataPiece:
        """Compute neuron deltas.

        downstream is the layer one step closer to the output, already
        processed in this backward sweep. Without one this is the output
        layer and input holds the expected values.
        """
        output = self.output.body
        if downstream is not None:
            errors = downstream.weights.T @ downstream.deltas
        else:
            errors = input.body - output
        self.deltas = errors * self.function.derivative(output)
        return self.output

    # ================================================================
    # GRADIENT ACCUMULATION / COMMIT
    # ================================================================

    def delta_weights(self, input: DataPiece, learning_rate: float) -> DataPiece:
        """Accumulate weight deltas; biases are updated immediately."""
        self.weights_delta += learning_rate * np.outer(self.deltas, input.body)
        self.biases += learning_rate * self.deltas
        return self.output

    def update_weights(self) -> None:
        """Commit accumulated weight deltas, then reset them to zero."""
        self.weights += self.weights_delta
        self.weights_delta.fill(0.0)

    def __repr__(self):
        return (
            f"Dense(inputs={self.input_size}, neurons={self.neurons_count}, "
            f"function={self.function.kind.name})"
        )


# Closed set of layer variants the network knows how to drive.
Layer = Union[Dense]
