"""
Activation functions: the scalar nonlinearity applied by each neuron.

The derivative is computed from the activation's OUTPUT, not its input:
backpropagation only ever has the cached layer output at hand.
"""

import logging
from enum import IntEnum

import numpy as np

logger = logging.getLogger(__name__)


class ActivationKind(IntEnum):
    SIGMOID = 0


class ActivationFunction:
    """Interface: activation(x) and derivative(y) over numpy arrays or floats."""

    kind: ActivationKind

    def activation(self, x):
        raise NotImplementedError

    def derivative(self, y):
        raise NotImplementedError


class Sigmoid(ActivationFunction):
    """Logistic sigmoid: 1 / (1 + e^-x), slope y * (1 - y)."""

    kind = ActivationKind.SIGMOID

    def activation(self, x):
        # Clip so large inputs saturate instead of overflowing exp().
        return 1.0 / (1.0 + np.exp(-np.clip(x, -500.0, 500.0)))

    def derivative(self, y):
        return y * (1.0 - y)


DEFAULT_ACTIVATION = ActivationKind.SIGMOID

_FUNCTIONS = {
    ActivationKind.SIGMOID: Sigmoid,
}


def get_activation_function(raw_value: int) -> ActivationFunction:
    """Look up an activation by identifier.

    Unknown identifiers fall back to DEFAULT_ACTIVATION.
    """
    try:
        kind = ActivationKind(raw_value)
    except ValueError:
        logger.debug(
            "Unknown activation %r, using %s", raw_value, DEFAULT_ACTIVATION.name
        )
        kind = DEFAULT_ACTIVATION
    return _FUNCTIONS[kind]()
