"""
Brain: a network plus the dataset its agent has lived through.

A brain is (re)trained from its dataset the moment it is built. There is no
weight-copy path: a copied brain gets fresh random weights, an empty dataset
and a reset step counter.
"""

import numpy as np
from typing import Optional

from .config import LAYER_SIZES, BrainConfig
from .layers import Dense
from .network import NeuralNetwork
from .types import Dataset


def build_network(config: BrainConfig, rng: np.random.Generator) -> NeuralNetwork:
    """The fixed 2 -> 4 -> 4 -> 4 sigmoid stack."""
    layers = [
        Dense(inputs, outputs, rng=rng)
        for inputs, outputs in zip(LAYER_SIZES[:-1], LAYER_SIZES[1:])
    ]
    return NeuralNetwork(
        layers,
        learning_rate=config.learning_rate,
        epochs=config.epochs,
        batch_size=config.batch_size,
        rng=rng,
    )


class Brain:
    """Owns one network, one dataset and a step counter."""

    def __init__(
        self,
        size: int,
        dataset: Optional[Dataset] = None,
        config: Optional[BrainConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.size = size  # step budget
        self.step = 0
        self.config = config if config is not None else BrainConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.dataset = dataset if dataset is not None else Dataset()
        self.network = build_network(self.config, self.rng)
        self.last_error = self.network.train(self.dataset)

    @classmethod
    def copy_of(
        cls, other: "Brain", rng: Optional[np.random.Generator] = None
    ) -> "Brain":
        """Same budget and hyperparameters; nothing learned is carried over."""
        return cls(other.size, None, other.config, rng if rng is not None else other.rng)

    def __repr__(self):
        return f"Brain(step={self.step}/{self.size}, examples={len(self.dataset)})"
