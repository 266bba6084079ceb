"""
neural_genetics: agents with small neural brains evolving toward a target.

Each Dot is steered by a feed-forward network trained from scratch with
mini-batch SGD. Generations are scored, a champion is cloned, and the
trajectories of a fitness-selected dot are mutated into training data for
the next generation's brains.
"""

from .types import (
    DataSizeKind,
    DataSize,
    DataPiece,
    DataItem,
    Dataset,
    classifier_output,
)
from .activation import ActivationKind, ActivationFunction, Sigmoid, get_activation_function
from .layers import LayerKind, Neuron, Dense, Layer
from .network import NeuralNetwork
from .config import BrainConfig, PopulationConfig
from .brain import Brain, build_network
from .dot import Dot, DotStatus
from .selection import proportional_select, random_item, mutate_dataset
from .population import Population

__all__ = [
    "DataSizeKind",
    "DataSize",
    "DataPiece",
    "DataItem",
    "Dataset",
    "classifier_output",
    "ActivationKind",
    "ActivationFunction",
    "Sigmoid",
    "get_activation_function",
    "LayerKind",
    "Neuron",
    "Dense",
    "Layer",
    "NeuralNetwork",
    "BrainConfig",
    "PopulationConfig",
    "Brain",
    "build_network",
    "Dot",
    "DotStatus",
    "proportional_select",
    "random_item",
    "mutate_dataset",
    "Population",
]
