"""
Selection and mutation: how one generation's experience seeds the next.

  - proportional_select: fitness-proportionate (roulette wheel) draw
  - random_item:         a freshly randomised (position -> decision) example
  - mutate_dataset:      keep each example, or swap it for a random one
"""

import numpy as np
from typing import Sequence

from .config import LAYER_SIZES
from .types import DataItem, DataPiece, Dataset


def proportional_select(fitnesses: Sequence[float], rng: np.random.Generator) -> int:
    """Index chosen with probability proportional to its fitness.

    Scans the running sum until it reaches a uniform threshold in
    [0, sum]. Falls back to the last index if rounding leaves the running
    sum just short of the threshold.
    """
    values = np.asarray(fitnesses, dtype=float)
    if values.size == 0:
        raise ValueError("Cannot select from an empty population.")
    threshold = rng.random() * float(values.sum())
    running = np.cumsum(values)
    index = int(np.searchsorted(running, threshold, side="left"))
    return min(index, values.size - 1)


def random_item(width: float, height: float, rng: np.random.Generator) -> DataItem:
    """Uniform position inside the bounds mapped to random binary decisions."""
    position = rng.uniform(0.0, [width, height])
    decision = rng.integers(0, 2, size=LAYER_SIZES[-1]).astype(float)
    return DataItem(DataPiece.vector(position), DataPiece.vector(decision))


def mutate_dataset(
    dataset: Dataset,
    mutation_ratio: float,
    width: float,
    height: float,
    rng: np.random.Generator,
) -> Dataset:
    """A new dataset of the same length.

    Each example survives with probability 1 - mutation_ratio and is
    otherwise replaced by random_item().
    """
    mutated = Dataset()
    for item in dataset:
        if rng.random() >= mutation_ratio:
            mutated.append(item)
        else:
            mutated.append(random_item(width, height, rng))
    return mutated
