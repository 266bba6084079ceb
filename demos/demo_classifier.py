#!/usr/bin/env python3
"""
Demo: Quadrant Classifier

Trains a small Dense network to name which quadrant of the unit square a
point falls in, with one-hot targets built by classifier_output().
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from neural_genetics import (
    DataItem,
    DataPiece,
    Dataset,
    Dense,
    NeuralNetwork,
    classifier_output,
)


def quadrant(x: float, y: float) -> int:
    return int(x >= 0.5) + 2 * int(y >= 0.5)


def make_dataset(n: int, rng: np.random.Generator) -> Dataset:
    points = rng.uniform(0.0, 1.0, size=(n, 2))
    return Dataset([
        DataItem(DataPiece.vector(p), classifier_output(4, quadrant(*p)))
        for p in points
    ])


def main() -> bool:
    rng = np.random.default_rng(0)
    train = make_dataset(400, rng)
    test = make_dataset(100, rng)

    network = NeuralNetwork(
        [Dense(2, 8, rng=rng), Dense(8, 4, rng=rng)],
        learning_rate=0.5,
        epochs=200,
        batch_size=16,
        rng=rng,
    )
    network.print_summary()

    error = network.train(train)
    correct = sum(
        int(np.argmax(network.predict(item.input)) == np.argmax(item.output.body))
        for item in test
    )
    accuracy = correct / len(test)

    print(f"\n  Final epoch error: {error:.4f}")
    print(f"  Test accuracy:     {accuracy:.2%}")
    passed = accuracy > 0.8
    print(f"  STATUS: {'PASS' if passed else 'FAIL'}")
    return passed


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
