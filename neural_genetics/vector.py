"""
2D vector helpers for agent kinematics.

Positions, velocities and accelerations are plain float numpy arrays of
shape (2,). These helpers keep the few geometric operations in one place.
"""

import numpy as np


def vector(x: float, y: float) -> np.ndarray:
    return np.array([x, y], dtype=float)


def limit(vec: np.ndarray, max_magnitude: float) -> np.ndarray:
    """Scale vec down to max_magnitude if it is longer. Returns a new array."""
    magnitude = float(np.linalg.norm(vec))
    if magnitude <= max_magnitude:
        return vec.copy()
    return vec / magnitude * max_magnitude


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return float(np.linalg.norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)))
