"""
Construction-time configuration for brains and populations.

Everything here is fixed once a Population (or Brain) is built.
"""

from dataclasses import dataclass, field

# Network topology: 2 inputs (x, y) -> 4 -> 4 -> 4 decisions (left, up, right, down)
LAYER_SIZES = (2, 4, 4, 4)

# Kinematics
MAX_SPEED = 5.0
ACCELERATION = 50.0
START_OFFSET = 10.0  # dots spawn at (width / 2, height - START_OFFSET)

# A training example is recorded every RECORD_INTERVAL steps
RECORD_INTERVAL = 75


@dataclass(frozen=True)
class BrainConfig:
    """Training hyperparameters for every brain's network."""

    learning_rate: float = 0.5
    epochs: int = 30
    batch_size: int = 16

    def __post_init__(self):
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if self.epochs <= 0:
            raise ValueError("epochs must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")


@dataclass(frozen=True)
class PopulationConfig:
    """Simulation bounds, agent parameters and evolution settings."""

    population_size: int = 80
    width: int = 700
    height: int = 700
    dot_size: int = 10
    brain_size: int = 300  # step budget per dot
    min_target_distance: float = 5.0
    mutation_ratio: float = 0.01
    brain: BrainConfig = field(default_factory=BrainConfig)

    def __post_init__(self):
        for name in ("population_size", "width", "height", "dot_size", "brain_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.min_target_distance < 0:
            raise ValueError("min_target_distance must be non-negative")
        if not 0.0 <= self.mutation_ratio <= 1.0:
            raise ValueError("mutation_ratio must be within [0, 1]")
