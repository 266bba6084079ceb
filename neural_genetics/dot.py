"""
Dot: an agent steered by its Brain toward a target.

Each tick an active dot:
  1. Asks its network for 4 decisions (left, up, right, down) from its position
  2. Rounds them to {0, 1} and turns opposing pairs into an acceleration
  3. Integrates velocity (capped at MAX_SPEED) and position
  4. Every RECORD_INTERVAL steps records (position -> decision) as training data
  5. Checks, in order: step budget, bounds, target reached

Once dead or successful a dot ignores further updates.
"""

import numpy as np
from enum import Enum
from typing import Optional

from .brain import Brain
from .config import ACCELERATION, MAX_SPEED, RECORD_INTERVAL, START_OFFSET
from .types import DataItem, DataPiece
from .vector import distance, limit, vector


class DotStatus(Enum):
    SUCCESS = "success"
    DEAD = "dead"
    CHAMPION = "champion"
    ACTIVE = "active"


class Dot:
    """A single agent with kinematic state and a terminal status."""

    def __init__(
        self,
        width: int,
        height: int,
        dot_size: int,
        min_target_distance: float,
        brain: Brain,
        champion: bool = False,
    ):
        self.width = width
        self.height = height
        self.dot_size = dot_size
        self.min_target_distance = min_target_distance
        self.brain = brain

        self.position = vector(width // 2, height - START_OFFSET)
        self.velocity = vector(0.0, 0.0)
        self.acceleration = vector(0.0, 0.0)

        self.dead = False
        self.success = False
        self.champion = champion

    @classmethod
    def copy_of(cls, other: "Dot", rng: Optional[np.random.Generator] = None) -> "Dot":
        """Fresh champion clone: same bounds, new (untrained-history) brain."""
        return cls(
            other.width,
            other.height,
            other.dot_size,
            other.min_target_distance,
            Brain.copy_of(other.brain, rng),
            champion=True,
        )

    @property
    def is_terminal(self) -> bool:
        return self.dead or self.success

    @property
    def status(self) -> DotStatus:
        if self.success:
            return DotStatus.SUCCESS
        if self.dead:
            return DotStatus.DEAD
        if self.champion:
            return DotStatus.CHAMPION
        return DotStatus.ACTIVE

    # ================================================================
    # SIMULATION TICK
    # ================================================================

    def update(self, target) -> None:
        if self.is_terminal:
            return

        self._move()

        half = self.dot_size / 2.0
        max_x = self.width - half
        max_y = self.height - half
        x, y = self.position

        if self.brain.step >= self.brain.size:
            self.dead = True
            return
        if x <= half or x >= max_x:
            self.dead = True
            return
        if y <= half or y >= max_y:
            self.dead = True
            return
        if distance(self.position, target) < self.min_target_distance:
            self.success = True

    def _move(self) -> None:
        prediction = self.brain.network.predict(DataPiece.vector(self.position))

        # Round half up: outputs live in (0, 1)
        go_left, go_up, go_right, go_down = np.floor(prediction + 0.5)

        self.acceleration = vector(
            (go_right - go_left) * ACCELERATION, (go_down - go_up) * ACCELERATION
        )
        self.velocity = limit(self.velocity + self.acceleration, MAX_SPEED)
        self.position = self.position + self.velocity

        self.brain.step += 1
        if self.brain.step % RECORD_INTERVAL == 0:
            self.brain.dataset.append(
                DataItem(DataPiece.vector(self.position), DataPiece.vector(prediction))
            )

    # ================================================================
    # FITNESS
    # ================================================================

    def fitness(self, target) -> float:
        """Successful dots are rewarded for few steps, others for proximity.

        Step is floored at 1 and distance at machine epsilon so the score
        stays finite.
        """
        if self.success:
            size = float(self.dot_size)
            step = float(max(self.brain.step, 1))
            return 1.0 / (size * size) + 10000.0 / (step * step)
        dist = max(distance(self.position, target), np.finfo(float).eps)
        return 1.0 / (dist * dist)

    def __repr__(self):
        x, y = self.position
        return f"Dot(status={self.status.value}, pos=({x:.1f}, {y:.1f}), step={self.brain.step})"
