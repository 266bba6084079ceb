"""
Population: orchestrates the generational loop over a set of dots.

IMPORTANT: the population does NOT decide how dots move or learn.
That lives in Dot and Brain. The population's job is:

  1. Advance every dot once per tick (update)
  2. Report when the whole generation is terminal (all_dead)
  3. Score the generation and pick a champion (natural_selection)
  4. Draw a breeding reference by fitness-proportionate selection
  5. Build the next generation: a champion clone plus brains retrained on
     mutated copies of the reference's dataset

An external driver calls update() each tick, or natural_selection() once
all_dead() is true.
"""

import logging
import numpy as np
from typing import List, Optional

from .brain import Brain
from .config import PopulationConfig
from .dot import Dot
from .selection import mutate_dataset, proportional_select

logger = logging.getLogger(__name__)


class Population:
    """One generation of dots plus the generation counters."""

    def __init__(
        self,
        config: Optional[PopulationConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config if config is not None else PopulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.generation: int = 1
        self.min_step: int = self.config.brain_size
        self.dots: List[Dot] = self._generate()

    def _new_dot(self, brain: Brain) -> Dot:
        cfg = self.config
        return Dot(cfg.width, cfg.height, cfg.dot_size, cfg.min_target_distance, brain)

    def _generate(self) -> List[Dot]:
        cfg = self.config
        return [
            self._new_dot(Brain(cfg.brain_size, None, cfg.brain, self.rng))
            for _ in range(cfg.population_size)
        ]

    @property
    def champion(self) -> Dot:
        """Slot 0: the previous generation's champion clone."""
        return self.dots[0]

    # ================================================================
    # PER-TICK
    # ================================================================

    def update(self, target) -> None:
        for dot in self.dots:
            dot.update(target)

    def all_dead(self) -> bool:
        return all(dot.is_terminal for dot in self.dots)

    def fitnesses(self, target) -> np.ndarray:
        return np.array([dot.fitness(target) for dot in self.dots])

    # ================================================================
    # GENERATIONAL TRANSITION
    # ================================================================

    def natural_selection(self, target) -> None:
        """Replace the whole generation with its offspring."""
        if not self.all_dead():
            raise RuntimeError("natural_selection requires every dot to be terminal")

        fitnesses = self.fitnesses(target)
        champion_index = int(np.argmax(fitnesses))
        champion = self.dots[champion_index]

        min_step = self.dots[0].brain.size
        for dot in self.dots:
            if dot.success:
                min_step = min(min_step, dot.brain.step)
        self.min_step = min_step

        reference = self.dots[proportional_select(fitnesses, self.rng)]

        cfg = self.config
        next_dots = [Dot.copy_of(champion, self.rng)]
        for _ in range(1, len(self.dots)):
            dataset = mutate_dataset(
                reference.brain.dataset,
                cfg.mutation_ratio,
                cfg.width,
                cfg.height,
                self.rng,
            )
            next_dots.append(
                self._new_dot(Brain(cfg.brain_size, dataset, cfg.brain, self.rng))
            )

        logger.info(
            "Generation %d: champion fitness %.6g, successes %d, min step %d, "
            "reference examples %d",
            self.generation,
            fitnesses[champion_index],
            sum(dot.success for dot in self.dots),
            self.min_step,
            len(reference.brain.dataset),
        )

        self.dots = next_dots
        self.generation += 1

    def get_stats(self) -> dict:
        """Counters for display and diagnostics."""
        return {
            "generation": self.generation,
            "min_step": self.min_step,
            "size": len(self.dots),
            "active": sum(not dot.is_terminal for dot in self.dots),
            "dead": sum(dot.dead for dot in self.dots),
            "success": sum(dot.success for dot in self.dots),
        }
