#!/usr/bin/env python3
"""
Demo: Headless Population Run

Drives a population the way a display loop would: once per tick, call
natural_selection() when every dot is terminal, otherwise update().

Prints per-generation counters: successes, deaths, and the fewest steps
any successful dot needed.
"""

import sys
import os
import logging
import numpy as np

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from neural_genetics import Population, PopulationConfig
from neural_genetics.vector import vector


def run(generations: int = 10, seed: int = 0) -> Population:
    config = PopulationConfig(population_size=40)
    population = Population(config, np.random.default_rng(seed))
    target = vector(50.0, 50.0)

    print("-" * 64)
    print(f"  POPULATION: {config.population_size} dots, "
          f"{config.width}x{config.height}, budget {config.brain_size} steps")
    print(f"  TARGET: ({target[0]:.0f}, {target[1]:.0f})")
    print("-" * 64)
    population.dots[0].brain.network.print_summary()
    print()
    print(f"  {'gen':>4s}  {'success':>8s}  {'dead':>6s}  {'min step':>9s}  {'best fit':>12s}")
    print(f"  {'-' * 48}")

    while population.generation <= generations:
        if population.all_dead():
            stats = population.get_stats()
            best = float(np.max(population.fitnesses(target)))
            print(f"  {stats['generation']:4d}  {stats['success']:8d}  "
                  f"{stats['dead']:6d}  {population.min_step:9d}  {best:12.6g}")
            population.natural_selection(target)
        else:
            population.update(target)

    print()
    return population


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    generations = int(sys.argv[1]) if len(sys.argv) > 1 else 10
    run(generations)
