"""Single-point crossover between two organisms."""

from typing import Tuple

import numpy as np

from .organism import Organism


def draw_cut_point(genome_length: int, rng: np.random.Generator) -> int:
    """Uniform cut point in ``[0, genome_length)``, drawn once per mating pair."""
    return int(rng.integers(0, genome_length))


def crossover(parent1: Organism, parent2: Organism, cut_point: int) -> Tuple[Organism, Organism]:
    """
    Exchange the genome tails of two parents.

    Args:
        parent1: First parent
        parent2: Second parent, same genome length as ``parent1``
        cut_point: Position in ``[0, genome_length]`` where the tails start

    Returns:
        ``(parent1[:cut] + parent2[cut:], parent2[:cut] + parent1[cut:])``
    """
    if parent1.genome_length != parent2.genome_length:
        raise ValueError(
            f"Parents must have the same genome length, got "
            f"{parent1.genome_length} and {parent2.genome_length}"
        )
    if not 0 <= cut_point <= parent1.genome_length:
        raise ValueError(
            f"Cut point must be within [0, {parent1.genome_length}], got {cut_point}"
        )

    offspring1 = np.concatenate([parent1.bits[:cut_point], parent2.bits[cut_point:]])
    offspring2 = np.concatenate([parent2.bits[:cut_point], parent1.bits[cut_point:]])

    return Organism(offspring1), Organism(offspring2)
