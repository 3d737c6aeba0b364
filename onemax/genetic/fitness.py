"""
Fitness evaluation and fitness ordering.

Fitness is never stored on an organism; it is recomputed from the bits every
time it is needed, so it can not go stale.
"""

from functools import cmp_to_key
from typing import TYPE_CHECKING

from .organism import Organism

if TYPE_CHECKING:
    from .population import Population


def fitness(organism: Organism) -> float:
    """
    Proportion of set bits in the organism.

    Args:
        organism: Organism to evaluate

    Returns:
        Value in [0, 1]; 1.0 only for an all-ones genome
    """
    return organism.count_ones() / organism.genome_length


def compare_fitness(a: Organism, b: Organism) -> int:
    """Comparator placing the fitter organism first (sign of fitness(b) - fitness(a))."""
    diff = fitness(b) - fitness(a)
    if diff == 0:
        return 0
    return 1 if diff > 0 else -1


fitness_key = cmp_to_key(compare_fitness)


def sort_descending(population: "Population") -> None:
    """
    Reorder the population in place by non-increasing fitness.

    Equal-fitness organisms may end up in any relative order.
    """
    population.reorder(sorted(population, key=fitness_key))


def is_sorted_descending(population: "Population") -> bool:
    """Check that fitness never increases from one slot to the next."""
    scores = population.fitnesses()
    return all(scores[i] >= scores[i + 1] for i in range(len(scores) - 1))
