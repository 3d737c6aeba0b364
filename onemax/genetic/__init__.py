"""
Genetic algorithm components: organisms, fitness, selection, crossover and the run loop.
"""

from .organism import Organism
from .fitness import fitness, compare_fitness, sort_descending, is_sorted_descending
from .population import Population, initialize_population
from .selection import shuffle_indices, select_bottleneck_pairs
from .crossover import crossover, draw_cut_point
from .simulation import (
    RunState,
    Simulation,
    SimulationResult,
    advance_generation,
    run_simulation
)

__all__ = [
    "Organism",
    "fitness",
    "compare_fitness",
    "sort_descending",
    "is_sorted_descending",
    "Population",
    "initialize_population",
    "shuffle_indices",
    "select_bottleneck_pairs",
    "crossover",
    "draw_cut_point",
    "RunState",
    "Simulation",
    "SimulationResult",
    "advance_generation",
    "run_simulation"
]
