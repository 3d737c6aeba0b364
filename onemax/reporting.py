"""
Plain-text rendering of populations and simulation results.

Nothing here feeds back into the algorithm; these helpers only turn a
population snapshot or a finished run into human-readable lines.
"""

from typing import List

from .genetic.fitness import fitness
from .genetic.organism import Organism
from .genetic.population import Population
from .genetic.simulation import SimulationResult


def format_organism(organism: Organism) -> str:
    """Bit string followed by the fitness, e.g. ``1010 f=0.5000``."""
    return f"{organism} f={fitness(organism):.4f}"


def format_population(population: Population) -> str:
    """One line per organism, in slot order."""
    return "\n".join(format_organism(organism) for organism in population)


def summary_lines(result: SimulationResult) -> List[str]:
    lines = [f"Best fitness: {best:.4f}" for best in result.best_fitness_history]
    lines.append(f"Generations: {result.generations}")
    return lines


def format_summary(result: SimulationResult) -> str:
    """Best fitness of every bred generation, then the final generation count."""
    return "\n".join(summary_lines(result))


def render_report(result: SimulationResult) -> str:
    """
    Full run report.

    Per-generation best fitness lines come first, then the final population,
    then the generation count.
    """
    lines = summary_lines(result)
    lines.insert(-1, format_population(result.population))
    return "\n".join(lines)
