"""
Generational replacement and the simulation run loop.

This module drives the whole algorithm: it builds the initial population,
then alternates between checking for termination and breeding a new
generation from the fittest organisms until the optimum is found or the
generation limit is exceeded.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from onemax.core.config import SimulationConfig
from onemax.core.exceptions import ConfigurationError
from onemax.core.logging import get_logger, log_with_correlation
from .crossover import crossover, draw_cut_point
from .fitness import fitness, sort_descending
from .population import Population, initialize_population
from .selection import select_bottleneck_pairs

logger = get_logger(__name__)

OPTIMAL_FITNESS = 1.0


class RunState(Enum):
    """States of the run loop."""

    INITIALIZING = "initializing"
    EVALUATING = "evaluating"
    ADVANCING = "advancing"
    TERMINATED = "terminated"


@dataclass
class SimulationResult:
    """Outcome of a finished simulation."""

    population: Population
    generations: int
    best_fitness_history: List[float] = field(default_factory=list)

    @property
    def final_best_fitness(self) -> float:
        return fitness(self.population.best())

    @property
    def converged(self) -> bool:
        return self.final_best_fitness == OPTIMAL_FITNESS


def advance_generation(
    population: Population,
    bottleneck_size: int,
    rng: np.random.Generator
) -> None:
    """
    Breed one generation in place.

    The fittest ``bottleneck_size`` organisms are paired at random and each
    pair's two offspring overwrite the bottom of the population, filling it
    from the last slot inward. The top ``size - bottleneck_size`` slots are
    left alone. The population is not re-sorted here.

    Args:
        population: Population sorted by descending fitness
        bottleneck_size: Even number of organisms that mate
        rng: Random source
    """
    size = len(population)
    pairs = select_bottleneck_pairs(population, bottleneck_size, rng)

    for i, (p1, p2) in enumerate(pairs):
        cut_point = draw_cut_point(population.genome_length, rng)
        offspring1, offspring2 = crossover(population[p1], population[p2], cut_point)
        population[size - 2 - 2 * i] = offspring1
        population[size - 1 - 2 * i] = offspring2


class Simulation:
    """
    Run loop for one OneMax simulation.

    The simulation owns its population and its random generator for its whole
    lifetime. ``step`` performs a single state transition; ``run`` steps until
    the TERMINATED state is reached.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[np.random.Generator] = None,
        initial_population: Optional[Population] = None
    ):
        """
        Initialize simulation.

        Args:
            config: Simulation parameters (defaults to ``SimulationConfig()``)
            rng: Random source; created from ``config.seed`` when omitted
            initial_population: Starting population used instead of a random one

        Raises:
            ConfigurationError: If the parameters are invalid or the initial
                population does not match them
        """
        self.config = config or SimulationConfig()
        self.config.validate()

        if initial_population is not None:
            self._check_initial_population(initial_population)

        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.state = RunState.INITIALIZING
        self.generation = 0
        self.population: Optional[Population] = None
        self.best_fitness_history: List[float] = []
        self._initial_population = initial_population

    def _check_initial_population(self, population: Population) -> None:
        errors = []
        if len(population) != self.config.population_size:
            errors.append(
                f"Initial population has {len(population)} organisms, "
                f"expected {self.config.population_size}"
            )
        if population.genome_length != self.config.genome_length:
            errors.append(
                f"Initial population has genome length {population.genome_length}, "
                f"expected {self.config.genome_length}"
            )
        if errors:
            raise ConfigurationError("Initial population does not match configuration", details=errors)

    def best_fitness(self) -> float:
        return fitness(self.population.best())

    def should_terminate(self) -> bool:
        """Stop once the optimum is reached or the generation limit is exceeded."""
        return (
            self.best_fitness() == OPTIMAL_FITNESS
            or self.generation > self.config.max_generations
        )

    def step(self) -> RunState:
        """
        Perform one state transition.

        Returns:
            The state after the transition
        """
        if self.state is RunState.INITIALIZING:
            self._initialize()
            self.state = RunState.EVALUATING

        elif self.state is RunState.EVALUATING:
            if self.should_terminate():
                self.state = RunState.TERMINATED
                logger.info(
                    f"Simulation terminated at generation {self.generation} "
                    f"with best fitness {self.best_fitness():.4f}",
                    extra={
                        "extra_fields": {
                            "generation": self.generation,
                            "best_fitness": self.best_fitness(),
                            "converged": self.best_fitness() == OPTIMAL_FITNESS
                        }
                    }
                )
            else:
                self.state = RunState.ADVANCING

        elif self.state is RunState.ADVANCING:
            best = self.best_fitness()
            self.best_fitness_history.append(best)
            logger.debug(
                f"Generation {self.generation}: best fitness {best:.4f}",
                extra={"extra_fields": {"generation": self.generation, "best_fitness": best}}
            )
            advance_generation(self.population, self.config.bottleneck_size, self.rng)
            sort_descending(self.population)
            self.generation += 1
            self.state = RunState.EVALUATING

        return self.state

    def _initialize(self) -> None:
        if self._initial_population is not None:
            self.population = self._initial_population.copy()
        else:
            self.population = initialize_population(
                self.config.population_size, self.config.genome_length, self.rng
            )
        sort_descending(self.population)
        self.generation = 1

    @log_with_correlation
    def run(self) -> SimulationResult:
        """
        Run the simulation to completion.

        Returns:
            Final population, generation count and per-generation best fitness
        """
        logger.info(
            f"Starting simulation: genome_length={self.config.genome_length}, "
            f"population_size={self.config.population_size}, "
            f"bottleneck_size={self.config.bottleneck_size}, "
            f"max_generations={self.config.max_generations}"
        )
        while self.state is not RunState.TERMINATED:
            self.step()
        return self.result()

    def result(self) -> SimulationResult:
        if self.state is not RunState.TERMINATED:
            raise RuntimeError("Simulation has not terminated yet")
        return SimulationResult(
            population=self.population,
            generations=self.generation,
            best_fitness_history=list(self.best_fitness_history)
        )


def run_simulation(
    genome_length: int = 16,
    population_size: int = 40,
    bottleneck_size: int = 20,
    max_generations: int = 10,
    seed: Optional[int] = None,
    initial_population: Optional[Population] = None
) -> Tuple[Population, int]:
    """
    Run one simulation and return the final population and generation count.

    Raises:
        ConfigurationError: For odd population or bottleneck sizes, or a
            bottleneck larger than the population
    """
    config = SimulationConfig(
        genome_length=genome_length,
        population_size=population_size,
        bottleneck_size=bottleneck_size,
        max_generations=max_generations,
        seed=seed
    )
    result = Simulation(config, initial_population=initial_population).run()
    return result.population, result.generations
