"""
Population container and random initialization.

The population is a fixed-size, ordered list of organisms. Its size and the
genome length of its members never change after construction; only whole
slots are replaced.
"""

from typing import Iterable, Iterator, List

import numpy as np

from onemax.core.logging import get_logger
from .organism import Organism
from .fitness import fitness

logger = get_logger(__name__)


class Population:
    """
    Fixed-size ordered collection of organisms.

    Positional order carries meaning: after ``sort_descending`` slot 0 holds
    the fittest organism and the last ``bottleneck_size`` slots hold the ones
    that will be replaced next generation.
    """

    def __init__(self, organisms: Iterable[Organism]):
        """
        Initialize population.

        Args:
            organisms: Members, all of the same genome length

        Raises:
            ValueError: If the population is empty or genome lengths differ
        """
        members = list(organisms)
        if not members:
            raise ValueError("Population must contain at least one organism")

        for i, organism in enumerate(members):
            if not isinstance(organism, Organism):
                raise ValueError(f"Population member {i} is not an Organism: {organism!r}")

        genome_length = members[0].genome_length
        for i, organism in enumerate(members):
            if organism.genome_length != genome_length:
                raise ValueError(
                    f"Population member {i} has genome length {organism.genome_length}, "
                    f"expected {genome_length}"
                )

        self._members: List[Organism] = members
        self._genome_length = genome_length

    @classmethod
    def from_strings(cls, texts: Iterable[str]) -> "Population":
        """Build a population from bit strings such as ``["1111", "0000"]``."""
        return cls(Organism.from_string(text) for text in texts)

    @property
    def size(self) -> int:
        return len(self._members)

    @property
    def genome_length(self) -> int:
        return self._genome_length

    def best(self) -> Organism:
        """Organism in slot 0, the fittest one when the population is sorted."""
        return self._members[0]

    def fitnesses(self) -> List[float]:
        return [fitness(organism) for organism in self._members]

    def reorder(self, organisms: Iterable[Organism]) -> None:
        """Replace the slot order with a permutation of the current members."""
        reordered = list(organisms)
        if len(reordered) != len(self._members):
            raise ValueError("Reordering must keep the population size")
        self._members[:] = reordered

    def copy(self) -> "Population":
        """Shallow copy; organisms are immutable so sharing them is safe."""
        return Population(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Organism]:
        return iter(self._members)

    def __getitem__(self, index: int) -> Organism:
        return self._members[index]

    def __setitem__(self, index: int, organism: Organism) -> None:
        if not isinstance(organism, Organism):
            raise ValueError(f"Population slots hold Organisms, got {organism!r}")
        if organism.genome_length != self._genome_length:
            raise ValueError(
                f"Organism has genome length {organism.genome_length}, "
                f"expected {self._genome_length}"
            )
        self._members[index] = organism

    def __eq__(self, other) -> bool:
        if not isinstance(other, Population):
            return NotImplemented
        return self._members == other._members

    def __repr__(self) -> str:
        return f"Population(size={self.size}, genome_length={self.genome_length})"


def initialize_population(size: int, genome_length: int, rng: np.random.Generator) -> Population:
    """
    Create a population of uniformly random organisms.

    Args:
        size: Number of organisms
        genome_length: Bits per organism
        rng: Random source shared by the whole run

    Returns:
        Unsorted random population
    """
    logger.info(f"Initializing population of size {size} with genome length {genome_length}")
    return Population(Organism.random(genome_length, rng) for _ in range(size))
