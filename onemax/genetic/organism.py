"""
Organism representation for the OneMax genetic algorithm.

An organism is a fixed-length word of bits. Instances are immutable values:
the algorithm never flips individual bits, it only replaces whole organisms
in population slots.
"""

from typing import Iterable, Iterator, Union

import numpy as np


class Organism:
    """
    Fixed-length binary genome.

    The bits live in a read-only ``uint8`` array, so two organisms with the
    same bits are equal and hash alike regardless of how they were built.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Union[Iterable[int], np.ndarray]):
        """
        Initialize organism from a sequence of 0/1 values.

        Args:
            bits: Bit values, any iterable of integers in {0, 1}

        Raises:
            ValueError: If the genome is empty, not one-dimensional, or holds
                values other than 0 and 1
        """
        array = np.array(list(bits) if not isinstance(bits, np.ndarray) else bits)
        if array.ndim != 1 or array.size == 0:
            raise ValueError("Organism must be a non-empty one-dimensional bit sequence")
        if not np.isin(array, (0, 1)).all():
            raise ValueError(f"Organism bits must be 0 or 1, got {array.tolist()}")

        array = array.astype(np.uint8)
        array.setflags(write=False)
        self._bits = array

    @classmethod
    def random(cls, genome_length: int, rng: np.random.Generator) -> "Organism":
        """
        Create an organism with independent, uniformly drawn bits.

        Args:
            genome_length: Number of bits
            rng: Random source, consumed ``genome_length`` draws deep

        Returns:
            Randomly generated organism
        """
        return cls(rng.integers(0, 2, size=genome_length, dtype=np.uint8))

    @classmethod
    def from_string(cls, text: str) -> "Organism":
        """Create an organism from a string such as ``"1010"``."""
        if not text or set(text) - {"0", "1"}:
            raise ValueError(f"Organism string must contain only '0' and '1', got {text!r}")
        return cls(int(ch) for ch in text)

    @property
    def bits(self) -> np.ndarray:
        """Read-only view of the bits."""
        return self._bits

    @property
    def genome_length(self) -> int:
        return int(self._bits.size)

    def count_ones(self) -> int:
        return int(np.count_nonzero(self._bits))

    def __len__(self) -> int:
        return int(self._bits.size)

    def __iter__(self) -> Iterator[int]:
        return (int(bit) for bit in self._bits)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._bits[index]
        return int(self._bits[index])

    def __str__(self) -> str:
        return "".join(str(int(bit)) for bit in self._bits)

    def __repr__(self) -> str:
        return f"Organism('{self}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Organism):
            return NotImplemented
        return np.array_equal(self._bits, other._bits)

    def __hash__(self) -> int:
        return hash(self._bits.tobytes())
