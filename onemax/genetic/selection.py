"""
Truncation selection and random mate pairing.

Selection pressure comes only from truncation: the fittest ``bottleneck_size``
organisms mate, and who mates with whom is decided by a uniform shuffle.
"""

from typing import List, MutableSequence, Tuple

import numpy as np

from .population import Population


def shuffle_indices(indices: MutableSequence[int], rng: np.random.Generator) -> None:
    """
    Shuffle a list in place (modern Fisher-Yates).

    Draws one integer per position from the end of the list down to index 1,
    so the random draw sequence depends only on the list length.
    """
    for i in range(len(indices) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        indices[i], indices[j] = indices[j], indices[i]


def select_bottleneck_pairs(
    population: Population,
    bottleneck_size: int,
    rng: np.random.Generator
) -> List[Tuple[int, int]]:
    """
    Pair up the fittest organisms for mating.

    The population must already be sorted by descending fitness; the
    bottleneck is simply the index range ``[0, bottleneck_size)``.

    Args:
        population: Sorted population
        bottleneck_size: Even number of top slots that mate
        rng: Random source

    Returns:
        ``bottleneck_size // 2`` index pairs covering every bottleneck slot once
    """
    if bottleneck_size % 2 or not 0 <= bottleneck_size <= len(population):
        raise ValueError(
            f"Bottleneck size must be even and within [0, {len(population)}], "
            f"got {bottleneck_size}"
        )

    candidates = list(range(bottleneck_size))
    shuffle_indices(candidates, rng)

    return [(candidates[2 * i], candidates[2 * i + 1]) for i in range(bottleneck_size // 2)]
