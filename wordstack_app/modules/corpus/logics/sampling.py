"""
Sampling helpers shared by the practice engines.
Pure functions over sequences, using the process-wide ``random`` generator.
"""

import random
from typing import List, Sequence, TypeVar

T = TypeVar('T')


class EmptyInputError(ValueError):
    """Raised when a random element is requested from an empty sequence."""


def shuffle_copy(source: Sequence[T]) -> List[T]:
    """Return a uniformly shuffled copy of ``source``; ``source`` is untouched."""
    shuffled = list(source)
    if len(shuffled) <= 1:
        return shuffled
    # random.shuffle is an in-place Fisher-Yates
    random.shuffle(shuffled)
    return shuffled


def random_element(source: Sequence[T]) -> T:
    """Return one element of ``source`` chosen uniformly at random."""
    if len(source) == 0:
        raise EmptyInputError("cannot pick a random element from an empty sequence")
    return random.choice(source)
