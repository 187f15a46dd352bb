"""
Random number generation utilities.

All board randomness goes through a Mulberry32PRNG owned by the caller.
Python's random and NumPy's random must not be used for generation, otherwise
boards stop matching the seeds shared by the JavaScript generator.
"""

from typing import List, Sequence, TypeVar, Union

from ..core.mulberry32_prng import Mulberry32PRNG
from ..core.seed_codec import seed_string_to_number

T = TypeVar("T")


def create_prng(seed: Union[str, int]) -> Mulberry32PRNG:
    """
    Create a PRNG for a seed string or a numeric seed.

    Args:
        seed: Seed string (hashed first) or 32-bit integer

    Returns:
        Fresh Mulberry32PRNG instance
    """
    if isinstance(seed, str):
        seed = seed_string_to_number(seed)
    return Mulberry32PRNG(seed)


def shuffle(sequence: Sequence[T], prng: Mulberry32PRNG) -> List[T]:
    """
    Fisher-Yates shuffle returning a new list.

    Walks from the last index down to 1, so a sequence of length n
    consumes exactly n - 1 draws. The input is left untouched.
    """
    result = list(sequence)
    for i in range(len(result) - 1, 0, -1):
        j = prng.randint(i + 1)
        result[i], result[j] = result[j], result[i]
    return result
