from typing import List

import numpy as np

from sortscope.errors import InvalidRangeError

VALUE_MIN = int(np.iinfo(np.int64).min)
VALUE_MAX = int(np.iinfo(np.int64).max)


def random_array(
    length: int, low: int, high: int, seed: int | None = None
) -> List[int]:
    """
    Return ``length`` random integers drawn uniformly from [low, high].
    Without a seed every call draws a fresh array.
    """
    if length < 1:
        raise InvalidRangeError(f"Array length must be positive, got {length}.")
    if low > high:
        raise InvalidRangeError(
            f"Empty value range: minimum {low} is greater than maximum {high}."
        )
    if low < VALUE_MIN or high > VALUE_MAX:
        raise InvalidRangeError(
            f"Values must lie between {VALUE_MIN} and {VALUE_MAX}, got [{low}, {high}]."
        )
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=length, endpoint=True).tolist()
