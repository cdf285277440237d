import numpy as np
from config import DEFAULT_N, VALUE_RANGE_FACTOR


def generate_numbers(n=DEFAULT_N, value_range=None, seed=None):

    n = int(n)
    if n < 0:
        raise ValueError("n must be >= 0")

    if value_range is None:
        value_range = max(1, n * VALUE_RANGE_FACTOR)
    value_range = int(value_range)
    if value_range <= 0:
        raise ValueError("value_range must be positive")

    rng = np.random.default_rng(seed)
    return rng.integers(0, value_range, size=n, dtype=np.int64)
