DEFAULT_N = 1000
DEFAULT_K = 10

# random inputs are drawn from [0, n * VALUE_RANGE_FACTOR)
VALUE_RANGE_FACTOR = 10

SMALL_SORT_LIMIT = 200

# "last" or "median3"
QUICKSELECT_PIVOT = "last"
PIVOT_STRATEGIES = ("last", "median3")

# non-increasing inputs at least this long trigger a RuntimeWarning with the "last" pivot
SORTED_WARN_MIN_N = 10_000

SAFE_LIMIT_MB = 650
