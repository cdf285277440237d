import warnings

import numpy as np
from numba import njit

from config import QUICKSELECT_PIVOT, PIVOT_STRATEGIES, SORTED_WARN_MIN_N
from heap_kernel import build_min_heap, replace_root
from partition_kernel import quickselect_kth_smallest
from sort_kernel import sort_desc


def as_input_array(values):
    if isinstance(values, np.ndarray):
        arr = values
    else:
        arr = np.asarray(values)

    if arr.ndim != 1:
        raise ValueError(f"values must be 1-D, got shape {arr.shape}")

    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)

    if arr.dtype.kind not in "iu":
        raise TypeError(f"values must be integers, got dtype {arr.dtype}")

    if arr.dtype == np.uint64 and arr.max() > np.iinfo(np.int64).max:
        raise ValueError("values exceed the int64 range")

    return np.ascontiguousarray(arr, dtype=np.int64)


def _check_k(k, n):
    if isinstance(k, (bool, np.bool_)) or not isinstance(k, (int, np.integer)):
        raise TypeError(f"k must be an integer, got {type(k).__name__}")
    k = int(k)
    if k < 1 or k > n:
        raise ValueError(f"k must satisfy 1 <= k <= n, got k={k}, n={n}")
    return k


@njit(fastmath=True)
def _heap_select(values, k):
    heap = values[:k].copy()
    build_min_heap(heap, k)
    for i in range(k, values.shape[0]):
        if values[i] > heap[0]:
            replace_root(heap, k, values[i])
    return heap


@njit(fastmath=True)
def _collect_top(values, threshold, k):
    # fewer than k values lie strictly above the k-th largest
    out = np.empty(k, dtype=np.int64)
    count = 0
    for i in range(values.shape[0]):
        if values[i] > threshold:
            out[count] = values[i]
            count += 1
    while count < k:
        out[count] = threshold
        count += 1
    return out


@njit(fastmath=True)
def _is_non_increasing(values):
    for i in range(values.shape[0] - 1):
        if values[i] < values[i + 1]:
            return False
    return True


def select_top_k_heap(values, k):
    """K largest values via a K-element min-heap, O(N log K)."""
    arr = as_input_array(values)
    k = _check_k(k, arr.shape[0])
    return sort_desc(_heap_select(arr, k))


def select_top_k_sort(values, k):
    """K largest values by sorting a full copy, O(N log N)."""
    arr = as_input_array(values)
    k = _check_k(k, arr.shape[0])
    return sort_desc(arr)[:k].copy()


def select_top_k_quickselect(values, k, pivot=None):
    """K largest values via quickselect on a copy, average O(N).

    The K-th largest value is found as the (N-K+1)-th smallest. Every value
    strictly above that threshold is collected from the input, and the
    remaining slots are filled with the threshold itself.
    """
    arr = as_input_array(values)
    n = arr.shape[0]
    k = _check_k(k, n)

    if pivot is None:
        pivot = QUICKSELECT_PIVOT
    if pivot not in PIVOT_STRATEGIES:
        raise ValueError(f"Unknown pivot strategy {pivot!r}, expected one of {PIVOT_STRATEGIES}")

    if pivot == "last" and n >= SORTED_WARN_MIN_N and arr[0] != arr[-1] and _is_non_increasing(arr):
        warnings.warn(
            "quickselect with the last-element pivot is quadratic on non-increasing input; "
            "use pivot='median3'",
            RuntimeWarning
        )

    scratch = arr.copy()
    threshold = quickselect_kth_smallest(scratch, 0, n - 1, n - k + 1, pivot == "median3")

    return sort_desc(_collect_top(arr, threshold, k))


SELECTORS = {
    "heap": select_top_k_heap,
    "sort": select_top_k_sort,
    "quickselect": select_top_k_quickselect,
}


def select_top_k(values, k, method="heap"):
    fn = SELECTORS.get(method)
    if fn is None:
        raise ValueError(f"Unknown method {method!r}, expected one of {tuple(SELECTORS)}")
    return fn(values, k)
