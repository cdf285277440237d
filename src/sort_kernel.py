import numpy as np
from numba import njit
from config import SMALL_SORT_LIMIT


@njit(fastmath=True)
def _sort_small_desc(arr, n):
    for i in range(n - 1):
        for j in range(i + 1, n):
            if arr[j] > arr[i]:
                t = arr[i]
                arr[i] = arr[j]
                arr[j] = t


def sort_desc(buf):
    src = np.asarray(buf)
    if src.ndim != 1:
        raise ValueError("sort_desc expects a 1-D buffer")
    if src.size and src.dtype.kind not in "iu":
        raise TypeError(f"sort_desc expects an integer buffer, got dtype {src.dtype}")

    out = np.array(src, dtype=np.int64)
    n = out.shape[0]
    if n <= SMALL_SORT_LIMIT:
        _sort_small_desc(out, n)
        return out

    return np.sort(out)[::-1].copy()
