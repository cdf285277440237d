from numba import njit


@njit(fastmath=True)
def _swap(arr, i, j):
    t = arr[i]
    arr[i] = arr[j]
    arr[j] = t


@njit(fastmath=True)
def partition(arr, low, high):
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] <= pivot:
            i += 1
            _swap(arr, i, j)
    _swap(arr, i + 1, high)
    return i + 1


@njit(fastmath=True)
def median_of_three(arr, low, high):
    mid = low + (high - low) // 2
    if arr[mid] < arr[low]:
        _swap(arr, mid, low)
    if arr[high] < arr[low]:
        _swap(arr, high, low)
    if arr[mid] < arr[high]:
        _swap(arr, mid, high)


@njit(fastmath=True)
def quickselect_kth_smallest(arr, low, high, k, median3=False):
    target = k - 1
    while low <= high:
        if median3 and high - low >= 2:
            median_of_three(arr, low, high)
        p = partition(arr, low, high)
        if p == target:
            return arr[p]
        elif p < target:
            low = p + 1
        else:
            high = p - 1
    raise ValueError("k is outside the partitioned range")
