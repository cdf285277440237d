from numba import njit


@njit(fastmath=True)
def heapify_down(heap, size, index):
    while True:
        smallest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < size and heap[left] < heap[smallest]:
            smallest = left
        if right < size and heap[right] < heap[smallest]:
            smallest = right
        if smallest == index:
            return
        t = heap[index]
        heap[index] = heap[smallest]
        heap[smallest] = t
        index = smallest


@njit(fastmath=True)
def build_min_heap(heap, size):
    for i in range(size // 2 - 1, -1, -1):
        heapify_down(heap, size, i)


@njit(fastmath=True)
def replace_root(heap, size, value):
    heap[0] = value
    heapify_down(heap, size, 0)


@njit(fastmath=True)
def is_min_heap(heap, size):
    for i in range(size):
        left = 2 * i + 1
        right = left + 1
        if left < size and heap[left] < heap[i]:
            return False
        if right < size and heap[right] < heap[i]:
            return False
    return True
