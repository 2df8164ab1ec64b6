"""
Binary Min-Heap
===============

Priority queue over (distance, item) pairs for the state-space search.

- push: append, then sift up while the parent is larger
- pop: take the root, move the last element to the root, sift down
  swapping with the smaller child that violates the heap order

No decrease-key: the search pushes duplicates and drops stale entries on
extraction (lazy deletion). Ties are broken arbitrarily and items are
never compared, only distances.
"""

from typing import Any, List, Tuple


class MinHeap:
    """Array-backed binary heap keyed on distance."""

    def __init__(self):
        self._data: List[Tuple[int, Any]] = []
        self.max_size = 0

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def push(self, distance: int, item: Any) -> None:
        data = self._data
        data.append((distance, item))
        i = len(data) - 1
        while i > 0:
            parent = (i - 1) >> 1
            if data[parent][0] <= data[i][0]:
                break
            data[i], data[parent] = data[parent], data[i]
            i = parent
        if len(data) > self.max_size:
            self.max_size = len(data)

    def pop(self) -> Tuple[int, Any]:
        data = self._data
        if not data:
            raise IndexError("pop from empty heap")
        result = data[0]
        last = data.pop()
        if data:
            data[0] = last
            self._sift_down(0)
        return result

    def peek(self) -> Tuple[int, Any]:
        if not self._data:
            raise IndexError("peek at empty heap")
        return self._data[0]

    def _sift_down(self, i: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = (i << 1) + 1
            right = left + 1
            smallest = i
            if left < size and data[left][0] < data[smallest][0]:
                smallest = left
            if right < size and data[right][0] < data[smallest][0]:
                smallest = right
            if smallest == i:
                return
            data[i], data[smallest] = data[smallest], data[i]
            i = smallest
