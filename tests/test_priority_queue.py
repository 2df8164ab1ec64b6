"""
Tests for the binary min-heap.

Run with: pytest tests/test_priority_queue.py -v
"""

import random
import pytest
import sys
from pathlib import Path

# Ensure the package is in path
sys.path.insert(0, str(Path(__file__).parent.parent))

from keymaze.simulation.priority_queue import MinHeap


def test_pops_in_distance_order():
    heap = MinHeap()
    for d in [5, 3, 9, 1, 4, 1, 8]:
        heap.push(d, f"s{d}")

    popped = [heap.pop()[0] for _ in range(len(heap))]
    assert popped == [1, 1, 3, 4, 5, 8, 9]
    assert not heap


def test_randomized_against_sorted():
    rng = random.Random(7)
    values = [rng.randint(0, 50) for _ in range(300)]
    heap = MinHeap()
    for v in values:
        heap.push(v, None)
    assert [heap.pop()[0] for _ in values] == sorted(values)


def test_interleaved_push_pop():
    heap = MinHeap()
    heap.push(10, 'a')
    heap.push(2, 'b')
    assert heap.pop() == (2, 'b')
    heap.push(1, 'c')
    heap.push(7, 'd')
    assert heap.pop() == (1, 'c')
    assert heap.peek() == (7, 'd')
    assert len(heap) == 2


def test_items_are_never_compared():
    heap = MinHeap()
    # dicts are unorderable; equal distances must not fall back to them
    for _ in range(10):
        heap.push(3, {})
    heap.push(1, {'first': True})
    assert heap.pop() == (1, {'first': True})


def test_empty_heap_errors():
    heap = MinHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_max_size_tracks_high_water_mark():
    heap = MinHeap()
    for d in range(5):
        heap.push(d, d)
    heap.pop()
    heap.pop()
    heap.push(0, 0)
    assert heap.max_size == 5
