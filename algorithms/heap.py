"""
heap.py — Heap Sort
====================
Build a max-heap bottom-up with a recursive sift-down, then repeatedly
move the root to the end of the shrinking heap.

Every parent/child comparison is shown separately, so a node with two
children costs two delays before any swap happens.
"""

from typing import Generator, List

from barchart import RenderSurface
from algorithms.step import Step
from algorithms.viz import Viz


PSEUDOCODE: List[str] = [
    "def heapify(a, n, i):",                        # 0
    "    largest ← i;  l ← 2i+1;  r ← 2i+2",        # 1
    "    if l < n and a[l] > a[largest]: largest ← l",  # 2
    "    if r < n and a[r] > a[largest]: largest ← r",  # 3
    "    if largest ≠ i:",                          # 4
    "        swap(a[i], a[largest]); heapify(a, n, largest)",  # 5
    "def heap_sort(a):",                            # 6
    "    for i in n/2-1 .. 0: heapify(a, n, i)",    # 7
    "    for i in n-1 .. 1:",                       # 8
    "        swap(a[0], a[i]); mark a[i] sorted",   # 9
    "        heapify(a, i, 0)",                     # 10
    "    mark a[0] sorted",                         # 11
]


def heap_sort(values: List[int], surface: RenderSurface) -> Generator[Step, None, None]:
    viz = Viz(values, surface)
    n = len(values)

    def heapify(size: int, i: int) -> Generator[Step, None, None]:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2

        if left < size:
            viz.mark_compare(largest, left)
            viz.at(2, f"Compare {values[largest]} with left child {values[left]}.")
            yield viz.delay()
            viz.unmark_compare(largest, left)
            if values[left] > values[largest]:
                largest = left
        if right < size:
            viz.mark_compare(largest, right)
            viz.at(3, f"Compare {values[largest]} with right child {values[right]}.")
            yield viz.delay()
            viz.unmark_compare(largest, right)
            if values[right] > values[largest]:
                largest = right
        if largest != i:
            viz.at(5, f"Child {values[largest]} is larger: swap it up and keep sifting down.")
            yield from viz.swap(i, largest)
            yield from heapify(size, largest)

    for i in range(n // 2 - 1, -1, -1):
        yield from heapify(n, i)

    for i in range(n - 1, 0, -1):
        viz.at(9, f"Move the heap maximum {values[0]} to slot {i}.")
        yield from viz.swap(0, i)
        viz.mark_sorted(i)
        yield from heapify(i, 0)

    viz.mark_sorted(0)
    yield viz.finish("The heap is empty: the array is sorted.", line=11)
