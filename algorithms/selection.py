"""
selection.py — Selection Sort
==============================
For each position, scan the unsorted suffix for the minimum, then swap
it into place (at most one swap per outer iteration).  The position is
final as soon as the swap is done.
"""

from typing import Generator, List

from barchart import RenderSurface
from algorithms.step import Step
from algorithms.viz import Viz


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in 0 .. n-1:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            if a[j] < a[min]: min ← j",        # 4
    "        if min ≠ i: swap(a[i], a[min])",       # 5
    "        mark a[i] sorted",                     # 6
]


def selection_sort(values: List[int], surface: RenderSurface) -> Generator[Step, None, None]:
    viz = Viz(values, surface)
    n = len(values)

    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            candidate = smallest
            viz.mark_compare(candidate, j)
            viz.at(4, f"Is {values[j]} smaller than the current minimum {values[candidate]}?")
            yield viz.delay()
            if values[j] < values[smallest]:
                smallest = j
            viz.unmark_compare(candidate, j)
        if smallest != i:
            viz.at(5, f"Swap minimum {values[smallest]} into slot {i}.")
            yield from viz.swap(i, smallest)
        viz.mark_sorted(i)

    yield viz.finish("Every slot holds its final value: the array is sorted.", line=6)
