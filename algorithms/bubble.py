"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Step at every pause:
  1. Compare an adjacent pair  →  both bars marked COMPARE, one delay
  2. Swap an out-of-order pair →  both bars rewritten, one delay
  3. End of pass               →  rightmost unsorted slot marked SORTED
  4. Final step                →  every slot marked SORTED

Stops early after a pass with no exchanges.
"""

from typing import Generator, List

from barchart import RenderSurface
from algorithms.step import Step
from algorithms.viz import Viz


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in 0 .. n-1:",                       # 1
    "        swapped ← false",                      # 2
    "        for j in 0 .. n-i-2:",                 # 3
    "            if a[j] > a[j+1]:",                # 4
    "                swap(a[j], a[j+1])",           # 5
    "                swapped ← true",               # 6
    "        mark a[n-i-1] sorted",                 # 7
    "        if not swapped: break",                # 8
    "    mark all sorted",                          # 9
]


def bubble_sort(values: List[int], surface: RenderSurface) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every compare / swap during bubble sort.

    Args:
        values  : Sequence to sort in place.
        surface : Bars mirroring `values`.
    """
    viz = Viz(values, surface)
    n = len(values)

    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            viz.mark_compare(j, j + 1)
            viz.at(4, f"Compare neighbours {values[j]} and {values[j + 1]}.")
            yield viz.delay()
            if values[j] > values[j + 1]:
                viz.at(5, f"{values[j]} > {values[j + 1]}: swap them so the larger value bubbles right.")
                yield from viz.swap(j, j + 1)
                swapped = True
            viz.unmark_compare(j, j + 1)
        viz.mark_sorted(n - i - 1)
        if not swapped:
            break

    viz.mark_all_sorted()
    yield viz.finish("No more exchanges needed: the array is sorted.", line=9)
