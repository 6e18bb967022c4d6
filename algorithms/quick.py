"""
quick.py — Quick Sort
======================
Lomuto partition with the last element as pivot.  Elements ≤ pivot are
swapped into the growing left block (even when the swap is a no-op), so
runs of equal keys still shrink the range by one per partition.
"""

from typing import Generator, List

from barchart import RenderSurface
from algorithms.step import Step
from algorithms.viz import Viz


PSEUDOCODE: List[str] = [
    "def partition(a, l, r):",                      # 0
    "    pivot ← a[r];  i ← l - 1",                 # 1
    "    for j in l .. r-1:",                       # 2
    "        if a[j] ≤ pivot:",                     # 3
    "            i ← i + 1;  swap(a[i], a[j])",     # 4
    "    swap(a[i+1], a[r]);  return i + 1",        # 5
    "def sort(a, l, r):",                           # 6
    "    if l ≥ r: return",                         # 7
    "    p ← partition(a, l, r)",                   # 8
    "    sort(a, l, p-1);  sort(a, p+1, r)",        # 9
    "mark all sorted",                              # 10
]


def quick_sort(values: List[int], surface: RenderSurface) -> Generator[Step, None, None]:
    viz = Viz(values, surface)

    def partition(lo: int, hi: int) -> Generator[Step, None, int]:
        pivot = values[hi]
        i = lo - 1
        for j in range(lo, hi):
            viz.mark_compare(j, hi)
            viz.at(3, f"Is {values[j]} ≤ pivot {pivot}?")
            yield viz.delay()
            viz.unmark_compare(j, hi)
            if values[j] <= pivot:
                i += 1
                viz.at(4, f"{values[j]} ≤ {pivot}: move it into the left block at slot {i}.")
                yield from viz.swap(i, j)
        viz.at(5, f"Place pivot {pivot} at its final slot {i + 1}.")
        yield from viz.swap(i + 1, hi)
        return i + 1

    def sort(lo: int, hi: int) -> Generator[Step, None, None]:
        if lo >= hi:
            return
        p = yield from partition(lo, hi)
        yield from sort(lo, p - 1)
        yield from sort(p + 1, hi)

    yield from sort(0, len(values) - 1)
    viz.mark_all_sorted()
    yield viz.finish("Every partition is down to one element: the array is sorted.", line=10)
