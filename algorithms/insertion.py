"""
insertion.py — Insertion Sort
==============================
Classic shift-based insertion.  Each shift of a larger element one slot
to the right is shown as a comparison between the two slots involved.
"""

from typing import Generator, List

from barchart import RenderSurface
from algorithms.step import Step
from algorithms.viz import Viz


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in 1 .. n-1:",                       # 1
    "        key ← a[i]",                           # 2
    "        j ← i - 1",                            # 3
    "        while j ≥ 0 and a[j] > key:",          # 4
    "            a[j+1] ← a[j]",                    # 5
    "            j ← j - 1",                        # 6
    "        a[j+1] ← key",                         # 7
    "    mark all sorted",                          # 8
]


def insertion_sort(values: List[int], surface: RenderSurface) -> Generator[Step, None, None]:
    viz = Viz(values, surface)
    n = len(values)

    for i in range(1, n):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            viz.mark_compare(j, j + 1)
            viz.at(5, f"{values[j]} > key {key}: shift it one slot right.")
            yield from viz.set(j + 1, values[j])
            viz.unmark_compare(j, j + 1)
            j -= 1
        viz.at(7, f"Drop key {key} into slot {j + 1}.")
        yield from viz.set(j + 1, key)

    viz.mark_all_sorted()
    yield viz.finish("Every element has been inserted: the array is sorted.", line=8)
