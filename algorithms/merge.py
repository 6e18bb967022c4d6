"""
merge.py — Merge Sort
======================
Top-down merge sort over index ranges of the shared array.  The merge
copies both runs aside, compares their heads (left wins ties, so the
sort is stable) and writes the winner back with one delay per write.
"""

from typing import Generator, List

from barchart import RenderSurface
from algorithms.step import Step
from algorithms.viz import Viz


PSEUDOCODE: List[str] = [
    "def sort(a, l, r):",                           # 0
    "    if l ≥ r: return",                         # 1
    "    m ← l + (r - l) / 2",                      # 2
    "    sort(a, l, m);  sort(a, m+1, r)",          # 3
    "    merge(a, l, m, r)",                        # 4
    "def merge(a, l, m, r):",                       # 5
    "    while both runs non-empty:",               # 6
    "        a[k++] ← left[i] ≤ right[j] ? left[i++] : right[j++]",  # 7
    "    copy what remains of left, then right",    # 8
    "mark all sorted",                              # 9
]


def merge_sort(values: List[int], surface: RenderSurface) -> Generator[Step, None, None]:
    viz = Viz(values, surface)

    def merge(lo: int, mid: int, hi: int) -> Generator[Step, None, None]:
        left = values[lo:mid + 1]
        right = values[mid + 1:hi + 1]
        i = j = 0
        k = lo

        while i < len(left) and j < len(right):
            viz.mark_compare(lo + i, mid + 1 + j)
            viz.at(6, f"Compare run heads {left[i]} and {right[j]}.")
            yield viz.delay()
            viz.unmark_compare(lo + i, mid + 1 + j)

            if left[i] <= right[j]:
                viz.at(7, f"{left[i]} ≤ {right[j]}: take from the left run.")
                yield from viz.set(k, left[i])
                i += 1
            else:
                viz.at(7, f"{right[j]} < {left[i]}: take from the right run.")
                yield from viz.set(k, right[j])
                j += 1
            k += 1

        while i < len(left):
            viz.at(8, f"Copy leftover {left[i]} from the left run.")
            yield from viz.set(k, left[i])
            i += 1
            k += 1
        while j < len(right):
            viz.at(8, f"Copy leftover {right[j]} from the right run.")
            yield from viz.set(k, right[j])
            j += 1
            k += 1

    def sort(lo: int, hi: int) -> Generator[Step, None, None]:
        if lo >= hi:
            return
        mid = lo + (hi - lo) // 2
        yield from sort(lo, mid)
        yield from sort(mid + 1, hi)
        yield from merge(lo, mid, hi)

    yield from sort(0, len(values) - 1)
    viz.mark_all_sorted()
    yield viz.finish("All runs merged: the array is sorted.", line=9)
