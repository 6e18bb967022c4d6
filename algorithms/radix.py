"""
radix.py — LSD Radix Sort (base 10)
====================================
One stable counting sort per decimal digit, least significant first,
until the digit exponent passes the largest value.  The counting pass
itself is invisible; only the copy-back of each pass is animated, one
write (and one delay) per slot.

Precondition: all values are non-negative integers.  The generator's
[5, 100] range guarantees it; it is not checked at runtime.
"""

from typing import Generator, List

from barchart import RenderSurface
from algorithms.step import Step
from algorithms.viz import Viz


BASE = 10

PSEUDOCODE: List[str] = [
    "def radix_sort(a):",                           # 0
    "    exp ← 1",                                  # 1
    "    while max(a) / exp > 0:",                  # 2
    "        count digits (a[i] / exp) mod 10",     # 3
    "        prefix-sum the counts",                # 4
    "        place a[i] into out from the right",   # 5
    "        copy out back into a",                 # 6
    "        exp ← exp × 10",                       # 7
    "    mark all sorted",                          # 8
]


def counting_pass(values: List[int], exp: int) -> List[int]:
    """Stable counting sort of `values` by the digit at `exp`; returns a new list."""
    out = [0] * len(values)
    count = [0] * BASE

    for v in values:
        count[(v // exp) % BASE] += 1
    for d in range(1, BASE):
        count[d] += count[d - 1]
    for v in reversed(values):
        digit = (v // exp) % BASE
        count[digit] -= 1
        out[count[digit]] = v
    return out


def radix_sort(values: List[int], surface: RenderSurface) -> Generator[Step, None, None]:
    viz = Viz(values, surface)

    if values:
        max_val = max(values)
        exp = 1
        while max_val // exp > 0:
            out = counting_pass(values, exp)
            for i, v in enumerate(out):
                viz.at(6, f"Digit pass ×{exp}: slot {i} ← {v}.")
                yield from viz.set(i, v)
            exp *= BASE

    viz.mark_all_sorted()
    yield viz.finish("Every digit has been processed: the array is sorted.", line=8)
