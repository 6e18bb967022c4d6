"""
viz.py — Shared Delay / Marking Protocol
=========================================
The one object every sorting generator talks to.  It owns nothing: the
array belongs to the run controller and the bars to the RenderSurface;
Viz keeps both in step and turns every pause into a Step.

Usage inside an algorithm generator:
    viz = Viz(values, surface)
    viz.at(2, "Compare 5 and 3.")
    viz.mark_compare(0, 1)
    yield viz.delay()
    viz.unmark_compare(0, 1)
    yield from viz.swap(0, 1)          # write both slots, then one delay
    viz.mark_all_sorted()
    yield viz.finish("Done.")
"""

from typing import Generator, List, Set

from barchart import RenderSurface
from algorithms.step import Step, StepBuilder


class Viz:
    """
    Attributes:
        values  : The shared mutable sequence (sorted in place).
        surface : RenderSurface mirroring `values`.
    """

    def __init__(self, values: List[int], surface: RenderSurface):
        self.values:  List[int]      = values
        self.surface: RenderSurface  = surface
        self._sb:      StepBuilder   = StepBuilder()
        self._step_no: int           = 0
        self._comparing: Set[int]    = set()

    # ------------------------------------------------------------------
    # Narration
    # ------------------------------------------------------------------
    def at(self, line: int, explanation: str = "") -> None:
        """Set the pseudocode line / explanation carried by the next Step."""
        self._sb.pseudocode_line = line
        self._sb.explanation     = explanation

    # ------------------------------------------------------------------
    # Marks
    # ------------------------------------------------------------------
    def mark_compare(self, i: int, j: int) -> None:
        self.surface.mark_compare(i, j)
        self._comparing.update((i, j))
        self._sb.count("comparisons")

    def unmark_compare(self, i: int, j: int) -> None:
        self.surface.unmark_compare(i, j)
        self._comparing.discard(i)
        self._comparing.discard(j)

    def mark_sorted(self, index: int) -> None:
        """Mark one bar sorted; a Step reports each index once."""
        if not 0 <= index < len(self.values) or self.surface.is_sorted(index):
            return
        self.surface.mark_sorted(index)
        self._sb.record_sorted(index)

    def mark_all_sorted(self) -> None:
        for k in range(len(self.values)):
            self.mark_sorted(k)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def write(self, index: int, value: int) -> None:
        """Write one slot and its bar without pausing."""
        if not 0 <= index < len(self.values):
            raise IndexError(f"write to index {index} outside sequence of length {len(self.values)}")
        self.values[index] = value
        self.surface.set_value(index, value)
        self._sb.record_write(index, value)

    def swap(self, i: int, j: int) -> Generator[Step, None, None]:
        vi, vj = self.values[i], self.values[j]
        self.write(i, vj)
        self.write(j, vi)
        self._sb.count("swaps")
        yield self.delay()

    def set(self, index: int, value: int) -> Generator[Step, None, None]:
        self.write(index, value)
        yield self.delay()

    # ------------------------------------------------------------------
    # Pauses
    # ------------------------------------------------------------------
    def delay(self) -> Step:
        """Close the current step; the caller yields it to pause."""
        return self._emit(is_final=False)

    def finish(self, explanation: str = "", line: int = -1) -> Step:
        """Closing step: everything marked, no delay follows."""
        self.at(line, explanation)
        return self._emit(is_final=True)

    def _emit(self, is_final: bool) -> Step:
        step = self._sb.build(
            step_number=self._step_no,
            comparing=tuple(sorted(self._comparing)),
            is_final=is_final,
        )
        self._step_no += 1
        self._sb.reset()
        return step
