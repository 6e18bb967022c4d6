"""
surface.py — Render Surface
============================
Single source of truth for what the canvas shows.  Algorithms mutate it
through a handful of primitives; the SVG renderer only reads it.

Responsibilities:
  1. Rebuild the bars wholesale from a sequence       (rebuild)
  2. Per-index value updates                          (set_value)
  3. Transient / persistent marks                     (mark_compare, mark_sorted, …)
  4. Width reflow when the container is resized       (reflow)

Design decisions:
  - Bars are recreated on every rebuild, never resized in count, so
    len(bars) == len(sequence) holds for the lifetime of one array.
  - Out-of-range indices are silently ignored; the algorithms own the
    bounds of the sequence, not the surface.
"""

from typing import Iterable, List

from barchart.bar import Bar, BarMark
from config import BAR_GAP, MIN_BAR_WIDTH, DEFAULT_CONTAINER_WIDTH


def bar_width(count: int, inner_width: int, gap: int = BAR_GAP, min_width: int = MIN_BAR_WIDTH) -> int:
    """Widest integer width so count*w + (count-1)*gap fits inner_width."""
    if count <= 0:
        return min_width
    return max(min_width, (inner_width - (count - 1) * gap) // count)


class RenderSurface:
    """
    Attributes:
        bars            : One Bar per sequence index.
        container_width : Last measured inner width of the bars container (px).
        gap             : Fixed pixel gap between neighbouring bars.
        min_width       : Floor for the per-bar width so bars never vanish.
        bar_width       : Current per-bar width.
    """

    def __init__(
        self,
        container_width: int = DEFAULT_CONTAINER_WIDTH,
        gap: int = BAR_GAP,
        min_width: int = MIN_BAR_WIDTH,
    ):
        self.bars:            List[Bar] = []
        self.container_width: int       = container_width
        self.gap:             int       = gap
        self.min_width:       int       = min_width
        self.bar_width:       int       = min_width

    # ==================================================================
    # REBUILD / REFLOW
    # ==================================================================
    def rebuild(self, values: Iterable[int]) -> None:
        values = list(values)
        self.bar_width = bar_width(len(values), self.container_width, self.gap, self.min_width)
        self.bars = [Bar(i, v, self.bar_width) for i, v in enumerate(values)]

    def reflow(self, container_width: int) -> None:
        """Recompute widths only; values and marks are left alone."""
        self.container_width = container_width
        self.bar_width = bar_width(len(self.bars), container_width, self.gap, self.min_width)
        for bar in self.bars:
            bar.width = self.bar_width

    # ==================================================================
    # MUTATION PRIMITIVES
    # ==================================================================
    def set_value(self, index: int, value: int) -> None:
        bar = self._bar(index)
        if bar is not None:
            bar.value = value

    def mark_compare(self, i: int, j: int) -> None:
        for idx in (i, j):
            bar = self._bar(idx)
            if bar is not None:
                bar.marks.add(BarMark.COMPARE)

    def unmark_compare(self, i: int, j: int) -> None:
        for idx in (i, j):
            bar = self._bar(idx)
            if bar is not None:
                bar.marks.discard(BarMark.COMPARE)

    def mark_sorted(self, index: int) -> None:
        bar = self._bar(index)
        if bar is not None:
            bar.marks.add(BarMark.SORTED)

    def clear_marks(self) -> None:
        for bar in self.bars:
            bar.marks.clear()

    # ==================================================================
    # READ-ONLY ACCESSORS
    # ==================================================================
    def values(self) -> List[int]:
        return [b.value for b in self.bars]

    def comparing(self) -> List[int]:
        return [b.index for b in self.bars if b.is_comparing]

    def sorted_indices(self) -> List[int]:
        return [b.index for b in self.bars if b.is_sorted]

    def is_sorted(self, index: int) -> bool:
        bar = self._bar(index)
        return bar is not None and bar.is_sorted

    def __len__(self) -> int:
        return len(self.bars)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _bar(self, index: int):
        if 0 <= index < len(self.bars):
            return self.bars[index]
        return None
