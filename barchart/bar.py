from enum import Enum
from typing import Set


# ---------------------------------------------------------------------------
# Bar Mark Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class BarMark(Enum):
    COMPARE = "compare"   # amber — transient, bracketing one comparison
    SORTED  = "sorted"    # green — persistent until the next rebuild


# ---------------------------------------------------------------------------
# Bar
# ---------------------------------------------------------------------------
class Bar:
    """
    One visual element per sequence index.

    Attributes:
        index  : Position in the sequence (fixed for the bar's lifetime).
        value  : Displayed magnitude, mirrors the sequence value.
        width  : Pixel width assigned by the surface on rebuild / reflow.
        marks  : Set of BarMark currently applied (set semantics).
    """

    __slots__ = ("index", "value", "width", "marks")

    def __init__(self, index: int, value: int, width: int = 2):
        self.index: int          = index
        self.value: int          = value
        self.width: int          = width
        self.marks: Set[BarMark] = set()

    @property
    def height_pct(self) -> int:
        """Value read directly as a percentage of the canvas height."""
        return max(0, min(100, self.value))

    @property
    def is_comparing(self) -> bool:
        return BarMark.COMPARE in self.marks

    @property
    def is_sorted(self) -> bool:
        return BarMark.SORTED in self.marks

    def state_key(self) -> str:
        """Palette key for the renderer; compare wins over sorted."""
        if self.is_comparing:
            return BarMark.COMPARE.value
        if self.is_sorted:
            return BarMark.SORTED.value
        return "default"

    def __repr__(self) -> str:
        marks = ",".join(sorted(m.value for m in self.marks))
        return f"Bar({self.index}, value={self.value}, marks=[{marks}])"
