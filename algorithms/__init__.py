"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sort the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, tags, stable, …),
        …
    }

Every `fn` has the same signature:

    fn(values: List[int], surface: RenderSurface) -> Generator[Step, None, None]

Adding a sort is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _ins_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _sel_pc
from algorithms.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.radix     import radix_sort     as _radix,     PSEUDOCODE as _radix_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # button label, e.g. "Bubble Sort"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)   # e.g. ["exchange", "in-place"]
    stable:            bool     = False       # equal keys keep their order?
    comparison_based:  bool     = True        # False for radix
    complexity_time:   str      = ""          # e.g. "O(n²)"
    complexity_space:  str      = ""          # e.g. "O(1)"
    description:       str      = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        tags=["exchange", "in-place"], stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent pairs; the largest value bubbles to the end each pass.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_ins_pc,
        tags=["insertion", "in-place"], stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grows a sorted prefix by shifting each new key left into place.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_sel_pc,
        tags=["selection", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted suffix and swaps it to the front.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        tags=["selection", "in-place", "divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root to the end.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        tags=["merge", "divide-and-conquer"], stable=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Sorts both halves recursively, then merges the two runs.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=["exchange", "in-place", "divide-and-conquer"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then recurse on both sides.",
    ),

    "radix": AlgoInfo(
        key="radix", label="Radix Sort", fn=_radix, pseudocode=_radix_pc,
        tags=["distribution", "non-comparison"], stable=True, comparison_based=False,
        complexity_time="O(d · (n + 10))", complexity_space="O(n)",
        description="Stable counting sort on each decimal digit, least significant first.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
