"""
step.py — Algorithm Step Snapshot
==================================
Every sorting algorithm is a generator that yields Step objects.
Yielding IS the pacing point: the host scheduler renders the surface,
waits one delay, and only then resumes the generator.

A Step records what happened since the previous pause:

    • Which indices are currently highlighted as "comparing"
    • Which slots were written, and with what value
    • Which indices were newly finalised ("sorted")
    • Which line of pseudocode is executing right now
    • A plain-English explanation of the step (the side panel reads this)
    • A running tally of comparisons / writes / swaps

Design decisions:
  - Step is a frozen dataclass.  The array and the RenderSurface are the
    live state; a Step only carries the delta, so a run over a few hundred
    elements does not copy the whole array on every pause.
  - The algorithm generator is the only writer; stepper, recorder and
    renderer are pure readers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        comparing       : Indices marked COMPARE at the moment of the pause.
        changes         : {index: value} written since the previous step.
        newly_sorted    : Indices marked SORTED since the previous step.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        explanation     : Human-readable text for the explanation panel.
        metrics         : Running tally: comparisons, writes, swaps.
        is_final        : True on the closing step (no delay follows it).
    """

    step_number:      int                 = 0
    comparing:        Tuple[int, ...]     = ()
    changes:          Dict[int, int]      = field(default_factory=dict)
    newly_sorted:     List[int]           = field(default_factory=list)
    pseudocode_line:  int                 = -1
    explanation:      str                 = ""
    metrics:          Dict[str, int]      = field(default_factory=dict)
    is_final:         bool                = False


# ---------------------------------------------------------------------------
# Convenience builder so Viz doesn't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that collects the delta between two pauses.

    `reset()` clears the per-step fields; `metrics` is a running tally and
    survives resets for the whole run.
    """

    def __init__(self):
        self.metrics: Dict[str, int] = {"comparisons": 0, "writes": 0, "swaps": 0}
        self.reset()

    def reset(self):
        self.changes:          Dict[int, int] = {}
        self.newly_sorted:     List[int]      = []
        self.pseudocode_line:  int            = -1
        self.explanation:      str            = ""

    # -- helpers --
    def record_write(self, index: int, value: int):
        self.changes[index] = value
        self.metrics["writes"] += 1

    def record_sorted(self, index: int):
        self.newly_sorted.append(index)

    def count(self, key: str, amount: int = 1):
        self.metrics[key] = self.metrics.get(key, 0) + amount

    def build(self, step_number: int = 0, comparing: Tuple[int, ...] = (), is_final: bool = False) -> Step:
        return Step(
            step_number=step_number,
            comparing=tuple(comparing),
            changes=dict(self.changes),
            newly_sorted=list(self.newly_sorted),
            pseudocode_line=self.pseudocode_line,
            explanation=self.explanation,
            metrics=dict(self.metrics),
            is_final=is_final,
        )
