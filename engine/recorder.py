"""
recorder.py — Run Recorder & Analytics
========================================
Drives one algorithm run through a Stepper and computes the analytics
the UI shows once the run is over.

Usage:
    rec = Recorder()
    rec.start(algo_key="merge", values=arr, surface=surface)
    rec.run_to_completion()          # no delays (tests, headless)
    # or: rec.run(delay_ms=lambda: 40)   paced, for the live canvas
    metrics = rec.get_metrics()      # the analytics card
"""

import time
from dataclasses import dataclass, asdict
from typing import Optional, List, Dict, Any, Callable

from algorithms import get_algorithm, AlgoInfo
from algorithms.step import Step
from barchart import RenderSurface
from engine.stepper import Stepper


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    length:        int   = 0          # number of elements sorted
    comparisons:   int   = 0          # highlighted comparisons
    writes:        int   = 0          # individual slot writes
    swaps:         int   = 0
    total_steps:   int   = 0          # number of Steps yielded
    wall_time_ms:  float = 0.0        # including pacing delays
    sorted_ok:     bool  = False      # non-decreasing at the end?


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        stepper     : The underlying Stepper.
        metrics     : Computed RunMetrics (available after a run).
        last_step   : Most recent Step seen.
        total_steps : Steps seen so far.
    """

    def __init__(self):
        self.stepper:     Optional[Stepper]    = None
        self.metrics:     Optional[RunMetrics] = None
        self.last_step:   Optional[Step]       = None
        self.total_steps: int                  = 0

        self._algo_info: Optional[AlgoInfo]   = None
        self._values:    List[int]            = []
        self._on_step:   Optional[Callable[[Step], None]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        values: List[int],
        surface: RenderSurface,
        on_step: Optional[Callable[[Step], None]] = None,
    ) -> None:
        """Initialise the generator and stepper for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info  = info
        self._values     = values
        self._on_step    = on_step
        self.metrics     = None
        self.last_step   = None
        self.total_steps = 0

        self.stepper = Stepper(on_step=self.record_step)
        self.stepper.start(info.fn(values, surface))

    def run(
        self,
        delay_ms: Callable[[], int] = lambda: 0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> RunMetrics:
        """Drive the run with pacing, then compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.stepper.run(delay_ms, sleep)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator with no delays."""
        return self.run(delay_ms=lambda: 0)

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def record_step(self, step: Step) -> None:
        self.last_step = step
        self.total_steps += 1
        if self._on_step:
            self._on_step(step)

    def export(self) -> Dict[str, Any]:
        return asdict(self.metrics) if self.metrics else {}

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        tally = self.last_step.metrics if self.last_step else {}
        values = self._values

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            length=len(values),
            comparisons=tally.get("comparisons", 0),
            writes=tally.get("writes", 0),
            swaps=tally.get("swaps", 0),
            total_steps=self.total_steps,
            wall_time_ms=round(wall_ms, 2),
            sorted_ok=all(values[i] <= values[i + 1] for i in range(len(values) - 1)),
        )
