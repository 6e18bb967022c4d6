"""
controller.py — Single-Flight Run Controller
=============================================
The one object the web layer talks to.  It owns the sequence and the
RenderSurface, and guarantees that at most one sort runs at a time.

State machine:
    IDLE     →  new_run() / submit()  →  RUNNING
    RUNNING  →  (run ends OR faults)  →  IDLE      (always, via finally)

While RUNNING every other request (another run, regenerate, pacing
change, resize) is ignored and reported back as `False`, never queued.

Faults raised by an algorithm are logged with their traceback and
swallowed: the run is abandoned, the array is left as the fault found
it, and the controls come back.  A fresh regenerate() resets things.
"""

import logging
import random
import threading
import time
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from algorithms import get_algorithm
from algorithms.step import Step
from barchart import RenderSurface, generate_sequence
from config import PACING_DEFAULT, DEFAULT_CONTAINER_WIDTH
from engine.pacing import clamp_pacing, pacing_to_length, pacing_to_delay_ms
from engine.recorder import Recorder, RunMetrics

logger = logging.getLogger(__name__)


class RunState(Enum):
    IDLE    = "idle"
    RUNNING = "running"


class RunController:
    """
    Attributes:
        surface          : RenderSurface the canvas is drawn from.
        values           : The shared sequence; only the active run writes it.
        pacing           : Current pacing parameter (1 … 100).
        state            : RunState.
        controls_enabled : False while a run is active; the UI greys out.
        algo_key         : Key of the current / most recent run.
        last_step        : Most recent Step of the current / last run.
        last_metrics     : RunMetrics of the last completed run.
        last_error       : "Type: message" of the last faulted run, else None.
    """

    def __init__(
        self,
        pacing: float = PACING_DEFAULT,
        container_width: int = DEFAULT_CONTAINER_WIDTH,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
        on_step: Optional[Callable[[Step], None]] = None,
    ):
        self.surface:          RenderSurface        = RenderSurface(container_width)
        self.values:           List[int]            = []
        self.pacing:           float                = clamp_pacing(pacing)
        self.state:            RunState             = RunState.IDLE
        self.controls_enabled: bool                 = True
        self.algo_key:         Optional[str]        = None
        self.last_step:        Optional[Step]       = None
        self.last_metrics:     Optional[RunMetrics] = None
        self.last_error:       Optional[str]        = None

        self._sleep   = sleep
        self._rng     = rng
        self._on_step = on_step
        self._guard   = threading.Lock()       # state flips + array/pacing/resize changes
        self._worker: Optional[threading.Thread] = None

        self.regenerate()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def running(self) -> bool:
        return self.state == RunState.RUNNING

    def delay_ms(self) -> int:
        return pacing_to_delay_ms(self.pacing)

    # ------------------------------------------------------------------
    # Array controls (rejected while running)
    # ------------------------------------------------------------------
    # The running check and the mutation happen under the same lock that
    # _begin() flips IDLE → RUNNING with, so a run cannot start mid-change.
    def regenerate(self) -> bool:
        """New random array sized from the pacing value; full bar rebuild."""
        with self._guard:
            if self.running:
                logger.debug("regenerate ignored: a run is active")
                return False
            self._regenerate()
        return True

    def set_pacing(self, value: float) -> bool:
        with self._guard:
            if self.running:
                logger.debug("pacing change to %s ignored: a run is active", value)
                return False
            self.pacing = clamp_pacing(value)
            self._regenerate()
        return True

    def on_resize(self, container_width: int) -> bool:
        with self._guard:
            if self.running:
                logger.debug("resize to %spx ignored: a run is active", container_width)
                return False
            self.surface.reflow(container_width)
        return True

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------
    def new_run(self, algo_key: str) -> bool:
        """Run `algo_key` on the calling thread.  False if ignored."""
        if not self._begin(algo_key):
            return False
        try:
            self._execute(algo_key)
        finally:
            self._end()
        return True

    def submit(self, algo_key: str) -> bool:
        """Like new_run(), but the run happens on a worker thread."""
        if not self._begin(algo_key):
            return False
        self._worker = threading.Thread(
            target=self._run_then_end,
            args=(algo_key,),
            name=f"sort-{algo_key}",
            daemon=True,
        )
        self._worker.start()
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join the worker started by submit().  True once IDLE."""
        worker = self._worker
        if worker is not None:
            worker.join(timeout)
        return not self.running

    # ------------------------------------------------------------------
    # Snapshot for the UI
    # ------------------------------------------------------------------
    def snapshot(self) -> Dict[str, Any]:
        step = self.last_step
        return {
            "running":          self.running,
            "controls_enabled": self.controls_enabled,
            "algo_key":         self.algo_key,
            "pacing":           self.pacing,
            "delay_ms":         self.delay_ms(),
            "values":           self.surface.values(),
            "comparing":        self.surface.comparing(),
            "sorted":           self.surface.sorted_indices(),
            "bar_width":        self.surface.bar_width,
            "step_number":      step.step_number if step else None,
            "pseudocode_line":  step.pseudocode_line if step else -1,
            "explanation":      step.explanation if step else "",
            "metrics":          self.last_metrics.__dict__ if self.last_metrics else {},
            "error":            self.last_error,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _begin(self, algo_key: str) -> bool:
        if get_algorithm(algo_key) is None:
            logger.warning("Unknown algorithm %r; run ignored", algo_key)
            return False
        with self._guard:
            if self.state == RunState.RUNNING:
                logger.debug("Run of %r ignored: %r is still running", algo_key, self.algo_key)
                return False
            self.state = RunState.RUNNING
        self.controls_enabled = False
        self.surface.clear_marks()
        self.algo_key     = algo_key
        self.last_step    = None
        self.last_metrics = None
        self.last_error   = None
        logger.info("Run %r started on %d values (delay %d ms)", algo_key, len(self.values), self.delay_ms())
        return True

    def _execute(self, algo_key: str) -> None:
        try:
            rec = Recorder()
            rec.start(algo_key, self.values, self.surface, on_step=self._handle_step)
            self.last_metrics = rec.run(self.delay_ms, self._sleep)
            logger.info(
                "Run %r finished: %d steps, %d comparisons, %.0f ms",
                algo_key, self.last_metrics.total_steps,
                self.last_metrics.comparisons, self.last_metrics.wall_time_ms,
            )
        except Exception as exc:
            self.last_error = f"{type(exc).__name__}: {exc}"
            logger.exception("Run %r faulted; sequence left as-is", algo_key)

    def _end(self) -> None:
        self.controls_enabled = True
        with self._guard:
            self.state = RunState.IDLE

    def _regenerate(self) -> None:
        # caller holds self._guard
        self.values = generate_sequence(pacing_to_length(self.pacing), self._rng)
        self.surface.rebuild(self.values)
        self.last_step = None

    def _run_then_end(self, algo_key: str) -> None:
        try:
            self._execute(algo_key)
        finally:
            self._end()

    def _handle_step(self, step: Step) -> None:
        self.last_step = step
        if self._on_step:
            self._on_step(step)
