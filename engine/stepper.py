"""
stepper.py — Paced Step Driver
===============================
The Stepper is the host scheduler for one algorithm run.  It owns the
generator, resumes it one Step at a time, lets the UI re-render through
`on_step`, and then waits one pacing delay before resuming again.

State machine:
    IDLE     →  start()              →  RUNNING
    RUNNING  →  (generator exhausted) →  FINISHED
    any      →  reset()              →  IDLE

There is no pause, rewind or cancel: once started, a run goes to the end
(or until the generator raises, which propagates to the caller).

Thread safety:
  This class is NOT thread-safe.  Exactly one thread drives a Stepper;
  the RunController guarantees only one Stepper is driven at a time.
"""

import time
from enum import Enum
from typing import Generator, Optional, Callable

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state        : Current StepperState.
        current_step : Last Step pulled from the generator.
        total_steps  : Number of Steps pulled so far.
        on_step      : Optional callback(Step) fired for every Step, before
                       the delay.  The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self._generator:  Optional[Generator[Step, None, None]] = None
        self.current_step: Optional[Step] = None
        self.total_steps:  int           = 0
        self.state:        StepperState  = StepperState.IDLE
        self.on_step:      Optional[Callable[[Step], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: Generator[Step, None, None]) -> None:
        """Attach a fresh algorithm generator.  Nothing runs until next_step()."""
        self._generator   = generator
        self.current_step = None
        self.total_steps  = 0
        self.state        = StepperState.RUNNING

    def reset(self) -> None:
        """Back to IDLE — caller must call start() again."""
        self._generator   = None
        self.current_step = None
        self.total_steps  = 0
        self.state        = StepperState.IDLE

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Resume the generator up to its next pause.  Returns False at the end."""
        if self._generator is None or self.state != StepperState.RUNNING:
            return False
        try:
            step = next(self._generator)
        except StopIteration:
            self.state = StepperState.FINISHED
            return False
        self.current_step = step
        self.total_steps += 1
        self._notify(step)
        return True

    def run(
        self,
        delay_ms: Callable[[], int] = lambda: 0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """
        Drive the generator to completion.

        After every non-final Step, `delay_ms()` is read (so a pacing change
        would apply from the next pause on) and `sleep` is called with the
        delay in seconds.  Returns the number of Steps taken.
        """
        while self.next_step():
            if self.current_step.is_final:
                continue
            ms = delay_ms()
            if ms > 0:
                sleep(ms / 1000.0)
        return self.total_steps

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_running(self) -> bool:
        return self.state == StepperState.RUNNING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _notify(self, step: Step) -> None:
        if self.on_step:
            self.on_step(step)
