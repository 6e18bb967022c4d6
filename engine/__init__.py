"""
engine/
-------
Pacing, scheduling, analytics and run control.

    from engine import RunController, Stepper, Recorder
    from engine import pacing_to_length, pacing_to_delay_ms
"""

from engine.pacing     import pacing_to_length, pacing_to_delay_ms, clamp_pacing
from engine.stepper    import Stepper, StepperState
from engine.recorder   import Recorder, RunMetrics
from engine.controller import RunController, RunState

__all__ = [
    "pacing_to_length",
    "pacing_to_delay_ms",
    "clamp_pacing",
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "RunController",
    "RunState",
]
