import logging
import random
import threading

import pytest

from algorithms import REGISTRY, AlgoInfo
from algorithms.viz import Viz
from barchart import RenderSurface
from engine import (
    Stepper, StepperState, Recorder, RunController, RunState,
    pacing_to_length, pacing_to_delay_ms,
)
from config import PACING_DEFAULT


def _no_sleep(seconds):
    pass


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
def _stepper_for(algo_key, values, on_step=None):
    surface = RenderSurface()
    surface.rebuild(values)
    stepper = Stepper(on_step=on_step)
    stepper.start(REGISTRY[algo_key].fn(values, surface))
    return stepper


def test_stepper_sleeps_after_every_step_but_the_last():
    slept = []
    seen = []
    stepper = _stepper_for("bubble", [5, 3, 8, 1], on_step=seen.append)

    total = stepper.run(delay_ms=lambda: 40, sleep=slept.append)

    assert total == len(seen)
    assert slept == [0.04] * (total - 1)
    assert stepper.state == StepperState.FINISHED
    assert stepper.current_step.is_final


def test_stepper_reads_delay_at_every_pause():
    delays = iter(range(100, 0, -1))
    slept = []
    stepper = _stepper_for("insertion", [3, 2, 1])
    stepper.run(delay_ms=lambda: next(delays), sleep=slept.append)
    assert slept == sorted(slept, reverse=True)
    assert len(set(slept)) == len(slept)


def test_stepper_next_step_before_start_is_false():
    stepper = Stepper()
    assert stepper.state == StepperState.IDLE
    assert not stepper.next_step()


def test_stepper_reset():
    stepper = _stepper_for("merge", [2, 1])
    stepper.next_step()
    stepper.reset()
    assert stepper.state == StepperState.IDLE
    assert stepper.current_step is None
    assert stepper.total_steps == 0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
def test_recorder_unknown_algorithm():
    with pytest.raises(ValueError):
        Recorder().start("bogo", [1, 2], RenderSurface())


def test_recorder_run_before_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_recorder_metrics():
    values = [5, 3, 8, 1]
    surface = RenderSurface()
    surface.rebuild(values)
    rec = Recorder()
    rec.start("bubble", values, surface)

    metrics = rec.run_to_completion()

    assert metrics is rec.get_metrics()
    assert metrics.algo_key == "bubble"
    assert metrics.algo_label == "Bubble Sort"
    assert metrics.length == 4
    assert metrics.comparisons == 6
    assert metrics.swaps == 4
    assert metrics.total_steps == rec.total_steps == rec.stepper.total_steps
    assert metrics.sorted_ok
    assert rec.export()["comparisons"] == 6


# ---------------------------------------------------------------------------
# RunController
# ---------------------------------------------------------------------------
@pytest.fixture
def controller():
    return RunController(sleep=_no_sleep, rng=random.Random(5))


def test_controller_starts_idle_with_array(controller):
    assert controller.state == RunState.IDLE
    assert controller.controls_enabled
    assert len(controller.values) == pacing_to_length(PACING_DEFAULT)
    assert controller.surface.values() == controller.values
    assert controller.delay_ms() == pacing_to_delay_ms(PACING_DEFAULT)


@pytest.mark.parametrize("algo_key", list(REGISTRY))
def test_new_run_sorts_and_marks(controller, algo_key):
    original = list(controller.values)

    assert controller.new_run(algo_key)

    assert controller.values == sorted(original)
    assert controller.surface.sorted_indices() == list(range(len(original)))
    assert controller.state == RunState.IDLE
    assert controller.controls_enabled
    assert controller.last_metrics.sorted_ok
    assert controller.last_step.is_final


def test_new_run_clears_previous_marks():
    seen = []
    c = RunController(
        sleep=_no_sleep,
        rng=random.Random(5),
        on_step=lambda step: seen.append(c.surface.sorted_indices()),
    )
    c.new_run("bubble")
    seen.clear()
    c.new_run("bubble")
    # already sorted: the first pause happens before any bar is finalised
    assert seen[0] == []


def test_new_run_unknown_key_is_ignored(controller):
    before = list(controller.values)
    assert not controller.new_run("bogo")
    assert controller.values == before
    assert controller.state == RunState.IDLE


def test_set_pacing_regenerates(controller):
    assert controller.set_pacing(1)
    assert len(controller.values) == 10
    assert controller.set_pacing(100)
    assert len(controller.values) == 80
    assert len(controller.surface) == 80


def test_on_resize_reflows_only(controller):
    before = list(controller.values)
    assert controller.on_resize(300)
    assert controller.values == before
    assert controller.surface.container_width == 300


def test_single_flight():
    entered = threading.Event()
    gate = threading.Event()

    def blocking_sleep(seconds):
        entered.set()
        gate.wait(5)

    c = RunController(sleep=blocking_sleep, rng=random.Random(11))
    original = list(c.values)

    assert c.submit("merge")
    assert entered.wait(5)
    assert c.running
    assert not c.controls_enabled

    # every control is rejected while the merge is in flight
    assert not c.submit("bubble")
    assert not c.new_run("quick")
    assert not c.regenerate()
    assert not c.set_pacing(1)
    assert not c.on_resize(100)
    assert c.algo_key == "merge"
    assert c.pacing == PACING_DEFAULT

    gate.set()
    assert c.wait(10)
    assert c.state == RunState.IDLE
    assert c.controls_enabled
    assert c.values == sorted(original)
    assert c.last_metrics.algo_key == "merge"


class _GatedRandom(random.Random):
    """Blocks inside the first randint() after arm() until `gate` is set."""

    def __init__(self, seed):
        super().__init__(seed)
        self.armed = False
        self.entered = threading.Event()
        self.gate = threading.Event()

    def randint(self, a, b):
        if self.armed:
            self.armed = False
            self.entered.set()
            self.gate.wait(5)
        return super().randint(a, b)


def test_run_cannot_start_while_regenerate_is_mid_flight():
    rng = _GatedRandom(21)
    c = RunController(sleep=_no_sleep, rng=rng)
    rng.armed = True

    regenerated, submitted = [], []
    regen = threading.Thread(target=lambda: regenerated.append(c.regenerate()))
    regen.start()
    assert rng.entered.wait(5)

    run = threading.Thread(target=lambda: submitted.append(c.submit("bubble")))
    run.start()
    run.join(0.2)
    # the run waits for the regenerate to finish instead of racing it
    assert run.is_alive()
    assert not c.running

    rng.gate.set()
    regen.join(5)
    run.join(5)
    assert regenerated == [True]
    assert submitted == [True]

    assert c.wait(10)
    assert c.values == sorted(c.values)
    assert c.surface.values() == c.values
    assert c.surface.sorted_indices() == list(range(len(c.values)))


def _exploding_sort(values, surface):
    viz = Viz(values, surface)
    viz.mark_compare(0, 1)
    viz.at(0, "about to write past the end")
    yield viz.delay()
    yield from viz.set(len(values), 1)


def test_fault_is_logged_and_swallowed(controller, monkeypatch, caplog):
    monkeypatch.setitem(REGISTRY, "exploding", AlgoInfo(
        key="exploding", label="Exploding", fn=_exploding_sort, pseudocode=["boom"],
    ))

    with caplog.at_level(logging.ERROR, logger="engine.controller"):
        assert controller.new_run("exploding")

    assert controller.state == RunState.IDLE
    assert controller.controls_enabled
    assert controller.last_metrics is None
    assert controller.last_error.startswith("IndexError")
    assert any(r.levelno == logging.ERROR and r.exc_info for r in caplog.records)

    # the controller is usable again straight away
    assert controller.regenerate()
    assert controller.new_run("quick")


def test_snapshot(controller):
    controller.new_run("heap")
    snap = controller.snapshot()
    assert snap["running"] is False
    assert snap["algo_key"] == "heap"
    assert snap["values"] == sorted(snap["values"])
    assert snap["sorted"] == list(range(len(snap["values"])))
    assert snap["metrics"]["algo_label"] == "Heap Sort"
    assert snap["error"] is None
