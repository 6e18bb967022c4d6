import random
from typing import List, Tuple

import pytest

from algorithms import get_algorithm
from algorithms.step import Step
from barchart import RenderSurface


def run_sort(algo_key: str, values: List[int]) -> Tuple[List[int], RenderSurface, List[Step]]:
    """Run a sort to completion with no delays; return (values, surface, steps)."""
    values = list(values)
    surface = RenderSurface(container_width=600)
    surface.rebuild(values)
    steps = list(get_algorithm(algo_key).fn(values, surface))
    return values, surface, steps


def replay(initial: List[int], steps: List[Step]) -> List[List[int]]:
    """Array state after every step that wrote something."""
    current = list(initial)
    states = []
    for step in steps:
        if step.changes:
            for idx, val in step.changes.items():
                current[idx] = val
            states.append(list(current))
    return states


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def surface():
    s = RenderSurface(container_width=600)
    s.rebuild([10, 20, 30, 40])
    return s
