"""
pacing.py — Pacing Parameter Mappings
======================================
One slider value drives two things at once:

    larger value  →  longer array   (more, thinner bars)
    larger value  →  shorter delay  (faster animation)

Both maps are linear over [PACING_MIN, PACING_MAX] and round half-up.
"""

import math

from config import (
    PACING_MIN, PACING_MAX,
    LENGTH_MIN, LENGTH_MAX,
    DELAY_MIN_MS, DELAY_MAX_MS,
)


def clamp_pacing(value: float) -> float:
    return max(PACING_MIN, min(PACING_MAX, value))


def _fraction(value: float) -> float:
    """Position of `value` within the pacing range, 0.0 … 1.0."""
    return (clamp_pacing(value) - PACING_MIN) / (PACING_MAX - PACING_MIN)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def pacing_to_length(value: float) -> int:
    """Array length for a pacing value: 1 → 10, 100 → 80."""
    return _round_half_up(LENGTH_MIN + _fraction(value) * (LENGTH_MAX - LENGTH_MIN))


def pacing_to_delay_ms(value: float) -> int:
    """Per-step delay for a pacing value: 1 → 240 ms, 100 → 3 ms."""
    return _round_half_up(DELAY_MAX_MS - _fraction(value) * (DELAY_MAX_MS - DELAY_MIN_MS))
