import random

from barchart import Bar, BarMark, RenderSurface, bar_width, generate_sequence
from config import VALUE_MIN, VALUE_MAX, BAR_GAP, MIN_BAR_WIDTH


# ---------------------------------------------------------------------------
# generate_sequence
# ---------------------------------------------------------------------------
def test_generate_sequence_length_and_range(rng):
    values = generate_sequence(500, rng)
    assert len(values) == 500
    assert all(VALUE_MIN <= v <= VALUE_MAX for v in values)


def test_generate_sequence_is_reproducible_with_seeded_rng():
    assert generate_sequence(20, random.Random(7)) == generate_sequence(20, random.Random(7))


def test_generate_sequence_negative_length_is_empty():
    assert generate_sequence(-3) == []


# ---------------------------------------------------------------------------
# bar_width
# ---------------------------------------------------------------------------
def test_bar_width_fills_container():
    # 10 bars, 9 gaps of 6px in 600px -> (600 - 54) // 10
    assert bar_width(10, 600) == 54
    w = bar_width(37, 901)
    assert 37 * w + 36 * BAR_GAP <= 901


def test_bar_width_never_below_minimum():
    assert bar_width(80, 100) == MIN_BAR_WIDTH
    assert bar_width(0, 600) == MIN_BAR_WIDTH


# ---------------------------------------------------------------------------
# RenderSurface
# ---------------------------------------------------------------------------
def test_rebuild_creates_one_bar_per_value(surface):
    surface.rebuild([5, 6, 7])
    assert len(surface) == 3
    assert surface.values() == [5, 6, 7]
    assert all(b.width == surface.bar_width for b in surface.bars)


def test_rebuild_drops_marks(surface):
    surface.mark_sorted(0)
    surface.mark_compare(1, 2)
    surface.rebuild([1, 2, 3, 4])
    assert surface.sorted_indices() == []
    assert surface.comparing() == []


def test_set_value_updates_bar_and_ignores_out_of_bounds(surface):
    surface.set_value(2, 99)
    surface.set_value(17, 5)
    surface.set_value(-1, 5)
    assert surface.values() == [10, 20, 99, 40]


def test_compare_marks_are_transient(surface):
    surface.mark_compare(0, 3)
    assert surface.comparing() == [0, 3]
    surface.unmark_compare(0, 3)
    assert surface.comparing() == []


def test_mark_sorted_is_idempotent(surface):
    for _ in range(2):
        for i in range(len(surface)):
            surface.mark_sorted(i)
    assert surface.sorted_indices() == [0, 1, 2, 3]
    assert all(b.marks == {BarMark.SORTED} for b in surface.bars)


def test_is_sorted(surface):
    surface.mark_sorted(2)
    assert surface.is_sorted(2)
    assert not surface.is_sorted(1)
    assert not surface.is_sorted(99)


def test_clear_marks_removes_everything(surface):
    surface.mark_compare(0, 1)
    surface.mark_sorted(2)
    surface.clear_marks()
    assert all(not b.marks for b in surface.bars)


def test_reflow_keeps_values_and_marks(surface):
    surface.mark_sorted(1)
    surface.reflow(120)
    assert surface.values() == [10, 20, 30, 40]
    assert surface.sorted_indices() == [1]
    assert surface.bar_width == bar_width(4, 120)
    assert all(b.width == surface.bar_width for b in surface.bars)


def test_bar_state_key_prefers_compare():
    bar = Bar(0, 50)
    assert bar.state_key() == "default"
    bar.marks.add(BarMark.SORTED)
    assert bar.state_key() == "sorted"
    bar.marks.add(BarMark.COMPARE)
    assert bar.state_key() == "compare"


def test_bar_height_is_value_as_percent():
    assert Bar(0, 42).height_pct == 42
    assert Bar(0, 140).height_pct == 100
