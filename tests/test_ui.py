import logging

from algorithms import list_algorithms
from barchart import RenderSurface
from engine import RunMetrics
from logging_config import setup_logging
from ui import (
    render_canvas, CanvasConfig,
    algorithm_buttons, pacing_slider, array_controls,
    analytics_panel, pseudocode_viewer, explanation_panel,
)


def _surface(values, width=600):
    s = RenderSurface(container_width=width)
    s.rebuild(values)
    return s


# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
def test_canvas_draws_one_bar_per_value():
    svg = render_canvas(_surface([10, 50, 100]))
    assert svg.startswith("<svg")
    assert svg.count('<g class="bar ') == 3
    assert 'data-value="50"' in svg


def test_canvas_bar_height_is_percent_of_canvas():
    config = CanvasConfig()
    svg = render_canvas(_surface([50]), config)
    assert f'height="{config.height * 0.5}"' in svg


def test_canvas_colours_follow_marks():
    s = _surface([10, 20, 30])
    s.mark_compare(0, 1)
    s.mark_sorted(1)
    s.mark_sorted(2)
    svg = render_canvas(s)
    assert '<g class="bar compare" data-index="0"' in svg
    assert '<g class="bar compare" data-index="1"' in svg
    assert '<g class="bar sorted" data-index="2"' in svg
    assert CanvasConfig.bar_colors["compare"] in svg


def test_canvas_labels_only_for_small_arrays():
    assert "<text" in render_canvas(_surface([10, 20]))
    assert "<text" not in render_canvas(_surface([10] * 60))


# ---------------------------------------------------------------------------
# Controls
# ---------------------------------------------------------------------------
def test_algorithm_buttons_disabled_while_running():
    html = algorithm_buttons(list_algorithms(), active_key="heap", disabled=True)
    assert html.count('class="algo') == len(list_algorithms())
    assert html.count("disabled") == len(list_algorithms())
    assert 'class="algo active" data-algo="heap"' in html


def test_pacing_slider_shows_derived_values():
    html = pacing_slider(100)
    assert 'value="100"' in html
    assert '<span id="pacing-length">80</span>' in html
    assert '<span id="pacing-delay">3</span>' in html
    assert "disabled" not in html


def test_array_controls_disabled():
    assert "disabled" in array_controls(disabled=True)


def test_analytics_panel():
    assert "Run an algorithm" in analytics_panel(None)
    html = analytics_panel(RunMetrics(algo_label="Merge Sort", comparisons=12, sorted_ok=True))
    assert "Merge Sort" in html
    assert "<strong>12</strong>" in html
    assert "stopped early" in analytics_panel(None, error="IndexError: boom")


def test_pseudocode_viewer_highlights_and_escapes():
    html = pseudocode_viewer(["if a < b:", "swap"], current_line=0, algo_label="X")
    assert 'class="code-line highlight" data-line="0">if a &lt; b:' in html
    assert "Pick an algorithm" in pseudocode_viewer([])


def test_explanation_panel():
    assert "algorithm" in explanation_panel("")
    assert "3 &gt; 1" in explanation_panel("3 > 1")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def test_setup_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_file = tmp_path / "viz.log"
    try:
        setup_logging("DEBUG", str(log_file))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        logging.getLogger("engine.controller").debug("hello from the test")
        for h in root.handlers:
            h.flush()
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "engine.controller - DEBUG - hello from the test" in text
