"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • algorithm_buttons   – one button per registered sort
  • pacing_slider       – the size/speed slider
  • array_controls      – "New Array"
  • analytics_panel     – comparisons, writes, swaps, steps, time
  • pseudocode_viewer   – with live line highlighting
  • explanation_panel   – "what just happened" text for the current step

Design:
  - All panels are stateless render functions.
  - Every interactive element takes `disabled`; the page greys the whole
    sidebar out while a run is active.
  - Output is raw HTML strings (no templating engine).
"""

from typing import Optional, List
from html import escape

from algorithms import AlgoInfo
from engine import RunMetrics, pacing_to_length, pacing_to_delay_ms
from config import PACING_MIN, PACING_MAX


def _disabled(flag: bool) -> str:
    return "disabled" if flag else ""


# ---------------------------------------------------------------------------
# Algorithm Buttons
# ---------------------------------------------------------------------------
def algorithm_buttons(
    algorithms: List[AlgoInfo],
    active_key: Optional[str] = None,
    disabled: bool = False,
) -> str:
    buttons = []
    for algo in algorithms:
        active = 'active' if algo.key == active_key else ''
        buttons.append(
            f'<button class="algo {active}" data-algo="{algo.key}" '
            f'title="{escape(algo.description)} — {algo.complexity_time}" {_disabled(disabled)}>'
            f'{algo.label}</button>'
        )

    return f"""
    <div class="panel algorithm-buttons">
      <h3>🧠 Algorithms</h3>
      <div class="button-grid">
        {''.join(buttons)}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Pacing Slider
# ---------------------------------------------------------------------------
def pacing_slider(value: float, disabled: bool = False) -> str:
    return f"""
    <div class="panel pacing-slider">
      <h3>⏱ Size &amp; Speed</h3>
      <input type="range" id="size-speed" min="{PACING_MIN}" max="{PACING_MAX}"
             value="{int(value)}" {_disabled(disabled)}>
      <div class="step-info">
        <span id="pacing-length">{pacing_to_length(value)}</span> bars ·
        <span id="pacing-delay">{pacing_to_delay_ms(value)}</span> ms / step
      </div>
      <p class="hint">Bigger arrays animate faster.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Controls
# ---------------------------------------------------------------------------
def array_controls(disabled: bool = False) -> str:
    return f"""
    <div class="panel array-controls">
      <h3>🎲 Array</h3>
      <button id="btn-new" class="btn-secondary" {_disabled(disabled)}>New Array</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None, error: Optional[str] = None) -> str:
    if error:
        return f"""
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">⚠️ The last run stopped early ({escape(error)}). Generate a new array to start over.</p>
        </div>
        """
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    status = "✅ Sorted" if metrics.sorted_ok else "❌ Not sorted"

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Elements:</td><td><strong>{metrics.length}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Writes:</td><td><strong>{metrics.writes}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.0f} ms</strong></td></tr>
        <tr><td>Result:</td><td><strong>{status}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
    algo_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Pick an algorithm to view its pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    title = f'<div class="code-title">{escape(algo_label)}</div>' if algo_label else ''
    return f"""
    <div class="code-block">
      {title}
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return """<div class="explanation-text">▶ Click an <strong>algorithm</strong> to watch it sort the bars.</div>"""
    return f"""<div class="explanation-text">{escape(explanation)}</div>"""
