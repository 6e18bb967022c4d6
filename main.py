"""
main.py — Sorting Visualizer Flask App
=======================================
The web server that powers the visualizer.

Routes:
  GET  /                 – main UI
  GET  /api/state        – current bars + panels (polled while a run is active)
  POST /api/array/new    – generate a new random array
  POST /api/pacing       – move the size/speed slider
  POST /api/resize       – report the bars container's inner width
  POST /api/run          – start a sort on a worker thread

State management:
  One process-wide RunController owns the array, the bars and the
  single-flight guard.  While it is running, array / pacing / resize /
  run requests answer `"accepted": false` and change nothing.

Configuration:
  DefaultConfig from config.py, overridable with SORTVIZ_* environment
  variables, e.g.  SORTVIZ_PORT=8000 SORTVIZ_LOG_LEVEL=DEBUG python main.py
"""

import logging
import os
import sys

from flask import Flask, render_template_string, request, jsonify

# add project root to path so imports work when run as a script
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms
from config import DefaultConfig
from engine import RunController
from logging_config import setup_logging
from ui import (
    render_canvas,
    algorithm_buttons,
    pacing_slider,
    array_controls,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
)

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.from_object(DefaultConfig)
app.config.from_prefixed_env("SORTVIZ")

controller = RunController(
    pacing=app.config["PACING_DEFAULT"],
    container_width=app.config["CONTAINER_WIDTH"],
)


# ---------------------------------------------------------------------------
# Payload Helpers
# ---------------------------------------------------------------------------
def state_payload() -> dict:
    """Snapshot of the controller plus every panel the page re-renders."""
    snap = controller.snapshot()
    algo_info = get_algorithm(controller.algo_key) if controller.algo_key else None

    snap.update({
        "svg": render_canvas(controller.surface),
        "pseudocode": pseudocode_viewer(
            pseudocode_lines=algo_info.pseudocode if algo_info else [],
            current_line=snap["pseudocode_line"],
            algo_label=algo_info.label if algo_info else "",
        ),
        "explanation": explanation_panel(snap["explanation"]),
        "analytics": analytics_panel(controller.last_metrics, controller.last_error),
    })
    return snap


def int_field(name: str):
    """Read an integer from the JSON body, or None if missing / malformed."""
    data = request.get_json(silent=True) or {}
    try:
        return int(data[name])
    except (KeyError, TypeError, ValueError):
        return None


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    disabled = not controller.controls_enabled
    snap = state_payload()

    html = render_template_string(INDEX_TEMPLATE,
        svg=snap["svg"],
        algo_buttons=algorithm_buttons(list_algorithms(), controller.algo_key, disabled),
        slider=pacing_slider(controller.pacing, disabled),
        array=array_controls(disabled),
        analytics=snap["analytics"],
        pseudocode=snap["pseudocode"],
        explanation=snap["explanation"],
        running=controller.running,
    )
    return html


# ---------------------------------------------------------------------------
# API: State
# ---------------------------------------------------------------------------
@app.route("/api/state", methods=["GET"])
def api_state():
    return jsonify(state_payload())


# ---------------------------------------------------------------------------
# API: Array / Pacing / Resize   (ignored while a run is active)
# ---------------------------------------------------------------------------
@app.route("/api/array/new", methods=["POST"])
def api_array_new():
    accepted = controller.regenerate()
    return jsonify({"accepted": accepted, **state_payload()})


@app.route("/api/pacing", methods=["POST"])
def api_pacing():
    value = int_field("value")
    if value is None:
        return jsonify({"error": "Expected an integer 'value'"}), 400

    accepted = controller.set_pacing(value)
    return jsonify({"accepted": accepted, **state_payload()})


@app.route("/api/resize", methods=["POST"])
def api_resize():
    width = int_field("width")
    if width is None or width <= 0:
        return jsonify({"error": "Expected a positive integer 'width'"}), 400

    accepted = controller.on_resize(width)
    return jsonify({"accepted": accepted, **state_payload()})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = request.get_json(silent=True) or {}
    algo_key = data.get("algo_key", "")

    if get_algorithm(algo_key) is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400

    accepted = controller.submit(algo_key)
    return jsonify({"accepted": accepted, **state_payload()})


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --bg-panel-hover: #1c2128;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    /* Sidebar */
    #sidebar {
      width: 320px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    /* Main area */
    #main { flex: 1; display: flex; flex-direction: column; min-width: 0; }

    /* Bars container: the browser reports its inner width to /api/resize */
    #bars {
      flex: 1;
      padding: 24px;
      display: flex;
      align-items: flex-end;
      border-bottom: 1px solid var(--border);
      overflow: hidden;
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 260px;
      max-height: 320px;
      overflow: hidden;
    }

    #pseudocode-container, #explanation-container {
      display: flex;
      flex-direction: column;
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 20px;
      overflow: hidden;
    }

    #pseudocode-container h3, #explanation-container h3 {
      font-size: 14px;
      font-weight: 700;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 16px;
      color: var(--accent-cyan);
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      overflow-y: auto;
      flex: 1;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
    }

    .code-title { color: var(--text-secondary); margin-bottom: 8px; }
    .code-line { padding: 2px 12px; border-radius: 6px; white-space: pre; }
    .code-line.highlight {
      background: linear-gradient(90deg, rgba(6, 182, 212, 0.15) 0%, transparent 100%);
      border-left: 3px solid var(--accent-cyan);
      padding-left: 9px;
    }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .explanation-text strong { color: var(--text-primary); }

    /* Panels */
    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .button-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 8px; }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }

    button.active { outline: 2px solid var(--accent-amber); }
    button:disabled, input:disabled { opacity: 0.45; cursor: not-allowed; }

    .btn-secondary { background: var(--bg-panel-hover); border: 1px solid var(--border); }

    input[type="range"] { width: 100%; margin: 6px 0; }

    .step-info {
      font-size: 13px;
      margin: 10px 0;
      color: var(--text-secondary);
      font-family: 'JetBrains Mono', monospace;
      padding: 8px 12px;
      background: var(--bg-darker);
      border-radius: 6px;
      border-left: 3px solid var(--accent-cyan);
    }

    table { width: 100%; font-size: 13px; }
    table td { padding: 6px 4px; }
    table td:first-child { color: var(--text-secondary); }
    table td:last-child { text-align: right; color: var(--accent-cyan); font-family: 'JetBrains Mono', monospace; }

    .hint, .placeholder { font-size: 12px; color: var(--text-muted); margin-top: 8px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-buttons">{{ algo_buttons|safe }}</div>
    <div id="slider">{{ slider|safe }}</div>
    <div id="array">{{ array|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="bars">{{ svg|safe }}</div>

    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div id="explanation-container">
        <h3>Step Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    let poller = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function setDisabled(flag) {
      document.querySelectorAll('#sidebar button, #sidebar input').forEach(el => el.disabled = flag);
    }

    function apply(data) {
      if (data.svg) document.getElementById('bars').innerHTML = data.svg;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      const len = document.getElementById('pacing-length');
      const delay = document.getElementById('pacing-delay');
      if (len && data.values) len.textContent = data.values.length;
      if (delay && data.delay_ms !== undefined) delay.textContent = data.delay_ms;
      setDisabled(!data.controls_enabled);
    }

    async function refresh() {
      const res = await fetch('/api/state');
      const data = await res.json();
      apply(data);
      if (!data.running && poller) {
        clearInterval(poller);
        poller = null;
      }
    }

    function startPolling() {
      if (!poller) poller = setInterval(refresh, 40);
    }

    function innerWidth() {
      const el = document.getElementById('bars');
      const style = getComputedStyle(el);
      return Math.floor(el.clientWidth - parseFloat(style.paddingLeft) - parseFloat(style.paddingRight));
    }

    async function reportWidth() {
      const data = await post('/api/resize', {width: innerWidth()});
      if (data.accepted) apply(data);
    }

    document.addEventListener('click', async (e) => {
      const btn = e.target.closest('button.algo');
      if (!btn || btn.disabled) return;
      document.querySelectorAll('button.algo').forEach(b => b.classList.remove('active'));
      btn.classList.add('active');
      const data = await post('/api/run', {algo_key: btn.dataset.algo});
      if (data.accepted) {
        apply(data);
        startPolling();
      }
    });

    document.getElementById('btn-new')?.addEventListener('click', async () => {
      const data = await post('/api/array/new');
      if (data.accepted) apply(data);
    });

    document.getElementById('size-speed')?.addEventListener('input', async (e) => {
      const data = await post('/api/pacing', {value: +e.target.value});
      if (data.accepted) apply(data);
    });

    window.addEventListener('resize', reportWidth);

    reportWidth();
    {% if running %}startPolling();{% endif %}
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    setup_logging(app.config["LOG_LEVEL"], app.config["LOG_FILE"])
    logger.info("Sorting Visualizer on http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(debug=app.config["DEBUG"], host=app.config["HOST"], port=app.config["PORT"], threaded=True)
