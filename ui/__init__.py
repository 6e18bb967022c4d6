"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import algorithm_buttons, pacing_slider, …
"""

from ui.canvas import render_canvas, CanvasConfig

from ui.controls import (
    algorithm_buttons,
    pacing_slider,
    array_controls,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "algorithm_buttons",
    "pacing_slider",
    "array_controls",
    "analytics_panel",
    "pseudocode_viewer",
    "explanation_panel",
]
