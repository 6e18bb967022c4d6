"""
canvas.py — SVG Bar-Chart Renderer
====================================
Pure rendering function: RenderSurface → SVG string.

The renderer consumes:
  • surface  – the bars (value, width, marks) and the measured container width
  • config   – visual config (canvas height, colours, fonts, …)

Design decisions:
  - NO mutation.  The caller passes everything in and gets back a string.
  - Bar height is the value read as a percentage of the canvas height.
  - Bars sit on a common baseline; x advances by width + gap.
  - Mark-based colouring is a dict lookup; COMPARE beats SORTED.
"""

from typing import Dict

from barchart import Bar, RenderSurface


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    height:  int = 420
    padding: int = 16      # headroom above the tallest bar for its label
    bg:      str = "#0d1117"

    # bar colours (state key → fill)
    bar_colors: Dict[str, str] = {
        "default": "#0ea5e9",   # cyan blue
        "compare": "#f59e0b",   # amber — being compared right now
        "sorted":  "#10b981",   # emerald — final position
    }

    bar_radius:        int = 2
    show_labels_below: int = 24     # draw values on bars when this few or fewer
    label_color:       str = "#e6edf3"
    label_size:        int = 11


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(surface: RenderSurface, config: CanvasConfig = CONFIG) -> str:
    """
    Returns an SVG string.

    Args:
        surface : Bars to draw.
        config  : Visual config.
    """
    width  = surface.container_width
    height = config.height + config.padding
    show_labels = 0 < len(surface) <= config.show_labels_below

    svg_parts = [
        f'<svg width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{width}" height="{height}" fill="{config.bg}"/>',
    ]

    for bar in surface.bars:
        x = bar.index * (bar.width + surface.gap)
        svg_parts.append(_render_bar(bar, x, config, show_labels))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(bar: Bar, x: int, config: CanvasConfig, show_label: bool) -> str:
    state_key = bar.state_key()
    fill = config.bar_colors.get(state_key, config.bar_colors["default"])

    h = round(config.height * bar.height_pct / 100, 2)
    y = round(config.padding + config.height - h, 2)

    parts = [
        f'<g class="bar {state_key}" data-index="{bar.index}" data-value="{bar.value}">',
        f'  <rect x="{x}" y="{y}" width="{bar.width}" height="{h}" '
        f'rx="{config.bar_radius}" fill="{fill}"/>',
    ]
    if show_label:
        parts.append(
            f'  <text x="{x + bar.width / 2}" y="{y - 4}" text-anchor="middle" '
            f'font-size="{config.label_size}" font-family="\'DM Sans\', sans-serif" '
            f'fill="{config.label_color}">{bar.value}</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)
