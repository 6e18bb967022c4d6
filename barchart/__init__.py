"""
barchart/
---------
Core data layer.  Public API:

    from barchart import Bar, BarMark, RenderSurface
    from barchart import generate_sequence, bar_width
"""

from barchart.bar       import Bar, BarMark
from barchart.surface   import RenderSurface, bar_width
from barchart.generator import generate_sequence

__all__ = [
    "Bar",           "BarMark",
    "RenderSurface", "bar_width",
    "generate_sequence",
]
