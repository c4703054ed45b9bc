"""
Visualization Tools

Provides drawing utilities for:
- The stroke mesh (coloured by stroke type)
- Woven threads (under-passes first, over-passes on top)
"""

from .draw_strokes import CanvasTransform, new_canvas, draw_strokes
from .draw_threads import thread_color, split_by_level, draw_threads
from .save_outputs import (
    save_all_outputs,
    save_graph,
    save_threads,
)

__all__ = [
    "CanvasTransform",
    "new_canvas",
    "draw_strokes",
    "thread_color",
    "split_by_level",
    "draw_threads",
    "save_all_outputs",
    "save_graph",
    "save_threads",
]
