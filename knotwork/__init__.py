"""
Knotwork Package

Weaves a planar mesh of typed strokes into closed Celtic-interlace threads:

- Stroke / junction / port models
- Crossing-graph construction
- Over/under weave traversal
- Thread packaging into closed Hermite paths + over/under step curves
- Debug visualization of meshes and threads
"""

from .models import Vec2, Stroke, StrokeType, Art, Thread
from .weaving import create_art

__all__ = [
    "Vec2",
    "Stroke",
    "StrokeType",
    "Art",
    "Thread",
    "create_art",
    "config",
    "main",
    "models",
    "utils",
    "visualization",
    "weaving",
]
