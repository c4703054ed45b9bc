"""
Data Models

Defines the core data structures:
- Vec2
- Stroke / StrokeType
- Direction / Port
- Junction
- WeaveSample / Thread / Art
"""

from .vector import Vec2
from .stroke import Stroke, StrokeType
from .port import Direction, Port, PortKey, bounce, cross, glance, turn
from .junction import Junction
from .thread import WeaveSample, Thread, Art

__all__ = [
    "Vec2",
    "Stroke",
    "StrokeType",
    "Direction",
    "Port",
    "PortKey",
    "bounce",
    "cross",
    "glance",
    "turn",
    "Junction",
    "WeaveSample",
    "Thread",
    "Art",
]
