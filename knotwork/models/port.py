"""
Direction algebra and traversal ports.

Every stroke midpoint carries four ports, one per lane:

    FRONT_LEFT  | FRONT_RIGHT
    ------------+------------
    BACK_LEFT   | BACK_RIGHT

"front/back" is the end of the stroke the lane is nearer to, "left/right" the
side of the stroke axis. A thread passing a midpoint enters on one port and
leaves on another, chosen by the stroke type (see `turn`).
"""

from enum import IntEnum
from typing import Tuple

from knotwork.models.stroke import StrokeType
from knotwork.models.vector import Vec2


class Direction(IntEnum):
    FRONT_LEFT = 0
    FRONT_RIGHT = 1
    BACK_LEFT = 2
    BACK_RIGHT = 3


# ------------------------------------------------------------------
# Direction algebra (each map is an involution)
# ------------------------------------------------------------------

def bounce(d: Direction) -> Direction:
    """Swap front and back, keep the side."""
    match d:
        case Direction.FRONT_LEFT:  return Direction.BACK_LEFT
        case Direction.FRONT_RIGHT: return Direction.BACK_RIGHT
        case Direction.BACK_RIGHT:  return Direction.FRONT_RIGHT
        case Direction.BACK_LEFT:   return Direction.FRONT_LEFT
        case _:
            raise ValueError(f"Not a port direction: {d!r}")


def cross(d: Direction) -> Direction:
    """Swap both axes: the diametrically opposite lane."""
    match d:
        case Direction.FRONT_LEFT:  return Direction.BACK_RIGHT
        case Direction.FRONT_RIGHT: return Direction.BACK_LEFT
        case Direction.BACK_RIGHT:  return Direction.FRONT_LEFT
        case Direction.BACK_LEFT:   return Direction.FRONT_RIGHT
        case _:
            raise ValueError(f"Not a port direction: {d!r}")


def glance(d: Direction) -> Direction:
    """Swap the side, keep front/back."""
    match d:
        case Direction.FRONT_LEFT:  return Direction.FRONT_RIGHT
        case Direction.FRONT_RIGHT: return Direction.FRONT_LEFT
        case Direction.BACK_RIGHT:  return Direction.BACK_LEFT
        case Direction.BACK_LEFT:   return Direction.BACK_RIGHT
        case _:
            raise ValueError(f"Not a port direction: {d!r}")


def turn(d: Direction, stroke_type: StrokeType) -> Direction:
    """
    Exit direction for a thread entering a midpoint of the given type on `d`.
    """
    match stroke_type:
        case StrokeType.BOUNCE: return bounce(d)
        case StrokeType.CROSS:  return cross(d)
        case StrokeType.GLANCE: return glance(d)
        case _:
            raise ValueError(f"Not a stroke type: {stroke_type!r}")


def is_front(d: Direction) -> bool:
    return d in (Direction.FRONT_LEFT, Direction.FRONT_RIGHT)


def is_left(d: Direction) -> bool:
    return d in (Direction.FRONT_LEFT, Direction.BACK_LEFT)


# (midpoint, direction); tuples order by midpoint first, then direction.
PortKey = Tuple[Vec2, Direction]


class Port:
    """
    One directional traversal state at a stroke midpoint.

    Ports are compared by their key only; the payload (stroke type, normal,
    junction references) is fixed per midpoint and shared by all four ports.

    `left` is the junction at the stroke's endpoint a, `right` the junction at
    endpoint b. The traversal decides the entry side by comparing against
    these references, not by geometry.
    """

    __slots__ = ("mid", "dir", "type", "normal", "left", "right")

    def __init__(self, mid: Vec2, direction: Direction, stroke_type: StrokeType,
                 normal: Vec2, left, right):
        self.mid = mid
        self.dir = direction
        self.type = stroke_type
        self.normal = normal
        self.left = left
        self.right = right

    @property
    def key(self) -> PortKey:
        return (self.mid, self.dir)

    def with_direction(self, direction: Direction) -> "Port":
        """Sibling port at the same midpoint."""
        return Port(self.mid, direction, self.type, self.normal, self.left, self.right)

    def entry_junction(self):
        """Junction a thread entering on this port comes from."""
        return self.left if is_left(self.dir) else self.right

    # ------------------------------------------------------------------
    # Equality & ordering (by key, as stored in the unused set)
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Port):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other):
        if not isinstance(other, Port):
            return NotImplemented
        return self.key < other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"Port(mid={self.mid}, dir={self.dir.name}, type={self.type.name})"
