import math
from functools import total_ordering


@total_ordering
class Vec2:
    """
    Immutable 2D vector used for stroke endpoints, midpoints and normals.

    Supports:
      - +, -, scalar *, unary -
      - exact equality and hashing (junctions are matched by exact position)
      - strict total order (x first, then y) for deterministic containers
      - angle (atan2) and length
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vec2 is immutable")

    # ------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------
    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> "Vec2":
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    # ------------------------------------------------------------
    # Equality & ordering
    # ------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __lt__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        if self.x == other.x:
            return self.y < other.y
        return self.x < other.x

    def __hash__(self):
        return hash((self.x, self.y))

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------
    def angle(self) -> float:
        """Angle of the vector in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def as_tuple(self):
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Vec2({self.x:g}, {self.y:g})"
