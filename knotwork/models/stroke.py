from enum import Enum

from knotwork.models.vector import Vec2


class StrokeType(Enum):
    """
    How a thread behaves when it passes the midpoint of a stroke:

      CROSS  → straight through to the diagonal lane (over/under crossing)
      BOUNCE → reflects back towards the junction it came from
      GLANCE → deflects to the other side without advancing through
    """

    CROSS = "cross"
    BOUNCE = "bounce"
    GLANCE = "glance"

    @classmethod
    def parse(cls, name) -> "StrokeType":
        """
        Accepts a StrokeType or a case-insensitive name ("Cross", "bounce", ...).
        """
        if isinstance(name, StrokeType):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown stroke type: {name!r}") from None


class Stroke:
    """
    A typed line segment between two junction positions.

    Strokes are read-only input to the weave: the orientation a→b is kept
    because it fixes which junction counts as "left" and which as "right"
    for every port on the stroke.
    """

    __slots__ = ("a", "b", "type")

    def __init__(self, a, b, stroke_type=StrokeType.CROSS):
        a = a if isinstance(a, Vec2) else Vec2(*a)
        b = b if isinstance(b, Vec2) else Vec2(*b)
        if a == b:
            raise ValueError(f"Stroke has zero length: both endpoints at {a}")

        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "type", StrokeType.parse(stroke_type))

    def __setattr__(self, name, value):
        raise AttributeError("Stroke is read-only")

    # ------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------
    def angle(self) -> float:
        """Angle of the stroke from a to b."""
        return (self.b - self.a).angle()

    def length(self) -> float:
        return (self.b - self.a).length()

    def midpoint(self) -> Vec2:
        half = (self.b - self.a) * 0.5
        return self.a + half

    def normal(self) -> Vec2:
        """
        Stroke vector rotated by +90°. Not normalised: its length equals the
        stroke length, which scales the thread offsets with the mesh.
        """
        d = self.b - self.a
        return Vec2(-d.y, d.x)

    # ------------------------------------------------------------
    # Equality & repr
    # ------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Stroke):
            return NotImplemented
        return (self.a, self.b, self.type) == (other.a, other.b, other.type)

    def __hash__(self):
        return hash((self.a, self.b, self.type))

    def __repr__(self):
        return f"Stroke(a={self.a}, b={self.b}, type={self.type.name})"
