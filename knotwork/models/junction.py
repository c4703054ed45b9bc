from typing import List

from knotwork.models.vector import Vec2
from knotwork.utils.geometry import polar_sort_key


class Junction:
    """
    A shared stroke endpoint.

    It supports:
      - association with the midpoints of every incident stroke
      - one-time angular sort of those midpoints around the junction
      - cyclic stepping to the neighbouring midpoint (clockwise or not)

    Notes:
      • Junctions are matched by exact position; callers snap coordinates
        before building the mesh if fuzzy matching is wanted.
      • After `sortMids()` the junction is not modified again.
    """

    def __init__(self, position: Vec2):
        self.position: Vec2 = position

        # midpoints of incident strokes, cyclic, ascending polar angle
        self.mids: List[Vec2] = []

    # ------------------------------------------------------------------
    # Stroke associations
    # ------------------------------------------------------------------

    def add_mid(self, mid: Vec2):
        """
        Record the midpoint of a stroke ending here.
        """
        self.mids.append(mid)

    @property
    def degree(self) -> int:
        return len(self.mids)

    # ------------------------------------------------------------------
    # Angular ordering
    # ------------------------------------------------------------------

    def sortMids(self):
        """
        Sort incident midpoints by the angle of (mid - position), ascending.
        Equal angles (overlapping strokes) fall back to the midpoint order so
        the result never depends on insertion order.
        """
        self.mids.sort(key=lambda m: polar_sort_key(self.position, m))

    def find_next(self, mid: Vec2, clockwise: bool) -> Vec2:
        """
        Return the midpoint following `mid` in the cyclic order (`clockwise`)
        or preceding it (not `clockwise`).

        A junction with a single stroke hands back that stroke's midpoint.
        An unknown midpoint is returned unchanged.
        """
        try:
            i = self.mids.index(mid)
        except ValueError:
            return mid

        step = 1 if clockwise else -1
        return self.mids[(i + step) % len(self.mids)]

    def __repr__(self):
        return f"Junction(position={self.position}, degree={self.degree})"
