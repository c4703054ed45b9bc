from typing import Dict, Iterable, List, Set

from knotwork.models.junction import Junction
from knotwork.models.port import Direction, Port, PortKey
from knotwork.models.stroke import Stroke
from knotwork.models.vector import Vec2


class CrossingGraph:
    """
    Ports and junctions derived from one stroke mesh.

      ports     : every port, keyed by (midpoint, direction); never modified
      unused    : keys of ports not yet traversed; shrinks monotonically
      junctions : junction lookup by exact position
    """

    def __init__(self):
        self.ports: Dict[PortKey, Port] = {}
        self.unused: Set[PortKey] = set()
        self.junctions: Dict[Vec2, Junction] = {}
        self.strokes: List[Stroke] = []

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def junction_at(self, position: Vec2) -> Junction:
        """Look up or create the junction at an exact position."""
        j = self.junctions.get(position)
        if j is None:
            j = Junction(position)
            self.junctions[position] = j
        return j

    def add_stroke(self, stroke: Stroke):
        """
        Register a stroke: both end junctions learn its midpoint and the four
        ports of the midpoint are created unused.
        """
        if stroke.a == stroke.b:
            raise ValueError(f"Stroke has zero length: {stroke}")

        mid = stroke.midpoint()
        if (mid, Direction.FRONT_LEFT) in self.ports:
            raise ValueError(
                f"Stroke {stroke} shares its midpoint {mid} with an earlier stroke "
                "(duplicate or overlapping strokes)"
            )

        normal = stroke.normal()

        ja = self.junction_at(stroke.a)
        ja.add_mid(mid)
        jb = self.junction_at(stroke.b)
        jb.add_mid(mid)

        for d in Direction:
            port = Port(mid, d, stroke.type, normal, left=ja, right=jb)
            self.ports[port.key] = port
            self.unused.add(port.key)

        self.strokes.append(stroke)

    def sort_junctions(self):
        for j in self.junctions.values():
            j.sortMids()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def port(self, key: PortKey) -> Port:
        return self.ports[key]

    @property
    def port_count(self) -> int:
        return len(self.ports)

    def __repr__(self):
        return (
            f"CrossingGraph(strokes={len(self.strokes)}, "
            f"junctions={len(self.junctions)}, unused={len(self.unused)})"
        )


def build_crossing_graph(strokes: Iterable[Stroke]) -> CrossingGraph:
    """
    Build junctions and ports for a stroke list given in any order.

    Parameters
    ----------
    strokes : iterable[Stroke]
        Input mesh. Endpoints are matched by exact equality.

    Returns
    -------
    CrossingGraph
        4 unused ports per stroke, every junction sorted by polar angle.

    Raises
    ------
    ValueError
        For a zero-length stroke or two strokes with the same midpoint.
    """
    graph = CrossingGraph()
    for stroke in strokes:
        graph.add_stroke(stroke)

    graph.sort_junctions()
    return graph
