import math
from typing import List, Set

from knotwork.config import get_active_params
from knotwork.models.port import (
    Direction,
    Port,
    PortKey,
    cross,
    glance,
    is_front,
    is_left,
    turn,
)
from knotwork.models.stroke import StrokeType
from knotwork.models.thread import WeaveSample
from knotwork.utils.geometry import rotate_by
from knotwork.weaving.graph_builder import CrossingGraph


QUARTER_PI = math.pi / 4

# Rotation of the crossing tangent away from the stroke normal, per exit lane
CROSS_TANGENT_ROTATION = {
    Direction.FRONT_LEFT: QUARTER_PI,
    Direction.BACK_LEFT: 3 * QUARTER_PI,
    Direction.BACK_RIGHT: -3 * QUARTER_PI,
    Direction.FRONT_RIGHT: -QUARTER_PI,
}


class WeaveTracer:
    """
    Splits the ports of a crossing graph into closed threads.

    State:
      - graph.unused : ports not yet traversed
      - crossed_up   : unused ports whose crossing partner was already
                       passed underneath, so they must be passed over

    Each call to `trace_thread` walks from a start port through midpoints and
    junctions until no unused continuation is left, consuming two ports
    (entry + exit) per pass. `trace_all` repeats until every port is used.
    """

    def __init__(self, graph: CrossingGraph, params=None):
        self.graph = graph
        self.crossed_up: Set[PortKey] = set()
        self.params = params if params is not None else get_active_params()

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def has_work(self) -> bool:
        return bool(self.graph.unused or self.crossed_up)

    def consume(self, key: PortKey):
        """Mark a port used. The port must still be unused."""
        self.crossed_up.discard(key)
        if key not in self.graph.unused:
            raise RuntimeError(f"Port {key[1].name} at {key[0]} consumed twice")
        self.graph.unused.discard(key)

    def next_start(self):
        """
        Ports crossed from below go first, entered from above; otherwise the
        smallest unused port starts a new thread from below.
        """
        if self.crossed_up:
            return self.graph.port(min(self.crossed_up)), True
        return self.graph.port(min(self.graph.unused)), False

    def mark_crossing(self, cur: Port):
        """
        The thread passes under the crossing at `cur`; the other pair of
        lanes at this midpoint has to pass over.
        """
        above = (cur.mid, glance(cur.dir))
        if above not in self.graph.unused:
            return

        opposite = (cur.mid, cross(above[1]))
        if opposite not in self.graph.unused:
            raise RuntimeError(
                f"Crossing at {cur.mid} is half used: {above[1].name} is free "
                f"but {opposite[1].name} is not"
            )
        self.crossed_up.add(above)
        self.crossed_up.add(opposite)

    # ------------------------------------------------------------------
    # Sample geometry
    # ------------------------------------------------------------------

    def sample_geometry(self, cur: Port):
        """
        Position and tangent of the pass leaving on `cur` (the exit port).
        """
        p = self.params
        front = is_front(cur.dir)
        left = is_left(cur.dir)
        across = cur.left.position - cur.right.position

        match cur.type:
            case StrokeType.CROSS:
                tangent = rotate_by(cur.normal, CROSS_TANGENT_ROTATION[cur.dir])
                return cur.mid, tangent * p["CROSS_TANGENT_SCALE"]

            case StrokeType.GLANCE:
                offset = p["GLANCE_OFFSET"] if front else -p["GLANCE_OFFSET"]
                scale = p["GLANCE_TANGENT_SCALE"] if left else -p["GLANCE_TANGENT_SCALE"]
                return cur.mid + cur.normal * offset, across * scale

            case StrokeType.BOUNCE:
                offset = p["BOUNCE_OFFSET"] if left else -p["BOUNCE_OFFSET"]
                scale = p["BOUNCE_TANGENT_SCALE"] if front else -p["BOUNCE_TANGENT_SCALE"]
                return cur.mid + across * offset, cur.normal * scale

            case _:
                raise ValueError(f"Not a stroke type: {cur.type!r}")

    # ------------------------------------------------------------------
    # Continuation
    # ------------------------------------------------------------------

    def next_port(self, cur: Port, junction):
        """
        Port through which the thread enters the next stroke around
        `junction`, or None when every candidate is already used.

        Entry from the right is tried first; the diagonal lane is the
        fallback.
        """
        clockwise = cur.dir in (Direction.FRONT_LEFT, Direction.BACK_RIGHT)
        nxt = junction.find_next(cur.mid, clockwise)
        d = Direction.FRONT_RIGHT if clockwise else Direction.BACK_RIGHT

        key = (nxt, d)
        if key not in self.graph.unused:
            key = (nxt, cross(d))
            if key not in self.graph.unused:
                return None
            return self.graph.port(key)

        port = self.graph.port(key)
        if port.right is not junction:
            # entering from the left junction: take the opposite lane
            port = port.with_direction(cross(port.dir))
            if port.key not in self.graph.unused:
                return None
        return port

    # ------------------------------------------------------------------
    # Tracing
    # ------------------------------------------------------------------

    def trace_thread(self) -> List[WeaveSample]:
        """
        Trace one thread from the next start port until it closes.
        Returns the passes without a closing sample.
        """
        cur, up = self.next_start()
        samples: List[WeaveSample] = []

        while True:
            recorded_up = up

            if not up and cur.type is StrokeType.CROSS:
                self.mark_crossing(cur)

            self.consume(cur.key)
            entry_key = cur.key
            junction = cur.entry_junction()

            cur = cur.with_direction(turn(cur.dir, cur.type))
            self.consume(cur.key)

            if cur.type is StrokeType.CROSS:
                up = not up

            position, tangent = self.sample_geometry(cur)
            samples.append(WeaveSample(position, tangent, recorded_up, entry_key, cur.key))

            if cur.type is not StrokeType.BOUNCE:
                junction = cur.left if junction is cur.right else cur.right

            nxt = self.next_port(cur, junction)
            if nxt is None:
                break
            cur = nxt

        return samples

    def trace_all(self) -> List[List[WeaveSample]]:
        threads = []
        while self.has_work():
            threads.append(self.trace_thread())
        return threads


def trace_threads(graph: CrossingGraph, params=None) -> List[List[WeaveSample]]:
    """
    Consume every port of `graph`, returning the passes of each thread in
    trace order. The graph's unused set is empty afterwards.
    """
    return WeaveTracer(graph, params).trace_all()
