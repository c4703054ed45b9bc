from typing import Iterable, List, Sequence

from knotwork.models.stroke import Stroke
from knotwork.models.thread import Art, Thread, WeaveSample
from knotwork.utils.splines import HermiteCurve, StepCurve
from knotwork.weaving.graph_builder import CrossingGraph, build_crossing_graph
from knotwork.weaving.traversal import trace_threads


def uniform_knots(count: int) -> List[float]:
    """
    `count` knots spaced evenly over [0, 1) plus a closing knot at 1.0.
    """
    xs = [i / count for i in range(count)]
    xs.append(1.0)
    return xs


def package_thread(passes: Sequence[WeaveSample]) -> Thread:
    """
    Close a traced sample list and wrap it into a looping Hermite path and a
    looping over/under step curve over the same knots.
    """
    if not passes:
        raise ValueError("Cannot package a thread without samples")

    samples = list(passes)
    samples.append(samples[0])

    xs = uniform_knots(len(passes))
    path = HermiteCurve(
        xs,
        [s.position for s in samples],
        [s.tangent for s in samples],
        loop=True,
    )
    z = StepCurve(xs, [1.0 if s.up else 0.0 for s in samples], loop=True)
    return Thread(samples, path, z)


def weave_graph(graph: CrossingGraph, params=None) -> Art:
    """
    Trace every port of an already built crossing graph and package the
    threads. The graph is left fully consumed.
    """
    traced = trace_threads(graph, params)
    return Art([package_thread(passes) for passes in traced])


def create_art(strokes: Iterable[Stroke], params=None) -> Art:
    """
    Weave a stroke mesh into closed over/under threads.

    Steps:
      1. Build the crossing graph (junctions + 4 ports per stroke)
      2. Trace threads until every port is consumed
      3. Package each thread as a closed path + step curve

    The graph is local to this call; the returned Art shares nothing with it.
    """
    return weave_graph(build_crossing_graph(strokes), params)
