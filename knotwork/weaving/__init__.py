"""
Weaving Package

Contains the stages that turn a stroke mesh into closed threads:
- Crossing-graph construction (junctions + ports)
- Weave traversal
- Thread packaging into closed curves
"""

from .graph_builder import CrossingGraph, build_crossing_graph
from .traversal import WeaveTracer, trace_threads
from .packaging import package_thread, weave_graph, create_art

__all__ = [
    "CrossingGraph",
    "build_crossing_graph",
    "WeaveTracer",
    "trace_threads",
    "package_thread",
    "weave_graph",
    "create_art",
]
