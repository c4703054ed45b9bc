"""
Centralized output-saving utilities for the weaving pipeline.

This module provides:
    • save_all_outputs(...)
    • save_graph(...)
    • save_threads(...)

Uses draw modules to visualize and utils.mesh_io for filesystem handling.
"""

from typing import List

from knotwork.config import get_active_params
from knotwork.models.stroke import Stroke
from knotwork.models.thread import Art
from knotwork.utils.mesh_io import save_image, save_threads_json, ensure_output_dir
from knotwork.visualization.draw_strokes import CanvasTransform, new_canvas, draw_strokes
from knotwork.visualization.draw_threads import draw_threads


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_graph(path: str, strokes: List[Stroke], transform: CanvasTransform):
    """
    Draw the stroke mesh on a blank canvas and save to disk.
    """
    vis = new_canvas(transform.size)
    draw_strokes(vis, strokes, transform)
    save_image(path, vis)


def save_threads(path: str, art: Art, transform: CanvasTransform, params):
    """
    Draw the woven threads on a blank canvas and save to disk.
    """
    vis = new_canvas(transform.size)
    draw_threads(
        vis,
        art,
        transform,
        segments_per_knot=params["SEGMENTS_PER_KNOT"],
        thickness=params["THREAD_THICKNESS"]
    )
    save_image(path, vis)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    mesh_id: str,
    strokes: List[Stroke],
    art: Art,
    params=None
):
    """
    Saves every output artifact for one woven mesh.

    Example output:
        <id>_graph.png
        <id>_threads.png
        <id>_threads.json
    """
    if params is None:
        params = get_active_params()

    ensure_output_dir(output_dir)
    transform = CanvasTransform(strokes, params["CANVAS_SIZE"], params["CANVAS_MARGIN"])

    # 1) Stroke graph
    if params["DRAW_GRAPH"]:
        save_graph(f"{output_dir}/{mesh_id}_graph.png", strokes, transform)

    # 2) Thread snapshot
    if params["DRAW_THREADS"]:
        save_threads(f"{output_dir}/{mesh_id}_threads.png", art, transform, params)

    # 3) Sampled threads for other tools
    save_threads_json(
        f"{output_dir}/{mesh_id}_threads.json",
        art,
        params["SEGMENTS_PER_KNOT"]
    )
