"""
Visualization utilities for rendering the stroke mesh.

This module provides:
    • CanvasTransform (mesh coordinates → pixel coordinates)
    • new_canvas(params)
    • draw_strokes(img, strokes, transform)

Used by:
    - draw_threads.py
    - save_outputs.py
"""

from typing import List, Sequence, Tuple

import cv2
import numpy as np

from knotwork.config import (
    COLOR_CROSS,
    COLOR_GLANCE,
    COLOR_BOUNCE,
    COLOR_JUNCTION,
    COLOR_BACKGROUND,
)
from knotwork.models.stroke import Stroke, StrokeType


# ---------------------------------------------------------------------
#  COLOR MAP for stroke types
# ---------------------------------------------------------------------

STROKE_COLORS = {
    StrokeType.CROSS: COLOR_CROSS,
    StrokeType.GLANCE: COLOR_GLANCE,
    StrokeType.BOUNCE: COLOR_BOUNCE,
}


# ---------------------------------------------------------------------
#  Mesh → canvas mapping
# ---------------------------------------------------------------------

class CanvasTransform:
    """
    Uniform scale + offset that fits the strokes' bounding box into a square
    canvas with a margin on every side.
    """

    def __init__(self, strokes: Sequence[Stroke], size: int, margin: int):
        pts = np.array(
            [p.as_tuple() for s in strokes for p in (s.a, s.b)] or [(0.0, 0.0)],
            dtype=float,
        )
        self.lo = pts.min(axis=0)
        extent = float((pts.max(axis=0) - self.lo).max())
        inner = size - 2 * margin

        self.scale = inner / extent if extent > 0 else 1.0
        self.margin = margin
        self.size = size

    def to_pixels(self, points) -> np.ndarray:
        """(n, 2) mesh points → (n, 2) int32 pixel points."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        px = (pts - self.lo) * self.scale + self.margin
        return np.round(px).astype(np.int32)

    def point(self, p) -> Tuple[int, int]:
        x, y = self.to_pixels([tuple(p)])[0]
        return int(x), int(y)


def new_canvas(size: int) -> np.ndarray:
    canvas = np.zeros((size, size, 3), dtype=np.uint8)
    canvas[:] = COLOR_BACKGROUND
    return canvas


# ---------------------------------------------------------------------
#  Draw the stroke graph
# ---------------------------------------------------------------------

def draw_strokes(
    image,
    strokes: List[Stroke],
    transform: CanvasTransform,
    thickness: int = 1
):
    """
    Draws every stroke coloured by its type and a dot on each endpoint.

        cross  → red
        glance → green
        bounce → blue
    """
    for s in strokes:
        color = STROKE_COLORS.get(s.type, COLOR_JUNCTION)
        cv2.line(
            image,
            transform.point(s.a),
            transform.point(s.b),
            color,
            thickness
        )

    for s in strokes:
        for p in (s.a, s.b):
            cv2.circle(image, transform.point(p), 2, COLOR_JUNCTION, thickness=-1)

    return image
