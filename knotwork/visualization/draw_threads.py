"""
Visualization utilities for rendering traced threads.

This module provides:
    • thread_color(index)
    • split_by_level(points, over)
    • draw_threads(img, art, transform, segments_per_knot, thickness)

Under-passes of every thread are drawn first (shaded), over-passes on top,
so crossings read correctly in the snapshot.
"""

from typing import List, Tuple

import cv2
import numpy as np

from knotwork.config import THREAD_COLORS, UNDER_SHADE
from knotwork.models.thread import Art
from knotwork.visualization.draw_strokes import CanvasTransform


def thread_color(index: int, over: bool = True) -> Tuple[int, int, int]:
    base = THREAD_COLORS[index % len(THREAD_COLORS)]
    if over:
        return base
    return tuple(int(c * UNDER_SHADE) for c in base)


def split_by_level(points: np.ndarray, over: np.ndarray):
    """
    Cut a sampled polyline into runs of constant over/under level.

    Returns a list of (level, (k, 2) points). Neighbouring runs share their
    boundary point so the drawn line has no gaps.
    """
    runs = []
    start = 0
    for i in range(1, len(points)):
        if over[i] != over[start]:
            runs.append((bool(over[start]), points[start:i + 1]))
            start = i
    if len(points) - start > 1:
        runs.append((bool(over[start]), points[start:]))
    return runs


def draw_threads(
    image,
    art: Art,
    transform: CanvasTransform,
    segments_per_knot: int,
    thickness: int
):
    """
    Sample each thread at `segments_per_knot` points per knot and draw it.
    """
    levels: List[Tuple[bool, int, np.ndarray]] = []

    for index, thread in enumerate(art):
        count = max(1, thread.path.knot_count * segments_per_knot)
        points = transform.to_pixels(thread.path.sample(count))
        over = thread.z.sample(count) >= 0.5

        for level, run in split_by_level(points, over):
            levels.append((level, index, run))

    for draw_over in (False, True):
        for level, index, run in levels:
            if level != draw_over:
                continue
            cv2.polylines(
                image,
                [run.reshape(-1, 1, 2)],
                isClosed=False,
                color=thread_color(index, over=level),
                thickness=thickness,
                lineType=cv2.LINE_AA
            )

    return image
