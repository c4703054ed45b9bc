"""
Mesh I/O utilities for the weaving pipeline.

This module provides:
    • load_strokes(path)
    • load_meshes(path_pattern)
    • extract_numeric_id(filename)
    • ensure_output_dir(path)
    • save_image(path, image)
    • save_threads_json(path, art, segments_per_knot)

Handles all filesystem interaction in a consistent, testable way.

Mesh file format (JSON):

    {"strokes": [{"a": [x, y], "b": [x, y], "type": "cross"}, ...]}

"type" is optional and defaults to "cross".
"""

import os
import re
import glob
import json
from typing import List, Tuple

import cv2
import numpy as np

from knotwork.models.stroke import Stroke, StrokeType


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_numeric_id(filename: str) -> str:
    """
    Extract the first integer found in the file's base name.
    Falls back to the bare stem when the name holds no digits.

    Example:
        'meshes/038.json' → '038'
        'meshes/plus.json' → 'plus'
    """
    base = os.path.basename(filename)
    m = re.search(r'\d+', base)
    if m:
        return m.group(0)
    return os.path.splitext(base)[0] or "0"


# -------------------------------------------------------------------------
#  MESH LOADING
# -------------------------------------------------------------------------

def parse_strokes(data, source: str = "<mesh>") -> List[Stroke]:
    """
    Build Stroke objects from decoded mesh JSON (a dict with a "strokes" list,
    or the list itself).
    """
    entries = data.get("strokes") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise ValueError(f"{source}: expected a list of strokes")

    strokes = []
    for i, entry in enumerate(entries):
        try:
            a = tuple(float(v) for v in entry["a"])
            b = tuple(float(v) for v in entry["b"])
            if len(a) != 2 or len(b) != 2:
                raise ValueError("endpoints must have two coordinates")
            stroke_type = StrokeType.parse(entry.get("type", StrokeType.CROSS))
            strokes.append(Stroke(a, b, stroke_type))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"{source}: stroke {i} is invalid ({exc})") from exc

    return strokes


def load_strokes(path: str) -> List[Stroke]:
    """
    Load one stroke mesh from a JSON file.
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    return parse_strokes(data, source=path)


def load_meshes(path_pattern: str) -> Tuple[List[List[Stroke]], List[str]]:
    """
    Loads all meshes matching the given glob pattern.

    Returns:
        meshes:  list of stroke lists
        names:   list of identifiers extracted from filenames

    Files that fail to parse are reported and skipped.

    Example:
        meshes, names = load_meshes('meshes/*.json')
    """

    file_list = sorted(glob.glob(path_pattern))
    meshes = []
    names = []

    for fname in file_list:
        try:
            strokes = load_strokes(fname)
        except (OSError, ValueError) as exc:
            print(f"[ERROR] Could not load {fname}: {exc}")
            continue
        meshes.append(strokes)
        names.append(extract_numeric_id(fname))

    return meshes, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    cv2.imwrite(path, image)


def save_threads_json(path: str, art, segments_per_knot: int):
    """
    Write every thread as a sampled closed polyline plus its over/under
    flags, so other tools can draw the weave without this package.
    """
    threads = []
    for thread in art:
        count = max(1, thread.path.knot_count * segments_per_knot)
        points = thread.path.sample(count)
        zs = thread.z.sample(count)
        threads.append({
            "passes": thread.pass_count,
            "points": points.tolist(),
            "over": [bool(z >= 0.5) for z in zs],
        })

    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as fh:
        json.dump({"threads": threads}, fh, indent=2)
