"""
Utility Functions

Provides geometry helpers, interpolating curves, mesh I/O and output
helpers used across the weaving stages.
"""

from .geometry import (
    polar_angle,
    polar_sort_key,
    rotate_by,
    from_polar,
)
from .splines import (
    wrap,
    hermite,
    Curve,
    HermiteCurve,
    CatmullRomCurve,
    LinearCurve,
    StepCurve,
)
from .mesh_io import (
    parse_strokes,
    load_strokes,
    load_meshes,
    extract_numeric_id,
    ensure_output_dir,
    save_image,
    save_threads_json,
)

__all__ = [
    "polar_angle",
    "polar_sort_key",
    "rotate_by",
    "from_polar",
    "wrap",
    "hermite",
    "Curve",
    "HermiteCurve",
    "CatmullRomCurve",
    "LinearCurve",
    "StepCurve",
    "parse_strokes",
    "load_strokes",
    "load_meshes",
    "extract_numeric_id",
    "ensure_output_dir",
    "save_image",
    "save_threads_json",
]
