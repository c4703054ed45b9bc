"""
Configuration file for the knotwork weaving pipeline.

Contains both PREVIEW and FULL rendering parameter sets for the debug outputs.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True for small, quick debug snapshots
PREVIEW_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

SELECTED_MESH_PATTERN = "meshes/*.json"
OUTPUT_FOLDER = "output"


# ===============================================================
# FULL-MODE PARAMETERS
# ===============================================================

FULL = {
    "CANVAS_SIZE": 1024,
    "SEGMENTS_PER_KNOT": 25,
    "THREAD_THICKNESS": 9,
    "CANVAS_MARGIN": 48,
}


# ===============================================================
# PREVIEW-MODE PARAMETERS
# ===============================================================

PREVIEW = {
    "CANVAS_SIZE": 384,
    "SEGMENTS_PER_KNOT": 8,
    "THREAD_THICKNESS": 4,
    "CANVAS_MARGIN": 16,
}


# ---------------------------------------------------------------
# WEAVE GEOMETRY (used in both modes)
# ---------------------------------------------------------------

# Tangent length at a crossing, relative to the stroke normal
CROSS_TANGENT_SCALE = 1.3

# Glancing pass: offset along the stroke normal, tangent along the stroke
GLANCE_OFFSET = 0.25
GLANCE_TANGENT_SCALE = 0.3

# Bouncing pass: offset along the stroke, tangent along the stroke normal
BOUNCE_OFFSET = 0.25
BOUNCE_TANGENT_SCALE = 0.3


# ---------------------------------------------------------------
# DEBUG OUTPUT TOGGLES
# ---------------------------------------------------------------

DRAW_GRAPH = True
DRAW_THREADS = True


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

COLOR_CROSS = (0, 0, 255)     # Cross strokes - red
COLOR_GLANCE = (0, 255, 0)    # Glance strokes - green
COLOR_BOUNCE = (255, 0, 0)    # Bounce strokes - blue
COLOR_JUNCTION = (255, 255, 255)
COLOR_BACKGROUND = (0, 0, 0)

THREAD_COLORS = [
    (66, 135, 245),
    (80, 200, 120),
    (60, 76, 231),
    (0, 191, 255),
    (180, 105, 255),
    (208, 224, 64),
    (0, 140, 255),
    (203, 192, 255),
]

# Under-passes are drawn darker by this factor
UNDER_SHADE = 0.45


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the weaver and the visualization so they only import one dictionary.
    """

    base = {
        "CROSS_TANGENT_SCALE": CROSS_TANGENT_SCALE,
        "GLANCE_OFFSET": GLANCE_OFFSET,
        "GLANCE_TANGENT_SCALE": GLANCE_TANGENT_SCALE,
        "BOUNCE_OFFSET": BOUNCE_OFFSET,
        "BOUNCE_TANGENT_SCALE": BOUNCE_TANGENT_SCALE,
        "DRAW_GRAPH": DRAW_GRAPH,
        "DRAW_THREADS": DRAW_THREADS,
        "UNDER_SHADE": UNDER_SHADE,
    }

    # Merge in preview or full mode values
    if PREVIEW_MODE:
        base.update(PREVIEW)
    else:
        base.update(FULL)

    # Drawable area once the margin is taken off both sides
    base["CANVAS_INNER"] = base["CANVAS_SIZE"] - 2 * base["CANVAS_MARGIN"]

    return base
