"""Shared test fixtures: small hand-checkable stroke meshes."""

from __future__ import annotations

import random

import pytest

from knotwork.models.stroke import Stroke, StrokeType
from knotwork.models.vector import Vec2


def make_grid(size: int, types: dict | None = None) -> list[Stroke]:
    """
    Square grid of (size + 1) x (size + 1) junctions at integer positions.
    `types` maps a stroke index to a non-default StrokeType.
    """
    types = types or {}
    strokes = []
    for x in range(size + 1):
        for y in range(size + 1):
            if x < size:
                strokes.append(((x, y), (x + 1, y)))
            if y < size:
                strokes.append(((x, y), (x, y + 1)))
    return [
        Stroke(a, b, types.get(i, StrokeType.CROSS))
        for i, (a, b) in enumerate(strokes)
    ]


# Mesh midpoints of the plus shape
WEST = Vec2(-1, 0)
SOUTH = Vec2(0, -1)
NORTH = Vec2(0, 1)
EAST = Vec2(1, 0)


@pytest.fixture
def isolated_cross():
    return [Stroke((0, 0), (2, 0), StrokeType.CROSS)]


@pytest.fixture
def plus_mesh():
    """Four Cross strokes leaving one central junction."""
    return [
        Stroke((0, 0), (2, 0)),
        Stroke((0, 0), (0, 2)),
        Stroke((0, 0), (-2, 0)),
        Stroke((0, 0), (0, -2)),
    ]


@pytest.fixture
def mixed_grid():
    """2 x 2 cells, mostly Cross with one Bounce and one Glance stroke."""
    return make_grid(2, {3: StrokeType.BOUNCE, 8: StrokeType.GLANCE})


@pytest.fixture
def cross_grid():
    return make_grid(3)


def random_stroke_type(rng: random.Random) -> StrokeType:
    r = rng.randrange(15)
    if r == 0:
        return StrokeType.BOUNCE
    if r == 1:
        return StrokeType.GLANCE
    return StrokeType.CROSS


def make_random_grid(seed: int, size: int = 8) -> list[Stroke]:
    """
    Grid with random stroke types and randomly deleted strokes, then one
    sweep removing strokes that have an endpoint shared with nothing else.
    """
    rng = random.Random(seed)
    segments = []
    for x in range(size + 1):
        for y in range(size + 1):
            if x < size:
                segments.append(((x, y), (x + 1, y)))
            if y < size:
                segments.append(((x, y), (x, y + 1)))

    threshold = 1.0 / (3 + rng.randrange(20))
    segments = [s for s in segments if rng.random() >= threshold]

    counts = {}
    for a, b in segments:
        counts[a] = counts.get(a, 0) + 1
        counts[b] = counts.get(b, 0) + 1
    segments = [(a, b) for a, b in segments if counts[a] > 1 and counts[b] > 1]

    return [Stroke(a, b, random_stroke_type(rng)) for a, b in segments]


@pytest.fixture(params=[3, 17, 2024])
def random_grid(request):
    return make_random_grid(request.param)


# Per-seed variants of `random_grid` for tests that look meshes up by name
# with request.getfixturevalue (which cannot resolve parametrized fixtures).
@pytest.fixture
def random_grid_3():
    return make_random_grid(3)


@pytest.fixture
def random_grid_17():
    return make_random_grid(17)


@pytest.fixture
def random_grid_2024():
    return make_random_grid(2024)
