"""Tests for mesh loading and output helpers."""

import json

import numpy as np
import pytest

from knotwork.models.stroke import StrokeType
from knotwork.models.vector import Vec2
from knotwork.utils.mesh_io import (
    extract_numeric_id,
    load_meshes,
    load_strokes,
    parse_strokes,
    save_threads_json,
)
from knotwork.weaving.packaging import create_art


def write_mesh(path, strokes):
    path.write_text(json.dumps({"strokes": strokes}), encoding="utf-8")
    return path


def test_load_strokes_reads_types_and_defaults(tmp_path):
    path = write_mesh(tmp_path / "007.json", [
        {"a": [0, 0], "b": [1, 0], "type": "Bounce"},
        {"a": [0, 0], "b": [0, 1]},
    ])
    strokes = load_strokes(str(path))
    assert len(strokes) == 2
    assert strokes[0].type is StrokeType.BOUNCE
    assert strokes[1].type is StrokeType.CROSS
    assert strokes[1].b == Vec2(0, 1)


def test_parse_strokes_accepts_bare_list():
    strokes = parse_strokes([{"a": [0, 0], "b": [2, 2], "type": "glance"}])
    assert strokes[0].midpoint() == Vec2(1, 1)


@pytest.mark.parametrize("entry", [
    {"a": [0, 0]},
    {"a": [0, 0], "b": [1, 0], "type": "twist"},
    {"a": [0, 0], "b": [0, 0]},
    {"a": [0, 0, 0], "b": [1, 0]},
    [0, 0, 1, 0],
])
def test_parse_strokes_rejects_bad_entries(entry):
    with pytest.raises(ValueError):
        parse_strokes({"strokes": [entry]})


def test_load_meshes_skips_broken_files(tmp_path, capsys):
    write_mesh(tmp_path / "001.json", [{"a": [0, 0], "b": [1, 0]}])
    (tmp_path / "002.json").write_text("{not json", encoding="utf-8")

    meshes, names = load_meshes(str(tmp_path / "*.json"))
    assert names == ["001"]
    assert len(meshes[0]) == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_extract_numeric_id():
    assert extract_numeric_id("meshes/038.json") == "038"
    assert extract_numeric_id("meshes/plus.json") == "plus"


def test_save_threads_json(tmp_path, plus_mesh):
    art = create_art(plus_mesh)
    out = tmp_path / "out" / "plus_threads.json"
    save_threads_json(str(out), art, segments_per_knot=2)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["threads"]) == 1
    thread = data["threads"][0]
    assert thread["passes"] == 8
    assert len(thread["points"]) == len(thread["over"]) == 9 * 2 + 1
    np.testing.assert_allclose(thread["points"][0], thread["points"][-1])
