"""Tests for the debug visualization and the batch entry point."""

import numpy as np

from knotwork.config import get_active_params
from knotwork.main import process_mesh
from knotwork.models.stroke import Stroke
from knotwork.visualization.draw_strokes import CanvasTransform, new_canvas, draw_strokes
from knotwork.visualization.draw_threads import split_by_level, thread_color
from knotwork.visualization.save_outputs import save_all_outputs
from knotwork.weaving.graph_builder import build_crossing_graph
from knotwork.weaving.packaging import create_art, weave_graph


def test_canvas_transform_fits_margin(plus_mesh):
    t = CanvasTransform(plus_mesh, size=100, margin=10)
    px = t.to_pixels([(-2, -2), (2, 2)])
    assert px.tolist() == [[10, 10], [90, 90]]
    assert t.point((0, 0)) == (50, 50)


def test_draw_strokes_marks_canvas(plus_mesh):
    t = CanvasTransform(plus_mesh, size=64, margin=4)
    img = draw_strokes(new_canvas(64), plus_mesh, t)
    assert img.shape == (64, 64, 3)
    assert img.any()


def test_split_by_level_shares_boundaries():
    pts = np.arange(12).reshape(6, 2)
    over = np.array([False, False, True, True, True, False])
    runs = split_by_level(pts, over)
    # the trailing single point is already the end of the previous run
    assert [level for level, _ in runs] == [False, True]
    assert runs[0][1].tolist() == pts[0:3].tolist()
    assert runs[1][1].tolist() == pts[2:6].tolist()


def test_thread_color_shades_under():
    over = thread_color(0, over=True)
    under = thread_color(0, over=False)
    assert all(u <= o for u, o in zip(under, over))


def test_save_all_outputs_writes_files(tmp_path, mixed_grid):
    art = create_art(mixed_grid)
    save_all_outputs(str(tmp_path), "grid", mixed_grid, art, get_active_params())
    for suffix in ("graph.png", "threads.png", "threads.json"):
        assert (tmp_path / f"grid_{suffix}").is_file()


def test_process_mesh_reports_progress(tmp_path, plus_mesh, capsys):
    art = process_mesh(plus_mesh, "plus", output_dir=str(tmp_path))
    out = capsys.readouterr().out
    assert art.thread_count == 1
    assert "[OK] Finished plus" in out
    assert (tmp_path / "plus_threads.png").is_file()


def test_process_mesh_skips_empty_and_invalid(tmp_path, capsys):
    assert process_mesh([], "empty", output_dir=str(tmp_path)) is None
    dup = [Stroke((0, 0), (1, 0)), Stroke((1, 0), (0, 0))]
    assert process_mesh(dup, "dup", output_dir=str(tmp_path)) is None

    out = capsys.readouterr().out
    assert "[WARN] No strokes in empty" in out
    assert "[ERROR] Invalid mesh dup" in out


def test_weave_graph_consumes_graph(mixed_grid):
    graph = build_crossing_graph(mixed_grid)
    art = weave_graph(graph)
    assert not graph.unused
    assert [t.samples for t in art] == [t.samples for t in create_art(mixed_grid)]


def test_process_mesh_matches_create_art(tmp_path, mixed_grid):
    art = process_mesh(mixed_grid, "grid", output_dir=str(tmp_path))
    expected = create_art(mixed_grid, get_active_params())
    assert [t.samples for t in art] == [t.samples for t in expected]
