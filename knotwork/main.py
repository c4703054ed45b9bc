from knotwork.utils.mesh_io import load_meshes, ensure_output_dir
from knotwork.weaving.graph_builder import build_crossing_graph
from knotwork.weaving.packaging import weave_graph

from knotwork.visualization.save_outputs import save_all_outputs

from knotwork.config import (
    SELECTED_MESH_PATTERN,
    OUTPUT_FOLDER,
    get_active_params,
)


def process_mesh(strokes, mesh_name: str, output_dir: str = OUTPUT_FOLDER):
    """
    Runs the complete pipeline for one stroke mesh:
      1. Crossing-graph construction (junctions + ports)
      2. Weave traversal and thread packaging (closed over/under threads,
         Hermite path + step curve per thread)
      3. Save all outputs (graph, threads, sampled JSON)

    Returns the Art, or None when the mesh was skipped.
    """

    print(f"\n=== Processing mesh with name: {mesh_name} ===")
    params = get_active_params()

    if not strokes:
        print(f"[WARN] No strokes in {mesh_name}. Skipping.")
        return None

    # ------------------------------
    # STEP 1: CROSSING GRAPH
    # ------------------------------
    try:
        graph = build_crossing_graph(strokes)
    except ValueError as exc:
        print(f"[ERROR] Invalid mesh {mesh_name}: {exc}")
        return None

    print(f"Strokes: {len(strokes)}  junctions: {len(graph.junctions)}  ports: {graph.port_count}")

    # ------------------------------
    # STEP 2: WEAVE + PACKAGE THREADS
    # ------------------------------
    art = weave_graph(graph, params)

    passes = [t.pass_count for t in art]
    print(f"Threads: {art.thread_count}  passes per thread: {passes}")

    # ------------------------------
    # STEP 3: SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        mesh_id=mesh_name,
        strokes=strokes,
        art=art,
        params=params,
    )

    print(f"[OK] Finished {mesh_name}")
    return art


def main():
    """
    Main entry point:
      - Loads meshes
      - Weaves each one independently
      - Saves output files
    """
    ensure_output_dir(OUTPUT_FOLDER)

    meshes, names = load_meshes(SELECTED_MESH_PATTERN)
    if not meshes:
        print(f"[ERROR] No meshes matched pattern: {SELECTED_MESH_PATTERN}")
        return

    for strokes, name in zip(meshes, names):
        process_mesh(strokes, name)

    print("\n=== All meshes processed ===")


if __name__ == "__main__":
    main()
