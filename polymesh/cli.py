"""Command that checks a polygonal mesh and exports it for visualisation."""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from polymesh.mesh import MeshImportError, PolygonalMesh, import_mesh
from polymesh.ucd import export_points, export_segments

_TOLERANCE = 1e-16


def format_markers(mesh: PolygonalMesh) -> str:
    """Return a listing of the vertex and edge markers, sorted by marker."""
    lines = ["Marker registrati:"]
    for marker in sorted(mesh.marker_cell0ds):
        ids = "".join(f" {i}" for i in mesh.marker_cell0ds[marker])
        lines.append(f"Marker0D: {marker} IDs = [{ids} ]")
    lines.append("")
    for marker in sorted(mesh.marker_cell1ds):
        ids = "".join(f" {i}" for i in mesh.marker_cell1ds[marker])
        lines.append(f"Marker1D: {marker} IDs = [{ids} ]")
    lines.append("")
    return "\n".join(lines) + "\n"


def edges_have_length(mesh: PolygonalMesh) -> bool:
    """Tell whether every edge joins existing, distinct vertices."""
    coordinates = mesh.cell0ds_coordinates
    for origin, end in mesh.cell1ds_extrema:
        if not (0 <= origin < len(coordinates) and 0 <= end < len(coordinates)):
            return False
        x0, y0, _ = coordinates[origin]
        x1, y1, _ = coordinates[end]
        if math.hypot(x1 - x0, y1 - y0) < _TOLERANCE:
            return False
    return True


def polygons_have_area(mesh: PolygonalMesh) -> bool:
    """Tell whether every polygon has at least three vertices and non-zero area."""
    coordinates = mesh.cell0ds_coordinates
    for vertex_ids in mesh.cell2ds_vertices.values():
        if len(vertex_ids) < 3:
            return False
        if any(not 0 <= v < len(coordinates) for v in vertex_ids):
            return False
        points = [coordinates[v] for v in vertex_ids]
        twice_area = sum(
            p[0] * q[1] - q[0] * p[1]
            for p, q in zip(points, points[1:] + points[:1])
        )
        if abs(twice_area) * 0.5 < _TOLERANCE:
            return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Import, check and export a mesh; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="polymesh",
        description="Check a polygonal mesh and export it to UCD files.",
    )
    parser.add_argument(
        "directory", nargs="?", default=".",
        help="directory holding Cell0Ds.csv, Cell1Ds.csv and Cell2Ds.csv",
    )
    parser.add_argument(
        "-o", "--output-dir", default=".",
        help="directory that receives Cell0Ds.inp and Cell1Ds.inp",
    )
    args = parser.parse_args(argv)

    try:
        mesh = import_mesh(args.directory)
    except MeshImportError as err:
        print(err, file=sys.stderr)
        print("file not found", file=sys.stderr)
        return 1

    print(format_markers(mesh), end="")
    print("nessun marker non valido")

    if not edges_have_length(mesh):
        print("Errore: esistono spigoli di lunghezza nulla.", file=sys.stderr)
        return 3
    print("nessun spigolo di lunghezza nulla")

    if not polygons_have_area(mesh):
        print("Errore: esistono poligoni con area nulla.", file=sys.stderr)
        return 4
    print("nessun poligono ha area nulla")

    output = Path(args.output_dir)
    export_points(output / "Cell0Ds.inp", mesh.cell0ds_coordinates)
    export_segments(
        output / "Cell1Ds.inp", mesh.cell0ds_coordinates, mesh.cell1ds_extrema
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())