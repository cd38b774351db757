"""Polygonal mesh read from the Cell0Ds, Cell1Ds and Cell2Ds CSV files."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

PathType = Union[str, "PathLike[str]"]

CELL0DS_FILE = "Cell0Ds.csv"
CELL1DS_FILE = "Cell1Ds.csv"
CELL2DS_FILE = "Cell2Ds.csv"


class MeshImportError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


@dataclass
class PolygonalMesh:
    """Vertices, edges and polygons of a two-dimensional mesh.

    Coordinates and extrema are indexed by cell id; markers map a non-zero
    marker to the ids that carry it, in file order.
    """

    cell0ds_id: list[int] = field(default_factory=list)
    cell0ds_coordinates: list[tuple[float, float, float]] = field(default_factory=list)
    marker_cell0ds: dict[int, list[int]] = field(default_factory=dict)

    cell1ds_id: list[int] = field(default_factory=list)
    cell1ds_extrema: list[tuple[int, int]] = field(default_factory=list)
    marker_cell1ds: dict[int, list[int]] = field(default_factory=dict)

    cell2ds_id: list[int] = field(default_factory=list)
    cell2ds_vertices: dict[int, list[int]] = field(default_factory=dict)
    cell2ds_edges: dict[int, list[int]] = field(default_factory=dict)

    @property
    def num_cell0ds(self) -> int:
        return len(self.cell0ds_id)

    @property
    def num_cell1ds(self) -> int:
        return len(self.cell1ds_id)

    @property
    def num_cell2ds(self) -> int:
        return len(self.cell2ds_vertices)


def _read_records(path: PathType, dimension: str) -> list[list[str]]:
    """Return the fields of every non-blank line after the header."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as err:
        raise MeshImportError(f"File '{path}' cannot be opened") from err

    records = [line.replace(";", " ").split() for line in lines[1:]]
    records = [fields for fields in records if fields]
    if not records:
        raise MeshImportError(f"There is no cell {dimension}")
    return records


def _malformed(path: PathType, fields: list[str]) -> MeshImportError:
    return MeshImportError(f"malformed line in '{path}': {';'.join(fields)}")


def _add_marker(markers: dict[int, list[int]], marker: int, cell_id: int) -> None:
    if marker != 0:
        markers.setdefault(marker, []).append(cell_id)


def import_cell0ds(mesh: PolygonalMesh, path: PathType) -> None:
    """Fill the vertices of ``mesh`` from an ``Id;Marker;X;Y`` file."""
    records = _read_records(path, "0D")
    count = len(records)
    coordinates = [(0.0, 0.0, 0.0)] * count
    ids: list[int] = []
    markers: dict[int, list[int]] = {}

    for fields in records:
        try:
            cell_id = int(fields[0])
            marker = int(fields[1])
            x, y = float(fields[2]), float(fields[3])
        except (IndexError, ValueError) as err:
            raise _malformed(path, fields) from err
        if not 0 <= cell_id < count:
            raise MeshImportError(f"cell 0D id {cell_id} out of range in '{path}'")
        coordinates[cell_id] = (x, y, 0.0)
        ids.append(cell_id)
        _add_marker(markers, marker, cell_id)

    mesh.cell0ds_id = ids
    mesh.cell0ds_coordinates = coordinates
    mesh.marker_cell0ds = markers


def import_cell1ds(mesh: PolygonalMesh, path: PathType) -> None:
    """Fill the edges of ``mesh`` from an ``Id;Marker;Origin;End`` file."""
    records = _read_records(path, "1D")
    count = len(records)
    extrema = [(0, 0)] * count
    ids: list[int] = []
    markers: dict[int, list[int]] = {}

    for fields in records:
        try:
            cell_id, marker, origin, end = (int(v) for v in fields[:4])
        except ValueError as err:
            raise _malformed(path, fields) from err
        if not 0 <= cell_id < count:
            raise MeshImportError(f"cell 1D id {cell_id} out of range in '{path}'")
        extrema[cell_id] = (origin, end)
        ids.append(cell_id)
        _add_marker(markers, marker, cell_id)

    mesh.cell1ds_id = ids
    mesh.cell1ds_extrema = extrema
    mesh.marker_cell1ds = markers


def _take(numbers: list[int], start: int, length: int) -> list[int]:
    chunk = numbers[start:start + length]
    if length < 0 or len(chunk) < length:
        raise ValueError("not enough values")
    return chunk


def import_cell2ds(mesh: PolygonalMesh, path: PathType) -> None:
    """Fill the polygons of ``mesh`` from an
    ``Id;Marker;NumVertices;Vertices;NumEdges;Edges`` file."""
    records = _read_records(path, "2D")
    ids: list[int] = []
    vertices_by_id: dict[int, list[int]] = {}
    edges_by_id: dict[int, list[int]] = {}

    for fields in records:
        try:
            numbers = [int(v) for v in fields]
            cell_id, _marker, num_vertices = _take(numbers, 0, 3)
            vertices = _take(numbers, 3, num_vertices)
            (num_edges,) = _take(numbers, 3 + num_vertices, 1)
            edges = _take(numbers, 4 + num_vertices, num_edges)
        except ValueError as err:
            raise _malformed(path, fields) from err
        if cell_id not in vertices_by_id:
            ids.append(cell_id)
        vertices_by_id[cell_id] = vertices
        edges_by_id[cell_id] = edges

    mesh.cell2ds_id = ids
    mesh.cell2ds_vertices = vertices_by_id
    mesh.cell2ds_edges = edges_by_id


def import_mesh(directory: PathType = ".") -> PolygonalMesh:
    """Read the three cell files found in ``directory`` into a new mesh."""
    base = Path(directory)
    mesh = PolygonalMesh()
    import_cell0ds(mesh, base / CELL0DS_FILE)
    import_cell1ds(mesh, base / CELL1DS_FILE)
    import_cell2ds(mesh, base / CELL2DS_FILE)
    return mesh