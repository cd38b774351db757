"""Export of points, segments, polygons and polyhedra to the AVS UCD ASCII format."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from os import PathLike
from typing import Optional, Sequence, TextIO, Union

PathType = Union[str, "PathLike[str]"]
Point = Sequence[float]


class CellType(enum.IntEnum):
    """Kinds of cell that a UCD file can describe."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}

_POLYGON_TYPES = {3: CellType.TRIANGLE, 4: CellType.QUADRILATERAL}
_POLYHEDRON_TYPES = {4: CellType.TETRAHEDRON}


@dataclass(frozen=True)
class UCDProperty:
    """A named field attached to points or cells, stored component-interleaved."""

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float]

    def component_values(self, index: int) -> Sequence[float]:
        """Return the components belonging to the entity at ``index``."""
        start = self.num_components * index
        chunk = self.data[start:start + self.num_components]
        if len(chunk) < self.num_components:
            raise IndexError(
                f"property '{self.label}' has no data for entity {index}"
            )
        return chunk


@dataclass(frozen=True)
class UCDCell:
    """One cell of a UCD file: its type, zero-based point ids and material."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "point_ids", tuple(int(i) for i in self.point_ids))

    def label(self) -> str:
        """Return the UCD keyword for this cell's type."""
        try:
            return _LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material(materials: Optional[Sequence[int]], index: int, count: int) -> int:
    if materials is not None and len(materials) == count:
        return int(materials[index])
    return 0


def create_point_cells(
    points: Sequence[Point], materials: Optional[Sequence[int]] = None
) -> list[UCDCell]:
    """Make one point cell per point."""
    count = len(points)
    return [
        UCDCell(CellType.POINT, (index,), _material(materials, index, count))
        for index, _ in enumerate(points)
    ]


def create_line_cells(
    segments: Sequence[Sequence[int]], materials: Optional[Sequence[int]] = None
) -> list[UCDCell]:
    """Make one line cell per (origin, end) pair."""
    count = len(segments)
    return [
        UCDCell(
            CellType.LINE,
            (int(segment[0]), int(segment[1])),
            _material(materials, index, count),
        )
        for index, segment in enumerate(segments)
    ]


def _shaped_cells(
    vertex_lists: Sequence[Sequence[int]],
    materials: Optional[Sequence[int]],
    types: dict[int, CellType],
) -> list[UCDCell]:
    count = len(vertex_lists)
    cells = []
    for index, vertices in enumerate(vertex_lists):
        cell_type = types.get(len(vertices))
        if cell_type is None:
            raise ValueError("Polygon type not supported")
        cells.append(UCDCell(cell_type, tuple(vertices), _material(materials, index, count)))
    return cells


def create_polygon_cells(
    polygons_vertices: Sequence[Sequence[int]],
    materials: Optional[Sequence[int]] = None,
) -> list[UCDCell]:
    """Make triangle or quadrilateral cells; other vertex counts raise ValueError."""
    return _shaped_cells(polygons_vertices, materials, _POLYGON_TYPES)


def create_polyhedra_cells(
    polyhedra_vertices: Sequence[Sequence[int]],
    materials: Optional[Sequence[int]] = None,
) -> list[UCDCell]:
    """Make tetrahedron cells; other vertex counts raise ValueError."""
    return _shaped_cells(polyhedra_vertices, materials, _POLYHEDRON_TYPES)


def _fmt(value: float) -> str:
    return f"{float(value):.16e}"


def _xyz(point: Point) -> tuple[float, float, float]:
    coords = [float(c) for c in list(point)[:3]]
    coords.extend([0.0] * (3 - len(coords)))
    return coords[0], coords[1], coords[2]


def _write_properties(out: TextIO, properties: Sequence[UCDProperty], count: int) -> None:
    if not properties:
        return
    out.write(
        " ".join([str(len(properties)), *(str(p.num_components) for p in properties)])
        + "\n"
    )
    for prop in properties:
        out.write(f"{prop.label}, {prop.unit_label}\n")
    for index in range(count):
        values = [_fmt(v) for prop in properties for v in prop.component_values(index)]
        out.write(" ".join([str(index + 1), *values]) + "\n")


def write_ucd_ascii(
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
    file_path: PathType,
) -> None:
    """Write points, cells and their properties to ``file_path`` as UCD ASCII.

    Points with fewer than three coordinates are padded with zeros.
    """
    with open(file_path, "w", encoding="utf-8") as out:
        out.write(
            f"{len(points)} {len(cells)} {len(point_properties)} "
            f"{len(cell_properties)} 0\n"
        )
        for number, point in enumerate(points, start=1):
            out.write(" ".join([str(number), *(_fmt(c) for c in _xyz(point))]) + "\n")
        for number, cell in enumerate(cells, start=1):
            fields = [str(number), str(cell.material_id), cell.label()]
            fields.extend(str(pid + 1) for pid in cell.point_ids)
            out.write(" ".join(fields) + "\n")
        _write_properties(out, point_properties, len(points))
        _write_properties(out, cell_properties, len(cells))


def export_points(
    file_path: PathType,
    points: Sequence[Point],
    points_properties: Sequence[UCDProperty] = (),
    materials: Optional[Sequence[int]] = None,
) -> None:
    """Export each point as a point cell; the properties are attached to the cells."""
    write_ucd_ascii(
        points, (), create_point_cells(points, materials), points_properties, file_path
    )


def export_segments(
    file_path: PathType,
    points: Sequence[Point],
    segments: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    segments_properties: Sequence[UCDProperty] = (),
    materials: Optional[Sequence[int]] = None,
) -> None:
    """Export segments given as (origin, end) point id pairs."""
    write_ucd_ascii(
        points,
        points_properties,
        create_line_cells(segments, materials),
        segments_properties,
        file_path,
    )


def export_polygons(
    file_path: PathType,
    points: Sequence[Point],
    polygons_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polygons_properties: Sequence[UCDProperty] = (),
    materials: Optional[Sequence[int]] = None,
) -> None:
    """Export triangles and quadrilaterals given by their point ids."""
    write_ucd_ascii(
        points,
        points_properties,
        create_polygon_cells(polygons_vertices, materials),
        polygons_properties,
        file_path,
    )


def export_polyhedra(
    file_path: PathType,
    points: Sequence[Point],
    polyhedra_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polyhedra_properties: Sequence[UCDProperty] = (),
    materials: Optional[Sequence[int]] = None,
) -> None:
    """Export tetrahedra given by their point ids."""
    write_ucd_ascii(
        points,
        points_properties,
        create_polyhedra_cells(polyhedra_vertices, materials),
        polyhedra_properties,
        file_path,
    )