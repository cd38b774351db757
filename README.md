# polymesh

Read a two-dimensional polygonal mesh stored as three semicolon-separated
files, check that it is sound, and export its points and edges in the ASCII
UCD format that ParaView opens.

## Input files

The mesh directory holds:

- `Cell0Ds.csv`: `Id;Marker;X;Y`, one vertex per line
- `Cell1Ds.csv`: `Id;Marker;Origin;End`, one edge per line
- `Cell2Ds.csv`: `Id;Marker;NumVertices;V...;NumEdges;E...`, one polygon per line

Each file starts with a header line, which is skipped. Blank lines are
ignored. Vertex and edge ids must run from 0 to the number of records minus
one. A missing file, a file with no records, a malformed line or an id that is
out of range raises `polymesh.mesh.MeshImportError`.

## Command line

```
polymesh [DIRECTORY] [-o OUTPUT_DIR]
```

`DIRECTORY` is the directory that holds the three CSV files (default: the
current directory). `-o/--output-dir` is where `Cell0Ds.inp` and
`Cell1Ds.inp` are written (default: the current directory).

The command prints the non-zero markers of vertices and edges, sorted by
marker, then checks that every edge joins two existing vertices and has
non-zero length, and that every polygon has at least three existing vertices
and non-zero area. If all is well it writes the vertices as point cells to
`Cell0Ds.inp` and the edges as line cells to `Cell1Ds.inp`.

Exit status: 0 on success, 1 if the mesh cannot be read, 3 for a bad edge,
4 for a bad polygon.

## Library use

```python
from polymesh.mesh import import_mesh
from polymesh.cli import edges_have_length, polygons_have_area, format_markers
from polymesh.ucd import export_points, export_segments

mesh = import_mesh("path/to/mesh")
print(format_markers(mesh), end="")
assert edges_have_length(mesh) and polygons_have_area(mesh)

export_points("Cell0Ds.inp", mesh.cell0ds_coordinates)
export_segments("Cell1Ds.inp", mesh.cell0ds_coordinates, mesh.cell1ds_extrema)
```

`PolygonalMesh` holds `cell0ds_id`, `cell0ds_coordinates` (as `(x, y, 0.0)`
tuples indexed by id), `marker_cell0ds`, `cell1ds_id`, `cell1ds_extrema`,
`marker_cell1ds`, `cell2ds_id`, `cell2ds_vertices` and `cell2ds_edges`, with
the counts `num_cell0ds`, `num_cell1ds` and `num_cell2ds`. The files can also
be read one at a time with `import_cell0ds`, `import_cell1ds` and
`import_cell2ds`, each taking a mesh and a file path.

`polymesh.ucd` also offers `export_polygons` (triangles and quadrilaterals)
and `export_polyhedra` (tetrahedra), with optional per-point and per-cell
`UCDProperty` data and per-cell material ids. Cells of other sizes raise
`ValueError`. The lower-level `create_*_cells` functions and
`write_ucd_ascii` build and write `UCDCell` lists directly. Points with fewer
than three coordinates are padded with zeros; values are written in
scientific notation with 16 digits after the point.

## Limits

The package only writes UCD files; it does not read them back or display
them. The command exports vertices and edges only, not polygons.

## Tests

```
pip install -e .[test]
pytest
```