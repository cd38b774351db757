import pytest

from polymesh.mesh import (
    MeshImportError,
    PolygonalMesh,
    import_cell0ds,
    import_cell1ds,
    import_cell2ds,
    import_mesh,
)

CELL0DS = "Id;Marker;X;Y\n0;1;0.0;0.0\n1;2;1.0;0.0\n2;0;1.0;1.0\n3;1;0.0;1.0\n"
CELL1DS = "Id;Marker;Origin;End\n0;5;0;1\n1;0;1;2\n2;5;2;3\n3;0;3;0\n4;0;0;2\n"
CELL2DS = (
    "Id;Marker;NumVertices;Vertices;NumEdges;Edges\n"
    "0;0;3;0;1;2;3;0;1;4\n"
    "1;0;3;0;2;3;3;4;2;3\n"
)


def _write(directory, name, text):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def mesh_dir(tmp_path):
    _write(tmp_path, "Cell0Ds.csv", CELL0DS)
    _write(tmp_path, "Cell1Ds.csv", CELL1DS)
    _write(tmp_path, "Cell2Ds.csv", CELL2DS)
    return tmp_path


def test_import_cell0ds_coordinates_and_markers(tmp_path):
    mesh = PolygonalMesh()
    import_cell0ds(mesh, _write(tmp_path, "c0.csv", CELL0DS))
    assert mesh.num_cell0ds == 4
    assert mesh.cell0ds_id == [0, 1, 2, 3]
    assert mesh.cell0ds_coordinates[1] == (1.0, 0.0, 0.0)
    assert mesh.cell0ds_coordinates[2] == (1.0, 1.0, 0.0)
    assert mesh.marker_cell0ds == {1: [0, 3], 2: [1]}


def test_import_cell0ds_places_by_id(tmp_path):
    text = "Id;Marker;X;Y\n1;0;2.5;3.5\n0;0;-1.0;4.0\n"
    mesh = PolygonalMesh()
    import_cell0ds(mesh, _write(tmp_path, "c0.csv", text))
    assert mesh.cell0ds_id == [1, 0]
    assert mesh.cell0ds_coordinates == [(-1.0, 4.0, 0.0), (2.5, 3.5, 0.0)]
    assert mesh.marker_cell0ds == {}


def test_import_cell1ds_extrema_and_markers(tmp_path):
    mesh = PolygonalMesh()
    import_cell1ds(mesh, _write(tmp_path, "c1.csv", CELL1DS))
    assert mesh.num_cell1ds == 5
    assert mesh.cell1ds_extrema[0] == (0, 1)
    assert mesh.cell1ds_extrema[4] == (0, 2)
    assert mesh.marker_cell1ds == {5: [0, 2]}


def test_import_cell2ds_vertices_and_edges(tmp_path):
    mesh = PolygonalMesh()
    import_cell2ds(mesh, _write(tmp_path, "c2.csv", CELL2DS))
    assert mesh.num_cell2ds == 2
    assert mesh.cell2ds_vertices == {0: [0, 1, 2], 1: [0, 2, 3]}
    assert mesh.cell2ds_edges == {0: [0, 1, 4], 1: [4, 2, 3]}


def test_import_cell2ds_replaces_previous_data(tmp_path):
    mesh = PolygonalMesh(cell2ds_vertices={9: [1, 2, 3]}, cell2ds_edges={9: [1]})
    import_cell2ds(mesh, _write(tmp_path, "c2.csv", CELL2DS))
    assert 9 not in mesh.cell2ds_vertices
    assert 9 not in mesh.cell2ds_edges


def test_import_mesh_reads_directory(mesh_dir):
    mesh = import_mesh(mesh_dir)
    assert mesh.num_cell0ds == 4
    assert mesh.num_cell1ds == 5
    assert mesh.num_cell2ds == 2
    assert len(mesh.cell0ds_coordinates) == mesh.num_cell0ds


def test_missing_file_raises(tmp_path):
    with pytest.raises(MeshImportError):
        import_mesh(tmp_path)


def test_header_only_file_raises(tmp_path):
    mesh = PolygonalMesh()
    with pytest.raises(MeshImportError, match="There is no cell 0D"):
        import_cell0ds(mesh, _write(tmp_path, "c0.csv", "Id;Marker;X;Y\n"))


def test_empty_cell1ds_raises(tmp_path):
    mesh = PolygonalMesh()
    with pytest.raises(MeshImportError, match="There is no cell 1D"):
        import_cell1ds(mesh, _write(tmp_path, "c1.csv", ""))


def test_out_of_range_id_raises(tmp_path):
    mesh = PolygonalMesh()
    with pytest.raises(MeshImportError, match="out of range"):
        import_cell0ds(mesh, _write(tmp_path, "c0.csv", "h\n5;0;1.0;1.0\n"))


def test_malformed_line_raises(tmp_path):
    mesh = PolygonalMesh()
    with pytest.raises(MeshImportError, match="malformed"):
        import_cell1ds(mesh, _write(tmp_path, "c1.csv", "h\n0;0;x;1\n"))


def test_short_polygon_line_raises(tmp_path):
    mesh = PolygonalMesh()
    with pytest.raises(MeshImportError, match="malformed"):
        import_cell2ds(mesh, _write(tmp_path, "c2.csv", "h\n0;0;3;0;1\n"))