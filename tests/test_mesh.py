import numpy as np
import pytest

from lifecube.mesh import (
    INV_SQRT3,
    Mesh,
    VertexAttribute,
    cube_mesh,
    indexed_cube_mesh,
    indexed_cube_normals,
)


def test_cube_layout_matches_source():
    mesh = cube_mesh()
    assert len(mesh) == 36
    assert mesh.stride == 8
    layout = [(a.location, a.size, a.offset) for a in mesh.attributes]
    assert layout == [(0, 3, 0), (1, 2, 3), (2, 3, 5)]


def test_cube_first_vertex():
    assert cube_mesh().vertex(0) == (-0.5, -0.5, 0.5, 0.0, 0.0, 0.0, 0.0, 1.0)


def test_cube_has_twelve_triangles():
    assert len(list(cube_mesh().triangles())) == 12


def test_cube_positions_and_texcoords_on_corners():
    mesh = cube_mesh()
    for i in range(len(mesh)):
        v = mesh.vertex(i)
        assert all(abs(c) == 0.5 for c in v[:3])
        assert all(c in (0.0, 1.0) for c in v[3:5])


def test_cube_normals_are_unit_and_face_outward():
    for tri in cube_mesh().triangles():
        normals = {v[5:8] for v in tri}
        assert len(normals) == 1
        n = np.array(next(iter(normals)))
        assert np.linalg.norm(n) == pytest.approx(1.0)
        for v in tri:
            assert np.dot(np.array(v[:3]), n) == pytest.approx(0.5)


def test_cube_triangles_wind_counter_clockwise():
    for a, b, c in cube_mesh().triangles():
        pa, pb, pc = (np.array(v[:3]) for v in (a, b, c))
        face = np.cross(pb - pa, pc - pa)
        assert np.dot(face, np.array(a[5:8])) > 0


def test_cube_covers_six_faces_twice():
    normals = [tri[0][5:8] for tri in cube_mesh().triangles()]
    assert len(set(normals)) == 6
    assert all(normals.count(n) == 2 for n in set(normals))


def test_indexed_layout():
    mesh = indexed_cube_mesh()
    assert len(mesh) == 8
    assert mesh.stride == 5
    assert len(mesh.indices) == 36
    assert [a.location for a in mesh.attributes] == [0, 1]


def test_indexed_triangles_lie_on_faces():
    triangles = list(indexed_cube_mesh().triangles())
    assert len(triangles) == 12
    faces = set()
    for tri in triangles:
        shared = [
            (axis, tri[0][axis])
            for axis in range(3)
            if tri[0][axis] == tri[1][axis] == tri[2][axis]
        ]
        assert len(shared) == 1
        faces.add(shared[0])
    assert len(faces) == 6


def test_indexed_normals_point_to_corners():
    mesh = indexed_cube_mesh()
    normals = indexed_cube_normals()
    assert len(normals) == len(mesh)
    for i, n in enumerate(normals):
        pos = mesh.vertex(i)[:3]
        assert all(abs(c) == INV_SQRT3 for c in n)
        assert all((c > 0) == (p > 0) for c, p in zip(n, pos))


def test_vertex_out_of_range():
    mesh = cube_mesh()
    with pytest.raises(IndexError):
        mesh.vertex(36)
    with pytest.raises(IndexError):
        mesh.vertex(-1)


def test_bad_data_length_rejected():
    with pytest.raises(ValueError):
        Mesh((0.0, 1.0, 2.0, 3.0), 3, ())


def test_attribute_outside_stride_rejected():
    with pytest.raises(ValueError):
        Mesh((0.0,) * 9, 3, (VertexAttribute("position", 0, 3, 1),))


def test_index_out_of_range_rejected():
    with pytest.raises(ValueError):
        Mesh((0.0,) * 9, 3, (), (0, 1, 3))


def test_index_count_must_form_triangles():
    with pytest.raises(ValueError):
        Mesh((0.0,) * 9, 3, (), (0, 1))


def test_explicit_indices_drive_triangles():
    mesh = Mesh((0.0, 1.0, 2.0), 1, (), (2, 1, 0, 0, 0, 0))
    assert list(mesh.triangles()) == [((2.0,), (1.0,), (0.0,)), ((0.0,), (0.0,), (0.0,))]