import math

import pytest

from solar_system.geometry import orbit_circle, ring_mesh, uv_sphere


def test_orbit_circle_is_closed_and_flat():
    mesh = orbit_circle(62, segments=100)
    assert mesh.mode == "line"
    assert len(mesh.vertices) == 101
    assert mesh.vertices[0] == pytest.approx(mesh.vertices[-1])
    for x, y, z in mesh.vertices:
        assert y == 0.0
        assert math.hypot(x, z) == pytest.approx(62)


def test_ring_lies_between_radii_in_xz_plane():
    mesh = ring_mesh(10, 20, segments=64)
    assert len(mesh.vertices) == 64 * 4
    assert len(mesh.triangles) == 64 * 6
    distances = [math.hypot(x, z) for x, _, z in mesh.vertices]
    assert min(distances) == pytest.approx(10)
    assert max(distances) == pytest.approx(20)
    assert all(y == 0.0 for _, y, _ in mesh.vertices)
    assert set(mesh.normals) == {(0.0, 1.0, 0.0)}


def test_ring_uvs_run_inner_to_outer():
    mesh = ring_mesh(7, 12, segments=8)
    for (x, _, z), (u, _) in zip(mesh.vertices, mesh.uvs):
        expected = 0 if math.hypot(x, z) == pytest.approx(7) else 1
        assert u == expected


def test_sphere_vertices_sit_on_radius():
    mesh = uv_sphere(6, segments=16)
    for vertex in mesh.vertices:
        assert math.sqrt(sum(c * c for c in vertex)) == pytest.approx(6)
    assert len(mesh.uvs) == len(mesh.vertices) == len(mesh.normals)
    assert max(mesh.triangles) < len(mesh.vertices)
