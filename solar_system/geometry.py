"""Vertex generators for spheres, ring discs and orbit paths.

Everything here returns plain tuples so the output can be handed to any mesh
type; all shapes lie in (or are centred on) the XZ plane with +Y up.
"""
import math

TAU = math.tau


class MeshData:
    def __init__(self, vertices, triangles=None, uvs=None, mode="triangle", normals=None):
        self.vertices = vertices
        self.triangles = triangles or []
        self.uvs = uvs or []
        self.mode = mode
        self.normals = normals or []


def uv_sphere(radius, segments=48):
    lon_steps = segments
    lat_steps = max(2, segments // 2)
    vertices = []
    uvs = []
    normals = []
    triangles = []

    for y in range(lat_steps + 1):
        v = y / lat_steps
        lat = math.pi * (v - 0.5)
        cos_lat = math.cos(lat)
        sin_lat = math.sin(lat)
        for x in range(lon_steps + 1):
            u = x / lon_steps
            lon = TAU * (u - 0.5)
            vertices.append((
                radius * cos_lat * math.cos(lon),
                radius * sin_lat,
                radius * cos_lat * math.sin(lon),
            ))
            uvs.append((u, v))
            normals.append((cos_lat * math.cos(lon), sin_lat, cos_lat * math.sin(lon)))

    for y in range(lat_steps):
        for x in range(lon_steps):
            i = y * (lon_steps + 1) + x
            i2 = i + lon_steps + 1
            triangles.extend([i, i2, i + 1, i + 1, i2, i2 + 1])

    return MeshData(vertices, triangles, uvs, normals=normals)


def ring_mesh(inner_radius, outer_radius, segments=64):
    vertices = []
    triangles = []
    uvs = []
    for i in range(segments):
        a0 = TAU * i / segments
        a1 = TAU * (i + 1) / segments
        inner0 = (math.cos(a0) * inner_radius, 0.0, math.sin(a0) * inner_radius)
        outer0 = (math.cos(a0) * outer_radius, 0.0, math.sin(a0) * outer_radius)
        inner1 = (math.cos(a1) * inner_radius, 0.0, math.sin(a1) * inner_radius)
        outer1 = (math.cos(a1) * outer_radius, 0.0, math.sin(a1) * outer_radius)
        base = len(vertices)
        vertices.extend([inner0, outer0, outer1, inner1])
        triangles.extend([base, base + 1, base + 2, base, base + 2, base + 3])
        v0 = i / segments
        v1 = (i + 1) / segments
        # u runs from the inner edge to the outer edge of the ring texture
        uvs.extend([(0, v0), (1, v0), (1, v1), (0, v1)])
    return MeshData(vertices, triangles, uvs, normals=[(0.0, 1.0, 0.0)] * len(vertices))


def orbit_circle(radius, segments=100):
    vertices = []
    for i in range(segments + 1):
        t = TAU * i / segments
        vertices.append((radius * math.cos(t), 0.0, radius * math.sin(t)))
    return MeshData(vertices, mode="line")
