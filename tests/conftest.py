import pytest
from PIL import Image

from solar_system.assets import BACKGROUND_KEYS, RING_KEYS, SURFACE_KEYS, AssetRegistry
from solar_system.lighting import SceneLighting
from solar_system.scene import compose_scene
from solar_system.state import AppState, SimulationSettings


class FakeNode:
    def __init__(self, kind, name, parent=None, **props):
        self.kind = kind
        self.name = name
        self.parent = parent
        self.props = props
        self.angle = 0.0
        self.enabled = True


class FakeBuilder:
    def __init__(self):
        self.nodes = []
        self.textures_built = []

    def _add(self, kind, name, parent=None, **props):
        node = FakeNode(kind, name, parent, **props)
        self.nodes.append(node)
        return node

    def of_kind(self, kind):
        return [node for node in self.nodes if node.kind == kind]

    def texture(self, image):
        self.textures_built.append(image)
        return image

    def pivot(self, name):
        return self._add("pivot", name)

    def sphere(self, name, radius, texture, segments, parent=None, x=0.0, emissive=False):
        return self._add("sphere", name, parent, radius=radius, texture=texture, segments=segments, x=x, emissive=emissive)

    def ring(self, name, inner_radius, outer_radius, texture, segments, parent=None, x=0.0):
        return self._add("ring", name, parent, inner_radius=inner_radius, outer_radius=outer_radius, texture=texture, x=x)

    def orbit_line(self, name, radius, segments):
        return self._add("orbit_line", name, radius=radius, segments=segments)

    def skybox(self, name, faces):
        return self._add("skybox", name, faces=faces)

    def sky_sphere(self, name, texture):
        return self._add("sky_sphere", name, texture=texture)

    def lighting(self, sun, backgrounds):
        return SceneLighting()


@pytest.fixture
def builder():
    return FakeBuilder()


@pytest.fixture
def image_dir(tmp_path):
    for key in SURFACE_KEYS + BACKGROUND_KEYS:
        Image.new("RGB", (4, 2), (10, 20, 30)).save(tmp_path / f"{key}.jpg")
    for key in RING_KEYS:
        Image.new("RGBA", (4, 2), (200, 180, 150, 128)).save(tmp_path / f"{key}.png")
    return tmp_path


@pytest.fixture
def assets(image_dir):
    return AssetRegistry(image_dir)


@pytest.fixture
def scene(builder, assets):
    return compose_scene(builder, assets)


@pytest.fixture
def state(scene):
    return AppState(SimulationSettings(), scene)
