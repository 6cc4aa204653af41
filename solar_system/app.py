import logging

from panda3d.core import loadPrcFileData
from ursina import Entity, Ursina, camera, time, window

from solar_system.animation import AnimationLoop
from solar_system.assets import AssetRegistry
from solar_system.config import (
    ASSET_DIR,
    CAMERA_FAR,
    CAMERA_FOV,
    CAMERA_NEAR,
    CAMERA_POSITION,
    DAMPING_FACTOR,
    MAX_DISTANCE,
    MIN_DISTANCE,
    WINDOW_TITLE,
)
from solar_system.engine import (
    CameraRig,
    ResizeListener,
    UrsinaControlPanel,
    UrsinaSceneBuilder,
    WindowSurface,
)
from solar_system.lighting import LightingModeSwitch
from solar_system.navigation import OrbitControls
from solar_system.panel import ControlPanel
from solar_system.scene import compose_scene
from solar_system.state import AppState, SimulationSettings
from solar_system.viewport import PerspectiveProjection, ViewportResizeHandler

logger = logging.getLogger("solar_system.app")

loadPrcFileData("", "gl-version 2 1")
loadPrcFileData("", "glsl-version 120")
loadPrcFileData("", "framebuffer-multisample 1")
loadPrcFileData("", "multisamples 4")


class FrameDriver(Entity):
    """Hooks the animation loop and keyboard shortcuts into ursina's per-frame calls."""

    def __init__(self, loop, panel, rig):
        super().__init__()
        self.loop = loop
        self.panel = panel
        self.rig = rig

    def update(self):
        try:
            self.loop.tick(time.dt)
        except Exception:
            logger.exception("frame %d failed", self.loop.frames)

    def input(self, key):
        if self.panel.handle_key(key):
            return
        self.rig.input(key)


def build(assets_root=ASSET_DIR):
    assets = AssetRegistry(assets_root)
    assets.preload()

    scene = compose_scene(UrsinaSceneBuilder(), assets)
    settings = SimulationSettings()
    state = AppState(settings, scene)
    LightingModeSwitch(scene.lighting).bind(settings)

    panel = ControlPanel(state)
    UrsinaControlPanel(panel)

    controls = OrbitControls(
        CAMERA_POSITION,
        damping_factor=DAMPING_FACTOR,
        min_distance=MIN_DISTANCE,
        max_distance=MAX_DISTANCE,
    )
    rig = CameraRig(controls)
    loop = AnimationLoop(state, navigation=rig)

    width, height = window.size
    projection = PerspectiveProjection(CAMERA_FOV, width / height, CAMERA_NEAR, CAMERA_FAR, lens=camera.lens)
    resize_listener = ResizeListener(ViewportResizeHandler(projection, WindowSurface()))
    driver = FrameDriver(loop, panel, rig)
    driver.resize_listener = resize_listener
    return state, driver


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    app = Ursina()
    window.title = WINDOW_TITLE
    window.borderless = False
    window.exit_button.visible = False
    window.fps_counter.enabled = False
    app.render.setShaderAuto()
    Entity.default_shader = None
    build()
    logger.info("starting animation loop")
    app.run()
