"""ursina/panda3d implementations of the scene builder, lights, camera rig and panel."""
import math

from direct.showbase.DirectObject import DirectObject
from panda3d.core import TransparencyAttrib
from ursina import Button, Entity, Mesh, Text, Texture, Vec3, camera, color, mouse, scene
from ursina.lights import AmbientLight, PointLight
from ursina.prefabs.slider import ThinSlider

from solar_system.config import DAY_SKY_SCALE, ORBIT_OPACITY, PAN_SPEED, ROTATE_SPEED, SKYBOX_SIZE, ZOOM_STEP
from solar_system.geometry import orbit_circle, ring_mesh, uv_sphere
from solar_system.lighting import sun_emissive_color
from solar_system.panel import SLIDER

TAU = math.tau


def to_mesh(data):
    return Mesh(
        vertices=data.vertices,
        triangles=data.triangles or None,
        uvs=data.uvs or None,
        normals=data.normals or None,
        mode=data.mode,
    )


def grey(intensity):
    return color.Color(intensity, intensity, intensity, 1)


class EntityHandle:
    """Exposes an entity's rotation about the vertical axis in radians."""

    def __init__(self, entity):
        self.entity = entity
        self._angle = 0.0

    @property
    def angle(self):
        return self._angle

    @angle.setter
    def angle(self, value):
        self._angle = value
        self.entity.rotation_y = math.degrees(value)

    @property
    def enabled(self):
        return self.entity.enabled

    @enabled.setter
    def enabled(self, value):
        self.entity.enabled = value


class UrsinaLighting:
    def __init__(self, sun, ambient, point, backgrounds):
        self.sun = sun
        self.ambient = ambient
        self.point = point
        self.backgrounds = backgrounds
        self._background = None
        self._ambient_intensity = 0.0
        self._point_intensity = 0.0
        self._sun_emissive_intensity = 0.0

    @property
    def background(self):
        return self._background

    @background.setter
    def background(self, key):
        self._background = key
        for name, handle in self.backgrounds.items():
            handle.enabled = name == key

    @property
    def ambient_intensity(self):
        return self._ambient_intensity

    @ambient_intensity.setter
    def ambient_intensity(self, value):
        self._ambient_intensity = value
        self.ambient.color = grey(value)

    @property
    def point_intensity(self):
        return self._point_intensity

    @point_intensity.setter
    def point_intensity(self, value):
        self._point_intensity = value
        self.point.color = grey(value)

    @property
    def sun_emissive_intensity(self):
        return self._sun_emissive_intensity

    @sun_emissive_intensity.setter
    def sun_emissive_intensity(self, value):
        self._sun_emissive_intensity = value
        self.sun.entity.color = color.Color(*sun_emissive_color(value))


class UrsinaSceneBuilder:
    def texture(self, image):
        if image is None:
            return None
        return Texture(image)

    def pivot(self, name):
        return EntityHandle(Entity(name=name))

    def sphere(self, name, radius, texture, segments, parent=None, x=0.0, emissive=False):
        entity = Entity(
            name=name,
            model=to_mesh(uv_sphere(radius, segments)),
            texture=texture,
            parent=parent.entity if parent is not None else scene,
            position=Vec3(x, 0, 0),
        )
        if emissive:
            entity.setLightOff()
        return EntityHandle(entity)

    def ring(self, name, inner_radius, outer_radius, texture, segments, parent=None, x=0.0):
        entity = Entity(
            name=name,
            model=to_mesh(ring_mesh(inner_radius, outer_radius, segments)),
            texture=texture,
            parent=parent.entity if parent is not None else scene,
            position=Vec3(x, 0, 0),
            double_sided=True,
        )
        entity.setTransparency(TransparencyAttrib.MAlpha)
        entity.setLightOff()
        return EntityHandle(entity)

    def orbit_line(self, name, radius, segments):
        entity = Entity(
            name=name,
            model=to_mesh(orbit_circle(radius, segments)),
            color=color.Color(1, 1, 1, ORBIT_OPACITY),
        )
        entity.setTransparency(TransparencyAttrib.MAlpha)
        entity.setLightOff()
        return EntityHandle(entity)

    def skybox(self, name, faces):
        root = Entity(name=name)
        half = SKYBOX_SIZE / 2
        placements = [
            (Vec3(half, 0, 0), Vec3(0, 90, 0)),
            (Vec3(-half, 0, 0), Vec3(0, -90, 0)),
            (Vec3(0, half, 0), Vec3(-90, 0, 0)),
            (Vec3(0, -half, 0), Vec3(90, 0, 0)),
            (Vec3(0, 0, half), Vec3(0, 0, 0)),
            (Vec3(0, 0, -half), Vec3(0, 180, 0)),
        ]
        for texture, (position, rotation) in zip(faces, placements):
            face = Entity(
                parent=root,
                model="quad",
                texture=texture,
                scale=SKYBOX_SIZE,
                position=position,
                rotation=rotation,
                double_sided=True,
            )
            face.setLightOff()
        return EntityHandle(root)

    def sky_sphere(self, name, texture):
        entity = Entity(name=name, model="sphere", texture=texture, scale=DAY_SKY_SCALE, double_sided=True)
        entity.setLightOff()
        return EntityHandle(entity)

    def lighting(self, sun, backgrounds):
        ambient = AmbientLight(color=grey(0))
        point = PointLight(parent=sun.entity, position=Vec3(0, 0, 0), color=grey(0))
        return UrsinaLighting(sun, ambient, point, backgrounds)


class CameraRig:
    """Feeds mouse input into OrbitControls and places the ursina camera.

    A drag that starts on a panel widget stays with the widget until the
    button is released, even once the pointer slides off it.
    """

    DRAG_BUTTONS = ("left mouse", "right mouse")

    def __init__(self, controls, mouse=mouse, camera=camera):
        self.controls = controls
        self.mouse = mouse
        self.camera = camera
        self.drag_from_ui = False
        self.place()

    def place(self):
        self.camera.world_position = Vec3(*self.controls.position)
        self.camera.look_at(Vec3(*self.controls.target))

    def over_ui(self):
        return self.mouse.hovered_entity is not None

    def input(self, key):
        if key in (f"{button} down" for button in self.DRAG_BUTTONS):
            self.drag_from_ui = self.over_ui()
            return
        if key in (f"{button} up" for button in self.DRAG_BUTTONS):
            self.drag_from_ui = False
            return
        if self.over_ui():
            return
        if key == "scroll up":
            self.controls.dolly_in(ZOOM_STEP)
        elif key == "scroll down":
            self.controls.dolly_out(ZOOM_STEP)

    def update(self):
        if not self.drag_from_ui and not self.over_ui():
            dx, dy = self.mouse.velocity[0], self.mouse.velocity[1]
            if self.mouse.left:
                self.controls.rotate_left(TAU * dx * ROTATE_SPEED)
                self.controls.rotate_up(-TAU * dy * ROTATE_SPEED)
            elif self.mouse.right:
                self.controls.pan(dx * PAN_SPEED, dy * PAN_SPEED)
        self.controls.update()
        self.place()



class WindowSurface:
    # panda3d resizes the framebuffer with the window; this just tracks it
    def __init__(self):
        self.size = None

    def set_size(self, width, height):
        self.size = (width, height)


class ResizeListener(DirectObject):
    def __init__(self, handler):
        super().__init__()
        self.handler = handler
        self.accept("window-event", self.on_window_event)

    def on_window_event(self, win):
        if win is None:
            return
        props = win.getProperties()
        self.handler.on_resize(props.getXSize(), props.getYSize())


class UrsinaControlPanel:
    """Sliders and toggle buttons for a ControlPanel, top right of the screen."""

    ROW = 0.04
    LEFT = 0.3

    def __init__(self, panel):
        self.panel = panel
        self.root = Entity(parent=camera.ui, position=(self.LEFT, 0.47))
        self.y = 0.0
        self.toggles = {}
        self.folder_widgets = {}
        self.open_folder = None

        Text(parent=self.root, text="Controls", position=(0, self.y), scale=1.1)
        self.y -= self.ROW * 1.2
        for control in panel.top_level:
            if control.kind == SLIDER:
                self.add_slider(control)
        for control in panel.top_level:
            if control.kind != SLIDER:
                self.add_toggle(control)

        Text(parent=self.root, text="Individual Speeds", position=(0, self.y))
        self.y -= self.ROW
        for name in panel.folders:
            Button(
                parent=self.root,
                text=name,
                scale=(0.2, self.ROW * 0.85),
                origin=(-0.5, 0.5),
                position=(0, self.y),
                on_click=lambda name=name: self.show_folder(name),
            )
            self.y -= self.ROW
        sliders_top = self.y - self.ROW * 0.5
        for name, controls in panel.folders.items():
            self.y = sliders_top
            widgets = [self.add_slider(control) for control in controls]
            for widget in widgets:
                widget.enabled = False
            self.folder_widgets[name] = widgets

        for field in self.toggles:
            panel.state.settings.subscribe(field, lambda value, field=field: self.refresh_toggle(field))

    def add_slider(self, control):
        slider = ThinSlider(
            parent=self.root,
            min=control.minimum,
            max=control.maximum,
            default=control.value,
            step=0,
            text=control.label,
            dynamic=True,
            position=(0.12, self.y),
            scale=0.6,
        )
        slider.on_value_changed = lambda slider=slider, control=control: control.set(slider.value)
        self.y -= self.ROW
        return slider

    def add_toggle(self, control):
        button = Button(
            parent=self.root,
            text=self.toggle_text(control),
            scale=(0.36, self.ROW * 0.85),
            origin=(-0.5, 0.5),
            position=(0, self.y),
        )
        button.on_click = lambda control=control: control.set(not control.value)
        self.toggles[control.field] = (button, control)
        self.y -= self.ROW
        return button

    def toggle_text(self, control):
        return f"{control.label}: {'on' if control.value else 'off'}"

    def refresh_toggle(self, field):
        button, control = self.toggles[field]
        button.text = self.toggle_text(control)

    def show_folder(self, name):
        if self.open_folder is not None:
            for widget in self.folder_widgets[self.open_folder]:
                widget.enabled = False
        if self.open_folder == name:
            self.open_folder = None
            return
        for widget in self.folder_widgets[name]:
            widget.enabled = True
        self.open_folder = name
