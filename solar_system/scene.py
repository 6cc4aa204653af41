import logging

from solar_system.bodies import default_bodies
from solar_system.config import SUN_RADIUS, SUN_SEGMENTS
from solar_system.factory import create_body
from solar_system.lighting import DAY, STARS

logger = logging.getLogger("solar_system.scene")


class Planet:
    def __init__(self, body, handles):
        self.body = body
        self.handles = handles

    @property
    def name(self):
        return self.body.name

    @property
    def pivot(self):
        return self.handles.pivot

    @property
    def sphere(self):
        return self.handles.sphere

    @property
    def ring(self):
        return self.handles.ring

    @property
    def orbit_line(self):
        return self.handles.orbit_line


class SolarScene:
    def __init__(self, sun, planets, lighting, backgrounds):
        self.sun = sun
        self.planets = planets
        self.lighting = lighting
        self.backgrounds = backgrounds

    @property
    def orbit_lines(self):
        return [planet.orbit_line for planet in self.planets]

    @property
    def rings(self):
        return [planet.ring for planet in self.planets if planet.ring is not None]

    def planet(self, name):
        for planet in self.planets:
            if planet.name.lower() == name.lower():
                return planet
        raise KeyError(name)


def compose_scene(builder, assets, bodies=None):
    if bodies is None:
        bodies = default_bodies()

    # the cube faces share images, so each distinct image becomes one texture
    faces = assets.skybox_faces()
    face_textures = {}
    for face in faces:
        if id(face) not in face_textures:
            face_textures[id(face)] = builder.texture(face)
    backgrounds = {
        STARS: builder.skybox(name="starfield", faces=[face_textures[id(face)] for face in faces]),
        DAY: builder.sky_sphere(name="day_sky", texture=builder.texture(assets.texture("day"))),
    }

    sun = builder.sphere(
        name="Sun",
        radius=SUN_RADIUS,
        texture=builder.texture(assets.texture("sun")),
        segments=SUN_SEGMENTS,
        emissive=True,
    )
    lighting = builder.lighting(sun=sun, backgrounds=backgrounds)

    planets = []
    for body in bodies:
        ring_texture = None
        if body.ring is not None:
            ring_texture = builder.texture(assets.texture(body.ring.texture_key))
        handles = create_body(
            builder,
            body.name,
            body.radius,
            builder.texture(assets.texture(body.texture_key)),
            body.orbit_radius,
            ring=body.ring,
            ring_texture=ring_texture,
        )
        planets.append(Planet(body, handles))

    logger.info("scene composed: sun + %d planets", len(planets))
    return SolarScene(sun, planets, lighting, backgrounds)
