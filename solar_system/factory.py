from solar_system.config import ORBIT_SEGMENTS, PLANET_SEGMENTS, RING_SEGMENTS


class BodyHandles:
    def __init__(self, pivot, sphere, orbit_line, ring=None):
        self.pivot = pivot
        self.sphere = sphere
        self.orbit_line = orbit_line
        self.ring = ring


def create_body(builder, name, radius, texture, orbit_radius, ring=None, ring_texture=None):
    """Build a planet: a sphere offset inside a pivot at the origin, plus its orbit path.

    Rotating ``pivot`` moves the planet around the sun; rotating ``sphere``
    spins it in place. A ring, when given, hangs off the pivot so it orbits
    with the planet but does not spin.
    """
    pivot = builder.pivot(name=f"{name}_pivot")
    sphere = builder.sphere(
        name=name,
        radius=radius,
        texture=texture,
        segments=PLANET_SEGMENTS,
        parent=pivot,
        x=orbit_radius,
    )

    ring_handle = None
    if ring is not None:
        ring_handle = builder.ring(
            name=f"{name}_ring",
            inner_radius=ring.inner_radius,
            outer_radius=ring.outer_radius,
            texture=ring_texture,
            segments=RING_SEGMENTS,
            parent=pivot,
            x=orbit_radius,
        )

    orbit_line = builder.orbit_line(name=f"{name}_orbit", radius=orbit_radius, segments=ORBIT_SEGMENTS)
    return BodyHandles(pivot, sphere, orbit_line, ring_handle)
