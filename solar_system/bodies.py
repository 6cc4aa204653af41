from solar_system.config import ORBIT_SPEED_MULTIPLIER


class RingSpec:
    def __init__(self, inner_radius, outer_radius, texture_key):
        self.inner_radius = inner_radius
        self.outer_radius = outer_radius
        self.texture_key = texture_key

    def __repr__(self):
        return f"RingSpec({self.inner_radius}, {self.outer_radius}, {self.texture_key!r})"


class PerBodySpeed:
    """Live-tunable angular speeds, radians per simulated second."""

    def __init__(self, orbit_rate, spin_rate):
        self.orbit_rate = orbit_rate
        self.spin_rate = spin_rate


class Body:
    def __init__(self, name, radius, orbit_radius, speed, ring=None):
        self.name = name
        self.radius = radius
        self.orbit_radius = orbit_radius
        self.speed = speed
        self.ring = ring

    @property
    def texture_key(self):
        return self.name.lower()

    @property
    def orbit_rate(self):
        return self.speed.orbit_rate

    @orbit_rate.setter
    def orbit_rate(self, value):
        self.speed.orbit_rate = value

    @property
    def spin_rate(self):
        return self.speed.spin_rate

    @spin_rate.setter
    def spin_rate(self, value):
        self.speed.spin_rate = value

    def __repr__(self):
        return f"Body({self.name!r}, radius={self.radius}, orbit_radius={self.orbit_radius})"


# name, radius, orbit radius, base orbit rate, spin rate, ring
PLANETS = [
    ("Mercury", 3.2, 28, 0.01, 0.15, None),
    ("Venus", 5.8, 44, 0.007, 0.1, None),
    ("Earth", 6, 62, 0.005, 0.2, None),
    ("Mars", 4, 78, 0.004, 0.18, None),
    ("Jupiter", 12, 100, 0.002, 0.3, None),
    ("Saturn", 10, 138, 0.0015, 0.28, (10, 20, "saturn_ring")),
    ("Uranus", 7, 176, 0.001, 0.25, (7, 12, "uranus_ring")),
    ("Neptune", 7, 200, 0.0007, 0.26, None),
]


def default_bodies():
    bodies = []
    for name, radius, orbit_radius, base_orbit_rate, spin_rate, ring in PLANETS:
        bodies.append(
            Body(
                name=name,
                radius=radius,
                orbit_radius=orbit_radius,
                speed=PerBodySpeed(base_orbit_rate * ORBIT_SPEED_MULTIPLIER, spin_rate),
                ring=RingSpec(*ring) if ring else None,
            )
        )
    return bodies
