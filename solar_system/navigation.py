"""Damped orbit camera: drag to rotate about a target, scroll to zoom, right-drag to pan."""
import math

EPS = 1e-6


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


class OrbitControls:
    def __init__(
        self,
        position,
        target=(0.0, 0.0, 0.0),
        damping_factor=0.05,
        enable_damping=True,
        min_distance=0.0,
        max_distance=math.inf,
    ):
        self.target = list(target)
        self.damping_factor = damping_factor
        self.enable_damping = enable_damping
        self.min_distance = min_distance
        self.max_distance = max_distance

        ox, oy, oz = (position[i] - self.target[i] for i in range(3))
        self.radius = math.sqrt(ox * ox + oy * oy + oz * oz)
        self.theta = math.atan2(ox, oz)
        self.phi = math.acos(clamp(oy / self.radius, -1.0, 1.0)) if self.radius else 0.0

        self._delta_theta = 0.0
        self._delta_phi = 0.0
        self._scale = 1.0
        self._pan = [0.0, 0.0, 0.0]

    @property
    def position(self):
        sin_phi = math.sin(self.phi)
        return (
            self.target[0] + self.radius * sin_phi * math.sin(self.theta),
            self.target[1] + self.radius * math.cos(self.phi),
            self.target[2] + self.radius * sin_phi * math.cos(self.theta),
        )

    @property
    def moving(self):
        return bool(self._delta_theta or self._delta_phi or any(self._pan) or self._scale != 1.0)

    def rotate_left(self, angle):
        self._delta_theta -= angle

    def rotate_up(self, angle):
        self._delta_phi -= angle

    def dolly_in(self, scale):
        self._scale *= scale

    def dolly_out(self, scale):
        self._scale /= scale

    def pan(self, dx, dy):
        # screen-space pan, scaled by distance so it feels the same at any zoom
        right = (math.cos(self.theta), 0.0, -math.sin(self.theta))
        up = (
            -math.cos(self.phi) * math.sin(self.theta),
            math.sin(self.phi),
            -math.cos(self.phi) * math.cos(self.theta),
        )
        for i in range(3):
            self._pan[i] += (-dx * right[i] + dy * up[i]) * self.radius

    def update(self):
        if self.enable_damping:
            self.theta += self._delta_theta * self.damping_factor
            self.phi += self._delta_phi * self.damping_factor
            for i in range(3):
                self.target[i] += self._pan[i] * self.damping_factor
        else:
            self.theta += self._delta_theta
            self.phi += self._delta_phi
            for i in range(3):
                self.target[i] += self._pan[i]

        self.phi = clamp(self.phi, EPS, math.pi - EPS)
        self.radius = clamp(self.radius * self._scale, self.min_distance, self.max_distance)
        self._scale = 1.0

        if self.enable_damping:
            keep = 1.0 - self.damping_factor
            self._delta_theta *= keep
            self._delta_phi *= keep
            self._pan = [p * keep for p in self._pan]
        else:
            self._delta_theta = 0.0
            self._delta_phi = 0.0
            self._pan = [0.0, 0.0, 0.0]
        return self.position
