from solar_system.config import SUN_SPIN_RATE


def advance(state, dt):
    settings = state.settings
    step = dt * settings.global_speed
    state.sun.angle += step * SUN_SPIN_RATE
    for planet in state.planets:
        planet.pivot.angle += step * planet.body.orbit_rate
        planet.sphere.angle += step * planet.body.spin_rate


class AnimationLoop:
    """One frame of work per call to ``tick``.

    Paused frames drop their ``dt`` entirely, so resuming continues from where
    the bodies stopped instead of jumping ahead.
    """

    def __init__(self, state, navigation=None, renderer=None):
        self.state = state
        self.navigation = navigation
        self.renderer = renderer
        self.frames = 0

    @property
    def running(self):
        return not self.state.settings.paused

    def tick(self, dt):
        if self.running and dt > 0:
            advance(self.state, dt)
        if self.navigation is not None:
            self.navigation.update()
        if self.renderer is not None:
            self.renderer.render()
        self.frames += 1
