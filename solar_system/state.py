"""Mutable simulation settings and the application state the frame loop reads."""
import logging

logger = logging.getLogger("solar_system.state")


class SimulationSettings:
    FIELDS = ("global_speed", "paused", "night_mode")

    def __init__(self, global_speed=1.0, paused=False, night_mode=True):
        object.__setattr__(self, "_listeners", {field: [] for field in self.FIELDS})
        self.global_speed = global_speed
        self.paused = paused
        self.night_mode = night_mode

    def subscribe(self, field, callback):
        self._listeners[field].append(callback)

    def __setattr__(self, name, value):
        if name not in self.FIELDS:
            object.__setattr__(self, name, value)
            return
        changed = getattr(self, name, None) != value
        object.__setattr__(self, name, value)
        if changed:
            logger.debug("%s -> %r", name, value)
            for callback in self._listeners[name]:
                callback(value)


class AppState:
    def __init__(self, settings, scene):
        self.settings = settings
        self.scene = scene

    @property
    def planets(self):
        return self.scene.planets

    @property
    def sun(self):
        return self.scene.sun
