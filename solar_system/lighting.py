import logging

from solar_system.config import SUN_EMISSIVE_COLOR

logger = logging.getLogger("solar_system.lighting")

STARS = "stars"
DAY = "day"


class LightingPreset:
    def __init__(self, background, ambient_intensity, point_intensity, sun_emissive_intensity):
        self.background = background
        self.ambient_intensity = ambient_intensity
        self.point_intensity = point_intensity
        self.sun_emissive_intensity = sun_emissive_intensity


NIGHT = LightingPreset(STARS, ambient_intensity=0.1, point_intensity=2.0, sun_emissive_intensity=1.5)
DAY_PRESET = LightingPreset(DAY, ambient_intensity=0.5, point_intensity=0.8, sun_emissive_intensity=0.3)


class SceneLighting:
    """Plain record of the lighting-controlled scene properties."""

    def __init__(self):
        self.background = None
        self.ambient_intensity = 0.0
        self.point_intensity = 0.0
        self.sun_emissive_intensity = 0.0


def sun_emissive_color(intensity, base=0.6):
    # unlit sun: a white base plus the emissive tint scaled by intensity
    r, g, b = SUN_EMISSIVE_COLOR
    return (base + r * intensity * 0.4, base + g * intensity * 0.4, base + b * intensity * 0.4, 1.0)


class LightingModeSwitch:
    def __init__(self, target):
        self.target = target

    def set_mode(self, night):
        preset = NIGHT if night else DAY_PRESET
        self.target.background = preset.background
        self.target.ambient_intensity = preset.ambient_intensity
        self.target.point_intensity = preset.point_intensity
        self.target.sun_emissive_intensity = preset.sun_emissive_intensity
        logger.debug("lighting mode: %s", "night" if night else "day")

    def bind(self, settings):
        self.set_mode(settings.night_mode)
        settings.subscribe("night_mode", self.set_mode)
