import logging
from pathlib import Path

from PIL import Image

logger = logging.getLogger("solar_system.assets")

SURFACE_KEYS = (
    "sun",
    "mercury",
    "venus",
    "earth",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
)
RING_KEYS = ("saturn_ring", "uranus_ring")
BACKGROUND_KEYS = ("stars", "day")
SKYBOX_FACES = 6


class AssetRegistry:
    """Loads images from disk once and hands out cached copies by key."""

    def __init__(self, root="image"):
        self.root = Path(root)
        self._cache = {}

    def path_for(self, key):
        suffix = ".png" if key in RING_KEYS else ".jpg"
        return self.root / f"{key}{suffix}"

    def texture(self, key):
        if key in self._cache:
            return self._cache[key]

        path = self.path_for(key)
        image = None
        if not path.exists():
            logger.warning("missing texture: %s", path)
        else:
            try:
                with Image.open(path) as source:
                    mode = "RGBA" if source.mode in ("RGBA", "LA", "P") else "RGB"
                    image = source.convert(mode)
            except OSError as exc:
                logger.warning("could not decode %s: %s", path, exc)
        self._cache[key] = image
        return image

    def skybox_faces(self):
        return [self.texture("stars")] * SKYBOX_FACES

    def preload(self):
        keys = SURFACE_KEYS + RING_KEYS + BACKGROUND_KEYS
        loaded = sum(1 for key in keys if self.texture(key) is not None)
        logger.info("loaded %d/%d textures from %s", loaded, len(keys), self.root)
        return loaded

    def __contains__(self, key):
        return self._cache.get(key) is not None
