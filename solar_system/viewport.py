import logging
import math

logger = logging.getLogger("solar_system.viewport")


class PerspectiveProjection:
    """Vertical field of view, aspect ratio and clip planes for the camera lens.

    ``fov`` is vertical and stays fixed across resizes; the horizontal angle
    follows the aspect ratio. When a panda3d lens is attached, every
    ``update_projection`` pushes the values into it.
    """

    def __init__(self, fov, aspect, near, far, lens=None):
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.lens = lens
        self.update_projection()

    @property
    def horizontal_fov(self):
        return math.degrees(2 * math.atan(math.tan(math.radians(self.fov) / 2) * self.aspect))

    def update_projection(self):
        if self.lens is not None:
            self.lens.setFov(self.horizontal_fov, self.fov)
            self.lens.setNearFar(self.near, self.far)


class ViewportResizeHandler:
    """Keeps the camera aspect and the output surface in step with the window."""

    def __init__(self, projection, surface=None):
        self.projection = projection
        self.surface = surface

    def on_resize(self, width, height):
        if width <= 0 or height <= 0:
            # minimised windows report a zero size
            return False
        self.projection.aspect = width / height
        self.projection.update_projection()
        if self.surface is not None:
            self.surface.set_size(width, height)
        logger.debug("viewport resized to %dx%d", width, height)
        return True
