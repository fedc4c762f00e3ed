from utils import vec3

VIEW_DIRECTION = vec3(0.0, 0.0, -1.0)


class Camera:
    """Fixed camera on the z=0 plane looking down -Z.

    Every primary ray is parallel to -Z; the frame spans [-1, 1] on both axes.
    """

    def __init__(self, resolution):
        self.resolution = resolution

    def pixel_to_world(self, coordinate):
        return ((coordinate / self.resolution) - 0.5) * 2.0

    def get_ray_through_pixel(self, row, col):
        """Return (origin, direction) of the primary ray for a pixel."""
        origin = vec3(self.pixel_to_world(col), self.pixel_to_world(row), 0.0)
        return origin, VIEW_DIRECTION
