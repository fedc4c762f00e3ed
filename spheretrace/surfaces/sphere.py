from utils import vec3

SPHERE_RADIUS = 0.5


class Sphere:
    """A sphere of the scene-wide fixed radius."""

    radius = SPHERE_RADIUS

    def __init__(self, position, color):
        self.position = vec3(*position)
        self.color = color

    def __repr__(self):
        return "Sphere(position={}, color={})".format(self.position.tolist(), list(self.color))
