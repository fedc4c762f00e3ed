from utils import vec3


class Light:
    """Point light of unit intensity."""

    def __init__(self, position):
        self.position = vec3(*position)

    def __repr__(self):
        return "Light(position={})".format(self.position.tolist())
