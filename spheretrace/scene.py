import numpy as np

from color import rgb
from errors import DegenerateGeometryError
from light import Light
from material import Material
from scene_settings import SceneSettings
from surfaces.sphere import Sphere
from utils import EPSILON, length

RED = rgb(1.0, 0.0, 0.0)
YELLOW = rgb(0.96, 0.94, 0.32)


class Scene:
    """Spheres, lights, the shared material and render settings.

    Spheres and lights are kept in the given order; among hits at equal
    distance the earlier sphere wins.
    """

    def __init__(self, spheres, lights, material=None, settings=None):
        self.spheres = tuple(spheres)
        self.lights = tuple(lights)
        self.material = material
        self.settings = settings if settings is not None else SceneSettings()
        validate_scene(self)


def validate_scene(scene):
    """Reject coincident points that would make a shading direction undefined."""
    for i, sphere in enumerate(scene.spheres):
        for other in scene.spheres[i + 1:]:
            if np.array_equal(sphere.position, other.position):
                raise DegenerateGeometryError("Spheres share center {}".format(sphere.position.tolist()))
        for light in scene.lights:
            # A hit at the light position has no direction toward the light
            if abs(length(light.position - sphere.position) - sphere.radius) <= EPSILON:
                raise DegenerateGeometryError("Light lies on sphere surface {}".format(light.position.tolist()))


def rich_scene():
    """Two reflective spheres lit by two lights, with specular highlights."""
    spheres = [Sphere((0.0, 0.3, -1.0), RED), Sphere((0.0, -0.3, -1.0), YELLOW)]
    lights = [Light((0.5, 0.5, 0.0)), Light((-0.5, 0.2, 0.5))]
    return Scene(spheres, lights, Material(0.5, 32), SceneSettings(resolution=512))


def simple_scene():
    """Two diffuse spheres, one light, primary hits only."""
    spheres = [Sphere((0.0, 0.3, -1.0), RED), Sphere((0.0, -0.3, -1.0), YELLOW)]
    lights = [Light((0.5, 0.5, 0.0))]
    settings = SceneSettings(resolution=128, max_recursions=1, ambient_intensity=0.0, single_root=True)
    return Scene(spheres, lights, None, settings)


PRESETS = {
    "rich": rich_scene,
    "simple": simple_scene,
}


def _expect(obj_type, params, count, line_number):
    if len(params) != count:
        raise ValueError("Line {}: '{}' expects {} values, got {}".format(line_number, obj_type, count, len(params)))


def parse_scene_file(file_path):
    """Read a scene description.

    One entry per line, ``#`` starts a comment::

        set <resolution> <max_recursions> <reflection_factor> <ambient_intensity>
        mtl <specular_value> <specular_power>
        sph <x> <y> <z> <r> <g> <b>
        lgt <x> <y> <z>
    """
    spheres = []
    lights = []
    material = None
    settings = None
    with open(file_path, 'r') as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            obj_type = parts[0]
            params = [float(p) for p in parts[1:]]
            if obj_type == "set":
                _expect(obj_type, params, 4, line_number)
                settings = SceneSettings(int(params[0]), int(params[1]), params[2], params[3])
            elif obj_type == "mtl":
                _expect(obj_type, params, 2, line_number)
                material = Material(params[0], params[1])
            elif obj_type == "sph":
                _expect(obj_type, params, 6, line_number)
                spheres.append(Sphere(params[:3], rgb(*params[3:6])))
            elif obj_type == "lgt":
                _expect(obj_type, params, 3, line_number)
                lights.append(Light(params[:3]))
            else:
                raise ValueError("Unknown object type: {}".format(obj_type))
    return Scene(spheres, lights, material, settings)
