import numpy as np

from color import BLACK
from intersections import find_closest_intersection
from utils import normalize

# Shadow rays start this far toward the light, past the intersection epsilon,
# so the surface they leave is not reported as an occluder.
SHADOW_OFFSET = 1e-4


def lambert(sphere_position, point, light_position):
    """Diffuse term: cosine between surface normal and light direction, floored at 0."""
    light_dir = normalize(light_position - point)
    normal = normalize(point - sphere_position)
    return max(0.0, float(np.dot(light_dir, normal)))


def blinn(sphere_position, point, light_position, view_origin, material):
    """Specular term around normalize(light_dir - view_dir).

    ``view_dir`` points from the eye to the surface, so this is not the
    textbook half-vector.
    """
    normal = normalize(point - sphere_position)
    light_dir = normalize(light_position - point)
    view_dir = normalize(point - view_origin)
    # Light straight ahead along the view ray: no highlight
    blinn_vec = light_dir - view_dir
    if not np.any(blinn_vec):
        return 0.0
    blinn_dir = normalize(blinn_vec)
    spec_angle = max(0.0, float(np.dot(blinn_dir, normal)))
    return material.specular_value * spec_angle ** material.specular_power


def is_shadowed(point, light_position, spheres, single_root=False):
    """Return True if any sphere lies along the ray from point toward the light."""
    direction = normalize(light_position - point)
    shadow_origin = point + direction * SHADOW_OFFSET
    return find_closest_intersection(shadow_origin, direction, spheres, single_root) is not None


def light_contribution(intersection, scene, light, view_origin):
    """Color a single light adds at a hit; black when the light is blocked."""
    point = intersection["point"]
    sphere = intersection["object"]

    if is_shadowed(point, light.position, scene.spheres, scene.settings.single_root):
        return BLACK

    albedo = sphere.color
    color = albedo * lambert(sphere.position, point, light.position)
    if scene.material is not None:
        color = color + albedo * blinn(sphere.position, point, light.position, view_origin, scene.material)
    return color


def ambient(sphere, intensity):
    return sphere.color * intensity
