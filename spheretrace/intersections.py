import numpy as np

from utils import EPSILON, normalize


def intersect_sphere(ray_origin, ray_direction, sphere, single_root=False):
    """Ray-sphere intersection by projecting the center onto the ray.

    Returns the parametric distances of the surface crossings: empty on a miss,
    both roots by default, or only the root a ray would see first in
    ``single_root`` mode (entry from outside, exit from inside).
    """
    l = sphere.position - ray_origin
    s = np.dot(l, ray_direction)
    l_squared = np.dot(l, l)
    r_squared = sphere.radius * sphere.radius

    # Origin outside the sphere and pointing away from it
    if s < 0 and l_squared > r_squared:
        return ()

    m_squared = l_squared - s * s
    if m_squared > r_squared:
        return ()

    q = np.sqrt(r_squared - m_squared)
    if single_root:
        return (s - q,) if l_squared > r_squared else (s + q,)
    return (s - q, s + q)


def find_closest_intersection(ray_origin, ray_direction, spheres, single_root=False):
    """Find nearest intersection along ray."""
    closest = None
    min_dist = float("inf")

    for sphere in spheres:
        for t in intersect_sphere(ray_origin, ray_direction, sphere, single_root):
            if EPSILON < t < min_dist:
                min_dist = t
                closest = sphere

    if closest is None:
        return None

    point = ray_origin + min_dist * ray_direction
    normal = normalize(point - closest.position)
    return {"distance": float(min_dist), "point": point, "normal": normal, "object": closest}
