import numpy as np

from errors import DegenerateGeometryError

EPSILON = 1e-5


def vec3(x, y, z):
    """Build a read-only 3D vector."""
    vec = np.array((x, y, z), dtype=float)
    vec.flags.writeable = False
    return vec


def length(vector):
    return float(np.linalg.norm(vector))


def normalize(vector):
    """Return a unit-length copy of the vector."""
    vec = np.array(vector, dtype=float)
    norm = np.linalg.norm(vec)
    if norm == 0:
        raise DegenerateGeometryError("Cannot normalize zero-length vector {}".format(vec.tolist()))
    return vec / norm


def reflect(direction, normal):
    """Reflect an incoming direction around a surface normal."""
    d = np.array(direction, dtype=float)
    n = np.array(normal, dtype=float)
    return d - n * (2.0 * np.dot(d, n))
