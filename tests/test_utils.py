import numpy as np
import pytest
import sys
import os

# Add source directory to path to allow imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'spheretrace')))

from errors import DegenerateGeometryError
from utils import length, normalize, reflect, vec3


def test_vec3_is_read_only():
    v = vec3(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        v[0] = 5.0
    # Arithmetic produces a new vector and leaves the original untouched
    w = v + vec3(1.0, 1.0, 1.0)
    assert np.array_equal(v, [1.0, 2.0, 3.0])
    assert np.array_equal(w, [2.0, 3.0, 4.0])


def test_length():
    assert length(vec3(3.0, 4.0, 0.0)) == pytest.approx(5.0)


def test_normalize_returns_unit_vector():
    n = normalize(vec3(0.0, 3.0, -4.0))
    assert length(n) == pytest.approx(1.0)
    assert np.allclose(n, [0.0, 0.6, -0.8])


def test_normalize_zero_vector_fails_fast():
    with pytest.raises(DegenerateGeometryError):
        normalize(vec3(0.0, 0.0, 0.0))


def test_degenerate_geometry_is_a_value_error():
    """Callers catching ValueError for bad input also see degenerate geometry."""
    with pytest.raises(ValueError):
        normalize(np.zeros(3))


def test_reflect_mirrors_across_normal():
    d = normalize(vec3(1.0, -1.0, 0.0))
    r = reflect(d, vec3(0.0, 1.0, 0.0))
    assert np.allclose(r, normalize(vec3(1.0, 1.0, 0.0)))


def test_reflect_head_on_reverses_direction():
    r = reflect(vec3(0.0, 0.0, -1.0), vec3(0.0, 0.0, 1.0))
    assert np.array_equal(r, [0.0, 0.0, 1.0])
