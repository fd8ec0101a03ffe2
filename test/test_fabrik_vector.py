import math

import numpy as np
import pytest

from planar_fabrik import DegenerateSegmentError
from planar_fabrik.fabrik_vector import (
    vec2, as_vec2, magnitude_sq, magnitude, distance, normalize, from_angle, heading
)


def test_arithmetic_and_in_place_variants():
    a = vec2(1.0, 2.0)
    b = vec2(3.0, -1.0)
    np.testing.assert_allclose(a + b, [4.0, 1.0])
    np.testing.assert_allclose(a - b, [-2.0, 3.0])
    np.testing.assert_allclose(a * 2.0, [2.0, 4.0])
    np.testing.assert_allclose(a / 2.0, [0.5, 1.0])

    c = a.copy()
    c += b
    c -= vec2(1.0, 1.0)
    c *= 3.0
    c /= 2.0
    np.testing.assert_allclose(c, [4.5, 0.0])
    # operands untouched
    np.testing.assert_allclose(a, [1.0, 2.0])


def test_magnitude():
    v = vec2(3.0, 4.0)
    assert magnitude_sq(v) == 25.0
    assert magnitude(v) == 5.0
    assert distance(vec2(1.0, 1.0), vec2(4.0, 5.0)) == 5.0


def test_normalize():
    n = normalize(vec2(0.0, -2.5))
    np.testing.assert_allclose(n, [0.0, -1.0])
    assert magnitude(normalize(vec2(0.3, 0.7))) == pytest.approx(1.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(DegenerateSegmentError):
        normalize(vec2(0.0, 0.0))


def test_from_angle():
    np.testing.assert_allclose(from_angle(0.0, 2.0), [2.0, 0.0])
    np.testing.assert_allclose(from_angle(math.pi / 2, 3.0), [0.0, 3.0], atol=1e-12)
    np.testing.assert_allclose(from_angle(math.pi / 4), [math.sqrt(0.5), math.sqrt(0.5)])


def test_heading_range():
    assert heading(vec2(1.0, 0.0)) == 0.0
    assert heading(vec2(-1.0, 0.0)) == pytest.approx(math.pi)
    assert heading(vec2(0.0, -1.0)) == pytest.approx(-math.pi / 2)


def test_as_vec2_rejects_bad_input():
    np.testing.assert_allclose(as_vec2((1, 2)), [1.0, 2.0])
    with pytest.raises(ValueError):
        as_vec2((1.0, 2.0, 3.0))
    with pytest.raises(ValueError):
        as_vec2((float('nan'), 0.0))
