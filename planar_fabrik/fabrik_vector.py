#!/usr/bin/env python3
"""
FABRIK Vector Module

Planar points and vectors are float64 numpy arrays of shape (2,).
numpy already provides +, -, scalar * and / and their in-place forms;
this module adds construction, magnitude and direction helpers.
"""

import math

import numpy as np

from arm_config import motion as motion_config
from .fabrik_errors import DegenerateSegmentError


def vec2(x: float, y: float) -> np.ndarray:
    """Create a planar vector."""
    return np.array([x, y], dtype=np.float64)


def as_vec2(value) -> np.ndarray:
    """
    Convert a 2-sequence into a planar vector (always a new array).

    Raises:
        ValueError: If value does not hold exactly two finite numbers
    """
    v = np.array(value, dtype=np.float64).reshape(-1)
    if v.shape != (2,):
        raise ValueError(f'Expected 2 coordinates, got {v.size}')
    if not np.all(np.isfinite(v)):
        raise ValueError(f'Coordinates must be finite, got {v.tolist()}')
    return v


def magnitude_sq(v: np.ndarray) -> float:
    return float(v[0] * v[0] + v[1] * v[1])


def magnitude(v: np.ndarray) -> float:
    return math.sqrt(magnitude_sq(v))


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return magnitude(b - a)


def normalize(v: np.ndarray,
              epsilon: float = motion_config.FABRIK_DEGENERATE_EPSILON) -> np.ndarray:
    """
    Return v scaled to unit length.

    Args:
        v: Vector to normalize
        epsilon: Magnitudes at or below this are treated as zero

    Raises:
        DegenerateSegmentError: If v has (near) zero magnitude
    """
    mag = magnitude(v)
    if mag <= epsilon:
        raise DegenerateSegmentError(f'Cannot normalize vector of magnitude {mag:.3g}')
    return v / mag


def from_angle(angle: float, mag: float = 1.0) -> np.ndarray:
    """Vector (cos(angle) * mag, sin(angle) * mag)."""
    return vec2(math.cos(angle) * mag, math.sin(angle) * mag)


def heading(v: np.ndarray) -> float:
    """Signed direction of v in radians, range (-pi, pi]."""
    return math.atan2(v[1], v[0])
