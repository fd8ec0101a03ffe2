#!/usr/bin/env python3
"""
FABRIK Angles Module

Conversion between absolute joint positions and relative joint angles.

Angle 0 is measured from the +X axis at the base, every following angle
is the turn relative to the previous segment's direction. All relative
angles are reported in (-pi, pi].
"""

import math

import numpy as np

from arm_config import physical as phys_config
from .fabrik_vector import vec2, from_angle, heading


def wrap_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    wrapped = math.remainder(angle, 2.0 * math.pi)
    if wrapped <= -math.pi:
        wrapped += 2.0 * math.pi
    return wrapped


def derive_angles(positions: np.ndarray) -> np.ndarray:
    """
    Convert joint positions into relative joint angles.

    Args:
        positions: Joint positions, shape (num_joints, 2)

    Returns:
        Array of shape (num_joints,), angle[i] relative to segment i-1
    """
    angles = np.zeros(len(positions), dtype=np.float64)
    current_pos = vec2(*phys_config.BASE_ORIGIN)
    current_angle = phys_config.REFERENCE_ANGLE

    for i, new_pos in enumerate(positions):
        new_angle = heading(new_pos - current_pos)
        angles[i] = wrap_angle(new_angle - current_angle)
        current_angle = new_angle
        current_pos = new_pos

    return angles


def forward_kinematics(lengths, angles) -> np.ndarray:
    """
    Build joint positions from relative joint angles.

    Exact inverse of derive_angles (up to floating point), no perturbation.

    Returns:
        Array of shape (num_joints, 2)
    """
    positions = np.zeros((len(lengths), 2), dtype=np.float64)
    current_pos = vec2(*phys_config.BASE_ORIGIN)
    current_angle = phys_config.REFERENCE_ANGLE

    for i, (length, angle) in enumerate(zip(lengths, angles)):
        current_angle += angle
        current_pos += from_angle(current_angle, length)
        positions[i] = current_pos

    return positions


def angle_deltas(final_angles, initial_angles) -> np.ndarray:
    """Per-joint rotation from the initial to the final pose, wrapped."""
    return np.array([wrap_angle(f - i) for f, i in zip(final_angles, initial_angles)],
                    dtype=np.float64)
