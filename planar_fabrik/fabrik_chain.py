#!/usr/bin/env python3
"""
FABRIK Chain Module

Segment-length model of a planar serial arm.

Index i of every per-joint array refers to the joint that terminates
segment i. The base is a fixed anchor at the origin and is not stored, so
an N-segment arm has N joints and the last one is the end effector.
"""

import numpy as np

from arm_config import physical as phys_config
from .fabrik_errors import EmptyChainError, InvalidChainError
from .fabrik_vector import vec2


def as_lengths(lengths) -> np.ndarray:
    """
    Validate segment lengths and return them as a read-only float64 array.

    Raises:
        EmptyChainError: If no lengths are given
        InvalidChainError: If any length is not a positive finite number
    """
    try:
        values = np.array(lengths, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise InvalidChainError(f'Segment lengths must be numbers: {exc}') from exc

    if values.size < phys_config.MIN_SEGMENTS:
        raise EmptyChainError()
    if not np.all(np.isfinite(values)):
        raise InvalidChainError(f'Segment lengths must be finite, got {values.tolist()}')
    if np.any(values <= 0.0):
        raise InvalidChainError(f'Segment lengths must be positive, got {values.tolist()}')

    values.setflags(write=False)
    return values


def calculate_joint_distances(positions: np.ndarray) -> np.ndarray:
    """
    Calculate the actual length of every segment.

    Args:
        positions: Joint positions, shape (num_joints, 2)

    Returns:
        Array of shape (num_joints,). Entry 0 is measured from the base.
    """
    origin = vec2(*phys_config.BASE_ORIGIN)
    starts = np.vstack([origin, positions[:-1]])
    return np.linalg.norm(positions - starts, axis=1)


class PlanarChain:
    """Ordered sequence of fixed segment lengths."""

    def __init__(self, lengths):
        self.lengths = as_lengths(lengths)

    def __len__(self):
        return self.num_segments

    def __repr__(self):
        return f'PlanarChain({self.lengths.tolist()})'

    @property
    def num_segments(self) -> int:
        return int(self.lengths.size)

    @property
    def total_length(self) -> float:
        """Length of the fully extended arm."""
        return float(np.sum(self.lengths))

    def empty_positions(self) -> np.ndarray:
        """Zeroed joint position array sized for this chain."""
        return np.zeros((self.num_segments, 2), dtype=np.float64)

    def check_positions(self, positions: np.ndarray):
        """
        Make sure a joint position array matches this chain.

        Raises:
            InvalidChainError: On a shape mismatch
        """
        if positions.shape != (self.num_segments, 2):
            raise InvalidChainError(
                f'Expected joint positions of shape ({self.num_segments}, 2), got {positions.shape}'
            )

    def segment_errors(self, positions: np.ndarray) -> np.ndarray:
        """Absolute difference between actual and nominal length, per segment."""
        self.check_positions(positions)
        return np.abs(calculate_joint_distances(positions) - self.lengths)

    def max_segment_error(self, positions: np.ndarray) -> float:
        return float(np.max(self.segment_errors(positions)))
