#!/usr/bin/env python3
"""
FABRIK Iteration Module

Implements the forward and backward relaxation passes for the planar solver.

Both passes work in place on a joint position array of shape (N, 2).
The end effector (row N-1) is pinned to the target by the caller and is
never moved by a pass.
"""

import enum
import logging

import numpy as np

from arm_config import motion as motion_config
from arm_config import physical as phys_config
from .fabrik_errors import DegenerateSegmentError
from .fabrik_vector import vec2, magnitude, distance, normalize, from_angle

logger = logging.getLogger(__name__)


class PassDirection(enum.Enum):
    """Which end of the chain a pass is anchored at."""

    FORWARD = 'forward'  # anchored at the base
    BACKWARD = 'backward'  # anchored at the target

    def toggled(self) -> 'PassDirection':
        if self is PassDirection.FORWARD:
            return PassDirection.BACKWARD
        return PassDirection.FORWARD


class FabrikIteration:
    """FABRIK iteration with backward and forward passes."""

    @staticmethod
    def fallback_direction(previous_direction: np.ndarray,
                           anchor: np.ndarray,
                           far_end: np.ndarray,
                           epsilon: float) -> np.ndarray:
        """
        Unit direction used when a joint coincides with the cursor.

        Continues the previous segment of the pass if there is one, else
        points from the anchor to the far end of the chain, else along the
        reference axis.
        """
        if previous_direction is not None:
            return previous_direction
        try:
            return normalize(far_end - anchor, epsilon)
        except DegenerateSegmentError:
            return from_angle(phys_config.REFERENCE_ANGLE)

    @staticmethod
    def _place_joints(positions: np.ndarray,
                      indices,
                      segment_lengths,
                      anchor: np.ndarray,
                      far_end: np.ndarray,
                      epsilon: float,
                      degenerate_policy: str) -> float:
        """
        Sweep joints starting from anchor, putting each one at its nominal
        distance from the previous one along the current direction.

        Returns:
            Largest length error seen before correction
        """
        cursor = anchor.copy()
        previous_direction = None
        max_change = 0.0

        for j, length in zip(indices, segment_lengths):
            diff = positions[j] - cursor
            diff_mag = magnitude(diff)

            change = abs(diff_mag - length)
            if change > max_change:
                max_change = change

            if diff_mag > epsilon:
                direction = diff / diff_mag
            elif degenerate_policy == 'raise':
                raise DegenerateSegmentError(
                    f'Joint {j} coincides with its neighbour, segment direction is undefined',
                    index=j
                )
            else:
                direction = FabrikIteration.fallback_direction(
                    previous_direction, anchor, far_end, epsilon
                )
                logger.warning(f'Joint {j} coincides with its neighbour, nudged along '
                               f'({direction[0]:.3f}, {direction[1]:.3f})')

            cursor += direction * length
            positions[j] = cursor
            previous_direction = direction

        return max_change

    @staticmethod
    def forward_pass(positions: np.ndarray,
                     lengths: np.ndarray,
                     epsilon: float = motion_config.FABRIK_DEGENERATE_EPSILON,
                     degenerate_policy: str = motion_config.FABRIK_DEGENERATE_POLICY) -> float:
        """
        Perform forward pass: push joints from the base toward the end effector.

        Joints 0..N-2 are repositioned. The last segment cannot be fixed by
        this pass, its remaining error is included in the result.

        Args:
            positions: Joint positions, shape (N, 2), modified in place
            lengths: Segment lengths, shape (N,)
            epsilon: Distance below which two joints count as coincident
            degenerate_policy: 'nudge' or 'raise'

        Returns:
            Largest segment length error of this pass
        """
        num_joints = len(positions)
        origin = vec2(*phys_config.BASE_ORIGIN)

        max_change = FabrikIteration._place_joints(
            positions,
            range(0, num_joints - 1),
            lengths[:num_joints - 1],
            origin,
            positions[-1],
            epsilon,
            degenerate_policy
        )

        # Last segment: from joint N-2 (or the base) to the pinned end effector
        start = positions[-2] if num_joints > 1 else origin
        residual = abs(distance(start, positions[-1]) - lengths[-1])
        return max(max_change, residual)

    @staticmethod
    def backward_pass(positions: np.ndarray,
                      lengths: np.ndarray,
                      target: np.ndarray,
                      epsilon: float = motion_config.FABRIK_DEGENERATE_EPSILON,
                      degenerate_policy: str = motion_config.FABRIK_DEGENERATE_POLICY) -> float:
        """
        Perform backward pass: pull joints from the target toward the base.

        Joints N-2 down to 0 are repositioned, joint j is kept at
        lengths[j + 1] from joint j + 1. The first segment cannot be fixed
        by this pass, its remaining error is included in the result.

        Args:
            positions: Joint positions, shape (N, 2), modified in place
            lengths: Segment lengths, shape (N,)
            target: Target end-effector position, shape (2,)
            epsilon: Distance below which two joints count as coincident
            degenerate_policy: 'nudge' or 'raise'

        Returns:
            Largest segment length error of this pass
        """
        num_joints = len(positions)
        origin = vec2(*phys_config.BASE_ORIGIN)

        max_change = FabrikIteration._place_joints(
            positions,
            range(num_joints - 2, -1, -1),
            lengths[num_joints - 1:0:-1],
            target,
            origin,
            epsilon,
            degenerate_policy
        )

        # First segment: from the base to joint 0
        residual = abs(distance(origin, positions[0]) - lengths[0])
        return max(max_change, residual)

    @staticmethod
    def run_pass(direction: PassDirection,
                 positions: np.ndarray,
                 lengths: np.ndarray,
                 target: np.ndarray,
                 epsilon: float = motion_config.FABRIK_DEGENERATE_EPSILON,
                 degenerate_policy: str = motion_config.FABRIK_DEGENERATE_POLICY) -> float:
        """Perform one pass in the given direction, return its max change."""
        if direction is PassDirection.FORWARD:
            return FabrikIteration.forward_pass(positions, lengths, epsilon, degenerate_policy)
        return FabrikIteration.backward_pass(positions, lengths, target, epsilon, degenerate_policy)
