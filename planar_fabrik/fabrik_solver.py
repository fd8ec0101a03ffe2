#!/usr/bin/env python3
"""
FABRIK Solver - Master Orchestrator
====================================
Main solver class that orchestrates the complete planar FABRIK IK process.
Encapsulates validation, initialization, the relaxation loop with
convergence checking, and angle extraction.
"""

import logging
from typing import Dict, List

import numpy as np

from arm_config import motion as motion_config
from .fabrik_angles import derive_angles, angle_deltas
from .fabrik_chain import PlanarChain, as_lengths
from .fabrik_errors import InvalidChainError
from .fabrik_initialization import FabrikInitialization, initialize_pose
from .fabrik_iteration import FabrikIteration, PassDirection
from .fabrik_reachability import check_reachable
from .fabrik_vector import as_vec2

logger = logging.getLogger(__name__)


def _check_loop_settings(max_iterations: int, precision: float, degenerate_policy: str):
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, (int, np.integer)):
        raise InvalidChainError(f'Iteration budget must be an integer, got {max_iterations!r}')
    if max_iterations < 0:
        raise InvalidChainError(f'Iteration budget must be >= 0, got {max_iterations}')
    if not precision >= 0.0:
        raise InvalidChainError(f'Precision must be >= 0, got {precision}')
    if degenerate_policy not in motion_config.FABRIK_DEGENERATE_POLICIES:
        raise InvalidChainError(
            f'Unknown degenerate policy {degenerate_policy!r}, '
            f'expected one of {motion_config.FABRIK_DEGENERATE_POLICIES}'
        )


def relax(positions: np.ndarray,
          lengths,
          target,
          max_iterations: int = motion_config.FABRIK_MAX_ITERATIONS,
          precision: float = motion_config.FABRIK_PRECISION,
          epsilon: float = motion_config.FABRIK_DEGENERATE_EPSILON,
          degenerate_policy: str = motion_config.FABRIK_DEGENERATE_POLICY,
          history: List[float] = None) -> float:
    """
    Relax joint positions toward a configuration honouring every segment length.

    Passes alternate between forward (base-anchored) and backward
    (target-anchored), starting forward. The loop ends as soon as a pass
    reports a max change below precision, or after max_iterations passes.

    Args:
        positions: Joint positions, float array of shape (N, 2), modified in place
        lengths: Segment lengths, N values
        target: Target end-effector position (x, y)
        max_iterations: Pass budget
        precision: Early termination threshold (0 runs the whole budget)
        epsilon: Distance below which two joints count as coincident
        degenerate_policy: 'nudge' or 'raise' for coincident joints
        history: Optional list receiving the max change of every pass

    Returns:
        Max change of the last pass (current max segment error if no pass ran)

    Raises:
        InvalidChainError: If inputs are malformed
        DegenerateSegmentError: On coincident joints under the 'raise' policy
    """
    chain = PlanarChain(lengths)
    try:
        target = as_vec2(target)
    except ValueError as exc:
        raise InvalidChainError(f'Invalid target: {exc}') from exc
    if not isinstance(positions, np.ndarray) or positions.dtype != np.float64:
        raise InvalidChainError('Joint positions must be a float64 numpy array')
    chain.check_positions(positions)
    _check_loop_settings(max_iterations, precision, degenerate_policy)

    positions[-1] = target

    direction = PassDirection.FORWARD
    max_change = chain.max_segment_error(positions)

    for iteration in range(max_iterations):
        max_change = FabrikIteration.run_pass(
            direction, positions, chain.lengths, target, epsilon, degenerate_policy
        )
        logger.debug(f'Pass {iteration} ({direction.value}): max change {max_change:.3e}')
        if history is not None:
            history.append(max_change)
        direction = direction.toggled()

        if max_change < precision:
            break

    return max_change


class FabrikSolver:
    """
    Master FABRIK solver that orchestrates the complete IK solving process.

    This class encapsulates:
    - Input validation and the reachability gate
    - Initialization (from angles or toward the target)
    - Relaxation loop with convergence checking
    - Angle extraction and angle deltas
    """

    def __init__(self,
                 default_precision: float = motion_config.FABRIK_PRECISION,
                 default_max_iterations: int = motion_config.FABRIK_MAX_ITERATIONS,
                 noise: float = motion_config.FABRIK_INIT_NOISE,
                 degenerate_policy: str = motion_config.FABRIK_DEGENERATE_POLICY,
                 epsilon: float = motion_config.FABRIK_DEGENERATE_EPSILON):
        """
        Initialize FABRIK solver.

        Args:
            default_precision: Default early termination threshold
            default_max_iterations: Default pass budget
            noise: Half-width of the initial perturbation
            degenerate_policy: 'nudge' or 'raise' for coincident joints
            epsilon: Distance below which two joints count as coincident
        """
        _check_loop_settings(default_max_iterations, default_precision, degenerate_policy)
        self.default_precision = default_precision
        self.default_max_iterations = default_max_iterations
        self.noise = noise
        self.degenerate_policy = degenerate_policy
        self.epsilon = epsilon

    def solve(self,
              lengths,
              target,
              angles=None,
              seed: int = None,
              precision: float = None,
              max_iterations: int = None) -> Dict:
        """
        Solve inverse kinematics using the FABRIK relaxation.

        Args:
            lengths: Segment lengths
            target: Target end-effector position (x, y)
            angles: Optional starting relative angles (cold start when None)
            seed: Seed for the initial perturbation (clock-derived when None)
            precision: Early termination threshold (uses default if None)
            max_iterations: Pass budget (uses default if None)

        Returns:
            Dictionary containing:
                - 'converged': bool - Whether the final max change is below precision
                - 'iterations': int - Number of passes run
                - 'final_error': float - Max change of the last pass
                - 'history': list - Max change of every pass
                - 'initial_positions': np.ndarray - Starting joint positions
                - 'positions': np.ndarray - Final joint positions
                - 'initial_angles': np.ndarray - Starting relative angles
                - 'angles': np.ndarray - Final relative angles
                - 'angle_deltas': np.ndarray - Final minus initial angles
                - 'seed': int - Seed used for the perturbation

        Raises:
            EmptyChainError: If no segments are given
            InvalidChainError: If inputs are malformed
            UnreachableTargetError: If the target is beyond full extension
        """
        if precision is None:
            precision = self.default_precision
        if max_iterations is None:
            max_iterations = self.default_max_iterations

        # Everything is validated before any position exists
        lengths = as_lengths(lengths)
        try:
            target = as_vec2(target)
        except ValueError as exc:
            raise InvalidChainError(f'Invalid target: {exc}') from exc
        _check_loop_settings(max_iterations, precision, self.degenerate_policy)
        check_reachable(lengths, target)

        logger.info(f'Solving IK for target: ({target[0]:.3f}, {target[1]:.3f})')
        logger.info(f'  Segments: {lengths.size}, precision: {precision}, '
                    f'max iterations: {max_iterations}')

        rng, seed = FabrikInitialization.make_rng(seed)
        positions = initialize_pose(lengths, target, angles=angles, noise=self.noise, rng=rng)
        initial_positions = positions.copy()

        if angles is not None:
            initial_angles = np.array(angles, dtype=np.float64).reshape(-1)
        else:
            initial_angles = derive_angles(initial_positions)

        history = []
        final_error = relax(
            positions,
            lengths,
            target,
            max_iterations=max_iterations,
            precision=precision,
            epsilon=self.epsilon,
            degenerate_policy=self.degenerate_policy,
            history=history
        )

        converged = final_error < precision
        if converged:
            logger.info(f'  Converged in {len(history)} iterations, error: {final_error:.3e}')
        else:
            logger.warning(
                f'  Did not converge after {len(history)} iterations, error: {final_error:.3e}'
            )

        final_angles = derive_angles(positions)

        return {
            'converged': converged,
            'iterations': len(history),
            'final_error': final_error,
            'history': history,
            'initial_positions': initial_positions,
            'positions': positions,
            'initial_angles': initial_angles,
            'angles': final_angles,
            'angle_deltas': angle_deltas(final_angles, initial_angles),
            'seed': seed
        }
