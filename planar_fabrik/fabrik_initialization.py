#!/usr/bin/env python3
"""
FABRIK Initialization Module

Generates the starting joint positions for the relaxation loop.
Supports a start from given joint angles (forward kinematics) and a cold
start along the straight line from the base to the target.

Every generated joint except a cold start's end effector gets a little
uniform noise so the chain is never exactly collinear.
"""

import logging
import time

import numpy as np

from arm_config import motion as motion_config
from .fabrik_angles import forward_kinematics
from .fabrik_chain import as_lengths
from .fabrik_errors import InvalidChainError
from .fabrik_vector import as_vec2

logger = logging.getLogger(__name__)


class FabrikInitialization:
    """Initialization of FABRIK solver joint positions."""

    @staticmethod
    def time_seed() -> int:
        """Seed derived from the clock, for callers that do not pass one."""
        return time.time_ns()

    @staticmethod
    def make_rng(seed: int = None) -> tuple:
        """
        Create the random source used for perturbation.

        Returns:
            tuple: (rng, seed) - seed is the one actually used
        """
        if seed is None:
            seed = FabrikInitialization.time_seed()
        logger.debug(f'Initialization seed: {seed}')
        return np.random.default_rng(seed), seed

    @staticmethod
    def perturb(positions: np.ndarray, rng: np.random.Generator, noise: float,
                count: int = None) -> np.ndarray:
        """
        Add uniform noise in [-noise, noise] to both coordinates of the first
        count joints (all joints by default). Modifies positions in place.
        """
        if count is None:
            count = len(positions)
        if noise > 0.0 and count > 0:
            positions[:count] += rng.uniform(-noise, noise, size=(count, 2))
        return positions

    @staticmethod
    def from_angles(lengths: np.ndarray, angles, rng: np.random.Generator,
                    noise: float = motion_config.FABRIK_INIT_NOISE) -> np.ndarray:
        """
        Hot start: place joints by walking the given relative angles.

        Args:
            lengths: Segment lengths, shape (N,)
            angles: Relative joint angles in radians, length N
            rng: Random source for perturbation
            noise: Half-width of the perturbation

        Returns:
            Array of shape (N, 2)
        """
        angles = np.array(angles, dtype=np.float64).reshape(-1)
        if angles.shape != lengths.shape:
            raise InvalidChainError(
                f'Expected {lengths.size} starting angles, got {angles.size}'
            )
        if not np.all(np.isfinite(angles)):
            raise InvalidChainError(f'Starting angles must be finite, got {angles.tolist()}')

        positions = forward_kinematics(lengths, angles)
        return FabrikInitialization.perturb(positions, rng, noise)

    @staticmethod
    def toward_target(lengths: np.ndarray, target: np.ndarray, rng: np.random.Generator,
                      noise: float = motion_config.FABRIK_INIT_NOISE) -> np.ndarray:
        """
        Cold start: spread joints evenly on the line from the base to the target.

        Joint i sits at fraction (i + 1) / N of the way. The end effector
        is placed exactly on the target and is not perturbed.

        Returns:
            Array of shape (N, 2)
        """
        num_joints = lengths.size
        fractions = np.arange(1, num_joints + 1, dtype=np.float64) / num_joints
        positions = np.outer(fractions, target)
        FabrikInitialization.perturb(positions, rng, noise, count=num_joints - 1)
        positions[-1] = target
        return positions


def initialize_pose(lengths, target, angles=None, seed: int = None,
                    noise: float = motion_config.FABRIK_INIT_NOISE,
                    rng: np.random.Generator = None) -> np.ndarray:
    """
    Build the initial joint positions.

    The caller is expected to have checked reachability.

    Args:
        lengths: Segment lengths
        target: Target point (x, y)
        angles: Optional starting relative angles; cold start when None
        seed: Seed for the perturbation noise (clock-derived when None)
        noise: Half-width of the perturbation, 0 disables it
        rng: Random generator to use instead of seeding a new one

    Returns:
        Array of shape (N, 2)
    """
    lengths = as_lengths(lengths)
    try:
        target = as_vec2(target)
    except ValueError as exc:
        raise InvalidChainError(f'Invalid target: {exc}') from exc
    if noise < 0.0:
        raise InvalidChainError(f'Perturbation noise must be >= 0, got {noise}')

    if rng is None:
        rng, _ = FabrikInitialization.make_rng(seed)

    if angles is not None:
        return FabrikInitialization.from_angles(lengths, angles, rng, noise)
    return FabrikInitialization.toward_target(lengths, target, rng, noise)
