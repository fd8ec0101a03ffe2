"""
Planar FABRIK Inverse Kinematics Module

Forward And Backward Reaching Inverse Kinematics for a planar serial arm.

Modules:
    - fabrik_solver: Main solver orchestrator and the relax() loop (use this for IK solving)
    - fabrik_initialization: Starting joint positions (from angles or toward the target)
    - fabrik_iteration: Single forward or backward relaxation pass
    - fabrik_angles: Joint positions to relative angles and back
    - fabrik_reachability: Full-extension reachability gate
    - fabrik_chain: Segment-length model
    - fabrik_vector: Planar vector helpers
    - fabrik_errors: Exceptions
"""

from .fabrik_solver import FabrikSolver, relax
from .fabrik_initialization import FabrikInitialization, initialize_pose
from .fabrik_iteration import FabrikIteration, PassDirection
from .fabrik_angles import derive_angles, forward_kinematics, angle_deltas, wrap_angle
from .fabrik_reachability import is_reachable, check_reachable
from .fabrik_chain import PlanarChain, calculate_joint_distances
from .fabrik_errors import (
    FabrikError,
    EmptyChainError,
    InvalidChainError,
    UnreachableTargetError,
    DegenerateSegmentError
)

__all__ = [
    'FabrikSolver',
    'relax',
    'FabrikInitialization',
    'initialize_pose',
    'FabrikIteration',
    'PassDirection',
    'derive_angles',
    'forward_kinematics',
    'angle_deltas',
    'wrap_angle',
    'is_reachable',
    'check_reachable',
    'PlanarChain',
    'calculate_joint_distances',
    'FabrikError',
    'EmptyChainError',
    'InvalidChainError',
    'UnreachableTargetError',
    'DegenerateSegmentError'
]
