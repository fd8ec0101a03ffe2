#!/usr/bin/env python3
"""
FABRIK Errors Module

Exceptions raised by the planar FABRIK solver. Every validation error is
raised before any joint position exists, so callers never see a partially
solved chain.
"""


class FabrikError(Exception):
    """Base class for all solver errors."""


class EmptyChainError(FabrikError):
    """Raised when a chain has zero segments."""

    def __init__(self, message: str = 'An arm needs at least 1 segment'):
        super().__init__(message)


class InvalidChainError(FabrikError, ValueError):
    """Raised for malformed inputs: bad lengths, angle count mismatch, bad target."""


class UnreachableTargetError(FabrikError):
    """Raised when the target lies beyond the arm's full extension."""

    def __init__(self, total_length: float, distance: float):
        self.total_length = total_length
        self.distance = distance
        super().__init__(
            f'Target at distance {distance:.6g} is beyond total arm length {total_length:.6g}'
        )


class DegenerateSegmentError(FabrikError):
    """
    Raised when a segment direction is undefined.

    Happens when two consecutive joints coincide during a pass and the
    solver runs with the 'raise' policy, or when a zero vector is
    normalized.
    """

    def __init__(self, message: str, index: int = None):
        self.index = index
        super().__init__(message)
