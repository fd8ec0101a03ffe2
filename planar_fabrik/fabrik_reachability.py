#!/usr/bin/env python3
"""
FABRIK Reachability Module

A target is reachable when it lies within the arm's full extension.
Squared values are compared so no square root is taken.
"""

import math

import numpy as np

from .fabrik_errors import UnreachableTargetError
from .fabrik_vector import magnitude_sq


def is_reachable(lengths, target: np.ndarray) -> bool:
    """True when sum(lengths)^2 >= |target|^2 (full extension counts)."""
    total = float(np.sum(lengths))
    return total * total >= magnitude_sq(target)


def check_reachable(lengths, target: np.ndarray):
    """
    Raises:
        UnreachableTargetError: If the target is beyond full extension
    """
    if not is_reachable(lengths, target):
        raise UnreachableTargetError(
            total_length=float(np.sum(lengths)),
            distance=math.sqrt(magnitude_sq(target))
        )
