"""
Motion Solving Parameters
=========================
Parameters for pose initialization and the FABRIK relaxation loop.
"""

# =============================================================================
# FABRIK IK SOLVER
# =============================================================================

FABRIK_PRECISION = 1e-6
"""Stop once the worst segment length error of a pass drops below this"""

FABRIK_MAX_ITERATIONS = 1000
"""Maximum relaxation passes before giving up (one pass = one sweep)"""

FABRIK_DEGENERATE_EPSILON = 1e-12
"""Distance below which two joints are treated as coincident"""

FABRIK_DEGENERATE_POLICY = 'nudge'
"""What to do with coincident joints: 'nudge' (reuse previous direction) or 'raise'"""

FABRIK_DEGENERATE_POLICIES = ('nudge', 'raise')
"""Accepted values for FABRIK_DEGENERATE_POLICY"""

# =============================================================================
# POSE INITIALIZATION
# =============================================================================

FABRIK_INIT_NOISE = 1e-4
"""Half-width of the uniform noise added to initial joints to break collinearity"""
