"""
Arm Physical Parameters
=======================
Geometry of the planar arm and its fixed base.

Segment lengths are unitless; any consistent unit works as long as the
target uses the same one.
"""

# =============================================================================
# BASE ANCHOR
# =============================================================================

BASE_ORIGIN = (0.0, 0.0)
"""Fixed base position. Segment 0 starts here and is never stored as a joint"""

REFERENCE_ANGLE = 0.0
"""Direction the absolute angle of segment 0 is measured from (+X axis)"""

# =============================================================================
# ARM TOPOLOGY
# =============================================================================

MIN_SEGMENTS = 1
"""An arm needs at least one segment"""
