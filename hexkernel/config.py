"""
Numeric tuning knobs for the hex kernel.
Safe to tweak without touching the geometry code.
"""

# Points closer than this on both axes compare equal
POINT_EPSILON: float = 1e-6

# Added to both q endpoints when drawing lines so samples that fall exactly
# on a hex edge always snap to the same side
LINE_NUDGE: float = 1e-6

# Hexes have six neighbours, six vertices and six edges
DIRECTION_COUNT: int = 6
