"""Physical constants for wardrobe decomposition.

Lengths are in meters unless the name says otherwise.
"""

from __future__ import annotations

# Carcass panel thickness used for all geometry, regardless of catalog thickness
PANEL_THICKNESS_M: float = 0.018

# Auto-segmentation of the width axis
MAX_SEGMENT_X: float = 1.2

# Columns taller than this are split into a bottom and a top module
SPLIT_THRESHOLD_M: float = 2.0
MIN_TOP_MODULE_M: float = 0.10

# Drawer stack geometry
DRAWER_HEIGHT_M: float = 0.10
DRAWER_GAP_M: float = 0.01
MIN_DRAWER_SLOT_CM: float = 10.0

# Fronts and backs
DOOR_CLEARANCE_M: float = 0.001
DOUBLE_DOOR_GAP_M: float = 0.003
BACK_CLEARANCE_M: float = 0.002
DOOR_THICKNESS_MM: float = 18.0
DEFAULT_BACK_THICKNESS_MM: float = 5.0

# Structural edits keep at least this much clear space between shelf surfaces
MIN_SHELF_GAP_M: float = 0.10

# Upper bound on shelves in one module of a column
MAX_SHELVES_PER_COLUMN: int = 10

# Float tolerance for geometric comparisons
EPSILON: float = 1e-9
MIN_BOUNDARY_ABOVE_SHELF_M: float = 0.05
MIN_BASE_HEIGHT_CM: float = 3.0
