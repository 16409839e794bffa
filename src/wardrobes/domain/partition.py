"""Partition builder: split the width and height axes into blocks.

Widths are split into column blocks in the centre-origin frame. Heights are
split into at most two modules: columns taller than the split threshold get
a bottom module of the target height and a top module with the remainder.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .constants import MAX_SEGMENT_X, MIN_TOP_MODULE_M, SPLIT_THRESHOLD_M
from .value_objects import FloorY, LinearBlock, Module, ModuleLabel

logger = logging.getLogger(__name__)

__all__ = [
    "auto_block_count",
    "build_blocks_x",
    "build_modules_y",
    "default_boundaries_x",
    "default_module_boundary",
]


def auto_block_count(total_width: float, max_segment: float = MAX_SEGMENT_X) -> int:
    """Number of equal blocks needed so none exceeds ``max_segment``."""
    return max(1, math.ceil(total_width / max_segment))


def build_blocks_x(
    total_width: float,
    boundaries: Sequence[float] | None = None,
    max_segment: float = MAX_SEGMENT_X,
) -> list[LinearBlock]:
    """Split the width axis into contiguous column blocks.

    Args:
        total_width: Outer width in meters.
        boundaries: Seam X positions in meters from the centre. When empty or
            None, the width is auto-segmented into equal blocks.
        max_segment: Maximum block width for auto-segmentation.

    Returns:
        Column blocks from left to right covering [-w/2, w/2] exactly.
    """
    half = total_width / 2
    if boundaries:
        edges = [-half, *sorted(boundaries), half]
        blocks = [LinearBlock.between(a, b) for a, b in zip(edges, edges[1:])]
    else:
        count = auto_block_count(total_width, max_segment)
        segment = total_width / count
        blocks = []
        for i in range(count):
            start = -half + i * segment
            # Last edge pinned to the outer edge so coverage is exact
            end = half if i == count - 1 else start + segment
            blocks.append(LinearBlock.between(start, end))
    logger.debug(f"Built {len(blocks)} column block(s) for width {total_width:.3f}m")
    return blocks


def default_boundaries_x(
    total_width: float, max_segment: float = MAX_SEGMENT_X
) -> list[float]:
    """Interior seam positions of the auto-segmented layout (outer edges excluded)."""
    count = auto_block_count(total_width, max_segment)
    segment = total_width / count
    return [-total_width / 2 + (i + 1) * segment for i in range(count - 1)]


def default_module_boundary(
    total_height: float, split_threshold: float = SPLIT_THRESHOLD_M
) -> FloorY:
    """Floor-origin height of the automatic bottom/top split.

    The bottom module shrinks rather than leave a top module shorter than
    the minimum.
    """
    if total_height - split_threshold < MIN_TOP_MODULE_M:
        return FloorY(total_height - MIN_TOP_MODULE_M)
    return FloorY(split_threshold)


def build_modules_y(
    total_height: float,
    boundary: FloorY | None = None,
    split_threshold: float = SPLIT_THRESHOLD_M,
) -> list[Module]:
    """Split a column height into one or two modules.

    Args:
        total_height: Column height in meters.
        boundary: Optional stored split position. It is clamped so both
            modules keep at least the minimum top-module height.
        split_threshold: Heights above this are split.

    Returns:
        A single SingleModule, or BottomModule followed by TopModule, in the
        centre-origin frame.
    """
    half = total_height / 2
    if total_height <= split_threshold:
        return [Module(-half, half, total_height, ModuleLabel.SINGLE)]

    if boundary is not None and math.isfinite(boundary.value):
        bottom_height = min(
            max(boundary.value, MIN_TOP_MODULE_M), total_height - MIN_TOP_MODULE_M
        )
    else:
        bottom_height = default_module_boundary(total_height, split_threshold).value

    split = FloorY(bottom_height).to_centered(total_height).value
    return [
        Module(-half, split, bottom_height, ModuleLabel.BOTTOM),
        Module(split, half, half - split, ModuleLabel.TOP),
    ]
