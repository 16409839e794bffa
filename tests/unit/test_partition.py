"""Unit tests for the partition builder.

These tests verify:
- Auto-segmentation of the width axis into equal blocks
- Explicit seams producing exact coverage
- Module splitting above the threshold and boundary clamping
"""

import pytest

from wardrobes.domain.partition import (
    auto_block_count,
    build_blocks_x,
    build_modules_y,
    default_boundaries_x,
    default_module_boundary,
)
from wardrobes.domain.value_objects import FloorY, ModuleLabel


class TestBuildBlocksX:
    """Tests for width partitioning."""

    def test_auto_segments_300cm_into_three_columns(self) -> None:
        """ceil(3.0 / 1.2) = 3 equal columns."""
        blocks = build_blocks_x(3.0)
        assert len(blocks) == 3
        assert all(block.width == pytest.approx(1.0) for block in blocks)

    def test_narrow_width_is_one_block(self) -> None:
        """A width under the maximum segment stays a single column."""
        blocks = build_blocks_x(1.0)
        assert len(blocks) == 1
        assert blocks[0].start == pytest.approx(-0.5)
        assert blocks[0].end == pytest.approx(0.5)

    def test_exactly_max_segment_is_one_block(self) -> None:
        """The maximum segment itself needs no seam."""
        assert auto_block_count(1.2) == 1

    def test_explicit_seams_cover_width_exactly(self) -> None:
        """Blocks tile [-w/2, w/2] without gaps."""
        blocks = build_blocks_x(2.1, [0.3, -0.2])
        assert [b.start for b in blocks] == pytest.approx([-1.05, -0.2, 0.3])
        assert [b.end for b in blocks] == pytest.approx([-0.2, 0.3, 1.05])
        assert sum(b.width for b in blocks) == pytest.approx(2.1)

    def test_empty_seams_fall_back_to_auto(self) -> None:
        """An empty seam list behaves like no seams."""
        assert len(build_blocks_x(3.0, [])) == 3

    def test_default_boundaries_exclude_outer_edges(self) -> None:
        """Interior seams only."""
        assert default_boundaries_x(3.0) == pytest.approx([-0.5, 0.5])
        assert default_boundaries_x(1.0) == []


class TestBuildModulesY:
    """Tests for height partitioning."""

    def test_at_threshold_is_single_module(self) -> None:
        """A column of exactly 2.0 m is not split."""
        modules = build_modules_y(2.0)
        assert len(modules) == 1
        assert modules[0].label is ModuleLabel.SINGLE
        assert modules[0].y_start == pytest.approx(-1.0)
        assert modules[0].y_end == pytest.approx(1.0)

    def test_above_threshold_splits_at_default(self) -> None:
        """A 2.4 m column splits into 2.0 m + 0.4 m."""
        bottom, top = build_modules_y(2.4)
        assert bottom.label is ModuleLabel.BOTTOM
        assert top.label is ModuleLabel.TOP
        assert bottom.height == pytest.approx(2.0)
        assert top.height == pytest.approx(0.4)
        assert bottom.y_end == pytest.approx(top.y_start)
        assert bottom.y_end == pytest.approx(0.8)

    def test_default_shrinks_bottom_for_minimum_top(self) -> None:
        """The top module is never shorter than 0.10 m."""
        assert default_module_boundary(2.05).value == pytest.approx(1.95)
        assert default_module_boundary(2.4).value == pytest.approx(2.0)

    def test_stored_boundary_is_clamped(self) -> None:
        """A stored boundary too close to the top leaves the minimum top module."""
        bottom, top = build_modules_y(2.4, FloorY(2.35))
        assert bottom.height == pytest.approx(2.3)
        assert top.height == pytest.approx(0.1)

    def test_non_finite_boundary_uses_default(self) -> None:
        """NaN boundaries fall back to the default split."""
        bottom, _ = build_modules_y(2.4, FloorY(float("nan")))
        assert bottom.height == pytest.approx(2.0)
