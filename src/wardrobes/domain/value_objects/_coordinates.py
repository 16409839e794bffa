"""Vertical coordinate types.

Stored shelf and module-boundary positions are measured from the floor.
Panel placement measures from the wardrobe's geometric centre. The two are
kept as distinct types so a value can never be used in the wrong frame.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class FloorY:
    """Height above the floor, in meters."""

    value: float

    def to_centered(self, total_height: float) -> CenteredY:
        """Convert to the centre-origin frame of a wardrobe of the given height."""
        return CenteredY(self.value - total_height / 2)

    def offset(self, delta: float) -> FloorY:
        return FloorY(self.value + delta)

    def scaled(self, factor: float) -> FloorY:
        return FloorY(self.value * factor)


@dataclass(frozen=True, order=True)
class CenteredY:
    """Height relative to the wardrobe's geometric centre, in meters."""

    value: float

    def to_floor(self, total_height: float) -> FloorY:
        """Convert to the floor-origin frame of a wardrobe of the given height."""
        return FloorY(self.value + total_height / 2)
