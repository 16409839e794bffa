"""Linear partition value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ModuleLabel(str, Enum):
    """Vertical band a module occupies within a column."""

    SINGLE = "SingleModule"
    BOTTOM = "BottomModule"
    TOP = "TopModule"


@dataclass(frozen=True)
class LinearBlock:
    """A contiguous sub-extent of one axis, in meters.

    Attributes:
        start: Lower edge of the block.
        end: Upper edge of the block.
        width: Extent of the block (end - start).
    """

    start: float
    end: float
    width: float

    @classmethod
    def between(cls, start: float, end: float) -> LinearBlock:
        return cls(start=start, end=end, width=end - start)

    @property
    def center(self) -> float:
        return (self.start + self.end) / 2


@dataclass(frozen=True)
class Module:
    """A vertical band of the wardrobe in the centre-origin frame.

    Attributes:
        y_start: Bottom edge in meters from the wardrobe centre.
        y_end: Top edge in meters from the wardrobe centre.
        height: Band height in meters.
        label: Which band this is.
    """

    y_start: float
    y_end: float
    height: float
    label: ModuleLabel = ModuleLabel.SINGLE
