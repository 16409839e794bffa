"""Cut-list value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MaterialCategory(str, Enum):
    """Pricing category a cut-list item is charged against."""

    KORPUS = "korpus"
    FRONT = "front"
    BACK = "back"
    HANDLES = "handles"


@dataclass(frozen=True)
class CutListItem:
    """One physical panel (or a handle line) in the cut list.

    Attributes:
        code: Panel code, e.g. "SL", "A-P1", "A1-VL".
        description: Human-readable panel description.
        width_cm: Cut width in centimeters.
        height_cm: Cut height in centimeters.
        thickness_mm: Board thickness in millimeters.
        area_m2: Panel area in square meters (0 for handle lines).
        cost: Priced cost of the item.
        element: Owner label used for grouping (column letter, compartment key or "KORPUS").
        material_type: Pricing category.
        quantity: Piece count; only handle lines carry more than one.
    """

    code: str
    description: str
    width_cm: float
    height_cm: float
    thickness_mm: float
    area_m2: float
    cost: float
    element: str
    material_type: MaterialCategory
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.width_cm < 0 or self.height_cm < 0:
            raise ValueError("Cut-list item dimensions must be non-negative")
        if self.quantity < 1:
            raise ValueError("Cut-list item quantity must be at least 1")


@dataclass(frozen=True)
class CategoryTotal:
    """Area and rounded price for one material category."""

    area_m2: float = 0.0
    price: float = 0.0


@dataclass(frozen=True)
class HandleTotal:
    """Handle count and rounded price."""

    count: int = 0
    price: float = 0.0


@dataclass(frozen=True)
class PriceBreakdown:
    """Per-category price summary of a cut list."""

    korpus: CategoryTotal = field(default_factory=CategoryTotal)
    front: CategoryTotal = field(default_factory=CategoryTotal)
    back: CategoryTotal = field(default_factory=CategoryTotal)
    handles: HandleTotal = field(default_factory=HandleTotal)

    @property
    def total_price(self) -> float:
        return self.korpus.price + self.front.price + self.back.price + self.handles.price


@dataclass(frozen=True)
class CutList:
    """Complete priced cut list.

    An empty cut list (no items, zero totals) means the wardrobe cannot be
    priced yet, which is different from one that prices at zero.

    Attributes:
        items: Panels and handle lines in emission order.
        total_area: Sum of panel areas in square meters.
        total_cost: Material cost plus handle cost.
        price_per_m2: Unit price of the carcass material.
        price_breakdown: Per-category areas and prices.
    """

    items: tuple[CutListItem, ...] = ()
    total_area: float = 0.0
    total_cost: float = 0.0
    price_per_m2: float = 0.0
    price_breakdown: PriceBreakdown = field(default_factory=PriceBreakdown)

    @classmethod
    def empty(cls) -> CutList:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def grouped(self) -> dict[str, list[CutListItem]]:
        """Items grouped by owner element, in first-seen order."""
        groups: dict[str, list[CutListItem]] = {}
        for item in self.items:
            groups.setdefault(item.element, []).append(item)
        return groups

    def by_category(self, category: MaterialCategory) -> list[CutListItem]:
        return [item for item in self.items if item.material_type == category]
