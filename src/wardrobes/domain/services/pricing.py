"""Material selection and cut-list aggregation."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from ..constants import DEFAULT_BACK_THICKNESS_MM
from ..entities import Material, MaterialCatalog, Wardrobe
from ..value_objects import (
    CategoryTotal,
    CutList,
    CutListItem,
    HandleTotal,
    MaterialCategory,
    PriceBreakdown,
)

__all__ = ["MaterialSelection", "round_price", "select_materials", "summarize"]


def round_price(value: float) -> float:
    """Round half up to whole currency units."""
    return float(math.floor(value + 0.5))


@dataclass(frozen=True)
class MaterialSelection:
    """Materials a wardrobe is priced against.

    Attributes:
        carcass: Carcass (korpus) material.
        front: Global front material; the carcass material when unresolved.
        back: Back material, None when nothing matched (priced at 0).
        catalog: Catalog used for per-door overrides.
    """

    carcass: Material
    front: Material
    back: Material | None
    catalog: MaterialCatalog

    @property
    def back_price(self) -> float:
        return self.back.price if self.back is not None else 0.0

    @property
    def back_thickness_mm(self) -> float:
        if self.back is None or self.back.thickness_mm <= 0:
            return DEFAULT_BACK_THICKNESS_MM
        return self.back.thickness_mm

    def door_front(self, material_id: str | None, per_door: bool) -> Material:
        """Front material for a door, honoring per-door overrides."""
        if per_door and material_id is not None:
            override = self.catalog.get(material_id)
            if override is not None:
                return override
        return self.front


def select_materials(
    wardrobe: Wardrobe, catalog: MaterialCatalog
) -> MaterialSelection | None:
    """Resolve the wardrobe's material selections, None if the carcass is unknown."""
    carcass = catalog.get(wardrobe.material_id)
    if carcass is None:
        return None
    return MaterialSelection(
        carcass=carcass,
        front=catalog.get(wardrobe.front_material_id) or carcass,
        back=catalog.find_back(wardrobe.back_material_id),
        catalog=catalog,
    )


def summarize(items: Iterable[CutListItem], price_per_m2: float) -> CutList:
    """Aggregate items into a priced cut list with a per-category breakdown."""
    items = tuple(items)
    areas = {category: 0.0 for category in MaterialCategory}
    costs = {category: 0.0 for category in MaterialCategory}
    handle_count = 0
    for item in items:
        areas[item.material_type] += item.area_m2
        costs[item.material_type] += item.cost
        if item.material_type is MaterialCategory.HANDLES:
            handle_count += item.quantity

    handle_cost = costs[MaterialCategory.HANDLES]
    material_cost = sum(
        cost for category, cost in costs.items() if category is not MaterialCategory.HANDLES
    )

    def category_total(category: MaterialCategory) -> CategoryTotal:
        return CategoryTotal(area_m2=areas[category], price=round_price(costs[category]))

    return CutList(
        items=items,
        total_area=sum(item.area_m2 for item in items),
        total_cost=material_cost + handle_cost,
        price_per_m2=price_per_m2,
        price_breakdown=PriceBreakdown(
            korpus=category_total(MaterialCategory.KORPUS),
            front=category_total(MaterialCategory.FRONT),
            back=category_total(MaterialCategory.BACK),
            handles=HandleTotal(count=handle_count, price=round_price(handle_cost)),
        ),
    )
