"""JSON export of the cut-list contract.

Keys are camelCase so the document matches what front-end consumers of the
cut list already read.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from wardrobes.domain import CutList, CutListItem
from wardrobes.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from wardrobes.application.dtos import CutListOutput

logger = logging.getLogger(__name__)


def item_to_dict(item: CutListItem) -> dict[str, Any]:
    return {
        "code": item.code,
        "description": item.description,
        "widthCm": item.width_cm,
        "heightCm": item.height_cm,
        "thicknessMm": item.thickness_mm,
        "areaM2": item.area_m2,
        "cost": item.cost,
        "element": item.element,
        "materialType": item.material_type.value,
        "quantity": item.quantity,
    }


def cut_list_to_dict(cut_list: CutList) -> dict[str, Any]:
    """Convert a cut list to its outbound dictionary form."""
    breakdown = cut_list.price_breakdown
    return {
        "items": [item_to_dict(item) for item in cut_list.items],
        "groupedByElement": {
            element: [item_to_dict(item) for item in items]
            for element, items in cut_list.grouped.items()
        },
        "totalArea": cut_list.total_area,
        "totalCost": cut_list.total_cost,
        "pricePerM2": cut_list.price_per_m2,
        "priceBreakdown": {
            "korpus": {
                "areaM2": breakdown.korpus.area_m2,
                "price": breakdown.korpus.price,
            },
            "front": {
                "areaM2": breakdown.front.area_m2,
                "price": breakdown.front.price,
            },
            "back": {
                "areaM2": breakdown.back.area_m2,
                "price": breakdown.back.price,
            },
            "handles": {
                "count": breakdown.handles.count,
                "price": breakdown.handles.price,
            },
        },
    }


@ExporterRegistry.register("json")  # type: ignore[arg-type]
class JsonCutListExporter:
    """Exports the cut list as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: CutListOutput, path: Path) -> None:
        path.write_text(self.export_string(output))
        logger.info(f"Exported cut list JSON to {path}")

    def export_string(self, output: CutListOutput) -> str:
        data = cut_list_to_dict(output.cut_list)
        if not output.is_valid:
            data["errors"] = list(output.errors)
        return json.dumps(data, indent=self.indent)
