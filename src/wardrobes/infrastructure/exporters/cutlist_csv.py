"""CSV export of cut-list items, one row per item."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from wardrobes.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from wardrobes.application.dtos import CutListOutput

logger = logging.getLogger(__name__)

CSV_COLUMNS: tuple[str, ...] = (
    "code",
    "description",
    "width_cm",
    "height_cm",
    "thickness_mm",
    "area_m2",
    "cost",
    "element",
    "material_type",
    "quantity",
)


@ExporterRegistry.register("csv")  # type: ignore[arg-type]
class CsvCutListExporter:
    """Exports cut-list items as CSV.

    Lengths are rounded to 0.1, areas to 0.0001 and costs to 0.01.

    Attributes:
        format_name: "csv"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export(self, output: CutListOutput, path: Path) -> None:
        path.write_text(self.export_string(output))
        logger.info(f"Exported cut list CSV to {path}")

    def export_string(self, output: CutListOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_COLUMNS)
        for item in output.cut_list.items:
            writer.writerow(
                [
                    item.code,
                    item.description,
                    f"{item.width_cm:.1f}",
                    f"{item.height_cm:.1f}",
                    f"{item.thickness_mm:.0f}",
                    f"{item.area_m2:.4f}",
                    f"{item.cost:.2f}",
                    item.element,
                    item.material_type.value,
                    item.quantity,
                ]
            )
        return buffer.getvalue()
