"""Infrastructure layer - formatters and exporters."""

from wardrobes.infrastructure.exporters import (
    CsvCutListExporter,
    ExporterRegistry,
    JsonCutListExporter,
    cut_list_to_dict,
)
from wardrobes.infrastructure.formatters import (
    CompartmentFormatter,
    CutListFormatter,
    DoorSummaryFormatter,
    PriceBreakdownFormatter,
)

__all__ = [
    "CompartmentFormatter",
    "CsvCutListExporter",
    "CutListFormatter",
    "DoorSummaryFormatter",
    "ExporterRegistry",
    "JsonCutListExporter",
    "PriceBreakdownFormatter",
    "cut_list_to_dict",
]
