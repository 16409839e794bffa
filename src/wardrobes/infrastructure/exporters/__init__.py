"""Exporter framework for wardrobe cut lists.

Registered exporters:
- json: The full cut-list contract in camelCase
- csv: One row per cut-list item

Usage:
    from wardrobes.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("csv")()
    print(exporter.export_string(output))
"""

from wardrobes.infrastructure.exporters.base import Exporter, ExporterRegistry

# Import exporters to trigger registration
from wardrobes.infrastructure.exporters.cutlist_csv import CSV_COLUMNS, CsvCutListExporter
from wardrobes.infrastructure.exporters.cutlist_json import (
    JsonCutListExporter,
    cut_list_to_dict,
    item_to_dict,
)

__all__ = [
    "CSV_COLUMNS",
    "CsvCutListExporter",
    "Exporter",
    "ExporterRegistry",
    "JsonCutListExporter",
    "cut_list_to_dict",
    "item_to_dict",
]
