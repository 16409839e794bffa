"""Text formatters for cut lists, prices, compartments and doors."""

from __future__ import annotations

from wardrobes.application.dtos import CompartmentInfo
from wardrobes.domain import CutList
from wardrobes.domain.services import DoorMetrics


class CutListFormatter:
    """Formats cut lists as a fixed-width table.

    Items are listed in emission order. With ``group_by_element`` the table
    is split into one block per owner element instead.
    """

    def __init__(self, group_by_element: bool = False) -> None:
        self._group_by_element = group_by_element

    def format(self, cut_list: CutList) -> str:
        """Format the cut list with a totals row."""
        if cut_list.is_empty:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 90,
            f"{'Code':<12} {'Element':<8} {'Width':<8} {'Height':<8} "
            f"{'Thick':<6} {'Qty':<4} {'Area (m2)':<10} {'Cost':>10}  Description",
            "-" * 90,
        ]

        if self._group_by_element:
            for element, items in cut_list.grouped.items():
                lines.append(f"[{element}]")
                lines.extend(self._row(item) for item in items)
        else:
            lines.extend(self._row(item) for item in cut_list.items)

        lines.append("-" * 90)
        lines.append(
            f"{'TOTAL':<12} {'':<8} {'':<8} {'':<8} {'':<6} {'':<4} "
            f"{cut_list.total_area:<10.3f} {cut_list.total_cost:>10.2f}"
        )
        return "\n".join(lines)

    @staticmethod
    def _row(item) -> str:
        return (
            f"{item.code:<12} {item.element:<8} {item.width_cm:<8.1f} "
            f"{item.height_cm:<8.1f} {item.thickness_mm:<6.0f} {item.quantity:<4} "
            f"{item.area_m2:<10.3f} {item.cost:>10.2f}  {item.description}"
        )


class PriceBreakdownFormatter:
    """Formats the per-category price breakdown."""

    def format(self, cut_list: CutList) -> str:
        breakdown = cut_list.price_breakdown
        lines = [
            "PRICE BREAKDOWN",
            "=" * 60,
            "",
            f"{'Category':<12} {'Area (m2)':>12} {'Price':>12}",
            f"{'Korpus':<12} {breakdown.korpus.area_m2:>12.3f} {breakdown.korpus.price:>12.0f}",
            f"{'Front':<12} {breakdown.front.area_m2:>12.3f} {breakdown.front.price:>12.0f}",
            f"{'Back':<12} {breakdown.back.area_m2:>12.3f} {breakdown.back.price:>12.0f}",
            f"{'Handles':<12} {breakdown.handles.count:>10} pc {breakdown.handles.price:>12.0f}",
            "",
            "-" * 60,
            f"Carcass price per m2: {cut_list.price_per_m2:.2f}",
            f"Total area: {cut_list.total_area:.3f} m2",
            f"Total cost: {cut_list.total_cost:.2f}",
        ]
        return "\n".join(lines)


class CompartmentFormatter:
    """Formats the compartment list of a wardrobe."""

    def format(self, compartments: list[CompartmentInfo]) -> str:
        if not compartments:
            return "No compartments."
        lines = [
            "COMPARTMENTS",
            "=" * 60,
            f"{'Key':<8} {'Height (cm)':>12} {'Clear (cm)':>12}  Module",
            "-" * 60,
        ]
        for info in compartments:
            lines.append(
                f"{info.key:<8} {info.height_cm:>12.1f} "
                f"{info.clear_height_cm:>12.1f}  {info.module}"
            )
        lines.append("-" * 60)
        lines.append(f"{len(compartments)} compartment(s)")
        return "\n".join(lines)


class DoorSummaryFormatter:
    """Formats door counts and handle selection."""

    def format(self, metrics: DoorMetrics) -> str:
        lines = [
            "DOORS",
            "=" * 60,
            f"  Double doors:       {metrics.double_door_count}",
            f"  Single doors:       {metrics.single_door_count}",
            f"  Mirror doors:       {metrics.mirror_door_count}",
            f"  Drawer-style doors: {metrics.drawer_style_door_count}",
            f"  Door height range:  {metrics.min_door_height_cm:.1f} - "
            f"{metrics.max_door_height_cm:.1f} cm",
            f"  Handles:            {metrics.handle_count}",
        ]
        if metrics.handle_name:
            finish = f" ({metrics.handle_finish_name})" if metrics.handle_finish_name else ""
            lines.append(f"  Handle model:       {metrics.handle_name}{finish}")
        return "\n".join(lines)
