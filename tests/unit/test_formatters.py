"""Unit tests for text formatters."""

import pytest

from wardrobes.application import GenerateCutListCommand
from wardrobes.application.dtos import CompartmentInfo
from wardrobes.domain import CutList
from wardrobes.domain.services import DoorMetrics
from wardrobes.infrastructure import (
    CompartmentFormatter,
    CutListFormatter,
    DoorSummaryFormatter,
    PriceBreakdownFormatter,
)


@pytest.fixture
def cut_list(single_column_wardrobe, materials) -> CutList:
    return GenerateCutListCommand().execute(single_column_wardrobe, materials).cut_list


class TestCutListFormatter:
    """Tests for CutListFormatter."""

    def test_empty(self) -> None:
        """An empty cut list has a placeholder line."""
        assert CutListFormatter().format(CutList.empty()) == "No pieces in cut list."

    def test_rows_in_emission_order(self, cut_list) -> None:
        """One row per item between the header and the totals."""
        lines = CutListFormatter().format(cut_list).splitlines()

        codes = [line.split()[0] for line in lines[4:9]]
        assert codes == ["SL", "SD", "A-DON", "A-GOR", "A1-Z"]
        assert lines[-1].startswith("TOTAL")
        assert "41.97" in lines[-1]

    def test_grouped(self, cut_list) -> None:
        """Grouping adds a header per owner element."""
        output = CutListFormatter(group_by_element=True).format(cut_list)

        assert "[KORPUS]" in output
        assert output.index("[A]") < output.index("[A1]")


class TestPriceBreakdownFormatter:
    """Tests for PriceBreakdownFormatter."""

    def test_categories_and_totals(self, cut_list) -> None:
        """Every category is listed with its rounded price."""
        output = PriceBreakdownFormatter().format(cut_list)

        assert "Korpus" in output
        assert "Handles" in output
        assert "Carcass price per m2: 10.00" in output
        assert "Total cost: 41.97" in output


class TestCompartmentFormatter:
    """Tests for CompartmentFormatter."""

    def test_empty(self) -> None:
        assert CompartmentFormatter().format([]) == "No compartments."

    def test_lists_compartments(self) -> None:
        """Each compartment is one row, followed by a count."""
        output = CompartmentFormatter().format(
            [
                CompartmentInfo("A1", 98.2, 97.3, "BottomModule"),
                CompartmentInfo("A2", 40.0, 39.1, "TopModule"),
            ]
        )

        assert "A1" in output
        assert "TopModule" in output
        assert output.endswith("2 compartment(s)")


class TestDoorSummaryFormatter:
    """Tests for DoorSummaryFormatter."""

    def test_with_handle(self) -> None:
        """The handle model line includes its finish."""
        output = DoorSummaryFormatter().format(
            DoorMetrics(
                double_door_count=1,
                max_door_height_cm=176.3,
                min_door_height_cm=87.2,
                handle_count=2,
                handle_name="Bar handle",
                handle_finish_name="Chrome",
            )
        )

        assert "Double doors:       1" in output
        assert "87.2 - 176.3 cm" in output
        assert "Bar handle (Chrome)" in output

    def test_without_handle(self) -> None:
        """No handle selection, no handle model line."""
        output = DoorSummaryFormatter().format(DoorMetrics())
        assert "Handle model" not in output
