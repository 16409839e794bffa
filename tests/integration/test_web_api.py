"""Integration tests for the REST API."""

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from wardrobes.web.app import create_app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def fixture_config(name: str) -> dict[str, Any]:
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestCutListEndpoint:
    """Tests for POST /api/v1/cutlist."""

    def test_generate(self, client: TestClient) -> None:
        """The response follows the camelCase cut-list contract."""
        response = client.post(
            "/api/v1/cutlist", json={"config": fixture_config("valid_full.json")}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["items"][0]["code"] == "SL"
        assert data["items"][0]["widthCm"] == pytest.approx(59.7)
        assert "KORPUS" in data["groupedByElement"]
        assert data["priceBreakdown"]["handles"]["count"] == 3
        assert data["doorMetrics"]["doubleDoorCount"] == 1
        assert data["doorMetrics"]["handleName"] == "Bar handle"

    def test_catalog_override(self, client: TestClient) -> None:
        """A request catalog replaces the embedded one."""
        response = client.post(
            "/api/v1/cutlist",
            json={
                "config": fixture_config("valid_minimal.json"),
                "catalog": fixture_config("catalog.json"),
            },
        )

        assert response.status_code == 200
        assert response.json()["pricePerM2"] == 30.0

    def test_unpriceable(self, client: TestClient) -> None:
        """An empty catalog is a generation error."""
        config = fixture_config("valid_minimal.json")
        del config["catalog"]
        response = client.post("/api/v1/cutlist", json={"config": config})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "generation"
        assert body["details"] == [{"message": "Material catalog is empty"}]

    def test_invalid_config(self, client: TestClient) -> None:
        """Schema errors surface as configuration errors."""
        response = client.post(
            "/api/v1/cutlist", json={"config": fixture_config("unknown_field.json")}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "wardrobe.colour"


class TestCompartmentsEndpoint:
    """Tests for POST /api/v1/compartments."""

    def test_list(self, client: TestClient) -> None:
        """Compartments are keyed by compartment key in enumeration order."""
        response = client.post(
            "/api/v1/compartments", json={"config": fixture_config("valid_full.json")}
        )

        assert response.status_code == 200
        compartments = response.json()["compartments"]
        assert list(compartments) == ["A1", "A2", "A3", "B1", "B2"]
        assert compartments["A3"]["module"] == "TopModule"
        assert compartments["A2"]["heightCm"] == pytest.approx(98.2)


class TestReconcileEndpoint:
    """Tests for POST /api/v1/reconcile."""

    def test_reconcile(self, client: TestClient) -> None:
        """Stale data is reported and removed."""
        response = client.post(
            "/api/v1/reconcile",
            json={"config": fixture_config("valid_with_warnings.json")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["changed"] is True
        assert data["report"]["droppedElementConfigs"] == ["C1"]
        assert data["report"]["droppedDoorGroups"] == ["stale"]
        assert data["report"]["clampedDrawers"] == ["A1"]
        assert data["config"]["wardrobe"]["door_groups"] == []


class TestEditEndpoint:
    """Tests for POST /api/v1/edit."""

    def test_widen(self, client: TestClient) -> None:
        """Widening re-seams the wardrobe and lists the new compartments."""
        response = client.post(
            "/api/v1/edit",
            json={
                "config": fixture_config("valid_minimal.json"),
                "operations": [
                    {"op": "set_width", "width": 300},
                    {"op": "add_shelf", "column": 1, "y": 1.0},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["config"]["wardrobe"]["vertical_boundaries"] == pytest.approx(
            [-0.5, 0.5]
        )
        assert list(data["compartments"]) == ["A1", "B1", "B2", "C1"]

    def test_set_shelf_count(self, client: TestClient) -> None:
        """A shelf count spreads shelves evenly and splits the column."""
        response = client.post(
            "/api/v1/edit",
            json={
                "config": fixture_config("valid_minimal.json"),
                "operations": [{"op": "set_shelf_count", "column": 0, "count": 2}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert list(data["compartments"]) == ["A1", "A2", "A3"]
        assert len(data["config"]["wardrobe"]["column_shelves"]["0"]) == 2

    def test_missing_field(self, client: TestClient) -> None:
        """An operation without its required field is a 400."""
        response = client.post(
            "/api/v1/edit",
            json={
                "config": fixture_config("valid_minimal.json"),
                "operations": [{"op": "set_height"}],
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "structural_edit"
        assert body["details"] == [{"operation": "set_height"}]

    def test_column_out_of_range(self, client: TestClient) -> None:
        """Edits of unknown columns are a 400."""
        response = client.post(
            "/api/v1/edit",
            json={
                "config": fixture_config("valid_minimal.json"),
                "operations": [{"op": "remove_shelf", "column": 4, "index": 0}],
            },
        )

        assert response.status_code == 400
        assert "out of range" in response.json()["error"]

    def test_empty_operations(self, client: TestClient) -> None:
        """At least one operation is required."""
        response = client.post(
            "/api/v1/edit",
            json={"config": fixture_config("valid_minimal.json"), "operations": []},
        )
        assert response.status_code == 422


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_warnings(self, client: TestClient) -> None:
        """Advisories come back as warnings."""
        response = client.post(
            "/api/v1/validate",
            json={"config": fixture_config("valid_with_warnings.json")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert len(data["warnings"]) == 3

    def test_errors(self, client: TestClient) -> None:
        """Blocking errors mark the configuration invalid."""
        response = client.post(
            "/api/v1/validate",
            json={"config": fixture_config("seam_outside_width.json")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "wardrobe.vertical_boundaries[0]"
