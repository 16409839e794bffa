"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Reconciliation advisories are displayed as warnings
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from wardrobes.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_minimal_config(self, runner: CliRunner) -> None:
        """Valid minimal config should pass with exit code 0."""
        config_path = FIXTURES_PATH / "valid_minimal.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output
        assert "Wardrobe: 100 x 180 x 60 cm, 1 column(s), 1 compartment(s)" in result.output

    def test_valid_full_config(self, runner: CliRunner) -> None:
        """Valid full config should pass with exit code 0."""
        config_path = FIXTURES_PATH / "valid_full.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0

    def test_config_with_warnings(self, runner: CliRunner) -> None:
        """Stale per-compartment data should exit with code 2."""
        config_path = FIXTURES_PATH / "valid_with_warnings.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Compartment C1 does not exist" in result.output
        assert "Suggestion: Reduce the drawer count" in result.output
        assert "Validation passed with 3 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        config_path = FIXTURES_PATH / "nonexistent.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1."""
        config_path = FIXTURES_PATH / "invalid_json.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 6" in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        """Unknown fields should fail with exit code 1."""
        config_path = FIXTURES_PATH / "unknown_field.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "wardrobe.colour" in result.output
        assert "Validation failed." in result.output

    def test_seam_outside_width(self, runner: CliRunner) -> None:
        """Geometry that cannot be built should fail with exit code 1."""
        config_path = FIXTURES_PATH / "seam_outside_width.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "wardrobe.vertical_boundaries[0]" in result.output
        assert "Value: 0.75" in result.output
        assert "Wardrobe:" not in result.output
