"""Root configuration schema."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from wardrobes.application.config.schemas.base import SUPPORTED_VERSIONS
from wardrobes.application.config.schemas.catalog_schema import CatalogConfig
from wardrobes.application.config.schemas.output_schema import OutputConfig
from wardrobes.application.config.schemas.wardrobe_schema import WardrobeConfig


class WardrobeConfiguration(BaseModel):
    """Root configuration model for wardrobe configuration files.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        wardrobe: Wardrobe structure and per-compartment configuration
        catalog: Optional material and handle catalog
        output: Output format configuration

    Example:
        >>> config = WardrobeConfiguration(
        ...     schema_version="1.0",
        ...     wardrobe=WardrobeConfig(width=210.0, height=240.0, depth=60.0),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    wardrobe: WardrobeConfig
    catalog: CatalogConfig | None = Field(
        default=None, description="Material and handle catalog (optional)"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
