"""Material and handle catalog schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from wardrobes.application.config.schemas.base import CamelModel


def _coerce_id(v: object) -> object:
    return str(v) if isinstance(v, int) and not isinstance(v, bool) else v


class MaterialSchema(BaseModel):
    """A priced board material.

    Attributes:
        id: Catalog id; numbers are accepted and stored as strings.
        name: Display name.
        price: Price per square meter.
        thickness: Board thickness in mm.
        categories: Free-form categories (e.g. "Korpus", "Leđa").
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = ""
    price: float = Field(..., ge=0)
    thickness: float = Field(default=18.0, ge=0, le=100)
    categories: list[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        return _coerce_id(v)


class HandleFinishSchema(CamelModel):
    """A priced finish of a handle model."""

    id: str = Field(..., min_length=1)
    legacy_id: str | None = None
    name: str = ""
    price: float = Field(default=0.0, ge=0)

    @field_validator("id", "legacy_id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        return _coerce_id(v)


class HandleSchema(CamelModel):
    """A handle model with its finishes."""

    id: str = Field(..., min_length=1)
    legacy_id: str | None = None
    name: str = ""
    finishes: list[HandleFinishSchema] = Field(default_factory=list)

    @field_validator("id", "legacy_id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        return _coerce_id(v)


class CatalogConfig(BaseModel):
    """Materials and handles a wardrobe is priced against."""

    model_config = ConfigDict(extra="forbid")

    materials: list[MaterialSchema] = Field(default_factory=list)
    handles: list[HandleSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_materials(self) -> "CatalogConfig":
        """Material ids must be unique."""
        ids = [material.id for material in self.materials]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate material ids: {', '.join(duplicates)}")
        return self
