"""Configuration schema and loading system for wardrobe configuration files.

This package provides JSON-based configuration loading and validation. It
includes Pydantic models for schema validation, a loader with comprehensive
error handling, an adapter to domain objects and advisory checks.

Public API:
    - WardrobeConfiguration: Root configuration model
    - WardrobeConfig: Wardrobe structure and per-compartment configuration
    - CatalogConfig: Material and handle catalog
    - OutputConfig: Output format configuration
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - load_catalog: Load a standalone catalog JSON file
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation
    - config_to_wardrobe: Convert configuration to a domain Wardrobe
    - config_to_catalogs: Convert a catalog to domain catalogs

Example:
    >>> from pathlib import Path
    >>> from wardrobes.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-wardrobe.json"))
    ...     print(f"Wardrobe: {config.wardrobe.width}x{config.wardrobe.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wardrobes.application.config.adapter import (
    config_to_catalogs,
    config_to_configuration,
    config_to_geometry,
    config_to_wardrobe,
    configuration_to_dict,
    wardrobe_to_dict,
    wardrobe_to_document,
)
from wardrobes.application.config.loader import (
    ConfigError,
    load_catalog,
    load_catalog_from_dict,
    load_config,
    load_config_from_dict,
)
from wardrobes.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CatalogConfig,
    CompartmentExtrasSchema,
    DoorGroupSchema,
    ElementConfigSchema,
    HandleFinishSchema,
    HandleSchema,
    MaterialSchema,
    OutputConfig,
    WardrobeConfig,
    WardrobeConfiguration,
)
from wardrobes.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CatalogConfig",
    "CompartmentExtrasSchema",
    "ConfigError",
    "DoorGroupSchema",
    "ElementConfigSchema",
    "HandleFinishSchema",
    "HandleSchema",
    "MaterialSchema",
    "OutputConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WardrobeConfig",
    "WardrobeConfiguration",
    "config_to_catalogs",
    "config_to_configuration",
    "config_to_geometry",
    "config_to_wardrobe",
    "configuration_to_dict",
    "load_catalog",
    "load_catalog_from_dict",
    "load_config",
    "load_config_from_dict",
    "validate_config",
    "wardrobe_to_dict",
    "wardrobe_to_document",
]
