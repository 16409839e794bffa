"""Shared constants and helpers for wardrobe configuration schemas."""

import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from wardrobes.domain.value_objects import DOOR_OPTIONS

# Supported schema versions for configuration files
# Version 1.0: Initial schema with wardrobe structure, catalog and output
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

COMPARTMENT_KEY_PATTERN = re.compile(r"^[A-Z]+[1-9]\d*$")
COMPARTMENT_REF_PATTERN = re.compile(r"^[A-Z]+[1-9]\d*(\.\d+\.\d+)?$")


class CamelModel(BaseModel):
    """Base for per-compartment objects that accept camelCase keys as well."""

    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )


def check_compartment_key(key: str) -> str:
    """Validate a compartment key such as ``"A1"``."""
    if not COMPARTMENT_KEY_PATTERN.match(key):
        raise ValueError(f"Invalid compartment key '{key}' (expected e.g. 'A1')")
    return key


def check_compartment_ref(key: str) -> str:
    """Validate a compartment or sub-compartment key such as ``"A1.0.2"``."""
    if not COMPARTMENT_REF_PATTERN.match(key):
        raise ValueError(
            f"Invalid compartment reference '{key}' (expected e.g. 'A1' or 'A1.0.2')"
        )
    return key


def check_door_option(option: str) -> str:
    if option not in DOOR_OPTIONS:
        raise ValueError(
            f"Unknown door option '{option}'. Valid options: {', '.join(DOOR_OPTIONS)}"
        )
    return option
