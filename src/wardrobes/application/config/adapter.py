"""Adapter between the configuration schema and domain objects.

Compartment keys exist as strings only in configuration files. This module
parses them into typed ids on the way in and formats them back on the way
out, so the domain never sees a string key.
"""

from typing import Any

from wardrobes.application.config.schemas import (
    CatalogConfig,
    CompartmentExtrasSchema,
    DoorGroupSchema,
    ElementConfigSchema,
    WardrobeConfig,
    WardrobeConfiguration,
)
from wardrobes.domain.entities import (
    CompartmentConfiguration,
    CompartmentExtras,
    CompartmentRef,
    DoorGroup,
    ElementConfig,
    Handle,
    HandleCatalog,
    HandleFinish,
    Material,
    MaterialCatalog,
    Wardrobe,
    WardrobeGeometry,
)
from wardrobes.domain.value_objects import (
    CompartmentId,
    FloorY,
    door_option,
    parse_compartment_ref,
    parse_door_style,
)


def _compartment_id(key: str) -> CompartmentId:
    compartment_id = CompartmentId.parse(key)
    if compartment_id is None:
        raise ValueError(f"Invalid compartment key '{key}'")
    return compartment_id


def _compartment_ref(key: str) -> CompartmentRef:
    ref = parse_compartment_ref(key)
    if ref is None:
        raise ValueError(f"Invalid compartment reference '{key}'")
    return ref


def _element_config(schema: ElementConfigSchema) -> ElementConfig:
    return ElementConfig(
        columns=schema.columns,
        row_counts=tuple(schema.row_counts or [0] * schema.columns),
        drawer_counts=(
            tuple(schema.drawer_counts) if schema.drawer_counts is not None else None
        ),
        drawers_external=(
            tuple(schema.drawers_external)
            if schema.drawers_external is not None
            else None
        ),
    )


def _extras(schema: CompartmentExtrasSchema) -> CompartmentExtras:
    return CompartmentExtras(
        vertical_divider=schema.vertical_divider,
        drawers=schema.drawers,
        drawers_count=schema.drawers_count,
        rod=schema.rod,
        led=schema.led,
    )


def _door_group(schema: DoorGroupSchema) -> DoorGroup:
    return DoorGroup(
        id=schema.id,
        style=parse_door_style(schema.type),
        compartments=(
            tuple(_compartment_ref(key) for key in schema.compartments)
            if schema.compartments is not None
            else None
        ),
        column=schema.column,
        material_id=schema.material_id,
        handle_id=schema.handle_id,
        handle_finish=schema.handle_finish,
    )


def config_to_geometry(wardrobe: WardrobeConfig) -> WardrobeGeometry:
    """Build the structural geometry from a wardrobe configuration."""
    return WardrobeGeometry(
        width_cm=wardrobe.width,
        height_cm=wardrobe.height,
        has_base=wardrobe.has_base,
        base_height_cm=wardrobe.base_height,
        vertical_boundaries=tuple(sorted(wardrobe.vertical_boundaries)),
        column_heights=dict(wardrobe.column_heights),
        column_shelves={
            column: tuple(FloorY(y) for y in ys)
            for column, ys in wardrobe.column_shelves.items()
        },
        column_module_boundaries={
            column: FloorY(y) if y is not None else None
            for column, y in wardrobe.column_module_boundaries.items()
        },
        column_top_shelves={
            column: tuple(FloorY(y) for y in ys)
            for column, ys in wardrobe.column_top_shelves.items()
        },
    )


def config_to_configuration(wardrobe: WardrobeConfig) -> CompartmentConfiguration:
    """Build the four per-compartment maps from a wardrobe configuration."""
    return CompartmentConfiguration(
        element_configs={
            _compartment_id(key): _element_config(value)
            for key, value in wardrobe.element_configs.items()
        },
        extras={
            _compartment_id(key): _extras(value)
            for key, value in wardrobe.compartment_extras.items()
        },
        door_groups=tuple(_door_group(group) for group in wardrobe.door_groups),
        door_selections={
            _compartment_ref(key): parse_door_style(option)
            for key, option in wardrobe.door_selections.items()
        },
    )


def config_to_wardrobe(config: WardrobeConfiguration | WardrobeConfig) -> Wardrobe:
    """Convert a configuration into a domain Wardrobe.

    Args:
        config: Either the root configuration or its ``wardrobe`` section.

    Returns:
        The wardrobe, with its configuration maps exactly as stored. Callers
        reconcile it before pricing.
    """
    wardrobe = config.wardrobe if isinstance(config, WardrobeConfiguration) else config
    return Wardrobe(
        geometry=config_to_geometry(wardrobe),
        depth_cm=wardrobe.depth,
        configuration=config_to_configuration(wardrobe),
        material_id=wardrobe.material_id,
        front_material_id=wardrobe.front_material_id,
        back_material_id=wardrobe.back_material_id,
        door_settings_mode=wardrobe.door_settings_mode,
        handle_id=wardrobe.handle_id,
        handle_finish=wardrobe.handle_finish,
    )


def config_to_catalogs(
    catalog: CatalogConfig | None,
) -> tuple[MaterialCatalog, HandleCatalog]:
    """Convert a catalog configuration to domain catalogs (empty when absent)."""
    if catalog is None:
        return MaterialCatalog(), HandleCatalog()
    materials = MaterialCatalog(
        tuple(
            Material(
                id=material.id,
                price=material.price,
                thickness_mm=material.thickness,
                categories=tuple(material.categories),
                name=material.name,
            )
            for material in catalog.materials
        )
    )
    handles = HandleCatalog(
        tuple(
            Handle(
                id=handle.id,
                name=handle.name,
                legacy_id=handle.legacy_id,
                finishes=tuple(
                    HandleFinish(
                        id=finish.id,
                        price=finish.price,
                        name=finish.name,
                        legacy_id=finish.legacy_id,
                    )
                    for finish in handle.finishes
                ),
            )
            for handle in catalog.handles
        )
    )
    return materials, handles


def configuration_to_dict(configuration: CompartmentConfiguration) -> dict[str, Any]:
    """Serialize the four per-compartment maps with string keys."""
    element_configs: dict[str, Any] = {}
    for key, config in configuration.element_configs.items():
        entry: dict[str, Any] = {
            "columns": config.columns,
            "row_counts": list(config.row_counts),
        }
        if config.drawer_counts is not None:
            entry["drawer_counts"] = list(config.drawer_counts)
        if config.drawers_external is not None:
            entry["drawers_external"] = list(config.drawers_external)
        element_configs[str(key)] = entry

    door_groups = []
    for group in configuration.door_groups:
        entry = {"id": group.id, "type": door_option(group.style)}
        if group.compartments is not None:
            entry["compartments"] = [str(ref) for ref in group.compartments]
        for name in ("column", "material_id", "handle_id", "handle_finish"):
            value = getattr(group, name)
            if value is not None:
                entry[name] = value
        door_groups.append(entry)

    return {
        "element_configs": element_configs,
        "compartment_extras": {
            str(key): {
                "vertical_divider": extras.vertical_divider,
                "drawers": extras.drawers,
                "drawers_count": extras.drawers_count,
                "rod": extras.rod,
                "led": extras.led,
            }
            for key, extras in configuration.extras.items()
        },
        "door_groups": door_groups,
        "door_selections": {
            str(key): door_option(style)
            for key, style in configuration.door_selections.items()
        },
    }


def wardrobe_to_dict(wardrobe: Wardrobe) -> dict[str, Any]:
    """Serialize a wardrobe back to the ``wardrobe`` section of a configuration file."""
    geometry = wardrobe.geometry
    return {
        "width": geometry.width_cm,
        "height": geometry.height_cm,
        "depth": wardrobe.depth_cm,
        "has_base": geometry.has_base,
        "base_height": geometry.base_height_cm,
        "vertical_boundaries": list(geometry.vertical_boundaries),
        "column_heights": {str(k): v for k, v in geometry.column_heights.items()},
        "column_shelves": {
            str(k): [y.value for y in ys] for k, ys in geometry.column_shelves.items()
        },
        "column_module_boundaries": {
            str(k): y.value if y is not None else None
            for k, y in geometry.column_module_boundaries.items()
        },
        "column_top_shelves": {
            str(k): [y.value for y in ys]
            for k, ys in geometry.column_top_shelves.items()
        },
        **configuration_to_dict(wardrobe.configuration),
        "material_id": wardrobe.material_id,
        "front_material_id": wardrobe.front_material_id,
        "back_material_id": wardrobe.back_material_id,
        "door_settings_mode": wardrobe.door_settings_mode,
        "handle_id": wardrobe.handle_id,
        "handle_finish": wardrobe.handle_finish,
    }


def wardrobe_to_document(
    config: WardrobeConfiguration, wardrobe: Wardrobe
) -> dict[str, Any]:
    """Rebuild a full configuration document around an updated wardrobe.

    The schema version, catalog and output settings are carried over from
    ``config``; the ``wardrobe`` section is regenerated from ``wardrobe``.
    """
    document = config.model_dump(mode="json", exclude_none=True)
    document["wardrobe"] = wardrobe_to_dict(wardrobe)
    return document
