"""Configuration schema models for wardrobe configuration files.

The schemas are organized into the following modules:
- base.py: Supported versions and shared helpers
- wardrobe_schema.py: Wardrobe structure and per-compartment configurations
- catalog_schema.py: Material and handle catalogs
- output_schema.py: Output format configuration
- root.py: Root configuration model
"""

from wardrobes.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    CamelModel as CamelModel,
)
from wardrobes.application.config.schemas.catalog_schema import (
    CatalogConfig as CatalogConfig,
    HandleFinishSchema as HandleFinishSchema,
    HandleSchema as HandleSchema,
    MaterialSchema as MaterialSchema,
)
from wardrobes.application.config.schemas.output_schema import (
    OutputConfig as OutputConfig,
)
from wardrobes.application.config.schemas.root import (
    WardrobeConfiguration as WardrobeConfiguration,
)
from wardrobes.application.config.schemas.wardrobe_schema import (
    CompartmentExtrasSchema as CompartmentExtrasSchema,
    DoorGroupSchema as DoorGroupSchema,
    ElementConfigSchema as ElementConfigSchema,
    WardrobeConfig as WardrobeConfig,
)
