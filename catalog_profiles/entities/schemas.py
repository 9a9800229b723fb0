"""Entity descriptor schemas: icons and kind summaries."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from catalog_profiles.profiles.schemas import EntityCapabilityType
from catalog_profiles.records.schemas import EntityType


class IconStyleType(str, Enum):
    """Icon variants requested by the UI chrome."""
    TAB_VIEW = "TAB_VIEW"
    HIGHLIGHT = "HIGHLIGHT"
    SVG = "SVG"
    ACCENT = "ACCENT"


class IconSpec(BaseModel):
    """Presentational icon description; the consumer maps it to an asset."""

    name: str = Field(..., description="Icon glyph key, e.g. 'DatabaseOutlined'")
    font_size: int
    color: Optional[str] = None
    svg_path: Optional[str] = Field(
        default=None,
        description="Raw SVG path data for the SVG style",
    )


class EntityKindSummary(BaseModel):
    """Static facts about one entity kind, for routing and labeling."""

    type: EntityType
    path_name: str
    entity_name: str
    collection_name: str
    is_search_enabled: bool
    is_browse_enabled: bool
    is_lineage_enabled: bool
    auto_complete_field_name: str
    capabilities: list[EntityCapabilityType] = Field(default_factory=list)
    tabs: list[str] = Field(default_factory=list)
