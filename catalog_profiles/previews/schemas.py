"""Preview and search-card schemas.

SummaryViewModel is the reduced projection of a record used wherever an
entity appears as a compact card: search results, browse lists, lineage
nodes. It is built per render call and has no lifecycle of its own.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from catalog_profiles.records.schemas import (
    DataPlatform,
    DatasetStatsSummary,
    Deprecation,
    EntityRef,
    EntityType,
    GlobalTags,
    GlossaryTerms,
    Owner,
    ParentContainers,
    SearchInsight,
)


class PreviewType(str, Enum):
    """Context a preview card is rendered in."""
    PREVIEW = "PREVIEW"
    BROWSE = "BROWSE"
    HOVER_CARD = "HOVER_CARD"


class SearchSnippet(BaseModel):
    """Why a search result matched, e.g. 'Matches column customer_id'."""

    field: str
    label: str
    value: Optional[str] = None


class SummaryViewModel(BaseModel):
    """Compact card for previews and search results."""

    urn: str
    entity_type: EntityType
    name: str
    origin: Optional[str] = None
    subtype: Optional[str] = None
    description: Optional[str] = None
    external_url: Optional[str] = None

    # Platform
    platform_name: Optional[str] = None
    platform_logo: Optional[str] = None
    platform_instance_id: Optional[str] = None
    platform_names: Optional[list[Optional[str]]] = Field(
        default=None,
        description="Display names of sibling platforms, primary first",
    )
    platform_logos: Optional[list[Optional[str]]] = None

    # Relations
    owners: Optional[list[Owner]] = None
    global_tags: Optional[GlobalTags] = None
    glossary_terms: Optional[GlossaryTerms] = None
    domain: Optional[EntityRef] = None
    container: Optional[EntityRef] = None
    parent_containers: Optional[ParentContainers] = None
    deprecation: Optional[Deprecation] = None

    # Search-only
    snippet: Optional[SearchSnippet] = None
    insights: Optional[list[SearchInsight]] = None
    stats_summary: Optional[DatasetStatsSummary] = None
    row_count: Optional[int] = Field(
        default=None,
        description="Row count of the most recent profile",
    )
    last_updated_ms: Optional[int] = Field(
        default=None,
        description="Last update timestamp of the most recent operation",
    )


class LineageVizConfig(BaseModel):
    """Node configuration for the lineage graph."""

    urn: str
    name: str
    expanded_name: str
    type: EntityType
    subtype: Optional[str] = None
    icon: Optional[str] = None
    platform: Optional[DataPlatform] = None
