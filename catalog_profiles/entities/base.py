"""Entity descriptor interface.

Each entity kind is one descriptor: a declaration table plus a handful of
pure functions. Descriptors satisfy this protocol structurally; there is no
shared base class.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from catalog_profiles.previews.schemas import LineageVizConfig, PreviewType, SummaryViewModel
from catalog_profiles.profiles.fetch import EntityFetcher
from catalog_profiles.profiles.schemas import (
    EntityCapabilityType,
    EntityProfile,
    ProfileDefinition,
)
from catalog_profiles.properties.schemas import GenericEntityProperties, OverrideProperties
from catalog_profiles.records.schemas import EntityType

from .schemas import IconSpec, IconStyleType


@runtime_checkable
class EntityDescriptor(Protocol):
    """Protocol every entity kind implements."""

    type: EntityType
    profile: ProfileDefinition
    record_model: type[BaseModel]
    search_result_model: type[BaseModel]
    update_model: type[BaseModel]

    def icon(self, font_size: int, style_type: IconStyleType) -> IconSpec: ...

    def is_search_enabled(self) -> bool: ...

    def is_browse_enabled(self) -> bool: ...

    def is_lineage_enabled(self) -> bool: ...

    def get_auto_complete_field_name(self) -> str: ...

    def get_path_name(self) -> str: ...

    def get_entity_name(self) -> str: ...

    def get_collection_name(self) -> str: ...

    async def render_profile(
        self,
        urn: str,
        fetcher: EntityFetcher,
        selected_tab: Optional[str] = None,
    ) -> EntityProfile: ...

    def get_override_properties_from_entity(self, data: Optional[Any]) -> OverrideProperties: ...

    def render_preview(self, preview_type: PreviewType, data: Any) -> SummaryViewModel: ...

    def render_search(self, result: Any) -> SummaryViewModel: ...

    def get_lineage_viz_config(self, entity: Any) -> LineageVizConfig: ...

    def display_name(self, data: Any) -> str: ...

    def platform_logo_url(self, data: Any) -> Optional[str]: ...

    def get_generic_entity_properties(self, data: Optional[Any]) -> Optional[GenericEntityProperties]: ...

    def supported_capabilities(self) -> frozenset[EntityCapabilityType]: ...
