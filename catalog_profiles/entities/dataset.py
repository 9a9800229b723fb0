"""Dataset entity descriptor.

Declares the Dataset profile: which tabs and sidebar sections exist, under
which data conditions each is visible or enabled, how generic properties
are overridden, and how previews and search cards are projected.

Every predicate takes an Optional record and reads nested fields through
their Optional types, treating a missing count as zero.
"""

import logging
from typing import Optional

from catalog_profiles.panels.schemas import PanelDeclaration, PanelDisplay
from catalog_profiles.previews.projector import (
    get_lineage_viz_config,
    project_preview,
    project_search_result,
)
from catalog_profiles.previews.schemas import LineageVizConfig, PreviewType, SummaryViewModel
from catalog_profiles.profiles.composer import render_profile
from catalog_profiles.profiles.fetch import EntityFetcher
from catalog_profiles.profiles.schemas import (
    EntityCapabilityType,
    EntityMenuItem,
    EntityProfile,
    ProfileDefinition,
    SubHeaderDeclaration,
)
from catalog_profiles.properties.resolver import (
    capitalize_first_letter,
    entity_display_name,
    get_data_for_entity_type,
    platform_logo_url,
)
from catalog_profiles.properties.schemas import GenericEntityProperties, OverrideProperties
from catalog_profiles.records.schemas import (
    DatasetRecord,
    DatasetUpdateInput,
    EntityType,
    OwnershipType,
    RelationshipCount,
    SearchResult,
)

from .schemas import IconSpec, IconStyleType

logger = logging.getLogger(__name__)

SUBTYPE_VIEW = "view"

DATABASE_SVG_PATH = (
    "M832 64H192c-17.7 0-32 14.3-32 32v832c0 17.7 14.3 32 32 32h640c17.7 0 "
    "32-14.3 32-32V96c0-17.7-14.3-32-32-32zm-600 72h560v208H232V136zm560 "
    "480H232V408h560v208zm0 272H232V680h560v208zM304 240a40 40 0 1080 0 40 "
    "40 0 10-80 0zm0 272a40 40 0 1080 0 40 40 0 10-80 0zm0 272a40 40 0 1080 "
    "0 40 40 0 10-80 0z"
)
HIGHLIGHT_COLOR = "#B37FEB"
MUTED_COLOR = "#BFBFBF"


# ── Predicates ───────────────────────────────────────────


def _total(count: Optional[RelationshipCount]) -> int:
    if count is None:
        return 0
    return count.total or 0


def _usage_bucket_count(dataset: Optional[DatasetRecord]) -> int:
    if dataset is None or dataset.usage_stats is None:
        return 0
    return len(dataset.usage_stats.buckets or [])


def _always(_urn: str, _dataset: Optional[DatasetRecord]) -> bool:
    return True


def is_view(_urn: str, dataset: Optional[DatasetRecord]) -> bool:
    if dataset is None or dataset.sub_types is None:
        return False
    return SUBTYPE_VIEW in (dataset.sub_types.type_names or [])


def has_view_logic(_urn: str, dataset: Optional[DatasetRecord]) -> bool:
    if dataset is None or dataset.view_properties is None:
        return False
    return bool(dataset.view_properties.logic)


def has_lineage(_urn: str, dataset: Optional[DatasetRecord]) -> bool:
    if dataset is None:
        return False
    return _total(dataset.upstream) > 0 or _total(dataset.downstream) > 0


def has_usage(_urn: str, dataset: Optional[DatasetRecord]) -> bool:
    return _usage_bucket_count(dataset) > 0


def has_stats(_urn: str, dataset: Optional[DatasetRecord]) -> bool:
    if dataset is None:
        return False
    return (
        len(dataset.dataset_profiles or []) > 0
        or _usage_bucket_count(dataset) > 0
        or len(dataset.operations or []) > 0
    )


def has_validations(_urn: str, dataset: Optional[DatasetRecord]) -> bool:
    if dataset is None:
        return False
    # A testResults field that was never fetched parses to None, same as null
    return _total(dataset.assertions) > 0 or dataset.test_results is not None


def has_runs(_urn: str, dataset: Optional[DatasetRecord]) -> bool:
    if dataset is None:
        return False
    return _total(dataset.read_runs) + _total(dataset.write_runs) > 0


def has_siblings(_urn: str, dataset: Optional[DatasetRecord]) -> bool:
    if dataset is None or dataset.siblings is None:
        return False
    return len(dataset.siblings.siblings or []) > 0


# ── Declarations ─────────────────────────────────────────


DATASET_TABS: list[PanelDeclaration] = [
    PanelDeclaration(name="Documentation", component="documentation_tab"),
    PanelDeclaration(name="Properties", component="properties_tab"),
    PanelDeclaration(name="Schema", component="schema_tab"),
    PanelDeclaration(
        name="View Definition",
        component="view_definition_tab",
        display=PanelDisplay(visible=is_view, enabled=has_view_logic),
    ),
    PanelDeclaration(
        name="Lineage",
        component="lineage_tab",
        display=PanelDisplay(visible=_always, enabled=has_lineage),
    ),
    PanelDeclaration(
        name="Queries",
        component="queries_tab",
        display=PanelDisplay(visible=_always, enabled=has_usage),
    ),
    PanelDeclaration(
        name="Stats",
        component="stats_tab",
        display=PanelDisplay(visible=_always, enabled=has_stats),
    ),
    PanelDeclaration(
        name="Validation",
        component="validations_tab",
        display=PanelDisplay(visible=_always, enabled=has_validations),
    ),
    PanelDeclaration(
        name="Operations",
        component="operations_tab",
        display=PanelDisplay(visible=has_runs, enabled=has_runs),
    ),
]

DATASET_SIDEBAR_SECTIONS: list[PanelDeclaration] = [
    PanelDeclaration(component="sidebar_about_section"),
    PanelDeclaration(
        component="sidebar_owner_section",
        properties={"default_owner_type": OwnershipType.TECHNICAL_OWNER.value},
    ),
    PanelDeclaration(
        component="sidebar_siblings_section",
        display=PanelDisplay(visible=has_siblings),
    ),
    PanelDeclaration(
        component="sidebar_view_definition_section",
        display=PanelDisplay(visible=has_view_logic),
    ),
    PanelDeclaration(
        component="sidebar_tags_section",
        properties={"has_tags": True, "has_terms": True},
    ),
    PanelDeclaration(component="sidebar_domain_section"),
    PanelDeclaration(component="sidebar_recommendations_section"),
]

DATASET_CAPABILITIES = frozenset(
    {
        EntityCapabilityType.OWNERS,
        EntityCapabilityType.GLOSSARY_TERMS,
        EntityCapabilityType.TAGS,
        EntityCapabilityType.DOMAINS,
        EntityCapabilityType.DEPRECATION,
        EntityCapabilityType.SOFT_DELETE,
    }
)


def get_dataset_override_properties(dataset: Optional[DatasetRecord]) -> OverrideProperties:
    """Dataset-specific overrides of the generic property bag.

    - name: properties.name, then the top-level name
    - entity_type_override: first subtype, capitalized; '' when none
    - properties.qualified_name: falls back to the top-level name
    """
    if dataset is None:
        return OverrideProperties(entity_type_override="")

    type_names = dataset.sub_types.type_names if dataset.sub_types else None
    entity_type_override = capitalize_first_letter(type_names[0]) if type_names else None

    extended_properties = None
    if dataset.properties is not None:
        extended_properties = dataset.properties.model_copy(
            update={
                "qualified_name": dataset.properties.qualified_name or dataset.name,
            }
        )

    return OverrideProperties(
        name=entity_display_name(dataset),
        external_url=dataset.properties.external_url if dataset.properties else None,
        entity_type_override=entity_type_override or "",
        properties=extended_properties,
    )


DATASET_PROFILE = ProfileDefinition(
    entity_type=EntityType.DATASET,
    tabs=DATASET_TABS,
    sidebar_sections=DATASET_SIDEBAR_SECTIONS,
    sub_header=SubHeaderDeclaration(component="dataset_stats_summary_sub_header"),
    header_dropdown_items=frozenset({EntityMenuItem.UPDATE_DEPRECATION}),
    supported_capabilities=DATASET_CAPABILITIES,
    get_override_properties=get_dataset_override_properties,
)


# ── Descriptor ───────────────────────────────────────────


class DatasetEntity:
    """Definition of the Dataset entity."""

    type: EntityType = EntityType.DATASET
    profile: ProfileDefinition = DATASET_PROFILE
    record_model = DatasetRecord
    search_result_model = SearchResult
    update_model = DatasetUpdateInput

    def icon(self, font_size: int, style_type: IconStyleType) -> IconSpec:
        if style_type == IconStyleType.TAB_VIEW:
            return IconSpec(name="DatabaseOutlined", font_size=font_size)

        if style_type == IconStyleType.HIGHLIGHT:
            return IconSpec(name="DatabaseFilled", font_size=font_size, color=HIGHLIGHT_COLOR)

        if style_type == IconStyleType.SVG:
            return IconSpec(name="Database", font_size=font_size, svg_path=DATABASE_SVG_PATH)

        return IconSpec(name="DatabaseOutlined", font_size=font_size, color=MUTED_COLOR)

    def is_search_enabled(self) -> bool:
        return True

    def is_browse_enabled(self) -> bool:
        return True

    def is_lineage_enabled(self) -> bool:
        return True

    def get_auto_complete_field_name(self) -> str:
        return "name"

    def get_path_name(self) -> str:
        return "dataset"

    def get_entity_name(self) -> str:
        return "Dataset"

    def get_collection_name(self) -> str:
        return "Datasets"

    async def render_profile(
        self,
        urn: str,
        fetcher: EntityFetcher,
        selected_tab: Optional[str] = None,
    ) -> EntityProfile:
        return await render_profile(urn, fetcher, self.profile, selected_tab)

    def get_override_properties_from_entity(
        self, data: Optional[DatasetRecord]
    ) -> OverrideProperties:
        return get_dataset_override_properties(data)

    def render_preview(self, preview_type: PreviewType, data: DatasetRecord) -> SummaryViewModel:
        logger.debug(f"Rendering {preview_type.value} preview for {data.urn}")
        return project_preview(
            data,
            entity_type=self.type,
            get_override_properties=get_dataset_override_properties,
        )

    def render_search(self, result: SearchResult) -> SummaryViewModel:
        return project_search_result(
            result,
            entity_type=self.type,
            get_override_properties=get_dataset_override_properties,
        )

    def get_lineage_viz_config(self, entity: DatasetRecord) -> LineageVizConfig:
        return get_lineage_viz_config(entity, entity_type=self.type)

    def display_name(self, data: DatasetRecord) -> str:
        return entity_display_name(data) or data.urn

    def platform_logo_url(self, data: DatasetRecord) -> Optional[str]:
        return platform_logo_url(data.platform)

    def get_generic_entity_properties(
        self, data: Optional[DatasetRecord]
    ) -> Optional[GenericEntityProperties]:
        return get_data_for_entity_type(
            data,
            entity_type=self.type,
            get_override_properties=get_dataset_override_properties,
        )

    def supported_capabilities(self) -> frozenset[EntityCapabilityType]:
        return DATASET_CAPABILITIES
