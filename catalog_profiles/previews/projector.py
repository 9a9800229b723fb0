"""Preview/summary projector.

Maps a full record, or a search hit, to a SummaryViewModel. Title and
platform fallbacks go through the property resolver so a dataset never
shows a different name in search than on its profile page. Sibling
platforms come from the resolver's generic bag rather than being
re-derived here.
"""

from typing import Any, Callable, Optional

from catalog_profiles.properties.resolver import (
    entity_description,
    entity_display_name,
    first_subtype,
    get_data_for_entity_type,
    platform_display_name,
    platform_logo_url,
)
from catalog_profiles.properties.schemas import GenericEntityProperties, OverrideProperties
from catalog_profiles.records.schemas import (
    DatasetRecord,
    EntityType,
    MatchedField,
    SearchResult,
)

from .schemas import LineageVizConfig, SearchSnippet, SummaryViewModel

OverrideFn = Callable[[Optional[Any]], OverrideProperties]

# Matched index fields worth explaining in a search card, in priority order
SNIPPET_FIELD_LABELS: dict[str, str] = {
    "fieldPaths": "column",
    "fieldDescriptions": "column description",
    "editedFieldDescriptions": "column description",
    "fieldTags": "column tag",
    "editedFieldTags": "column tag",
    "fieldGlossaryTerms": "column term",
}


def build_search_snippet(matched_fields: Optional[list[MatchedField]]) -> Optional[SearchSnippet]:
    """First matched field that has a display label, or None."""
    for field in matched_fields or []:
        label = SNIPPET_FIELD_LABELS.get(field.name)
        if label:
            return SearchSnippet(field=field.name, label=label, value=field.value)
    return None


def _base_summary(
    data: DatasetRecord,
    entity_type: EntityType,
    get_override_properties: Optional[OverrideFn],
) -> tuple[dict[str, Any], GenericEntityProperties]:
    generic = get_data_for_entity_type(
        data,
        entity_type=entity_type,
        get_override_properties=get_override_properties,
    )
    fields = {
        "urn": data.urn,
        "entity_type": entity_type,
        "name": generic.name,
        "origin": data.origin,
        "subtype": first_subtype(data),
        "description": entity_description(data),
        "platform_name": platform_display_name(data.platform),
        "platform_logo": platform_logo_url(data.platform),
        "platform_instance_id": (
            data.data_platform_instance.instance_id
            if data.data_platform_instance
            else None
        ),
        "owners": data.ownership.owners if data.ownership else None,
        "global_tags": data.global_tags,
        "glossary_terms": data.glossary_terms,
        "domain": data.domain.domain if data.domain else None,
        "container": data.container,
    }
    return fields, generic


def project_preview(
    data: DatasetRecord,
    entity_type: EntityType = EntityType.DATASET,
    get_override_properties: Optional[OverrideFn] = None,
) -> SummaryViewModel:
    """Project a full record into a preview card."""
    fields, _ = _base_summary(data, entity_type, get_override_properties)
    return SummaryViewModel(**fields)


def project_search_result(
    result: SearchResult,
    entity_type: EntityType = EntityType.DATASET,
    get_override_properties: Optional[OverrideFn] = None,
) -> SummaryViewModel:
    """Project a search hit into a search card.

    Numeric fields come from the first element of the latest profile /
    operation series; nothing is aggregated.
    """
    data = result.entity
    fields, generic = _base_summary(data, entity_type, get_override_properties)

    sibling_platforms = generic.sibling_platforms
    if sibling_platforms:
        fields["platform_names"] = [platform_display_name(p) for p in sibling_platforms]
        fields["platform_logos"] = [platform_logo_url(p) for p in sibling_platforms]

    last_profile = data.last_profile or []
    last_operation = data.last_operation or []

    fields.update(
        deprecation=data.deprecation,
        parent_containers=data.parent_containers,
        snippet=build_search_snippet(result.matched_fields),
        insights=result.insights,
        external_url=data.properties.external_url if data.properties else None,
        stats_summary=data.stats_summary,
        row_count=last_profile[0].row_count if last_profile else None,
        last_updated_ms=(
            last_operation[0].last_updated_timestamp if last_operation else None
        ),
    )
    return SummaryViewModel(**fields)


def get_lineage_viz_config(
    data: DatasetRecord,
    entity_type: EntityType = EntityType.DATASET,
) -> LineageVizConfig:
    """Node config for the lineage graph."""
    name = entity_display_name(data) or data.urn
    qualified_name = data.properties.qualified_name if data.properties else None
    return LineageVizConfig(
        urn=data.urn,
        name=name,
        expanded_name=qualified_name or name,
        type=entity_type,
        subtype=first_subtype(data),
        icon=platform_logo_url(data.platform),
        platform=data.platform,
    )
