"""Property override resolver.

Derives GenericEntityProperties from a partially populated record. The
generic bag is built from common fields first; the entity kind's override
function is then layered on top with a fixed precedence:

- a non-None override value replaces the generic value
- a None override value leaves the generic value in place
- name starts from properties.name, then the record name, and finally
  falls back to the urn, so it is never empty and does not depend on
  which override function the caller passes

The platform/description helpers here are the single source of truth for
display fallbacks. The preview projector calls them too, so a dataset
shows the same title and logo in its profile and in search results.
"""

import logging
from typing import Any, Callable, Optional

from catalog_profiles.records.schemas import (
    DataPlatform,
    DatasetRecord,
    EntityType,
)

from .schemas import GenericEntityProperties, OverrideProperties

logger = logging.getLogger(__name__)

OverrideFn = Callable[[Optional[Any]], OverrideProperties]


def capitalize_first_letter(text: Optional[str]) -> Optional[str]:
    """'VIEW' -> 'View'. Returns None for empty input."""
    if not text:
        return None
    return text[0].upper() + text[1:].lower()


def platform_display_name(platform: Optional[DataPlatform]) -> Optional[str]:
    """Display name of a platform, falling back to its raw name."""
    if platform is None:
        return None
    display_name = platform.properties.display_name if platform.properties else None
    return display_name or platform.name


def platform_logo_url(platform: Optional[DataPlatform]) -> Optional[str]:
    if platform is None or platform.properties is None:
        return None
    return platform.properties.logo_url or None


def entity_display_name(record: Optional[DatasetRecord]) -> Optional[str]:
    """Kind-specific name first, then the record's own name."""
    if record is None:
        return None
    properties_name = record.properties.name if record.properties else None
    return properties_name or record.name or None


def entity_description(record: Optional[DatasetRecord]) -> Optional[str]:
    """Edited description wins over the ingested one."""
    if record is None:
        return None
    if record.editable_properties and record.editable_properties.description:
        return record.editable_properties.description
    return record.properties.description if record.properties else None


def first_subtype(record: Optional[DatasetRecord]) -> Optional[str]:
    if record is None or record.sub_types is None:
        return None
    type_names = record.sub_types.type_names or []
    return type_names[0] if type_names else None


def _no_overrides(_: Optional[Any]) -> OverrideProperties:
    return OverrideProperties()


def _sibling_platforms(
    record: DatasetRecord,
    hide_siblings: bool,
) -> Optional[list[DataPlatform]]:
    """Platforms of the record and its first sibling, primary first."""
    if hide_siblings or record.siblings is None:
        return None
    siblings = record.siblings.siblings or []
    if not siblings:
        return None

    sibling_generic = get_data_for_entity_type(
        siblings[0],
        entity_type=siblings[0].type,
        get_override_properties=_no_overrides,
        hide_siblings=True,
    )
    sibling_platform = sibling_generic.platform if sibling_generic else None

    if record.siblings.is_primary:
        ordered = [record.platform, sibling_platform]
    else:
        ordered = [sibling_platform, record.platform]
    return [p for p in ordered if p is not None]


def get_data_for_entity_type(
    data: Optional[DatasetRecord],
    entity_type: EntityType,
    get_override_properties: Optional[OverrideFn] = None,
    hide_siblings: bool = False,
) -> Optional[GenericEntityProperties]:
    """Build the generic property bag for a record.

    Args:
        data: Fetched record, or None while loading / after a failed fetch
        entity_type: Static kind tag of the descriptor asking
        get_override_properties: Kind-specific override function
        hide_siblings: Skip sibling platform resolution

    Returns:
        GenericEntityProperties, or None when there is no record
    """
    if data is None:
        return None

    generic: dict[str, Any] = {
        "urn": data.urn,
        "type": entity_type,
        "name": entity_display_name(data),
        "external_url": data.properties.external_url if data.properties else None,
        "properties": data.properties,
        "platform": data.platform,
        "sibling_platforms": _sibling_platforms(data, hide_siblings),
        "custom_properties": (
            data.properties.custom_properties if data.properties else None
        ),
        "editable_properties": data.editable_properties,
        "ownership": data.ownership,
        "global_tags": data.global_tags,
        "glossary_terms": data.glossary_terms,
        "domain": data.domain,
        "container": data.container,
        "parent_containers": data.parent_containers,
        "deprecation": data.deprecation,
        "sub_types": data.sub_types,
    }

    if get_override_properties is not None:
        overrides = get_override_properties(data)
        for field_name in OverrideProperties.model_fields:
            value = getattr(overrides, field_name)
            if value is not None:
                generic[field_name] = value

    if not generic["name"]:
        logger.debug(f"No display name for {data.urn}, falling back to urn")
        generic["name"] = data.urn

    return GenericEntityProperties(**generic)
