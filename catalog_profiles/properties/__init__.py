"""Generic property model and the override resolver."""

from .schemas import GenericEntityProperties, OverrideProperties
from .resolver import (
    capitalize_first_letter,
    entity_description,
    entity_display_name,
    first_subtype,
    get_data_for_entity_type,
    platform_display_name,
    platform_logo_url,
)

__all__ = [
    "GenericEntityProperties",
    "OverrideProperties",
    "capitalize_first_letter",
    "entity_description",
    "entity_display_name",
    "first_subtype",
    "get_data_for_entity_type",
    "platform_display_name",
    "platform_logo_url",
]
