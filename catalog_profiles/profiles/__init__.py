"""Profile composition - header, sub header, sidebar and tabs for one entity."""

from .schemas import (
    EntityCapabilityType,
    EntityHeader,
    EntityMenuItem,
    EntityProfile,
    FetchResult,
    FetchState,
    ProfileDefinition,
    SubHeaderDeclaration,
)
from .fetch import EntityFetcher
from .composer import compose_profile, render_profile, select_tab, supported_menu_items

__all__ = [
    "EntityCapabilityType",
    "EntityFetcher",
    "EntityHeader",
    "EntityMenuItem",
    "EntityProfile",
    "FetchResult",
    "FetchState",
    "ProfileDefinition",
    "SubHeaderDeclaration",
    "compose_profile",
    "render_profile",
    "select_tab",
    "supported_menu_items",
]
