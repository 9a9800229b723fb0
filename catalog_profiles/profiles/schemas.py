"""Profile composition schemas.

ProfileDefinition is the static, per-kind description of a profile page;
EntityProfile is what the composer produces for one urn and one fetch
state. EntityProfile is plain data and serializes straight to JSON.
"""

from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog_profiles.panels.schemas import ComposedPanel, PanelDeclaration
from catalog_profiles.properties.schemas import GenericEntityProperties, OverrideProperties
from catalog_profiles.records.schemas import EntityType


class FetchState(str, Enum):
    """Data-fetch contract states."""
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class EntityCapabilityType(str, Enum):
    """Cross-cutting features an entity kind can opt into."""
    OWNERS = "OWNERS"
    GLOSSARY_TERMS = "GLOSSARY_TERMS"
    TAGS = "TAGS"
    DOMAINS = "DOMAINS"
    DEPRECATION = "DEPRECATION"
    SOFT_DELETE = "SOFT_DELETE"


class EntityMenuItem(str, Enum):
    """Header dropdown actions."""
    COPY_URL = "COPY_URL"
    UPDATE_DEPRECATION = "UPDATE_DEPRECATION"
    ADD_TERM = "ADD_TERM"
    SET_DOMAIN = "SET_DOMAIN"
    DELETE = "DELETE"


# Capability a header action needs; None means always offered.
MENU_ITEM_CAPABILITIES: dict[EntityMenuItem, Optional[EntityCapabilityType]] = {
    EntityMenuItem.COPY_URL: None,
    EntityMenuItem.UPDATE_DEPRECATION: EntityCapabilityType.DEPRECATION,
    EntityMenuItem.ADD_TERM: EntityCapabilityType.GLOSSARY_TERMS,
    EntityMenuItem.SET_DOMAIN: EntityCapabilityType.DOMAINS,
    EntityMenuItem.DELETE: EntityCapabilityType.SOFT_DELETE,
}


class FetchResult(BaseModel):
    """Outcome of the data-fetch contract for one urn."""

    state: FetchState
    record: Optional[Any] = None
    error: Optional[str] = None

    @classmethod
    def loading(cls) -> "FetchResult":
        return cls(state=FetchState.LOADING)

    @classmethod
    def ready(cls, record: Any) -> "FetchResult":
        return cls(state=FetchState.READY, record=record)

    @classmethod
    def failed(cls, error: str) -> "FetchResult":
        return cls(state=FetchState.ERROR, error=error)


class SubHeaderDeclaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    component: str
    properties: dict[str, Any] = Field(default_factory=dict)


class ProfileDefinition(BaseModel):
    """Static profile layout for one entity kind.

    Defined once at import time and shared by every profile view.
    """

    model_config = ConfigDict(frozen=True)

    entity_type: EntityType
    tabs: list[PanelDeclaration] = Field(default_factory=list)
    sidebar_sections: list[PanelDeclaration] = Field(default_factory=list)
    sub_header: Optional[SubHeaderDeclaration] = None
    header_dropdown_items: frozenset[EntityMenuItem] = Field(default_factory=frozenset)
    supported_capabilities: frozenset[EntityCapabilityType] = Field(
        default_factory=frozenset
    )
    get_override_properties: Callable[[Optional[Any]], OverrideProperties]


class EntityHeader(BaseModel):
    urn: str
    entity_type: EntityType
    generic: Optional[GenericEntityProperties] = Field(
        default=None,
        description="Resolved generic properties; None until a record is available",
    )
    menu_items: list[EntityMenuItem] = Field(default_factory=list)


class EntityProfile(BaseModel):
    """Composed, render-ready profile for one entity."""

    urn: str
    entity_type: EntityType
    state: FetchState
    error: Optional[str] = None
    header: EntityHeader
    sub_header: Optional[ComposedPanel] = None
    sidebar_sections: list[ComposedPanel] = Field(default_factory=list)
    tabs: list[ComposedPanel] = Field(default_factory=list)
    selected_tab: Optional[str] = None
