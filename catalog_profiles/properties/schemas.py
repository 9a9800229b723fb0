"""Generic property schemas shared by every entity kind.

GenericEntityProperties is the kind-agnostic view of a record that the
profile header, sidebar chrome and search cards read from. Entity kinds
contribute an OverrideProperties value that is layered on top of the
generic fields.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from catalog_profiles.records.schemas import (
    DataPlatform,
    DatasetProperties,
    Deprecation,
    DomainAssociation,
    EditableDatasetProperties,
    EntityRef,
    EntityType,
    GlobalTags,
    GlossaryTerms,
    Ownership,
    ParentContainers,
    SubTypes,
)


class OverrideProperties(BaseModel):
    """Entity-specific computed properties.

    A None field means "no opinion" and never erases the generic value.
    An empty entity_type_override means "no subtype override".
    """

    name: Optional[str] = None
    external_url: Optional[str] = None
    entity_type_override: Optional[str] = None
    properties: Optional[DatasetProperties] = None


class GenericEntityProperties(BaseModel):
    """Normalized, kind-agnostic view of one fetched entity.

    Computed once per fetch and never persisted.
    """

    urn: str
    type: EntityType
    name: str = Field(
        ...,
        description="Display name: kind-specific name, then canonical name, then urn",
    )
    external_url: Optional[str] = None
    entity_type_override: Optional[str] = Field(
        default=None,
        description="Subtype label shown instead of the kind name ('' = no override)",
    )
    properties: Optional[DatasetProperties] = None
    platform: Optional[DataPlatform] = None
    sibling_platforms: Optional[list[DataPlatform]] = Field(
        default=None,
        description="Platforms of this entity and its primary sibling, primary first",
    )
    custom_properties: Optional[list[dict[str, Any]]] = None
    editable_properties: Optional[EditableDatasetProperties] = None
    ownership: Optional[Ownership] = None
    global_tags: Optional[GlobalTags] = None
    glossary_terms: Optional[GlossaryTerms] = None
    domain: Optional[DomainAssociation] = None
    container: Optional[EntityRef] = None
    parent_containers: Optional[ParentContainers] = None
    deprecation: Optional[Deprecation] = None
    sub_types: Optional[SubTypes] = None
