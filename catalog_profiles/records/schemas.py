"""Entity record schemas: the partially populated data graph for a dataset.

A DatasetRecord is whatever the fetch layer managed to resolve for one
dataset urn. Every relational and statistical field is optional: partial
population is the normal state while data streams in, so consumers must
read fields through their Optional types and never assume completeness.

Field names are snake_case in Python and camelCase on the wire, matching
the GraphQL payloads the catalog frontend receives.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EntityType(str, Enum):
    """Catalog object kinds."""
    DATASET = "DATASET"
    DATA_PLATFORM = "DATA_PLATFORM"
    CONTAINER = "CONTAINER"
    DOMAIN = "DOMAIN"
    CORP_USER = "CORP_USER"
    CORP_GROUP = "CORP_GROUP"
    TAG = "TAG"
    GLOSSARY_TERM = "GLOSSARY_TERM"


class OwnershipType(str, Enum):
    """Ownership roles a sidebar owner section can default to."""
    TECHNICAL_OWNER = "TECHNICAL_OWNER"
    BUSINESS_OWNER = "BUSINESS_OWNER"
    DATA_STEWARD = "DATA_STEWARD"
    NONE = "NONE"


class RecordModel(BaseModel):
    """Base for wire-shaped record models (camelCase aliases)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Platform ─────────────────────────────────────────────


class PlatformProperties(RecordModel):
    display_name: Optional[str] = None
    logo_url: Optional[str] = None


class DataPlatform(RecordModel):
    """Source system a dataset lives in (hive, snowflake, kafka...)."""

    urn: Optional[str] = None
    name: Optional[str] = None
    properties: Optional[PlatformProperties] = None


class DataPlatformInstance(RecordModel):
    instance_id: Optional[str] = None


# ── Canonical and editable properties ────────────────────


class DatasetProperties(RecordModel):
    """Canonical properties ingested from the source system."""

    name: Optional[str] = None
    description: Optional[str] = None
    external_url: Optional[str] = None
    qualified_name: Optional[str] = None
    custom_properties: Optional[list[dict[str, Any]]] = None


class EditableDatasetProperties(RecordModel):
    """Properties edited in the catalog UI; they override ingested ones."""

    description: Optional[str] = None


class SubTypes(RecordModel):
    type_names: Optional[list[str]] = None


class ViewProperties(RecordModel):
    materialized: Optional[bool] = None
    logic: Optional[str] = None
    language: Optional[str] = None


# ── Relational attributes ────────────────────────────────


class EntityRef(RecordModel):
    """Minimal reference to another catalog entity."""

    urn: str
    type: Optional[str] = None
    name: Optional[str] = None


class Owner(RecordModel):
    owner: EntityRef
    type: Optional[OwnershipType] = None


class Ownership(RecordModel):
    owners: Optional[list[Owner]] = None


class TagAssociation(RecordModel):
    tag: EntityRef


class GlobalTags(RecordModel):
    tags: Optional[list[TagAssociation]] = None


class GlossaryTermAssociation(RecordModel):
    term: EntityRef


class GlossaryTerms(RecordModel):
    terms: Optional[list[GlossaryTermAssociation]] = None


class DomainAssociation(RecordModel):
    domain: Optional[EntityRef] = None


class ParentContainers(RecordModel):
    count: Optional[int] = None
    containers: Optional[list[EntityRef]] = None


class Deprecation(RecordModel):
    deprecated: bool = False
    note: Optional[str] = None
    decommission_time: Optional[int] = None
    actor: Optional[str] = None


class RelationshipCount(RecordModel):
    """Paged relationship result where only the total is fetched."""

    total: Optional[int] = None


# ── Statistics ───────────────────────────────────────────


class UsageAggregation(RecordModel):
    bucket: Optional[int] = None
    metrics: Optional[dict[str, Any]] = None


class UsageStats(RecordModel):
    buckets: Optional[list[UsageAggregation]] = None


class DatasetProfile(RecordModel):
    timestamp_millis: Optional[int] = None
    row_count: Optional[int] = None
    column_count: Optional[int] = None


class Operation(RecordModel):
    timestamp_millis: Optional[int] = None
    last_updated_timestamp: Optional[int] = None
    operation_type: Optional[str] = None


class UserUsageSummary(RecordModel):
    urn: str
    username: Optional[str] = None


class DatasetStatsSummary(RecordModel):
    query_count_last_30_days: Optional[int] = None
    unique_user_count_last_30_days: Optional[int] = None
    top_users_last_30_days: Optional[list[UserUsageSummary]] = None


class DatasetTestResults(RecordModel):
    passing: Optional[list[dict[str, Any]]] = None
    failing: Optional[list[dict[str, Any]]] = None


# ── Dataset record ───────────────────────────────────────


class SiblingProperties(RecordModel):
    """Merged duplicates of this dataset from other source systems."""

    is_primary: Optional[bool] = None
    siblings: Optional[list["DatasetRecord"]] = None


class DatasetRecord(RecordModel):
    """Fetched data graph for one dataset.

    Only `urn` is guaranteed. Everything else may be missing depending on
    which query fragment resolved it.
    """

    urn: str = Field(..., description="Opaque stable identifier")
    type: EntityType = Field(default=EntityType.DATASET)
    name: Optional[str] = Field(
        default=None,
        description="Top-level name; used when properties.name is absent",
    )
    origin: Optional[str] = None

    properties: Optional[DatasetProperties] = None
    editable_properties: Optional[EditableDatasetProperties] = None
    platform: Optional[DataPlatform] = None
    data_platform_instance: Optional[DataPlatformInstance] = None
    sub_types: Optional[SubTypes] = None
    view_properties: Optional[ViewProperties] = None

    ownership: Optional[Ownership] = None
    global_tags: Optional[GlobalTags] = None
    glossary_terms: Optional[GlossaryTerms] = None
    domain: Optional[DomainAssociation] = None
    container: Optional[EntityRef] = None
    parent_containers: Optional[ParentContainers] = None
    deprecation: Optional[Deprecation] = None
    siblings: Optional[SiblingProperties] = None

    upstream: Optional[RelationshipCount] = None
    downstream: Optional[RelationshipCount] = None
    read_runs: Optional[RelationshipCount] = None
    write_runs: Optional[RelationshipCount] = None
    assertions: Optional[RelationshipCount] = None
    test_results: Optional[DatasetTestResults] = None

    usage_stats: Optional[UsageStats] = None
    dataset_profiles: Optional[list[DatasetProfile]] = None
    operations: Optional[list[Operation]] = None
    stats_summary: Optional[DatasetStatsSummary] = None


SiblingProperties.model_rebuild()


# ── Search results ───────────────────────────────────────


class DatasetSearchEntity(DatasetRecord):
    """Dataset shape returned by search.

    Carries the latest profile/operation series that the full profile
    query does not fetch.
    """

    last_profile: Optional[list[DatasetProfile]] = None
    last_operation: Optional[list[Operation]] = None


class MatchedField(RecordModel):
    name: str
    value: Optional[str] = None


class SearchInsight(RecordModel):
    text: str
    icon: Optional[str] = None


class SearchResult(RecordModel):
    """A search hit: the entity plus result-specific metadata."""

    entity: DatasetSearchEntity
    matched_fields: list[MatchedField] = Field(default_factory=list)
    insights: Optional[list[SearchInsight]] = None


# ── Update input ─────────────────────────────────────────


class EditableDatasetPropertiesUpdate(RecordModel):
    description: Optional[str] = None


class DatasetUpdateInput(RecordModel):
    """Mutation payload; only non-null sections are applied."""

    editable_properties: Optional[EditableDatasetPropertiesUpdate] = None
    deprecation: Optional[Deprecation] = None
    global_tags: Optional[GlobalTags] = None
    ownership: Optional[Ownership] = None
