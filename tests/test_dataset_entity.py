# tests/test_dataset_entity.py
"""
Unit tests for the Dataset descriptor: declaration tables, static facts,
icons and capabilities.
"""
import pytest

from catalog_profiles.entities.base import EntityDescriptor
from catalog_profiles.entities.dataset import (
    DATASET_SIDEBAR_SECTIONS,
    DATASET_TABS,
    DatasetEntity,
)
from catalog_profiles.entities.schemas import IconStyleType
from catalog_profiles.panels.engine import evaluate_panels
from catalog_profiles.profiles.schemas import EntityCapabilityType
from catalog_profiles.records.schemas import DatasetRecord, EntityType


def _tabs(record):
    urn = record.urn if record else "urn:x"
    return {s.declaration.name: s for s in evaluate_panels(DATASET_TABS, urn, record)}


def _sidebar(record):
    urn = record.urn if record else "urn:x"
    return {
        s.declaration.component: s
        for s in evaluate_panels(DATASET_SIDEBAR_SECTIONS, urn, record)
    }


def _record(**payload):
    return DatasetRecord.model_validate({"urn": "urn:x", **payload})


class TestDeclarations:
    def test_tab_order(self):
        assert [t.name for t in DATASET_TABS] == [
            "Documentation",
            "Properties",
            "Schema",
            "View Definition",
            "Lineage",
            "Queries",
            "Stats",
            "Validation",
            "Operations",
        ]

    def test_sidebar_order(self):
        assert [s.component for s in DATASET_SIDEBAR_SECTIONS] == [
            "sidebar_about_section",
            "sidebar_owner_section",
            "sidebar_siblings_section",
            "sidebar_view_definition_section",
            "sidebar_tags_section",
            "sidebar_domain_section",
            "sidebar_recommendations_section",
        ]

    def test_sidebar_static_config(self):
        owners = DATASET_SIDEBAR_SECTIONS[1]
        tags = DATASET_SIDEBAR_SECTIONS[4]
        assert owners.properties == {"default_owner_type": "TECHNICAL_OWNER"}
        assert tags.properties == {"has_tags": True, "has_terms": True}

    def test_every_predicate_is_total_over_absent_record(self):
        tabs = _tabs(None)
        sidebar = _sidebar(None)
        assert len(tabs) == len(DATASET_TABS)
        assert len(sidebar) == len(DATASET_SIDEBAR_SECTIONS)


class TestViewDefinition:
    def test_view_with_logic_is_visible_and_enabled(self):
        tab = _tabs(_record(subTypes={"typeNames": ["view"]}, viewProperties={"logic": "SELECT 1"}))[
            "View Definition"
        ]
        assert tab.is_visible and tab.is_enabled

    def test_view_without_logic_is_visible_but_disabled(self):
        tab = _tabs(_record(subTypes={"typeNames": ["view"]}, viewProperties={"logic": None}))[
            "View Definition"
        ]
        assert tab.is_visible
        assert not tab.is_enabled

    def test_table_hides_view_definition(self):
        assert not _tabs(_record(subTypes={"typeNames": ["table"]}))["View Definition"].is_visible

    def test_sidebar_view_section_follows_logic(self):
        assert _sidebar(_record(viewProperties={"logic": "SELECT 1"}))[
            "sidebar_view_definition_section"
        ].is_visible
        assert not _sidebar(_record(viewProperties={"logic": ""}))[
            "sidebar_view_definition_section"
        ].is_visible


class TestDataGatedTabs:
    def test_lineage_without_edges_is_visible_but_disabled(self):
        tab = _tabs(_record(upstream={"total": 0}, downstream={"total": 0}))["Lineage"]
        assert tab.is_visible
        assert not tab.is_enabled

    def test_lineage_with_downstream_is_enabled(self):
        assert _tabs(_record(downstream={"total": 1}))["Lineage"].is_enabled

    def test_operations_with_read_runs(self):
        tab = _tabs(_record(readRuns={"total": 3}, writeRuns={"total": 0}))["Operations"]
        assert tab.is_visible and tab.is_enabled

    def test_operations_without_runs_is_hidden(self):
        tab = _tabs(_record(readRuns={"total": None}))["Operations"]
        assert not tab.is_visible

    def test_queries_need_usage_buckets(self):
        assert not _tabs(_record(usageStats={"buckets": []}))["Queries"].is_enabled
        assert _tabs(_record(usageStats={"buckets": [{"bucket": 1}]}))["Queries"].is_enabled

    @pytest.mark.parametrize(
        "payload",
        [
            {"datasetProfiles": [{"rowCount": 1}]},
            {"usageStats": {"buckets": [{"bucket": 1}]}},
            {"operations": [{"lastUpdatedTimestamp": 1}]},
        ],
    )
    def test_stats_enabled_by_any_series(self, payload):
        assert _tabs(_record(**payload))["Stats"].is_enabled

    def test_stats_disabled_without_series(self):
        tab = _tabs(_record())["Stats"]
        assert tab.is_visible
        assert not tab.is_enabled

    def test_validation_enabled_by_assertions_or_test_results(self):
        assert _tabs(_record(assertions={"total": 2}))["Validation"].is_enabled
        assert _tabs(_record(testResults={"passing": []}))["Validation"].is_enabled
        assert not _tabs(_record(assertions={"total": 0}))["Validation"].is_enabled

    def test_validation_disabled_when_test_results_absent_or_null(self):
        assert not _tabs(_record(assertions={"total": 0}, testResults=None))["Validation"].is_enabled
        assert not _tabs(_record())["Validation"].is_enabled

    def test_siblings_section(self, view_dataset, orders):
        assert _sidebar(view_dataset)["sidebar_siblings_section"].is_visible
        assert not _sidebar(orders)["sidebar_siblings_section"].is_visible


class TestDescriptor:
    def test_satisfies_descriptor_protocol(self):
        assert isinstance(DatasetEntity(), EntityDescriptor)

    def test_static_facts(self):
        entity = DatasetEntity()
        assert entity.type == EntityType.DATASET
        assert entity.get_path_name() == "dataset"
        assert entity.get_entity_name() == "Dataset"
        assert entity.get_collection_name() == "Datasets"
        assert entity.get_auto_complete_field_name() == "name"
        assert entity.is_search_enabled()
        assert entity.is_browse_enabled()
        assert entity.is_lineage_enabled()

    def test_capabilities(self):
        assert DatasetEntity().supported_capabilities() == frozenset(
            {
                EntityCapabilityType.OWNERS,
                EntityCapabilityType.GLOSSARY_TERMS,
                EntityCapabilityType.TAGS,
                EntityCapabilityType.DOMAINS,
                EntityCapabilityType.DEPRECATION,
                EntityCapabilityType.SOFT_DELETE,
            }
        )

    def test_icons(self):
        entity = DatasetEntity()
        assert entity.icon(12, IconStyleType.TAB_VIEW).name == "DatabaseOutlined"
        highlight = entity.icon(12, IconStyleType.HIGHLIGHT)
        assert highlight.name == "DatabaseFilled"
        assert highlight.color == "#B37FEB"
        assert entity.icon(12, IconStyleType.SVG).svg_path.startswith("M832 64H192")
        accent = entity.icon(20, IconStyleType.ACCENT)
        assert accent.color == "#BFBFBF"
        assert accent.font_size == 20

    def test_display_name(self, orders):
        entity = DatasetEntity()
        assert entity.display_name(orders) == "orders"
        assert entity.display_name(DatasetRecord(urn="urn:only")) == "urn:only"

    def test_platform_logo_url(self, orders):
        assert DatasetEntity().platform_logo_url(orders) == "/logos/hive.png"
        assert DatasetEntity().platform_logo_url(DatasetRecord(urn="urn:x")) is None

    def test_generic_properties(self, view_dataset):
        generic = DatasetEntity().get_generic_entity_properties(view_dataset)
        assert generic.type == EntityType.DATASET
        assert generic.name == "active_customers"
        assert generic.entity_type_override == "View"
