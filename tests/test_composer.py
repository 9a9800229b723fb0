# tests/test_composer.py
"""
Unit tests for profile composition across fetch states.
"""
import pytest

from catalog_profiles.entities.dataset import DATASET_PROFILE, get_dataset_override_properties
from catalog_profiles.panels.engine import evaluate_panels
from catalog_profiles.panels.schemas import PanelDeclaration, PanelDisplay
from catalog_profiles.profiles.composer import (
    compose_profile,
    render_profile,
    select_tab,
    supported_menu_items,
)
from catalog_profiles.profiles.schemas import (
    EntityCapabilityType,
    EntityMenuItem,
    FetchResult,
    FetchState,
    ProfileDefinition,
)
from catalog_profiles.records.schemas import EntityType

from tests.conftest import ORDERS_URN, FailingFetcher, StaticFetcher

DATA_GATED_TABS = {"View Definition", "Lineage", "Queries", "Stats", "Validation", "Operations"}


def _tab_names(profile):
    return [t.name for t in profile.tabs]


def _sidebar_components(profile):
    return [s.component for s in profile.sidebar_sections]


class TestWithoutRecord:
    @pytest.mark.parametrize(
        "fetch_result",
        [FetchResult.loading(), FetchResult.failed("boom")],
    )
    def test_conservative_panel_set(self, fetch_result):
        profile = compose_profile(ORDERS_URN, fetch_result, DATASET_PROFILE)

        assert _tab_names(profile) == ["Documentation", "Properties", "Schema"]
        assert not DATA_GATED_TABS & set(_tab_names(profile))
        assert _sidebar_components(profile) == [
            "sidebar_about_section",
            "sidebar_owner_section",
            "sidebar_tags_section",
            "sidebar_domain_section",
            "sidebar_recommendations_section",
        ]

    def test_loading_profile_header(self):
        profile = compose_profile(ORDERS_URN, FetchResult.loading(), DATASET_PROFILE)
        assert profile.state == FetchState.LOADING
        assert profile.header.urn == ORDERS_URN
        assert profile.header.generic is None
        assert profile.sub_header is None
        assert profile.selected_tab == "Documentation"

    def test_error_is_surfaced(self):
        profile = compose_profile(ORDERS_URN, FetchResult.failed("timeout"), DATASET_PROFILE)
        assert profile.state == FetchState.ERROR
        assert profile.error == "timeout"

    def test_record_is_ignored_unless_ready(self, orders):
        result = FetchResult(state=FetchState.LOADING, record=orders)
        profile = compose_profile(ORDERS_URN, result, DATASET_PROFILE)
        assert profile.header.generic is None
        assert "Lineage" not in _tab_names(profile)


class TestWithRecord:
    def test_full_profile(self, orders):
        profile = compose_profile(ORDERS_URN, FetchResult.ready(orders), DATASET_PROFILE)

        assert profile.state == FetchState.READY
        assert profile.entity_type == EntityType.DATASET
        assert _tab_names(profile) == [
            "Documentation",
            "Properties",
            "Schema",
            "Lineage",
            "Queries",
            "Stats",
            "Validation",
            "Operations",
        ]
        assert all(t.enabled for t in profile.tabs)
        assert profile.header.generic.name == "orders"
        assert profile.header.generic.entity_type_override == "Table"
        assert profile.sub_header.component == "dataset_stats_summary_sub_header"
        assert profile.selected_tab == "Documentation"

    def test_disabled_tabs_are_rendered(self, view_dataset):
        profile = compose_profile(view_dataset.urn, FetchResult.ready(view_dataset), DATASET_PROFILE)
        tabs = {t.name: t for t in profile.tabs}
        assert tabs["View Definition"].enabled
        assert not tabs["Lineage"].enabled
        assert not tabs["Stats"].enabled
        assert "Operations" not in tabs
        assert "sidebar_siblings_section" in _sidebar_components(profile)
        assert "sidebar_view_definition_section" in _sidebar_components(profile)

    def test_requested_tab_is_selected(self, orders):
        profile = compose_profile(
            ORDERS_URN, FetchResult.ready(orders), DATASET_PROFILE, selected_tab="Lineage"
        )
        assert profile.selected_tab == "Lineage"

    def test_hidden_requested_tab_falls_back(self, view_dataset):
        profile = compose_profile(
            view_dataset.urn,
            FetchResult.ready(view_dataset),
            DATASET_PROFILE,
            selected_tab="Operations",
        )
        assert profile.selected_tab == "Documentation"

    def test_menu_items(self, orders):
        profile = compose_profile(ORDERS_URN, FetchResult.ready(orders), DATASET_PROFILE)
        assert profile.header.menu_items == [EntityMenuItem.UPDATE_DEPRECATION]

    def test_profile_serializes(self, orders):
        payload = compose_profile(
            ORDERS_URN, FetchResult.ready(orders), DATASET_PROFILE
        ).model_dump(mode="json")
        assert payload["state"] == "ready"
        assert payload["tabs"][0] == {
            "name": "Documentation",
            "component": "documentation_tab",
            "properties": {},
            "enabled": True,
        }


class TestSelection:
    def _states(self, *enabled_flags):
        tabs = [
            PanelDeclaration(
                name=f"T{i}",
                component=f"t{i}",
                display=PanelDisplay(enabled=lambda _u, _r, flag=flag: flag),
            )
            for i, flag in enumerate(enabled_flags)
        ]
        return evaluate_panels(tabs, "urn:x", None)

    def test_first_enabled_tab(self):
        assert select_tab(self._states(False, True, True)) == "T1"

    def test_first_visible_when_nothing_enabled(self):
        assert select_tab(self._states(False, False)) == "T0"

    def test_requested_disabled_but_visible_tab_wins(self):
        assert select_tab(self._states(True, False), requested="T1") == "T1"

    def test_no_tabs(self):
        assert select_tab([]) is None


class TestMenuItems:
    def test_items_need_supported_capability(self):
        definition = ProfileDefinition(
            entity_type=EntityType.DATASET,
            header_dropdown_items=frozenset(
                {EntityMenuItem.ADD_TERM, EntityMenuItem.UPDATE_DEPRECATION, EntityMenuItem.COPY_URL}
            ),
            supported_capabilities=frozenset({EntityCapabilityType.DEPRECATION}),
            get_override_properties=get_dataset_override_properties,
        )
        assert supported_menu_items(definition) == [
            EntityMenuItem.COPY_URL,
            EntityMenuItem.UPDATE_DEPRECATION,
        ]


class TestRenderProfile:
    @pytest.mark.asyncio
    async def test_fetches_and_composes(self, orders):
        fetcher = StaticFetcher(FetchResult.ready(orders))
        profile = await render_profile(ORDERS_URN, fetcher, DATASET_PROFILE, selected_tab="Stats")
        assert fetcher.fetched == [ORDERS_URN]
        assert profile.selected_tab == "Stats"

    @pytest.mark.asyncio
    async def test_fetcher_exception_becomes_error_profile(self):
        profile = await render_profile(ORDERS_URN, FailingFetcher(), DATASET_PROFILE)
        assert profile.state == FetchState.ERROR
        assert "graphql endpoint unreachable" in profile.error
        assert _tab_names(profile) == ["Documentation", "Properties", "Schema"]
