"""Profile composer.

Binds a fetch result, the override resolver and the panel visibility engine
into one EntityProfile:

1. Resolve generic properties for the header (None without a record)
2. Filter header actions to the kind's supported capabilities
3. Evaluate sidebar sections and tabs against the record
4. Pick the selected tab

While loading, or after a failed fetch, panels are evaluated against an
absent record with data-gated panels hidden. Sections without predicates
(About, Owners...) stay visible so the page keeps its shape.
"""

import logging
from typing import Optional

from catalog_profiles.panels.engine import compose_panels, evaluate_panels
from catalog_profiles.panels.schemas import ComposedPanel, PanelState
from catalog_profiles.properties.resolver import get_data_for_entity_type

from .fetch import EntityFetcher
from .schemas import (
    MENU_ITEM_CAPABILITIES,
    EntityHeader,
    EntityMenuItem,
    EntityProfile,
    FetchResult,
    FetchState,
    ProfileDefinition,
)

logger = logging.getLogger(__name__)


def supported_menu_items(definition: ProfileDefinition) -> list[EntityMenuItem]:
    """Declared header actions whose required capability the kind supports."""
    items = []
    for item in EntityMenuItem:
        if item not in definition.header_dropdown_items:
            continue
        required = MENU_ITEM_CAPABILITIES.get(item)
        if required is not None and required not in definition.supported_capabilities:
            logger.debug(
                f"Dropping menu item {item.value}: {definition.entity_type.value} "
                f"does not support {required.value}"
            )
            continue
        items.append(item)
    return items


def select_tab(
    tab_states: list[PanelState],
    requested: Optional[str] = None,
) -> Optional[str]:
    """Pick the active tab.

    The requested tab wins if it is rendered. Otherwise the first visible and
    enabled tab, then the first visible tab.
    """
    rendered = [s for s in tab_states if s.is_visible]
    if requested and any(s.declaration.name == requested for s in rendered):
        return requested
    for state in rendered:
        if state.is_enabled:
            return state.declaration.name
    return rendered[0].declaration.name if rendered else None


def compose_profile(
    urn: str,
    fetch_result: FetchResult,
    definition: ProfileDefinition,
    selected_tab: Optional[str] = None,
) -> EntityProfile:
    """Compose a render-ready profile for one fetch state.

    Args:
        urn: Identifier of the entity being viewed
        fetch_result: Current state of the data-fetch contract
        definition: Static profile layout of the entity kind
        selected_tab: Tab requested by the caller (e.g. from the route)

    Returns:
        EntityProfile with only visible panels, in declaration order
    """
    record = fetch_result.record if fetch_result.state == FetchState.READY else None
    hide_data_gated = record is None

    generic = get_data_for_entity_type(
        record,
        entity_type=definition.entity_type,
        get_override_properties=definition.get_override_properties,
    )

    sidebar_states = evaluate_panels(
        definition.sidebar_sections, urn, record, hide_data_gated=hide_data_gated
    )
    tab_states = evaluate_panels(
        definition.tabs, urn, record, hide_data_gated=hide_data_gated
    )

    sub_header = None
    if definition.sub_header is not None and record is not None:
        sub_header = ComposedPanel(
            component=definition.sub_header.component,
            properties=dict(definition.sub_header.properties),
        )

    return EntityProfile(
        urn=urn,
        entity_type=definition.entity_type,
        state=fetch_result.state,
        error=fetch_result.error,
        header=EntityHeader(
            urn=urn,
            entity_type=definition.entity_type,
            generic=generic,
            menu_items=supported_menu_items(definition),
        ),
        sub_header=sub_header,
        sidebar_sections=compose_panels(sidebar_states),
        tabs=compose_panels(tab_states),
        selected_tab=select_tab(tab_states, selected_tab),
    )


async def render_profile(
    urn: str,
    fetcher: EntityFetcher,
    definition: ProfileDefinition,
    selected_tab: Optional[str] = None,
) -> EntityProfile:
    """Fetch the record for `urn` and compose its profile.

    A fetcher that raises is reported as an error state; the profile still
    renders with the conservative panel set.
    """
    try:
        fetch_result = await fetcher.fetch(urn)
    except Exception as e:
        logger.error(f"Fetch failed for {urn}: {e}")
        fetch_result = FetchResult.failed(f"Failed to load {urn}: {e}")

    if fetch_result.state == FetchState.ERROR:
        logger.warning(f"Rendering {urn} without data: {fetch_result.error}")

    return compose_profile(urn, fetch_result, definition, selected_tab)
