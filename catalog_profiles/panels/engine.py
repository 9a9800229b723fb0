"""Panel visibility engine.

Evaluates an ordered list of panel declarations against the current record
snapshot. Runs on every re-render as data streams in, so evaluation is a
pure function of (declarations, urn, record): no caching, no counters, and
declaration order is always the output order.
"""

import logging
from typing import Any, Optional, Sequence

from .schemas import ComposedPanel, PanelDeclaration, PanelPredicate, PanelState

logger = logging.getLogger(__name__)


def _evaluate_predicate(
    predicate: Optional[PanelPredicate],
    urn: str,
    record: Optional[Any],
    panel_label: str,
    axis: str,
) -> bool:
    """Evaluate one predicate; a broken predicate only affects its own panel."""
    if predicate is None:
        return True
    try:
        return bool(predicate(urn, record))
    except Exception:
        logger.exception(
            f"Panel '{panel_label}' {axis} predicate failed for {urn}; treating as False"
        )
        return False


def evaluate_panel(
    declaration: PanelDeclaration,
    urn: str,
    record: Optional[Any],
    hide_data_gated: bool = False,
) -> PanelState:
    """Evaluate the visible and enabled axes of a single declaration."""
    if hide_data_gated and declaration.is_data_gated:
        return PanelState(declaration=declaration, is_visible=False, is_enabled=False)

    display = declaration.display
    is_visible = _evaluate_predicate(
        display.visible if display else None,
        urn,
        record,
        declaration.label,
        "visible",
    )
    is_enabled = _evaluate_predicate(
        display.enabled if display else None,
        urn,
        record,
        declaration.label,
        "enabled",
    )
    return PanelState(
        declaration=declaration,
        is_visible=is_visible,
        is_enabled=is_enabled,
    )


def evaluate_panels(
    declarations: Sequence[PanelDeclaration],
    urn: str,
    record: Optional[Any],
    hide_data_gated: bool = False,
) -> list[PanelState]:
    """Evaluate every declaration in order.

    Args:
        declarations: Tabs or sidebar sections, in render order
        urn: Identifier of the entity being viewed
        record: Current record snapshot, or None while loading / on error
        hide_data_gated: Hide every panel that declares display predicates.
            Used when there is no record to evaluate them against.

    Returns:
        One PanelState per declaration, same order, no deduplication
    """
    return [
        evaluate_panel(declaration, urn, record, hide_data_gated)
        for declaration in declarations
    ]


def visible_panels(states: Sequence[PanelState]) -> list[PanelState]:
    """Drop hidden panels. Disabled-but-visible panels stay."""
    return [state for state in states if state.is_visible]


def compose_panels(states: Sequence[PanelState]) -> list[ComposedPanel]:
    """Turn visible panel states into render-ready panels."""
    return [
        ComposedPanel(
            name=state.declaration.name,
            component=state.declaration.component,
            properties=dict(state.declaration.properties),
            enabled=state.is_enabled,
        )
        for state in visible_panels(states)
    ]
