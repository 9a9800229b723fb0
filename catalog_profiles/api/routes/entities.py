"""API routes for entity profiles, previews and search cards.

Consumer apps fetch a composed profile for an urn and dispatch each panel's
component key to their own component library.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from catalog_profiles.entities.base import EntityDescriptor
from catalog_profiles.entities.registry import get_entity_registry
from catalog_profiles.entities.schemas import EntityKindSummary, IconSpec, IconStyleType
from catalog_profiles.previews.schemas import LineageVizConfig, PreviewType, SummaryViewModel
from catalog_profiles.profiles.composer import compose_profile
from catalog_profiles.profiles.fetch import EntityFetcher
from catalog_profiles.profiles.schemas import EntityProfile, FetchState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/entities", tags=["entities"])


def _get_entity_or_404(path_name: str) -> EntityDescriptor:
    """Get an entity descriptor by path name or raise 404."""
    registry = get_entity_registry()
    entity = registry.get_by_path_name(path_name)
    if entity is None:
        available = [registry.get(t).get_path_name() for t in registry.list_types()]
        raise HTTPException(
            status_code=404,
            detail=f"Entity type '{path_name}' not found. Available: {available}",
        )
    return entity


def _get_fetcher(entity: EntityDescriptor) -> EntityFetcher:
    return get_entity_registry().get_fetcher(entity.type)


async def _get_record_or_404(entity: EntityDescriptor, urn: str):
    result = await _get_fetcher(entity).fetch(urn)
    if result.state != FetchState.READY or result.record is None:
        raise HTTPException(
            status_code=404,
            detail=result.error or f"{entity.get_entity_name()} '{urn}' not found",
        )
    return result.record


# ── Kind endpoints ───────────────────────────────────────


@router.get("", response_model=list[EntityKindSummary])
async def list_entity_kinds():
    """List registered entity kinds with their routing and capability facts."""
    return get_entity_registry().list_summaries()


@router.get("/{path_name}", response_model=EntityKindSummary)
async def get_entity_kind(path_name: str):
    """Get static facts for one entity kind."""
    return get_entity_registry().build_summary(_get_entity_or_404(path_name))


@router.get("/{path_name}/icon", response_model=IconSpec)
async def get_entity_icon(
    path_name: str,
    style: IconStyleType = Query(IconStyleType.ACCENT, description="Icon variant"),
    font_size: int = Query(14, ge=1, description="Font size in px"),
):
    """Resolve the icon for an entity kind and style variant."""
    return _get_entity_or_404(path_name).icon(font_size, style)


# ── Profile ──────────────────────────────────────────────


@router.get("/{path_name}/profile", response_model=EntityProfile)
async def get_entity_profile(
    path_name: str,
    urn: str = Query(..., description="Entity urn"),
    tab: Optional[str] = Query(None, description="Requested tab name"),
):
    """Compose the profile page for an entity.

    A failed fetch still returns a profile, with state 'error' and only the
    panels that do not depend on data.
    """
    entity = _get_entity_or_404(path_name)
    return await entity.render_profile(urn, _get_fetcher(entity), selected_tab=tab)


@router.patch("/{path_name}", response_model=EntityProfile)
async def update_entity(
    path_name: str,
    request: dict,
    urn: str = Query(..., description="Entity urn"),
):
    """Apply an update (description, deprecation, tags, owners) and return the new profile."""
    entity = _get_entity_or_404(path_name)

    try:
        update = entity.update_model.model_validate(request)
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Invalid update: {e}")

    await _get_record_or_404(entity, urn)

    result = await _get_fetcher(entity).update(urn, update)
    if result.state != FetchState.READY:
        logger.error(f"Update failed for {urn}: {result.error}")
        raise HTTPException(status_code=500, detail=result.error)

    logger.info(f"Updated {entity.get_entity_name()}: {urn}")
    return compose_profile(urn, result, entity.profile)


# ── Previews ─────────────────────────────────────────────


@router.get("/{path_name}/preview", response_model=SummaryViewModel)
async def get_entity_preview(
    path_name: str,
    urn: str = Query(..., description="Entity urn"),
    preview_type: PreviewType = Query(PreviewType.PREVIEW),
):
    """Project an entity into a preview card."""
    entity = _get_entity_or_404(path_name)
    record = await _get_record_or_404(entity, urn)
    return entity.render_preview(preview_type, record)


@router.get("/{path_name}/lineage", response_model=LineageVizConfig)
async def get_entity_lineage_config(
    path_name: str,
    urn: str = Query(..., description="Entity urn"),
):
    """Lineage graph node configuration for an entity."""
    entity = _get_entity_or_404(path_name)
    record = await _get_record_or_404(entity, urn)
    return entity.get_lineage_viz_config(record)


@router.post("/{path_name}/search-card", response_model=SummaryViewModel)
async def render_search_card(path_name: str, request: dict):
    """Project a search hit (entity + matched fields + insights) into a card."""
    entity = _get_entity_or_404(path_name)

    try:
        result = entity.search_result_model.model_validate(request)
    except Exception as e:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid search result: {e}",
        )

    return entity.render_search(result)
