"""Preview and search-card projections of catalog records."""

from .schemas import LineageVizConfig, PreviewType, SearchSnippet, SummaryViewModel
from .projector import (
    build_search_snippet,
    get_lineage_viz_config,
    project_preview,
    project_search_result,
)

__all__ = [
    "LineageVizConfig",
    "PreviewType",
    "SearchSnippet",
    "SummaryViewModel",
    "build_search_snippet",
    "get_lineage_viz_config",
    "project_preview",
    "project_search_result",
]
