"""Dataset records served from JSON files (data-fetch contract for datasets)."""

from .store import DatasetStore, get_dataset_store

__all__ = ["DatasetStore", "get_dataset_store"]
