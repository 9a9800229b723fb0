"""Dataset store: serves dataset records from JSON files.

Implements the data-fetch contract for datasets:
- JSON-per-record in the data directory (camelCase, GraphQL-shaped)
- Lazy loading with _loaded guard
- In-memory dict keyed by urn
- Global singleton via get_dataset_store()
- update() applies a mutation and persists the record
"""

import json
import logging
import re
from pathlib import Path
from typing import Optional

from catalog_profiles import config
from catalog_profiles.profiles.schemas import FetchResult
from catalog_profiles.records.schemas import (
    DatasetRecord,
    DatasetUpdateInput,
    EditableDatasetProperties,
)

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def record_filename(urn: str) -> str:
    """Filesystem-safe file name for a urn."""
    return _UNSAFE_FILENAME_CHARS.sub("_", urn).strip("_") + ".json"


class DatasetStore:
    """In-memory dataset records backed by a directory of JSON files."""

    def __init__(self, data_dir: Optional[Path] = None):
        if data_dir is None:
            data_dir = config.DATA_DIR
        self.data_dir = data_dir
        self._records: dict[str, DatasetRecord] = {}
        self._file_map: dict[str, Path] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all dataset records from JSON files."""
        if self._loaded:
            return

        if not self.data_dir.exists():
            logger.warning(f"Dataset data directory not found: {self.data_dir}")
            self._loaded = True
            return

        for json_file in sorted(self.data_dir.glob("*.json")):
            try:
                with open(json_file, "r") as f:
                    data = json.load(f)
                record = DatasetRecord.model_validate(data)
                self._records[record.urn] = record
                self._file_map[record.urn] = json_file
                logger.debug(f"Loaded dataset: {record.urn}")
            except Exception as e:
                logger.error(f"Failed to load dataset from {json_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._records)} dataset records")

    def get(self, urn: str) -> Optional[DatasetRecord]:
        """Get a dataset record by urn."""
        self.load()
        return self._records.get(urn)

    def list_urns(self) -> list[str]:
        self.load()
        return list(self._records.keys())

    def count(self) -> int:
        """Get total number of dataset records."""
        self.load()
        return len(self._records)

    async def fetch(self, urn: str) -> FetchResult:
        """Data-fetch contract: ready with the record, or error if unknown."""
        record = self.get(urn)
        if record is None:
            return FetchResult.failed(f"Dataset '{urn}' not found")
        return FetchResult.ready(record)

    async def update(self, urn: str, update: DatasetUpdateInput) -> FetchResult:
        """Apply a mutation and return the updated record.

        Only the sections present in the update are replaced.
        """
        record = self.get(urn)
        if record is None:
            return FetchResult.failed(f"Dataset '{urn}' not found")

        changes = {}
        if update.editable_properties is not None:
            changes["editable_properties"] = EditableDatasetProperties(
                description=update.editable_properties.description,
            )
        if update.deprecation is not None:
            changes["deprecation"] = update.deprecation
        if update.global_tags is not None:
            changes["global_tags"] = update.global_tags
        if update.ownership is not None:
            changes["ownership"] = update.ownership

        updated = record.model_copy(update=changes)

        if not self.save(updated):
            return FetchResult.failed(f"Failed to persist dataset '{urn}'")

        logger.info(f"Updated dataset {urn}: {sorted(changes)}")
        return FetchResult.ready(updated)

    def save(self, record: DatasetRecord) -> bool:
        """Save a dataset record to its JSON file."""
        self.load()

        json_file = self._file_map.get(
            record.urn, self.data_dir / record_filename(record.urn)
        )

        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)

            with open(json_file, "w") as f:
                json.dump(
                    record.model_dump(mode="json", by_alias=True, exclude_none=True),
                    f,
                    indent=2,
                )
                f.write("\n")

            self._records[record.urn] = record
            self._file_map[record.urn] = json_file

            logger.info(f"Saved dataset: {record.urn} -> {json_file}")
            return True

        except Exception as e:
            logger.error(f"Failed to save dataset {record.urn}: {e}")
            return False

    def reload(self) -> None:
        """Force reload all records."""
        self._loaded = False
        self._records.clear()
        self._file_map.clear()
        self.load()


# Global store instance
_store: Optional[DatasetStore] = None


def get_dataset_store() -> DatasetStore:
    """Get the global dataset store instance."""
    global _store
    if _store is None:
        _store = DatasetStore()
        _store.load()
    return _store
