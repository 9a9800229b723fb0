"""Entity registry: dispatch from kind tag or path name to a descriptor.

Each registered kind pairs its descriptor with the fetcher that resolves
its records. The set of kinds is closed and registered once at startup.
"""

import logging
from typing import Optional

from catalog_profiles.datasets.store import get_dataset_store
from catalog_profiles.profiles.fetch import EntityFetcher
from catalog_profiles.records.schemas import EntityType

from .base import EntityDescriptor
from .dataset import DatasetEntity
from .schemas import EntityKindSummary

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Registry of entity descriptors keyed by kind tag."""

    def __init__(self):
        self._entities: dict[EntityType, EntityDescriptor] = {}
        self._fetchers: dict[EntityType, EntityFetcher] = {}

    def register(self, entity: EntityDescriptor, fetcher: EntityFetcher) -> None:
        if not isinstance(entity, EntityDescriptor):
            raise TypeError(f"{type(entity).__name__} is not an entity descriptor")
        if entity.type in self._entities:
            raise ValueError(f"Entity type '{entity.type.value}' already registered")
        self._entities[entity.type] = entity
        self._fetchers[entity.type] = fetcher
        logger.info(f"Registered entity: {entity.type.value} (/{entity.get_path_name()})")

    def get(self, entity_type: EntityType) -> Optional[EntityDescriptor]:
        return self._entities.get(entity_type)

    def get_by_path_name(self, path_name: str) -> Optional[EntityDescriptor]:
        for entity in self._entities.values():
            if entity.get_path_name() == path_name:
                return entity
        return None

    def get_fetcher(self, entity_type: EntityType) -> Optional[EntityFetcher]:
        return self._fetchers.get(entity_type)

    def list_types(self) -> list[EntityType]:
        return list(self._entities.keys())

    def count(self) -> int:
        return len(self._entities)

    @staticmethod
    def build_summary(entity: EntityDescriptor) -> EntityKindSummary:
        """Static routing/labeling facts for one kind."""
        return EntityKindSummary(
            type=entity.type,
            path_name=entity.get_path_name(),
            entity_name=entity.get_entity_name(),
            collection_name=entity.get_collection_name(),
            is_search_enabled=entity.is_search_enabled(),
            is_browse_enabled=entity.is_browse_enabled(),
            is_lineage_enabled=entity.is_lineage_enabled(),
            auto_complete_field_name=entity.get_auto_complete_field_name(),
            capabilities=sorted(entity.supported_capabilities(), key=lambda c: c.value),
            tabs=[tab.name for tab in entity.profile.tabs if tab.name],
        )

    def list_summaries(self) -> list[EntityKindSummary]:
        return [self.build_summary(e) for e in self._entities.values()]


# Global registry instance
_registry: Optional[EntityRegistry] = None


def get_entity_registry() -> EntityRegistry:
    """Get the global entity registry instance."""
    global _registry
    if _registry is None:
        _registry = EntityRegistry()
        _registry.register(DatasetEntity(), get_dataset_store())
    return _registry
