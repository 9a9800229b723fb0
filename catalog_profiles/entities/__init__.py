"""Entity descriptors - one per catalog kind, dispatched by kind tag.

A descriptor is a declaration table plus pure functions: override
properties, profile composition, preview/search projection.
"""

from .schemas import EntityKindSummary, IconSpec, IconStyleType
from .base import EntityDescriptor
from .dataset import DATASET_PROFILE, DatasetEntity

__all__ = [
    "DATASET_PROFILE",
    "DatasetEntity",
    "EntityDescriptor",
    "EntityKindSummary",
    "IconSpec",
    "IconStyleType",
]
