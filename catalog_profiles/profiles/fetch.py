"""Data-fetch contract consumed by the profile composer.

The fetcher is the only asynchronous boundary of a profile view: one
outstanding fetch per urn, results discarded if the view goes away.
"""

from typing import Any, Protocol, runtime_checkable

from .schemas import FetchResult


@runtime_checkable
class EntityFetcher(Protocol):
    """Protocol for record sources (GraphQL client, in-memory store...)."""

    async def fetch(self, urn: str) -> FetchResult: ...

    async def update(self, urn: str, update: Any) -> FetchResult:
        """Apply a mutation and return the updated record."""
        ...
