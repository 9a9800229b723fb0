"""API routes for the dataset store."""

from fastapi import APIRouter

from catalog_profiles.datasets.store import get_dataset_store

router = APIRouter(prefix="/datasets", tags=["datasets"])


@router.get("", response_model=list[str])
async def list_dataset_urns():
    """List urns of all stored datasets."""
    return get_dataset_store().list_urns()


@router.post("/reload")
async def reload_datasets():
    """Force reload dataset records from disk."""
    store = get_dataset_store()
    store.reload()
    return {"reloaded": True, "count": store.count()}
