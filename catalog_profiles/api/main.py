"""Catalog Profiles API.

Serves composed entity profiles and summary cards:
- Entity kinds (routing names, capabilities, tabs)
- Profiles (header, sub header, sidebar sections, tabs) for an urn
- Preview, search and lineage cards
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_profiles import __version__, config
from catalog_profiles.api.routes import datasets, entities
from catalog_profiles.datasets.store import get_dataset_store
from catalog_profiles.entities.registry import get_entity_registry

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: pre-load store and registry
    logger.info("Loading dataset records...")
    store = get_dataset_store()
    logger.info(f"Loaded {store.count()} datasets from {store.data_dir}")
    if store.data_dir == config.BUNDLED_DATA_DIR:
        logger.warning(
            "Serving bundled sample datasets; updates are written into the "
            "installed package. Set CATALOG_PROFILES_DATA_DIR to a writable directory."
        )

    logger.info("Registering entity kinds...")
    registry = get_entity_registry()
    logger.info(f"Registered {registry.count()} entity kinds")

    logger.info("Catalog Profiles API ready")
    yield
    logger.info("Shutting down Catalog Profiles API")


app = FastAPI(
    title="Catalog Profiles API",
    description="""
## Entity Profile Composition

Composes catalog entity profiles from fetched records. Consumers call this
API to get render-ready panel lists and dispatch each panel's component key
to their own component library.

### Key Endpoints

- `GET /v1/entities` - List entity kinds
- `GET /v1/entities/{path}/profile?urn=...` - Composed profile
- `GET /v1/entities/{path}/preview?urn=...` - Preview card
- `POST /v1/entities/{path}/search-card` - Search card from a search hit
""",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(entities.router, prefix="/v1")
app.include_router(datasets.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Catalog Profiles API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "entities": "/v1/entities",
            "datasets": "/v1/datasets",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "entity_kinds": get_entity_registry().count(),
        "datasets_loaded": get_dataset_store().count(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_profiles.api.main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=True,
    )
