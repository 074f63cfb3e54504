"""API-only server for ``repobrowse``.

Starts the versioned ``/api/v1/`` routers over a revision store. Without an
explicit store the app browses an empty in-memory store, which is enough for
local development and the OpenAPI docs.
"""

from __future__ import annotations

import logging

from repobrowse.browsing.protocol import RevisionStoreProtocol

logger = logging.getLogger(__name__)


def create_api_app(store: RevisionStoreProtocol | None = None):
    """Build the FastAPI application with the v1 API routers."""
    from fastapi import FastAPI

    from repobrowse import __version__
    from repobrowse.api.v1 import mount_v1_routers
    from repobrowse.memory_store import MemoryRevisionStore

    app = FastAPI(
        title="repobrowse API",
        description="Revision-aware browsing of submission repositories.",
        version=__version__,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
    )
    app.state.revision_store = store if store is not None else MemoryRevisionStore()

    mount_v1_routers(app)

    return app


def run_api_server(host: str = "127.0.0.1", port: int = 8890, log_level: str = "info") -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    logger.info("Serving repobrowse API on http://%s:%d/api/v1/docs", host, port)
    uvicorn.run(create_api_app(), host=host, port=port, log_level=log_level.lower())
