# Shared FastAPI dependencies for the API layer.
# Created: 2026-10-19

from __future__ import annotations

from fastapi import HTTPException, Request

from repobrowse.browsing.protocol import RevisionStoreProtocol


def get_revision_store(request: Request) -> RevisionStoreProtocol:
    """The revision store attached to the running app."""
    store = getattr(request.app.state, "revision_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="No revision store configured")
    return store
