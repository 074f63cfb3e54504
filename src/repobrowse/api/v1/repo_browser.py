# Repo browser router - listing of a submission repository at a revision.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from repobrowse.api.deps import get_revision_store
from repobrowse.api.v1.schemas.repo_browser import BrowseListingResponse, ListingRowSchema
from repobrowse.browsing import paths
from repobrowse.browsing.errors import (
    BackendQueryFailure,
    PathTraversalRejected,
    RevisionNotFound,
)
from repobrowse.browsing.listing import build_listing
from repobrowse.browsing.protocol import RevisionStoreProtocol

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Repo Browser"])


@router.get(
    "/assignments/{assignment}/groupings/{grouping_id}/repo_browser",
    response_model=BrowseListingResponse,
)
async def repo_browser(
    assignment: str,
    grouping_id: str,
    path: str = "/",
    previous_path: str | None = None,
    revision_number: int | None = Query(None, ge=0),
    store: RevisionStoreProtocol = Depends(get_revision_store),
):
    """List one directory of a grouping's repository.

    The assignment identifier is the repository folder the listing is
    confined to. ``previous_path`` defaults to the parent of ``path``.
    """
    try:
        relative = paths.normalize_relative(path)
        if previous_path is None:
            previous = paths.split(relative)[0] or paths.ROOT
        else:
            previous = paths.normalize_relative(previous_path)
    except PathTraversalRejected as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        revision = await store.get_revision(grouping_id, revision_number)
    except Exception as e:
        logger.exception("Revision lookup failed for %s", grouping_id)
        raise HTTPException(status_code=502, detail="Revision store unavailable") from e
    if revision is None:
        raise HTTPException(
            status_code=404, detail=str(RevisionNotFound(grouping_id, revision_number))
        )

    try:
        listing = await build_listing(
            revision,
            root_folder=assignment,
            relative_path=relative,
            previous_relative_path=previous,
            grouping_id=grouping_id,
            assignment_id=assignment,
        )
    except PathTraversalRejected as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except BackendQueryFailure as e:
        logger.exception("Listing %s failed for grouping %s", relative, grouping_id)
        raise HTTPException(status_code=502, detail=str(e)) from e

    error = None
    if listing.error is not None:
        logger.warning("Incomplete listing for grouping %s: %s", grouping_id, listing.error)
        error = str(listing.error)

    return BrowseListingResponse(
        path=relative,
        revision_number=revision.revision_number,
        rows=[ListingRowSchema.model_validate(row.to_dict()) for row in listing],
        error=error,
    )
