# Repository browser schemas.
# Created: 2026-10-19

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from repobrowse.api.v1.schemas.common import APIResponse


class NavigationTargetSchema(APIResponse):
    """Action and parameters a row links to."""

    action: str
    params: dict[str, Any] = Field(default_factory=dict)


class ListingRowSchema(APIResponse):
    """A single file, directory or exit row."""

    kind: str
    id: str | None = None
    name: str
    raw_name: str
    target: NavigationTargetSchema
    last_revised_date: datetime
    last_modified_revision: int
    revision_by: str


class BrowseListingResponse(BaseModel):
    """Repository listing at one path and revision."""

    path: str
    revision_number: int
    rows: list[ListingRowSchema] = []
    error: str | None = None
