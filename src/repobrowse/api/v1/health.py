# Health router.
# Created: 2026-10-19

from __future__ import annotations

from fastapi import APIRouter

from repobrowse.api.v1.schemas.common import StatusResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=StatusResponse)
async def get_health_status():
    """Liveness probe."""
    return StatusResponse()
