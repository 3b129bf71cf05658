"""
Notekeeper — Health Check Routes
==================================

What:  GET /health for monitoring probes and GET /api/test, the liveness
       ping the frontend calls on startup.
How:   /health loads the notes document through the service; if that fails
       the service is reported unhealthy with HTTP 503.
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from notekeeper import __version__
from notekeeper.exceptions import StorageError
from notekeeper.models.note import utc_now
from notekeeper.schemas.note import HealthResponse, PingResponse
from notekeeper.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Set once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"description": "Notes document unavailable", "model": HealthResponse}},
)
async def health_check(
    response: Response,
    service: NoteService = Depends(get_note_service),
) -> HealthResponse:
    """
    Check that the notes document can be loaded.

    Status levels:
        healthy:   Notes document readable (HTTP 200)
        unhealthy: Notes document missing-and-uncreatable or corrupt (HTTP 503)
    """
    storage_status = "available"
    overall = "healthy"

    try:
        await service.list_notes()
    except StorageError as e:
        storage_status = "unavailable"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: notes document unavailable: %s", e.context)

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )


@router.get(
    "/api/test",
    response_model=PingResponse,
    summary="API liveness ping",
)
async def ping() -> PingResponse:
    return PingResponse(
        message="API is working",
        timestamp=utc_now().isoformat(),
        version=__version__,
    )
