"""
NoteKeeper Backend — Health Check Route
=========================================

What:  Liveness probe for Docker health checks and load balancers.
How:   The store is in memory, so there is no dependency to probe; the
       response reports version, note count and uptime.
"""

import time

from fastapi import APIRouter, Depends

from notekeeper import __version__
from notekeeper.schemas.note import HealthResponse
from notekeeper.store import NoteStore, get_note_store

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
