"""
Trapper Keeper Backend — Health Check Route
============================================

What:  Liveness endpoint for Docker health checks and load balancer probes.
How:   The service has no external dependencies, so being able to read the
       store is the whole check. Uptime counts from app.state.started_at,
       which the application lifespan stamps on startup.
"""

import time

from fastapi import APIRouter, Depends, Request

from trapperkeeper import __version__
from trapperkeeper.schemas.health import HealthResponse
from trapperkeeper.store import NoteStore, get_note_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> HealthResponse:
    """Report status, version, store size and uptime."""
    started_at = request.app.state.started_at
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        uptime_seconds=round(time.time() - started_at, 2),
    )
