"""Health and status endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request

from player_identity.server.schemas import HealthResponse, StatusResponse

router = APIRouter()

VERSION = "0.1.0"


@router.get("/health")
async def health(request: Request) -> HealthResponse:
    elapsed = time.monotonic() - request.app.state.start_time
    return HealthResponse(
        status="ok",
        version=VERSION,
        uptime_seconds=round(elapsed, 1),
    )


@router.get("/status")
async def status(request: Request) -> StatusResponse:
    elapsed = time.monotonic() - request.app.state.start_time
    resolver = request.app.state.resolver
    sessions = request.app.state.sessions

    return StatusResponse(
        status="ok",
        version=VERSION,
        uptime_seconds=round(elapsed, 1),
        authenticated=resolver.authenticated,
        cached_identities=resolver.cache.size,
        online_players=len(sessions.online()),
    )
