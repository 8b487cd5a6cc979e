"""Live-session endpoints for reporting joins and quits."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from player_identity.server.dependencies import get_sessions
from player_identity.server.schemas import ConnectRequest, DisconnectRequest, SessionResponse
from player_identity.sessions import InMemorySessionDirectory

router = APIRouter()


@router.post("/sessions/connect")
async def connect(
    body: ConnectRequest,
    sessions: InMemorySessionDirectory = Depends(get_sessions),
) -> SessionResponse:
    sessions.connect(body.name, body.uuid)
    return SessionResponse(uuid=body.uuid, online=True)


@router.post("/sessions/disconnect")
async def disconnect(
    body: DisconnectRequest,
    sessions: InMemorySessionDirectory = Depends(get_sessions),
) -> dict[str, bool]:
    return {"disconnected": sessions.disconnect(body.uuid)}
