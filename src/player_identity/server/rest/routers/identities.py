"""Identity resolution REST endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from player_identity.identity import IdentityResolver, ResolutionStatus
from player_identity.server.dependencies import get_resolver
from player_identity.server.errors import IdentityNotFoundError, RemoteUnavailableError
from player_identity.server.schemas import (
    AddIdentityRequest,
    AddIdentityResponse,
    IdentityItem,
    IdResponse,
    NameResponse,
    SnapshotResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/identities/by-name/{name}")
async def resolve_id(
    name: str,
    resolver: IdentityResolver = Depends(get_resolver),
) -> IdResponse:
    """Resolve a player name to a UUID."""
    result = await resolver.lookup_id(name)
    if result.status is ResolutionStatus.FAILED:
        raise RemoteUnavailableError(name, result.error)
    if result.uuid is None:
        raise IdentityNotFoundError("name", name)
    return IdResponse(name=name, uuid=result.uuid, source=result.source.value)


@router.get("/identities/by-uuid/{uuid}")
async def resolve_name(
    uuid: str,
    resolver: IdentityResolver = Depends(get_resolver),
) -> NameResponse:
    """Resolve a UUID to a player name.

    Offline servers answer "unknown" for UUIDs nothing local has seen.
    """
    result = await resolver.lookup_name(uuid)
    if result.status is ResolutionStatus.FAILED:
        raise RemoteUnavailableError(uuid, result.error)
    name = result.display_name
    if result.uuid is None or name is None:
        raise IdentityNotFoundError("uuid", uuid)
    return NameResponse(
        uuid=result.uuid,
        name=name,
        status=result.status.value,
        source=result.source.value,
    )


@router.post("/identities")
async def add_identity(
    body: AddIdentityRequest,
    resolver: IdentityResolver = Depends(get_resolver),
) -> AddIdentityResponse:
    """Register a name/UUID pair. Existing bindings are never replaced."""
    stored = resolver.add(body.name, body.uuid)
    if not stored:
        logger.debug("Ignored conflicting or duplicate pair %s/%s", body.name, body.uuid)
    return AddIdentityResponse(name=body.name, uuid=body.uuid, stored=stored)


@router.get("/identities")
async def list_identities(
    resolver: IdentityResolver = Depends(get_resolver),
) -> SnapshotResponse:
    """Every cached name/UUID pair."""
    snapshot = resolver.snapshot()
    return SnapshotResponse(
        identities=[IdentityItem(name=n, uuid=u) for n, u in sorted(snapshot.items())],
        total=len(snapshot),
    )
