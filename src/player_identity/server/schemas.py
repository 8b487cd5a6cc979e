"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


# ========== Health ==========

class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float


class StatusResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    authenticated: bool
    cached_identities: int
    online_players: int


# ========== Identities ==========

class IdResponse(BaseModel):
    name: str
    uuid: UUID
    source: str


class NameResponse(BaseModel):
    uuid: UUID
    name: str
    status: str
    source: str


class AddIdentityRequest(BaseModel):
    name: str = Field(min_length=1)
    uuid: UUID


class AddIdentityResponse(BaseModel):
    name: str
    uuid: UUID
    stored: bool


class IdentityItem(BaseModel):
    name: str
    uuid: UUID


class SnapshotResponse(BaseModel):
    identities: list[IdentityItem]
    total: int


# ========== Sessions ==========

class ConnectRequest(BaseModel):
    name: str = Field(min_length=1)
    uuid: UUID


class DisconnectRequest(BaseModel):
    uuid: UUID


class SessionResponse(BaseModel):
    uuid: UUID
    online: bool
