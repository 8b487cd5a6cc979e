"""Mojang-compatible remote identity service client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any
from uuid import UUID

import httpx

from player_identity.core.exceptions import MalformedResponseError, RemoteLookupError
from player_identity.core.utils import parse_uuid, undashed
from player_identity.remote.config import RemoteConfig

logger = logging.getLogger(__name__)

SERVICE_NAME = "mojang"

# Session server answers these for UUIDs it has never issued.
_UNKNOWN_STATUSES = frozenset({204, 404})


class MojangIdentityService:
    """IdentityService backed by the Mojang profile APIs.

    Names are resolved in batches through the bulk profiles endpoint;
    UUIDs are resolved one request each through the session server.
    Every failure surfaces as RemoteLookupError.

    Usage:
        async with MojangIdentityService() as service:
            ids = await service.lookup_ids_by_names(["Notch"])
    """

    def __init__(
        self,
        config: RemoteConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or RemoteConfig()
        self._client = httpx.AsyncClient(timeout=self._config.timeout, transport=transport)

    @property
    def config(self) -> RemoteConfig:
        return self._config

    async def lookup_ids_by_names(self, names: Iterable[str]) -> dict[str, UUID]:
        """Map names to UUIDs, keyed by the spelling the service returns."""
        unique = list(dict.fromkeys(names))
        size = max(1, self._config.batch_size)
        result: dict[str, UUID] = {}
        for start in range(0, len(unique), size):
            if start:
                await self._pause()
            batch = unique[start:start + size]
            response = await self._request("POST", self._config.profiles_url, json=batch)
            self._check_status(response)
            for item in self._json(response, expect=list):
                name, uuid = _parse_profile(item)
                result[name] = uuid
        logger.debug("Resolved %d of %d names remotely", len(result), len(unique))
        return result

    async def lookup_names_by_ids(self, ids: Iterable[UUID]) -> dict[UUID, str]:
        """Map UUIDs to their current names. Unknown UUIDs are omitted."""
        result: dict[UUID, str] = {}
        for index, uuid in enumerate(dict.fromkeys(ids)):
            if index:
                await self._pause()
            url = f"{self._config.session_url.rstrip('/')}/{undashed(uuid)}"
            response = await self._request("GET", url)
            if response.status_code in _UNKNOWN_STATUSES:
                continue
            self._check_status(response)
            body = self._json(response, expect=dict)
            error = body.get("errorMessage") or body.get("error") or body.get("cause")
            if error:
                raise RemoteLookupError(SERVICE_NAME, str(error))
            name = body.get("name")
            if not isinstance(name, str) or not name:
                raise MalformedResponseError(SERVICE_NAME, f"profile for {uuid} has no name")
            result[uuid] = name
        return result

    async def _pause(self) -> None:
        """Space out consecutive requests to stay under the service rate limit."""
        if self._config.request_delay > 0:
            await asyncio.sleep(self._config.request_delay)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise RemoteLookupError(SERVICE_NAME, f"{method} {url}: {exc}") from exc

    @staticmethod
    def _check_status(response: httpx.Response) -> None:
        if not response.is_success:
            raise RemoteLookupError(
                SERVICE_NAME,
                f"{response.request.method} {response.request.url}",
                status_code=response.status_code,
            )

    @staticmethod
    def _json(response: httpx.Response, expect: type) -> Any:
        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponseError(SERVICE_NAME, "response is not JSON") from exc
        if not isinstance(body, expect):
            raise MalformedResponseError(
                SERVICE_NAME, f"expected a JSON {expect.__name__}, got {type(body).__name__}"
            )
        return body

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> MojangIdentityService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _parse_profile(item: Any) -> tuple[str, UUID]:
    """Extract (name, uuid) from one {"id": ..., "name": ...} entry."""
    if not isinstance(item, dict):
        raise MalformedResponseError(SERVICE_NAME, "profile entry is not an object")
    name = item.get("name")
    raw_id = item.get("id")
    uuid = parse_uuid(raw_id) if isinstance(raw_id, str) else None
    if not isinstance(name, str) or not name or uuid is None:
        raise MalformedResponseError(SERVICE_NAME, f"bad profile entry: {item!r}")
    return name, uuid
