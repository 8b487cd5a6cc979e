"""Error types and exception-to-HTTP mapping for the server."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from player_identity.core.exceptions import IdentityError


class IdentityNotFoundError(IdentityError):
    """No tier of the resolver knows the requested name or UUID."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} '{key}' not found")


class RemoteUnavailableError(IdentityError):
    """The remote identity service failed while answering a lookup."""

    def __init__(self, key: str, reason: str | None = None) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"remote lookup for '{key}' failed: {reason or 'unknown error'}")


async def identity_not_found_handler(request: Request, exc: IdentityNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={
            "error": "not_found",
            "detail": str(exc),
            "type": exc.kind,
            "key": exc.key,
        },
    )


async def remote_unavailable_handler(request: Request, exc: RemoteUnavailableError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content={"error": "remote_unavailable", "detail": str(exc)},
    )


EXCEPTION_HANDLERS = {
    IdentityNotFoundError: identity_not_found_handler,
    RemoteUnavailableError: remote_unavailable_handler,
}
