"""Custom exceptions for player identity resolution."""


class IdentityError(Exception):
    """Base exception for identity operations."""

    pass


class RemoteLookupError(IdentityError):
    """Raised when the remote identity service cannot answer a lookup."""

    def __init__(
        self,
        service: str,
        message: str = "",
        status_code: int | None = None,
    ):
        self.service = service
        self.status_code = status_code
        detail = message or "lookup failed"
        if status_code is not None:
            detail = f"{detail} (HTTP {status_code})"
        super().__init__(f"{service}: {detail}")


class MalformedResponseError(RemoteLookupError):
    """Raised when the remote service answers with a body we cannot parse."""

    pass
