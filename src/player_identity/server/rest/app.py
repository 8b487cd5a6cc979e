"""FastAPI application factory."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from player_identity.identity import IdentityResolver
from player_identity.remote import MojangIdentityService
from player_identity.server.config import ServerConfig
from player_identity.server.errors import EXCEPTION_HANDLERS
from player_identity.server.rest.middleware import RequestLoggingMiddleware
from player_identity.server.rest.routers import health, identities
from player_identity.server.rest.routers import sessions as session_routes
from player_identity.sessions import InMemorySessionDirectory

if TYPE_CHECKING:
    from player_identity.core.protocols import IdentityService

logger = logging.getLogger(__name__)


def create_app(
    config: ServerConfig,
    *,
    sessions: InMemorySessionDirectory | None = None,
    remote: "IdentityService | None" = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``sessions`` and ``remote`` replace the defaults; a remote
    service passed in is owned by the caller and not closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Startup
        app.state.config = config
        app.state.start_time = time.monotonic()
        app.state.sessions = (
            sessions
            if sessions is not None
            else InMemorySessionDirectory(case_sensitive=config.case_sensitive)
        )

        owned_remote: MojangIdentityService | None = None
        service = remote
        if config.authenticated and service is None:
            owned_remote = MojangIdentityService(config.remote)
            service = owned_remote
            logger.info("Remote identity service at %s", config.remote.profiles_url)

        app.state.resolver = IdentityResolver(
            app.state.sessions,
            service if config.authenticated else None,
            authenticated=config.authenticated,
            case_sensitive=config.case_sensitive,
        )
        logger.info(
            "Player identity server started (%s mode)",
            "authenticated" if config.authenticated else "offline",
        )
        yield

        # Shutdown
        if owned_remote is not None:
            await owned_remote.aclose()
            logger.info("Remote identity client closed")
        logger.info(
            "Player identity server stopped with %d cached identities",
            app.state.resolver.cache.size,
        )

    app = FastAPI(
        title="Player Identity",
        description="Player name <-> UUID resolution with session, remote and offline fallbacks",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging
    app.add_middleware(RequestLoggingMiddleware)

    # Exception handlers
    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)

    # Routers
    prefix = "/api/v1"
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(identities.router, prefix=prefix, tags=["identities"])
    app.include_router(session_routes.router, prefix=prefix, tags=["sessions"])

    return app
