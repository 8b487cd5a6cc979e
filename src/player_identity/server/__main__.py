"""CLI entrypoint: python -m player_identity.server"""

from __future__ import annotations

import argparse
import logging

from player_identity.remote.config import RemoteConfig
from player_identity.server.config import ServerConfig


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = RemoteConfig()
    p = argparse.ArgumentParser(
        prog="player-identity-server",
        description="Player Identity Server: name <-> UUID resolution over REST",
    )
    p.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    p.add_argument("--port", type=int, default=8430, help="Bind port (default: 8430)")

    # Resolution
    p.add_argument("--offline", action="store_true",
                    help="Derive UUIDs from names instead of asking the remote service")
    p.add_argument("--case-sensitive", action="store_true",
                    help="Treat names differing only in case as different players")

    # Remote identity service
    p.add_argument("--profiles-url", default=defaults.profiles_url,
                    help="Bulk name -> UUID endpoint")
    p.add_argument("--session-url", default=defaults.session_url,
                    help="UUID -> profile endpoint")
    p.add_argument("--timeout", type=float, default=defaults.timeout,
                    help=f"Remote request timeout in seconds (default: {defaults.timeout})")

    # Logging
    p.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> ServerConfig:
    remote = RemoteConfig(
        profiles_url=args.profiles_url,
        session_url=args.session_url,
        timeout=args.timeout,
    )
    return ServerConfig(
        host=args.host,
        port=args.port,
        authenticated=not args.offline,
        case_sensitive=args.case_sensitive,
        remote=remote,
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = build_config(args)
    _run_rest(config)


def _run_rest(config: ServerConfig) -> None:
    import uvicorn

    from player_identity.server.rest.app import create_app

    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
