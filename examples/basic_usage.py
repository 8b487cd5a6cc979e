"""Basic usage example for Player Identity."""

import asyncio
from uuid import uuid4

from player_identity import (
    ChainedIdentityService,
    IdentityResolver,
    InMemorySessionDirectory,
    MojangIdentityService,
    RemoteConfig,
)


class PrintingStore:
    """Stand-in for a real persistence layer."""

    def save_all(self, mappings):
        for name, uuid in sorted(mappings.items()):
            print(f"  saved {name} -> {uuid}")


async def main():
    sessions = InMemorySessionDirectory()

    # =================================================================
    # OFFLINE MODE: UUIDs derived from names
    # =================================================================

    offline = IdentityResolver(sessions, authenticated=False)

    alice = await offline.resolve_id("Alice")
    print(f"Alice (offline) -> {alice}")
    print(f"{alice} -> {await offline.resolve_name(alice)}")
    print(f"random UUID -> {await offline.resolve_name(uuid4())}")  # "unknown"

    # =================================================================
    # ONLINE MODE: session directory first, then the remote service
    # =================================================================

    sessions.connect("Grumm", uuid4())

    mirror = MojangIdentityService(RemoteConfig(profiles_url="http://localhost:9/profiles"))
    public = MojangIdentityService()
    async with mirror, public:
        online = IdentityResolver(
            sessions,
            ChainedIdentityService(mirror, public),
            authenticated=True,
        )

        result = await online.lookup_id("Grumm")
        print(f"Grumm -> {result.uuid} (from {result.source.value})")

        result = await online.lookup_id("Notch")
        print(f"Notch -> {result.uuid} ({result.status.value})")

        # =============================================================
        # BULK EXPORT
        # =============================================================

        print("Exporting cache:")
        online.export_to(PrintingStore())


if __name__ == "__main__":
    asyncio.run(main())
