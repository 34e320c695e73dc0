"""
Basic usage examples for the tyria client.

This example demonstrates:
- Client initialization from TYRIA_* environment variables
- Public and authenticated endpoints
- Handling Ok/Err results
"""

import asyncio
import logging

from tyria import AuthenticationError, TyriaClient


async def main():
    """Main example function."""

    logging.basicConfig(level=logging.INFO)

    async with TyriaClient() as client:
        # Public bulk endpoint; unknown IDs are left out of the result
        print("📋 Fetching races...")
        result = await client.races.get_many(["Asura", "Charr", "Kodan"])
        if result.is_ok():
            for race in result.value:
                print(f"  • {race.name} ({len(race.skills)} racial skills)")
        else:
            print(f"❌ {result.error}")
        print()

        # A documented failure comes back as a value
        print("🔍 Fetching achievement 42...")
        result = await client.achievements.get(42)
        if result.is_err():
            print(f"❌ {result.error.message} (HTTP {result.error.status_code})")
        else:
            print(f"✅ {result.value.name}")
        print()

        # Authenticated endpoint
        print("🔐 Fetching account...")
        try:
            account = (await client.account.get()).unwrap()
            print(f"✅ {account.name}, world {account.world}")
        except AuthenticationError:
            print("⚠️  Set TYRIA_TOKEN to an API key to query the account")


if __name__ == "__main__":
    asyncio.run(main())
