#!/usr/bin/env python3
"""
Basic usage example for Vault Client Python SDK
"""

import asyncio

from vault_client_sdk import ClientSettings, VaultClient, kv2


async def main():
    # Explicit values win; anything omitted falls back to VAULT_* variables
    settings = ClientSettings(
        address="http://127.0.0.1:8200",
        token="your-token-here",
    )

    async with VaultClient(settings) as client:
        health = await client.status()
        print(f"Vault {health.version} is {health.status.value}")

        # Write a secret
        meta = await kv2.set(
            client,
            "secret",
            "database",
            {"username": "app", "password": "super-secret-password"},
        )
        print(f"Wrote version {meta.version}")

        # Read it back
        secret = await kv2.read(client, "secret", "database")
        print(f"Read password: {secret['password']}")

        # List secrets
        keys = await kv2.list(client, "secret", "")
        print(f"Found {len(keys)} secrets")

        # Inspect the token in use
        info = await client.lookup()
        print(f"Token policies: {info.policies}, ttl {info.ttl}s")


if __name__ == "__main__":
    asyncio.run(main())
