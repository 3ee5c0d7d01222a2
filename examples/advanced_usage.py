#!/usr/bin/env python3
"""
Advanced usage examples for Vault Client Python SDK
Demonstrates logins, typed secrets, version management and response wrapping
"""

import asyncio
import logging

from pydantic import BaseModel

from vault_client_sdk import AppRoleLogin, APIError, VaultClient, api, kv2, system
from vault_client_sdk.api.kv2.requests import ReadSecretRequest, SecretMetadataOptions

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class DatabaseCredentials(BaseModel):
    username: str
    password: str


async def login_example(client: VaultClient):
    """Log in with AppRole and renew the resulting token"""
    logger.info("=== Login Example ===")

    auth = await client.login("approle", AppRoleLogin("your-role-id", "your-secret-id"))
    logger.info(f"Logged in with policies {auth.policies}, lease {auth.lease_duration}s")

    renewed = await client.renew("1h")
    logger.info(f"Renewed token, lease now {renewed.lease_duration}s")


async def versioning_example(client: VaultClient):
    """Walk a secret through write, soft delete, undelete and destroy"""
    logger.info("=== Versioning Example ===")

    await kv2.set_metadata(client, "secret", "db", SecretMetadataOptions(max_versions=5))

    await kv2.set(client, "secret", "db", DatabaseCredentials(username="app", password="v1"))
    await kv2.set(client, "secret", "db", DatabaseCredentials(username="app", password="v2"))

    current = await kv2.read(client, "secret", "db", DatabaseCredentials)
    logger.info(f"Current password: {current.password}")

    await kv2.delete_versions(client, "secret", "db", [1])
    await kv2.undelete_versions(client, "secret", "db", [1])
    restored = await kv2.read_version(client, "secret", "db", 1, DatabaseCredentials)
    logger.info(f"Restored version 1 password: {restored.password}")

    await kv2.destroy_versions(client, "secret", "db", [1])
    try:
        await kv2.read_version(client, "secret", "db", 1)
    except APIError as e:
        logger.info(f"Version 1 is gone for good (HTTP {e.code})")

    metadata = await kv2.read_metadata(client, "secret", "db")
    logger.info(f"Secret has versions {sorted(metadata.versions)}")


async def wrapping_example(client: VaultClient):
    """Hand a secret over through a single-use wrapping token"""
    logger.info("=== Wrapping Example ===")

    wrapped = await api.exec_with_wrap(client, ReadSecretRequest(mount="secret", path="db"), ttl="5m")
    logger.info(f"Wrapping token expires in {wrapped.info.ttl}s")

    lookup = await wrapped.lookup(client)
    logger.info(f"Wrapped response came from {lookup.creation_path}")

    secret = await wrapped.unwrap(client)
    logger.info(f"Unwrapped secret data keys: {list(secret.data)}")


async def admin_example(client: VaultClient):
    """Inspect mounts and auth methods"""
    logger.info("=== Admin Example ===")

    for path, mount in (await system.mount.list(client)).items():
        logger.info(f"{path}: {mount.mount_type} ({mount.description})")

    for path, method in (await system.auth.list(client)).items():
        logger.info(f"{path}: {method.mount_type} issuing {method.config.token_type} tokens")


async def main():
    async with VaultClient() as client:
        await login_example(client)
        await versioning_example(client)
        await wrapping_example(client)
        await admin_example(client)
        await client.revoke()


if __name__ == "__main__":
    asyncio.run(main())
