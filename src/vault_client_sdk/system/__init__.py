"""
System backend operations: health, seal state, mounts and response wrapping.
"""

from typing import TYPE_CHECKING, Optional

from .. import api
from ..api.sys.requests import ReadHealthRequest, SealRequest, UnsealRequest
from ..api.sys.responses import ReadHealthResponse, ServerStatus, UnsealResponse
from . import auth, mount, wrapping

if TYPE_CHECKING:
    from ..client import VaultClient

__all__ = ["auth", "mount", "wrapping", "health", "status", "seal", "unseal"]


async def health(client: "VaultClient") -> ReadHealthResponse:
    """Read the server's health. No token is sent."""
    return await api.exec_with_result(client, ReadHealthRequest())


async def status(client: "VaultClient") -> ServerStatus:
    return (await health(client)).status


async def seal(client: "VaultClient") -> None:
    await api.exec_with_empty(client, SealRequest())


async def unseal(
    client: "VaultClient",
    key: Optional[str] = None,
    reset: Optional[bool] = None,
    migrate: Optional[bool] = None,
) -> UnsealResponse:
    """Submit one unseal key share, or reset the unseal progress."""
    endpoint = UnsealRequest(key=key, reset=reset, migrate=migrate)
    return await api.exec_with_result(client, endpoint)
