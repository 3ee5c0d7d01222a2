"""
Auth method mounts.
"""

from typing import TYPE_CHECKING, Dict

from .. import api
from ..api.sys.requests import DisableAuthRequest, EnableAuthRequest, ListAuthsRequest
from ..api.sys.responses import AuthResponse

if TYPE_CHECKING:
    from ..client import VaultClient


async def enable(client: "VaultClient", path: str, engine_type: str, **opts) -> None:
    """Enable an auth method of ``engine_type`` at ``path``."""
    endpoint = EnableAuthRequest(path=path, engine_type=engine_type, **opts)
    await api.exec_with_empty(client, endpoint)


async def disable(client: "VaultClient", path: str) -> None:
    await api.exec_with_empty(client, DisableAuthRequest(path=path))


async def list(client: "VaultClient") -> Dict[str, AuthResponse]:
    return (await api.exec_with_result(client, ListAuthsRequest())).root
