"""
Secrets engine mounts.
"""

from typing import TYPE_CHECKING, Dict

from .. import api
from ..api.sys.requests import DisableEngineRequest, EnableEngineRequest, ListMountsRequest
from ..api.sys.responses import MountResponse

if TYPE_CHECKING:
    from ..client import VaultClient


async def enable(client: "VaultClient", path: str, engine_type: str, **opts) -> None:
    """Enable a secrets engine of ``engine_type`` at ``path``.

    Extra keyword arguments (``description``, ``config``, ``options``,
    ``local``, ``seal_wrap``, ``external_entropy_access``) are passed through.
    """
    endpoint = EnableEngineRequest(path=path, engine_type=engine_type, **opts)
    await api.exec_with_empty(client, endpoint)


async def disable(client: "VaultClient", path: str) -> None:
    await api.exec_with_empty(client, DisableEngineRequest(path=path))


async def list(client: "VaultClient") -> Dict[str, MountResponse]:
    """List enabled secrets engines keyed by mount path."""
    return (await api.exec_with_result(client, ListMountsRequest())).root
