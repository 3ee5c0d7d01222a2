"""
Token lifecycle operations.
"""

from typing import TYPE_CHECKING, Optional

from . import api
from .api import AuthInfo
from .api.token.requests import (
    CreateOrphanTokenRequest,
    CreateTokenRequest,
    LookupTokenAccessorRequest,
    LookupTokenRequest,
    LookupTokenSelfRequest,
    RenewTokenAccessorRequest,
    RenewTokenRequest,
    RenewTokenSelfRequest,
    RevokeTokenAccessorRequest,
    RevokeTokenOrphanRequest,
    RevokeTokenRequest,
    RevokeTokenSelfRequest,
)
from .api.token.responses import LookupTokenResponse

if TYPE_CHECKING:
    from .client import VaultClient


async def create(client: "VaultClient", **opts) -> AuthInfo:
    """Create a child token.

    Keyword arguments are the fields of
    :class:`~vault_client_sdk.api.token.requests.CreateTokenRequest`
    (``policies``, ``ttl``, ``renewable``, ...).
    """
    return await api.exec_with_auth(client, CreateTokenRequest(**opts))


async def create_orphan(client: "VaultClient", **opts) -> AuthInfo:
    """Create a token with no parent."""
    return await api.exec_with_auth(client, CreateOrphanTokenRequest(**opts))


async def lookup(client: "VaultClient", token: str) -> LookupTokenResponse:
    return await api.exec_with_result(client, LookupTokenRequest(token=token))


async def lookup_self(client: "VaultClient") -> LookupTokenResponse:
    """Look up the token the client currently holds."""
    return await api.exec_with_result(client, LookupTokenSelfRequest())


async def lookup_accessor(client: "VaultClient", accessor: str) -> LookupTokenResponse:
    return await api.exec_with_result(client, LookupTokenAccessorRequest(accessor=accessor))


async def renew(client: "VaultClient", token: str, increment: Optional[str] = None) -> AuthInfo:
    endpoint = RenewTokenRequest(token=token, increment=increment)
    return await api.exec_with_auth(client, endpoint)


async def renew_self(client: "VaultClient", increment: Optional[str] = None) -> AuthInfo:
    """Renew the held token, optionally asking for ``increment`` (e.g. ``"1h"``)."""
    return await api.exec_with_auth(client, RenewTokenSelfRequest(increment=increment))


async def renew_accessor(client: "VaultClient", accessor: str, increment: Optional[str] = None) -> AuthInfo:
    endpoint = RenewTokenAccessorRequest(accessor=accessor, increment=increment)
    return await api.exec_with_auth(client, endpoint)


async def revoke(client: "VaultClient", token: str) -> None:
    """Revoke a token and all of its children."""
    await api.exec_with_empty(client, RevokeTokenRequest(token=token))


async def revoke_self(client: "VaultClient") -> None:
    await api.exec_with_empty(client, RevokeTokenSelfRequest())


async def revoke_accessor(client: "VaultClient", accessor: str) -> None:
    await api.exec_with_empty(client, RevokeTokenAccessorRequest(accessor=accessor))


async def revoke_orphan(client: "VaultClient", token: str) -> None:
    """Revoke a token, leaving its children in place as orphans."""
    await api.exec_with_empty(client, RevokeTokenOrphanRequest(token=token))
