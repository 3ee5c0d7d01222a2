"""
Endpoints under ``auth/token/``.
"""

from typing import Dict, List, Optional

from ..endpoint import Endpoint
from .responses import LookupTokenResponse


class CreateTokenRequest(Endpoint):
    """Create a child token of the calling token."""
    METHOD = "POST"
    PATH = "auth/token/create"

    id: Optional[str] = None
    role_name: Optional[str] = None
    policies: Optional[List[str]] = None
    meta: Optional[Dict[str, str]] = None
    no_parent: Optional[bool] = None
    no_default_policy: Optional[bool] = None
    renewable: Optional[bool] = None
    ttl: Optional[str] = None
    token_type: Optional[str] = None
    explicit_max_ttl: Optional[str] = None
    display_name: Optional[str] = None
    num_uses: Optional[int] = None
    period: Optional[str] = None
    entity_alias: Optional[str] = None


class CreateOrphanTokenRequest(CreateTokenRequest):
    PATH = "auth/token/create-orphan"


class LookupTokenRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/token/lookup"
    RESPONSE = LookupTokenResponse

    token: str


class LookupTokenSelfRequest(Endpoint):
    PATH = "auth/token/lookup-self"
    RESPONSE = LookupTokenResponse


class LookupTokenAccessorRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/token/lookup-accessor"
    RESPONSE = LookupTokenResponse

    accessor: str


class RenewTokenRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/token/renew"

    token: str
    increment: Optional[str] = None


class RenewTokenSelfRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/token/renew-self"

    increment: Optional[str] = None


class RenewTokenAccessorRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/token/renew-accessor"

    accessor: str
    increment: Optional[str] = None


class RevokeTokenRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/token/revoke"

    token: str


class RevokeTokenSelfRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/token/revoke-self"


class RevokeTokenAccessorRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/token/revoke-accessor"

    accessor: str


class RevokeTokenOrphanRequest(Endpoint):
    """Revoke a token but leave its children orphaned."""
    METHOD = "POST"
    PATH = "auth/token/revoke-orphan"

    token: str
