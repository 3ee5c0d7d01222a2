"""
Endpoints under ``sys/``.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, RootModel

from ..endpoint import Endpoint
from .responses import (
    AuthResponse,
    MountResponse,
    ReadHealthResponse,
    UnsealResponse,
    WrappingLookupResponse,
)


class MountListing(RootModel[Dict[str, MountResponse]]):
    pass


class AuthListing(RootModel[Dict[str, AuthResponse]]):
    pass


class MountConfig(BaseModel):
    """Tunables accepted when enabling a mount or auth method."""

    default_lease_ttl: Optional[str] = None
    max_lease_ttl: Optional[str] = None
    force_no_cache: Optional[bool] = None
    audit_non_hmac_request_keys: Optional[list] = None
    audit_non_hmac_response_keys: Optional[list] = None
    listing_visibility: Optional[str] = None
    passthrough_request_headers: Optional[list] = None
    allowed_response_headers: Optional[list] = None
    token_type: Optional[str] = None


class EnableEngineRequest(Endpoint):
    """Enable a secrets engine at ``path``."""
    METHOD = "POST"
    PATH = "sys/mounts/{path}"

    path: str
    engine_type: str = Field(..., alias="type")
    description: Optional[str] = None
    config: Optional[MountConfig] = None
    options: Optional[Dict[str, str]] = None
    local: Optional[bool] = None
    seal_wrap: Optional[bool] = None
    external_entropy_access: Optional[bool] = None


class DisableEngineRequest(Endpoint):
    METHOD = "DELETE"
    PATH = "sys/mounts/{path}"

    path: str


class ListMountsRequest(Endpoint):
    PATH = "sys/mounts"
    RESPONSE = MountListing


class EnableAuthRequest(Endpoint):
    """Enable an auth method at ``path``."""
    METHOD = "POST"
    PATH = "sys/auth/{path}"

    path: str
    engine_type: str = Field(..., alias="type")
    description: Optional[str] = None
    config: Optional[MountConfig] = None
    options: Optional[Dict[str, str]] = None
    local: Optional[bool] = None
    seal_wrap: Optional[bool] = None


class DisableAuthRequest(Endpoint):
    METHOD = "DELETE"
    PATH = "sys/auth/{path}"

    path: str


class ListAuthsRequest(Endpoint):
    PATH = "sys/auth"
    RESPONSE = AuthListing


class WrappingLookupRequest(Endpoint):
    METHOD = "POST"
    PATH = "sys/wrapping/lookup"
    RESPONSE = WrappingLookupResponse

    token: str


class UnwrapRequest(Endpoint):
    """Consume a wrapping token; the payload type depends on what was wrapped."""
    METHOD = "POST"
    PATH = "sys/wrapping/unwrap"

    token: str


class ReadHealthRequest(Endpoint):
    PATH = "sys/health"
    RESPONSE = ReadHealthResponse
    RAW = True
    # standby, DR secondary, performance standby, uninitialized, sealed
    ACCEPTED = frozenset({429, 472, 473, 501, 503})
    AUTHENTICATED = False


class SealRequest(Endpoint):
    METHOD = "PUT"
    PATH = "sys/seal"


class UnsealRequest(Endpoint):
    METHOD = "PUT"
    PATH = "sys/unseal"
    RESPONSE = UnsealResponse
    RAW = True
    AUTHENTICATED = False

    key: Optional[str] = None
    reset: Optional[bool] = None
    migrate: Optional[bool] = None
