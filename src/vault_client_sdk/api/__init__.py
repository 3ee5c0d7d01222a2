"""
Execution helpers shared by every endpoint.

All calls funnel through :func:`_send`, which builds the request, applies the
client's middleware and maps transport failures and non-success statuses onto
the SDK's exception types. The ``exec_with_*`` helpers then pick the part of
the response envelope the caller is interested in.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..exceptions import (
    APIError,
    ParseError,
    RequestError,
    ResponseEmptyError,
    ResponseWrapError,
)
from .endpoint import Endpoint
from .middleware import EndpointMiddleware

if TYPE_CHECKING:
    from ..client import VaultClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuthInfo(BaseModel):
    """Authentication details returned by logins, token creation and renewal."""

    client_token: str = Field(..., description="Issued token")
    accessor: str = Field(..., description="Token accessor")
    policies: List[str] = Field(default_factory=list, description="All attached policies")
    token_policies: List[str] = Field(default_factory=list, description="Policies attached to the token")
    metadata: Optional[Dict[str, str]] = Field(None, description="Login metadata")
    lease_duration: int = Field(0, description="Token TTL in seconds")
    renewable: bool = Field(False, description="Whether the token is renewable")
    entity_id: str = Field("", description="Identity entity ID")
    token_type: str = Field("", description="Token type (service, batch)")
    orphan: bool = Field(False, description="Whether the token has no parent")


class WrapInfo(BaseModel):
    """Details of a response-wrapping token."""

    token: str = Field(..., description="Single-use wrapping token")
    accessor: str = Field("", description="Wrapping token accessor")
    ttl: int = Field(..., description="Wrapping token TTL in seconds")
    creation_time: str = Field(..., description="Creation timestamp")
    creation_path: str = Field(..., description="Path the wrapped response came from")
    wrapped_accessor: str = Field("", description="Accessor of a wrapped token, if any")


class EndpointResult(BaseModel):
    """The standard envelope around most Vault responses."""

    request_id: str = ""
    lease_id: str = ""
    lease_duration: int = 0
    renewable: bool = False
    data: Optional[Any] = None
    auth: Optional[AuthInfo] = None
    wrap_info: Optional[WrapInfo] = None
    warnings: Optional[List[str]] = None


def to_json_value(value: Any) -> Any:
    """Convert a caller-supplied value into plain JSON data."""
    try:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", by_alias=True)
        return to_jsonable_python(value)
    except PydanticSerializationError as e:
        raise ParseError(f"Failed to serialize value of type {type(value).__name__}: {e}", source=e)


def from_json_value(value: Any, target: Type[T]) -> T:
    """Validate plain JSON data into the caller's target type."""
    try:
        return TypeAdapter(target).validate_python(value)
    except ValidationError as e:
        raise ParseError(f"Failed to parse response into {target}: {e}", source=e)


async def _send(
    client: "VaultClient",
    endpoint: Endpoint,
    middle: Optional[EndpointMiddleware] = None,
) -> httpx.Response:
    middle = middle or client.middle
    request = client.http.build_request(
        method=endpoint.METHOD,
        url=middle.url(endpoint),
        params=endpoint.query(),
        json=endpoint.body(),
    )
    middle.request(endpoint, request)

    try:
        response = await client.http.send(request)
    except httpx.HTTPError as e:
        logger.error(f"Request failed: {endpoint.METHOD} {request.url.path}: {e}")
        raise RequestError(f"Failed to connect to Vault: {e}", source=e)

    middle.response(endpoint, response)

    if not response.is_success and response.status_code not in endpoint.ACCEPTED:
        raise _api_error(response)
    return response


def _api_error(response: httpx.Response) -> APIError:
    try:
        errors = response.json().get("errors")
    except (ValueError, AttributeError):
        errors = [response.text] if response.text else []
    logger.debug(f"Vault returned HTTP {response.status_code}: {errors}")
    return APIError(response.status_code, errors)


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"Failed to decode response body: {e}", source=e)


def _envelope(response: httpx.Response) -> EndpointResult:
    body = _json(response)
    try:
        return EndpointResult.model_validate(body)
    except ValidationError as e:
        raise ParseError(f"Unexpected response envelope: {e}", source=e)


def _result(endpoint: Endpoint, response: httpx.Response) -> Any:
    if endpoint.RAW:
        data = _json(response)
    else:
        data = _envelope(response).data
        if data is None:
            raise ResponseEmptyError(f"Response from {endpoint.url_path()} carried no data")

    if endpoint.RESPONSE is None:
        return data
    return from_json_value(data, endpoint.RESPONSE)


async def exec_with_result(client: "VaultClient", endpoint: Endpoint) -> Any:
    """Execute ``endpoint`` and parse its payload into ``endpoint.RESPONSE``."""
    response = await _send(client, endpoint)
    return _result(endpoint, response)


async def exec_with_empty(client: "VaultClient", endpoint: Endpoint) -> None:
    """Execute ``endpoint``, ignoring any body the server sends back."""
    await _send(client, endpoint)


async def exec_with_envelope(client: "VaultClient", endpoint: Endpoint) -> EndpointResult:
    """Execute ``endpoint`` and return the whole response envelope."""
    response = await _send(client, endpoint)
    return _envelope(response)


async def exec_with_auth(client: "VaultClient", endpoint: Endpoint) -> AuthInfo:
    """Execute ``endpoint`` and return the ``auth`` section of the envelope."""
    response = await _send(client, endpoint)
    auth = _envelope(response).auth
    if auth is None:
        raise ResponseEmptyError(f"Response from {endpoint.url_path()} carried no auth info")
    return auth


@dataclass
class WrappedResponse(Generic[T]):
    """A response the server wrapped in a single-use token."""
    info: WrapInfo
    response_type: Optional[Type[T]] = None

    async def lookup(self, client: "VaultClient"):
        """Inspect the wrapping token without consuming it."""
        from ..system import wrapping

        return await wrapping.lookup(client, self.info.token)

    async def unwrap(self, client: "VaultClient") -> T:
        """Consume the wrapping token and return the original response."""
        from ..system import wrapping

        return await wrapping.unwrap(client, self.info.token, self.response_type)


async def exec_with_wrap(
    client: "VaultClient",
    endpoint: Endpoint,
    ttl: str = "60s",
) -> WrappedResponse:
    """Execute ``endpoint`` asking the server to wrap the response for ``ttl``."""
    response = await _send(client, endpoint, middle=client.middle.wrapped(ttl))
    info = _envelope(response).wrap_info
    if info is None:
        raise ResponseWrapError(f"Response from {endpoint.url_path()} was not wrapped")
    return WrappedResponse(info=info, response_type=endpoint.RESPONSE)
