"""
Response-wrapping tokens.
"""

from typing import TYPE_CHECKING, Any, Optional, Type

from .. import api
from ..api.sys.requests import UnwrapRequest, WrappingLookupRequest
from ..api.sys.responses import WrappingLookupResponse
from ..exceptions import ResponseEmptyError

if TYPE_CHECKING:
    from ..client import VaultClient


async def lookup(client: "VaultClient", token: str) -> WrappingLookupResponse:
    """Read the properties of a wrapping token without consuming it."""
    return await api.exec_with_result(client, WrappingLookupRequest(token=token))


async def unwrap(client: "VaultClient", token: str, response_type: Optional[Type] = None) -> Any:
    """Consume a wrapping token and return the wrapped payload.

    Wrapped data responses yield their ``data`` section, validated into
    ``response_type`` when one is given. Wrapped logins and token creations
    carry no data and yield their :class:`AuthInfo` instead.
    """
    result = await api.exec_with_envelope(client, UnwrapRequest(token=token))
    if result.data is not None:
        if response_type is None:
            return result.data
        return api.from_json_value(result.data, response_type)
    if result.auth is not None:
        return result.auth
    raise ResponseEmptyError("Unwrapped response carried neither data nor auth info")
