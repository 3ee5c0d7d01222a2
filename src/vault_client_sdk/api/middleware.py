"""
Per-request middleware applied by the client to every endpoint.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .endpoint import Endpoint

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Vault-Token"
WRAP_TTL_HEADER = "X-Vault-Wrap-TTL"
NAMESPACE_HEADER = "X-Vault-Namespace"
REQUEST_HEADER = "X-Vault-Request"


@dataclass
class EndpointMiddleware:
    """Adds the API version, token and wrapping headers to outgoing requests."""
    token: str
    version: str
    wrap: Optional[str] = None
    namespace: Optional[str] = None

    def url(self, endpoint: Endpoint) -> str:
        """Endpoint path with the API version segment in front, relative to the base address."""
        return f"{self.version}/{endpoint.url_path().lstrip('/')}"

    def request(self, endpoint: Endpoint, request: httpx.Request) -> None:
        request.headers[REQUEST_HEADER] = "true"
        if self.token and endpoint.AUTHENTICATED:
            request.headers[TOKEN_HEADER] = self.token
        if self.wrap:
            request.headers[WRAP_TTL_HEADER] = self.wrap
        if self.namespace:
            request.headers[NAMESPACE_HEADER] = self.namespace

    def response(self, endpoint: Endpoint, response: httpx.Response) -> None:
        logger.debug(f"{endpoint.METHOD} {response.request.url.path} -> {response.status_code}")

    def wrapped(self, ttl: str) -> "EndpointMiddleware":
        """Copy of this middleware that asks the server to wrap the response."""
        return dataclasses.replace(self, wrap=ttl)
