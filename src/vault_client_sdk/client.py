"""
Vault Client

Main client class for interacting with a Vault server.
"""

import logging
import ssl
from typing import Optional, Union

import httpx

from . import system, token
from .api import AuthInfo
from .api.middleware import EndpointMiddleware
from .api.sys.responses import ReadHealthResponse
from .api.token.responses import LookupTokenResponse
from .config import ClientSettings
from .exceptions import BuildError
from .login import LoginMethod

logger = logging.getLogger(__name__)


class VaultClient:
    """
    Client for executing calls against a Vault server.

    The client owns one ``httpx.AsyncClient`` and an
    :class:`~vault_client_sdk.api.middleware.EndpointMiddleware` derived from
    its settings; every call made through the domain modules
    (:mod:`~vault_client_sdk.kv2`, :mod:`~vault_client_sdk.token`,
    :mod:`~vault_client_sdk.system`) goes through them.

    The held token is plain mutable state. Logging in while other calls are in
    flight on the same client is not synchronized; callers sharing a client
    across tasks must serialize :meth:`login` and :meth:`set_token`
    themselves.
    """

    def __init__(self, settings: Optional[ClientSettings] = None):
        """
        Initialize the Vault client.

        Args:
            settings: Connection settings; resolved from the environment when omitted
        """
        self.settings = settings or ClientSettings()

        try:
            self.http = httpx.AsyncClient(
                base_url=self.settings.address,
                verify=self._tls_context(),
                timeout=self.settings.timeout,
            )
        except (ssl.SSLError, OSError, ValueError) as e:
            logger.error(f"Failed to build HTTP client: {e}")
            raise BuildError(f"Failed to build HTTP client: {e}", source=e)

        # Appends the API version to paths and the token to requests
        self.middle = EndpointMiddleware(
            token=self.settings.token,
            version=f"v{self.settings.version}",
            wrap=None,
            namespace=self.settings.namespace,
        )

    def _tls_context(self) -> Union[ssl.SSLContext, bool]:
        if not self.settings.verify and not self.settings.identity:
            return False
        if not self.settings.ca_certs and not self.settings.identity:
            return True

        context = ssl.create_default_context()
        if not self.settings.verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        for path in self.settings.ca_certs:
            context.load_verify_locations(cafile=path)
        if self.settings.identity:
            context.load_cert_chain(*self.settings.identity)
        return context

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Close the HTTP client."""
        await self.http.aclose()

    def set_token(self, token: str) -> None:
        """Replace the token sent with subsequent requests."""
        self.middle.token = token
        self.settings = self.settings.model_copy(update={"token": token})

    async def login(self, mount: str, method: LoginMethod) -> AuthInfo:
        """Log in with ``method`` against ``mount`` and keep the issued token."""
        info = await method.login(self, mount)
        self.set_token(info.client_token)
        logger.debug(f"Logged in via {type(method).__name__} at auth/{mount}")
        return info

    async def lookup(self) -> LookupTokenResponse:
        """Look up the token currently held by this client."""
        return await token.lookup_self(self)

    async def renew(self, increment: Optional[str] = None) -> AuthInfo:
        """Renew the token currently held by this client."""
        return await token.renew_self(self, increment)

    async def revoke(self) -> None:
        """Revoke the token currently held by this client."""
        await token.revoke_self(self)

    async def status(self) -> ReadHealthResponse:
        """Return the health of the configured server. No token is sent."""
        return await system.health(self)
