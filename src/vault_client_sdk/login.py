"""
Login methods for Vault Client SDK.

A login method performs the protocol of one auth method against a client and
returns the resulting :class:`~vault_client_sdk.api.AuthInfo`. Use it through
:meth:`VaultClient.login`, which also stores the issued token on the client.
"""

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

import jwt

from . import api
from .api import AuthInfo
from .api.auth.requests import (
    AppRoleLoginRequest,
    CertLoginRequest,
    JWTLoginRequest,
    UserpassLoginRequest,
)

if TYPE_CHECKING:
    from .client import VaultClient


class LoginMethod(ABC):
    """Base class for login methods."""

    @abstractmethod
    async def login(self, client: "VaultClient", mount: str) -> AuthInfo:
        """Log in against the auth method mounted at ``mount``."""
        pass


class UserpassLogin(LoginMethod):
    """Username and password login."""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    async def login(self, client: "VaultClient", mount: str) -> AuthInfo:
        endpoint = UserpassLoginRequest(mount=mount, username=self.username, password=self.password)
        return await api.exec_with_auth(client, endpoint)


class AppRoleLogin(LoginMethod):
    """AppRole login with a role ID and an optional secret ID."""

    def __init__(self, role_id: str, secret_id: Optional[str] = None):
        self.role_id = role_id
        self.secret_id = secret_id

    async def login(self, client: "VaultClient", mount: str) -> AuthInfo:
        endpoint = AppRoleLoginRequest(mount=mount, role_id=self.role_id, secret_id=self.secret_id)
        return await api.exec_with_auth(client, endpoint)


class JWTLogin(LoginMethod):
    """JWT/OIDC login with a signed token."""

    def __init__(self, jwt: str, role: Optional[str] = None):
        """
        Initialize JWT login.

        Args:
            jwt: The signed JWT presented to Vault
            role: Role to log in against; the mount's default role when omitted
        """
        self.jwt = jwt
        self.role = role

    @classmethod
    def from_claims(
        cls,
        subject: str,
        key: Any,
        role: Optional[str] = None,
        algorithm: str = "RS256",
        expires_in: int = 300,
        headers: Optional[Dict[str, Any]] = None,
        **claims: Any,
    ) -> "JWTLogin":
        """
        Sign a fresh JWT and wrap it in a login method.

        Args:
            subject: Value of the ``sub`` claim
            key: Signing key understood by PyJWT for ``algorithm``
            role: Role to log in against
            algorithm: JWT algorithm (default: RS256)
            expires_in: Token lifetime in seconds
            headers: Extra JWT headers, e.g. ``{"kid": ...}``
            **claims: Additional claims such as ``iss`` or ``aud``

        Returns:
            JWTLogin instance carrying the signed token
        """
        now = int(time.time())
        payload = {
            "sub": subject,
            "iat": now,
            "nbf": now,
            "exp": now + expires_in,
            **claims,
        }

        token = jwt.encode(payload, key, algorithm=algorithm, headers=headers)
        return cls(token, role=role)

    async def login(self, client: "VaultClient", mount: str) -> AuthInfo:
        endpoint = JWTLoginRequest(mount=mount, jwt=self.jwt, role=self.role)
        return await api.exec_with_auth(client, endpoint)


class CertificateLogin(LoginMethod):
    """TLS certificate login.

    The certificate is the client identity configured on the settings
    (``client_cert``/``client_key``); ``name`` optionally picks the certificate
    role to match against.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name

    async def login(self, client: "VaultClient", mount: str) -> AuthInfo:
        return await api.exec_with_auth(client, CertLoginRequest(mount=mount, name=self.name))
