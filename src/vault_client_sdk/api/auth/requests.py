"""
Login endpoints for the supported auth methods.

Logins answer with an ``auth`` section rather than ``data`` and are executed
with :func:`vault_client_sdk.api.exec_with_auth`.
"""

from typing import Optional

from ..endpoint import Endpoint


class UserpassLoginRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/{mount}/login/{username}"

    mount: str
    username: str
    password: str


class AppRoleLoginRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/{mount}/login"

    mount: str
    role_id: str
    secret_id: Optional[str] = None


class JWTLoginRequest(Endpoint):
    METHOD = "POST"
    PATH = "auth/{mount}/login"

    mount: str
    jwt: str
    role: Optional[str] = None


class CertLoginRequest(Endpoint):
    """The certificate itself is presented during the TLS handshake."""
    METHOD = "POST"
    PATH = "auth/{mount}/login"

    mount: str
    name: Optional[str] = None
