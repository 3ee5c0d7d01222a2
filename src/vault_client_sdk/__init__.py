"""
Vault Client Python SDK

Typed asyncio client for the Vault HTTP API: mounts, auth methods, token
lifecycle, response wrapping and the KV v2 secrets engine.
"""

from . import kv2, system, token
from .api import AuthInfo, WrapInfo, WrappedResponse
from .client import VaultClient
from .config import ClientSettings
from .exceptions import (
    VaultClientError,
    APIError,
    BuildError,
    ConfigurationError,
    ParseError,
    RequestError,
    ResponseEmptyError,
    ResponseWrapError,
)
from .login import AppRoleLogin, CertificateLogin, JWTLogin, LoginMethod, UserpassLogin

__version__ = "0.1.0"

__all__ = [
    "VaultClient",
    "ClientSettings",
    "kv2",
    "system",
    "token",
    "AuthInfo",
    "WrapInfo",
    "WrappedResponse",
    "LoginMethod",
    "UserpassLogin",
    "AppRoleLogin",
    "JWTLogin",
    "CertificateLogin",
    "VaultClientError",
    "APIError",
    "BuildError",
    "ConfigurationError",
    "ParseError",
    "RequestError",
    "ResponseEmptyError",
    "ResponseWrapError",
]
