"""
Configuration classes for Vault Client SDK.

Settings not given explicitly fall back to the usual Vault environment
variables:

* ``address``: ``VAULT_ADDR``
* ``ca_certs``: ``VAULT_CACERT`` / ``VAULT_CAPATH``
* ``token``: ``VAULT_TOKEN``
* ``verify``: ``VAULT_SKIP_VERIFY`` (presence alone disables verification)
* ``namespace``: ``VAULT_NAMESPACE``
* ``client_cert`` / ``client_key``: ``VAULT_CLIENT_CERT`` / ``VAULT_CLIENT_KEY``
"""

import logging
import os
from typing import Any, List, Optional

import httpx
from cryptography import x509
from cryptography.hazmat.primitives import serialization
from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS = "http://127.0.0.1:8200"

VALID_SCHEMES = ("http", "https")

# Characters httpx percent-encodes or passes through in a host but no server name can contain
INVALID_HOST_CHARACTERS = frozenset(' %<>^|"`{}\\')

MAX_PORT = 65535


def default_verify() -> bool:
    return "VAULT_SKIP_VERIFY" not in os.environ


def default_ca_certs() -> List[str]:
    """Collect CA certificate paths from the environment, skipping anything unreadable."""
    paths = []

    cacert = os.environ.get("VAULT_CACERT")
    if cacert and os.path.isfile(cacert):
        paths.append(cacert)

    capath = os.environ.get("VAULT_CAPATH")
    if capath:
        try:
            entries = sorted(os.listdir(capath))
        except OSError as e:
            logger.debug(f"Ignoring unreadable VAULT_CAPATH {capath}: {e}")
            entries = []
        for entry in entries:
            full = os.path.join(capath, entry)
            if os.path.isfile(full):
                paths.append(full)

    return paths


def env_field(name: str, env: str, default: Any, description: str) -> Any:
    """A field that falls back to the ``env`` variable when not given explicitly."""
    return Field(default, validation_alias=AliasChoices(name, env), description=description)


class ClientSettings(BaseSettings):
    """Connection settings for a Vault client."""
    model_config = SettingsConfigDict(frozen=True, extra="forbid", case_sensitive=True)

    address: str = env_field("address", "VAULT_ADDR", DEFAULT_ADDRESS, "Base address of the Vault server")
    ca_certs: List[str] = Field(
        default_factory=default_ca_certs, description="Paths to trusted CA certificates"
    )
    token: str = env_field("token", "VAULT_TOKEN", "", "Token sent with requests")
    verify: bool = Field(default_factory=default_verify, description="Whether to verify TLS certificates")
    version: int = Field(1, description="API version used in request paths")
    wrapping: bool = Field(False, description="Whether responses should be wrapped")
    namespace: Optional[str] = env_field("namespace", "VAULT_NAMESPACE", None, "Namespace sent with requests")
    client_cert: Optional[str] = env_field(
        "client_cert",
        "VAULT_CLIENT_CERT",
        None,
        "Path to a PEM client certificate for TLS authentication",
    )
    client_key: Optional[str] = env_field(
        "client_key",
        "VAULT_CLIENT_KEY",
        None,
        "Path to the PEM private key for the client certificate",
    )
    timeout: float = Field(30.0, description="Request timeout in seconds")

    @classmethod
    def from_env(cls, **overrides) -> "ClientSettings":
        """Build settings, letting explicit ``overrides`` win over the environment."""
        return cls(**overrides)

    @model_validator(mode="before")
    @classmethod
    def _drop_shadowed_env(cls, values: Any) -> Any:
        # Explicit values arrive under the field name, environment values under
        # the variable name; only one of them may reach validation.
        if not isinstance(values, dict):
            return values
        values = dict(values)
        for name, field in cls.model_fields.items():
            if name in values and isinstance(field.validation_alias, AliasChoices):
                for alias in field.validation_alias.choices[1:]:
                    values.pop(alias, None)
        return values

    @field_validator("address")
    @classmethod
    def _validate_address(cls, value: str) -> str:
        try:
            url = httpx.URL(value)
            port = url.port
        except (httpx.InvalidURL, ValueError) as e:
            raise ConfigurationError(f"Invalid URL format: {value}: {e}")

        if url.scheme not in VALID_SCHEMES:
            raise ConfigurationError(f"Invalid scheme for HTTP URL: {url.scheme}")
        if not url.host or INVALID_HOST_CHARACTERS & set(url.host):
            raise ConfigurationError(f"Invalid URL format: {value}")
        if port is not None and not 0 <= port <= MAX_PORT:
            raise ConfigurationError(f"Invalid port in URL: {value}")
        return value

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: int) -> int:
        if value < 1:
            raise ConfigurationError(f"Invalid API version: {value}")
        return value

    @model_validator(mode="after")
    def _validate_identity(self) -> "ClientSettings":
        if not self.client_cert and not self.client_key:
            return self
        if not (self.client_cert and self.client_key):
            raise ConfigurationError("client_cert and client_key must be set together")

        try:
            with open(self.client_cert, "rb") as f:
                x509.load_pem_x509_certificate(f.read())
            with open(self.client_key, "rb") as f:
                serialization.load_pem_private_key(f.read(), password=None)
        except (OSError, ValueError, TypeError) as e:
            raise ConfigurationError(f"Failed to load client certificate: {e}")

        return self

    @property
    def identity(self) -> Optional[tuple]:
        """Client certificate tuple suitable for the HTTP transport."""
        if self.client_cert and self.client_key:
            return (self.client_cert, self.client_key)
        return None
