"""
Endpoints for the KV v2 secrets engine.

Every endpoint is addressed by the engine's ``mount`` and the secret ``path``
below it; the engine then splits the API into ``data/``, ``metadata/`` and
the version management prefixes ``delete/``, ``undelete/`` and ``destroy/``.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..endpoint import Endpoint
from .responses import (
    ListSecretsResponse,
    ReadConfigurationResponse,
    ReadSecretMetadataResponse,
    ReadSecretResponse,
    SecretVersionMetadata,
)


class SecretMetadataOptions(BaseModel):
    """Optional metadata settings; only the fields that are set are sent."""

    max_versions: Optional[int] = Field(None, description="Versions to keep, 0 for the engine default")
    cas_required: Optional[bool] = Field(None, description="Require check-and-set on writes")
    delete_version_after: Optional[str] = Field(None, description="Duration after which versions are deleted")
    custom_metadata: Optional[Dict[str, str]] = Field(None, description="Arbitrary key/value metadata")


class EngineConfigOptions(BaseModel):
    """Optional engine-wide settings; only the fields that are set are sent."""

    max_versions: Optional[int] = None
    cas_required: Optional[bool] = None
    delete_version_after: Optional[str] = None


class SetSecretOptions(BaseModel):
    cas: Optional[int] = Field(None, description="Only write if the current version matches")


class ReadSecretRequest(Endpoint):
    PATH = "{mount}/data/{path}"
    RESPONSE = ReadSecretResponse
    QUERY = ("version",)

    mount: str
    path: str
    version: Optional[int] = None


class SetSecretRequest(Endpoint):
    METHOD = "POST"
    PATH = "{mount}/data/{path}"
    RESPONSE = SecretVersionMetadata

    mount: str
    path: str
    data: Any
    options: Optional[SetSecretOptions] = None


class DeleteLatestSecretVersionRequest(Endpoint):
    METHOD = "DELETE"
    PATH = "{mount}/data/{path}"

    mount: str
    path: str


class DeleteSecretVersionsRequest(Endpoint):
    """Soft-delete versions; they can be restored with an undelete."""
    METHOD = "POST"
    PATH = "{mount}/delete/{path}"

    mount: str
    path: str
    versions: List[int]


class UndeleteSecretVersionsRequest(Endpoint):
    METHOD = "POST"
    PATH = "{mount}/undelete/{path}"

    mount: str
    path: str
    versions: List[int]


class DestroySecretVersionsRequest(Endpoint):
    """Permanently remove the data of versions."""
    METHOD = "PUT"
    PATH = "{mount}/destroy/{path}"

    mount: str
    path: str
    versions: List[int]


class ListSecretsRequest(Endpoint):
    METHOD = "LIST"
    PATH = "{mount}/metadata/{path}"
    RESPONSE = ListSecretsResponse

    mount: str
    path: str


class ReadSecretMetadataRequest(Endpoint):
    PATH = "{mount}/metadata/{path}"
    RESPONSE = ReadSecretMetadataResponse

    mount: str
    path: str


class SetSecretMetadataRequest(Endpoint, SecretMetadataOptions):
    METHOD = "POST"
    PATH = "{mount}/metadata/{path}"

    mount: str
    path: str


class DeleteSecretMetadataRequest(Endpoint):
    """Remove all versions and the metadata of a secret."""
    METHOD = "DELETE"
    PATH = "{mount}/metadata/{path}"

    mount: str
    path: str


class ReadConfigurationRequest(Endpoint):
    PATH = "{mount}/config"
    RESPONSE = ReadConfigurationResponse

    mount: str


class SetConfigurationRequest(Endpoint, EngineConfigOptions):
    METHOD = "POST"
    PATH = "{mount}/config"

    mount: str
