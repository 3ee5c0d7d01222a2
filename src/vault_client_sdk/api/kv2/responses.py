"""
Response models for the KV v2 secrets engine.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SecretMetadata(BaseModel):
    """State of one version of a secret."""

    created_time: str = Field(..., description="Creation timestamp")
    deletion_time: str = Field("", description="Soft-deletion timestamp, empty when live")
    destroyed: bool = Field(False, description="Whether the version data was destroyed")


class SecretVersionMetadata(SecretMetadata):
    """Metadata returned when a version is written or read."""

    version: int = Field(..., description="Version number")
    custom_metadata: Optional[Dict[str, str]] = None


class ReadSecretResponse(BaseModel):
    data: Any = None
    metadata: Optional[SecretVersionMetadata] = None


class ReadSecretMetadataResponse(BaseModel):
    """Metadata and version history of a secret."""

    cas_required: bool = False
    created_time: str
    current_version: int
    delete_version_after: str = "0s"
    max_versions: int = 0
    oldest_version: int = 0
    updated_time: str
    custom_metadata: Optional[Dict[str, str]] = None
    versions: Dict[str, SecretMetadata] = Field(default_factory=dict)


class ListSecretsResponse(BaseModel):
    keys: List[str]


class ReadConfigurationResponse(BaseModel):
    cas_required: bool
    delete_version_after: str
    max_versions: int
