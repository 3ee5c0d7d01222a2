"""
Response models for the ``sys/`` endpoints.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ServerStatus(str, Enum):
    """Coarse server state derived from the health endpoint."""
    OK = "ok"
    PERFSTANDBY = "perfstandby"
    STANDBY = "standby"
    RECOVERY = "recovery"
    SEALED = "sealed"
    UNINITIALIZED = "uninitialized"


class MountConfigResponse(BaseModel):
    default_lease_ttl: int = Field(..., description="Default lease TTL in seconds")
    force_no_cache: bool = Field(..., description="Whether caching is disabled")
    max_lease_ttl: int = Field(..., description="Maximum lease TTL in seconds")


class MountResponse(BaseModel):
    """A secrets engine mount, as returned when listing mounts."""
    model_config = ConfigDict(populate_by_name=True)

    accessor: str
    config: MountConfigResponse
    description: str
    external_entropy_access: bool
    local: bool
    options: Optional[Dict[str, str]] = None
    seal_wrap: bool
    mount_type: str = Field(..., alias="type")
    uuid: str


class AuthConfigResponse(MountConfigResponse):
    token_type: str = Field(..., description="Token type issued by the auth method")


class AuthResponse(BaseModel):
    """An auth method mount, as returned when listing auth methods."""
    model_config = ConfigDict(populate_by_name=True)

    accessor: str
    config: AuthConfigResponse
    description: str
    external_entropy_access: bool
    local: bool
    options: Optional[Dict[str, str]] = None
    seal_wrap: bool
    mount_type: str = Field(..., alias="type")
    uuid: str


class WrappingLookupResponse(BaseModel):
    creation_path: str
    creation_time: str
    creation_ttl: int


class ReadHealthResponse(BaseModel):
    """Health of the server; returned without authentication."""

    cluster_id: str = ""
    cluster_name: str = ""
    initialized: bool
    performance_standby: bool = False
    replication_dr_mode: Optional[str] = None
    replication_perf_mode: Optional[str] = None
    sealed: bool
    server_time_utc: int = 0
    standby: bool
    version: str

    @property
    def status(self) -> ServerStatus:
        if not self.initialized:
            return ServerStatus.UNINITIALIZED
        if self.sealed:
            return ServerStatus.SEALED
        if self.performance_standby:
            return ServerStatus.PERFSTANDBY
        if self.standby:
            return ServerStatus.STANDBY
        if self.replication_dr_mode == "secondary":
            return ServerStatus.RECOVERY
        return ServerStatus.OK


class UnsealResponse(BaseModel):
    """Seal state after submitting an unseal key."""
    model_config = ConfigDict(populate_by_name=True)

    sealed: bool
    seal_type: str = Field(..., alias="type")
    t: int = Field(..., description="Key threshold")
    n: int = Field(..., description="Number of key shares")
    progress: int
    version: str
    nonce: str = ""
    cluster_name: Optional[str] = None
    cluster_id: Optional[str] = None
