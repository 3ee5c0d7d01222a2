"""
Response models for the ``auth/token/`` endpoints.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LookupTokenResponse(BaseModel):
    """Properties of a token, as returned by the lookup endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    accessor: str = Field(..., description="Token accessor")
    creation_time: int = Field(..., description="Creation time as a Unix timestamp")
    creation_ttl: int = Field(..., description="TTL at creation in seconds")
    display_name: str = Field(..., description="Display name")
    entity_id: str = Field("", description="Identity entity ID")
    expire_time: Optional[str] = Field(None, description="Expiry timestamp, absent for root tokens")
    explicit_max_ttl: int = Field(0, description="Explicit maximum TTL in seconds")
    id: str = Field(..., description="The token itself")
    identity_policies: Optional[List[str]] = None
    issue_time: Optional[str] = None
    meta: Optional[Dict[str, str]] = None
    num_uses: int = 0
    orphan: bool = False
    path: str = ""
    policies: List[str] = Field(default_factory=list)
    renewable: Optional[bool] = None
    ttl: int = Field(0, description="Remaining TTL in seconds")
    token_type: str = Field("", alias="type")
