"""
Operations on the KV v2 secrets engine.

Versions of a secret go through three states: live, soft-deleted (hidden from
reads but restorable with :func:`undelete_versions`) and destroyed (data
removed for good). :func:`delete_metadata` removes a secret and its whole
history.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar

from . import api
from .api.kv2.requests import (
    DeleteLatestSecretVersionRequest,
    DeleteSecretMetadataRequest,
    DeleteSecretVersionsRequest,
    DestroySecretVersionsRequest,
    EngineConfigOptions,
    ListSecretsRequest,
    ReadConfigurationRequest,
    ReadSecretMetadataRequest,
    ReadSecretRequest,
    SecretMetadataOptions,
    SetConfigurationRequest,
    SetSecretMetadataRequest,
    SetSecretOptions,
    SetSecretRequest,
    UndeleteSecretVersionsRequest,
)
from .api.kv2.responses import (
    ReadConfigurationResponse,
    ReadSecretMetadataResponse,
    SecretVersionMetadata,
)

if TYPE_CHECKING:
    from .client import VaultClient

T = TypeVar("T")


async def read(
    client: "VaultClient",
    mount: str,
    path: str,
    response_type: Type[T] = Dict[str, Any],
    version: Optional[int] = None,
) -> T:
    """Read the secret at ``path``, validating its data into ``response_type``.

    ``version`` selects a specific version; the latest is read when omitted.
    """
    endpoint = ReadSecretRequest(mount=mount, path=path, version=version)
    res = await api.exec_with_result(client, endpoint)
    return api.from_json_value(res.data, response_type)


async def read_version(
    client: "VaultClient",
    mount: str,
    path: str,
    version: int,
    response_type: Type[T] = Dict[str, Any],
) -> T:
    return await read(client, mount, path, response_type=response_type, version=version)


async def set(
    client: "VaultClient",
    mount: str,
    path: str,
    data: Any,
    cas: Optional[int] = None,
) -> SecretVersionMetadata:
    """Write ``data`` as a new version of the secret at ``path``.

    ``data`` may be a mapping, a pydantic model or anything pydantic can
    serialize. With ``cas`` the write only succeeds if the current version
    matches it (0 means the secret must not exist yet).
    """
    endpoint = SetSecretRequest(
        mount=mount,
        path=path,
        data=api.to_json_value(data),
        options=SetSecretOptions(cas=cas) if cas is not None else None,
    )
    return await api.exec_with_result(client, endpoint)


async def list(client: "VaultClient", mount: str, path: str) -> List[str]:
    """List the keys below ``path``; folders end with ``/``."""
    endpoint = ListSecretsRequest(mount=mount, path=path)
    return (await api.exec_with_result(client, endpoint)).keys


async def read_metadata(client: "VaultClient", mount: str, path: str) -> ReadSecretMetadataResponse:
    endpoint = ReadSecretMetadataRequest(mount=mount, path=path)
    return await api.exec_with_result(client, endpoint)


async def set_metadata(
    client: "VaultClient",
    mount: str,
    path: str,
    opts: Optional[SecretMetadataOptions] = None,
) -> None:
    """Update the metadata settings of a secret.

    Only the fields explicitly set on ``opts`` are sent, leaving the rest of
    the server-side settings untouched.
    """
    overrides = opts.model_dump(exclude_unset=True) if opts else {}
    endpoint = SetSecretMetadataRequest(mount=mount, path=path, **overrides)
    await api.exec_with_empty(client, endpoint)


async def delete_latest(client: "VaultClient", mount: str, path: str) -> None:
    """Soft-delete the latest version of a secret."""
    endpoint = DeleteLatestSecretVersionRequest(mount=mount, path=path)
    await api.exec_with_empty(client, endpoint)


async def delete_versions(client: "VaultClient", mount: str, path: str, versions: List[int]) -> None:
    """Soft-delete specific versions of a secret."""
    endpoint = DeleteSecretVersionsRequest(mount=mount, path=path, versions=versions)
    await api.exec_with_empty(client, endpoint)


async def undelete_versions(client: "VaultClient", mount: str, path: str, versions: List[int]) -> None:
    """Restore soft-deleted versions of a secret."""
    endpoint = UndeleteSecretVersionsRequest(mount=mount, path=path, versions=versions)
    await api.exec_with_empty(client, endpoint)


async def destroy_versions(client: "VaultClient", mount: str, path: str, versions: List[int]) -> None:
    """Permanently remove the data of specific versions. This cannot be undone."""
    endpoint = DestroySecretVersionsRequest(mount=mount, path=path, versions=versions)
    await api.exec_with_empty(client, endpoint)


async def delete_metadata(client: "VaultClient", mount: str, path: str) -> None:
    """Delete a secret along with every version and its metadata."""
    endpoint = DeleteSecretMetadataRequest(mount=mount, path=path)
    await api.exec_with_empty(client, endpoint)


async def read_config(client: "VaultClient", mount: str) -> ReadConfigurationResponse:
    return await api.exec_with_result(client, ReadConfigurationRequest(mount=mount))


async def set_config(
    client: "VaultClient",
    mount: str,
    opts: Optional[EngineConfigOptions] = None,
) -> None:
    """Update the engine-wide settings of the KV mount."""
    overrides = opts.model_dump(exclude_unset=True) if opts else {}
    endpoint = SetConfigurationRequest(mount=mount, **overrides)
    await api.exec_with_empty(client, endpoint)
