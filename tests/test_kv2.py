"""
Tests for the KV v2 operations: request shapes and response handling
"""

import json
from typing import Dict

import pytest
from pydantic import BaseModel

from vault_client_sdk import APIError, ParseError, kv2
from vault_client_sdk.api.kv2.requests import EngineConfigOptions, SecretMetadataOptions

from .conftest import json_response

VERSION_BODY = {
    "data": {
        "created_time": "2026-10-17T11:00:00.000000Z",
        "custom_metadata": None,
        "deletion_time": "",
        "destroyed": False,
        "version": 2,
    }
}

METADATA_BODY = {
    "data": {
        "cas_required": False,
        "created_time": "2026-10-17T10:00:00.000000Z",
        "current_version": 2,
        "custom_metadata": {"owner": "team-a"},
        "delete_version_after": "0s",
        "max_versions": 0,
        "oldest_version": 0,
        "updated_time": "2026-10-17T11:00:00.000000Z",
        "versions": {
            "1": {"created_time": "2026-10-17T10:00:00.000000Z", "deletion_time": "", "destroyed": False},
            "2": {"created_time": "2026-10-17T11:00:00.000000Z", "deletion_time": "", "destroyed": False},
        },
    }
}


class Credentials(BaseModel):
    username: str
    password: str


class TestRead:

    @pytest.mark.asyncio
    async def test_read_latest(self, client, vault):
        route = vault.get(path="/v1/secret/data/foo").mock(
            return_value=json_response(200, {"data": {"data": {"k": "v"}}})
        )
        assert await kv2.read(client, "secret", "foo") == {"k": "v"}

        request = route.calls.last.request
        assert request.method == "GET"
        assert request.headers["X-Vault-Token"] == "X"
        assert "version" not in request.url.params

    @pytest.mark.asyncio
    async def test_read_into_model(self, client, vault):
        vault.get(path="/v1/secret/data/db").mock(
            return_value=json_response(200, {"data": {"data": {"username": "app", "password": "pw"}}})
        )
        creds = await kv2.read(client, "secret", "db", Credentials)
        assert creds == Credentials(username="app", password="pw")

    @pytest.mark.asyncio
    async def test_read_into_wrong_type(self, client, vault):
        vault.get(path="/v1/secret/data/db").mock(return_value=json_response(200, {"data": {"data": {"user": "app"}}}))
        with pytest.raises(ParseError):
            await kv2.read(client, "secret", "db", Credentials)

    @pytest.mark.asyncio
    async def test_read_version(self, client, vault):
        route = vault.get(path="/v1/secret/data/foo").mock(
            return_value=json_response(200, {"data": {"data": {"k": "old"}}})
        )
        assert await kv2.read_version(client, "secret", "foo", 1) == {"k": "old"}
        assert route.calls.last.request.url.params["version"] == "1"

    @pytest.mark.asyncio
    async def test_read_nested_path(self, client, vault):
        route = vault.get(path="/v1/kv/data/apps/web/config").mock(
            return_value=json_response(200, {"data": {"data": {"port": 8080}}})
        )
        assert await kv2.read(client, "kv", "apps/web/config", Dict[str, int]) == {"port": 8080}
        assert route.called

    @pytest.mark.asyncio
    async def test_read_path_with_query_character(self, client, vault):
        route = vault.get(path__startswith="/v1/secret/data/").mock(
            return_value=json_response(200, {"data": {"data": {"k": "v"}}})
        )
        await kv2.read(client, "secret", "report?draft")
        assert route.calls.last.request.url.raw_path == b"/v1/secret/data/report%3Fdraft"

    @pytest.mark.asyncio
    async def test_read_missing(self, client, vault):
        vault.get(path="/v1/secret/data/missing").mock(return_value=json_response(404, {"errors": []}))
        with pytest.raises(APIError) as exc_info:
            await kv2.read(client, "secret", "missing")
        assert exc_info.value.code == 404


class TestSet:

    @pytest.mark.asyncio
    async def test_set_mapping(self, client, vault):
        route = vault.post(path="/v1/secret/data/foo").mock(return_value=json_response(200, VERSION_BODY))
        meta = await kv2.set(client, "secret", "foo", {"k": "v"})

        assert meta.version == 2
        assert meta.destroyed is False
        assert meta.deletion_time == ""
        assert json.loads(route.calls.last.request.content) == {"data": {"k": "v"}}

    @pytest.mark.asyncio
    async def test_set_model(self, client, vault):
        route = vault.post(path="/v1/secret/data/db").mock(return_value=json_response(200, VERSION_BODY))
        await kv2.set(client, "secret", "db", Credentials(username="app", password="pw"))
        assert json.loads(route.calls.last.request.content) == {
            "data": {"username": "app", "password": "pw"}
        }

    @pytest.mark.asyncio
    async def test_set_with_cas(self, client, vault):
        route = vault.post(path="/v1/secret/data/foo").mock(return_value=json_response(200, VERSION_BODY))
        await kv2.set(client, "secret", "foo", {"k": "v"}, cas=1)
        assert json.loads(route.calls.last.request.content) == {"data": {"k": "v"}, "options": {"cas": 1}}

    @pytest.mark.asyncio
    async def test_set_keeps_null_values(self, client, vault):
        route = vault.post(path="/v1/secret/data/foo").mock(return_value=json_response(200, VERSION_BODY))
        await kv2.set(client, "secret", "foo", {"k": None})
        assert json.loads(route.calls.last.request.content) == {"data": {"k": None}}

    @pytest.mark.asyncio
    async def test_set_path_with_fragment_character(self, client, vault):
        route = vault.post(path__startswith="/v1/secret/data/").mock(return_value=json_response(200, VERSION_BODY))
        await kv2.set(client, "secret", "team#a", {"k": "v"})
        assert route.calls.last.request.url.raw_path == b"/v1/secret/data/team%23a"

    @pytest.mark.asyncio
    async def test_set_unserializable(self, client, vault):
        route = vault.post(path="/v1/secret/data/foo").mock(return_value=json_response(200, VERSION_BODY))
        with pytest.raises(ParseError):
            await kv2.set(client, "secret", "foo", {"k": object()})
        assert not route.called


class TestList:

    @pytest.mark.asyncio
    async def test_list_root(self, client, vault):
        route = vault.route(method="LIST", path="/v1/secret/metadata/").mock(
            return_value=json_response(200, {"data": {"keys": ["foo", "apps/"]}})
        )
        assert await kv2.list(client, "secret", "") == ["foo", "apps/"]
        assert route.calls.last.request.method == "LIST"

    @pytest.mark.asyncio
    async def test_list_folder(self, client, vault):
        vault.route(method="LIST", path="/v1/secret/metadata/apps/").mock(
            return_value=json_response(200, {"data": {"keys": ["web"]}})
        )
        assert await kv2.list(client, "secret", "apps/") == ["web"]


class TestVersions:

    @pytest.mark.asyncio
    async def test_delete_latest(self, client, vault):
        route = vault.delete(path="/v1/secret/data/foo").mock(return_value=json_response(204))
        await kv2.delete_latest(client, "secret", "foo")
        assert route.called

    @pytest.mark.asyncio
    async def test_delete_versions(self, client, vault):
        route = vault.post(path="/v1/secret/delete/foo").mock(return_value=json_response(204))
        await kv2.delete_versions(client, "secret", "foo", [1, 2])
        assert json.loads(route.calls.last.request.content) == {"versions": [1, 2]}

    @pytest.mark.asyncio
    async def test_undelete_versions(self, client, vault):
        route = vault.post(path="/v1/secret/undelete/foo").mock(return_value=json_response(204))
        await kv2.undelete_versions(client, "secret", "foo", [1])
        assert json.loads(route.calls.last.request.content) == {"versions": [1]}

    @pytest.mark.asyncio
    async def test_destroy_versions(self, client, vault):
        route = vault.put(path="/v1/secret/destroy/foo").mock(return_value=json_response(204))
        await kv2.destroy_versions(client, "secret", "foo", [3])
        assert json.loads(route.calls.last.request.content) == {"versions": [3]}


class TestMetadata:

    @pytest.mark.asyncio
    async def test_read_metadata(self, client, vault):
        vault.get(path="/v1/secret/metadata/foo").mock(return_value=json_response(200, METADATA_BODY))
        meta = await kv2.read_metadata(client, "secret", "foo")
        assert meta.current_version == 2
        assert meta.custom_metadata == {"owner": "team-a"}
        assert set(meta.versions) == {"1", "2"}
        assert meta.versions["1"].destroyed is False

    @pytest.mark.asyncio
    async def test_set_metadata_only_sends_overrides(self, client, vault):
        route = vault.post(path="/v1/secret/metadata/foo").mock(return_value=json_response(204))
        opts = SecretMetadataOptions(max_versions=3, custom_metadata={"owner": "team-a"})
        await kv2.set_metadata(client, "secret", "foo", opts)
        assert json.loads(route.calls.last.request.content) == {
            "max_versions": 3,
            "custom_metadata": {"owner": "team-a"},
        }

    @pytest.mark.asyncio
    async def test_set_metadata_without_options(self, client, vault):
        route = vault.post(path="/v1/secret/metadata/foo").mock(return_value=json_response(204))
        await kv2.set_metadata(client, "secret", "foo")
        assert route.calls.last.request.content == b""

    @pytest.mark.asyncio
    async def test_delete_metadata(self, client, vault):
        route = vault.delete(path="/v1/secret/metadata/foo").mock(return_value=json_response(204))
        await kv2.delete_metadata(client, "secret", "foo")
        assert route.called


class TestConfig:

    @pytest.mark.asyncio
    async def test_read_config(self, client, vault):
        vault.get(path="/v1/secret/config").mock(
            return_value=json_response(
                200, {"data": {"cas_required": False, "delete_version_after": "0s", "max_versions": 10}}
            )
        )
        config = await kv2.read_config(client, "secret")
        assert config.max_versions == 10
        assert config.cas_required is False

    @pytest.mark.asyncio
    async def test_set_config(self, client, vault):
        route = vault.post(path="/v1/secret/config").mock(return_value=json_response(204))
        await kv2.set_config(client, "secret", EngineConfigOptions(cas_required=True))
        assert json.loads(route.calls.last.request.content) == {"cas_required": True}
