"""
Tests for login methods
"""

import json

import jwt
import pytest

from vault_client_sdk import (
    AppRoleLogin,
    CertificateLogin,
    ClientSettings,
    JWTLogin,
    UserpassLogin,
    VaultClient,
)

from .conftest import ADDRESS, AUTH_BODY, json_response


@pytest.mark.asyncio
async def test_userpass(client, vault):
    route = vault.post(path="/v1/auth/userpass/login/alice").mock(return_value=json_response(200, AUTH_BODY))
    info = await UserpassLogin("alice", "pw").login(client, "userpass")
    assert info.client_token == "s.new-token"
    assert json.loads(route.calls.last.request.content) == {"password": "pw"}


@pytest.mark.asyncio
async def test_approle(client, vault):
    route = vault.post(path="/v1/auth/approle/login").mock(return_value=json_response(200, AUTH_BODY))
    await client.login("approle", AppRoleLogin("role-1", "secret-1"))
    assert json.loads(route.calls.last.request.content) == {"role_id": "role-1", "secret_id": "secret-1"}
    assert client.middle.token == "s.new-token"


@pytest.mark.asyncio
async def test_approle_without_secret_id(client, vault):
    route = vault.post(path="/v1/auth/approle-bound/login").mock(return_value=json_response(200, AUTH_BODY))
    await AppRoleLogin("role-1").login(client, "approle-bound")
    assert json.loads(route.calls.last.request.content) == {"role_id": "role-1"}


@pytest.mark.asyncio
async def test_jwt(client, vault):
    route = vault.post(path="/v1/auth/jwt/login").mock(return_value=json_response(200, AUTH_BODY))
    await client.login("jwt", JWTLogin("eyJ.token.sig", role="ci"))
    assert json.loads(route.calls.last.request.content) == {"jwt": "eyJ.token.sig", "role": "ci"}


def test_jwt_from_claims():
    method = JWTLogin.from_claims(
        "ci-runner",
        "shared-secret",
        role="ci",
        algorithm="HS256",
        expires_in=60,
        aud="vault",
        iss="ci",
    )
    claims = jwt.decode(method.jwt, "shared-secret", algorithms=["HS256"], audience="vault")
    assert method.role == "ci"
    assert claims["sub"] == "ci-runner"
    assert claims["iss"] == "ci"
    assert claims["exp"] - claims["iat"] == 60


def test_jwt_from_claims_rsa(identity):
    _, _, key = identity
    method = JWTLogin.from_claims("svc", key, headers={"kid": "k1"})
    assert jwt.get_unverified_header(method.jwt)["kid"] == "k1"
    claims = jwt.decode(method.jwt, key.public_key(), algorithms=["RS256"])
    assert claims["sub"] == "svc"


@pytest.mark.asyncio
async def test_certificate(vault, identity):
    cert, key, _ = identity
    route = vault.post(path="/v1/auth/cert/login").mock(return_value=json_response(200, AUTH_BODY))
    settings = ClientSettings(address=ADDRESS, client_cert=cert, client_key=key)
    async with VaultClient(settings) as client:
        await client.login("cert", CertificateLogin(name="web"))
        assert client.middle.token == "s.new-token"
    assert json.loads(route.calls.last.request.content) == {"name": "web"}


@pytest.mark.asyncio
async def test_certificate_without_name(client, vault):
    route = vault.post(path="/v1/auth/cert/login").mock(return_value=json_response(200, AUTH_BODY))
    await CertificateLogin().login(client, "cert")
    assert route.calls.last.request.content == b""
