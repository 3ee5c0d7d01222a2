"""
Shared fixtures for Vault Client SDK tests
"""

import datetime

import httpx
import pytest
import pytest_asyncio
import respx
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from vault_client_sdk import ClientSettings, VaultClient

ADDRESS = "http://127.0.0.1:8200"

VAULT_ENV = (
    "VAULT_ADDR",
    "VAULT_TOKEN",
    "VAULT_CACERT",
    "VAULT_CAPATH",
    "VAULT_SKIP_VERIFY",
    "VAULT_NAMESPACE",
    "VAULT_CLIENT_CERT",
    "VAULT_CLIENT_KEY",
)

AUTH_BODY = {
    "auth": {
        "client_token": "s.new-token",
        "accessor": "acc-1",
        "policies": ["default", "app"],
        "token_policies": ["default", "app"],
        "metadata": {"username": "alice"},
        "lease_duration": 3600,
        "renewable": True,
        "entity_id": "ent-1",
        "token_type": "service",
        "orphan": True,
    }
}

LOOKUP_BODY = {
    "data": {
        "accessor": "acc-1",
        "creation_time": 1700000000,
        "creation_ttl": 3600,
        "display_name": "token",
        "entity_id": "",
        "expire_time": "2026-10-17T12:00:00Z",
        "explicit_max_ttl": 0,
        "id": "X",
        "issue_time": "2026-10-17T11:00:00Z",
        "meta": None,
        "num_uses": 0,
        "orphan": False,
        "path": "auth/token/create",
        "policies": ["default"],
        "renewable": True,
        "ttl": 3599,
        "type": "service",
    }
}


def json_response(status_code: int = 200, body=None) -> httpx.Response:
    if body is None:
        return httpx.Response(status_code)
    return httpx.Response(status_code, json=body)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in VAULT_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return ClientSettings(address=ADDRESS, token="X", ca_certs=[])


@pytest_asyncio.fixture
async def client(settings):
    async with VaultClient(settings) as client:
        yield client


@pytest.fixture
def vault():
    with respx.mock(base_url=ADDRESS, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def identity(tmp_path):
    """Write a throwaway self-signed certificate and key, returning their paths."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "vault-client-test")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(key, hashes.SHA256())
    )

    cert_path = tmp_path / "client.pem"
    key_path = tmp_path / "client-key.pem"
    cert_path.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
    key_path.write_bytes(
        key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.TraditionalOpenSSL,
            serialization.NoEncryption(),
        )
    )
    return str(cert_path), str(key_path), key
