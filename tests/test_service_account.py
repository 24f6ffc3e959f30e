from __future__ import annotations

import base64
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from google.auth import jwt

from youtube_partner.auth import GOOGLE_TOKEN_URL
from youtube_partner.errors import ConfigError, InvalidPrivateKeyError, PrivateKeyParseError
from youtube_partner.scopes import YOUTUBE_SCOPE_PARTNER, YOUTUBE_SCOPE_READONLY
from youtube_partner.service_account import (
    ServiceAccountConfig,
    convert_service_account_to_jwt,
    load_service_account_config,
    parse_rsa_private_key,
)

EMAIL = "claims-bot@example-project.iam.gserviceaccount.com"


@pytest.fixture(scope="module")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def _pem(key: Any, private_format: serialization.PrivateFormat) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=private_format,
        encryption_algorithm=serialization.NoEncryption(),
    )


def _public_pem(key: rsa.RSAPrivateKey) -> bytes:
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def _segment(token: str, index: int) -> dict[str, Any]:
    part = token.split(".")[index]
    return json.loads(base64.urlsafe_b64decode(part + "=" * (-len(part) % 4)))


def test_pkcs1_key_produces_rs256_jwt(rsa_key: rsa.RSAPrivateKey) -> None:
    config = ServiceAccountConfig(
        email=EMAIL,
        private_key=_pem(rsa_key, serialization.PrivateFormat.TraditionalOpenSSL),
        scopes=(YOUTUBE_SCOPE_PARTNER, YOUTUBE_SCOPE_READONLY),
    )

    token = convert_service_account_to_jwt(config)

    assert token.count(".") == 2
    header = _segment(token, 0)
    assert header["alg"] == "RS256"
    assert header["typ"] == "JWT"
    claims = _segment(token, 1)
    assert claims["iss"] == EMAIL
    assert claims["scope"] == f"{YOUTUBE_SCOPE_PARTNER} {YOUTUBE_SCOPE_READONLY}"
    assert claims["aud"] == GOOGLE_TOKEN_URL
    assert claims["exp"] - claims["iat"] == 3600


def test_signature_verifies_with_public_key(rsa_key: rsa.RSAPrivateKey) -> None:
    config = ServiceAccountConfig(
        email=EMAIL,
        private_key=_pem(rsa_key, serialization.PrivateFormat.PKCS8),
        scopes=(YOUTUBE_SCOPE_PARTNER,),
    )

    token = convert_service_account_to_jwt(config)

    payload = jwt.decode(token, certs=_public_pem(rsa_key), audience=GOOGLE_TOKEN_URL)
    assert payload["iss"] == EMAIL


def test_der_pkcs8_key_and_extra_claims(rsa_key: rsa.RSAPrivateKey) -> None:
    der = rsa_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    config = ServiceAccountConfig(
        email=EMAIL,
        private_key=der,
        private_key_id="key-1",
        subject="owner@example.com",
        private_claims={"target_audience": "https://example.com"},
    )
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    token = convert_service_account_to_jwt(config, now=now)

    assert _segment(token, 0)["kid"] == "key-1"
    claims = _segment(token, 1)
    assert claims["sub"] == "owner@example.com"
    assert claims["target_audience"] == "https://example.com"
    assert claims["scope"] == ""
    assert claims["iat"] == int(now.timestamp()) - 10


def test_der_pkcs1_key_is_accepted(rsa_key: rsa.RSAPrivateKey) -> None:
    der = rsa_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )

    parsed = parse_rsa_private_key(der)

    assert parsed.private_numbers() == rsa_key.private_numbers()


def test_garbage_key_is_a_parse_error() -> None:
    with pytest.raises(PrivateKeyParseError, match="PEM or plain PKCS1 or PKCS8"):
        parse_rsa_private_key(b"definitely not a key")


def test_non_rsa_key_is_invalid() -> None:
    ec_key = ec.generate_private_key(ec.SECP256R1())
    config = ServiceAccountConfig(email=EMAIL, private_key=_pem(ec_key, serialization.PrivateFormat.PKCS8))

    with pytest.raises(InvalidPrivateKeyError):
        convert_service_account_to_jwt(config)


def _write_key_file(path: Path, key: rsa.RSAPrivateKey, **overrides: Any) -> Path:
    data = {
        "type": "service_account",
        "project_id": "example-project",
        "private_key_id": "abc123",
        "private_key": _pem(key, serialization.PrivateFormat.PKCS8).decode("utf-8"),
        "client_email": EMAIL,
        "token_uri": GOOGLE_TOKEN_URL,
    }
    data.update(overrides)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_service_account_config(tmp_path: Path, rsa_key: rsa.RSAPrivateKey) -> None:
    key_file = _write_key_file(tmp_path / "sa.json", rsa_key)

    config = load_service_account_config(key_file, scopes=[YOUTUBE_SCOPE_PARTNER])

    assert config.email == EMAIL
    assert config.private_key_id == "abc123"
    assert config.scopes == (YOUTUBE_SCOPE_PARTNER,)
    assert config.token_url == GOOGLE_TOKEN_URL
    assert convert_service_account_to_jwt(config).count(".") == 2


def test_load_service_account_config_from_environment(
    clean_env: pytest.MonkeyPatch, tmp_path: Path, rsa_key: rsa.RSAPrivateKey
) -> None:
    key_file = _write_key_file(tmp_path / "sa.json", rsa_key)
    clean_env.setenv("GOOGLE_SERVICE_ACCOUNT_PATH", str(key_file))

    assert load_service_account_config().email == EMAIL


def test_load_service_account_config_requires_a_path(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ConfigError):
        load_service_account_config()


def test_load_service_account_config_rejects_incomplete_file(tmp_path: Path, rsa_key: rsa.RSAPrivateKey) -> None:
    key_file = _write_key_file(tmp_path / "sa.json", rsa_key, client_email="")

    with pytest.raises(ConfigError):
        load_service_account_config(key_file)
