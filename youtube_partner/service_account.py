from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Mapping, Sequence

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from google.auth import crypt, jwt

from youtube_partner.auth import GOOGLE_TOKEN_URL
from youtube_partner.config import get_service_account_path
from youtube_partner.errors import ConfigError, InvalidPrivateKeyError, PrivateKeyParseError

LOGGER = logging.getLogger(__name__)

PEM_MARKER = b"-----BEGIN"

ASSERTION_LIFETIME = timedelta(hours=1)
CLOCK_SKEW = timedelta(seconds=10)


@dataclass(frozen=True)
class ServiceAccountConfig:
    email: str
    private_key: bytes = field(repr=False)
    scopes: tuple[str, ...] = ()
    token_url: str = GOOGLE_TOKEN_URL
    private_key_id: str | None = None
    subject: str | None = None
    private_claims: Mapping[str, Any] = field(default_factory=dict)


def parse_rsa_private_key(data: bytes | str) -> rsa.RSAPrivateKey:
    """Load an unencrypted RSA private key given as PEM or raw DER.

    Both PKCS#8 and PKCS#1 encodings are accepted.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else data
    try:
        if PEM_MARKER in raw:
            key = serialization.load_pem_private_key(raw, password=None)
        else:
            key = serialization.load_der_private_key(raw, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise PrivateKeyParseError(
            f"private key should be a PEM or plain PKCS1 or PKCS8; parse error: {exc}"
        ) from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise InvalidPrivateKeyError(f"invalid private key: expected RSA, got {type(key).__name__}")
    return key


def convert_service_account_to_jwt(config: ServiceAccountConfig, *, now: datetime | None = None) -> str:
    """Build the signed assertion that :func:`youtube_partner.auth.exchange_jwt_token` trades for a token."""
    private_key = parse_rsa_private_key(config.private_key)
    pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    signer = crypt.RSASigner.from_string(pem, key_id=config.private_key_id)

    issued_at = (now or datetime.now(timezone.utc)) - CLOCK_SKEW
    payload: dict[str, Any] = {
        "iss": config.email,
        "scope": " ".join(config.scopes),
        "aud": config.token_url,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + ASSERTION_LIFETIME).timestamp()),
    }
    if config.subject:
        payload["sub"] = config.subject
    payload.update(config.private_claims)

    LOGGER.debug("Signing service-account assertion for %s", config.email)
    return jwt.encode(signer, payload).decode("utf-8")


def load_service_account_config(
    path: str | Path | None = None,
    *,
    scopes: Sequence[str] = (),
    subject: str | None = None,
) -> ServiceAccountConfig:
    """Read a service-account JSON key file as downloaded from the Google Cloud console.

    ``path`` defaults to ``GOOGLE_SERVICE_ACCOUNT_PATH``.
    """
    resolved = path or get_service_account_path()
    if not resolved:
        raise ConfigError("No service account key given. Pass a path or set GOOGLE_SERVICE_ACCOUNT_PATH.")
    key_path = Path(resolved)
    try:
        data = json.loads(key_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read service account key {key_path}.") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Service account key {key_path} is not valid JSON.") from exc
    if not isinstance(data, dict):
        raise ConfigError("Service account key JSON must be an object.")

    email = data.get("client_email")
    private_key = data.get("private_key")
    if not isinstance(email, str) or not email or not isinstance(private_key, str) or not private_key:
        raise ConfigError("Service account key must contain client_email and private_key.")
    token_url = data.get("token_uri")
    private_key_id = data.get("private_key_id")
    return ServiceAccountConfig(
        email=email,
        private_key=private_key.encode("utf-8"),
        scopes=tuple(scopes),
        token_url=token_url if isinstance(token_url, str) and token_url else GOOGLE_TOKEN_URL,
        private_key_id=private_key_id if isinstance(private_key_id, str) and private_key_id else None,
        subject=subject,
    )
