from __future__ import annotations

import os
from dataclasses import dataclass

from youtube_partner.errors import ConfigError

DEFAULT_TIMEOUT_SECONDS = 10.0

TIMEOUT_ENV = "YOUTUBE_API_TIMEOUT"
CLIENT_ID_ENV = "GOOGLE_CLIENT_ID"
CLIENT_SECRET_ENV = "GOOGLE_CLIENT_SECRET"
REDIRECT_URI_ENV = "GOOGLE_REDIRECT_URI"
SERVICE_ACCOUNT_PATH_ENV = "GOOGLE_SERVICE_ACCOUNT_PATH"


@dataclass(frozen=True)
class OAuthConfig:
    client_id: str
    client_secret: str
    redirect_uri: str


def get_oauth_config() -> OAuthConfig:
    client_id = os.getenv(CLIENT_ID_ENV)
    client_secret = os.getenv(CLIENT_SECRET_ENV)
    redirect_uri = os.getenv(REDIRECT_URI_ENV)
    if not client_id or not client_secret or not redirect_uri:
        raise ConfigError(
            "Missing Google OAuth configuration. Expected GOOGLE_CLIENT_ID, "
            "GOOGLE_CLIENT_SECRET, and GOOGLE_REDIRECT_URI."
        )
    return OAuthConfig(client_id=client_id, client_secret=client_secret, redirect_uri=redirect_uri)


def get_default_timeout() -> float:
    raw = os.getenv(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}.") from exc
    if timeout <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}.")
    return timeout


def get_service_account_path() -> str | None:
    return os.getenv(SERVICE_ACCOUNT_PATH_ENV) or None
