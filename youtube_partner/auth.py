from __future__ import annotations

import logging
from typing import Sequence
from urllib.parse import urlencode

from youtube_partner.config import OAuthConfig, get_default_timeout, get_oauth_config
from youtube_partner.models import Token
from youtube_partner.request import QueryParams, Request, RequestRunner, decode_response
from youtube_partner.runners import UnauthenticatedRunner
from youtube_partner.scopes import DEFAULT_SCOPES

LOGGER = logging.getLogger(__name__)

GOOGLE_AUTH_BASE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"

JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"


def build_authorization_url(
    *,
    client_id: str,
    redirect_uri: str,
    state: str,
    scopes: Sequence[str] | None = None,
    access_type: str = "offline",
    prompt: str = "consent",
) -> str:
    params = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "scope": " ".join(scopes or DEFAULT_SCOPES),
        "state": state,
        "access_type": access_type,
        "prompt": prompt,
        "include_granted_scopes": "true",
    }
    return f"{GOOGLE_AUTH_BASE_URL}?{urlencode(params)}"


def exchange_auth_token(
    client_id: str,
    client_secret: str,
    code: str,
    redirect_uri: str,
    timeout: float | None = None,
    *,
    runner: RequestRunner | None = None,
) -> Token:
    """Exchange an authorization code from the consent redirect for a :class:`Token`.

    The returned ``token_type`` is always ``Bearer``. Nothing here tracks expiry; call
    :func:`refresh_access_token` before ``expires_in`` runs out.
    """
    params: QueryParams = [
        ("client_id", client_id),
        ("client_secret", client_secret),
        ("grant_type", "authorization_code"),
        ("code", code),
        ("redirect_uri", redirect_uri),
    ]
    return _post_token_request(params, timeout=timeout, runner=runner)


def exchange_jwt_token(
    assertion: str,
    timeout: float | None = None,
    *,
    runner: RequestRunner | None = None,
) -> Token:
    """Exchange a signed service-account JWT for a :class:`Token`.

    Build the assertion with :func:`youtube_partner.service_account.convert_service_account_to_jwt`
    and mint a fresh one once the returned token is close to expiry.
    """
    params: QueryParams = [
        ("grant_type", JWT_BEARER_GRANT_TYPE),
        ("assertion", assertion),
    ]
    return _post_token_request(params, timeout=timeout, runner=runner)


def refresh_access_token(
    client_id: str,
    client_secret: str,
    refresh_token: str,
    timeout: float | None = None,
    *,
    runner: RequestRunner | None = None,
) -> Token:
    params: QueryParams = [
        ("client_id", client_id),
        ("client_secret", client_secret),
        ("grant_type", "refresh_token"),
        ("refresh_token", refresh_token),
    ]
    token = _post_token_request(params, timeout=timeout, runner=runner)
    if not token.refresh_token:
        token = token.model_copy(update={"refresh_token": refresh_token})
    return token


def exchange_code_for_token(
    code: str,
    *,
    config: OAuthConfig | None = None,
    timeout: float | None = None,
    runner: RequestRunner | None = None,
) -> Token:
    config = config or get_oauth_config()
    return exchange_auth_token(
        config.client_id,
        config.client_secret,
        code,
        config.redirect_uri,
        timeout,
        runner=runner,
    )


def _post_token_request(
    params: QueryParams,
    *,
    timeout: float | None,
    runner: RequestRunner | None,
) -> Token:
    if runner is None:
        runner = UnauthenticatedRunner(timeout=timeout if timeout is not None else get_default_timeout())
    grant_type = next((value for key, value in params if key == "grant_type"), "")
    LOGGER.debug("Requesting Google OAuth token (grant_type=%s)", grant_type)
    response = runner.run(Request(method="POST", url=GOOGLE_TOKEN_URL, params=params))
    return decode_response(response, Token)
