from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from youtube_partner.config import get_default_timeout
from youtube_partner.request import Request

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnauthenticatedRunner:
    """Sends requests without credentials. Only the OAuth token endpoint accepts these."""

    timeout: float = field(default_factory=get_default_timeout)
    transport: httpx.BaseTransport | None = None

    def run(self, request: Request) -> httpx.Response:
        return _send(request, headers=request.headers, timeout=self.timeout, transport=self.transport)


@dataclass(frozen=True)
class AccessTokenRunner:
    """Sends requests with a bearer access token. An empty token sends no ``Authorization`` header."""

    access_token: str = field(repr=False)
    timeout: float = field(default_factory=get_default_timeout)
    transport: httpx.BaseTransport | None = None

    def run(self, request: Request) -> httpx.Response:
        headers = request.headers
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return _send(request, headers=headers, timeout=self.timeout, transport=self.transport)


@dataclass(frozen=True)
class CustomClientRunner:
    """Sends requests through a caller-configured client.

    Use this when authentication lives in the client itself, e.g. an ``httpx.Client`` whose
    ``auth`` attaches service-account credentials. The caller owns the client and closes it.
    """

    client: httpx.Client

    def run(self, request: Request) -> httpx.Response:
        LOGGER.debug("%s %s", request.method, request.url)
        return self.client.request(
            request.method,
            request.url,
            params=request.params,
            content=request.body,
            headers=request.headers,
        )


def _send(
    request: Request,
    *,
    headers: dict[str, str],
    timeout: float,
    transport: httpx.BaseTransport | None,
) -> httpx.Response:
    LOGGER.debug("%s %s", request.method, request.url)
    with httpx.Client(timeout=timeout, transport=transport) as client:
        return client.request(
            request.method,
            request.url,
            params=request.params,
            content=request.body,
            headers=headers,
        )
