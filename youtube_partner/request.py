from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar, overload

import httpx
from pydantic import BaseModel, ValidationError

from youtube_partner.errors import ApiError, ErrorType

LOGGER = logging.getLogger(__name__)

YOUTUBE_API_BASE_URL = "https://www.googleapis.com/youtube/v3"
YOUTUBE_PARTNER_API_BASE_URL = "https://www.googleapis.com/youtube/partner/v1"

ModelT = TypeVar("ModelT", bound=BaseModel)

QueryParams = list[tuple[str, str]]


@dataclass
class Request:
    method: str
    url: str
    params: QueryParams = field(default_factory=list)
    body: bytes | None = None

    @property
    def headers(self) -> dict[str, str]:
        if self.body is None:
            return {}
        return {"Content-Type": "application/json"}


class RequestRunner(Protocol):
    def run(self, request: Request) -> httpx.Response:
        """Send ``request`` and return the raw response without inspecting its status."""


@overload
def decode_response(response: httpx.Response, model: None) -> None: ...


@overload
def decode_response(response: httpx.Response, model: type[ModelT]) -> ModelT: ...


def decode_response(response: httpx.Response, model: type[ModelT] | None) -> ModelT | None:
    """Turn a raw response into ``model`` or raise :class:`ApiError`.

    Passing ``model=None`` discards the body of a successful response.
    """
    if response.status_code >= 400:
        body = _read_body(response)
        parsed = _parse_error_body(body)
        if parsed is not None:
            reason, description = parsed
            LOGGER.warning("YouTube API returned %s: %s", response.status_code, reason)
            raise ApiError(
                error_type=ErrorType.API,
                status_code=response.status_code,
                reason=reason,
                description=description,
                body=body,
            )
        LOGGER.warning("YouTube API returned %s with an unrecognised body", response.status_code)
        raise ApiError(
            error_type=ErrorType.UNKNOWN,
            status_code=response.status_code,
            description=body,
            body=body,
        )
    if model is None:
        return None
    body = _read_body(response)
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise ApiError(
            error_type=ErrorType.JSON,
            status_code=response.status_code,
            description=str(exc),
            body=body,
        ) from exc


def _read_body(response: httpx.Response) -> str:
    try:
        response.read()
    except httpx.StreamError as exc:
        raise ApiError(
            error_type=ErrorType.BODY,
            status_code=response.status_code,
            description=str(exc) or type(exc).__name__,
        ) from exc
    return response.text


def _parse_error_body(body: str) -> tuple[str, str] | None:
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    # OAuth endpoints: {"error": "invalid_grant", "error_description": "..."}
    if isinstance(error, str) and error:
        description = payload.get("error_description")
        if isinstance(description, str) and description:
            return error, description
        return error, error
    # Google APIs: {"error": {"code": 403, "message": "...", "errors": [{"reason": "..."}]}}
    if isinstance(error, dict):
        reason = _first_reason(error) or str(error.get("status") or error.get("code") or "")
        message = error.get("message")
        description = message if isinstance(message, str) and message else reason
        return reason, description
    return None


def _first_reason(error: dict[str, Any]) -> str | None:
    errors = error.get("errors")
    if not isinstance(errors, list):
        return None
    for item in errors:
        if isinstance(item, dict):
            reason = item.get("reason")
            if isinstance(reason, str) and reason:
                return reason
    return None
