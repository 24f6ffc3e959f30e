from __future__ import annotations

from typing import Iterator

import httpx
import pytest

from youtube_partner.errors import ApiError, ErrorType
from youtube_partner.models import Token, Whitelist
from youtube_partner.request import Request, decode_response


class _ClosedStream(httpx.SyncByteStream):
    def __iter__(self) -> Iterator[bytes]:
        raise httpx.StreamClosed()


def test_token_body_decodes_field_for_field() -> None:
    payload = {
        "access_token": "ya29.token",
        "expires_in": 3599,
        "refresh_token": "1//refresh",
        "scope": "https://www.googleapis.com/auth/youtubepartner",
        "token_type": "Bearer",
    }

    token = decode_response(httpx.Response(200, json=payload), Token)

    assert token.model_dump() == payload


def test_oauth_style_error_is_structured() -> None:
    response = httpx.Response(404, content=b'{"error":"not_found"}')

    with pytest.raises(ApiError) as excinfo:
        decode_response(response, Whitelist)

    error = excinfo.value
    assert error.status_code == 404
    assert error.error_type is ErrorType.API
    assert error.reason == "not_found"
    assert error.description == "not_found"
    assert error.body == '{"error":"not_found"}'


def test_oauth_error_description_is_used() -> None:
    response = httpx.Response(400, json={"error": "invalid_grant", "error_description": "Bad Request"})

    with pytest.raises(ApiError) as excinfo:
        decode_response(response, Token)

    assert excinfo.value.reason == "invalid_grant"
    assert excinfo.value.description == "Bad Request"


def test_google_api_error_object_is_structured() -> None:
    response = httpx.Response(
        403,
        json={
            "error": {
                "code": 403,
                "message": "The request cannot be completed because you have exceeded your quota.",
                "errors": [{"domain": "youtube.quota", "reason": "quotaExceeded"}],
            }
        },
    )

    with pytest.raises(ApiError) as excinfo:
        decode_response(response, None)

    error = excinfo.value
    assert error.error_type is ErrorType.API
    assert error.status_code == 403
    assert error.reason == "quotaExceeded"
    assert error.description.startswith("The request cannot be completed")
    assert "quotaExceeded" in error.body


def test_opaque_error_body_is_unknown() -> None:
    response = httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(ApiError) as excinfo:
        decode_response(response, Whitelist)

    error = excinfo.value
    assert error.error_type is ErrorType.UNKNOWN
    assert error.status_code == 502
    assert error.description == "<html>Bad Gateway</html>"
    assert error.body == "<html>Bad Gateway</html>"


def test_json_object_without_error_member_is_unknown() -> None:
    response = httpx.Response(500, json={"message": "oops"})

    with pytest.raises(ApiError) as excinfo:
        decode_response(response, None)

    assert excinfo.value.error_type is ErrorType.UNKNOWN


def test_invalid_success_body_is_json_error() -> None:
    response = httpx.Response(200, text="not json")

    with pytest.raises(ApiError) as excinfo:
        decode_response(response, Token)

    error = excinfo.value
    assert error.error_type is ErrorType.JSON
    assert error.body == "not json"
    assert error.description


def test_none_model_discards_success_body() -> None:
    assert decode_response(httpx.Response(204), None) is None
    assert decode_response(httpx.Response(200, text="whatever"), None) is None


def test_unreadable_body_is_body_error() -> None:
    response = httpx.Response(500, stream=_ClosedStream())

    with pytest.raises(ApiError) as excinfo:
        decode_response(response, None)

    assert excinfo.value.error_type is ErrorType.BODY
    assert excinfo.value.status_code == 500


def test_request_sets_json_content_type_only_with_body() -> None:
    assert Request(method="GET", url="https://example.com").headers == {}
    assert Request(method="POST", url="https://example.com", body=b"{}").headers == {
        "Content-Type": "application/json"
    }
