from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import overload

import httpx

from youtube_partner.errors import (
    ApiError,
    InvalidWhitelistParamsError,
    NotWhitelistedError,
    RateLimitedError,
    YouTubePartnerError,
)
from youtube_partner.models import InsertWhitelistBody, Whitelist
from youtube_partner.request import (
    YOUTUBE_PARTNER_API_BASE_URL,
    QueryParams,
    Request,
    RequestRunner,
    decode_response,
)

LOGGER = logging.getLogger(__name__)

WHITELIST_URL = f"{YOUTUBE_PARTNER_API_BASE_URL}/whitelists"

QUOTA_EXCEEDED_MARKER = "quotaExceeded"


@dataclass
class WhitelistParams:
    """Channel id plus the content owner the call is made for.

    ``onBehalfOfContentOwner`` is sent on every whitelist call, empty or not.
    """

    id: str
    on_behalf_of_content_owner: str = ""

    def validate(self) -> bool:
        return bool(self.id)

    def values(self) -> QueryParams:
        return [("onBehalfOfContentOwner", self.on_behalf_of_content_owner)]


class GetWhitelistParams(WhitelistParams):
    pass


class InsertWhitelistParams(WhitelistParams):
    def body(self) -> InsertWhitelistBody:
        return InsertWhitelistBody(id=self.id)


class DeleteWhitelistParams(WhitelistParams):
    pass


def get_whitelist(runner: RequestRunner, params: GetWhitelistParams) -> Whitelist:
    """Return the whitelist entry for a channel; raises :class:`NotWhitelistedError` if there is none.

    https://developers.google.com/youtube/partner/docs/v1/whitelists/get
    """
    _require_channel_id(params)
    response = runner.run(Request(method="GET", url=f"{WHITELIST_URL}/{params.id}", params=params.values()))
    return _decode(response, Whitelist)


def insert_whitelist(runner: RequestRunner, params: InsertWhitelistParams) -> Whitelist:
    """Whitelist a channel you do not own so your assets place no claims on its uploads.

    https://developers.google.com/youtube/partner/docs/v1/whitelists/insert
    """
    _require_channel_id(params)
    response = runner.run(
        Request(method="POST", url=WHITELIST_URL, params=params.values(), body=params.body().to_json())
    )
    return _decode(response, Whitelist)


def delete_whitelist(runner: RequestRunner, params: DeleteWhitelistParams) -> None:
    _require_channel_id(params)
    response = runner.run(Request(method="DELETE", url=f"{WHITELIST_URL}/{params.id}", params=params.values()))
    _decode(response, None)


def convert_whitelist_error(error: ApiError) -> YouTubePartnerError:
    """Map partner API errors onto whitelist outcomes.

    404 means the channel is not whitelisted. ``quotaExceeded`` arrives as a 403.
    Anything else is returned unchanged.
    https://developers.google.com/youtube/partner/docs/v1/errors#general
    """
    if error.status_code == 404:
        LOGGER.info("Channel is not whitelisted")
        return NotWhitelistedError()
    if error.status_code == 403 and QUOTA_EXCEEDED_MARKER in error.body:
        LOGGER.info("Whitelist call hit the partner API quota")
        return RateLimitedError()
    return error


@overload
def _decode(response: httpx.Response, model: None) -> None: ...


@overload
def _decode(response: httpx.Response, model: type[Whitelist]) -> Whitelist: ...


def _decode(response: httpx.Response, model: type[Whitelist] | None) -> Whitelist | None:
    try:
        return decode_response(response, model)
    except ApiError as exc:
        converted = convert_whitelist_error(exc)
        if converted is exc:
            raise
        raise converted from exc


def _require_channel_id(params: WhitelistParams) -> None:
    if not params.validate():
        raise InvalidWhitelistParamsError("invalid whitelist params: channel id is required")
