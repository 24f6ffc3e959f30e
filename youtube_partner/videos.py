from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from youtube_partner.errors import InvalidListVideoParamsError
from youtube_partner.models import ListVideosResponse
from youtube_partner.request import YOUTUBE_API_BASE_URL, QueryParams, Request, RequestRunner, decode_response

LIST_VIDEOS_URL = f"{YOUTUBE_API_BASE_URL}/videos"


class VideoPart(StrEnum):
    CONTENT_DETAILS = "contentDetails"
    FILE_DETAILS = "fileDetails"
    ID = "id"
    LIVE_STREAMING_DETAILS = "liveStreamingDetails"
    LOCALIZATIONS = "localizations"
    PLAYER = "player"
    PROCESSING_DETAILS = "processingDetails"
    RECORDING_DETAILS = "recordingDetails"
    SNIPPET = "snippet"
    STATISTICS = "statistics"
    STATUS = "status"
    SUGGESTIONS = "suggestions"
    TOPIC_DETAILS = "topicDetails"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_


@dataclass
class ListVideoParams:
    """Query for ``videos.list``.

    At least one part should be given; the API rejects an empty ``part``. A ``page_token``
    takes precedence over ``ids`` because the API does not page through id lookups.
    """

    parts: list[VideoPart | str] = field(default_factory=list)
    ids: list[str] = field(default_factory=list)
    page_token: str = ""

    def validate(self) -> bool:
        return all(VideoPart.is_valid(str(part)) for part in self.parts)

    def values(self) -> QueryParams:
        params: QueryParams = [("part", ",".join(str(part) for part in self.parts))]
        if self.page_token:
            params.append(("pageToken", self.page_token))
        elif self.ids:
            params.append(("id", ",".join(self.ids)))
        return params


def list_videos(runner: RequestRunner, params: ListVideoParams) -> ListVideosResponse:
    """Fetch one page of videos. Costs 1 quota unit.

    https://developers.google.com/youtube/v3/docs/videos/list
    """
    if not params.validate():
        unknown = [str(part) for part in params.parts if not VideoPart.is_valid(str(part))]
        raise InvalidListVideoParamsError(f"unknown video parts: {', '.join(unknown)}")
    response = runner.run(Request(method="GET", url=LIST_VIDEOS_URL, params=params.values()))
    return decode_response(response, ListVideosResponse)
