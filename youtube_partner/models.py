from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Token(ApiModel):
    access_token: str = ""
    expires_in: int = Field(default=0, description="Lifetime of the access token in seconds")
    refresh_token: str = ""
    scope: str = ""
    token_type: str = ""


class UserInfo(ApiModel):
    id: str = ""
    email: str = ""
    verified_email: bool = False
    name: str = ""
    given_name: str = ""
    family_name: str = ""
    picture: str = ""
    hd: str = Field(default="", description="Hosted G Suite domain of the user, if any")


class PageInfo(ApiModel):
    results_per_page: int = Field(default=0, alias="resultsPerPage")
    total_results: int = Field(default=0, alias="totalResults")


class VideoSnippet(ApiModel):
    category_id: str = Field(default="", alias="categoryId")
    channel_id: str = Field(default="", alias="channelId")
    channel_title: str = Field(default="", alias="channelTitle")
    description: str = ""
    published_at: str = Field(default="", alias="publishedAt")
    tags: list[str] = Field(default_factory=list)
    title: str = ""


class Video(ApiModel):
    id: str = ""
    kind: str = ""
    etag: str = ""
    snippet: VideoSnippet | None = None
    content_details: dict[str, Any] | None = Field(default=None, alias="contentDetails")
    statistics: dict[str, Any] | None = None
    status: dict[str, Any] | None = None


class ListVideosResponse(ApiModel):
    items: list[Video] = Field(default_factory=list)
    next_page_token: str = Field(default="", alias="nextPageToken")
    prev_page_token: str = Field(default="", alias="prevPageToken")
    page_info: PageInfo | None = Field(default=None, alias="pageInfo")


class Claim(ApiModel):
    id: str = ""
    kind: str = ""
    asset_id: str = Field(default="", alias="assetId")
    video_id: str = Field(default="", alias="videoId")
    status: str = Field(default="", description="One of ClaimStatus, kept as text so new upstream values still decode")
    content_type: str = Field(default="", alias="contentType")
    block_outside_ownership: bool = Field(default=False, alias="blockOutsideOwnership")
    is_partner_uploaded: bool = Field(default=False, alias="isPartnerUploaded")
    time_created: str = Field(default="", alias="timeCreated")
    time_status_last_modified: str = Field(default="", alias="timeStatusLastModified")


class SearchClaimsResponse(ApiModel):
    items: list[Claim] = Field(default_factory=list)
    next_page_token: str = Field(default="", alias="nextPageToken")
    page_info: PageInfo | None = Field(default=None, alias="pageInfo")


class Whitelist(ApiModel):
    id: str = ""
    kind: str = ""
    title: str = ""


class PatchClaimBody(ApiModel):
    status: str | None = None
    block_outside_ownership: bool | None = Field(default=None, alias="blockOutsideOwnership")

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


class InsertWhitelistBody(ApiModel):
    kind: Literal["youtubePartner#whitelist"] = "youtubePartner#whitelist"
    id: str

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")
