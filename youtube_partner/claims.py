from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum

from youtube_partner.errors import InvalidClaimSearchParamsError, InvalidPatchClaimsParamsError
from youtube_partner.models import Claim, PatchClaimBody, SearchClaimsResponse
from youtube_partner.request import (
    YOUTUBE_PARTNER_API_BASE_URL,
    QueryParams,
    Request,
    RequestRunner,
    decode_response,
)

SEARCH_CLAIMS_URL = f"{YOUTUBE_PARTNER_API_BASE_URL}/claimSearch"
PATCH_CLAIM_URL = f"{YOUTUBE_PARTNER_API_BASE_URL}/claims"

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class ClaimStatus(StrEnum):
    ACTIVE = "active"
    APPEALED = "appealed"
    DISPUTED = "disputed"
    INACTIVE = "inactive"
    PENDING = "pending"
    POTENTIAL = "potential"
    ROUTED_FOR_REVIEW = "routedForReview"
    TAKEDOWN = "takedown"

    @classmethod
    def is_valid(cls, value: str | None) -> bool:
        return bool(value) and value in cls._value2member_map_


class ClaimSort(StrEnum):
    DATE = "date"
    VIEW_COUNT = "viewCount"


@dataclass
class SearchClaimsParams:
    """Filters for ``claimSearch.list``.

    Exactly one of ``asset_id``, ``q``, ``reference_id`` or ``video_ids`` selects the claims,
    and ``status`` narrows them. ``video_ids`` takes up to 10 ids. ``status_modified_after``
    is a ``YYYY-MM-DD`` date no earlier than 2016-06-30; other formats are left out of the query.

    https://developers.google.com/youtube/partner/docs/v1/claimSearch/list
    """

    asset_id: str = ""
    q: str = ""
    reference_id: str = ""
    video_ids: list[str] = field(default_factory=list)
    status: ClaimStatus | str = ""
    page_token: str = ""
    include_third_party_claims: bool = False
    on_behalf_of_content_owner: str = ""
    sort: ClaimSort | str = ""
    status_modified_after: str = ""

    def validate(self) -> bool:
        filters = [self.asset_id, self.q, self.reference_id, ",".join(self.video_ids)]
        if sum(1 for value in filters if value) != 1:
            return False
        return ClaimStatus.is_valid(self.status)

    def values(self) -> QueryParams:
        params: QueryParams = []
        if self.asset_id:
            params.append(("assetId", self.asset_id))
        if self.q:
            params.append(("q", self.q))
        if self.reference_id:
            params.append(("referenceId", self.reference_id))
        if self.video_ids:
            params.append(("videoId", ",".join(self.video_ids)))
        if self.status:
            params.append(("status", str(self.status)))
        params.append(("includeThirdPartyClaims", "true" if self.include_third_party_claims else "false"))
        if self.on_behalf_of_content_owner:
            params.append(("onBehalfOfContentOwner", self.on_behalf_of_content_owner))
        if self.page_token:
            params.append(("pageToken", self.page_token))
        if self.sort in (ClaimSort.DATE, ClaimSort.VIEW_COUNT):
            params.append(("sort", str(self.sort)))
        if self.status_modified_after and DATE_PATTERN.fullmatch(self.status_modified_after):
            params.append(("statusModifiedAfter", self.status_modified_after))
        return params


@dataclass
class PatchClaimsParams:
    """Update for ``claims.patch``. The API only allows moving a claim from active to inactive."""

    claim_id: str
    status: ClaimStatus | str = ""
    on_behalf_of_content_owner: str = ""
    block_outside_ownership: bool | None = None

    def validate(self) -> bool:
        return bool(self.claim_id) and ClaimStatus.is_valid(self.status)

    @property
    def url(self) -> str:
        return f"{PATCH_CLAIM_URL}/{self.claim_id}"

    def values(self) -> QueryParams:
        if self.on_behalf_of_content_owner:
            return [("onBehalfOfContentOwner", self.on_behalf_of_content_owner)]
        return []

    def body(self) -> PatchClaimBody:
        if not ClaimStatus.is_valid(self.status):
            raise InvalidPatchClaimsParamsError(f"invalid patch claims params: bad status {self.status!r}")
        body = PatchClaimBody(status=str(self.status), block_outside_ownership=self.block_outside_ownership)
        if body.is_empty():
            raise InvalidPatchClaimsParamsError("invalid patch claims params: nothing to update")
        return body


def search_claims(runner: RequestRunner, params: SearchClaimsParams) -> SearchClaimsResponse:
    """Fetch one page of claims matching ``params``.

    Requires the ``youtubepartner`` scope.
    """
    if not params.validate():
        raise InvalidClaimSearchParamsError()
    response = runner.run(Request(method="GET", url=SEARCH_CLAIMS_URL, params=params.values()))
    return decode_response(response, SearchClaimsResponse)


def patch_claim(runner: RequestRunner, params: PatchClaimsParams) -> Claim:
    """Apply ``params`` to an existing claim with patch semantics.

    Requires the ``youtubepartner`` scope.
    https://developers.google.com/youtube/partner/docs/v1/claims/patch
    """
    if not params.validate():
        raise InvalidPatchClaimsParamsError()
    body = params.body()
    response = runner.run(
        Request(method="PATCH", url=params.url, params=params.values(), body=body.to_json())
    )
    return decode_response(response, Claim)
