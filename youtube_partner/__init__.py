from __future__ import annotations

from youtube_partner.auth import (
    GOOGLE_TOKEN_URL,
    build_authorization_url,
    exchange_auth_token,
    exchange_code_for_token,
    exchange_jwt_token,
    refresh_access_token,
)
from youtube_partner.claims import (
    ClaimSort,
    ClaimStatus,
    PatchClaimsParams,
    SearchClaimsParams,
    patch_claim,
    search_claims,
)
from youtube_partner.config import OAuthConfig, get_default_timeout, get_oauth_config
from youtube_partner.errors import (
    ApiError,
    ConfigError,
    ErrorType,
    InvalidClaimSearchParamsError,
    InvalidListVideoParamsError,
    InvalidParamsError,
    InvalidPatchClaimsParamsError,
    InvalidPrivateKeyError,
    InvalidWhitelistParamsError,
    NotWhitelistedError,
    PrivateKeyParseError,
    RateLimitedError,
    YouTubePartnerError,
)
from youtube_partner.models import (
    Claim,
    ListVideosResponse,
    PageInfo,
    SearchClaimsResponse,
    Token,
    UserInfo,
    Video,
    VideoSnippet,
    Whitelist,
)
from youtube_partner.request import Request, RequestRunner, decode_response
from youtube_partner.runners import AccessTokenRunner, CustomClientRunner, UnauthenticatedRunner
from youtube_partner.service_account import (
    ServiceAccountConfig,
    convert_service_account_to_jwt,
    load_service_account_config,
)
from youtube_partner.userinfo import get_user_info
from youtube_partner.videos import ListVideoParams, VideoPart, list_videos
from youtube_partner.whitelists import (
    DeleteWhitelistParams,
    GetWhitelistParams,
    InsertWhitelistParams,
    convert_whitelist_error,
    delete_whitelist,
    get_whitelist,
    insert_whitelist,
)

__all__ = [
    "GOOGLE_TOKEN_URL",
    "AccessTokenRunner",
    "ApiError",
    "Claim",
    "ClaimSort",
    "ClaimStatus",
    "ConfigError",
    "CustomClientRunner",
    "DeleteWhitelistParams",
    "ErrorType",
    "GetWhitelistParams",
    "InsertWhitelistParams",
    "InvalidClaimSearchParamsError",
    "InvalidListVideoParamsError",
    "InvalidParamsError",
    "InvalidPatchClaimsParamsError",
    "InvalidPrivateKeyError",
    "InvalidWhitelistParamsError",
    "ListVideoParams",
    "ListVideosResponse",
    "NotWhitelistedError",
    "OAuthConfig",
    "PageInfo",
    "PatchClaimsParams",
    "PrivateKeyParseError",
    "RateLimitedError",
    "Request",
    "RequestRunner",
    "SearchClaimsParams",
    "SearchClaimsResponse",
    "ServiceAccountConfig",
    "Token",
    "UnauthenticatedRunner",
    "UserInfo",
    "Video",
    "VideoPart",
    "VideoSnippet",
    "Whitelist",
    "YouTubePartnerError",
    "build_authorization_url",
    "convert_service_account_to_jwt",
    "convert_whitelist_error",
    "decode_response",
    "delete_whitelist",
    "exchange_auth_token",
    "exchange_code_for_token",
    "exchange_jwt_token",
    "get_default_timeout",
    "get_oauth_config",
    "get_user_info",
    "get_whitelist",
    "insert_whitelist",
    "list_videos",
    "load_service_account_config",
    "patch_claim",
    "refresh_access_token",
    "search_claims",
]
