from __future__ import annotations

GOOGLE_SCOPE_OPENID = "openid"
GOOGLE_SCOPE_USERINFO_EMAIL = "https://www.googleapis.com/auth/userinfo.email"
GOOGLE_SCOPE_USERINFO_PROFILE = "https://www.googleapis.com/auth/userinfo.profile"

YOUTUBE_SCOPE = "https://www.googleapis.com/auth/youtube"
YOUTUBE_SCOPE_READONLY = "https://www.googleapis.com/auth/youtube.readonly"
YOUTUBE_SCOPE_PARTNER = "https://www.googleapis.com/auth/youtubepartner"

BASE_SCOPES: tuple[str, ...] = (
    GOOGLE_SCOPE_OPENID,
    GOOGLE_SCOPE_USERINFO_EMAIL,
)

DEFAULT_SCOPES: tuple[str, ...] = (
    *BASE_SCOPES,
    YOUTUBE_SCOPE_READONLY,
    YOUTUBE_SCOPE_PARTNER,
)
