from __future__ import annotations

from youtube_partner.config import get_default_timeout
from youtube_partner.models import UserInfo
from youtube_partner.request import Request, RequestRunner, decode_response
from youtube_partner.runners import AccessTokenRunner

GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"


def get_user_info(
    access_token: str,
    timeout: float | None = None,
    *,
    runner: RequestRunner | None = None,
) -> UserInfo:
    if runner is None:
        runner = AccessTokenRunner(
            access_token=access_token,
            timeout=timeout if timeout is not None else get_default_timeout(),
        )
    response = runner.run(Request(method="GET", url=GOOGLE_USERINFO_URL))
    return decode_response(response, UserInfo)
