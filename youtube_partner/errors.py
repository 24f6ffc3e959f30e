from __future__ import annotations

from enum import StrEnum


class ErrorType(StrEnum):
    API = "api"
    UNKNOWN = "unknown"
    BODY = "body"
    JSON = "json"


class YouTubePartnerError(RuntimeError):
    """Base class for every error raised by this package."""


class ApiError(YouTubePartnerError):
    """A failed call, built from the HTTP response that carried it.

    ``error_type`` tells how much of the response could be understood:

    * ``API``: the body was the upstream structured error schema.
    * ``UNKNOWN``: the status was an error but the body was opaque; ``description`` holds it verbatim.
    * ``BODY``: the response body could not be read.
    * ``JSON``: a success response did not match the expected schema.
    """

    def __init__(
        self,
        *,
        error_type: ErrorType,
        description: str,
        status_code: int | None = None,
        body: str = "",
        reason: str | None = None,
    ) -> None:
        self.error_type = error_type
        self.description = description
        self.status_code = status_code
        self.body = body
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        status = f"HTTP {self.status_code}" if self.status_code is not None else "no status"
        if self.reason and self.reason != self.description:
            return f"YouTube API error ({status}, {self.error_type}): {self.reason}: {self.description}"
        return f"YouTube API error ({status}, {self.error_type}): {self.description}"


class InvalidParamsError(YouTubePartnerError, ValueError):
    pass


class InvalidClaimSearchParamsError(InvalidParamsError):
    def __init__(self, message: str = "invalid claim search params") -> None:
        super().__init__(message)


class InvalidPatchClaimsParamsError(InvalidParamsError):
    def __init__(self, message: str = "invalid patch claims params") -> None:
        super().__init__(message)


class InvalidListVideoParamsError(InvalidParamsError):
    def __init__(self, message: str = "invalid list video params") -> None:
        super().__init__(message)


class InvalidWhitelistParamsError(InvalidParamsError):
    def __init__(self, message: str = "invalid whitelist params") -> None:
        super().__init__(message)


class NotWhitelistedError(YouTubePartnerError):
    def __init__(self, message: str = "not whitelisted") -> None:
        super().__init__(message)


class RateLimitedError(YouTubePartnerError):
    def __init__(self, message: str = "rate limited") -> None:
        super().__init__(message)


class PrivateKeyParseError(YouTubePartnerError, ValueError):
    pass


class InvalidPrivateKeyError(YouTubePartnerError, ValueError):
    def __init__(self, message: str = "invalid private key") -> None:
        super().__init__(message)


class ConfigError(YouTubePartnerError, ValueError):
    pass
