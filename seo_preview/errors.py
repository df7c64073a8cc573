"""Classified fetch failures surfaced to the end user verbatim."""

from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    kind = "failed"
    default_message = "Failed to analyze the website. All access paths failed. Please try again later."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind}


class InvalidURLError(FetchError, ValueError):
    kind = "invalid_url"
    default_message = "Please enter a valid URL starting with http:// or https://"


class RateLimitedError(FetchError):
    kind = "rate_limited"
    default_message = "All access paths are rate limited. Please try again in a few minutes."


class ForbiddenError(FetchError):
    kind = "forbidden"
    default_message = "Access to this website is forbidden. Please try another URL."


class NotFoundError(FetchError):
    kind = "not_found"
    default_message = "Website not found. Please check the URL and try again."


class NetworkError(FetchError):
    kind = "network"
    default_message = "Network error. Please check your internet connection and try again."


class FetchFailedError(FetchError):
    kind = "failed"


_STATUS_ERRORS = {
    429: RateLimitedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def classify_failure(status_code: Optional[int], has_response: bool) -> FetchError:
    """Maps the last failed attempt onto one of the classified errors."""
    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls:
        return error_cls(status_code=status_code)
    if not has_response:
        return NetworkError()
    return FetchFailedError(status_code=status_code)
