"""Provider error types.

Each provider owns a closed set of failure kinds. The aggregator re-raises
these exceptions untouched, so callers can tell which provider failed and why.
"""
from __future__ import annotations

from enum import Enum


class ProfileErrorKind(Enum):
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"


class PostsErrorKind(Enum):
    NETWORK_ERROR = "network_error"
    INVALID_RESPONSE = "invalid_response"


class NotificationsErrorKind(Enum):
    NO_CONNECTION = "no_connection"
    UNAUTHORIZED = "unauthorized"


_DESCRIPTIONS: dict[Enum, str] = {
    ProfileErrorKind.NOT_FOUND: "User not found",
    ProfileErrorKind.TIMEOUT: "Network timeout",
    PostsErrorKind.NETWORK_ERROR: "Network error while fetching posts",
    PostsErrorKind.INVALID_RESPONSE: "Invalid response format",
    NotificationsErrorKind.NO_CONNECTION: "No network connection",
    NotificationsErrorKind.UNAUTHORIZED: "Unauthorized access",
}


def describe(kind: Enum) -> str:
    """Human-readable description of a failure kind."""
    return _DESCRIPTIONS.get(kind, kind.name.replace("_", " ").capitalize())


class ProviderError(Exception):
    """Base exception for data provider failures."""

    provider: str = "provider"
    kind_type: type[Enum] = Enum

    def __init__(self, kind: Enum, message: str | None = None) -> None:
        if not isinstance(kind, self.kind_type):
            raise TypeError(
                f"{type(self).__name__} expects a {self.kind_type.__name__}, "
                f"got {kind!r}"
            )
        self.kind = kind
        self.message = message or describe(kind)
        super().__init__(f"[{self.provider}] {self.message}")


class ProfileError(ProviderError):
    """Raised when the user profile cannot be fetched."""

    provider = "profile"
    kind_type = ProfileErrorKind


class PostsError(ProviderError):
    """Raised when the user's posts cannot be fetched."""

    provider = "posts"
    kind_type = PostsErrorKind


class NotificationsError(ProviderError):
    """Raised when the user's notifications cannot be fetched."""

    provider = "notifications"
    kind_type = NotificationsErrorKind
