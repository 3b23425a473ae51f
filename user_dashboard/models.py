"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    """Basic account details for a single user."""

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class Post:
    """One of the user's recent posts."""

    id: int
    title: str
    content: str


@dataclass(frozen=True)
class NotificationItem:
    """A notification addressed to the user."""

    id: int
    message: str
    is_read: bool


@dataclass(frozen=True)
class DashboardData:
    """Everything shown on the user dashboard.

    Built only once the profile, posts and notifications have all been
    fetched; there is no partially populated instance.
    """

    profile: UserProfile
    posts: tuple[Post, ...]
    notifications: tuple[NotificationItem, ...]

    def __post_init__(self) -> None:
        # Providers hand back lists; store tuples so the aggregate stays immutable.
        object.__setattr__(self, "posts", tuple(self.posts))
        object.__setattr__(self, "notifications", tuple(self.notifications))

    @property
    def unread_notifications(self) -> tuple[NotificationItem, ...]:
        return tuple(n for n in self.notifications if not n.is_read)

    @property
    def metrics(self) -> dict[str, int]:
        """Counts derived from the current posts and notifications."""
        return compute_metrics(self)


def compute_metrics(dashboard: DashboardData) -> dict[str, int]:
    """Return post and notification counts for a dashboard.

    Always recomputed from ``dashboard``; empty sequences count as zero.
    """
    return {
        "posts_count": len(dashboard.posts),
        "unread_notifications_count": sum(
            1 for n in dashboard.notifications if not n.is_read
        ),
        "total_notifications_count": len(dashboard.notifications),
    }
