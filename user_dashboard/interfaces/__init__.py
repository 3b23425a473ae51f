"""Protocol interfaces for the dashboard data providers."""
from .notifications_provider import NotificationsProvider
from .posts_provider import PostsProvider
from .profile_provider import ProfileProvider

__all__ = ["NotificationsProvider", "PostsProvider", "ProfileProvider"]
