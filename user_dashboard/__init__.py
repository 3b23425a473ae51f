"""Concurrent user dashboard aggregation."""
from .errors import (
    NotificationsError,
    NotificationsErrorKind,
    PostsError,
    PostsErrorKind,
    ProfileError,
    ProfileErrorKind,
    ProviderError,
)
from .models import DashboardData, NotificationItem, Post, UserProfile, compute_metrics
from .services import DashboardAggregator

__all__ = [
    "DashboardAggregator",
    "DashboardData",
    "NotificationItem",
    "NotificationsError",
    "NotificationsErrorKind",
    "Post",
    "PostsError",
    "PostsErrorKind",
    "ProfileError",
    "ProfileErrorKind",
    "ProviderError",
    "UserProfile",
    "compute_metrics",
]
