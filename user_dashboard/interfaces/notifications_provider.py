"""Notifications provider protocol — notifications addressed to a user."""
from typing import Protocol

from ..models import NotificationItem


class NotificationsProvider(Protocol):
    """Abstract interface for fetching a user's notifications.

    Implementations raise ``NotificationsError`` on failure.
    """

    async def fetch_notifications(self, user_id: int) -> list[NotificationItem]: ...
