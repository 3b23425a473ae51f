"""Simulated notifications provider."""
from __future__ import annotations

import logging
import random

from ..config import ProviderConfig, ProvidersConfig
from ..errors import NotificationsError
from ..models import NotificationItem
from .base import SimulatedProvider

logger = logging.getLogger(__name__)


class SimulatedNotificationsProvider(SimulatedProvider):
    """Return two unread notifications after a simulated delay."""

    name = "notifications"
    error_type = NotificationsError

    def __init__(
        self, config: ProviderConfig | None = None, rng: random.Random | None = None
    ) -> None:
        super().__init__(config or ProvidersConfig().notifications, rng)

    async def fetch_notifications(self, user_id: int) -> list[NotificationItem]:
        logger.info("Fetching notifications for user: %s", user_id)
        await self._simulate_request(user_id)

        logger.info("Notifications fetched successfully")
        return [
            NotificationItem(id=1, message="You have a new follower", is_read=False),
            NotificationItem(id=2, message="Someone liked your post", is_read=False),
        ]
