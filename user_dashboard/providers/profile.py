"""Simulated profile provider."""
from __future__ import annotations

import logging
import random

from ..config import ProviderConfig, ProvidersConfig
from ..errors import ProfileError
from ..models import UserProfile
from .base import SimulatedProvider

logger = logging.getLogger(__name__)


class SimulatedProfileProvider(SimulatedProvider):
    """Return a fixed profile for any user id after a simulated delay."""

    name = "profile"
    error_type = ProfileError

    def __init__(
        self, config: ProviderConfig | None = None, rng: random.Random | None = None
    ) -> None:
        super().__init__(config or ProvidersConfig().profile, rng)

    async def fetch_profile(self, user_id: int) -> UserProfile:
        logger.info("Fetching user profile for ID: %s", user_id)
        await self._simulate_request(user_id)

        logger.info("User profile fetched successfully")
        return UserProfile(
            id=user_id,
            name="Dor Luzgarten",
            email="dorluzgarten@gmail.com",
        )
