"""Simulated posts provider."""
from __future__ import annotations

import logging
import random

from ..config import ProviderConfig, ProvidersConfig
from ..errors import PostsError
from ..models import Post
from .base import SimulatedProvider

logger = logging.getLogger(__name__)


class SimulatedPostsProvider(SimulatedProvider):
    """Return three canned posts after a simulated delay."""

    name = "posts"
    error_type = PostsError

    def __init__(
        self, config: ProviderConfig | None = None, rng: random.Random | None = None
    ) -> None:
        super().__init__(config or ProvidersConfig().posts, rng)

    async def fetch_posts(self, user_id: int) -> list[Post]:
        logger.info("Fetching recent posts for user: %s", user_id)
        await self._simulate_request(user_id)

        logger.info("Posts fetched successfully")
        return [
            Post(id=1, title="Post 1", content="Post 1 content"),
            Post(id=2, title="Post 2", content="Post 2 content"),
            Post(id=3, title="Post 3", content="Post 3 content"),
        ]
