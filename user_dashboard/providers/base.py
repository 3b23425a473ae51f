"""Shared latency and failure simulation for the stand-in providers."""
from __future__ import annotations

import asyncio
import logging
import random

from ..config import ProviderConfig, failure_kind_for
from ..errors import ProviderError

logger = logging.getLogger(__name__)


class SimulatedProvider:
    """Sleeps for the configured latency, then fails at the configured rate."""

    name = ""
    error_type: type[ProviderError] = ProviderError

    def __init__(
        self, config: ProviderConfig, rng: random.Random | None = None
    ) -> None:
        self._config = config
        self._failure_kind = failure_kind_for(self.name, config)
        self._rng = rng or random.Random()

    async def _simulate_request(self, user_id: int) -> None:
        """Wait out the simulated round trip, raising on an injected failure."""
        await asyncio.sleep(self._config.latency_seconds)

        if self._rng.random() < self._config.failure_rate:
            logger.debug(
                "Injecting %s failure for user %s", self.name, user_id
            )
            raise self.error_type(self._failure_kind)
