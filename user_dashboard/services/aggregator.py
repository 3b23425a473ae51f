"""Dashboard aggregation — concurrent fan-out to the three data providers."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from ..interfaces import NotificationsProvider, PostsProvider, ProfileProvider
from ..models import DashboardData
from ..providers import (
    SimulatedNotificationsProvider,
    SimulatedPostsProvider,
    SimulatedProfileProvider,
)

logger = logging.getLogger(__name__)


def _discard_outcome(task: asyncio.Task[Any]) -> None:
    """Mark a task's result or exception as retrieved without using it."""
    if not task.cancelled():
        task.exception()


class DashboardAggregator:
    """Loads a user's profile, posts and notifications in parallel.

    The three fetches are started together and joined. If any of them fails,
    the first failure to settle is raised unchanged, the remaining fetches are
    cancelled, and whatever they eventually produce is discarded.
    """

    def __init__(
        self,
        profile_provider: ProfileProvider | None = None,
        posts_provider: PostsProvider | None = None,
        notifications_provider: NotificationsProvider | None = None,
    ) -> None:
        self._profile_provider = profile_provider or SimulatedProfileProvider()
        self._posts_provider = posts_provider or SimulatedPostsProvider()
        self._notifications_provider = (
            notifications_provider or SimulatedNotificationsProvider()
        )

    async def load_dashboard(self, user_id: int) -> DashboardData:
        """Fetch everything for ``user_id`` and build the dashboard.

        Raises:
            ProviderError: the first provider failure observed, as raised by
                the provider. Only one error is ever reported per call.
        """
        logger.info("Starting parallel data fetch for user: %s", user_id)
        started = time.perf_counter()

        tasks: dict[str, asyncio.Task[Any]] = {
            "profile": asyncio.create_task(
                self._profile_provider.fetch_profile(user_id)
            ),
            "posts": asyncio.create_task(self._posts_provider.fetch_posts(user_id)),
            "notifications": asyncio.create_task(
                self._notifications_provider.fetch_notifications(user_id)
            ),
        }

        try:
            # as_completed yields in settlement order, so the first failure to
            # settle is the one that propagates.
            for settled in asyncio.as_completed(list(tasks.values())):
                await settled
        except asyncio.CancelledError:
            logger.info("Dashboard load for user %s was cancelled", user_id)
            raise
        except Exception as e:
            logger.warning(
                "Dashboard load for user %s failed in %s provider: %s",
                user_id,
                getattr(e, "provider", "unknown"),
                e,
            )
            raise
        finally:
            for task in tasks.values():
                if not task.done():
                    task.cancel()
                task.add_done_callback(_discard_outcome)

        logger.info("Total fetch time: %.2f seconds", time.perf_counter() - started)

        return DashboardData(
            profile=tasks["profile"].result(),
            posts=tasks["posts"].result(),
            notifications=tasks["notifications"].result(),
        )
