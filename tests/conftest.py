"""Shared test fixtures and sample data."""
from __future__ import annotations

import asyncio
import textwrap
from pathlib import Path
from typing import Any, Awaitable, Callable
from unittest.mock import AsyncMock

import pytest

from user_dashboard.config import (
    AppConfig,
    DashboardConfig,
    ProviderConfig,
    ProvidersConfig,
)
from user_dashboard.models import DashboardData, NotificationItem, Post, UserProfile


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_profile() -> UserProfile:
    return UserProfile(id=1, name="Test User", email="test@example.com")


@pytest.fixture()
def sample_posts() -> list[Post]:
    return [Post(id=1, title="Test Post", content="Test content")]


@pytest.fixture()
def sample_notifications() -> list[NotificationItem]:
    return [
        NotificationItem(id=1, message="Test notification", is_read=False),
        NotificationItem(id=2, message="Read notification", is_read=True),
    ]


@pytest.fixture()
def sample_dashboard(
    sample_profile: UserProfile,
    sample_posts: list[Post],
    sample_notifications: list[NotificationItem],
) -> DashboardData:
    return DashboardData(
        profile=sample_profile,
        posts=tuple(sample_posts),
        notifications=tuple(sample_notifications),
    )


# ---------------------------------------------------------------------------
# Provider doubles
# ---------------------------------------------------------------------------


def _delayed(
    outcome: Any, delay: float = 0.0, started: list[str] | None = None, label: str = ""
) -> Callable[..., Awaitable[Any]]:
    """Build an AsyncMock side effect that sleeps, then returns or raises ``outcome``."""

    async def _side_effect(*args: Any, **kwargs: Any) -> Any:
        if started is not None:
            started.append(label)
        await asyncio.sleep(delay)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    return _side_effect


@pytest.fixture()
def delayed() -> Callable[..., Callable[..., Awaitable[Any]]]:
    """Factory for slow or failing provider side effects."""
    return _delayed


@pytest.fixture()
def profile_provider(sample_profile: UserProfile) -> AsyncMock:
    provider = AsyncMock()
    provider.fetch_profile.return_value = sample_profile
    return provider


@pytest.fixture()
def posts_provider(sample_posts: list[Post]) -> AsyncMock:
    provider = AsyncMock()
    provider.fetch_posts.return_value = sample_posts
    return provider


@pytest.fixture()
def notifications_provider(sample_notifications: list[NotificationItem]) -> AsyncMock:
    provider = AsyncMock()
    provider.fetch_notifications.return_value = sample_notifications
    return provider


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def instant_providers_config() -> ProvidersConfig:
    return ProvidersConfig(
        seed=7,
        profile=ProviderConfig(0.0, 0.0, "not_found"),
        posts=ProviderConfig(0.0, 0.0, "network_error"),
        notifications=ProviderConfig(0.0, 0.0, "no_connection"),
    )


@pytest.fixture()
def sample_app_config(instant_providers_config: ProvidersConfig) -> AppConfig:
    return AppConfig(
        dashboard=DashboardConfig(user_id=42),
        providers=instant_providers_config,
    )


SAMPLE_YAML = textwrap.dedent("""\
    dashboard:
      user_id: 42
    providers:
      seed: 7
      profile:
        latency_seconds: 0.0
        failure_rate: 0.0
        failure_kind: timeout
      posts:
        latency_seconds: 0.0
        failure_rate: 0.0
        failure_kind: invalid_response
      notifications:
        latency_seconds: 0.0
        failure_rate: 0.0
        failure_kind: unauthorized
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
