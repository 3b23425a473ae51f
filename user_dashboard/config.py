"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import NotificationsErrorKind, PostsErrorKind, ProfileErrorKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProviderConfig:
    latency_seconds: float = 0.0
    failure_rate: float = 0.0
    failure_kind: str = ""


@dataclass(frozen=True)
class ProvidersConfig:
    seed: int | None = None
    profile: ProviderConfig = field(
        default_factory=lambda: ProviderConfig(1.5, 1 / 20, "not_found")
    )
    posts: ProviderConfig = field(
        default_factory=lambda: ProviderConfig(2.0, 1 / 33, "network_error")
    )
    notifications: ProviderConfig = field(
        default_factory=lambda: ProviderConfig(1.0, 1 / 50, "no_connection")
    )


@dataclass(frozen=True)
class DashboardConfig:
    user_id: int = 123


@dataclass(frozen=True)
class AppConfig:
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    providers: ProvidersConfig = field(default_factory=ProvidersConfig)


# Failure kinds each provider section may name.
_PROVIDER_KINDS: dict[str, type[Enum]] = {
    "profile": ProfileErrorKind,
    "posts": PostsErrorKind,
    "notifications": NotificationsErrorKind,
}

# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_dashboard(raw: dict[str, Any]) -> DashboardConfig:
    user_id = raw.get("user_id")
    if user_id in (None, ""):
        return DashboardConfig()
    return DashboardConfig(user_id=int(user_id))


def _build_provider(raw: dict[str, Any], default: ProviderConfig) -> ProviderConfig:
    return ProviderConfig(
        latency_seconds=float(raw.get("latency_seconds", default.latency_seconds)),
        failure_rate=float(raw.get("failure_rate", default.failure_rate)),
        failure_kind=str(raw.get("failure_kind", default.failure_kind)),
    )


def _build_providers(raw: dict[str, Any]) -> ProvidersConfig:
    defaults = ProvidersConfig()
    seed = raw.get("seed")
    return ProvidersConfig(
        seed=int(seed) if seed not in (None, "") else None,
        profile=_build_provider(raw.get("profile") or {}, defaults.profile),
        posts=_build_provider(raw.get("posts") or {}, defaults.posts),
        notifications=_build_provider(
            raw.get("notifications") or {}, defaults.notifications
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def failure_kind_for(provider: str, cfg: ProviderConfig) -> Enum:
    """Resolve the configured failure kind name to the provider's enum member."""
    return _PROVIDER_KINDS[provider](cfg.failure_kind)


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root; when that default is absent the built-in defaults
            are used instead.
    """
    load_dotenv()

    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.info("No config.yaml found, using built-in defaults")
            cfg = AppConfig()
            _validate(cfg)
            return cfg
        config_path = DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        dashboard=_build_dashboard(raw.get("dashboard") or {}),
        providers=_build_providers(raw.get("providers") or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if cfg.dashboard.user_id <= 0:
        raise ValueError("dashboard.user_id must be a positive integer")

    for name in _PROVIDER_KINDS:
        provider_cfg: ProviderConfig = getattr(cfg.providers, name)
        if provider_cfg.latency_seconds < 0:
            raise ValueError(f"Provider '{name}' has a negative latency")
        if not 0.0 <= provider_cfg.failure_rate <= 1.0:
            raise ValueError(
                f"Provider '{name}' failure_rate must be between 0 and 1"
            )
        try:
            failure_kind_for(name, provider_cfg)
        except ValueError:
            raise ValueError(
                f"Provider '{name}' has unknown failure_kind "
                f"'{provider_cfg.failure_kind}'"
            ) from None
