"""Command-line interface for the user dashboard aggregator."""
from __future__ import annotations

import argparse
import asyncio
import json
import random
import sys

from .config import AppConfig, load_config
from .errors import ProviderError
from .logging_setup import configure_logging
from .providers import (
    SimulatedNotificationsProvider,
    SimulatedPostsProvider,
    SimulatedProfileProvider,
)
from .services import DashboardAggregator, format_dashboard_report, format_failure


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="user-dashboard",
        description="Load a user's profile, posts and notifications in parallel",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for simulated provider failures (overrides config)",
    )

    sub = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("load", "Load the dashboard and print the full report"),
        ("metrics", "Load the dashboard and print its metrics as JSON"),
    ):
        command_parser = sub.add_parser(name, help=help_text)
        command_parser.add_argument(
            "user_id",
            nargs="?",
            type=int,
            default=None,
            help="User to load (overrides config)",
        )

    return parser


def build_aggregator(config: AppConfig, seed: int | None = None) -> DashboardAggregator:
    """Wire the simulated providers described by ``config`` into an aggregator."""
    providers = config.providers
    seed = providers.seed if seed is None else seed

    def rng(name: str) -> random.Random:
        return random.Random(f"{seed}:{name}") if seed is not None else random.Random()

    return DashboardAggregator(
        profile_provider=SimulatedProfileProvider(providers.profile, rng("profile")),
        posts_provider=SimulatedPostsProvider(providers.posts, rng("posts")),
        notifications_provider=SimulatedNotificationsProvider(
            providers.notifications, rng("notifications")
        ),
    )


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command and return the exit status."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    aggregator = build_aggregator(config, args.seed)
    user_id = args.user_id if args.user_id is not None else config.dashboard.user_id

    try:
        dashboard = await aggregator.load_dashboard(user_id)
    except ProviderError as e:
        print(format_failure(e), file=sys.stderr)
        return 1

    if args.command == "metrics":
        print(json.dumps(dashboard.metrics, indent=2))
    else:
        print(format_dashboard_report(dashboard))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
