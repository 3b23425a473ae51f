"""Simulated data providers used as the production defaults."""
from .notifications import SimulatedNotificationsProvider
from .posts import SimulatedPostsProvider
from .profile import SimulatedProfileProvider

__all__ = [
    "SimulatedNotificationsProvider",
    "SimulatedPostsProvider",
    "SimulatedProfileProvider",
]
