"""Profile provider protocol — user account lookup."""
from typing import Protocol

from ..models import UserProfile


class ProfileProvider(Protocol):
    """Abstract interface for fetching a user's profile.

    Implementations raise ``ProfileError`` on failure.
    """

    async def fetch_profile(self, user_id: int) -> UserProfile: ...
