"""Posts provider protocol — recent posts by a user."""
from typing import Protocol

from ..models import Post


class PostsProvider(Protocol):
    """Abstract interface for fetching a user's recent posts.

    Implementations raise ``PostsError`` on failure.
    """

    async def fetch_posts(self, user_id: int) -> list[Post]: ...
