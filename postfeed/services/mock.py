"""In-memory data service for tests and offline runs.

No network access and no configuration required.
"""

from typing import Iterable, Optional

from .models import Post

# Served when no posts are passed in
DEFAULT_MOCK_POSTS: tuple[Post, ...] = (
    Post(user_id=1, id=1, title="One", body="one"),
    Post(user_id=2, id=2, title="Two", body="two"),
    Post(user_id=3, id=3, title="Three", body="three"),
)


class MockDataService:
    """Data service that serves a fixed list of posts.

    Usage is identical to NetworkDataService:
        async with MockDataService() as service:
            posts = await service.fetch_posts()
    """

    def __init__(self, posts: Optional[Iterable[Post]] = None):
        """Initialize mock service.

        Args:
            posts: Posts to serve. ``None`` selects DEFAULT_MOCK_POSTS; an
                empty iterable is served as an empty list.
        """
        self._posts: tuple[Post, ...] = (
            DEFAULT_MOCK_POSTS if posts is None else tuple(posts)
        )

    async def open(self) -> None:
        """Mock open - no-op."""

    async def close(self) -> None:
        """Mock close - no-op."""

    async def __aenter__(self) -> "MockDataService":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch_posts(self) -> list[Post]:
        """Return a fresh list of the configured posts."""
        return list(self._posts)
