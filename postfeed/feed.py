"""Posts view model.

Holds the state a UI would observe: the published posts, the fetch state
and the last failure. The data service is injected at construction and
never looked up globally.
"""

import asyncio
from enum import Enum
from typing import Callable, Optional

import structlog

from .services import DataService, DataServiceError, Post

logger = structlog.get_logger()

ErrorHandler = Callable[[DataServiceError], None]
PostsObserver = Callable[[list[Post]], None]


class FetchState(str, Enum):
    """Lifecycle of a single load."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def suppress_errors(error: DataServiceError) -> None:
    """Error handler for consumers that deliberately ignore failures."""
    logger.debug("posts_fetch_error_suppressed", kind=error.kind.value, error=error.message)


class PostsViewModel:
    """Loads posts from a DataService and publishes them to observers.

    Usage:
        vm = PostsViewModel(MockDataService(), on_error=suppress_errors)
        await vm.load_posts()
        print([p.title for p in vm.posts])

    ``on_error`` is required: pass ``suppress_errors`` to ignore failures
    on purpose.
    """

    def __init__(self, data_service: DataService, on_error: ErrorHandler):
        self._data_service = data_service
        self._on_error = on_error
        self._observers: list[PostsObserver] = []
        self._task: Optional[asyncio.Task] = None

        self.posts: list[Post] = []
        self.state = FetchState.IDLE
        self.error: Optional[DataServiceError] = None

    @property
    def data_service(self) -> DataService:
        return self._data_service

    def subscribe(self, observer: PostsObserver) -> Callable[[], None]:
        """Register an observer for successful loads.

        Returns:
            A function that removes the observer again.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def load_posts(self) -> list[Post]:
        """Fetch posts once and publish the outcome.

        Returns:
            The fetched posts, or an empty list if the fetch failed.
        """
        self.state = FetchState.PENDING
        try:
            posts = await self._data_service.fetch_posts()
        except asyncio.CancelledError:
            self.state = FetchState.IDLE
            raise
        except DataServiceError as e:
            self.state = FetchState.FAILED
            self.error = e
            logger.warning(
                "posts_fetch_failed",
                kind=e.kind.value,
                status_code=e.status_code,
                error=e.message,
            )
            self._on_error(e)
            return []

        self.posts = list(posts)
        self.error = None
        self.state = FetchState.SUCCEEDED
        logger.info("posts_loaded", count=len(posts))

        for observer in list(self._observers):
            observer(list(posts))
        return posts

    def start(self) -> asyncio.Task:
        """Schedule a load on the running event loop."""
        self._task = asyncio.create_task(self.load_posts())
        return self._task

    def cancel(self) -> None:
        """Abandon the in-flight load started by ``start()``, if any."""
        if self._task and not self._task.done():
            self._task.cancel()
            self.state = FetchState.IDLE
