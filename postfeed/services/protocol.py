"""Data service protocol definitions.

Consumers depend on ``DataService`` only. Which implementation they receive
is decided by the composition root (see ``postfeed.main``).
"""

from typing import Optional, Protocol, runtime_checkable

from .models import ErrorKind, Post


class DataServiceError(Exception):
    """Base exception for data service failures."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        super().__init__(self.message)


class TransportError(DataServiceError):
    """Endpoint unreachable, timed out, or answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, ErrorKind.TRANSPORT, status_code=status_code)


class DecodeError(DataServiceError):
    """Response body is not a JSON array of posts."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.DECODE)


@runtime_checkable
class DataService(Protocol):
    """Protocol for post sources.

    Implementations: NetworkDataService (HTTP), MockDataService (in-memory).
    """

    async def fetch_posts(self) -> list[Post]:
        """Fetch the full collection of posts.

        Every call re-executes the fetch; nothing is cached between calls.

        Returns:
            Posts in the order the source provides them.

        Raises:
            TransportError: The source could not be reached or refused.
            DecodeError: The payload did not have the expected shape.
        """
        ...
