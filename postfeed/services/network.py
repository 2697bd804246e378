"""HTTP-backed data service.

Fetches a JSON array of posts from a configurable endpoint, e.g.
https://jsonplaceholder.typicode.com/posts
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from .models import POSTS_ADAPTER, Post
from .protocol import DecodeError, TransportError


class NetworkDataService:
    """Async data service that reads posts over HTTP.

    Usage:
        async with NetworkDataService("https://example.com/posts") as service:
            posts = await service.fetch_posts()

    Outside ``async with`` each call opens and closes its own HTTP client.
    A client passed in by the caller is used as-is and never closed here.
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = client
        self._owns_client = False

    async def open(self) -> None:
        """Initialize a reusable HTTP client if none is set."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"Accept": "application/json"},
            )
            self._owns_client = True

    async def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def __aenter__(self) -> "NetworkDataService":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch_posts(self) -> list[Post]:
        """GET the endpoint and decode the body into posts."""
        if self._client is not None:
            response = await self._get(self._client)
        else:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"Accept": "application/json"},
            ) as client:
                response = await self._get(client)

        return self._decode(response)

    async def _get(self, client: httpx.AsyncClient) -> httpx.Response:
        try:
            response = await client.get(self.endpoint)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{self.endpoint} returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            detail = str(e) or type(e).__name__
            raise TransportError(f"request to {self.endpoint} failed: {detail}") from e
        except httpx.InvalidURL as e:
            raise TransportError(f"invalid endpoint {self.endpoint}: {e}") from e
        return response

    def _decode(self, response: httpx.Response) -> list[Post]:
        try:
            return POSTS_ADAPTER.validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"unexpected payload from {self.endpoint}: "
                f"{e.error_count()} validation error(s)"
            ) from e
