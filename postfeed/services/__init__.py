"""Post data services."""

from .mock import DEFAULT_MOCK_POSTS, MockDataService
from .models import ErrorKind, Post
from .network import NetworkDataService
from .protocol import DataService, DataServiceError, DecodeError, TransportError

__all__ = [
    "DataService",
    "NetworkDataService",
    "MockDataService",
    "DEFAULT_MOCK_POSTS",
    "Post",
    "ErrorKind",
    "DataServiceError",
    "TransportError",
    "DecodeError",
]
