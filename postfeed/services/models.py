"""Data models for the posts API."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ErrorKind(str, Enum):
    """Why a fetch failed."""

    TRANSPORT = "transport"
    DECODE = "decode"


class Post(BaseModel):
    """A single post as served by the posts endpoint.

    Example payload element:
        {"userId": 1, "id": 1, "title": "...", "body": "..."}
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    user_id: int = Field(alias="userId")
    id: int
    title: str
    body: str


# Decoder for the whole response body (a JSON array of posts)
POSTS_ADAPTER = TypeAdapter(list[Post])
