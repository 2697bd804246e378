"""Tests for post data models."""

import pytest
from pydantic import ValidationError

from postfeed.services.models import POSTS_ADAPTER, ErrorKind, Post
from postfeed.services.protocol import DataServiceError, DecodeError, TransportError


class TestPostModel:
    """Tests for the Post model."""

    def test_post_from_wire_format(self):
        """Wire payload uses camelCase userId."""
        post = Post.model_validate(
            {"userId": 7, "id": 3, "title": "Hello", "body": "World"}
        )

        assert post.user_id == 7
        assert post.id == 3
        assert post.title == "Hello"
        assert post.body == "World"

    def test_post_literal_construction(self):
        """Posts can be built by attribute name."""
        post = Post(user_id=1, id=2, title="t", body="b")

        assert post.user_id == 1
        assert post.id == 2

    def test_post_is_immutable(self):
        """Assigning to a field is rejected."""
        post = Post(user_id=1, id=1, title="One", body="one")

        with pytest.raises(ValidationError):
            post.title = "Changed"

    def test_post_equality_and_hash(self):
        """Posts with equal fields are equal and hash alike."""
        a = Post(user_id=1, id=1, title="One", body="one")
        b = Post(user_id=1, id=1, title="One", body="one")

        assert a == b
        assert len({a, b}) == 1

    def test_post_rejects_numeric_strings(self):
        """Integer fields do not accept strings."""
        with pytest.raises(ValidationError):
            Post.model_validate({"userId": "1", "id": 1, "title": "t", "body": "b"})

    def test_post_rejects_missing_field(self):
        """All four fields are required."""
        with pytest.raises(ValidationError):
            Post.model_validate({"userId": 1, "id": 1, "title": "t"})

    def test_post_ignores_extra_fields(self):
        """Unknown keys in a payload element are dropped."""
        post = Post.model_validate(
            {"userId": 1, "id": 1, "title": "t", "body": "b", "tags": ["x"]}
        )

        assert not hasattr(post, "tags")


class TestPostsAdapter:
    """Tests for decoding a whole response body."""

    def test_decode_array(self):
        """A JSON array of posts decodes in order."""
        posts = POSTS_ADAPTER.validate_json(
            b'[{"userId": 1, "id": 10, "title": "a", "body": "x"},'
            b' {"userId": 2, "id": 11, "title": "b", "body": "y"}]'
        )

        assert [p.id for p in posts] == [10, 11]

    def test_decode_rejects_object(self):
        """A single object is not a list of posts."""
        with pytest.raises(ValidationError):
            POSTS_ADAPTER.validate_json(b'{"userId": 1, "id": 1, "title": "a", "body": "x"}')

    def test_decode_rejects_invalid_json(self):
        """Malformed JSON is a validation error."""
        with pytest.raises(ValidationError):
            POSTS_ADAPTER.validate_json(b"<html>not json</html>")


class TestDataServiceErrors:
    """Tests for the error taxonomy."""

    def test_transport_error(self):
        """TransportError carries kind and status code."""
        error = TransportError("Service unavailable", status_code=503)

        assert isinstance(error, DataServiceError)
        assert str(error) == "Service unavailable"
        assert error.kind == ErrorKind.TRANSPORT
        assert error.status_code == 503

    def test_decode_error(self):
        """DecodeError has no status code."""
        error = DecodeError("bad payload")

        assert isinstance(error, DataServiceError)
        assert error.kind == ErrorKind.DECODE
        assert error.status_code is None
