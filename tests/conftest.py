"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import SecretStr

from hub.domain.model import Comment, Post
from hub.domain.value import AuthorToken, CommentId, Flag, PostId

# Tests never need a database unless they ask for one
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PERSISTENCE__BACKEND", "memory")

logfire.configure(send_to_logfire=False, console=False)


def make_post(
    title: str = "Test Post",
    content: str | None = "Test content",
    upvotes: int = 0,
    created_at: datetime | None = None,
    secret_key: str = "",
    flags: list[Flag] | None = None,
) -> Post:
    """Build a stored-looking post for pure function tests."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=content,
        image_url=None,
        upvotes=upvotes,
        created_at=created_at or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        user_id=AuthorToken.generate(),
        secret_key=SecretStr(secret_key),
        flags=flags or [],
        repost_id=None,
    )


def make_comment(post: Post, content: str = "Nice post") -> Comment:
    """Build a stored-looking comment on ``post``."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post.id,
        content=content,
        created_at=datetime(2024, 1, 1, 13, 0, tzinfo=timezone.utc),
        user_id=AuthorToken.generate(),
    )
