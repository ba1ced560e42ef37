"""Response items shared by several use cases.

None of these carry a post's secret key.
"""

from datetime import datetime

from pydantic import BaseModel

from hub.domain.model import Comment, Post
from hub.domain.service.feed import format_relative_time
from hub.domain.value import Flag


class PostItem(BaseModel):
    """Public view of a post."""

    post_id: str
    title: str
    content: str | None
    image_url: str | None
    upvotes: int
    flags: list[Flag]
    author: str  # Short author token
    created_at: datetime
    time_ago: str
    repost_id: str | None

    @classmethod
    def from_post(cls, post: Post, now: datetime, **extra) -> "PostItem":
        """Build the public view of a post as seen at ``now``."""
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            image_url=post.image_url,
            upvotes=post.upvotes,
            flags=list(post.flags),
            author=post.user_id.short,
            created_at=post.created_at,
            time_ago=format_relative_time(post.created_at, now),
            repost_id=str(post.repost_id) if post.repost_id else None,
            **extra,
        )


class CommentItem(BaseModel):
    """Public view of a comment."""

    comment_id: str
    post_id: str
    content: str
    author: str
    created_at: datetime
    time_ago: str

    @classmethod
    def from_comment(cls, comment: Comment, now: datetime) -> "CommentItem":
        """Build the public view of a comment as seen at ``now``."""
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            content=comment.content,
            author=comment.user_id.short,
            created_at=comment.created_at,
            time_ago=format_relative_time(comment.created_at, now),
        )
