"""Comment entity.

Comments form a flat, chronological thread under a post.
"""

from datetime import datetime

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.value import AuthorToken, CommentId, PostId


class CommentDraft(DomainModel):
    """A comment that has not been stored yet."""

    post_id: PostId
    content: str = Field(min_length=1)
    created_at: datetime
    user_id: AuthorToken


class Comment(CommentDraft):
    """Comment entity.

    Every comment belongs to exactly one post and is removed together with it.
    """

    id: CommentId
