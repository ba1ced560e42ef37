"""Domain model entities for the forum."""

from hub.domain.model.comment import Comment, CommentDraft
from hub.domain.model.post import Post, PostDraft

__all__ = [
    "Post",
    "PostDraft",
    "Comment",
    "CommentDraft",
]
