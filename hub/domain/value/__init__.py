"""Domain value objects for the forum."""

from hub.domain.value.identifiers import CommentId, PostId
from hub.domain.value.types import (
    AuthorToken,
    Flag,
    PostFields,
    PostSortField,
    dedupe_flags,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    # Types
    "AuthorToken",
    "Flag",
    "PostFields",
    "PostSortField",
    "dedupe_flags",
]
