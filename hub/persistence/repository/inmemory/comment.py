"""In-memory comment repository."""

from typing import Iterable
from uuid import uuid4

from hub.domain.model.comment import Comment, CommentDraft
from hub.domain.repository.comment import CommentRepository
from hub.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for tests and local runs."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def insert(self, draft: CommentDraft) -> Comment:
        """Store a draft under a new ID."""
        comment = Comment(id=CommentId(uuid4()), **dict(draft))
        self._comments[comment.id] = comment
        return comment

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find a post's comments, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_posts(self, post_ids: Iterable[PostId]) -> list[Comment]:
        """Find the comments of several posts."""
        wanted = set(post_ids)
        return [c for c in self._comments.values() if c.post_id in wanted]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
