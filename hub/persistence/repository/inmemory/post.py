"""In-memory post repository."""

from typing import Any, Optional
from uuid import uuid4

from hub.domain.model.post import Post, PostDraft
from hub.domain.repository.post import PostRepository
from hub.domain.value import PostId, PostSortField


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for tests and local runs."""

    def __init__(self) -> None:
        # Insertion order doubles as the store's default order
        self._posts: dict[PostId, Post] = {}

    async def insert(self, draft: PostDraft) -> Post:
        """Store a draft under a new ID."""
        post = Post(id=PostId(uuid4()), **dict(draft))
        self._posts[post.id] = post
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self, sort: PostSortField = PostSortField.CREATED_AT
    ) -> list[Post]:
        """List posts, descending by the sort field."""
        posts = list(self._posts.values())

        # list.sort is stable, also with reverse=True
        if sort == PostSortField.UPVOTES:
            posts.sort(key=lambda p: p.upvotes, reverse=True)
        else:
            posts.sort(key=lambda p: p.created_at, reverse=True)

        return posts

    async def update(self, post_id: PostId, fields: dict[str, Any]) -> Optional[Post]:
        """Overwrite the given fields of a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        # Re-validate so that the result obeys the model's constraints
        updated = Post.model_validate({**dict(post), **fields})
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> int:
        """Delete a post."""
        return 1 if self._posts.pop(post_id, None) is not None else 0
