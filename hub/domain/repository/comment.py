"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from hub.domain.model.comment import Comment, CommentDraft
from hub.domain.value import PostId


class CommentRepository(ABC):
    """Repository for Comment entities.

    Mirrors the record store's row operations on the ``comments`` collection.
    Every method raises ``StoreError`` when the underlying store call fails.
    """

    @abstractmethod
    async def insert(self, draft: CommentDraft) -> Comment:
        """Insert a new comment row.

        Args:
            draft: Comment fields without an identifier

        Returns:
            The stored comment including its store-assigned ID
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            Comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: Iterable[PostId]) -> List[Comment]:
        """Find the comments of several posts in one round trip.

        Args:
            post_ids: The post IDs

        Returns:
            Comments belonging to any of the posts, in no particular order
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments removed
        """
        pass
