"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from hub.domain.model.post import Post, PostDraft
from hub.domain.value import PostId, PostSortField


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Mirrors the record store's row operations on the ``posts`` collection.
    Every method raises ``StoreError`` when the underlying store call fails.
    """

    @abstractmethod
    async def insert(self, draft: PostDraft) -> Post:
        """Insert a new post row.

        Args:
            draft: Post fields without an identifier

        Returns:
            The stored post including its store-assigned ID
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, sort: PostSortField = PostSortField.CREATED_AT
    ) -> List[Post]:
        """List every post, descending by the sort field.

        Ties keep the store's default order.

        Args:
            sort: Field to order by

        Returns:
            All posts
        """
        pass

    @abstractmethod
    async def update(self, post_id: PostId, fields: dict[str, Any]) -> Optional[Post]:
        """Overwrite the given columns of a post row.

        Args:
            post_id: The post ID
            fields: Column name to new value; other columns are untouched

        Returns:
            The updated post, or None if no row matched
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> int:
        """Delete a post row (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            Number of rows removed (0 or 1)
        """
        pass
