"""Comment domain service."""

from datetime import datetime, timezone
from typing import Iterable

import logfire

from hub.domain.error import NotFoundError
from hub.domain.model.comment import Comment, CommentDraft
from hub.domain.repository import CommentRepository, PostRepository
from hub.domain.value import AuthorToken, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def add_comment(self, post_id: PostId, content: str) -> Comment | None:
        """Append a comment to a post's thread.

        Blank content is ignored rather than rejected: nothing is written and
        None is returned.

        Args:
            post_id: Post ID
            content: Comment text

        Returns:
            The stored comment, or None if the content was blank

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_service.add_comment", post_id=str(post_id)):
            if not content.strip():
                logfire.info("Ignored blank comment", post_id=str(post_id))
                return None

            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Comment on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            draft = CommentDraft(
                post_id=post_id,
                content=content,
                created_at=datetime.now(timezone.utc),
                user_id=AuthorToken.generate(),
            )

            comment = await self.comment_repository.insert(draft)
            logfire.info(
                "Comment created",
                comment_id=str(comment.id),
                post_id=str(post_id),
                author=comment.user_id.short,
            )
            return comment

    async def list_comments(self, post_id: PostId) -> list[Comment]:
        """Get a post's comments, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Comments in chronological order (empty for unknown posts)
        """
        with logfire.span("comment_service.list_comments", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def comments_for_posts(self, post_ids: Iterable[PostId]) -> list[Comment]:
        """Fetch the comments of many posts at once.

        Args:
            post_ids: Post IDs

        Returns:
            Comments of those posts, unordered
        """
        ids = list(post_ids)
        if not ids:
            return []

        with logfire.span("comment_service.comments_for_posts", count=len(ids)):
            return await self.comment_repository.find_by_posts(ids)
