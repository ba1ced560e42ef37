"""Add comment use case."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from hub.application.usecase.common import CommentItem
from hub.domain.service import CommentService
from hub.domain.value import PostId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str  # UUID string
    content: str


class AddCommentResponse(CommentItem):
    """Add comment response."""

    pass


class AddCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> Optional[AddCommentResponse]:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            The stored comment, or None if the content was blank

        Raises:
            NotFoundError: If the post does not exist
        """
        comment = await self.comment_service.add_comment(
            PostId(UUID(request.post_id)), request.content
        )
        if comment is None:
            return None

        return AddCommentResponse.from_comment(comment, now=datetime.now(timezone.utc))
