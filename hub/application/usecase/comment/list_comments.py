"""List comments use case."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel

from hub.application.usecase.common import CommentItem
from hub.domain.service import CommentService
from hub.domain.value import PostId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str  # UUID string


class ListCommentsResponse(BaseModel):
    """A post's comment thread, oldest first."""

    post_id: str
    comments: list[CommentItem]
    total: int


class ListCommentsUseCase:
    """Use case for reading a post's comments."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Unknown posts simply have no comments.
        """
        comments = await self.comment_service.list_comments(
            PostId(UUID(request.post_id))
        )

        now = datetime.now(timezone.utc)
        return ListCommentsResponse(
            post_id=request.post_id,
            comments=[CommentItem.from_comment(c, now) for c in comments],
            total=len(comments),
        )
