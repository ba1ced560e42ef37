"""Get post use case."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel

from hub.application.usecase.common import CommentItem, PostItem
from hub.domain.service import CommentService, PostService
from hub.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostResponse(PostItem):
    """Post page: the post with its comment thread."""

    comments: list[CommentItem]
    comment_count: int


class GetPostUseCase:
    """Use case for showing a post with its comments."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request with post ID

        Returns:
            Post details with comments, oldest first

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post(post_id)
        comments = await self.comment_service.list_comments(post_id)

        now = datetime.now(timezone.utc)
        return GetPostResponse.from_post(
            post,
            now=now,
            comments=[CommentItem.from_comment(c, now) for c in comments],
            comment_count=len(comments),
        )
