"""Upvote post use case."""

from uuid import UUID

from pydantic import BaseModel

from hub.domain.service import PostService
from hub.domain.value import PostId


class UpvotePostRequest(BaseModel):
    """Upvote request."""

    post_id: str  # UUID string


class UpvotePostResponse(BaseModel):
    """Upvote response."""

    post_id: str
    upvotes: int


class UpvotePostUseCase:
    """Use case for upvoting a post.

    Anyone may upvote, any number of times.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize upvote use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpvotePostRequest) -> UpvotePostResponse:
        """Execute upvote flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.upvote(PostId(UUID(request.post_id)))
        return UpvotePostResponse(post_id=str(post.id), upvotes=post.upvotes)
