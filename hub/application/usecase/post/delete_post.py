"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from hub.domain.service import PostService
from hub.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    secret_key: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool
    message: str


class DeletePostUseCase:
    """Use case for deleting a post together with its comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Args:
            request: Delete post request

        Returns:
            Confirmation

        Raises:
            NotFoundError: If the post does not exist
            UnauthorizedError: If the secret key does not match
            StoreError: If the post row could not be deleted
        """
        post_id = PostId(UUID(request.post_id))

        await self.post_service.delete_post(post_id, request.secret_key)

        return DeletePostResponse(
            success=True,
            message="Post and all associated comments deleted",
        )
