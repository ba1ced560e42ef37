"""Update post use case."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from hub.application.usecase.common import PostItem
from hub.domain.service import PostService
from hub.domain.value import Flag, PostFields, PostId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Omitted fields are left unchanged.
    """

    post_id: str  # UUID string
    secret_key: str  # Re-entered by the author, never pre-filled
    title: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    flags: Optional[list[Flag]] = None


class UpdatePostResponse(PostItem):
    """Update post response."""

    pass


class UpdatePostUseCase:
    """Use case for editing a post's title, content, image and categories."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with post ID, secret key and fields

        Returns:
            Updated post details

        Raises:
            NotFoundError: If the post does not exist
            UnauthorizedError: If the secret key does not match
            ValidationError: If a blank title is given
        """
        post_id = PostId(UUID(request.post_id))

        # Forward only what the caller actually sent
        sent = request.model_dump(
            exclude_unset=True, include={"title", "content", "image_url", "flags"}
        )
        fields = PostFields(**sent)

        updated = await self.post_service.update_post(
            post_id, request.secret_key, fields
        )

        return UpdatePostResponse.from_post(updated, now=datetime.now(timezone.utc))
