"""Create post use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel

from hub.application.usecase.common import PostItem
from hub.domain.service import PostService
from hub.domain.value import Flag


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str | None = None
    image_url: str | None = None
    secret_key: str = ""  # Needed later to edit or delete the post
    flags: list[Flag] = []


class CreatePostResponse(PostItem):
    """Create post response."""

    pass


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The stored post, without its secret key

        Raises:
            ValidationError: If the title is blank
        """
        with logfire.span("create_post.execute", title=request.title):
            post = await self.post_service.create_post(
                title=request.title,
                content=request.content,
                image_url=request.image_url,
                secret_key=request.secret_key,
                flags=request.flags,
            )

            return CreatePostResponse.from_post(post, now=datetime.now(timezone.utc))
