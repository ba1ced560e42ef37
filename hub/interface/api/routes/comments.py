"""Comment routes."""

import logfire
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from hub.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from hub.domain.error import NotFoundError, StoreError

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    content: str


@router.post(
    "/{post_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={204: {"description": "Blank comment ignored"}},
)
async def add_comment(
    post_id: UUID,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
):
    """Comment on a post.

    Blank comments are accepted and dropped: nothing is stored and the
    response is 204 with no body.

    Args:
        post_id: Post UUID
        request: Comment text
        add_comment_use_case: Add comment use case from DI

    Returns:
        Created comment details

    Raises:
        HTTPException: If the post does not exist or the store fails
    """
    try:
        comment = await add_comment_use_case.execute(
            AddCommentRequest(post_id=str(post_id), content=request.content)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except StoreError as e:
        logfire.error("Failed to store comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Record store unavailable",
        )

    if comment is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return comment


@router.get("/{post_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> ListCommentsResponse:
    """Get a post's comments, oldest first."""
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(post_id=str(post_id))
        )
    except StoreError as e:
        logfire.error("Failed to list comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Record store unavailable",
        )
