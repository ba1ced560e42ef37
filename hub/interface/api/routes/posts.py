"""Post routes."""

import logfire
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from hub.application.usecase.feed import (
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
)
from hub.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
    UpvotePostRequest,
    UpvotePostResponse,
    UpvotePostUseCase,
)
from hub.domain.error import (
    NotFoundError,
    StoreError,
    UnauthorizedError,
    ValidationError,
)
from hub.domain.value import Flag, PostSortField

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


def _store_unavailable(e: StoreError) -> HTTPException:
    logfire.error("Record store failure", operation=e.operation, error=e.detail)
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail="Record store unavailable",
    )


@router.get("", response_model=GetFeedResponse)
async def get_feed(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    sort: PostSortField = Query(default=PostSortField.CREATED_AT),
    search: str = Query(default=""),
    flag: Flag | None = Query(default=None),
) -> GetFeedResponse:
    """Home feed: all posts, sorted, filtered by title search and category.

    Args:
        get_feed_use_case: Get feed use case from DI
        sort: "created_at" (newest first) or "upvotes" (most upvoted first)
        search: Case-insensitive title substring
        flag: Category to narrow to

    Returns:
        Feed cards
    """
    try:
        return await get_feed_use_case.execute(
            GetFeedRequest(sort=sort, search=search, flag=flag)
        )
    except StoreError as e:
        raise _store_unavailable(e)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    content: str | None = None
    image_url: str | None = None
    secret_key: str = ""
    flags: list[Flag] = []


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post.

    No account is needed. Whoever knows the secret key can later edit or
    delete the post.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI

    Returns:
        Created post details

    Raises:
        HTTPException: If the title is blank or the store fails
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(**request.model_dump())
        )
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreError as e:
        raise _store_unavailable(e)


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post with its comments.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except StoreError as e:
        raise _store_unavailable(e)


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post.

    Fields left out of the body are not changed.
    """

    secret_key: str
    title: str | None = None
    content: str | None = None
    image_url: str | None = None
    flags: list[Flag] | None = None


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Edit a post's title, content, image and categories.

    Args:
        post_id: Post UUID
        request: Secret key and the fields to change
        update_post_use_case: Update post use case from DI

    Returns:
        Updated post details

    Raises:
        HTTPException: If the key is wrong, the post is missing or the title blank
    """
    try:
        use_case_request = UpdatePostRequest(
            post_id=str(post_id),
            **request.model_dump(exclude_unset=True),
        )
        return await update_post_use_case.execute(use_case_request)
    except UnauthorizedError as e:
        logfire.warn("Rejected post update", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid secret key",
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreError as e:
        raise _store_unavailable(e)


class DeletePostAPIRequest(BaseModel):
    """API request for deleting a post."""

    secret_key: str


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    request: DeletePostAPIRequest,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Delete a post and all of its comments.

    Args:
        post_id: Post UUID
        request: The post's secret key
        delete_post_use_case: Delete post use case from DI

    Returns:
        Confirmation

    Raises:
        HTTPException: If the key is wrong, the post is missing or deletion fails
    """
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), secret_key=request.secret_key)
        )
    except UnauthorizedError as e:
        logfire.warn("Rejected post deletion", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid secret key",
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except StoreError as e:
        raise _store_unavailable(e)


@router.post("/{post_id}/upvote", response_model=UpvotePostResponse)
async def upvote_post(
    post_id: UUID,
    upvote_use_case: FromDishka[UpvotePostUseCase],
) -> UpvotePostResponse:
    """Upvote a post. Open to anyone, repeatable."""
    try:
        return await upvote_use_case.execute(UpvotePostRequest(post_id=str(post_id)))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except StoreError as e:
        raise _store_unavailable(e)
