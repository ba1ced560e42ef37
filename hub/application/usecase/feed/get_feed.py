"""Get feed use case."""

import logfire
from datetime import datetime, timezone

from pydantic import BaseModel

from hub.application.usecase.common import PostItem
from hub.config import FeedSettings
from hub.domain.service import CommentService, PostService
from hub.domain.service.feed import comment_counts, filter_feed, truncate
from hub.domain.value import Flag, PostSortField


class FeedItem(PostItem):
    """Post card on the home feed."""

    preview: str | None  # Content cut to the configured number of words
    comment_count: int
    flag_badges: list[str]  # e.g. "📰 News"


class GetFeedRequest(BaseModel):
    """Get feed request."""

    sort: PostSortField = PostSortField.CREATED_AT
    search: str = ""  # Title substring, case-insensitive
    flag: Flag | None = None


class GetFeedResponse(BaseModel):
    """Get feed response."""

    posts: list[FeedItem]
    total: int


class GetFeedUseCase:
    """Use case for building the home feed."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize get feed use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            feed_settings: Preview length settings
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.feed_settings = feed_settings

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        """Execute get feed flow.

        Steps:
        1. List all posts in the requested order
        2. Narrow them by title search and category
        3. Count comments for the remaining posts

        Args:
            request: Sort, search term and category

        Returns:
            Feed cards in listing order
        """
        with logfire.span(
            "get_feed.execute",
            sort=request.sort.value,
            search=request.search,
            flag=request.flag.value if request.flag else None,
        ):
            posts = await self.post_service.list_posts(sort=request.sort)
            visible = filter_feed(posts, request.search, request.flag)

            comments = await self.comment_service.comments_for_posts(
                post.id for post in visible
            )
            counts = comment_counts(visible, comments)

            now = datetime.now(timezone.utc)
            items = [
                FeedItem.from_post(
                    post,
                    now=now,
                    preview=(
                        truncate(post.content, self.feed_settings.preview_words)
                        if post.content
                        else None
                    ),
                    comment_count=counts[post.id],
                    flag_badges=[f"{flag.emoji} {flag.value}" for flag in post.flags],
                )
                for post in visible
            ]

            logfire.info("Feed built", listed=len(posts), shown=len(items))
            return GetFeedResponse(posts=items, total=len(items))
