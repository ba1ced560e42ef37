"""Application layer DI providers."""

from dishka import Scope, provide

from hub.application.usecase.comment import AddCommentUseCase, ListCommentsUseCase
from hub.application.usecase.feed import GetFeedUseCase
from hub.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    UpvotePostUseCase,
)
from hub.config import FeedSettings
from hub.domain.service import CommentService, PostService
from hub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_upvote_post_use_case(self, post_service: PostService) -> UpvotePostUseCase:
        """Provide upvote use case."""
        return UpvotePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_get_feed_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        feed_settings: FeedSettings,
    ) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(
            post_service=post_service,
            comment_service=comment_service,
            feed_settings=feed_settings,
        )
