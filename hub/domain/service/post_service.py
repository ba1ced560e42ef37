"""Post domain service."""

from datetime import datetime, timezone

import logfire

from hub.domain.error import NotFoundError, StoreError, UnauthorizedError, ValidationError
from hub.domain.model.post import Post, PostDraft
from hub.domain.repository import CommentRepository, PostRepository
from hub.domain.value import AuthorToken, Flag, PostFields, PostId, PostSortField

from .base import Service


class PostService(Service):
    """Domain service for post operations.

    Mutations other than upvoting require the post's secret key. Keys are
    compared in plaintext and are never logged.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for cascading deletes)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def create_post(
        self,
        title: str,
        content: str | None = None,
        image_url: str | None = None,
        secret_key: str = "",
        flags: list[Flag] | None = None,
    ) -> Post:
        """Create a post with a fresh author token.

        Args:
            title: Post title, required
            content: Body text
            image_url: Image URL, stored unvalidated
            secret_key: Key required later to edit or delete the post
            flags: Category tags

        Returns:
            The stored post with its store-assigned ID

        Raises:
            ValidationError: If the title is blank
        """
        with logfire.span("post_service.create_post", title=title):
            if not title.strip():
                logfire.warn("Rejected post with blank title")
                raise ValidationError("Title is required")

            draft = PostDraft(
                title=title,
                content=content,
                image_url=image_url,
                upvotes=0,
                created_at=datetime.now(timezone.utc),
                user_id=AuthorToken.generate(),
                secret_key=secret_key,
                flags=flags or [],
                repost_id=None,
            )

            post = await self.post_repository.insert(draft)
            logfire.info(
                "Post created",
                post_id=str(post.id),
                author=post.user_id.short,
                flags=[f.value for f in post.flags],
                protected=post.is_protected(),
            )
            return post

    async def list_posts(
        self, sort: PostSortField = PostSortField.CREATED_AT
    ) -> list[Post]:
        """List all posts, newest or most upvoted first.

        Args:
            sort: Field to order by, descending

        Returns:
            All posts
        """
        with logfire.span("post_service.list_posts", sort=sort.value):
            posts = await self.post_repository.find_all(sort=sort)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If no post has this ID
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            return post

    async def upvote(self, post_id: PostId) -> Post:
        """Add one upvote to a post.

        Reads the current count and writes it back incremented. Two concurrent
        upvotes can both read the same count, so one of them may be lost.

        Args:
            post_id: Post ID

        Returns:
            The updated post

        Raises:
            NotFoundError: If no post has this ID
        """
        with logfire.span("post_service.upvote", post_id=str(post_id)):
            post = await self.get_post(post_id)

            updated = await self.post_repository.update(
                post_id, {"upvotes": post.upvotes + 1}
            )
            if updated is None:
                # Deleted between the read and the write
                logfire.warn("Post vanished during upvote", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post upvoted", post_id=str(post_id), upvotes=updated.upvotes)
            return updated

    async def verify_secret_key(self, post_id: PostId, secret_key: str) -> Post:
        """Check a secret key against a post.

        Args:
            post_id: Post ID
            secret_key: Candidate key

        Returns:
            The post, if the key matches

        Raises:
            NotFoundError: If no post has this ID
            UnauthorizedError: If the key does not match
        """
        post = await self.get_post(post_id)

        if not post.secret_key_matches(secret_key):
            logfire.warn("Secret key mismatch", post_id=str(post_id))
            raise UnauthorizedError("post", str(post_id))

        return post

    async def update_post(
        self, post_id: PostId, secret_key: str, fields: PostFields
    ) -> Post:
        """Overwrite the editable fields of a post.

        Only fields explicitly set on ``fields`` are written. The ID, creation
        time, author token, secret key and upvote count never change here.

        Args:
            post_id: Post ID
            secret_key: The post's secret key
            fields: Fields to overwrite

        Returns:
            The updated post

        Raises:
            NotFoundError: If no post has this ID
            UnauthorizedError: If the key does not match
            ValidationError: If a blank title is provided
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            fields=sorted(fields.changes()),
        ):
            post = await self.verify_secret_key(post_id, secret_key)

            changes = fields.changes()
            if "title" in changes and not (changes["title"] or "").strip():
                logfire.warn("Rejected blank title on update", post_id=str(post_id))
                raise ValidationError("Title is required")

            if not changes:
                logfire.info("Nothing to update", post_id=str(post_id))
                return post

            updated = await self.post_repository.update(post_id, changes)
            if updated is None:
                logfire.warn("Post vanished during update", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId, secret_key: str) -> None:
        """Delete a post and its comments.

        Comments go first. If removing them fails the post is deleted anyway
        and the orphaned comments are only logged. A failure deleting the post
        itself is raised; comments already removed stay removed.

        Args:
            post_id: Post ID
            secret_key: The post's secret key

        Raises:
            NotFoundError: If no post has this ID
            UnauthorizedError: If the key does not match
            StoreError: If the post row could not be deleted
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            await self.verify_secret_key(post_id, secret_key)

            try:
                removed = await self.comment_repository.delete_by_post(post_id)
                logfire.info(
                    "Comments deleted with post", post_id=str(post_id), count=removed
                )
            except StoreError as e:
                logfire.warn(
                    "Comment cleanup failed, deleting post anyway",
                    post_id=str(post_id),
                    error=str(e),
                )

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
