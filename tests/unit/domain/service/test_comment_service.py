"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from hub.domain.error import NotFoundError
from hub.domain.repository import CommentRepository
from hub.domain.service import CommentService, PostService
from hub.domain.value import PostId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for add_comment method."""

    @pytest.mark.asyncio
    async def test_add_comment(self, unit_env):
        """A comment is stored with its own author token."""
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        post = await post_service.create_post(title="Transfer news")

        comment = await comment_service.add_comment(post.id, "Great signing")

        assert comment is not None
        assert comment.post_id == post.id
        assert comment.content == "Great signing"
        assert comment.user_id != post.user_id

    @pytest.mark.asyncio
    async def test_blank_comment_is_ignored(self, unit_env):
        """Whitespace-only content stores nothing."""
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_service.create_post(title="Quiet thread")

        result = await comment_service.add_comment(post.id, "  \n\t ")

        assert result is None
        assert await comment_repo.find_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_comment_on_missing_post(self, unit_env):
        """Commenting on an unknown post raises NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.add_comment(PostId(uuid4()), "Hello?")


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_comments_oldest_first(self, unit_env):
        """Comments come back in the order they were written."""
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        post = await post_service.create_post(title="Thread")

        for text in ["first", "second", "third"]:
            await comment_service.add_comment(post.id, text)

        comments = await comment_service.list_comments(post.id)

        assert [c.content for c in comments] == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_unknown_post_has_no_comments(self, unit_env):
        """Listing comments of an unknown post is empty, not an error."""
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.list_comments(PostId(uuid4())) == []

    @pytest.mark.asyncio
    async def test_comments_for_posts(self, unit_env):
        """Bulk lookup returns comments of the requested posts only."""
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        a = await post_service.create_post(title="A")
        b = await post_service.create_post(title="B")
        c = await post_service.create_post(title="C")
        await comment_service.add_comment(a.id, "on a")
        await comment_service.add_comment(b.id, "on b")
        await comment_service.add_comment(c.id, "on c")

        comments = await comment_service.comments_for_posts([a.id, b.id])

        assert sorted(cm.content for cm in comments) == ["on a", "on b"]
        assert await comment_service.comments_for_posts([]) == []
