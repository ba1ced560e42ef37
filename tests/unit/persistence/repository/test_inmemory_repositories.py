"""Unit tests for the in-memory repositories."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from hub.domain.model import CommentDraft, PostDraft
from hub.domain.value import AuthorToken, Flag, PostId, PostSortField
from hub.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
)


def draft(title: str, upvotes: int = 0, hour: int = 12) -> PostDraft:
    return PostDraft(
        title=title,
        upvotes=upvotes,
        created_at=datetime(2024, 1, 1, hour, tzinfo=timezone.utc),
        user_id=AuthorToken.generate(),
    )


class TestInMemoryPostRepository:
    """Tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_insert_assigns_id(self):
        repo = InMemoryPostRepository()

        post = await repo.insert(draft("Hello"))

        assert post.id is not None
        assert await repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_upvote_sort_is_stable_for_ties(self):
        """Posts with equal upvotes keep their stored order."""
        repo = InMemoryPostRepository()
        first = await repo.insert(draft("First", upvotes=3))
        top = await repo.insert(draft("Top", upvotes=9))
        second = await repo.insert(draft("Second", upvotes=3))

        posts = await repo.find_all(sort=PostSortField.UPVOTES)

        assert [p.id for p in posts] == [top.id, first.id, second.id]

    @pytest.mark.asyncio
    async def test_update_overwrites_only_given_fields(self):
        repo = InMemoryPostRepository()
        post = await repo.insert(draft("Before"))

        updated = await repo.update(post.id, {"title": "After", "flags": [Flag.NEWS]})

        assert updated.title == "After"
        assert updated.flags == [Flag.NEWS]
        assert updated.created_at == post.created_at
        assert updated.user_id == post.user_id

    @pytest.mark.asyncio
    async def test_update_and_delete_missing_post(self):
        repo = InMemoryPostRepository()
        missing = PostId(uuid4())

        assert await repo.update(missing, {"title": "x"}) is None
        assert await repo.delete(missing) == 0


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_delete_by_post_counts_removed(self):
        repo = InMemoryCommentRepository()
        post_id = PostId(uuid4())
        other_id = PostId(uuid4())
        for pid in [post_id, post_id, other_id]:
            await repo.insert(
                CommentDraft(
                    post_id=pid,
                    content="hi",
                    created_at=datetime.now(timezone.utc),
                    user_id=AuthorToken.generate(),
                )
            )

        assert await repo.delete_by_post(post_id) == 2
        assert await repo.find_by_post(post_id) == []
        assert len(await repo.find_by_post(other_id)) == 1
