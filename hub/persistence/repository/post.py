"""PostgreSQL implementation of Post repository."""

from typing import Any, List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.error import StoreError
from hub.domain.model import Post, PostDraft
from hub.domain.repository.post import PostRepository
from hub.domain.value import PostId, PostSortField
from hub.persistence.mappers import (
    post_changes_to_dict,
    post_draft_to_dict,
    row_to_post,
)
from hub.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, draft: PostDraft) -> Post:
        """Insert a post and return it with its generated ID."""
        with logfire.span("post_repository.insert", title=draft.title):
            stmt = (
                insert(posts_table)
                .values(**post_draft_to_dict(draft))
                .returning(posts_table)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.one()
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error("Post insert failed", error=str(e))
                raise StoreError("insert posts", str(e)) from e

            return row_to_post(row._asdict())

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StoreError("select posts", str(e)) from e

            row = result.fetchone()
            if not row:
                return None

            return row_to_post(row._asdict())

    async def find_all(
        self, sort: PostSortField = PostSortField.CREATED_AT
    ) -> List[Post]:
        """List every post, descending by the sort field."""
        with logfire.span("post_repository.find_all", sort=sort.value):
            if sort == PostSortField.UPVOTES:
                order = desc(posts_table.c.upvotes)
            else:
                order = desc(posts_table.c.created_at)

            stmt = select(posts_table).order_by(order)
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StoreError("select posts", str(e)) from e

            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def update(self, post_id: PostId, fields: dict[str, Any]) -> Optional[Post]:
        """Overwrite the given columns of a post."""
        with logfire.span(
            "post_repository.update", post_id=str(post_id), fields=sorted(fields)
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**post_changes_to_dict(fields))
                .returning(posts_table)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error("Post update failed", post_id=str(post_id), error=str(e))
                raise StoreError("update posts", str(e)) from e

            if row is None:
                return None

            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> int:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = delete(posts_table).where(posts_table.c.id == post_id)
            try:
                result = await self.session.execute(stmt)
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error("Post delete failed", post_id=str(post_id), error=str(e))
                raise StoreError("delete posts", str(e)) from e

            return result.rowcount
