"""PostgreSQL implementation of Comment repository."""

from typing import Iterable, List

import logfire
from sqlalchemy import asc, delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.error import StoreError
from hub.domain.model import Comment, CommentDraft
from hub.domain.repository.comment import CommentRepository
from hub.domain.value import PostId
from hub.persistence.mappers import comment_draft_to_dict, row_to_comment
from hub.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, draft: CommentDraft) -> Comment:
        """Insert a comment and return it with its generated ID."""
        with logfire.span("comment_repository.insert", post_id=str(draft.post_id)):
            stmt = (
                insert(comments_table)
                .values(**comment_draft_to_dict(draft))
                .returning(comments_table)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.one()
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error("Comment insert failed", error=str(e))
                raise StoreError("insert comments", str(e)) from e

            return row_to_comment(row._asdict())

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find a post's comments, oldest first."""
        with logfire.span("comment_repository.find_by_post", post_id=str(post_id)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == post_id)
                .order_by(asc(comments_table.c.created_at))
            )
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StoreError("select comments", str(e)) from e

            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_posts(self, post_ids: Iterable[PostId]) -> List[Comment]:
        """Find the comments of several posts in one query."""
        ids = list(post_ids)
        if not ids:
            return []

        with logfire.span("comment_repository.find_by_posts", count=len(ids)):
            stmt = select(comments_table).where(comments_table.c.post_id.in_(ids))
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StoreError("select comments", str(e)) from e

            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Runs inside a SAVEPOINT so a failure here leaves the surrounding
        transaction usable for the post delete that follows.
        """
        with logfire.span("comment_repository.delete_by_post", post_id=str(post_id)):
            stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                logfire.error(
                    "Comment delete failed", post_id=str(post_id), error=str(e)
                )
                raise StoreError("delete comments", str(e)) from e

            return result.rowcount
