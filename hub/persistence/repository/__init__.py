"""Repository implementations."""

from hub.persistence.repository.comment import PostgresCommentRepository
from hub.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
