"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from hub.domain.repository.comment import CommentRepository
from hub.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
]
