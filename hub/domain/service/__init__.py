"""Domain services."""

from . import feed
from .base import Service
from .comment_service import CommentService
from .post_service import PostService

__all__ = [
    "CommentService",
    "PostService",
    "Service",
    "feed",
]
