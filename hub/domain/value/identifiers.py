"""Strongly typed identifiers for forum entities.

Both identifiers are assigned by the record store when a row is inserted.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
