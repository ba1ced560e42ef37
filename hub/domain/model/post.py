"""Post aggregate root.

Posts are the top-level content of the forum. They are anonymous: the only
link to their author is a random token, and edits or deletion are gated by a
secret key the author picked when posting.
"""

import secrets
from datetime import datetime
from typing import Optional

from pydantic import Field, SecretStr, field_validator

from hub.domain.model.common import DomainModel
from hub.domain.value import AuthorToken, Flag, PostId, dedupe_flags


class PostDraft(DomainModel):
    """A post that has not been stored yet.

    The record store assigns the ``id`` when the draft is inserted.
    """

    title: str = Field(min_length=1)
    content: Optional[str] = None
    image_url: Optional[str] = None
    upvotes: int = Field(default=0, ge=0)
    created_at: datetime
    user_id: AuthorToken
    secret_key: SecretStr = SecretStr("")
    flags: list[Flag] = Field(default_factory=list)
    repost_id: Optional[PostId] = None

    @field_validator("flags")
    @classmethod
    def collapse_duplicate_flags(cls, v: list[Flag]) -> list[Flag]:
        """Flags have set semantics."""
        return dedupe_flags(v)


class Post(PostDraft):
    """Post aggregate root."""

    id: PostId

    def is_protected(self) -> bool:
        """Whether a secret key was set when the post was created."""
        return bool(self.secret_key.get_secret_value())

    def secret_key_matches(self, candidate: str) -> bool:
        """Check a candidate secret key against the stored one.

        Exact, case-sensitive comparison. A post created without a key accepts
        any candidate, including the empty string.
        """
        if not self.is_protected():
            return True
        return secrets.compare_digest(
            candidate.encode("utf-8"),
            self.secret_key.get_secret_value().encode("utf-8"),
        )

    def has_flag(self, flag: Flag) -> bool:
        """Whether the post is tagged with the given category."""
        return flag in self.flags
