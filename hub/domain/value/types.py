"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

import re
import secrets
import string
from enum import Enum
from typing import Optional

from pydantic import field_validator

from hub.domain.value.common import RootValueObject, ValueObject

_TOKEN_ALPHABET = string.ascii_lowercase + string.digits
_TOKEN_LENGTH = 13
_SHORT_TOKEN_LENGTH = 8


class Flag(str, Enum):
    """Category tag attachable to a post.

    The set is closed. Unknown categories are rejected at validation.
    """

    QUESTION = "Question"
    OPINION = "Opinion"
    NEWS = "News"
    DISCUSSION = "Discussion"

    @property
    def emoji(self) -> str:
        """Badge shown next to the category label."""
        return _FLAG_EMOJI[self]


_FLAG_EMOJI = {
    Flag.QUESTION: "❓",
    Flag.OPINION: "\U0001f4ad",
    Flag.NEWS: "\U0001f4f0",
    Flag.DISCUSSION: "\U0001f4ac",
}


class PostSortField(str, Enum):
    """Field the post listing is ordered by (always descending)."""

    CREATED_AT = "created_at"  # Newest first
    UPVOTES = "upvotes"  # Most upvoted first


class AuthorToken(RootValueObject[str]):
    """Anonymous author identifier.

    Not tied to any identity: a fresh token is generated for every post and
    every comment. Collisions are possible and accepted.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is a short lowercase alphanumeric string."""
        if not re.match(r"^[a-z0-9]{1,64}$", v):
            raise ValueError("Author token must be 1-64 lowercase alphanumerics")
        return v

    @classmethod
    def generate(cls) -> "AuthorToken":
        """Create a new random token."""
        return cls("".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(_TOKEN_LENGTH)))

    @property
    def short(self) -> str:
        """Display form ("By 1a2b3c4d")."""
        return self.root[:_SHORT_TOKEN_LENGTH]


def dedupe_flags(flags: list[Flag]) -> list[Flag]:
    """Collapse repeated flags, keeping first-seen order."""
    return list(dict.fromkeys(flags))


class PostFields(ValueObject):
    """Editable post fields for a partial update.

    Only fields that were explicitly set are applied; ``content=None`` given
    explicitly clears the content, while omitting ``content`` leaves it as is.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    flags: Optional[list[Flag]] = None

    @field_validator("flags")
    @classmethod
    def collapse_duplicate_flags(cls, v: Optional[list[Flag]]) -> list[Flag]:
        """Give flags set semantics. An explicit None clears all flags."""
        return dedupe_flags(v or [])

    def changes(self) -> dict:
        """Return only the explicitly provided fields."""
        return self.model_dump(exclude_unset=True)
