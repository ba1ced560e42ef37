"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through the SQLAlchemy ORM.
"""

from typing import Any, Dict
from uuid import UUID

from hub.domain.model import Comment, CommentDraft, Post, PostDraft
from hub.domain.value import AuthorToken, CommentId, Flag, PostId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    repost_id = row.get("repost_id")
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        content=row.get("content"),
        image_url=row.get("image_url"),
        upvotes=row["upvotes"],
        created_at=row["created_at"],
        user_id=AuthorToken(row["user_id"]),
        secret_key=row.get("secret_key") or "",
        flags=[Flag(f) for f in row.get("flags") or []],
        repost_id=PostId(_as_uuid(repost_id)) if repost_id else None,
    )


def post_draft_to_dict(draft: PostDraft) -> Dict[str, Any]:
    """Convert a post draft to column values for insertion.

    Args:
        draft: Post fields without an ID

    Returns:
        Dict suitable for database insertion
    """
    return {
        "title": draft.title,
        "content": draft.content,
        "image_url": draft.image_url,
        "upvotes": draft.upvotes,
        "created_at": draft.created_at,
        "user_id": draft.user_id.root,
        "secret_key": draft.secret_key.get_secret_value(),
        "flags": [f.value for f in draft.flags],
        "repost_id": draft.repost_id,
    }


def post_changes_to_dict(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a partial post update to column values.

    Args:
        changes: Field name to new domain value

    Returns:
        Dict suitable for an UPDATE statement
    """
    values = dict(changes)
    if "flags" in values:
        values["flags"] = [Flag(f).value for f in values["flags"]]
    return values


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        content=row["content"],
        created_at=row["created_at"],
        user_id=AuthorToken(row["user_id"]),
    )


def comment_draft_to_dict(draft: CommentDraft) -> Dict[str, Any]:
    """Convert a comment draft to column values for insertion.

    Args:
        draft: Comment fields without an ID

    Returns:
        Dict suitable for database insertion
    """
    return {
        "post_id": draft.post_id,
        "content": draft.content,
        "created_at": draft.created_at,
        "user_id": draft.user_id.root,
    }
