"""Feed projection.

Pure functions deriving what the home feed and post page show from stored
posts and comments. Nothing here touches a repository.
"""

import math
from collections import Counter
from datetime import datetime
from typing import Iterable, Sequence

from hub.domain.model import Comment, Post
from hub.domain.value import Flag, PostId

SECONDS_PER_HOUR = 3600
HOURS_PER_DAY = 24


def filter_feed(
    posts: Sequence[Post], search_term: str = "", category: Flag | None = None
) -> list[Post]:
    """Keep the posts matching a title search and a category.

    The search is a case-insensitive substring match on the title only. Both
    conditions must hold; an empty term or no category matches everything.
    Input order is preserved.
    """
    needle = search_term.lower()

    return [
        post
        for post in posts
        if needle in post.title.lower()
        and (category is None or post.has_flag(category))
    ]


def format_relative_time(timestamp: datetime, now: datetime) -> str:
    """Describe how long ago something happened.

    Whole hours and days are truncated, never rounded:

    >>> from datetime import timedelta
    >>> t = datetime(2024, 1, 1)
    >>> format_relative_time(t, t + timedelta(minutes=59))
    'Just now'
    >>> format_relative_time(t, t + timedelta(hours=23, minutes=59))
    '23h ago'
    >>> format_relative_time(t, t + timedelta(hours=24))
    '1d ago'
    """
    hours = math.floor((now - timestamp).total_seconds() / SECONDS_PER_HOUR)

    if hours < 1:
        return "Just now"
    if hours < HOURS_PER_DAY:
        return f"{hours}h ago"
    return f"{hours // HOURS_PER_DAY}d ago"


def truncate(text: str, max_words: int) -> str:
    """Shorten text to its first ``max_words`` words.

    Text that already fits is returned untouched. Otherwise the kept words
    are joined by single spaces and followed by "...".
    """
    words = text.split()
    if len(words) <= max_words:
        return text
    return " ".join(words[:max_words]) + "..."


def comment_counts(
    posts: Iterable[Post], comments: Iterable[Comment]
) -> dict[PostId, int]:
    """Count comments per listed post.

    Every post appears in the result, with 0 when it has no comments.
    Comments on posts that are not listed are ignored.
    """
    counts = {post.id: 0 for post in posts}
    per_post = Counter(comment.post_id for comment in comments)

    for post_id in counts:
        counts[post_id] = per_post.get(post_id, 0)

    return counts
