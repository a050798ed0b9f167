"""Feed ranking helpers.

Rank is a request-time value: it depends on ``now``, so it is computed on
every feed read and never stored. The same formula is expressed in SQL by
the PostgreSQL post repository.
"""

import math
from datetime import datetime

SECONDS_PER_HOUR = 3600


def age_in_hours(created_at: datetime, now: datetime) -> float:
    """Age of a post in (fractional) hours."""
    return (now - created_at).total_seconds() / SECONDS_PER_HOUR


def rank(
    score: int,
    created_at: datetime,
    now: datetime,
    *,
    gravity: float = 1.5,
    time_offset: float = 1.0,
) -> float:
    """Compute the feed rank of a post.

    ``(score + 1) / (age_hours + time_offset) ** gravity``

    Adding 1 to the score keeps zero-score posts positive so recency still
    separates them; the offset keeps brand new posts from dividing by zero.
    Higher gravity makes old posts sink faster regardless of score.
    Posts dated in the future (clock skew) are treated as brand new.
    """
    age = max(age_in_hours(created_at, now), 0.0)
    return (score + 1) / math.pow(age + time_offset, gravity)


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items ``limit`` at a time."""
    return math.ceil(total / limit)


def next_page(page: int, limit: int, total: int) -> int | None:
    """Following page number, or None at the end of the feed."""
    return page + 1 if page < total_pages(total, limit) else None
