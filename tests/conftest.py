"""Test configuration and shared builders."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from forum.domain.model import Comment, Post, User
from forum.domain.model.common import utcnow
from forum.domain.value import CommentId, PostId, UserId, Username

# Placeholder hash; tests that log in register through UserService instead
DUMMY_HASH = "$2b$12$C6UzMDM.H6dfI/f/IKcEeO5i3PZxQ8vG9pQ2rF1WfD7QZ8uRZ8e6a"


def make_user(username: str = "alice") -> User:
    """Build a user with a placeholder password hash."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        password_hash=DUMMY_HASH,
    )


def make_post(
    author_id: UserId,
    title: str = "Test Post",
    content: str | None = "Some content",
    age: timedelta = timedelta(0),
    now: datetime | None = None,
    upvoters: frozenset[UserId] = frozenset(),
    downvoters: frozenset[UserId] = frozenset(),
) -> Post:
    """Build a post created ``age`` before ``now`` with a consistent score."""
    created_at = (now or utcnow()) - age
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=content,
        author_id=author_id,
        upvoters=upvoters,
        downvoters=downvoters,
        score=len(upvoters) - len(downvoters),
        created_at=created_at,
        updated_at=created_at,
    )


def make_comment(post_id: PostId, author_id: UserId, content: str = "Nice") -> Comment:
    """Build a comment on ``post_id``."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id,
        content=content,
    )


def pytest_configure(config):
    """Keep telemetry local while tests run."""
    logfire.configure(send_to_logfire=False, console=False)
