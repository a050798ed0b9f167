"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Iterable, Sequence
from uuid import UUID

from forum.domain.model import Comment, Post, User
from forum.domain.value import CommentId, PostId, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _uuid_set(values: Iterable[Any] | None) -> frozenset[UserId]:
    return frozenset(UserId(_uuid(v)) for v in values or ())


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_post(
    row: Dict[str, Any], comments: Sequence[Comment] = ()
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        comments: The post's comments in insertion order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row.get("content"),
        author_id=UserId(_uuid(row["author_id"])),
        upvoters=_uuid_set(row.get("upvoters")),
        downvoters=_uuid_set(row.get("downvoters")),
        score=row["score"],
        comments=tuple(comments),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Comments live in their own table and are not included.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump(exclude={"comments"})
    # Sorted so the stored arrays are deterministic
    data["upvoters"] = sorted(post.upvoters)
    data["downvoters"] = sorted(post.downvoters)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()
