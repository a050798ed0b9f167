"""Mapping of domain failures onto HTTP responses."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from fastapi import HTTPException, status

from forum.domain.error import (
    AuthenticationError,
    ConcurrentUpdateError,
    DomainError,
    IntegrityViolationError,
    NotAuthorizedError,
    NotFoundError,
)


@contextmanager
def http_errors(action: str, **context: str) -> Iterator[None]:
    """Turn failures raised inside the block into ``HTTPException``.

    ============================  ====  =====================================
    Raised                        Code  Detail
    ============================  ====  =====================================
    AuthenticationError           401   "Unauthenticated"
    NotAuthorizedError            403   "You are not allowed to <action>"
    NotFoundError                 404   "<Resource> not found"
    ConcurrentUpdateError         409   "Post is being modified, try again"
    IntegrityViolationError       500   "Failed to <action>"
    other DomainError/ValueError  400   the error message
    anything else                 500   "Failed to <action>"
    ============================  ====  =====================================

    Args:
        action: What the route does, e.g. "delete this post"
        context: Identifiers attached to the log entry of a failure
    """
    try:
        yield
    except HTTPException:
        raise
    except AuthenticationError as e:
        logfire.warn(
            "Unauthenticated {action}", action=action, error=str(e), **context
        )
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Unauthenticated")
    except NotAuthorizedError as e:
        logfire.warn("Forbidden {action}", action=action, error=str(e), **context)
        raise HTTPException(
            status.HTTP_403_FORBIDDEN, detail=f"You are not allowed to {action}"
        )
    except NotFoundError as e:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except ConcurrentUpdateError as e:
        logfire.warn(
            "Conflict on {action}", action=action, attempts=e.attempts, **context
        )
        raise HTTPException(
            status.HTTP_409_CONFLICT, detail="Post is being modified, try again"
        )
    except IntegrityViolationError as e:
        logfire.error(
            "Integrity violation on {action}",
            action=action,
            error=str(e),
            **context,
        )
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action}"
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Rejected {action}", action=action, error=str(e), **context)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error(
            "Unexpected error on {action}",
            action=action,
            error=str(e),
            error_type=type(e).__name__,
            **context,
        )
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action}"
        )
