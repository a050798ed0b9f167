"""Failures raised by domain services and use cases.

Each class corresponds to one HTTP status in
``forum.interface.api.errors.http_errors``.
"""


class DomainError(Exception):
    """Root of the forum's business-rule failures."""


class ValidationError(DomainError):
    """Input breaks a rule: a malformed ID, an empty title, a taken username."""


class AuthenticationError(DomainError):
    """The request cannot be tied to a known user."""


class NotAuthorizedError(DomainError):
    """A user tried to change content that is not theirs."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.action = action
        super().__init__(f"User {user_id} may not {action} {resource} {resource_id}")


class NotFoundError(DomainError):
    """No post, comment or user with the given identifier exists.

    ``resource`` is the capitalised kind ("Post", "Comment", "User"), used
    verbatim in 404 responses.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} does not exist")


class ConcurrentUpdateError(DomainError):
    """A post kept changing underneath a vote until retries ran out."""

    def __init__(self, post_id: str, attempts: int):
        self.post_id = post_id
        self.attempts = attempts
        super().__init__(
            f"Post {post_id} changed during every one of {attempts} vote attempts"
        )


class IntegrityViolationError(DomainError):
    """Stored data breaks an invariant, e.g. a post whose author is gone."""
