"""Domain layer errors.

Every domain error carries the HTTP status the interface layer reports it
with, so failures cross layer boundaries as one typed error.
"""


class DomainError(Exception):
    """Base domain error."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Input violates a content, nickname or nesting rule."""

    status_code = 400


class DepthLimitExceededError(ValidationError):
    """Raised when a reply would nest deeper than the allowed depth."""

    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Comment nesting is too deep: depth {depth} exceeds {max_depth}"
        )


class AuthError(DomainError):
    """Raised when a password does not match."""

    status_code = 401

    def __init__(self, message: str = "Password does not match"):
        super().__init__(message)


class AuthorPasswordMismatchError(AuthError):
    """Raised when a commenter claims to be the post author with a wrong password."""

    def __init__(self) -> None:
        super().__init__("Wrong author password")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StateError(DomainError):
    """Raised when an operation is not allowed in the entity's current state."""

    status_code = 400


class CommentDeletedError(StateError):
    """Raised when attempting to modify a deleted comment."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(f"Comment {comment_id} has been deleted")


class ServerError(DomainError):
    """Unexpected failure while handling a request."""

    status_code = 500
