"""Comments client errors."""


class ClientError(Exception):
    """Base comments client error."""

    pass


class ApiError(ClientError):
    """Request to the comments API failed.

    Attributes:
        status_code: HTTP status, 0 when no response was received
        message: Server detail message, or the transport error
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
