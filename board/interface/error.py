"""Interface layer error translation."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from board.domain.error import DomainError


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error onto the HTTP status it carries."""
    return HTTPException(status_code=error.status_code, detail=error.message)


@contextmanager
def domain_errors(action: str) -> Iterator[None]:
    """Translate errors raised while handling a request.

    Domain errors keep their status and message; anything else is logged
    and reported as a 500 without leaking details.

    Args:
        action: What the route was doing, used in the 500 message
    """
    try:
        yield
    except HTTPException:
        raise
    except DomainError as e:
        logfire.warn(
            f"Failed to {action}",
            error=e.message,
            error_type=type(e).__name__,
            status_code=e.status_code,
        )
        raise to_http_exception(e) from e
    except Exception as e:
        logfire.error(
            f"Unexpected error while trying to {action}",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}",
        ) from e


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 Bad Request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )
