"""Translation of application errors into HTTP responses."""

import logfire
from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from memora.adapter.error import AdapterError
from memora.domain.error import (
    DomainError,
    InvalidSignatureError,
    NotAuthorizedError,
    NotFoundError,
)


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an error raised while handling a request to an HTTP error.

    Args:
        error: The raised error
        action: What the route was doing, for logs and the 500 message

    Returns:
        HTTP exception to raise
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, NotFoundError):
        logfire.warn(f"Not found during {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (NotAuthorizedError, InvalidSignatureError)):
        logfire.warn(f"Forbidden {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, (DomainError, PydanticValidationError)):
        logfire.warn(f"Invalid request to {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, AdapterError):
        logfire.error(f"Upstream failure during {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to {action}: upstream service error",
        )

    logfire.error(f"Unexpected error during {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
