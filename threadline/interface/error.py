"""Interface layer error translation."""

import logfire
from fastapi import HTTPException, status

from threadline.domain.error import (
    DomainError,
    IndexOutOfRangeError,
    MalformedPayloadError,
    NoUserNameError,
    NotFoundError,
    StorageWriteError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error a client should see.

    Missing data (404) and corrupt data (422) stay distinguishable.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, IndexOutOfRangeError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, MalformedPayloadError):
        return HTTPException(status_code=422, detail=str(error))
    if isinstance(error, NoUserNameError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, StorageWriteError):
        logfire.error("Storage write failed", error=str(error))
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)
        )
    logfire.error("Unhandled domain error", error=str(error), error_type=type(error).__name__)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
