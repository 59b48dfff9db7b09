"""Helpers shared by the API routes."""

from fastapi import HTTPException, status

from realty.domain.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError

_STATUS_BY_ERROR: tuple[tuple[type[Exception], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)

DomainError = (NotFoundError, AuthenticationError, ConflictError, ValidationError)


def http_error_from(exc: Exception) -> HTTPException:
    """Translate a domain error raised by a use case into an ``HTTPException``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )


__all__ = ["DomainError", "http_error_from"]
