"""Custom exception classes for the application."""

from fastapi import HTTPException, status
from sqlalchemy.exc import InterfaceError, OperationalError

# Driver-level failures meaning the store could not be reached
STORE_UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, OSError)


class NotFoundError(HTTPException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Validation error"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class StoreUnavailableError(HTTPException):
    def __init__(self, detail: str = "Store unavailable"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
