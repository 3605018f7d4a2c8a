# app/utils/errors.py
# HTTP error taxonomy shared by routers and services
import logging
from typing import Optional

from fastapi import HTTPException, status

from app.config.settings import settings

logger = logging.getLogger(__name__)


class ApiError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, headers: Optional[dict] = None):
        super().__init__(
            status_code=self.status_code,
            detail=message or self.default_message,
            headers=headers,
        )

    @property
    def message(self) -> str:
        return self.detail


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class DuplicateEmail(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already in use"


class InvalidCredentials(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class InvalidToken(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Admin access required"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class EmployeeNotFound(NotFound):
    default_message = "Employee not found"


class Unhandled(ApiError):
    pass


def unhandled(exc: Exception, action: str, db=None) -> Unhandled:
    """Log an unexpected failure, roll back the request's session and build a 500"""
    logger.exception(f"Error while {action}: {exc}")
    if db is not None:
        db.rollback()
    # Internal error text only reaches clients in development
    if settings.is_development:
        return Unhandled(str(exc) or exc.__class__.__name__)
    return Unhandled()
