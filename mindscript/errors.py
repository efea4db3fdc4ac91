"""Error taxonomy shared by services and routers.

Every error carries the HTTP status it maps to. The exception handlers in
``mindscript.main`` render them as ``{"success": false, "message": ...}``.
"""
from typing import Any, Dict, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that are reported to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"
    headers: Optional[Dict[str, str]] = None

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        detail: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.detail = detail
        self.payload = payload or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed required input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required"


class ConflictError(AppError):
    """A unique field (email, username) is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class AuthError(AppError):
    """Bad credentials or an invalid, expired or missing token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"
    headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(AppError):
    """The token belongs to a different user than the one addressed."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized to access this user's resources"


class NotFoundError(AppError):
    """Referenced entity (or entity/owner pair) does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(AppError):
    """Unexpected failure in the store or in the service layer."""
