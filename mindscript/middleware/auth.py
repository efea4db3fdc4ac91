"""JWT authentication dependency for the protected routes."""
from typing import Optional

from fastapi import Request
from pydantic import BaseModel

from mindscript.errors import AuthError, ForbiddenError
from mindscript.services.auth_service import decode_jwt_token


class CurrentUser(BaseModel):
    """User information extracted from JWT."""
    user_id: int
    email: Optional[str] = None


async def get_current_user(request: Request) -> CurrentUser:
    """
    Validate the bearer token of a request and extract the user it names.

    Args:
        request: FastAPI request object to extract Authorization header

    Returns:
        CurrentUser with user_id and email from token

    Raises:
        AuthError: If the header is missing or the token is invalid or expired
    """
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise AuthError("Missing or invalid Authorization header")

    token = auth_header[7:]  # Remove "Bearer " prefix
    payload = decode_jwt_token(token)

    try:
        user_id = int(payload.get("user_id", payload["sub"]))
    except (TypeError, ValueError):
        raise AuthError("Invalid token: malformed user ID")

    return CurrentUser(user_id=user_id, email=payload.get("email"))


def ensure_owner(current_user: CurrentUser, user_id: Optional[int]) -> int:
    """Return the user id a request acts on, rejecting ids other than the caller's."""
    if user_id is not None and int(user_id) != current_user.user_id:
        raise ForbiddenError()
    return current_user.user_id
