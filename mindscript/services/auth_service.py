"""Password hashing, token issuance and the register/login flows."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Tuple

import jwt
from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext
from sqlmodel import Session

from mindscript import config
from mindscript.errors import AuthError, ConflictError, NotFoundError, ValidationError
from mindscript.services.user_service import UserService

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__default_rounds=config.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognizable hash
        return False


def create_jwt_token(user_id: int, email: str) -> str:
    """Sign a token for ``user_id`` that expires after the configured lifetime."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "user_id": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=config.JWT_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry of a token and return its claims.

    Raises:
        AuthError: If the token is malformed, expired or wrongly signed
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise AuthError(f"Invalid token: {str(e)}")

    if payload.get("sub") is None:
        raise AuthError("Invalid token: missing user ID")
    return payload


class AuthService:
    """Registration and credential checks on top of UserService."""

    def __init__(self, session: Session):
        self.users = UserService(session)

    async def register(
        self,
        username: str,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> int:
        """Create a user with a hashed password and return the new id."""
        if not all([username, first_name, last_name, email, password]):
            raise ValidationError("All fields are required")

        if self.users.get_by_email(email) or self.users.get_by_username(username):
            raise ConflictError("User already exists")

        password_hash = await run_in_threadpool(hash_password, password)
        user_id = self.users.create(
            username=username,
            firstname=first_name,
            lastname=last_name,
            email=email,
            password_hash=password_hash,
        )
        logger.info("Registered user %s", user_id)
        return user_id

    async def authenticate(self, email: str, password: str) -> Tuple[str, int]:
        """Check credentials and return ``(token, user_id)``."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.users.get_by_email(email)
        if user is None:
            raise NotFoundError("User not found")

        if not await run_in_threadpool(verify_password, password, user.password):
            logger.info("Rejected credentials for user %s", user.id)
            raise AuthError("Invalid credentials")

        return create_jwt_token(user.id, user.email), user.id
