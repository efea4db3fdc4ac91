"""User persistence: lookup, registration insert and profile edits."""
import logging
from typing import Any, Dict, Optional

from sqlalchemy import update
from sqlmodel import Session, select

from mindscript.errors import ConflictError, ValidationError
from mindscript.models import User
from mindscript.models.user import utc_now
from mindscript.services.repository import WriteResult

logger = logging.getLogger(__name__)

# Profile fields a user may change, mapped from their wire names
PROFILE_FIELDS = {
    "username": "username",
    "firstName": "firstname",
    "lastName": "lastname",
    "email": "email",
    "phone": "phone",
    "profilePicture": "picture",
}


class UserService:
    """Service class for user lookups and profile updates."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_by_username(self, username: str) -> Optional[User]:
        statement = select(User).where(User.username == username)
        return self.session.exec(statement).first()

    def create(
        self,
        username: str,
        firstname: str,
        lastname: str,
        email: str,
        password_hash: str,
    ) -> int:
        """Insert a user whose password is already hashed and return the new id."""
        user = User(
            username=username,
            firstname=firstname,
            lastname=lastname,
            email=email,
            password=password_hash,
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user.id

    def edit_profile(self, user_id: int, fields: Dict[str, Any]) -> WriteResult:
        """Update the supplied profile fields, keeping email and username unique."""
        values = {
            column: fields[wire]
            for wire, column in PROFILE_FIELDS.items()
            if wire in fields and fields[wire] is not None
        }
        if not values:
            raise ValidationError("No fields to update")

        email = values.get("email")
        if email is not None:
            owner = self.get_by_email(email)
            if owner is not None and owner.id != user_id:
                raise ConflictError("Email is already in use")
        username = values.get("username")
        if username is not None:
            owner = self.get_by_username(username)
            if owner is not None and owner.id != user_id:
                raise ConflictError("Username is already taken")

        values["updated_at"] = utc_now()
        statement = (
            update(User)
            .where(User.id == user_id)
            .values({getattr(User, column): value for column, value in values.items()})
        )
        result = self.session.exec(statement)
        self.session.commit()
        logger.info("Profile edit for user %s affected %s rows", user_id, result.rowcount)
        return WriteResult(affected=result.rowcount, id=user_id)
