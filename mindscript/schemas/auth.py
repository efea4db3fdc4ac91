"""Authentication and profile schemas for Mind-Script."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from mindscript.schemas.task import RowId


class RegisterRequest(BaseModel):
    """Register request body. Presence of each field is checked by the service."""
    model_config = ConfigDict(populate_by_name=True)

    username: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LoginRequest(BaseModel):
    """Login request body."""
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UserRequest(BaseModel):
    """Body of requests that only address a user."""
    user_id: Optional[RowId] = None


class ProfileEditRequest(BaseModel):
    """Profile edit body; only the supplied fields change."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[RowId] = None
    username: Optional[str] = Field(None, min_length=1, max_length=50)
    first_name: Optional[str] = Field(None, alias="firstName", min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, alias="lastName", min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    profile_picture: Optional[str] = Field(None, alias="profilePicture", max_length=500)


class UserRead(BaseModel):
    """Public view of a user; the password hash is never included."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    first_name: str = Field(validation_alias="firstname", serialization_alias="firstName")
    last_name: str = Field(validation_alias="lastname", serialization_alias="lastName")
    email: str
    phone: Optional[str] = None
    profile_picture: Optional[str] = Field(
        None, validation_alias="picture", serialization_alias="profilePicture"
    )
