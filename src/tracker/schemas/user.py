from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator
from zxcvbn import zxcvbn

from src.tracker.core.security import validate_corporate_email, validate_username
from src.tracker.models.enums import UserRole

# Minimum zxcvbn score (0-4 scale): 3 = "safely unguessable"
MIN_PASSWORD_SCORE = 3


def check_password_strength(v: str) -> str:
    """Validate password strength using zxcvbn entropy estimation."""
    result = zxcvbn(v)
    if result["score"] >= MIN_PASSWORD_SCORE:
        return v

    feedback = result.get("feedback", {})
    warning = feedback.get("warning", "")
    suggestions = feedback.get("suggestions", [])
    if warning:
        raise ValueError(f"Weak password: {warning}")
    elif suggestions:
        raise ValueError(f"Weak password: {suggestions[0]}")
    raise ValueError("Password is too weak. Use a longer password with a mix of characters.")


class UserCreate(BaseModel):
    """Self-service signup. Accounts always start with the USER role."""

    username: str = Field(min_length=3, max_length=50)
    email: EmailStr = Field(max_length=100)
    password: str = Field(min_length=8, max_length=100)
    confirm_password: str | None = None
    full_name: str = Field(min_length=1, max_length=100)
    avatar_url: str | None = Field(default=None, max_length=255)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return validate_username(v.strip())

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return validate_corporate_email(v)

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        return check_password_strength(v)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Full name cannot be empty or whitespace only")
        return v

    @model_validator(mode="after")
    def passwords_match(self) -> "UserCreate":
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise ValueError("Passwords don't match")
        return self


class UserInvite(BaseModel):
    """Invite a colleague; username defaults to the email's local part."""

    email: EmailStr = Field(max_length=100)
    username: str | None = Field(default=None, min_length=3, max_length=50)
    full_name: str | None = Field(default=None, min_length=1, max_length=100)
    role: UserRole = UserRole.USER

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return validate_corporate_email(v)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return validate_username(v.strip())


class UserRead(BaseModel):
    id: int
    username: str
    email: EmailStr
    full_name: str
    role: UserRole
    avatar_url: str | None
    is_active: bool
    last_login: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
