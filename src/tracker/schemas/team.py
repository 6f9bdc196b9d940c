"""Team schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.tracker.models.enums import TeamRole
from src.tracker.schemas.user import UserRead


class TeamCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Team name cannot be empty or whitespace only")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class TeamRead(BaseModel):
    id: int
    name: str
    description: str | None
    created_by: int | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TeamMemberCreate(BaseModel):
    user_id: int
    role: TeamRole = TeamRole.MEMBER


class TeamMemberRead(BaseModel):
    """Membership with the member's user embedded."""

    id: int
    team_id: int
    user_id: int
    role: TeamRole
    joined_at: datetime
    user: UserRead | None = None

    model_config = {"from_attributes": True}
