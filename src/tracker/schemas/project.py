"""Project schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.tracker.core.security import validate_project_key
from src.tracker.models.base import to_naive_utc
from src.tracker.models.enums import ProjectStatus


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    key: str = Field(min_length=2, max_length=10)
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)
    status: ProjectStatus = ProjectStatus.ACTIVE
    team_id: int | None = None
    start_date: datetime | None = None
    target_date: datetime | None = None

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        return validate_project_key(v)

    @field_validator("start_date", "target_date")
    @classmethod
    def normalize_dates(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class ProjectUpdate(BaseModel):
    """Schema for updating a project. The key cannot be changed."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)
    status: ProjectStatus | None = None
    team_id: int | None = None
    start_date: datetime | None = None
    target_date: datetime | None = None

    @field_validator("start_date", "target_date")
    @classmethod
    def normalize_dates(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Project name cannot be empty or whitespace only")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    key: str
    name: str
    description: str | None
    status: ProjectStatus
    created_by: int | None
    team_id: int | None
    start_date: datetime | None
    target_date: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
