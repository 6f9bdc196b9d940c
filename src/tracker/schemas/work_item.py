"""Work item schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.tracker.models.base import to_naive_utc
from src.tracker.models.enums import WorkItemPriority, WorkItemStatus, WorkItemType


class WorkItemCreate(BaseModel):
    """Schema for creating a work item.

    `external_id` is normally generated from the project key; a supplied value
    is stored verbatim if no other item uses it.
    """

    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    type: WorkItemType
    status: WorkItemStatus = WorkItemStatus.TODO
    priority: WorkItemPriority = WorkItemPriority.MEDIUM
    project_id: int
    parent_id: int | None = None
    assignee_id: int | None = None
    reporter_id: int | None = None
    estimate: float | None = Field(default=None, ge=0)
    start_date: datetime | None = None
    end_date: datetime | None = None
    external_id: str | None = Field(default=None, min_length=1, max_length=20)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title cannot be empty or whitespace only")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class WorkItemUpdate(BaseModel):
    """Partial update. The external ID and project cannot be changed."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    type: WorkItemType | None = None
    status: WorkItemStatus | None = None
    priority: WorkItemPriority | None = None
    parent_id: int | None = None
    assignee_id: int | None = None
    reporter_id: int | None = None
    estimate: float | None = Field(default=None, ge=0)
    start_date: datetime | None = None
    end_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("Title cannot be null")
        v = v.strip()
        if not v:
            raise ValueError("Title cannot be empty or whitespace only")
        return v

    @field_validator("type", "status", "priority")
    @classmethod
    def reject_null(cls, v: object) -> object:
        # Explicit nulls only; omitted fields keep their default and skip validation
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class WorkItemStatusUpdate(BaseModel):
    status: WorkItemStatus


class WorkItemRead(BaseModel):
    id: int
    external_id: str
    title: str
    description: str | None
    type: WorkItemType
    status: WorkItemStatus
    priority: WorkItemPriority
    project_id: int
    parent_id: int | None
    assignee_id: int | None
    reporter_id: int | None
    estimate: float | None
    start_date: datetime | None
    end_date: datetime | None
    completed_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
