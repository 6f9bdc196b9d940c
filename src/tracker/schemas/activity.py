"""Comment, attachment and history schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class CommentCreate(BaseModel):
    content: str = Field(min_length=1, max_length=10000)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment cannot be empty or whitespace only")
        return v


class CommentRead(BaseModel):
    id: int
    work_item_id: int
    user_id: int
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AttachmentCreate(BaseModel):
    """Metadata of an already stored file."""

    file_name: str = Field(min_length=1, max_length=255)
    file_size: int = Field(ge=0)
    file_type: str = Field(min_length=1, max_length=100)
    file_path: str = Field(min_length=1, max_length=255)


class AttachmentRead(BaseModel):
    id: int
    work_item_id: int
    user_id: int
    file_name: str
    file_size: int
    file_type: str
    file_path: str
    uploaded_at: datetime

    model_config = {"from_attributes": True}


class WorkItemHistoryRead(BaseModel):
    id: int
    work_item_id: int
    user_id: int
    field: str
    old_value: str | None
    new_value: str | None
    changed_at: datetime

    model_config = {"from_attributes": True}
