"""Append-only records attached to a work item: comments, attachments, history."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.tracker.models.base import utc_now


class Comment(SQLModel, table=True):
    __tablename__ = "comments"

    id: int | None = Field(default=None, primary_key=True)
    work_item_id: int = Field(foreign_key="work_items.id", ondelete="CASCADE", index=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    content: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Attachment(SQLModel, table=True):
    """Metadata of a file attached to a work item."""

    __tablename__ = "attachments"

    id: int | None = Field(default=None, primary_key=True)
    work_item_id: int = Field(foreign_key="work_items.id", ondelete="CASCADE", index=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE")
    file_name: str = Field(max_length=255)
    file_size: int
    file_type: str = Field(max_length=100)
    file_path: str = Field(max_length=255)
    uploaded_at: datetime = Field(default_factory=utc_now)


class WorkItemHistory(SQLModel, table=True):
    """One changed field of one work item update."""

    __tablename__ = "work_item_history"

    id: int | None = Field(default=None, primary_key=True)
    work_item_id: int = Field(foreign_key="work_items.id", ondelete="CASCADE", index=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE")
    field: str = Field(max_length=50)
    old_value: str | None = Field(default=None)
    new_value: str | None = Field(default=None)
    changed_at: datetime = Field(default_factory=utc_now, index=True)
