"""Repositories for comments, attachments and work item history."""

from sqlmodel import col, select

from src.tracker.models import Attachment, Comment, WorkItemHistory
from src.tracker.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    model = Comment

    async def list_for_item(self, work_item_id: int) -> list[Comment]:
        """Oldest first."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.work_item_id == work_item_id)
            .order_by(col(Comment.created_at), col(Comment.id))
        )
        return list(result.scalars().all())


class AttachmentRepository(BaseRepository[Attachment]):
    model = Attachment

    async def list_for_item(self, work_item_id: int) -> list[Attachment]:
        """Newest first."""
        result = await self.session.execute(
            select(Attachment)
            .where(Attachment.work_item_id == work_item_id)
            .order_by(col(Attachment.uploaded_at).desc(), col(Attachment.id).desc())
        )
        return list(result.scalars().all())


class WorkItemHistoryRepository(BaseRepository[WorkItemHistory]):
    model = WorkItemHistory

    async def list_for_item(self, work_item_id: int) -> list[WorkItemHistory]:
        """Newest first."""
        result = await self.session.execute(
            select(WorkItemHistory)
            .where(WorkItemHistory.work_item_id == work_item_id)
            .order_by(col(WorkItemHistory.changed_at).desc(), col(WorkItemHistory.id).desc())
        )
        return list(result.scalars().all())
