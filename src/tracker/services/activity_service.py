"""Comments, attachments and change history of work items."""

from src.tracker.core.authorization import Principal
from src.tracker.core.exceptions import NotFoundError
from src.tracker.core.logging import get_logger
from src.tracker.models import Attachment, Comment, WorkItemHistory
from src.tracker.schemas.activity import AttachmentCreate, CommentCreate
from src.tracker.storage import Storage

logger = get_logger(__name__)


class ActivityService:
    """Any authenticated user may comment on or attach files to any work item."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def _ensure_item(self, work_item_id: int) -> None:
        if await self.storage.get_work_item(work_item_id) is None:
            raise NotFoundError("Work item not found")

    async def add_comment(
        self, principal: Principal, work_item_id: int, data: CommentCreate
    ) -> Comment:
        await self._ensure_item(work_item_id)
        comment = await self.storage.add_comment(
            Comment(work_item_id=work_item_id, user_id=principal.user_id, content=data.content)
        )
        logger.info("Comment added", work_item_id=work_item_id, comment_id=comment.id)
        return comment

    async def list_comments(self, work_item_id: int) -> list[Comment]:
        await self._ensure_item(work_item_id)
        return await self.storage.list_comments(work_item_id)

    async def add_attachment(
        self, principal: Principal, work_item_id: int, data: AttachmentCreate
    ) -> Attachment:
        await self._ensure_item(work_item_id)
        attachment = await self.storage.add_attachment(
            Attachment(work_item_id=work_item_id, user_id=principal.user_id, **data.model_dump())
        )
        logger.info("Attachment added", work_item_id=work_item_id, attachment_id=attachment.id)
        return attachment

    async def list_attachments(self, work_item_id: int) -> list[Attachment]:
        await self._ensure_item(work_item_id)
        return await self.storage.list_attachments(work_item_id)

    async def list_history(self, work_item_id: int) -> list[WorkItemHistory]:
        await self._ensure_item(work_item_id)
        return await self.storage.list_history(work_item_id)
