"""Relational storage backend on an async SQLAlchemy session."""

from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.exceptions import ConflictError
from src.tracker.core.logging import get_logger
from src.tracker.models import (
    Attachment,
    Comment,
    Project,
    Team,
    TeamMember,
    User,
    WorkItem,
    WorkItemHistory,
)
from src.tracker.models.base import utc_now
from src.tracker.repositories import (
    AttachmentRepository,
    CommentRepository,
    ProjectRepository,
    TeamMemberRepository,
    TeamRepository,
    UserRepository,
    WorkItemFilters,
    WorkItemHistoryRepository,
    WorkItemRepository,
)
from src.tracker.storage.base import UNIQUE_CONSTRAINTS, conflict_for

logger = get_logger(__name__)


def translate_integrity_error(exc: IntegrityError) -> ConflictError:
    """Map a unique violation onto the ConflictError naming the offending field."""
    detail = str(exc.orig)
    for constraint in UNIQUE_CONSTRAINTS:
        if constraint in detail:
            return conflict_for(constraint)
    return ConflictError("Conflicting data")


class DatabaseStorage:
    """Storage backed by PostgreSQL.

    Each mutating method is one transaction: it commits on success and rolls
    back on failure. Cascades to comments, attachments and history rows are
    done by the database through ON DELETE CASCADE.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)
        self.teams = TeamRepository(session)
        self.members = TeamMemberRepository(session)
        self.projects = ProjectRepository(session)
        self.work_items = WorkItemRepository(session)
        self.comments = CommentRepository(session)
        self.attachments = AttachmentRepository(session)
        self.history = WorkItemHistoryRepository(session)

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            conflict = translate_integrity_error(e)
            logger.info("Integrity error translated", errors=conflict.errors)
            raise conflict from e
        except Exception:
            await self.session.rollback()
            raise

    @staticmethod
    def _apply(entity: Any, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(entity, field, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()

    # Users

    async def get_user(self, user_id: int) -> User | None:
        return await self.users.get_by_id(user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        return await self.users.get_by_email(email)

    async def get_user_by_username(self, username: str) -> User | None:
        return await self.users.get_by_username(username)

    async def list_users(self, active_only: bool = True) -> list[User]:
        return await self.users.list_users(active_only=active_only)

    async def create_user(self, user: User) -> User:
        self.users.add(user)
        await self._commit()
        return user

    async def update_user(self, user: User, changes: dict[str, Any]) -> User:
        self._apply(user, changes)
        self.users.add(user)
        await self._commit()
        return user

    # Teams

    async def create_team(self, team: Team) -> Team:
        self.teams.add(team)
        await self._commit()
        return team

    async def get_team(self, team_id: int) -> Team | None:
        return await self.teams.get_by_id(team_id)

    async def list_teams(self, active_only: bool = True) -> list[Team]:
        return await self.teams.list_teams(active_only=active_only)

    async def list_teams_by_user(self, user_id: int) -> list[Team]:
        return await self.teams.list_by_user(user_id)

    async def delete_team(self, team: Team) -> None:
        await self.members.delete_by_team(team.id)  # type: ignore[arg-type]
        await self.projects.detach_team(team.id)  # type: ignore[arg-type]
        await self.teams.delete(team)
        await self._commit()

    async def add_team_member(self, member: TeamMember) -> TeamMember:
        self.members.add(member)
        await self._commit()
        return member

    async def list_team_members(self, team_id: int) -> list[TeamMember]:
        return await self.members.list_by_team(team_id)

    async def remove_team_member(self, team_id: int, user_id: int) -> bool:
        member = await self.members.get_membership(team_id, user_id)
        if member is None:
            return False
        await self.members.delete(member)
        await self._commit()
        return True

    # Projects

    async def create_project(self, project: Project) -> Project:
        self.projects.add(project)
        await self._commit()
        return project

    async def get_project(self, project_id: int) -> Project | None:
        return await self.projects.get_by_id(project_id)

    async def list_projects(self) -> list[Project]:
        return await self.projects.list_all()

    async def list_projects_by_team(self, team_id: int) -> list[Project]:
        return await self.projects.list_by_team(team_id)

    async def update_project(self, project: Project, changes: dict[str, Any]) -> Project:
        self._apply(project, changes)
        self.projects.add(project)
        await self._commit()
        return project

    async def delete_project(self, project: Project) -> None:
        await self.work_items.delete_by_project(project.id)  # type: ignore[arg-type]
        await self.projects.delete(project)
        await self._commit()

    async def next_work_item_number(self, project_id: int) -> int | None:
        number = await self.projects.increment_sequence(project_id)
        await self._commit()
        return number

    # Work items

    async def create_work_item(self, item: WorkItem) -> WorkItem:
        self.work_items.add(item)
        await self._commit()
        return item

    async def get_work_item(self, item_id: int) -> WorkItem | None:
        return await self.work_items.get_by_id(item_id)

    async def get_work_item_by_external_id(self, external_id: str) -> WorkItem | None:
        return await self.work_items.get_by_external_id(external_id)

    async def list_work_items(self, filters: WorkItemFilters) -> list[WorkItem]:
        return await self.work_items.list_filtered(filters)

    async def list_children(self, parent_id: int) -> list[WorkItem]:
        return await self.work_items.list_children(parent_id)

    async def has_children(self, item_id: int) -> bool:
        return await self.work_items.has_children(item_id)

    async def update_work_item(
        self,
        item: WorkItem,
        changes: dict[str, Any],
        history: list[WorkItemHistory],
    ) -> WorkItem:
        self._apply(item, changes)
        self.work_items.add(item)
        for entry in history:
            self.history.add(entry)
        await self._commit()
        return item

    async def delete_work_item(self, item: WorkItem) -> None:
        await self.work_items.delete(item)
        await self._commit()

    async def count_work_items_by(self, project_id: int, field: str) -> dict[str, int]:
        return await self.work_items.count_by(project_id, field)

    # Activity

    async def add_comment(self, comment: Comment) -> Comment:
        self.comments.add(comment)
        await self._commit()
        return comment

    async def list_comments(self, work_item_id: int) -> list[Comment]:
        return await self.comments.list_for_item(work_item_id)

    async def add_attachment(self, attachment: Attachment) -> Attachment:
        self.attachments.add(attachment)
        await self._commit()
        return attachment

    async def list_attachments(self, work_item_id: int) -> list[Attachment]:
        return await self.attachments.list_for_item(work_item_id)

    async def list_history(self, work_item_id: int) -> list[WorkItemHistory]:
        return await self.history.list_for_item(work_item_id)
