"""In-memory storage backend.

Used when no DATABASE_URL is configured and by the test suite. Every method
runs to completion without awaiting, so within one event loop each operation
is atomic. Rows are the model instances themselves, keyed by primary key.
"""

from collections import Counter
from itertools import count
from typing import Any, Generic, TypeVar

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
from src.tracker.storage.base import COUNTABLE_FIELDS, WorkItemFilters, conflict_for


RowType = TypeVar("RowType", bound=Any)


class _Table(Generic[RowType]):
    """Rows of one entity plus its primary key counter."""

    def __init__(self) -> None:
        self.rows: dict[int, RowType] = {}
        self._ids = count(1)

    def insert(self, row: RowType) -> RowType:
        row.id = next(self._ids)
        self.rows[row.id] = row
        return row

    def get(self, row_id: int) -> RowType | None:
        return self.rows.get(row_id)

    def all(self) -> list[RowType]:
        return [self.rows[key] for key in sorted(self.rows)]

    def where(self, **criteria: Any) -> list[RowType]:
        return [
            row
            for row in self.all()
            if all(getattr(row, field) == value for field, value in criteria.items())
        ]

    def remove(self, row_id: int) -> None:
        self.rows.pop(row_id, None)


class MemoryStorage:
    def __init__(self) -> None:
        self.users: _Table[User] = _Table()
        self.teams: _Table[Team] = _Table()
        self.members: _Table[TeamMember] = _Table()
        self.projects: _Table[Project] = _Table()
        self.work_items: _Table[WorkItem] = _Table()
        self.comments: _Table[Comment] = _Table()
        self.attachments: _Table[Attachment] = _Table()
        self.history: _Table[WorkItemHistory] = _Table()

    @staticmethod
    def _apply(entity: Any, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(entity, field, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()

    def _remove_activity(self, work_item_ids: set[int]) -> None:
        for table in (self.comments, self.attachments, self.history):
            for row in table.all():
                if row.work_item_id in work_item_ids:
                    table.remove(row.id)

    # Users

    async def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        return next(iter(self.users.where(email=email)), None)

    async def get_user_by_username(self, username: str) -> User | None:
        return next(iter(self.users.where(username=username)), None)

    async def list_users(self, active_only: bool = True) -> list[User]:
        if active_only:
            return self.users.where(is_active=True)
        return self.users.all()

    def _check_user_unique(self, email: str, username: str, user_id: int | None = None) -> None:
        for other in self.users.all():
            if other.id == user_id:
                continue
            if other.email == email:
                raise conflict_for("ix_users_email")
            if other.username == username:
                raise conflict_for("ix_users_username")

    async def create_user(self, user: User) -> User:
        self._check_user_unique(user.email, user.username)
        return self.users.insert(user)

    async def update_user(self, user: User, changes: dict[str, Any]) -> User:
        self._check_user_unique(
            changes.get("email", user.email),
            changes.get("username", user.username),
            user_id=user.id,
        )
        self._apply(user, changes)
        return user

    # Teams

    async def create_team(self, team: Team) -> Team:
        return self.teams.insert(team)

    async def get_team(self, team_id: int) -> Team | None:
        return self.teams.get(team_id)

    async def list_teams(self, active_only: bool = True) -> list[Team]:
        if active_only:
            return self.teams.where(is_active=True)
        return self.teams.all()

    async def list_teams_by_user(self, user_id: int) -> list[Team]:
        team_ids = {member.team_id for member in self.members.where(user_id=user_id)}
        return [team for team in self.teams.all() if team.id in team_ids]

    async def delete_team(self, team: Team) -> None:
        for member in self.members.where(team_id=team.id):
            self.members.remove(member.id)  # type: ignore[arg-type]
        for project in self.projects.where(team_id=team.id):
            project.team_id = None
        self.teams.remove(team.id)  # type: ignore[arg-type]

    async def add_team_member(self, member: TeamMember) -> TeamMember:
        if self.members.where(team_id=member.team_id, user_id=member.user_id):
            raise conflict_for("uq_team_members_team_user")
        return self.members.insert(member)

    async def list_team_members(self, team_id: int) -> list[TeamMember]:
        return self.members.where(team_id=team_id)

    async def remove_team_member(self, team_id: int, user_id: int) -> bool:
        matches = self.members.where(team_id=team_id, user_id=user_id)
        if not matches:
            return False
        self.members.remove(matches[0].id)  # type: ignore[arg-type]
        return True

    # Projects

    async def create_project(self, project: Project) -> Project:
        if self.projects.where(key=project.key):
            raise conflict_for("ix_projects_key")
        return self.projects.insert(project)

    async def get_project(self, project_id: int) -> Project | None:
        return self.projects.get(project_id)

    async def list_projects(self) -> list[Project]:
        return self.projects.all()

    async def list_projects_by_team(self, team_id: int) -> list[Project]:
        return self.projects.where(team_id=team_id)

    async def update_project(self, project: Project, changes: dict[str, Any]) -> Project:
        self._apply(project, changes)
        return project

    async def delete_project(self, project: Project) -> None:
        item_ids = {item.id for item in self.work_items.where(project_id=project.id)}
        self._remove_activity(item_ids)  # type: ignore[arg-type]
        for item_id in item_ids:
            self.work_items.remove(item_id)  # type: ignore[arg-type]
        self.projects.remove(project.id)  # type: ignore[arg-type]

    async def next_work_item_number(self, project_id: int) -> int | None:
        project = self.projects.get(project_id)
        if project is None:
            return None
        project.item_sequence += 1
        return project.item_sequence

    # Work items

    async def create_work_item(self, item: WorkItem) -> WorkItem:
        if self.work_items.where(external_id=item.external_id):
            raise conflict_for("ix_work_items_external_id")
        return self.work_items.insert(item)

    async def get_work_item(self, item_id: int) -> WorkItem | None:
        return self.work_items.get(item_id)

    async def get_work_item_by_external_id(self, external_id: str) -> WorkItem | None:
        return next(iter(self.work_items.where(external_id=external_id)), None)

    async def list_work_items(self, filters: WorkItemFilters) -> list[WorkItem]:
        return [item for item in self.work_items.all() if filters.matches(item)]

    async def list_children(self, parent_id: int) -> list[WorkItem]:
        return self.work_items.where(parent_id=parent_id)

    async def has_children(self, item_id: int) -> bool:
        return any(item.parent_id == item_id for item in self.work_items.rows.values())

    async def update_work_item(
        self,
        item: WorkItem,
        changes: dict[str, Any],
        history: list[WorkItemHistory],
    ) -> WorkItem:
        self._apply(item, changes)
        for entry in history:
            self.history.insert(entry)
        return item

    async def delete_work_item(self, item: WorkItem) -> None:
        self._remove_activity({item.id})  # type: ignore[arg-type]
        self.work_items.remove(item.id)  # type: ignore[arg-type]

    async def count_work_items_by(self, project_id: int, field: str) -> dict[str, int]:
        if field not in COUNTABLE_FIELDS:
            raise ValueError(f"Cannot group work items by {field!r}")
        items = self.work_items.where(project_id=project_id)
        return dict(Counter(getattr(item, field) for item in items))

    # Activity

    async def add_comment(self, comment: Comment) -> Comment:
        return self.comments.insert(comment)

    async def list_comments(self, work_item_id: int) -> list[Comment]:
        return sorted(
            self.comments.where(work_item_id=work_item_id),
            key=lambda c: (c.created_at, c.id),
        )

    async def add_attachment(self, attachment: Attachment) -> Attachment:
        return self.attachments.insert(attachment)

    async def list_attachments(self, work_item_id: int) -> list[Attachment]:
        return sorted(
            self.attachments.where(work_item_id=work_item_id),
            key=lambda a: (a.uploaded_at, a.id),
            reverse=True,
        )

    async def list_history(self, work_item_id: int) -> list[WorkItemHistory]:
        return sorted(
            self.history.where(work_item_id=work_item_id),
            key=lambda h: (h.changed_at, h.id),
            reverse=True,
        )
