"""Storage contract shared by the database and in-memory backends.

Both backends enforce the same uniqueness rules and cascades, and raise the
same ConflictError for a duplicate, so services never know which one they use.
"""

from typing import Any, Protocol

from src.tracker.core.exceptions import ConflictError
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
from src.tracker.repositories.work_item import COUNTABLE_FIELDS, WorkItemFilters

# Unique constraint/index name -> (field path, message)
UNIQUE_CONSTRAINTS: dict[str, tuple[str, str]] = {
    "ix_users_email": ("email", "Email already registered"),
    "ix_users_username": ("username", "Username already taken"),
    "ix_projects_key": ("key", "Project key already exists"),
    "ix_work_items_external_id": ("external_id", "External ID already exists"),
    "uq_team_members_team_user": ("user_id", "User is already a member of this team"),
}


def conflict_for(constraint: str) -> ConflictError:
    """Build the ConflictError reported for a violated unique constraint."""
    path, message = UNIQUE_CONSTRAINTS[constraint]
    return ConflictError(message, errors=[{"path": path, "message": message}])


class Storage(Protocol):
    # Users
    async def get_user(self, user_id: int) -> User | None: ...
    async def get_user_by_email(self, email: str) -> User | None: ...
    async def get_user_by_username(self, username: str) -> User | None: ...
    async def list_users(self, active_only: bool = True) -> list[User]: ...
    async def create_user(self, user: User) -> User: ...
    async def update_user(self, user: User, changes: dict[str, Any]) -> User: ...

    # Teams
    async def create_team(self, team: Team) -> Team: ...
    async def get_team(self, team_id: int) -> Team | None: ...
    async def list_teams(self, active_only: bool = True) -> list[Team]: ...
    async def list_teams_by_user(self, user_id: int) -> list[Team]: ...
    async def delete_team(self, team: Team) -> None: ...
    async def add_team_member(self, member: TeamMember) -> TeamMember: ...
    async def list_team_members(self, team_id: int) -> list[TeamMember]: ...
    async def remove_team_member(self, team_id: int, user_id: int) -> bool: ...

    # Projects
    async def create_project(self, project: Project) -> Project: ...
    async def get_project(self, project_id: int) -> Project | None: ...
    async def list_projects(self) -> list[Project]: ...
    async def list_projects_by_team(self, team_id: int) -> list[Project]: ...
    async def update_project(self, project: Project, changes: dict[str, Any]) -> Project: ...
    async def delete_project(self, project: Project) -> None: ...
    async def next_work_item_number(self, project_id: int) -> int | None: ...

    # Work items
    async def create_work_item(self, item: WorkItem) -> WorkItem: ...
    async def get_work_item(self, item_id: int) -> WorkItem | None: ...
    async def get_work_item_by_external_id(self, external_id: str) -> WorkItem | None: ...
    async def list_work_items(self, filters: WorkItemFilters) -> list[WorkItem]: ...
    async def list_children(self, parent_id: int) -> list[WorkItem]: ...
    async def has_children(self, item_id: int) -> bool: ...
    async def update_work_item(
        self,
        item: WorkItem,
        changes: dict[str, Any],
        history: list[WorkItemHistory],
    ) -> WorkItem: ...
    async def delete_work_item(self, item: WorkItem) -> None: ...
    async def count_work_items_by(self, project_id: int, field: str) -> dict[str, int]: ...

    # Activity
    async def add_comment(self, comment: Comment) -> Comment: ...
    async def list_comments(self, work_item_id: int) -> list[Comment]: ...
    async def add_attachment(self, attachment: Attachment) -> Attachment: ...
    async def list_attachments(self, work_item_id: int) -> list[Attachment]: ...
    async def list_history(self, work_item_id: int) -> list[WorkItemHistory]: ...


__all__ = [
    "COUNTABLE_FIELDS",
    "UNIQUE_CONSTRAINTS",
    "Storage",
    "WorkItemFilters",
    "conflict_for",
]
