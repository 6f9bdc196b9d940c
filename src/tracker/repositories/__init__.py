"""Repository layer - SQL data access used by DatabaseStorage."""

from src.tracker.repositories.activity import (
    AttachmentRepository,
    CommentRepository,
    WorkItemHistoryRepository,
)
from src.tracker.repositories.base import BaseRepository
from src.tracker.repositories.project import ProjectRepository
from src.tracker.repositories.team import TeamMemberRepository, TeamRepository
from src.tracker.repositories.user import UserRepository
from src.tracker.repositories.work_item import (
    COUNTABLE_FIELDS,
    WorkItemFilters,
    WorkItemRepository,
)

__all__ = [
    "BaseRepository",
    "AttachmentRepository",
    "CommentRepository",
    "ProjectRepository",
    "TeamMemberRepository",
    "TeamRepository",
    "UserRepository",
    "WorkItemHistoryRepository",
    "WorkItemRepository",
    # Filters
    "COUNTABLE_FIELDS",
    "WorkItemFilters",
]
