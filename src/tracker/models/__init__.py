"""Model exports.

Import from here: `from src.tracker.models import User, WorkItem`
"""

from src.tracker.models.activity import Attachment, Comment, WorkItemHistory
from src.tracker.models.enums import (
    ProjectStatus,
    TeamRole,
    UserRole,
    WorkItemPriority,
    WorkItemStatus,
    WorkItemType,
)
from src.tracker.models.project import Project
from src.tracker.models.team import Team, TeamMember
from src.tracker.models.user import User
from src.tracker.models.work_item import WorkItem

__all__ = [
    # Enums
    "ProjectStatus",
    "TeamRole",
    "UserRole",
    "WorkItemPriority",
    "WorkItemStatus",
    "WorkItemType",
    # Models
    "Attachment",
    "Comment",
    "Project",
    "Team",
    "TeamMember",
    "User",
    "WorkItem",
    "WorkItemHistory",
]
