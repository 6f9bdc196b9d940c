from src.tracker.schemas.activity import (
    AttachmentCreate,
    AttachmentRead,
    CommentCreate,
    CommentRead,
    WorkItemHistoryRead,
)
from src.tracker.schemas.auth import LoginRequest, LoginResponse
from src.tracker.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.tracker.schemas.report import AssigneeStats, ProjectStatistics, ProjectTimeline
from src.tracker.schemas.team import TeamCreate, TeamMemberCreate, TeamMemberRead, TeamRead
from src.tracker.schemas.user import UserCreate, UserInvite, UserRead
from src.tracker.schemas.work_item import (
    WorkItemCreate,
    WorkItemRead,
    WorkItemStatusUpdate,
    WorkItemUpdate,
)

__all__ = [
    # Activity
    "AttachmentCreate",
    "AttachmentRead",
    "CommentCreate",
    "CommentRead",
    "WorkItemHistoryRead",
    # Auth
    "LoginRequest",
    "LoginResponse",
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    # Report
    "AssigneeStats",
    "ProjectStatistics",
    "ProjectTimeline",
    # Team
    "TeamCreate",
    "TeamMemberCreate",
    "TeamMemberRead",
    "TeamRead",
    # User
    "UserCreate",
    "UserInvite",
    "UserRead",
    # Work item
    "WorkItemCreate",
    "WorkItemRead",
    "WorkItemStatusUpdate",
    "WorkItemUpdate",
]
