"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """Application-wide role of a user."""

    ADMIN = "ADMIN"
    SCRUM_MASTER = "SCRUM_MASTER"
    USER = "USER"


class TeamRole(str, Enum):
    """Role of a user within a team."""

    ADMIN = "ADMIN"
    MEMBER = "MEMBER"
    VIEWER = "VIEWER"


class ProjectStatus(str, Enum):
    PLANNING = "PLANNING"
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    COMPLETED = "COMPLETED"


class WorkItemType(str, Enum):
    """Work item types, from the top of the hierarchy down."""

    EPIC = "EPIC"
    FEATURE = "FEATURE"
    STORY = "STORY"
    TASK = "TASK"
    BUG = "BUG"


class WorkItemStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class WorkItemPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"
