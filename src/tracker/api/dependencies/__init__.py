"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

# Auth
from src.tracker.api.dependencies.auth import (
    CurrentPrincipal,
    CurrentUser,
    get_current_principal,
    get_current_user,
)

# Storage
from src.tracker.api.dependencies.db import StorageDep, get_storage

# Services
from src.tracker.api.dependencies.services import (
    ActivityServiceDep,
    AuthServiceDep,
    ProjectServiceDep,
    ReportServiceDep,
    TeamServiceDep,
    UserServiceDep,
    WorkItemServiceDep,
)

__all__ = [
    # Auth
    "CurrentPrincipal",
    "CurrentUser",
    "get_current_principal",
    "get_current_user",
    # Storage
    "StorageDep",
    "get_storage",
    # Services
    "ActivityServiceDep",
    "AuthServiceDep",
    "ProjectServiceDep",
    "ReportServiceDep",
    "TeamServiceDep",
    "UserServiceDep",
    "WorkItemServiceDep",
]
