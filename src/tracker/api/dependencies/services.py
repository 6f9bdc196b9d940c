"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.tracker.api.dependencies.db import StorageDep
from src.tracker.services import (
    ActivityService,
    AuthService,
    ProjectService,
    ReportService,
    TeamService,
    UserService,
    WorkItemService,
)


def get_auth_service(storage: StorageDep) -> AuthService:
    return AuthService(storage)


def get_user_service(storage: StorageDep) -> UserService:
    return UserService(storage)


def get_team_service(storage: StorageDep) -> TeamService:
    return TeamService(storage)


def get_project_service(storage: StorageDep) -> ProjectService:
    return ProjectService(storage)


def get_work_item_service(storage: StorageDep) -> WorkItemService:
    return WorkItemService(storage)


def get_activity_service(storage: StorageDep) -> ActivityService:
    return ActivityService(storage)


def get_report_service(storage: StorageDep) -> ReportService:
    return ReportService(storage)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
TeamServiceDep = Annotated[TeamService, Depends(get_team_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
WorkItemServiceDep = Annotated[WorkItemService, Depends(get_work_item_service)]
ActivityServiceDep = Annotated[ActivityService, Depends(get_activity_service)]
ReportServiceDep = Annotated[ReportService, Depends(get_report_service)]
