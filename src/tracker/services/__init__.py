from src.tracker.services.activity_service import ActivityService
from src.tracker.services.auth_service import AuthService
from src.tracker.services.external_id import ExternalIdGenerator, format_external_id
from src.tracker.services.project_service import ProjectService
from src.tracker.services.report_service import ReportService
from src.tracker.services.team_service import TeamService
from src.tracker.services.user_service import UserService
from src.tracker.services.work_item_service import WorkItemService

__all__ = [
    "ActivityService",
    "AuthService",
    "ExternalIdGenerator",
    "ProjectService",
    "ReportService",
    "TeamService",
    "UserService",
    "WorkItemService",
    "format_external_id",
]
