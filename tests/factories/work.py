"""Project and work item factories."""

from uuid import uuid4

from polyfactory import Use

from src.tracker.models import (
    Project,
    ProjectStatus,
    WorkItem,
    WorkItemPriority,
    WorkItemStatus,
    WorkItemType,
)
from tests.factories.base import BaseFactory, utc_now


class ProjectFactory(BaseFactory):
    """Factory for generating Project test data."""

    __model__ = Project

    id = None
    key = Use(lambda: f"P{uuid4().hex[:6].upper()}")
    name = "Test Project"
    description = None
    status = ProjectStatus.ACTIVE.value
    created_by = None
    team_id = None
    start_date = None
    target_date = None
    item_sequence = 0
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class WorkItemFactory(BaseFactory):
    """Factory for generating WorkItem test data.

    `project_id` and `external_id` must be passed explicitly.
    """

    __model__ = WorkItem

    id = None
    external_id = None
    title = "Test item"
    description = None
    type = WorkItemType.STORY.value
    status = WorkItemStatus.TODO.value
    priority = WorkItemPriority.MEDIUM.value
    project_id = None
    parent_id = None
    assignee_id = None
    reporter_id = None
    estimate = None
    start_date = None
    end_date = None
    completed_at = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
