"""Work-item containment rules.

Epics hold features, features hold stories, stories hold tasks and bugs.
Tasks and bugs are leaves. Any type may stand alone without a parent.
"""

from collections.abc import Mapping

from src.tracker.models.enums import WorkItemType

ALLOWED_CHILDREN: Mapping[WorkItemType, frozenset[WorkItemType]] = {
    WorkItemType.EPIC: frozenset({WorkItemType.FEATURE}),
    WorkItemType.FEATURE: frozenset({WorkItemType.STORY}),
    WorkItemType.STORY: frozenset({WorkItemType.TASK, WorkItemType.BUG}),
    WorkItemType.TASK: frozenset(),
    WorkItemType.BUG: frozenset(),
}


def validate_parent_child(parent_type: WorkItemType | str, child_type: WorkItemType | str) -> bool:
    """Return True if `child_type` may be nested directly under `parent_type`."""
    try:
        parent = WorkItemType(parent_type)
        child = WorkItemType(child_type)
    except ValueError:
        return False
    return child in ALLOWED_CHILDREN[parent]


def relationship_error_message(
    parent_type: WorkItemType | str, child_type: WorkItemType | str
) -> str:
    parent = WorkItemType(parent_type).value
    child = WorkItemType(child_type).value
    return f"{child} cannot have {parent} as parent"
