"""Role-based access policy.

The whole policy is the POLICY table below: an (operation, resource) pair maps
to the roles allowed to perform it. Pairs missing from the table are denied.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from src.tracker.core.exceptions import ForbiddenError
from src.tracker.models.enums import UserRole, WorkItemType


class Operation(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE_MEMBERS = "manage_members"
    INVITE = "invite"


class ResourceType(str, Enum):
    TEAM = "team"
    PROJECT = "project"
    USER = "user"
    EPIC = "EPIC"
    FEATURE = "FEATURE"
    STORY = "STORY"
    TASK = "TASK"
    BUG = "BUG"

    @classmethod
    def for_work_item(cls, item_type: WorkItemType | str) -> "ResourceType":
        return cls(WorkItemType(item_type).value)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a request."""

    user_id: int
    role: UserRole


_ADMIN = frozenset({UserRole.ADMIN})
_MANAGERS = frozenset({UserRole.ADMIN, UserRole.SCRUM_MASTER})
_EVERYONE = frozenset(UserRole)

POLICY: Mapping[tuple[Operation, ResourceType], frozenset[UserRole]] = {
    (Operation.CREATE, ResourceType.TEAM): _ADMIN,
    (Operation.DELETE, ResourceType.TEAM): _ADMIN,
    (Operation.MANAGE_MEMBERS, ResourceType.TEAM): _MANAGERS,
    (Operation.CREATE, ResourceType.PROJECT): _MANAGERS,
    (Operation.UPDATE, ResourceType.PROJECT): _MANAGERS,
    (Operation.DELETE, ResourceType.PROJECT): _ADMIN,
    (Operation.INVITE, ResourceType.USER): _MANAGERS,
    (Operation.CREATE, ResourceType.EPIC): _MANAGERS,
    (Operation.UPDATE, ResourceType.EPIC): _MANAGERS,
    (Operation.DELETE, ResourceType.EPIC): _ADMIN,
    (Operation.CREATE, ResourceType.FEATURE): _MANAGERS,
    (Operation.UPDATE, ResourceType.FEATURE): _MANAGERS,
    (Operation.DELETE, ResourceType.FEATURE): _ADMIN,
    (Operation.CREATE, ResourceType.STORY): _EVERYONE,
    (Operation.UPDATE, ResourceType.STORY): _EVERYONE,
    (Operation.DELETE, ResourceType.STORY): _MANAGERS,
    (Operation.CREATE, ResourceType.TASK): _EVERYONE,
    (Operation.UPDATE, ResourceType.TASK): _EVERYONE,
    (Operation.DELETE, ResourceType.TASK): _MANAGERS,
    (Operation.CREATE, ResourceType.BUG): _EVERYONE,
    (Operation.UPDATE, ResourceType.BUG): _EVERYONE,
    (Operation.DELETE, ResourceType.BUG): _MANAGERS,
}


def is_allowed(role: UserRole | str, operation: Operation, resource: ResourceType) -> bool:
    """Evaluate the policy table. Unknown roles and unlisted pairs are denied."""
    try:
        user_role = UserRole(role)
    except ValueError:
        return False
    return user_role in POLICY.get((operation, resource), frozenset())


def authorize(principal: Principal, operation: Operation, resource: ResourceType) -> None:
    """Raise ForbiddenError unless the principal's role allows the operation."""
    if not is_allowed(principal.role, operation, resource):
        raise ForbiddenError(
            f"Role {principal.role.value} may not {operation.value} {resource.value}"
        )
