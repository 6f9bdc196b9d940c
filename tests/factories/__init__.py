"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, ProjectFactory, ...
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.user import (
    DEFAULT_TEST_PASSWORD,
    TeamFactory,
    TeamMemberFactory,
    UserFactory,
)
from tests.factories.work import ProjectFactory, WorkItemFactory

__all__ = [
    # Base
    "BaseFactory",
    "utc_now",
    # Users and teams
    "UserFactory",
    "TeamFactory",
    "TeamMemberFactory",
    "DEFAULT_TEST_PASSWORD",
    # Work
    "ProjectFactory",
    "WorkItemFactory",
]
