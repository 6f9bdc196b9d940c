"""Tests for the work item containment table."""

from itertools import product

import pytest

from src.tracker.core.hierarchy import (
    ALLOWED_CHILDREN,
    relationship_error_message,
    validate_parent_child,
)
from src.tracker.models import WorkItemType

pytestmark = pytest.mark.unit

ALLOWED_PAIRS = {
    (WorkItemType.EPIC, WorkItemType.FEATURE),
    (WorkItemType.FEATURE, WorkItemType.STORY),
    (WorkItemType.STORY, WorkItemType.TASK),
    (WorkItemType.STORY, WorkItemType.BUG),
}


@pytest.mark.parametrize(("parent", "child"), list(product(WorkItemType, repeat=2)))
def test_every_pair_matches_table(parent: WorkItemType, child: WorkItemType):
    assert validate_parent_child(parent, child) is ((parent, child) in ALLOWED_PAIRS)


def test_accepts_plain_strings():
    assert validate_parent_child("EPIC", "FEATURE") is True
    assert validate_parent_child("EPIC", "STORY") is False


def test_unknown_types_are_rejected():
    assert validate_parent_child("INITIATIVE", "EPIC") is False
    assert validate_parent_child("EPIC", "epic") is False


def test_tasks_and_bugs_are_leaves():
    assert ALLOWED_CHILDREN[WorkItemType.TASK] == frozenset()
    assert ALLOWED_CHILDREN[WorkItemType.BUG] == frozenset()


def test_error_message_names_child_first():
    message = relationship_error_message(WorkItemType.EPIC, WorkItemType.STORY)
    assert message == "STORY cannot have EPIC as parent"
