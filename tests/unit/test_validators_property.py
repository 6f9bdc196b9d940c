"""Property-based tests for validators using hypothesis."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from src.tracker.core.security import (
    PERSONAL_EMAIL_DOMAINS,
    is_corporate_email,
    validate_project_key,
)
from src.tracker.schemas.project import ProjectCreate
from src.tracker.schemas.user import UserCreate

pytestmark = pytest.mark.unit

STRONG_PASSWORD = "vT9#qLm2!xR7wZp4"

# Pattern: ^[A-Z][A-Z0-9]{1,9}$
valid_key = st.from_regex(r"^[A-Z][A-Z0-9]{1,9}$", fullmatch=True)


@given(key=valid_key)
@settings(max_examples=100)
def test_valid_keys_accepted(key: str):
    project = ProjectCreate(key=key, name="Test Project")
    assert project.key == key


@given(key=st.from_regex(r"^[a-z][a-z0-9]{1,9}$", fullmatch=True))
def test_lowercase_keys_rejected(key: str):
    with pytest.raises(ValidationError) as exc_info:
        ProjectCreate(key=key, name="Test")
    errors = exc_info.value.errors()
    assert any(error["loc"] == ("key",) for error in errors)


@given(key=st.from_regex(r"^[0-9][A-Z0-9]{1,9}$", fullmatch=True))
def test_digit_start_rejected(key: str):
    with pytest.raises(ValueError):
        validate_project_key(key)


@given(key=st.text(min_size=11, max_size=30))
def test_long_keys_rejected(key: str):
    with pytest.raises(ValidationError):
        ProjectCreate(key=key, name="Test")


@given(
    domain=st.sampled_from(sorted(PERSONAL_EMAIL_DOMAINS)),
    local=st.from_regex(r"^[a-z]{1,10}$", fullmatch=True),
)
def test_personal_domains_are_not_corporate(domain: str, local: str):
    assert not is_corporate_email(f"{local}@{domain}")
    assert not is_corporate_email(f"{local}@{domain.upper()}")


@given(local=st.from_regex(r"^[a-z]{1,10}$", fullmatch=True))
def test_company_domain_is_corporate(local: str):
    assert is_corporate_email(f"{local}@acme.io")


def test_signup_rejects_personal_email():
    with pytest.raises(ValidationError, match="corporate email"):
        UserCreate(
            username="ada",
            email="ada@gmail.com",
            password=STRONG_PASSWORD,
            full_name="Ada Lovelace",
        )


def test_signup_rejects_weak_password():
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(
            username="ada",
            email="ada@acme.io",
            password="password123",
            full_name="Ada Lovelace",
        )
    assert any(error["loc"] == ("password",) for error in exc_info.value.errors())


def test_signup_rejects_mismatched_confirmation():
    with pytest.raises(ValidationError, match="Passwords don't match"):
        UserCreate(
            username="ada",
            email="ada@acme.io",
            password=STRONG_PASSWORD,
            confirm_password="something-else-entirely",
            full_name="Ada Lovelace",
        )
