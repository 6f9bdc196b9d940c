"""Format validators shared by request schemas."""

import re
from typing import Final

PROJECT_KEY_REGEX: Final[str] = r"^[A-Z][A-Z0-9]{1,9}$"
USERNAME_REGEX: Final[str] = r"^[A-Za-z0-9_.-]{3,50}$"

# Personal webmail providers; sign-up requires a work address.
PERSONAL_EMAIL_DOMAINS: Final[frozenset[str]] = frozenset(
    {
        "gmail.com",
        "yahoo.com",
        "hotmail.com",
        "outlook.com",
        "aol.com",
        "icloud.com",
        "protonmail.com",
        "mail.com",
        "live.com",
        "msn.com",
        "me.com",
        "ymail.com",
        "gmx.com",
    }
)

_PROJECT_KEY_PATTERN: Final[re.Pattern[str]] = re.compile(PROJECT_KEY_REGEX)
_USERNAME_PATTERN: Final[re.Pattern[str]] = re.compile(USERNAME_REGEX)


def validate_project_key(key: str) -> str:
    """Validate project key format: uppercase letters and digits, 2-10 chars, letter first."""
    if not _PROJECT_KEY_PATTERN.match(key):
        raise ValueError(
            "Project key must be 2-10 uppercase letters or digits and start with a letter"
        )
    return key


def validate_username(username: str) -> str:
    if not _USERNAME_PATTERN.match(username):
        raise ValueError(
            "Username must be 3-50 characters of letters, digits, '.', '_' or '-'"
        )
    return username


def is_corporate_email(email: str) -> bool:
    """Return True if the email's domain is not a personal webmail provider."""
    _, sep, domain = email.rpartition("@")
    if not sep or not domain:
        return False
    return domain.lower() not in PERSONAL_EMAIL_DOMAINS


def validate_corporate_email(email: str) -> str:
    if not is_corporate_email(email):
        raise ValueError("Please use your corporate email address")
    return email
