"""Security utilities - crypto and validators.

Re-exports all security-related functions for convenience.
"""

from src.tracker.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    generate_temporary_password,
    hash_password,
    verify_password,
)
from src.tracker.core.security.validators import (
    PERSONAL_EMAIL_DOMAINS,
    is_corporate_email,
    validate_corporate_email,
    validate_project_key,
    validate_username,
)

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "create_access_token",
    "decode_token",
    "generate_temporary_password",
    "hash_password",
    "verify_password",
    # Validators
    "PERSONAL_EMAIL_DOMAINS",
    "is_corporate_email",
    "validate_corporate_email",
    "validate_project_key",
    "validate_username",
]
