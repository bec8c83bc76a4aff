# frontend/board_app/core/validation.py
# SPDX-License-Identifier: Apache-2.0
"""Local form validation, run before any remote call.

Every validator returns a list of :class:`ValidationFailure`; an empty list
means the input may be sent. Text limits are counted on the trimmed value,
which is also what gets sent.
"""

from __future__ import annotations

from core.constants import (
    CONTENT_MAX_LEN,
    EMAIL_PATTERN,
    PASSWORD_MIN_LEN,
    TITLE_MAX_LEN,
)
from core.errors import ValidationFailure

FIELD_EMAIL = "email"
FIELD_PASSWORD = "password"
FIELD_TITLE = "title"
FIELD_CONTENT = "content"
FIELD_THREAD_ID = "thread_id"
FIELD_IDENTITY = "identity"


def validate_email(email: str) -> list[ValidationFailure]:
    if not email.strip():
        return [ValidationFailure(FIELD_EMAIL, "Please enter your email address.")]
    if not EMAIL_PATTERN.search(email):
        return [ValidationFailure(FIELD_EMAIL, "The email address format is invalid.")]
    return []


def validate_password(password: str, *, registering: bool) -> list[ValidationFailure]:
    if not password.strip():
        return [ValidationFailure(FIELD_PASSWORD, "Please enter your password.")]
    if registering and len(password) < PASSWORD_MIN_LEN:
        return [
            ValidationFailure(
                FIELD_PASSWORD,
                f"Passwords must be at least {PASSWORD_MIN_LEN} characters.",
            )
        ]
    return []


def validate_credentials(
    email: str, password: str, *, registering: bool
) -> list[ValidationFailure]:
    """Check both credential fields; failures for each field are collected."""
    return validate_email(email) + validate_password(password, registering=registering)


def validate_title(title: str) -> list[ValidationFailure]:
    text = title.strip()
    if not text:
        return [ValidationFailure(FIELD_TITLE, "Please enter a thread title.")]
    if len(text) > TITLE_MAX_LEN:
        return [
            ValidationFailure(
                FIELD_TITLE, f"Thread titles are limited to {TITLE_MAX_LEN} characters."
            )
        ]
    return []


def validate_content(content: str) -> list[ValidationFailure]:
    text = content.strip()
    if not text:
        return [ValidationFailure(FIELD_CONTENT, "Please enter something to post.")]
    if len(text) > CONTENT_MAX_LEN:
        return [
            ValidationFailure(
                FIELD_CONTENT, f"Posts are limited to {CONTENT_MAX_LEN} characters."
            )
        ]
    return []


def validate_thread_id(thread_id: object) -> list[ValidationFailure]:
    if isinstance(thread_id, bool) or not isinstance(thread_id, int) or thread_id <= 0:
        return [ValidationFailure(FIELD_THREAD_ID, "No valid thread was specified.")]
    return []


def require_identity(identity: str | None) -> list[ValidationFailure]:
    if not identity:
        return [
            ValidationFailure(
                FIELD_IDENTITY, "Your anonymous ID was not found. Please sign in."
            )
        ]
    return []
