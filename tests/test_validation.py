"""Local validation — tests for form checks run before any remote call.

Tests cover:
    - Title/content: empty, whitespace-only, at and over the limit (trimmed)
    - Credentials: empty, bad email shape, short password on register only
    - Thread id and identity presence
"""

import pytest

from core.errors import ErrorKind
from core.validation import (
    FIELD_CONTENT,
    FIELD_EMAIL,
    FIELD_IDENTITY,
    FIELD_PASSWORD,
    FIELD_THREAD_ID,
    FIELD_TITLE,
    require_identity,
    validate_content,
    validate_credentials,
    validate_thread_id,
    validate_title,
)


def _fields(failures):
    return [f.field for f in failures]


def test_title_at_limit_is_accepted():
    assert validate_title("x" * 100) == []


def test_title_over_limit_is_rejected():
    failures = validate_title("x" * 101)
    assert _fields(failures) == [FIELD_TITLE]
    assert failures[0].kind is ErrorKind.LOCAL_VALIDATION_FAILURE


def test_title_limit_counts_trimmed_text():
    assert validate_title("  " + "x" * 100 + "  ") == []


@pytest.mark.parametrize("title", ["", "   ", "\n\t"])
def test_blank_title_is_rejected(title):
    assert _fields(validate_title(title)) == [FIELD_TITLE]


def test_content_limits():
    assert validate_content("x" * 500) == []
    assert _fields(validate_content("x" * 501)) == [FIELD_CONTENT]
    assert _fields(validate_content("  ")) == [FIELD_CONTENT]


@pytest.mark.parametrize(
    "email, valid",
    [
        ("a@b.co", True),
        ("first.last@example.org", True),
        ("", False),
        ("   ", False),
        ("no-at-sign.com", False),
        ("a@nodot", False),
    ],
)
def test_email_shape(email, valid):
    failures = validate_credentials(email, "secret1", registering=False)
    assert (failures == []) is valid
    if not valid:
        assert _fields(failures) == [FIELD_EMAIL]


def test_short_password_rejected_only_when_registering():
    assert _fields(validate_credentials("a@b.co", "12345", registering=True)) == [FIELD_PASSWORD]
    assert validate_credentials("a@b.co", "12345", registering=False) == []
    assert validate_credentials("a@b.co", "123456", registering=True) == []


def test_both_credential_fields_reported():
    failures = validate_credentials("", "", registering=True)
    assert _fields(failures) == [FIELD_EMAIL, FIELD_PASSWORD]


@pytest.mark.parametrize("thread_id", [0, -1, None, "3", True])
def test_invalid_thread_ids(thread_id):
    assert _fields(validate_thread_id(thread_id)) == [FIELD_THREAD_ID]


def test_positive_thread_id_is_valid():
    assert validate_thread_id(3) == []


def test_identity_required():
    assert _fields(require_identity(None)) == [FIELD_IDENTITY]
    assert require_identity("U1") == []
