# frontend/board_app/core/messages.py
# SPDX-License-Identifier: Apache-2.0
"""
User-facing text for remote failures and mutation success banners.

One lookup table, keyed by operation and then by server error code, replaces
per-view switch statements. Views never phrase errors themselves; they call
:func:`describe` (banner text) and :func:`field_for` (which form field, if
any, the failure belongs to).

Resolution order for an ``ApplicationError``
--------------------------------------------
1. ``APPLICATION_MESSAGES[operation][code]`` (``{message}`` is replaced by the
   server-supplied message).
2. The server-supplied message, verbatim.
3. ``FALLBACK_MESSAGES[operation]``.

``TransportFailure`` and ``MalformedResponse`` always get a generic
retry-suggesting text; the detail goes to the operator log, not the user.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from core.constants import Operation
from core.errors import ErrorCode, ErrorKind, RemoteError
from core.validation import FIELD_EMAIL, FIELD_PASSWORD

CONFIGURATION_MISSING: Final[str] = (
    "The board API URL is not configured. Please contact the site operator."
)
TRANSPORT_FAILURE: Final[str] = (
    "Could not reach the board server. Check your connection and try again."
)
MALFORMED_RESPONSE: Final[str] = (
    "The board server sent an unexpected response. Please try again later."
)

# Success banners when the server acknowledges without a message of its own.
THREAD_CREATED: Final[str] = "Thread created."
REPLY_POSTED: Final[str] = "Reply posted."

_DB_ERROR = "A database error occurred. Please wait a moment and try again."
_METHOD_NOT_ALLOWED = "The request was rejected as invalid."

APPLICATION_MESSAGES: Final[Mapping[Operation, Mapping[ErrorCode, str]]] = {
    Operation.REGISTER: {
        ErrorCode.MISSING_CREDENTIALS: "Please enter an email address and password.",
        ErrorCode.INVALID_EMAIL_FORMAT: "The email address format is invalid.",
        ErrorCode.PASSWORD_TOO_SHORT: "Passwords must be at least 6 characters.",
        ErrorCode.EMAIL_ALREADY_EXISTS: "This email address is already registered.",
        ErrorCode.DB_ERROR: _DB_ERROR,
        ErrorCode.METHOD_NOT_ALLOWED: _METHOD_NOT_ALLOWED,
        ErrorCode.UNKNOWN_APP_ERROR: "An unknown error occurred during registration: {message}",
    },
    Operation.LOGIN: {
        ErrorCode.MISSING_CREDENTIALS: "Please enter your email address and password.",
        ErrorCode.INVALID_CREDENTIALS: "The email address or password is incorrect.",
        ErrorCode.DB_ERROR: "A database error occurred ({message}). Please wait a moment and try again.",
        ErrorCode.METHOD_NOT_ALLOWED: _METHOD_NOT_ALLOWED,
        ErrorCode.UNKNOWN_APP_ERROR: "An unknown error occurred while signing in: {message}",
    },
    Operation.LIST_THREADS: {
        ErrorCode.DB_ERROR: _DB_ERROR,
        ErrorCode.METHOD_NOT_ALLOWED: _METHOD_NOT_ALLOWED,
    },
    Operation.CREATE_THREAD: {
        ErrorCode.DB_ERROR: _DB_ERROR,
        ErrorCode.METHOD_NOT_ALLOWED: _METHOD_NOT_ALLOWED,
    },
    Operation.LIST_THREAD_POSTS: {
        ErrorCode.DB_ERROR: _DB_ERROR,
        ErrorCode.METHOD_NOT_ALLOWED: _METHOD_NOT_ALLOWED,
    },
    Operation.CREATE_POST: {
        ErrorCode.DB_ERROR: _DB_ERROR,
        ErrorCode.METHOD_NOT_ALLOWED: _METHOD_NOT_ALLOWED,
    },
    Operation.LOOKUP_IDENTITY: {},
}

FALLBACK_MESSAGES: Final[Mapping[Operation, str]] = {
    Operation.REGISTER: "Registration failed.",
    Operation.LOGIN: "Sign-in failed.",
    Operation.LIST_THREADS: "Failed to load the thread list.",
    Operation.CREATE_THREAD: "Failed to create the thread.",
    Operation.LIST_THREAD_POSTS: "Failed to load the replies.",
    Operation.CREATE_POST: "Failed to post the reply.",
    Operation.LOOKUP_IDENTITY: "Failed to load account details.",
}

# Failures that also belong next to a specific form field.
FIELD_CODES: Final[Mapping[Operation, Mapping[ErrorCode, str]]] = {
    Operation.REGISTER: {
        ErrorCode.INVALID_EMAIL_FORMAT: FIELD_EMAIL,
        ErrorCode.EMAIL_ALREADY_EXISTS: FIELD_EMAIL,
        ErrorCode.PASSWORD_TOO_SHORT: FIELD_PASSWORD,
    },
}


def describe(operation: Operation, error: RemoteError) -> str:
    """Return the single display message for a failed operation."""
    if error.kind is ErrorKind.CONFIGURATION_MISSING:
        return CONFIGURATION_MISSING
    if error.kind is ErrorKind.TRANSPORT_FAILURE:
        return TRANSPORT_FAILURE
    if error.kind is ErrorKind.MALFORMED_RESPONSE:
        return MALFORMED_RESPONSE

    template = APPLICATION_MESSAGES.get(operation, {}).get(error.recognized_code)
    if template is not None:
        return template.format(message=error.message or "no details")
    return error.message or FALLBACK_MESSAGES[operation]


def field_for(operation: Operation, error: RemoteError) -> str | None:
    """Name of the form field an application error points at, if any."""
    if error.kind is not ErrorKind.APPLICATION_ERROR:
        return None
    return FIELD_CODES.get(operation, {}).get(error.recognized_code)
