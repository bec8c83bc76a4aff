# frontend/board_app/core/errors.py
# SPDX-License-Identifier: Apache-2.0
"""
Error taxonomy and the discriminated result returned by every remote call.

Kinds
-----
- ``ConfigurationMissing``   no API base URL; nothing was sent.
- ``TransportFailure``       the HTTP exchange did not complete.
- ``MalformedResponse``      a response arrived but was not the expected JSON
                             shape; HTTP status and raw body are kept.
- ``ApplicationError``       the server answered with a failure status; its
                             ``error_code`` and ``message`` are kept verbatim.
- ``LocalValidationFailure`` a form field was rejected before any call.

The remote client never raises for these; it returns
``RemoteResult.failure(...)``. Controllers turn a failure into a display
message through :mod:`core.messages`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    CONFIGURATION_MISSING = "ConfigurationMissing"
    TRANSPORT_FAILURE = "TransportFailure"
    MALFORMED_RESPONSE = "MalformedResponse"
    APPLICATION_ERROR = "ApplicationError"
    LOCAL_VALIDATION_FAILURE = "LocalValidationFailure"


class ErrorCode(str, Enum):
    """Server error codes the client knows how to phrase."""

    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    DB_ERROR = "DB_ERROR"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    UNKNOWN_APP_ERROR = "UNKNOWN_APP_ERROR"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def parse(cls, raw: str | None) -> ErrorCode:
        """Map a raw server code onto a member, `UNRECOGNIZED` otherwise."""
        try:
            return cls(raw)
        except ValueError:
            return cls.UNRECOGNIZED


@dataclass(frozen=True)
class RemoteError:
    """Failure detail carried by an unsuccessful :class:`RemoteResult`."""

    kind: ErrorKind
    message: str = ""
    code: str | None = None
    status: int | None = None
    raw_body: str | None = None

    @property
    def recognized_code(self) -> ErrorCode:
        return ErrorCode.parse(self.code)


@dataclass(frozen=True)
class ValidationFailure:
    """A single rejected form field (``LocalValidationFailure{field}``)."""

    field: str
    message: str

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.LOCAL_VALIDATION_FAILURE


@dataclass(frozen=True)
class RemoteResult(Generic[T]):
    """Either ``ok=True`` with a payload or ``ok=False`` with an error.

    Use the :meth:`success` and :meth:`failure` constructors; building an
    instance that is both (or neither) raises ``ValueError``.
    """

    ok: bool
    payload: T | None = None
    error: RemoteError | None = None

    def __post_init__(self) -> None:
        if self.ok and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("a failed result needs an error")

    @classmethod
    def success(cls, payload: T) -> RemoteResult[T]:
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, error: RemoteError) -> RemoteResult[T]:
        return cls(ok=False, error=error)
