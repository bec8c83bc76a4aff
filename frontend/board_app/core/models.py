# frontend/board_app/core/models.py
# SPDX-License-Identifier: Apache-2.0
"""
Board entities as the client sees them.

All records are frozen dataclasses: nothing on the client edits a thread or
post once it has been fetched. Each record has a ``from_payload`` constructor
that reads the server's JSON field names and raises ``ValueError`` when a
required field is missing or has the wrong type; the remote client turns that
into a ``MalformedResponse``.

Wire names differ from attribute names (``random_user_id`` →
``author_identity``, ``post_count`` → ``reply_count``); the mapping lives only
here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def _field(raw: Mapping[str, Any], name: str) -> Any:
    if not isinstance(raw, Mapping):
        raise ValueError(f"expected an object, got {type(raw).__name__}")
    if raw.get(name) is None:
        raise ValueError(f"missing field {name!r}")
    return raw[name]


def _int(raw: Mapping[str, Any], name: str) -> int:
    value = _field(raw, name)
    if isinstance(value, bool):
        raise ValueError(f"field {name!r} is not an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"field {name!r} is not an integer: {value!r}") from e


def _str(raw: Mapping[str, Any], name: str) -> str:
    value = _field(raw, name)
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} is not a string")
    return value


def _timestamp(raw: Mapping[str, Any], name: str) -> datetime:
    """Parse a server stamp into a naive UTC datetime.

    Accepts both "2024-05-01 12:00:00" (SQL style, taken as UTC) and ISO 8601
    with or without an offset. Offset-aware values are converted to UTC and
    stripped so that every parsed stamp compares with every other.
    """
    value = _str(raw, name)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"field {name!r} is not a timestamp: {value!r}") from e
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _optional_int(raw: Mapping[str, Any], name: str) -> int | None:
    return _int(raw, name) if raw.get(name) is not None else None


@dataclass(frozen=True)
class Thread:
    id: int
    author_identity: str
    title: str
    created_at: datetime
    reply_count: int | None = None

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> Thread:
        return cls(
            id=_int(raw, "id"),
            author_identity=_str(raw, "random_user_id"),
            title=_str(raw, "title"),
            created_at=_timestamp(raw, "created_at"),
            reply_count=_optional_int(raw, "post_count"),
        )


@dataclass(frozen=True)
class Post:
    """A reply inside a thread. The thread id is not echoed by the server."""

    id: int
    author_identity: str
    content: str
    created_at: datetime

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> Post:
        return cls(
            id=_int(raw, "id"),
            author_identity=_str(raw, "random_user_id"),
            content=_str(raw, "content"),
            created_at=_timestamp(raw, "created_at"),
        )


@dataclass(frozen=True)
class ThreadHeader:
    id: int
    title: str

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> ThreadHeader:
        return cls(id=_int(raw, "id"), title=_str(raw, "title"))


@dataclass(frozen=True)
class ThreadPosts:
    thread: ThreadHeader | None
    posts: tuple[Post, ...]

    def newest_first(self) -> ThreadPosts:
        """Return a copy whose posts are ordered by `created_at` descending."""
        return ThreadPosts(thread=self.thread, posts=newest_first(self.posts))


@dataclass(frozen=True)
class IdentityGrant:
    """Identity issued by register/login."""

    identity: str
    message: str = ""
    # Numeric account id; only the register endpoint returns it.
    account_number: int | None = None

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> IdentityGrant:
        identity = _str(raw, "randomUserId")
        if not identity:
            raise ValueError("field 'randomUserId' is empty")
        return cls(
            identity=identity,
            message=str(raw.get("message") or ""),
            account_number=_optional_int(raw, "id"),
        )


@dataclass(frozen=True)
class IdentityDetails:
    """Optional account details behind an identity (auxiliary lookup)."""

    email: str | None = None
    registered_at: datetime | None = None

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> IdentityDetails:
        email = raw.get("email")
        registered = raw.get("registeredAt")
        return cls(
            email=str(email) if email else None,
            registered_at=_timestamp(raw, "registeredAt") if registered else None,
        )


@dataclass(frozen=True)
class Acknowledgement:
    """Success reply of a create call; `created_id` is set for new threads."""

    message: str = ""
    created_id: int | None = None


def newest_first(posts: Iterable[Post]) -> tuple[Post, ...]:
    """Order posts by creation time, newest first, ties broken by id."""
    return tuple(sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True))
