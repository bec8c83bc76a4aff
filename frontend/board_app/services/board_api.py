# frontend/board_app/services/board_api.py
# SPDX-License-Identifier: Apache-2.0
"""
Remote board API client.

This module wraps the board's JSON-over-HTTP endpoints:
  • register / login                 → IdentityGrant
  • list threads / create thread     → list[Thread] / Acknowledgement
  • list thread posts / create post  → ThreadPosts / Acknowledgement
  • identity details (auxiliary)     → IdentityDetails

Design principles
-----------------
- Stateless. The client holds a base URL, a timeout and a `requests.Session`
  (connection pooling only: no cookies are relied upon, no caching). Every
  call goes to the network.
- No exceptions for expected failures. Every method returns a
  `RemoteResult`; transport, parse and application failures are classified
  into `ErrorKind` values (see core/errors.py).
- No retries. Re-issuing is the caller's decision.
- No reordering. Lists come back in server order; callers sort if needed.
- The identity token travels as a JSON field or query parameter, never as a
  header or cookie.

Logging
-------
Transport and malformed-response failures are logged with the HTTP status
and raw body for operators. Request bodies are never logged (they may carry
passwords).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import requests

from core.constants import (
    ENDPOINT_CREATE_POST,
    ENDPOINT_CREATE_THREAD,
    ENDPOINT_IDENTITY_DETAILS,
    ENDPOINT_LIST_THREAD_POSTS,
    ENDPOINT_LIST_THREADS,
    ENDPOINT_LOGIN,
    ENDPOINT_REGISTER,
    STATUS_SUCCESS,
    Operation,
)
from core.errors import ErrorKind, RemoteError, RemoteResult
from core.models import (
    Acknowledgement,
    IdentityDetails,
    IdentityGrant,
    Post,
    Thread,
    ThreadHeader,
    ThreadPosts,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# =============================================================================
# Response parsers (body → payload). Raise ValueError on shape mismatch.
# =============================================================================


def _list_field(body: Mapping[str, Any], name: str) -> list[Any]:
    items = body.get(name)
    if not isinstance(items, list):
        raise ValueError(f"field {name!r} is not a list")
    return items


def _parse_threads(body: Mapping[str, Any]) -> list[Thread]:
    return [Thread.from_payload(item) for item in _list_field(body, "threads")]


def _parse_thread_posts(body: Mapping[str, Any]) -> ThreadPosts:
    header = body.get("thread")
    return ThreadPosts(
        thread=ThreadHeader.from_payload(header) if header is not None else None,
        posts=tuple(Post.from_payload(item) for item in _list_field(body, "posts")),
    )


def _parse_acknowledgement(body: Mapping[str, Any]) -> Acknowledgement:
    created = body.get("threadId")
    try:
        created_id = int(created) if created is not None else None
    except (TypeError, ValueError) as e:
        raise ValueError(f"field 'threadId' is not an integer: {created!r}") from e
    return Acknowledgement(message=str(body.get("message") or ""), created_id=created_id)


# =============================================================================
# Client
# =============================================================================


class BoardClient:
    """Typed request/response cycles against the board API.

    Args:
        base_url: API root such as "https://example.org/api". `None` (or
            blank) leaves the client unconfigured: every call then returns a
            `ConfigurationMissing` failure without touching the network.
        timeout: Transport timeout in seconds for each request.
        session: Optional `requests.Session` (tests pass a fake).
    """

    def __init__(
        self,
        base_url: str | None,
        *,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/") or None
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()

    @property
    def configured(self) -> bool:
        return self._base_url is not None

    # ------------------------------------------------------------------ ops --

    def register(self, email: str, password: str) -> RemoteResult[IdentityGrant]:
        return self._call(
            Operation.REGISTER,
            "POST",
            ENDPOINT_REGISTER,
            IdentityGrant.from_payload,
            payload={"email": email, "password": password},
        )

    def login(self, email: str, password: str) -> RemoteResult[IdentityGrant]:
        return self._call(
            Operation.LOGIN,
            "POST",
            ENDPOINT_LOGIN,
            IdentityGrant.from_payload,
            payload={"email": email, "password": password},
        )

    def list_threads(self) -> RemoteResult[list[Thread]]:
        return self._call(
            Operation.LIST_THREADS, "GET", ENDPOINT_LIST_THREADS, _parse_threads
        )

    def create_thread(self, identity: str, title: str) -> RemoteResult[Acknowledgement]:
        return self._call(
            Operation.CREATE_THREAD,
            "POST",
            ENDPOINT_CREATE_THREAD,
            _parse_acknowledgement,
            payload={"randomUserId": identity, "title": title},
        )

    def list_thread_posts(self, thread_id: int) -> RemoteResult[ThreadPosts]:
        return self._call(
            Operation.LIST_THREAD_POSTS,
            "GET",
            ENDPOINT_LIST_THREAD_POSTS,
            _parse_thread_posts,
            params={"thread_id": thread_id},
        )

    def create_post(
        self, identity: str, thread_id: int, content: str
    ) -> RemoteResult[Acknowledgement]:
        return self._call(
            Operation.CREATE_POST,
            "POST",
            ENDPOINT_CREATE_POST,
            _parse_acknowledgement,
            payload={"randomUserId": identity, "threadId": thread_id, "content": content},
        )

    def lookup_identity_details(self, identity: str) -> RemoteResult[IdentityDetails]:
        """Auxiliary, best-effort lookup of the account behind an identity."""
        return self._call(
            Operation.LOOKUP_IDENTITY,
            "GET",
            ENDPOINT_IDENTITY_DETAILS,
            IdentityDetails.from_payload,
            params={"random_user_id": identity},
        )

    # ------------------------------------------------------------- plumbing --

    def _call(
        self,
        operation: Operation,
        method: str,
        endpoint: str,
        parse: Callable[[Mapping[str, Any]], T],
        *,
        params: Mapping[str, Any] | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> RemoteResult[T]:
        """Issue one request and classify the outcome."""
        if self._base_url is None:
            logger.error("%s refused: BOARD_API_URL is not configured", operation.value)
            return RemoteResult.failure(
                RemoteError(ErrorKind.CONFIGURATION_MISSING, "BOARD_API_URL is not set")
            )

        url = f"{self._base_url}/{endpoint}"
        try:
            resp = self._session.request(
                method, url, params=params, json=payload, timeout=self._timeout
            )
        except requests.RequestException as e:
            logger.warning(
                "%s %s failed in transport: %s",
                method,
                url,
                e,
                extra={"operation": operation.value},
            )
            return RemoteResult.failure(RemoteError(ErrorKind.TRANSPORT_FAILURE, str(e)))

        status = resp.status_code
        raw = resp.text
        try:
            body = resp.json()
        except ValueError:
            return self._malformed(operation, url, status, raw, "body is not JSON")
        if not isinstance(body, dict):
            return self._malformed(operation, url, status, raw, "body is not an object")

        if not resp.ok or body.get("status") != STATUS_SUCCESS:
            code = body.get("error_code")
            error = RemoteError(
                ErrorKind.APPLICATION_ERROR,
                message=str(body.get("message") or ""),
                code=str(code) if code is not None else None,
                status=status,
                raw_body=raw,
            )
            logger.info(
                "%s rejected by server: %s (HTTP %s)",
                operation.value,
                error.code,
                status,
                extra={"operation": operation.value, "error_code": error.code, "status": status},
            )
            return RemoteResult.failure(error)

        try:
            return RemoteResult.success(parse(body))
        except ValueError as e:
            return self._malformed(operation, url, status, raw, str(e))

    @staticmethod
    def _malformed(
        operation: Operation, url: str, status: int, raw: str, reason: str
    ) -> RemoteResult[Any]:
        logger.error(
            "%s: malformed response from %s (HTTP %s): %s; raw body: %r",
            operation.value,
            url,
            status,
            reason,
            raw,
            extra={"operation": operation.value, "status": status, "raw_body": raw},
        )
        return RemoteResult.failure(
            RemoteError(
                ErrorKind.MALFORMED_RESPONSE, message=reason, status=status, raw_body=raw
            )
        )
