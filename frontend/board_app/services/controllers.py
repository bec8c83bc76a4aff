# frontend/board_app/services/controllers.py
# SPDX-License-Identifier: Apache-2.0
"""
Per-view controllers and the logout action.

| Controller          | Gate                | On mount                  | Mutations        |
|---------------------|---------------------|---------------------------|------------------|
| HomeController      | identity required   | list threads              | create_thread    |
| ThreadController    | identity required   | list posts (newest first) | create_post      |
| UserInfoController  | identity required   | identity details (best effort) | —           |
| RegisterController  | open                | —                         | register         |
| LoginController     | guest only          | —                         | login            |

Mutations follow one protocol: validate locally (no call on failure), send,
then on success re-fetch the affected list exactly once (read-after-write)
before reporting success. Register/login success stores the new identity in
the session and navigates home.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping

from core import messages
from core.constants import Operation, View
from core.models import IdentityDetails, Post, Thread, ThreadHeader
from core.session import IdentitySessionManager
from core.validation import (
    require_identity,
    validate_content,
    validate_credentials,
    validate_thread_id,
    validate_title,
)
from services.board_api import BoardClient
from services.gate import Navigator, ViewController, ViewPhase, ViewState

logger = logging.getLogger(__name__)


class HomeController(ViewController):
    view = View.HOME

    def on_mount(self) -> None:
        self.refresh()

    @property
    def threads(self) -> list[Thread]:
        return self.state.payload or []

    def refresh(self) -> bool:
        result = self._remote(Operation.LIST_THREADS, self.client.list_threads)
        if result is None:
            return False
        if not result.ok:
            self._show_failure(Operation.LIST_THREADS, result.error)
            return False
        self.state.payload = list(result.payload)
        self.state.phase = ViewPhase.LOADED
        self.state.error = None
        return True

    def create_thread(self, title: str) -> bool:
        """Create a thread, then reload the thread list.

        Returns:
            True when the server accepted the thread.
        """
        self._clear_feedback()
        identity = self.session.identity
        failures = require_identity(identity) + validate_title(title)
        if failures:
            self._reject(failures)
            return False

        result = self._remote(
            Operation.CREATE_THREAD,
            lambda: self.client.create_thread(identity, title.strip()),
        )
        if result is None:
            return False
        if not result.ok:
            self._show_failure(Operation.CREATE_THREAD, result.error)
            return False

        logger.info("thread %s created", result.payload.created_id)
        self.refresh()
        if self.is_current:
            self.state.success = result.payload.message or messages.THREAD_CREATED
        return True


class ThreadController(ViewController):
    view = View.THREAD

    def __init__(
        self,
        session: IdentitySessionManager,
        client: BoardClient,
        views: MutableMapping[str, ViewState],
        navigate: Navigator,
        thread_id: int,
    ) -> None:
        super().__init__(session, client, views, navigate)
        self.thread_id = thread_id

    def on_mount(self) -> None:
        failures = validate_thread_id(self.thread_id)
        if failures:
            self._reject(failures)
            self.state.phase = ViewPhase.FAILED
            return
        self.refresh()

    @property
    def posts(self) -> tuple[Post, ...]:
        return self.state.payload.posts if self.state.payload else ()

    @property
    def header(self) -> ThreadHeader | None:
        return self.state.payload.thread if self.state.payload else None

    def refresh(self) -> bool:
        result = self._remote(
            Operation.LIST_THREAD_POSTS,
            lambda: self.client.list_thread_posts(self.thread_id),
        )
        if result is None:
            return False
        if not result.ok:
            self._show_failure(Operation.LIST_THREAD_POSTS, result.error)
            return False
        # Server order is not guaranteed; the page always shows newest first.
        self.state.payload = result.payload.newest_first()
        self.state.phase = ViewPhase.LOADED
        self.state.error = None
        return True

    def create_post(self, content: str) -> bool:
        """Reply to the thread, then reload its posts once."""
        self._clear_feedback()
        identity = self.session.identity
        failures = (
            validate_thread_id(self.thread_id)
            + require_identity(identity)
            + validate_content(content)
        )
        if failures:
            self._reject(failures)
            return False

        result = self._remote(
            Operation.CREATE_POST,
            lambda: self.client.create_post(identity, self.thread_id, content.strip()),
        )
        if result is None:
            return False
        if not result.ok:
            self._show_failure(Operation.CREATE_POST, result.error)
            return False

        self.refresh()
        if self.is_current:
            self.state.success = result.payload.message or messages.REPLY_POSTED
        return True


class UserInfoController(ViewController):
    """Shows the active identity plus optional account details.

    The details lookup is best effort: when it fails the view still renders
    the identity, without email or registration date, and without an error
    banner. The failure is logged for operators.
    """

    view = View.USER_INFO

    def on_mount(self) -> None:
        identity = self.session.identity
        result = self._remote(
            Operation.LOOKUP_IDENTITY,
            lambda: self.client.lookup_identity_details(identity),
        )
        if result is None:
            return
        if result.ok:
            self.state.payload = result.payload
        else:
            logger.warning(
                "identity details unavailable: %s %s",
                result.error.kind.value,
                result.error.code or result.error.message,
                extra={"operation": Operation.LOOKUP_IDENTITY.value},
            )
            self.state.payload = IdentityDetails()
        self.state.phase = ViewPhase.LOADED

    @property
    def details(self) -> IdentityDetails:
        return self.state.payload or IdentityDetails()

    @property
    def details_available(self) -> bool:
        d = self.details
        return d.email is not None or d.registered_at is not None


class _CredentialsController(ViewController):
    """Shared register/login flow."""

    requires_identity = False
    operation: Operation
    registering: bool

    def _submit(self, email: str, password: str) -> bool:
        self._clear_feedback()
        failures = validate_credentials(email, password, registering=self.registering)
        if failures:
            self._reject(failures)
            return False

        send = self.client.register if self.registering else self.client.login
        result = self._remote(self.operation, lambda: send(email.strip(), password))
        if result is None:
            return False
        if not result.ok:
            self._show_failure(self.operation, result.error)
            return False

        self.session.set_identity(result.payload.identity)
        self.state.phase = ViewPhase.LOADED
        self.state.success = result.payload.message or None
        self._navigate(View.HOME)
        return True


class RegisterController(_CredentialsController):
    view = View.REGISTER
    operation = Operation.REGISTER
    registering = True

    def register(self, email: str, password: str) -> bool:
        return self._submit(email, password)


class LoginController(_CredentialsController):
    view = View.LOGIN
    operation = Operation.LOGIN
    registering = False
    guest_only = True

    def login(self, email: str, password: str) -> bool:
        return self._submit(email, password)


def logout(session: IdentitySessionManager) -> None:
    """Forget the identity locally. No network call is made; identity-gated
    views redirect on their next activation."""
    session.set_identity(None)
