# frontend/board_app/services/gate.py
# SPDX-License-Identifier: Apache-2.0
"""
View gate and refresh controller (base class).

Every view is driven by one controller instance per activation. The
controller owns a :class:`ViewState` (what the page renders) and decides,
from the identity session, whether the view may load at all.

Activation
----------
1. The instance registers its ``ViewState`` as the current one for its view
   key in a shared mapping (in the app this lives in ``st.session_state``),
   superseding whichever instance was there before.
2. Session still resolving → ``PENDING``; nothing is fetched. Calling
   :meth:`ViewController.activate` again re-evaluates.
3. Identity missing on an identity-requiring view → navigate to the register
   view, ``REDIRECT``. Identity present on a guest-only view → navigate home.
4. Otherwise ``PROCEED`` and run the mount fetch, once.

Phases
------
``IDLE → LOADING → LOADED | FAILED``. Mutations re-enter ``LOADING`` from
either end state; nothing is terminal.

Staleness
---------
A result is applied only if the instance's state is still the current one
for its view key when the call returns. Results of superseded or deactivated
instances are dropped, so they can never overwrite what a newer instance of
the same view shows.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeVar

from core.constants import Operation, View
from core.errors import ErrorKind, RemoteError, RemoteResult, ValidationFailure
from core.messages import describe, field_for
from core.session import IdentitySessionManager
from services.board_api import BoardClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

#: Callback that switches the client to another view.
Navigator = Callable[[View], None]


class GateDecision(str, Enum):
    PENDING = "pending"
    REDIRECT = "redirect"
    PROCEED = "proceed"


class ViewPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class ViewState:
    """Everything a page needs to render one view instance."""

    view: View
    phase: ViewPhase = ViewPhase.IDLE
    payload: Any = None
    error: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)
    success: str | None = None

    @property
    def loading(self) -> bool:
        return self.phase is ViewPhase.LOADING


class ViewController:
    """Base controller; subclasses set `view` and the gate flags.

    Args:
        session: The identity session manager (read here, written only by the
            login/register/logout paths).
        client: Remote board client.
        views: Shared mapping of view key → current `ViewState`.
        navigate: Callback used for redirects and post-login navigation.
    """

    view: ClassVar[View]
    requires_identity: ClassVar[bool] = True
    guest_only: ClassVar[bool] = False

    def __init__(
        self,
        session: IdentitySessionManager,
        client: BoardClient,
        views: MutableMapping[str, ViewState],
        navigate: Navigator,
    ) -> None:
        self.session = session
        self.client = client
        self._views = views
        self._navigate = navigate
        self.state = ViewState(view=self.view)
        self.decision: GateDecision | None = None

    # ------------------------------------------------------------ lifecycle --

    @property
    def is_current(self) -> bool:
        return self._views.get(self.view.value) is self.state

    def activate(self) -> GateDecision:
        """Run the identity gate and, on first success, the mount fetch."""
        if self.decision in (GateDecision.PROCEED, GateDecision.REDIRECT):
            return self.decision
        if self.decision is None:
            self._views[self.view.value] = self.state

        snapshot = self.session.get_session_state()
        if snapshot.resolving:
            self.decision = GateDecision.PENDING
            return self.decision

        if self.requires_identity and snapshot.identity is None:
            return self._redirect(View.REGISTER)
        if self.guest_only and snapshot.identity is not None:
            return self._redirect(View.HOME)

        self.decision = GateDecision.PROCEED
        self.on_mount()
        return self.decision

    def deactivate(self) -> None:
        """Withdraw this instance; its outstanding results will be dropped."""
        if self.is_current:
            del self._views[self.view.value]

    def on_mount(self) -> None:
        """Initial fetch(es) for the view. Default: nothing to load."""

    def _redirect(self, target: View) -> GateDecision:
        self.decision = GateDecision.REDIRECT
        logger.debug("%s gate redirects to %s", self.view.value, target.value)
        self._navigate(target)
        return self.decision

    # -------------------------------------------------------------- helpers --

    def _clear_feedback(self) -> None:
        self.state.error = None
        self.state.field_errors = {}
        self.state.success = None

    def _reject(self, failures: list[ValidationFailure]) -> None:
        """Show local validation failures; nothing is sent."""
        self.state.field_errors = {f.field: f.message for f in failures}
        self.state.error = failures[0].message
        logger.debug(
            "%s rejected locally: %s",
            self.view.value,
            ", ".join(f.field for f in failures),
        )

    def _show_failure(self, operation: Operation, error: RemoteError) -> None:
        message = describe(operation, error)
        self.state.phase = ViewPhase.FAILED
        self.state.error = message
        field_name = field_for(operation, error)
        if field_name is not None:
            self.state.field_errors[field_name] = message

    def _remote(
        self, operation: Operation, call: Callable[[], RemoteResult[T]]
    ) -> RemoteResult[T] | None:
        """Run one remote call in the LOADING phase.

        Returns:
            The result, or None when there is nothing to apply: the client
            has no API URL (the failure is already shown), or this instance
            was superseded while the call was in flight.
        """
        if not self.is_current:
            logger.debug("%s is no longer current; %s skipped", self.view.value, operation.value)
            return None
        if not self.client.configured:
            self._show_failure(
                operation,
                RemoteError(ErrorKind.CONFIGURATION_MISSING, "BOARD_API_URL is not set"),
            )
            return None

        self.state.phase = ViewPhase.LOADING
        result = call()
        if not self.is_current:
            logger.debug(
                "dropping stale %s result for %s view",
                operation.value,
                self.view.value,
                extra={"operation": operation.value, "view": self.view.value},
            )
            return None
        return result
