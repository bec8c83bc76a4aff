# frontend/board_app/core/state.py
# SPDX-License-Identifier: Apache-2.0
"""
Session-scoped UI state helpers for the board client.

This module centralizes the keys we expect to exist in `st.session_state`
and the few operations that touch them:

- `ensure_defaults()`      seed navigation keys, once per browser session.
- `get_session()`          the per-browser `IdentitySessionManager`.
- `navigate(view)`         switch views (starts a new activation and reruns).
- `reactivate()`           re-run the current view's gate (after logout).
- `obtain_controller(...)` reuse the current view's controller across reruns.

Why controllers are held here
-----------------------------
Streamlit reruns the whole script on every widget interaction. If a page
built a new controller on each rerun it would refetch on every keystroke.
Instead a controller lives for one *activation*: it is created when the user
navigates to a view and reused until the next navigation bumps
`NAV_GENERATION`. Mount fetches therefore run once per navigation and
mutations trigger the only other fetches.

Design notes
------------
- `DEFAULTS` holds primitives only; objects (session manager, view states,
  controller) are created lazily by the helpers below.
- Initialization is **idempotent**: existing values are preserved.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final, TypeVar

import streamlit as st

from core.clients import get_identity_store
from core.constants import View
from core.session import IdentitySessionManager
from services.gate import ViewController, ViewState

C = TypeVar("C", bound=ViewController)

# Canonical set of session keys and their initial values.
DEFAULTS: Final[Mapping[str, object]] = {
    # View currently shown (a `View` value).
    "VIEW": View.HOME.value,
    # Thread shown by the thread view; 0 means "none selected".
    "THREAD_ID": 0,
    # Incremented on every navigation; one activation per generation.
    "NAV_GENERATION": 0,
}

_SESSION_KEY = "IDENTITY_SESSION"
_VIEW_STATES_KEY = "VIEW_STATES"
_CONTROLLER_KEY = "CONTROLLER"

__all__ = [
    "DEFAULTS",
    "current_view",
    "ensure_defaults",
    "get_session",
    "navigate",
    "obtain_controller",
    "reactivate",
    "view_states",
]


def ensure_defaults() -> None:
    """Ensure all expected session keys exist with sane defaults.

    Safe to call on every rerun; values written by widgets or navigation are
    kept.
    """
    for key, default_value in DEFAULTS.items():
        st.session_state.setdefault(key, default_value)
    st.session_state.setdefault(_VIEW_STATES_KEY, {})


def get_session() -> IdentitySessionManager:
    """Return this browser session's identity manager, creating it once.

    Creation performs the single identity-store read; afterwards the manager
    is resolved for the life of the Streamlit session.
    """
    ss = st.session_state
    if _SESSION_KEY not in ss:
        ss[_SESSION_KEY] = IdentitySessionManager.start(get_identity_store())
    return ss[_SESSION_KEY]


def view_states() -> dict[str, ViewState]:
    """Shared view key → current `ViewState` mapping used for staleness checks."""
    return st.session_state.setdefault(_VIEW_STATES_KEY, {})


def current_view() -> View:
    try:
        return View(st.session_state.get("VIEW", View.HOME.value))
    except ValueError:
        return View.HOME


def navigate(view: View, *, thread_id: int | None = None) -> None:
    """Switch to `view` and rerun the script.

    `st.rerun()` raises Streamlit's internal rerun exception, so nothing
    after a call to this function executes in the current run.
    """
    ss = st.session_state
    ss["VIEW"] = view.value
    if thread_id is not None:
        ss["THREAD_ID"] = int(thread_id)
    ss["NAV_GENERATION"] = ss.get("NAV_GENERATION", 0) + 1
    st.rerun()


def reactivate() -> None:
    """Start a fresh activation of the current view (gate runs again)."""
    navigate(current_view())


def obtain_controller(view: View, factory: Callable[[], C]) -> C:
    """Return the controller for this activation of `view`.

    A new controller is built (and the previous one deactivated) when the
    navigation generation changed or a different view is held.
    """
    ss = st.session_state
    generation = ss.get("NAV_GENERATION", 0)
    held = ss.get(_CONTROLLER_KEY)
    if held is not None:
        held_generation, controller = held
        if held_generation == generation and controller.view is view:
            return controller
        controller.deactivate()

    controller = factory()
    ss[_CONTROLLER_KEY] = (generation, controller)
    return controller
