# frontend/board_app/ui/sidebar.py
# SPDX-License-Identifier: Apache-2.0
"""Sidebar composition for the board client.

This module renders the left-hand sidebar shared by every view: the current
anonymous identity, navigation buttons, logout, and a configuration hint
when the API URL is missing.

Privacy
-------
- Only a shortened form of the identity is shown here; the full token is on
  the "My ID" view.
- Nothing entered in forms is shown or logged from the sidebar.

Behavior
--------
- While the identity session is resolving, a neutral "loading" line is shown
  instead of account actions.
- Logout clears the identity locally (no network call) and re-activates the
  current view so its gate can redirect.

Returns
-------
`render_sidebar_and_status()` returns the render context passed to every
view:
- `session`: the per-browser `IdentitySessionManager` (single owner of
  identity; views only read it).
- `client`: the cached `BoardClient`.
- `views`: the shared view-state mapping used for staleness checks.
- `navigate`: callable switching views (`navigate(view, thread_id=...)`).
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from core.clients import get_board_client
from core.constants import View
from core.state import ensure_defaults, get_session, navigate, reactivate, view_states
from services.controllers import logout
from ui.components import short_identity
from ui.keys import k


def _nav_button(label: str, view: View) -> None:
    if st.sidebar.button(label, key=k("sidebar", view.value), use_container_width=True):
        navigate(view)


def render_sidebar_and_status() -> dict[str, Any]:
    """Render the entire sidebar and return the context dict for views."""
    ensure_defaults()
    session = get_session()
    client = get_board_client()
    snapshot = session.get_session_state()

    st.sidebar.header("Anonymous Board")

    if snapshot.resolving:
        st.sidebar.caption("Loading…")
    elif snapshot.identity:
        st.sidebar.markdown(f"Signed in as `{short_identity(snapshot.identity)}`")
        _nav_button("Threads", View.HOME)
        _nav_button("My ID", View.USER_INFO)
        if st.sidebar.button("Log out", key=k("sidebar", "logout"), use_container_width=True):
            logout(session)
            reactivate()
    else:
        st.sidebar.markdown("Not signed in")
        _nav_button("Register", View.REGISTER)
        _nav_button("Log in", View.LOGIN)

    if not client.configured:
        st.sidebar.warning("BOARD_API_URL is not set. Add it to `.env` and restart.")

    return dict(
        session=session,
        client=client,
        views=view_states(),
        navigate=navigate,
    )
