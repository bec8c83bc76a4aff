# frontend/board_app/views/home.py
# SPDX-License-Identifier: Apache-2.0
"""
Streamlit view: Threads (home)

Purpose
-------
Lists every thread and lets a signed-in user start a new one.

Flow
----
- The view's `HomeController` is reused for the whole activation (see
  core/state.py), so the thread list is fetched once on arrival, again after
  a thread is created, and when the user presses "Refresh". Widget reruns do
  not refetch.
- Without an identity the controller redirects to the register view before
  any fetch.
- The title input is cleared after a successful create by setting a one-shot
  flag and rerunning: Streamlit forbids writing a widget's key after the
  widget has been drawn in the same run.
"""

from __future__ import annotations

import streamlit as st

from core.constants import TITLE_MAX_LEN, View
from core.state import obtain_controller
from core.validation import FIELD_TITLE
from services.controllers import HomeController
from services.gate import GateDecision
from ui.components import thread_list
from ui.keys import k
from ui.layout import field_error, render_feedback


def render(ctx: dict) -> None:
    """Render the home view.

    Args:
        ctx: Render context from the sidebar (`session`, `client`, `views`,
            `navigate`).
    """
    st.header("Threads")

    ctrl = obtain_controller(
        View.HOME,
        lambda: HomeController(ctx["session"], ctx["client"], ctx["views"], ctx["navigate"]),
    )
    decision = ctrl.activate()
    if decision is GateDecision.PENDING:
        st.caption("Loading…")
        return
    if decision is GateDecision.REDIRECT:
        return

    ss = st.session_state
    state = ctrl.state
    title_key = k(View.HOME, "title")
    reset_key = k(View.HOME, "reset_title")
    if ss.pop(reset_key, False):
        ss[title_key] = ""

    # ─────────────────────────────────────────────────────────────────────
    # New thread
    # ─────────────────────────────────────────────────────────────────────
    with st.form(k(View.HOME, "new_thread")):
        title = st.text_input(
            "Thread title",
            key=title_key,
            max_chars=TITLE_MAX_LEN,
            placeholder="What do you want to talk about?",
        )
        submitted = st.form_submit_button("Create thread", disabled=state.loading)

    if submitted:
        with st.spinner("Creating thread…"):
            created = ctrl.create_thread(title)
        if created:
            ss[reset_key] = True
            st.rerun()

    field_error(state, FIELD_TITLE)
    render_feedback(state)

    st.markdown("---")

    # ─────────────────────────────────────────────────────────────────────
    # Thread list
    # ─────────────────────────────────────────────────────────────────────
    if st.button("Refresh", key=k(View.HOME, "refresh")):
        with st.spinner("Loading threads…"):
            ctrl.refresh()
        st.rerun()

    thread_list(
        ctrl.threads,
        on_open=lambda thread_id: ctx["navigate"](View.THREAD, thread_id=thread_id),
    )
