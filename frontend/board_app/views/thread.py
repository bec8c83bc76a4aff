# frontend/board_app/views/thread.py
# SPDX-License-Identifier: Apache-2.0
"""
Streamlit view: Thread

Shows one thread's replies (newest first) and a reply form. The thread id
comes from `st.session_state["THREAD_ID"]`, set when a thread is opened from
the home view. An invalid id is reported without fetching anything.
"""

from __future__ import annotations

import streamlit as st

from core.constants import CONTENT_MAX_LEN, View
from core.state import obtain_controller
from core.validation import FIELD_CONTENT
from services.controllers import ThreadController
from services.gate import GateDecision
from ui.components import plain, post_list
from ui.keys import k
from ui.layout import field_error, render_feedback


def render(ctx: dict) -> None:
    thread_id = int(st.session_state.get("THREAD_ID", 0))
    ctrl = obtain_controller(
        View.THREAD,
        lambda: ThreadController(
            ctx["session"], ctx["client"], ctx["views"], ctx["navigate"], thread_id
        ),
    )

    if st.button("← Back to threads", key=k(View.THREAD, "back")):
        ctx["navigate"](View.HOME)

    decision = ctrl.activate()
    if decision is GateDecision.PENDING:
        st.caption("Loading…")
        return
    if decision is GateDecision.REDIRECT:
        return

    state = ctrl.state
    header = ctrl.header
    st.header(plain(header.title) if header else f"Thread #{ctrl.thread_id}")

    ss = st.session_state
    content_key = k(View.THREAD, "content")
    reset_key = k(View.THREAD, "reset_content")
    if ss.pop(reset_key, False):
        ss[content_key] = ""

    with st.form(k(View.THREAD, "reply")):
        content = st.text_area(
            "Reply",
            key=content_key,
            max_chars=CONTENT_MAX_LEN,
            placeholder="Write a reply…",
        )
        submitted = st.form_submit_button("Post reply", disabled=state.loading)

    if submitted:
        with st.spinner("Posting…"):
            posted = ctrl.create_post(content)
        if posted:
            ss[reset_key] = True
            st.rerun()

    field_error(state, FIELD_CONTENT)
    render_feedback(state)

    st.markdown("---")
    post_list(ctrl.posts)
