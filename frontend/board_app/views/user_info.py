# frontend/board_app/views/user_info.py
# SPDX-License-Identifier: Apache-2.0
"""Streamlit view: My ID. Shows the full identity and, when the best-effort
lookup succeeds, the email address and registration date behind it."""

from __future__ import annotations

import streamlit as st

from core.constants import View
from core.state import obtain_controller
from services.controllers import UserInfoController
from services.gate import GateDecision
from ui.components import format_timestamp, plain
from ui.layout import render_feedback


def render(ctx: dict) -> None:
    st.header("My ID")

    ctrl = obtain_controller(
        View.USER_INFO,
        lambda: UserInfoController(
            ctx["session"], ctx["client"], ctx["views"], ctx["navigate"]
        ),
    )
    if ctrl.activate() is not GateDecision.PROCEED:
        st.caption("Loading…")
        return

    st.markdown("Your anonymous ID")
    st.code(ctx["session"].identity or "—", language=None)
    st.caption("This ID is shown next to everything you post.")

    details = ctrl.details
    if details.email:
        st.markdown(f"**Email:** {plain(details.email)}")
    if details.registered_at:
        st.markdown(f"**Registered:** {format_timestamp(details.registered_at)}")
    if not ctrl.details_available and not ctrl.state.error:
        st.caption("Account details are unavailable right now.")

    render_feedback(ctrl.state)
