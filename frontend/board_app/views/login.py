# frontend/board_app/views/login.py
# SPDX-License-Identifier: Apache-2.0
"""
Streamlit view: Log in

Recovers an existing anonymous identity from email + password. Guest only:
with an identity already active the controller sends the user home.
"""

from __future__ import annotations

import streamlit as st

from core.constants import View
from core.state import obtain_controller
from core.validation import FIELD_EMAIL, FIELD_PASSWORD
from services.controllers import LoginController
from services.gate import GateDecision
from ui.keys import k
from ui.layout import field_error, render_feedback


def render(ctx: dict) -> None:
    st.header("Log in")

    ctrl = obtain_controller(
        View.LOGIN,
        lambda: LoginController(ctx["session"], ctx["client"], ctx["views"], ctx["navigate"]),
    )
    if ctrl.activate() is not GateDecision.PROCEED:
        st.caption("Loading…")
        return

    state = ctrl.state
    with st.form(k(View.LOGIN, "form")):
        email = st.text_input("Email address", key=k(View.LOGIN, "email"))
        field_error(state, FIELD_EMAIL)
        password = st.text_input("Password", type="password", key=k(View.LOGIN, "password"))
        field_error(state, FIELD_PASSWORD)
        submitted = st.form_submit_button("Log in", disabled=state.loading)

    if submitted:
        with st.spinner("Signing in…"):
            ctrl.login(email, password)
        st.rerun()

    render_feedback(state)

    st.markdown("No account yet?")
    if st.button("Register", key=k(View.LOGIN, "to_register")):
        ctx["navigate"](View.REGISTER)
