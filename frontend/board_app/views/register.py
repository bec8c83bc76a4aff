# frontend/board_app/views/register.py
# SPDX-License-Identifier: Apache-2.0
"""
Streamlit view: Register

Creates a new anonymous identity from an email address and password. The
server returns the identity token; the controller stores it in the session
(which persists it) and navigates home.

Field-level problems (empty email, bad shape, short password, or the server
saying the email is taken) are shown under the matching input as well as in
the banner.
"""

from __future__ import annotations

import streamlit as st

from core.constants import PASSWORD_MIN_LEN, View
from core.state import obtain_controller
from core.validation import FIELD_EMAIL, FIELD_PASSWORD
from services.controllers import RegisterController
from services.gate import GateDecision
from ui.keys import k
from ui.layout import field_error, render_feedback


def render(ctx: dict) -> None:
    st.header("Register")
    st.caption(
        "Registering issues an anonymous ID. Other users only ever see that ID, "
        "never your email address."
    )

    ctrl = obtain_controller(
        View.REGISTER,
        lambda: RegisterController(
            ctx["session"], ctx["client"], ctx["views"], ctx["navigate"]
        ),
    )
    if ctrl.activate() is not GateDecision.PROCEED:
        st.caption("Loading…")
        return

    state = ctrl.state
    if ctx["session"].identity:
        st.info("You already have an anonymous ID. Registering again replaces it.")

    with st.form(k(View.REGISTER, "form")):
        email = st.text_input("Email address", key=k(View.REGISTER, "email"))
        field_error(state, FIELD_EMAIL)
        password = st.text_input(
            f"Password ({PASSWORD_MIN_LEN}+ characters)",
            type="password",
            key=k(View.REGISTER, "password"),
        )
        field_error(state, FIELD_PASSWORD)
        submitted = st.form_submit_button(
            "Register as a new anonymous user", disabled=state.loading
        )

    if submitted:
        with st.spinner("Registering…"):
            ctrl.register(email, password)
        st.rerun()

    render_feedback(state)

    st.markdown("Already have an account?")
    if st.button("Log in", key=k(View.REGISTER, "to_login")):
        ctx["navigate"](View.LOGIN)
