# frontend/board_app/ui/layout.py
# SPDX-License-Identifier: Apache-2.0
"""Layout helpers for the board client.

- `configure_page`: consistent browser title and centered layout, plus the
  in-app title. Must run before any other Streamlit element.
- `render_feedback`: the one place a `ViewState`'s error/success messages are
  turned into Streamlit banners, so every view reports outcomes the same way.
"""

from __future__ import annotations

import streamlit as st

from services.gate import ViewState


def configure_page(title: str) -> None:
    """Configure global Streamlit page options and render the main title.

    Args:
      title: Used for both the browser tab title and the on-page H1.

    Notes:
      - Streamlit requires `st.set_page_config` to be called before any other
        page elements are created.
    """
    st.set_page_config(page_title=title, page_icon="💬", layout="centered")
    st.title(f"💬 {title}")


def render_feedback(state: ViewState) -> None:
    """Show the view's banner messages (error first, then success)."""
    if state.error:
        st.error(state.error)
    if state.success:
        st.success(state.success)


def field_error(state: ViewState, field_name: str) -> None:
    """Render the inline message for one form field, if it has one."""
    message = state.field_errors.get(field_name)
    if message:
        st.caption(f":red[{message}]")
