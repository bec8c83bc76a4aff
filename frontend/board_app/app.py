# frontend/board_app/app.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

__doc__ = """Anonymous Board — Streamlit client.

This module is the Streamlit entrypoint. It wires up logging, the page
chrome, the sidebar (identity + navigation) and dispatches to the active
view.

Views:
  home       — Thread list and "new thread" form.
  thread     — One thread's replies and a reply form.
  register   — Obtain a new anonymous identity.
  login      — Recover an existing identity.
  user_info  — Show the active identity and its account details.

Design notes:
* We import sibling packages (core/, services/, ui/, views/) by adding this
  directory to sys.path, so `streamlit run frontend/board_app/app.py` works
  without installing the project.
* The directory is called views/ rather than pages/ because Streamlit treats
  a pages/ folder next to the entrypoint as its own multipage navigation.
* Keep this file intentionally thin. Flow logic lives in services/ and is
  tested without Streamlit.

Run:
    streamlit run frontend/board_app/app.py
"""

# ────────────────────── sys.path bootstrap for local packages ─────────────────
import pathlib
import sys

APP_DIR = pathlib.Path(__file__).resolve().parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))
# ──────────────────────────────────────────────────────────────────────────────

from collections.abc import Callable
from typing import Final

import streamlit as st

from core.config import settings
from core.constants import View
from core.observability import setup_logging
from core.state import current_view
from ui.layout import configure_page
from ui.sidebar import render_sidebar_and_status
from views import home, login, register, thread, user_info


@st.cache_resource(show_spinner=False)
def _init_logging() -> None:
    setup_logging(settings.BOARD_LOG_LEVEL, settings.BOARD_LOG_FORMAT)


_init_logging()

# ─────────────────────────────── Page chrome ──────────────────────────────────
configure_page(title="Anonymous Board")

# The sidebar returns the render context ("ctx") every view receives: the
# identity session, the API client, the shared view states and `navigate`.
ctx: dict = render_sidebar_and_status()

# ─────────────────────────────── View dispatch ────────────────────────────────
RENDERERS: Final[dict[View, Callable[[dict], None]]] = {
    View.HOME: home.render,
    View.THREAD: thread.render,
    View.REGISTER: register.render,
    View.LOGIN: login.render,
    View.USER_INFO: user_info.render,
}

RENDERERS[current_view()](ctx)
