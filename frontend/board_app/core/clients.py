# frontend/board_app/core/clients.py
# SPDX-License-Identifier: Apache-2.0
"""
Resource factories for the board client.

This module exposes two cached constructors:

- `get_board_client()`   → `services.board_api.BoardClient`
- `get_identity_store()` → `core.identity_store.IdentityStore`

Both are wrapped with `@st.cache_resource` so that:
  * A single instance is created per Streamlit process, which lets the
    client's `requests.Session` pool connections across reruns.
  * Objects are stored as resources (not pickled), which is appropriate for
    network clients and file handles.

Neither object carries per-user state. Identity lives in the per-browser
`IdentitySessionManager` (see core/state.py), which reads and writes the
shared store.

Failure behavior:
  * `get_board_client()` never fails. Without `BOARD_API_URL` it returns an
    unconfigured client whose calls report `ConfigurationMissing`.
  * `get_identity_store()` returns a null store when persistence is disabled.

Testing:
  * Controllers and the client take their collaborators as arguments; tests
    construct them directly instead of going through these factories.
"""

from __future__ import annotations

import streamlit as st

from core.config import settings
from core.identity_store import IdentityStore, open_identity_store
from services.board_api import BoardClient


@st.cache_resource(show_spinner=False)
def get_board_client() -> BoardClient:
    """Construct (once) and return the cached remote board client."""
    return BoardClient(settings.BOARD_API_URL, timeout=settings.BOARD_REQUEST_TIMEOUT)


@st.cache_resource(show_spinner=False)
def get_identity_store() -> IdentityStore:
    """Construct (once) and return the durable identity slot."""
    return open_identity_store(settings.BOARD_PROFILE_DIR)
