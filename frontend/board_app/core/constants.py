# frontend/board_app/core/constants.py
# SPDX-License-Identifier: Apache-2.0
"""
Board limits, wire names and view/operation identifiers.

This module centralizes:
  1) **Field limits** that the remote API enforces and that the client
     checks locally before any network call.
  2) **Endpoint paths** of the remote API, relative to `BOARD_API_URL`.
  3) **View and operation identifiers** shared by controllers, the error
     message table and the Streamlit pages.

Design notes
------------
- Limits are typed `Final[int]` to communicate immutability and to help
  static analyzers catch accidental reassignment.
- `View` and `Operation` are `str` enums so their values can be stored in
  `st.session_state` and written to logs unchanged.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

# ---------------------------------------------------------------------------
# Field limits (must match the server-side validation)
# ---------------------------------------------------------------------------

#: Maximum length of a thread title, counted after trimming.
TITLE_MAX_LEN: Final[int] = 100

#: Maximum length of a post body, counted after trimming.
CONTENT_MAX_LEN: Final[int] = 500

#: Minimum password length accepted at registration.
PASSWORD_MIN_LEN: Final[int] = 6

#: Deliberately loose "something@something.tld" shape check.
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"\S+@\S+\.\S+")

# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

#: Name of the single durable slot holding the identity token (plain text).
STORAGE_KEY: Final[str] = "randomUserId"

# ---------------------------------------------------------------------------
# Remote API endpoints (relative to BOARD_API_URL)
# ---------------------------------------------------------------------------

ENDPOINT_REGISTER: Final[str] = "register_user.php"
ENDPOINT_LOGIN: Final[str] = "login.php"
ENDPOINT_LIST_THREADS: Final[str] = "get_threads.php"
ENDPOINT_CREATE_THREAD: Final[str] = "create_thread.php"
ENDPOINT_LIST_THREAD_POSTS: Final[str] = "get_thread_posts.php"
ENDPOINT_CREATE_POST: Final[str] = "create_post_to_thread.php"
ENDPOINT_IDENTITY_DETAILS: Final[str] = "get_user_email.php"

#: Value of the response `status` field on success.
STATUS_SUCCESS: Final[str] = "success"


class View(str, Enum):
    """Views the client can navigate between."""

    HOME = "home"
    THREAD = "thread"
    REGISTER = "register"
    LOGIN = "login"
    USER_INFO = "user_info"


class Operation(str, Enum):
    """Remote operations; keys of the error message table."""

    REGISTER = "register"
    LOGIN = "login"
    LIST_THREADS = "list_threads"
    CREATE_THREAD = "create_thread"
    LIST_THREAD_POSTS = "list_thread_posts"
    CREATE_POST = "create_post"
    LOOKUP_IDENTITY = "lookup_identity_details"
