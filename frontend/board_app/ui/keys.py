# frontend/board_app/ui/keys.py
# SPDX-License-Identifier: Apache-2.0
"""Namespaced Streamlit widget keys.

Every view renders forms with similar fields ("email" on both register and
login, a text area on both home and thread). Streamlit requires stable,
unique widget keys, so each key is prefixed with its view.

Usage
-----
    from ui.keys import k

    title = st.text_input("Title", key=k(View.HOME, "title"))

Keys are also used to stash one-shot flags in `st.session_state` (e.g. "clear
this input on the next run"), which is why `k` accepts the `View` enum as
well as a plain string scope.
"""

from __future__ import annotations

from core.constants import View


def k(scope: View | str, name: str) -> str:
    """Return a stable key of the form "<scope>:<name>".

    Args:
      scope: The view (or another short literal scope such as "sidebar").
      name: Identifier of the widget within that scope.
    """
    prefix = scope.value if isinstance(scope, View) else scope
    return f"{prefix}:{name}"
