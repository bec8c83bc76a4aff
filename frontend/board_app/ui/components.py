# frontend/board_app/ui/components.py
# SPDX-License-Identifier: Apache-2.0
"""Reusable Streamlit UI components.

Currently provided:
  • plain(): escape server text for markdown rendering.
  • short_identity(): elide long identity tokens for display.
  • format_timestamp(): one display format for all dates.
  • thread_list(): the home page's thread list with "open" buttons.
  • post_list(): a thread's replies, numbered oldest = 1.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import datetime

import streamlit as st

from core.constants import View
from core.models import Post, Thread
from ui.keys import k

# How many characters to show from the start/end of an identity when eliding.
_ID_PREFIX = 6
_ID_SUFFIX = 4

# Markdown metacharacters, plus ":" for Streamlit's emoji and color directives.
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()<>#+\-.!|~$:])")


def plain(text: str) -> str:
    """Escape `text` so Streamlit's markdown renders it literally.

    Thread titles, emails and other server-supplied strings go through this
    before being embedded in `st.markdown`/`st.header`, so `[x](http://...)`
    stays text instead of becoming a link or a remote image.
    """
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def short_identity(
    identity: str | None, *, prefix: int = _ID_PREFIX, suffix: int = _ID_SUFFIX
) -> str:
    """Return a human-friendly shortened form of an identity token.

    Short tokens are returned unchanged; None/empty yields "—".
    """
    if not identity:
        return "—"
    if len(identity) <= prefix + suffix + 1:
        return identity
    return f"{identity[:prefix]}…{identity[-suffix:]}"


def format_timestamp(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else "—"


def thread_list(threads: Sequence[Thread], on_open: Callable[[int], None]) -> None:
    """Render threads in server order, each with a button that opens it.

    Args:
      threads: Threads to show.
      on_open: Called with the thread id when its button is pressed.
    """
    if not threads:
        st.info("No threads yet. Start the first one above.")
        return

    for thread in threads:
        with st.container(border=True):
            left, right = st.columns([4, 1])
            with left:
                st.markdown(f"**{plain(thread.title)}**")
                replies = (
                    f" · {thread.reply_count} replies"
                    if thread.reply_count is not None
                    else ""
                )
                st.caption(
                    f"by `{short_identity(thread.author_identity)}` · "
                    f"{format_timestamp(thread.created_at)}{replies}"
                )
            with right:
                if st.button("Open", key=k(View.HOME, f"open_{thread.id}")):
                    on_open(thread.id)


def post_list(posts: Sequence[Post]) -> None:
    """Render replies newest first, numbered so that the oldest is No.1."""
    if not posts:
        st.info("No replies yet.")
        return

    st.caption(f"{len(posts)} replies")
    for index, post in enumerate(posts):
        with st.container(border=True):
            st.caption(
                f"No.{len(posts) - index} · `{short_identity(post.author_identity)}` · "
                f"{format_timestamp(post.created_at)}"
            )
            st.text(post.content)
