"""UI helpers — tests for the pure formatting functions.

Tests cover:
    - Server text is escaped before markdown rendering (no links/images)
    - Identity shortening and timestamp display
"""

from datetime import datetime

import pytest

from ui.components import format_timestamp, plain, short_identity


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[x](http://evil)", r"\[x\]\(http\://evil\)"),
        ("![](http://tracker)", None),
        ("**bold** _it_", r"\*\*bold\*\* \_it\_"),
        (":red[alarm]", r"\:red\[alarm\]"),
    ],
)
def test_plain_escapes_markdown(text, expected):
    escaped = plain(text)
    if expected is not None:
        assert escaped == expected
    assert "](" not in escaped
    assert not escaped.startswith("!")


def test_plain_leaves_ordinary_text_alone():
    assert plain("Hello world 42") == "Hello world 42"


def test_short_identity():
    assert short_identity(None) == "—"
    assert short_identity("abc") == "abc"
    assert short_identity("0123456789abcdefghij") == "012345…ghij"


def test_format_timestamp():
    assert format_timestamp(datetime(2024, 5, 1, 10, 0, 0)) == "2024-05-01 10:00:00"
    assert format_timestamp(None) == "—"
