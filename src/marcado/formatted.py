"""Formatted text node.

The format string is HTML-encoded, arguments go through ``ensure_html()``
and are rendered at render time, then substituted with ``str.format``:

    >>> FormattedText("{} & {}", "<a>", HtmlElement("b", content="x")).render()
    '&lt;a&gt; &amp; <b>x</b>'
"""

from __future__ import annotations

from typing import Any

from marcado.document import ensure_html
from marcado.escape import encode


class FormattedText:
    """Render a format string with HTML-safe positional arguments."""

    __slots__ = ("format", "args")

    def __init__(self, format: str, *args: Any) -> None:
        self.format = str(format)
        self.args = [ensure_html(arg) for arg in args]

    def render(self) -> str:
        return encode(self.format).format(*(arg.render() for arg in self.args))
