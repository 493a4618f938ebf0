"""Text leaf nodes.

``Text`` wraps a string that is known at construction time. ``DeferredText``
wraps a zero-argument callable that produces the string when the tree is
rendered, so values captured in the callable's closure are read late:

    >>> state = {"user": "alice"}
    >>> greeting = DeferredText(lambda: f"Hi {state['user']}")
    >>> state["user"] = "<bob>"
    >>> greeting.render()
    'Hi &lt;bob&gt;'

Both encode their content with ``encode()`` unless told it is already HTML.
"""

from __future__ import annotations

from collections.abc import Callable

from marcado.escape import encode, to_text


class Text:
    """A text node.

    Non-string scalars are coerced with ``str()``; bytes are decoded as UTF-8.
    """

    __slots__ = ("content", "encoded")

    def __init__(self, content: str | bytes | int | float, encoded: bool = False) -> None:
        """Create a text node.

        Args:
            content: The content to render
            encoded: Whether the content is already HTML-encoded
        """
        self.content: str = to_text(content) if isinstance(content, bytes) else str(content)
        self.encoded: bool = bool(encoded)

    def render(self) -> str:
        if self.encoded:
            return self.content

        return encode(self.content)

    def __repr__(self) -> str:
        return f"Text({self.content!r}, encoded={self.encoded})"


class DeferredText:
    """A text node whose content is produced by a callback at render time.

    The callback runs on every ``render()`` call; results are not cached.
    Results are coerced like ``Text`` content.
    """

    __slots__ = ("callback", "encoded")

    def __init__(self, callback: Callable[[], str], encoded: bool = False) -> None:
        """Create a deferred text node.

        Args:
            callback: Zero-argument callable returning the content to render
            encoded: Whether the callback's content is already HTML-encoded
        """
        self.callback = callback
        self.encoded: bool = bool(encoded)

    def render(self) -> str:
        content = self.callback()
        content = to_text(content) if isinstance(content, bytes) else str(content)

        if not self.encoded:
            return encode(content)

        return content
