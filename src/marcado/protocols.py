"""Protocols for Marcado.

Defines the one contract every node in a tree shares: it can render itself
to an HTML string. Text, DeferredText, FormattedText, HtmlDocument and
every element satisfy it, and so does any user class with a ``render()``
method returning ``str``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ValidHtml(Protocol):
    """Protocol for objects that promise to render safe HTML.

    ``ensure_html()`` passes instances through unchanged, so implementations
    are responsible for escaping whatever they emit.

    """

    def render(self) -> str:
        """Render this node to an HTML fragment."""
        ...
