"""Construction and normalization entry points.

These are the functions higher-level helpers build on:

    >>> from marcado.html import tag
    >>> tag("ul", {"class": "menu"}, [tag("li", content="Home"), tag("li", content="About")]).render()
    '<ul class="menu"><li>Home</li>\\n<li>About</li></ul>'
"""

from __future__ import annotations

from typing import Any

from marcado.document import ensure_html
from marcado.element import HtmlElement
from marcado.escape import encode


def tag(name: str, attributes: Any = None, content: Any = None) -> HtmlElement:
    """Create an element from the given tag, attributes and content.

    This does not render the element.

    Args:
        name: The tag for the element
        attributes: Attributes instance, name-value mapping or None
        content: Node, scalar, or (nested) list of them

    Returns:
        The created element
    """
    return HtmlElement(name, attributes, content)


__all__ = ["encode", "ensure_html", "tag"]
