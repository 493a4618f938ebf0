"""
Marcado — HTML Tree Builder for Python

Build HTML element trees in memory and serialize them to safe HTML on
demand, without a templating engine. Text and attribute values are escaped
automatically; attribute values merge instead of clobbering each other.
Zero runtime dependencies.

Quick Start:
    >>> from marcado import tag
    >>> div = tag("div", {"class": "card"}, "Hello <World>")
    >>> print(div.add_attributes({"class": "wide"}).render())
    <div class="card wide">Hello &lt;World&gt;</div>

Lazy content:
    >>> from marcado import BaseHtmlElement
    >>> class Nav(BaseHtmlElement):
    ...     tag = "nav"
    ...     def assemble(self) -> None:
    ...         self.add(tag("a", {"href": "/"}, "Home"))

Installation:
    pip install marcado
"""

from marcado.attributes import Attribute, Attributes, ensure_attributes
from marcado.config import (
    VOID_ELEMENTS,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from marcado.document import HtmlDocument
from marcado.element import BaseHtmlElement, HtmlElement
from marcado.errors import (
    InvalidArgumentError,
    InvalidStateError,
    MarcadoError,
    UnsupportedTypeError,
)
from marcado.formatted import FormattedText
from marcado.html import encode, ensure_html, tag
from marcado.protocols import ValidHtml
from marcado.text import DeferredText, Text

__version__ = "0.1.0"

__all__ = [
    # Nodes
    "BaseHtmlElement",
    "DeferredText",
    "FormattedText",
    "HtmlDocument",
    "HtmlElement",
    "Text",
    "ValidHtml",
    # Attributes
    "Attribute",
    "Attributes",
    "ensure_attributes",
    # Entry points
    "encode",
    "ensure_html",
    "tag",
    # Configuration
    "VOID_ELEMENTS",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "InvalidArgumentError",
    "InvalidStateError",
    "MarcadoError",
    "UnsupportedTypeError",
    # Version
    "__version__",
]
