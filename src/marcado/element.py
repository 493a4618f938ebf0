"""HTML elements.

An element is a document wrapped in a tag:

    >>> HtmlElement("div", {"class": "a"}, "hi").render()
    '<div class="a">hi</div>'

Void elements (``br``, ``img``, ...) render only their opening tag. Content
added to them is kept but never rendered; set
``RenderConfig.warn_on_void_content`` to have that logged.

An element with an empty tag renders its content only.

Subclasses typically set ``tag`` and ``default_attributes`` as class
attributes and override ``assemble()``:

    >>> class Alert(BaseHtmlElement):
    ...     tag = "div"
    ...     default_attributes = {"class": "alert", "role": "alert"}
    ...     def assemble(self) -> None:
    ...         self.add("Careful!")
    >>> Alert().render()
    '<div class="alert" role="alert">Careful!</div>'
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from marcado.attributes import Attributes, ensure_attributes
from marcado.config import VOID_ELEMENTS, get_render_config
from marcado.document import HtmlDocument
from marcado.stringbuilder import StringBuilder
from marcado.utils.logger import get_logger

logger = get_logger(__name__)


class BaseHtmlElement(HtmlDocument):
    """Base class for HTML elements.

    Attributes:
        tag: The tag of the element; empty renders the content only
        default_attributes: Template the attributes are created from when
            they are first accessed without having been set
    """

    tag: str = ""
    default_attributes: Attributes | Mapping[str, Any] | None = None

    def __init__(self) -> None:
        super().__init__()
        self._attributes: Attributes | None = None

    def get_attributes(self) -> Attributes:
        """Get the attributes of the element, creating them on first access."""
        if self._attributes is None:
            if self.default_attributes is not None:
                # Instances never share the class-level template
                self._attributes = ensure_attributes(copy.deepcopy(self.default_attributes))
            else:
                self._attributes = Attributes()

        return self._attributes

    def set_attributes(self, attributes: Any) -> BaseHtmlElement:
        self._attributes = ensure_attributes(attributes)

        return self

    attributes = property(get_attributes, set_attributes)

    def add_attributes(self, attributes: Any) -> BaseHtmlElement:
        """Merge the given attributes into the element's attributes."""
        self.get_attributes().add(attributes)

        return self

    def get_tag(self) -> str:
        return self.tag

    def wants_closing_tag(self) -> bool:
        """Whether content and a closing tag are rendered (False for void elements)."""
        return self.get_tag() not in get_render_config().void_elements

    def render_content(self) -> str:
        return super().render()

    def render(self) -> str:
        tag = self.get_tag()

        self.ensure_assembled()

        if not tag:
            return self.render_content()

        sb = StringBuilder()
        # rstrip because attributes may be empty
        sb.append(f"<{tag} {self.get_attributes().render()}".rstrip() + ">")

        if self.wants_closing_tag():
            sb.append(self.render_content())
            sb.append(f"</{tag}>")
        elif self.count() and get_render_config().warn_on_void_content:
            logger.warning(
                "Void element <%s> has %d content node(s) that are not rendered", tag, self.count()
            )

        return sb.build()

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} tag={self.get_tag()!r} children={self.count()}>"


class HtmlElement(BaseHtmlElement):
    """An element built from a tag, attributes and content."""

    def __init__(self, tag: str, attributes: Any = None, content: Any = None) -> None:
        """Create an element.

        Args:
            tag: The tag of the element
            attributes: Attributes instance, name-value mapping or None
            content: Node, scalar, or (nested) list of them
        """
        super().__init__()
        self.tag = tag

        if attributes is not None:
            self.set_attributes(attributes)

        if content is not None:
            self.set_content(content)


__all__ = ["VOID_ELEMENTS", "BaseHtmlElement", "HtmlElement"]
