"""HTML documents: ordered containers of renderable nodes.

``HtmlDocument`` keeps its children in a dense list and maintains a side
index from node identity to every position the node occupies, so the same
node instance may be added several times and removed in one call.

Lazy assembly:
    Subclasses override ``assemble()`` to build their default content. It runs
    at most once per instance, the first time content is added, removed or
    rendered, through ``ensure_assembled()``.

    >>> class Greeting(HtmlDocument):
    ...     def assemble(self) -> None:
    ...         self.add("Hello")
    >>> Greeting().add("World").render()
    'Hello\\nWorld'

Rendering is never cached: adding content after ``render()`` is legal and the
next ``render()`` reflects it.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from marcado.attributes import Attribute
from marcado.config import get_render_config
from marcado.errors import UnsupportedTypeError
from marcado.protocols import ValidHtml
from marcado.text import Text
from marcado.utils.logger import get_logger

logger = get_logger(__name__)

_SCALARS = (str, bytes, int, float)


class HtmlDocument:
    """Ordered collection of renderable nodes.

    Attributes:
        separator: String placed between rendered children. None defers to
            ``RenderConfig.separator`` (a newline unless configured).
    """

    separator: str | None = None

    def __init__(self) -> None:
        self._assembled = False
        self._content: list[ValidHtml] = []
        self._content_index: dict[int, list[int]] = {}

    def add(self, content: Any) -> HtmlDocument:
        """Append content.

        A list or tuple adds each of its items in order; every other value is
        normalized with ``ensure_html()``. None is ignored.
        """
        self.ensure_assembled()

        if content is None:
            return self

        if isinstance(content, (list, tuple)):
            for item in content:
                self.add(ensure_html(item) if isinstance(item, (list, tuple)) else item)
        else:
            self._add_content_indexed(ensure_html(content))

        return self

    def prepend(self, content: Any) -> HtmlDocument:
        """Insert content at the front, preserving the order of a given list."""
        self.ensure_assembled()

        if content is None:
            return self

        if isinstance(content, (list, tuple)):
            for item in reversed(content):
                self.prepend(ensure_html(item) if isinstance(item, (list, tuple)) else item)
        else:
            html = ensure_html(content)
            self._content.insert(0, html)
            self._increment_index_keys()
            self._add_content_by_pos(html, 0)

        return self

    def remove(self, html: ValidHtml) -> HtmlDocument:
        """Remove every occurrence of the given node instance.

        Nodes are matched by identity, not equality.
        """
        self.ensure_assembled()

        positions = self._content_index.get(id(html))

        if positions:
            unwanted = set(positions)
            self._content = [c for pos, c in enumerate(self._content) if pos not in unwanted]
            logger.debug("Removed %d occurrence(s) of %r", len(unwanted), html)

        self._reindex_content()

        return self

    def set_content(self, content: Any) -> HtmlDocument:
        """Replace all content with the given content."""
        self.ensure_assembled()

        self._content = []
        self._content_index = {}

        self.add(content)

        return self

    def get_content(self) -> list[ValidHtml]:
        """Return a copy of the content list."""
        self.ensure_assembled()

        return list(self._content)

    def count(self) -> int:
        return len(self._content)

    def assemble(self) -> None:
        """Create the initial content.

        Override this method in order to provide the initial content.
        """

    def ensure_assembled(self) -> None:
        """Run ``assemble()`` unless it has already run."""
        if not self._assembled:
            self._assembled = True
            logger.debug("Assembling %s", type(self).__qualname__)
            self.assemble()

    def get_separator(self) -> str:
        if self.separator is None:
            return get_render_config().separator

        return self.separator

    def render(self) -> str:
        self.ensure_assembled()

        return self.get_separator().join(content.render() for content in self._content)

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        # A document is a node, not a sequence: empty documents are still truthy
        return True

    def __iter__(self) -> Iterator[ValidHtml]:
        return iter(self.get_content())

    def __str__(self) -> str:
        return self.render()

    def _reindex_content(self) -> None:
        self._content_index = {}

        for pos, html in enumerate(self._content):
            self._add_content_by_pos(html, pos)

    def _add_content_by_pos(self, html: ValidHtml, pos: int) -> None:
        self._content_index.setdefault(id(html), []).append(pos)

    def _add_content_indexed(self, html: ValidHtml) -> None:
        pos = len(self._content)
        self._content.append(html)
        self._add_content_by_pos(html, pos)

    def _increment_index_keys(self) -> None:
        for positions in self._content_index.values():
            positions[:] = [pos + 1 for pos in positions]


def ensure_html(content: Any) -> ValidHtml:
    """Ensure that the given content is a node that promises to render safe HTML.

    - an instance implementing ``ValidHtml``: returned unchanged (classes and
      ``Attribute`` objects are not nodes)
    - ``str``, ``bytes``, ``int``, ``float`` or ``bool``: wrapped in ``Text``
    - list or tuple: an ``HtmlDocument`` holding each item, normalized recursively

    Raises:
        UnsupportedTypeError: For any other type, including None
    """
    if isinstance(content, ValidHtml) and not isinstance(content, (type, Attribute)):
        return content

    if isinstance(content, _SCALARS):
        return Text(content)

    if isinstance(content, (list, tuple)):
        html = HtmlDocument()

        for element in content:
            html.add(ensure_html(element))

        return html

    raise UnsupportedTypeError("Instance of ValidHtml, list or scalar type", content)
