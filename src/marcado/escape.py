"""HTML entity encoding.

``encode()`` is the single escaping primitive used by text nodes and
attribute values. It mirrors the common "double-quoted attributes" convention:

- ``&`` becomes ``&amp;``
- ``<`` becomes ``&lt;``
- ``>`` becomes ``&gt;``
- ``"`` becomes ``&quot;``
- ``'`` is left alone

Already existing entities are encoded again (``&amp;`` becomes ``&amp;amp;``).
Invalid UTF-8 in ``bytes`` input and lone surrogates in ``str`` input are
replaced with U+FFFD.

Example:
    >>> from marcado.escape import encode
    >>> encode('<a href="x">Tom & Jerry\\'s</a>')
    "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry's&lt;/a&gt;"
"""

from __future__ import annotations

import html
import re

REPLACEMENT_CHARACTER = "\ufffd"

_SURROGATES = re.compile("[\ud800-\udfff]")


def to_text(content: str | bytes) -> str:
    """Decode bytes as UTF-8 and scrub lone surrogates.

    Args:
        content: Raw text or UTF-8 encoded bytes

    Returns:
        A string that is safe to encode as UTF-8
    """
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return _SURROGATES.sub(REPLACEMENT_CHARACTER, content)


def encode(content: str | bytes) -> str:
    """Convert special characters to HTML entities.

    Args:
        content: Text to encode

    Returns:
        HTML-safe text
    """
    if not content:
        return ""

    return html.escape(to_text(content), quote=False).replace('"', "&quot;")


__all__ = ["REPLACEMENT_CHARACTER", "encode", "to_text"]
