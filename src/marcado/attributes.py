"""HTML attributes.

Every attribute emitted by Marcado is an ``Attribute`` instance, which
guarantees that its name is well formed and its value is escaped.
``Attributes`` is the ordered, name-keyed collection an element owns.

Value rendering rules:
    - ``None`` or ``False``: the attribute is omitted
    - ``True``: bare boolean attribute (``disabled``)
    - list: joined with ``;`` for ``style`` and a single space otherwise
    - anything else: coerced with ``str()``

Example:
    >>> attrs = Attributes({"class": "btn"})
    >>> attrs.add("class", ["btn", "primary"]).add("disabled", True).render()
    'class="btn primary" disabled'
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from marcado.errors import InvalidArgumentError, InvalidStateError, UnsupportedTypeError
from marcado.escape import encode

_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9:_.-]*")

AttributeValue = str | bool | list[Any] | None


def _normalize(value: Any) -> Any:
    return list(value) if isinstance(value, tuple) else value


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class Attribute:
    """A single HTML attribute.

    Usually created through ``Attributes`` or an element rather than directly.
    """

    __slots__ = ("_name", "_value", "_getter", "_setter")

    def __init__(self, name: str, value: AttributeValue = None) -> None:
        """Create a new attribute from the given name and value.

        Args:
            name: The name of the attribute
            value: The value of the attribute

        Raises:
            InvalidArgumentError: If the name contains special characters
        """
        name = str(name)

        if not _NAME_PATTERN.fullmatch(name):
            raise InvalidArgumentError(
                f'Can\'t create attribute "{name}". '
                "Attribute names with special characters are not allowed."
            )

        self._name = name
        self._value: AttributeValue = _normalize(value)
        self._getter: Callable[[], AttributeValue] | None = None
        self._setter: Callable[[AttributeValue], AttributeValue] | None = None

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def get_value(self) -> AttributeValue:
        if self._getter is not None:
            return self._getter()

        return self._value

    def set_value(self, value: AttributeValue) -> Attribute:
        if self._setter is not None:
            value = self._setter(value)
        self._value = _normalize(value)

        return self

    value = property(get_value, set_value)

    def add_value(self, value: Any) -> Attribute:
        """Add value(s) to the attribute, skipping ones already present.

        A scalar stored value is promoted to a one-element list first.
        """
        merged = _as_list(self._value)

        for item in _as_list(value):
            if item not in merged:
                merged.append(item)

        self._value = merged

        return self

    def remove_value(self, value: Any) -> Attribute:
        """Remove every occurrence of the given value(s).

        Raises:
            InvalidStateError: If the current value is not a list
        """
        if not isinstance(self._value, list):
            raise InvalidStateError("Can't remove value from non-list attribute value.")

        unwanted = _as_list(value)
        self._value = [item for item in self._value if item not in unwanted]

        return self

    def set_callback(
        self,
        getter: Callable[[], AttributeValue] | None = None,
        setter: Callable[[AttributeValue], AttributeValue] | None = None,
    ) -> Attribute:
        """Install (or clear) the get_value() and set_value() interceptors."""
        self._getter = getter
        self._setter = setter

        return self

    def render(self) -> str | None:
        """Render the attribute to HTML.

        Returns None if the value is None or False, so callers can skip it.
        """
        value = self.get_value()

        if value is None or value is False:
            return None

        if value is True:
            return self._name

        if isinstance(value, (list, tuple)):
            value = (";" if self._name == "style" else " ").join(str(v) for v in value)

        return f'{self._name}="{encode(str(value))}"'

    def __repr__(self) -> str:
        return f"Attribute({self._name!r}, {self.get_value()!r})"


class Attributes:
    """Ordered collection of ``Attribute`` keyed by name."""

    __slots__ = ("_attributes", "_prefix")

    def __init__(self, attributes: Mapping[str, AttributeValue] | None = None) -> None:
        """Create a new collection from the given name-value pairs."""
        self._attributes: dict[str, Attribute] = {}
        self._prefix = ""

        if attributes:
            self.add(attributes)

    def has(self, name: str) -> bool:
        return name in self._attributes

    def get(self, name: str) -> Attribute:
        """Get the attribute with the given name.

        If it does not exist yet, it is created with value None and stored.
        """
        if name not in self._attributes:
            self._attributes[name] = Attribute(name)

        return self._attributes[name]

    def set(self, name: str, value: AttributeValue = None) -> Attributes:
        """Set the attribute, replacing any existing attribute of that name."""
        self._attributes[name] = Attribute(name, value)

        return self

    def add(self, attribute: Any = None, value: AttributeValue = None) -> Attributes:
        """Add the given attribute(s).

        If an attribute with the same name already exists, the new value is
        merged into it with ``Attribute.add_value()``.

        Args:
            attribute: None, an Attributes collection, a name-value mapping,
                an Attribute, or an attribute name
            value: The value when ``attribute`` is a name
        """
        if attribute is None:
            return self

        if isinstance(attribute, Attributes):
            for attr in attribute:
                self.add(attr)

            return self

        if isinstance(attribute, Mapping):
            for name, val in attribute.items():
                self.add(name, val)

            return self

        if isinstance(attribute, Attribute):
            name = attribute.name

            if name not in self._attributes:
                self._attributes[name] = attribute
            else:
                self._attributes[name].add_value(attribute.get_value())

            return self

        if attribute not in self._attributes:
            self._attributes[attribute] = Attribute(attribute, value)
        else:
            self._attributes[attribute].add_value(value)

        return self

    def remove(self, name: str, value: Any = None) -> Attribute | None:
        """Remove the attribute, or only the given value(s) from it.

        Returns:
            The affected attribute, or None if it does not exist
        """
        if name not in self._attributes:
            return None

        attribute = self._attributes[name]

        if value is None:
            del self._attributes[name]
        else:
            attribute.remove_value(value)

        return attribute

    def set_attributes(self, attributes: Any) -> Attributes:
        self._attributes = {}

        self.add(attributes)

        return self

    def get_prefix(self) -> str:
        return self._prefix

    def set_prefix(self, prefix: str) -> Attributes:
        self._prefix = str(prefix)

        return self

    prefix = property(get_prefix, set_prefix)

    def set_callback(
        self,
        name: str,
        getter: Callable[[], AttributeValue] | None = None,
        setter: Callable[[AttributeValue], AttributeValue] | None = None,
    ) -> Attributes:
        self.get(name).set_callback(getter, setter)

        return self

    def render(self) -> str:
        """Render attributes to HTML, skipping those that render to None."""
        rendered = [html for html in (attr.render() for attr in self) if html]

        return self._prefix + f" {self._prefix}".join(rendered)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(list(self._attributes.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"Attributes({list(self._attributes.values())!r})"


def ensure_attributes(attributes: Any) -> Attributes:
    """Ensure that the given value is an ``Attributes`` instance.

    - ``Attributes``: returned unchanged
    - mapping of name-value pairs: a new collection built from it
    - list or tuple of ``(name, value)`` pairs: a new collection, merging repeats
    - ``None``: a new empty collection

    Raises:
        UnsupportedTypeError: For any other type
    """
    if isinstance(attributes, Attributes):
        return attributes

    if isinstance(attributes, Mapping):
        return Attributes(attributes)

    if isinstance(attributes, (list, tuple)):
        result = Attributes()
        for name, value in attributes:
            result.add(name, value)
        return result

    if attributes is None:
        return Attributes()

    raise UnsupportedTypeError("Attributes instance, mapping or None", attributes)
