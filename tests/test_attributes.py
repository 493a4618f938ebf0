"""Tests for Attribute and Attributes."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from marcado import (
    Attribute,
    Attributes,
    InvalidArgumentError,
    InvalidStateError,
    UnsupportedTypeError,
    ensure_attributes,
)

# =========================================================================
# Attribute
# =========================================================================


class TestAttributeName:
    @pytest.mark.parametrize("name", ["id", "data-x", "xml:lang", "ng.model", "a_b", "X1"])
    def test_valid_names(self, name: str) -> None:
        assert Attribute(name).name == name

    @pytest.mark.parametrize(
        "name", ["1bad", "", "-x", "on click", 'x"', "a>b", "x\n", "\u212a", "ſ", "ıd", "İ"]
    )
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(InvalidArgumentError, match="special characters"):
            Attribute(name)

    def test_invalid_name_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Attribute("1bad")


class TestAttributeValue:
    def test_add_value_deduplicates(self) -> None:
        attr = Attribute("class").add_value("a").add_value(["a", "b"])
        assert attr.get_value() == ["a", "b"]
        assert attr.render() == 'class="a b"'

    def test_add_value_promotes_scalar(self) -> None:
        attr = Attribute("class", "a").add_value("b")
        assert attr.get_value() == ["a", "b"]

    def test_add_value_keeps_first_seen_order(self) -> None:
        attr = Attribute("class", ["b", "a"]).add_value(["c", "a", "b", "d"])
        assert attr.get_value() == ["b", "a", "c", "d"]

    def test_remove_value(self) -> None:
        attr = Attribute("class", ["a", "b", "c"]).remove_value(["a", "c"])
        assert attr.get_value() == ["b"]

    def test_remove_scalar_value(self) -> None:
        attr = Attribute("class", ["a", "b"]).remove_value("a")
        assert attr.get_value() == ["b"]

    def test_remove_value_from_scalar_fails(self) -> None:
        with pytest.raises(InvalidStateError):
            Attribute("class", "a").remove_value("a")

    def test_value_property(self) -> None:
        attr = Attribute("id")
        attr.value = "main"
        assert attr.value == "main"

    def test_getter_overrides_stored_value(self) -> None:
        attr = Attribute("id", "stored").set_callback(getter=lambda: "computed")
        assert attr.get_value() == "computed"
        assert attr.render() == 'id="computed"'

    def test_setter_transforms_value(self) -> None:
        attr = Attribute("id").set_callback(setter=lambda v: v.upper())
        attr.set_value("main")
        assert attr.get_value() == "MAIN"

    def test_set_value_normalizes_tuple(self) -> None:
        attr = Attribute("class").set_value(("a", "b")).remove_value("a")
        assert attr.get_value() == ["b"]

    def test_setter_result_tuple_is_normalized(self) -> None:
        attr = Attribute("class").set_callback(setter=lambda v: tuple(v.split()))
        attr.set_value("a b")
        assert attr.get_value() == ["a", "b"]

    def test_clearing_callbacks(self) -> None:
        attr = Attribute("id", "stored").set_callback(getter=lambda: "computed")
        attr.set_callback()
        assert attr.get_value() == "stored"

    @given(st.lists(st.lists(st.sampled_from("abcdef"), max_size=5), max_size=6))
    def test_values_never_duplicate(self, batches: list[list[str]]) -> None:
        attr = Attribute("class")
        for batch in batches:
            attr.add_value(batch)

        value = attr.get_value() or []
        assert len(value) == len(set(value))


class TestAttributeRender:
    def test_true_is_bare_name(self) -> None:
        assert Attribute("disabled", True).render() == "disabled"

    def test_false_is_omitted(self) -> None:
        assert Attribute("disabled", False).render() is None

    def test_none_is_omitted(self) -> None:
        assert Attribute("title").render() is None

    def test_style_joined_with_semicolon(self) -> None:
        attr = Attribute("style", ["color:red", "font-weight:bold"])
        assert attr.render() == 'style="color:red;font-weight:bold"'

    def test_value_is_encoded(self) -> None:
        assert Attribute("title", '"quoted" & <tagged>').render() == (
            'title="&quot;quoted&quot; &amp; &lt;tagged&gt;"'
        )

    def test_non_string_scalar(self) -> None:
        assert Attribute("tabindex", 3).render() == 'tabindex="3"'

    def test_empty_list_renders_empty_value(self) -> None:
        assert Attribute("class", []).render() == 'class=""'


# =========================================================================
# Attributes
# =========================================================================


class TestAttributes:
    def test_get_creates_missing(self) -> None:
        attrs = Attributes()
        attr = attrs.get("id")

        assert attrs.has("id")
        assert attrs.get("id") is attr
        assert attr.get_value() is None

    def test_set_replaces(self) -> None:
        attrs = Attributes({"class": "a"}).set("class", "b")
        assert attrs.render() == 'class="b"'

    def test_add_merges(self) -> None:
        attrs = Attributes({"class": "a"}).add("class", "b")
        assert attrs.render() == 'class="a b"'

    def test_add_none_is_noop(self) -> None:
        attrs = Attributes({"id": "x"}).add(None)
        assert len(attrs) == 1

    def test_add_mapping(self) -> None:
        attrs = Attributes().add({"id": "main", "hidden": True})
        assert attrs.render() == 'id="main" hidden'

    def test_add_attributes_collection(self) -> None:
        attrs = Attributes({"class": "a"}).add(Attributes({"class": "b", "id": "x"}))
        assert attrs.render() == 'class="a b" id="x"'

    def test_add_attribute_instance(self) -> None:
        new = Attribute("title", "t")
        attrs = Attributes().add(new)
        assert attrs.get("title") is new

        attrs.add(Attribute("title", "u"))
        assert attrs.get("title").get_value() == ["t", "u"]

    def test_remove_attribute(self) -> None:
        attrs = Attributes({"id": "x", "class": "a"})
        removed = attrs.remove("id")

        assert removed is not None and removed.name == "id"
        assert "id" not in attrs
        assert attrs.render() == 'class="a"'

    def test_remove_missing_returns_none(self) -> None:
        assert Attributes().remove("id") is None

    def test_remove_value_keeps_attribute(self) -> None:
        attrs = Attributes({"class": ["a", "b"]})
        attrs.remove("class", "a")

        assert "class" in attrs
        assert attrs.render() == 'class="b"'

    def test_render_skips_absent_values(self) -> None:
        attrs = Attributes({"a": None, "b": False, "c": "x", "d": True})
        assert attrs.render() == 'c="x" d'

    def test_render_empty(self) -> None:
        assert Attributes().render() == ""

    def test_prefix(self) -> None:
        attrs = Attributes({"foo": "1", "bar": "2"}).set_prefix("data-")
        assert attrs.prefix == "data-"
        assert attrs.render() == 'data-foo="1" data-bar="2"'

    def test_set_attributes_clears(self) -> None:
        attrs = Attributes({"id": "x"}).set_attributes({"class": "a"})
        assert [a.name for a in attrs] == ["class"]

    def test_set_callback(self) -> None:
        attrs = Attributes().set_callback("id", getter=lambda: "dynamic")
        assert attrs.render() == 'id="dynamic"'

    def test_iteration_preserves_insertion_order(self) -> None:
        attrs = Attributes({"b": "1", "a": "2", "c": "3"})
        assert [a.name for a in attrs] == ["b", "a", "c"]


class TestEnsureAttributes:
    def test_passes_instance_through(self) -> None:
        attrs = Attributes()
        assert ensure_attributes(attrs) is attrs

    def test_mapping(self) -> None:
        assert ensure_attributes({"id": "x"}).render() == 'id="x"'

    def test_pairs(self) -> None:
        attrs = ensure_attributes([("class", "a"), ("class", "b")])
        assert attrs.render() == 'class="a b"'

    def test_none(self) -> None:
        assert len(ensure_attributes(None)) == 0

    def test_unsupported_type_names_type(self) -> None:
        with pytest.raises(UnsupportedTypeError, match="Got int instead"):
            ensure_attributes(42)
