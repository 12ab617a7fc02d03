"""Tests for attribute lists."""

from headmeta.models import AttributeList, HtmlAttributeList


def test_attribute_list_keeps_insertion_order() -> None:
    """Attributes iterate in the order they were added."""

    attributes = AttributeList({"data-b": "2"})
    attributes["class"] = "page"
    attributes["data-a"] = "1"
    attributes["data-b"] = "3"

    assert list(attributes.items()) == [
        ("data-b", "3"),
        ("class", "page"),
        ("data-a", "1"),
    ]
    assert len(attributes) == 3


def test_attribute_list_delete() -> None:
    """Attributes can be removed."""

    attributes = AttributeList({"class": "page"})
    del attributes["class"]
    assert not attributes
    assert repr(attributes) == "AttributeList({})"


def test_html_attribute_list_language() -> None:
    """``language`` reads and writes the ``lang`` attribute."""

    attributes = HtmlAttributeList()
    assert attributes.language is None

    attributes["dir"] = "ltr"
    attributes.language = "da-DK"
    assert attributes["lang"] == "da-DK"
    assert list(attributes) == ["dir", "lang"]

    attributes["lang"] = "en"
    assert attributes.language == "en"

    attributes.language = None
    assert "lang" not in attributes
