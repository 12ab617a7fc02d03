"""Ordered attribute lists of the ``html``, ``head`` and ``body`` elements."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping


class AttributeList(MutableMapping[str, str]):
    """Ordered mapping of attribute names to values.

    Attributes are serialized in the order they were first added.
    """

    def __init__(self, items: Mapping[str, str] | None = None) -> None:
        self._items: dict[str, str] = {}
        if items:
            self.update(items)

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._items[key] = value

    def __delitem__(self, key: str) -> None:
        del self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class HtmlAttributeList(AttributeList):
    """Attribute list of the ``html`` element."""

    LANGUAGE_KEY = "lang"

    @property
    def language(self) -> str | None:
        """Value of the ``lang`` attribute, if set."""

        return self.get(self.LANGUAGE_KEY)

    @language.setter
    def language(self, value: str | None) -> None:
        # Clearing the language removes the attribute altogether.
        if value is None:
            self.pop(self.LANGUAGE_KEY, None)
        else:
            self[self.LANGUAGE_KEY] = value
