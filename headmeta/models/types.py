"""Common type aliases for metadata structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from .link import Link  # noqa: F401
    from .meta import Meta  # noqa: F401
    from .noscript import NoScript  # noqa: F401
    from .open_graph import OpenGraphImage  # noqa: F401
    from .script import Script  # noqa: F401
    from .twitter import (  # noqa: F401
        TwitterSummaryCard,
        TwitterSummaryLargeImageCard,
    )


JSONDict = dict[str, Any]
MetaList = list["Meta"]
LinkList = list["Link"]
ScriptList = list["Script"]
NoScriptList = list["NoScript"]
ImageList = list["OpenGraphImage"]
StringList = list[str]
TwitterCard = Union["TwitterSummaryCard", "TwitterSummaryLargeImageCard"]
