"""Short identity keys for head elements."""

from __future__ import annotations

import hashlib

# Number of hex characters kept from the digest.
HID_LENGTH = 8


def hid(value: str | None) -> str | None:
    """Return a short, stable identity key derived from ``value``.

    The key is the start of the MD5 hex digest of the UTF-8 encoded value,
    so rendering the same logical element twice yields the same key.

    Args:
        value: Semantic key such as ``"og:title"`` or ``"og:image:001"``.

    Returns:
        Eight lowercase hex characters, or ``None`` when ``value`` is
        ``None``.
    """

    if value is None:
        return None
    digest = hashlib.md5(value.encode("utf-8")).hexdigest()
    return digest[:HID_LENGTH]
