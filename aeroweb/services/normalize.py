"""Sentinel normalization of provider values.

The provider spells "no data" in several ways and emits links as bare
paths. Two rules exist, and each mapped field picks exactly one of them:

- text rule: ``""``, ``NIL`` and ``NODATA`` become ``None``.
- link rule: ``""`` and ``NIL`` become ``None``; anything else is a path
  on the provider host and is made absolute.

Both rules accept their own output unchanged.
"""

from __future__ import annotations

import httpx

from aeroweb.config import HOST
from aeroweb.errors import DeserializeError

TEXT_SENTINELS = frozenset({"", "NIL", "NODATA"})
LINK_SENTINELS = frozenset({"", "NIL"})


def normalize_text(value: str | None) -> str | None:
    """Collapse the text sentinels to ``None``."""
    if value is None or value in TEXT_SENTINELS:
        return None
    return value


def normalize_link(value: str | None, host: str = HOST) -> str | None:
    """Collapse the link sentinels to ``None`` and rehost a relative path.

    Raises:
        DeserializeError: the value is neither a sentinel, an absolute link
            on ``host``, nor a path that forms a valid URL on ``host``.
    """
    if value is None or value in LINK_SENTINELS:
        return None
    if value.startswith(f"{host}/"):
        return value
    if not value.startswith("/"):
        raise DeserializeError(f"Link {value!r} is not a path on {host}")

    link = f"{host}{value}"
    try:
        httpx.URL(link)
    except httpx.InvalidURL as exc:
        raise DeserializeError(f"Link {link!r} is not a valid URL: {exc}") from exc
    return link
