"""Parameter codec: renders domain members as the provider's wire strings.

The tables live in the enums themselves (``aeroweb.contracts.enums``,
``airport``, ``fir``): each member's value is its wire string. Encoding is
one-way; the provider never sends these codes back in a form we decode.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

LIST_SEPARATOR = "|"


def encode(variant: Enum) -> str:
    """Return the wire string of a parameter domain member."""
    return variant.value


def encode_list(variants: Iterable[Enum]) -> str:
    """Encode members in order and join them with the list separator."""
    return LIST_SEPARATOR.join(encode(v) for v in variants)
