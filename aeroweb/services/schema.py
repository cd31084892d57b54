"""Declarative XML-to-record mapping.

A ``Schema`` lists, for one record type, where each field comes from in
the provider XML and which normalization rule applies to it:

- ``Leaf``: a scalar read from an attribute (``@nom``), a child element's
  text (``niveau``) or the element's own text (``.``). Several sources may
  be given when the provider uses alternative names for the same value.
- ``Group``: nested records read from child elements, either repeated
  (always a list, possibly empty) or single and optional.

Unknown attributes and elements are ignored. A required source that is
missing, a single element that appears twice, malformed XML or an
unexpected root element all raise ``DeserializeError``; nothing is
recovered partially.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from aeroweb.contracts.common import AerowebModel
from aeroweb.errors import DeserializeError
from aeroweb.services.normalize import normalize_link, normalize_text

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=AerowebModel)

OWN_TEXT = "."


class Rule(str, Enum):
    """Normalization applied to a leaf value."""
    RAW = "raw"
    TEXT = "text"
    LINK = "link"


_NORMALIZERS: dict[Rule, Callable[[str | None], str | None]] = {
    Rule.RAW: lambda value: value,
    Rule.TEXT: normalize_text,
    Rule.LINK: normalize_link,
}


@dataclass(frozen=True)
class Leaf:
    field: str
    sources: tuple[str, ...]
    rule: Rule = Rule.RAW
    required: bool = True


@dataclass(frozen=True)
class Group:
    field: str
    tag: str
    schema: Schema
    repeated: bool = True


@dataclass(frozen=True)
class Schema(Generic[M]):
    model: type[M]
    leaves: tuple[Leaf, ...] = ()
    groups: tuple[Group, ...] = ()


@dataclass(frozen=True)
class Document(Generic[M]):
    """A whole response: its root element name and the schema of the root."""

    root: str
    schema: Schema[M]


# ============ Table helpers ============

def attr(field: str, name: str, rule: Rule = Rule.RAW) -> Leaf:
    """Required attribute."""
    return Leaf(field, (f"@{name}",), rule)


def element(field: str, *names: str, rule: Rule = Rule.RAW, required: bool = True) -> Leaf:
    """Child element text, under any of ``names``."""
    return Leaf(field, names, rule, required)


def own_text(field: str, rule: Rule = Rule.RAW) -> Leaf:
    return Leaf(field, (OWN_TEXT,), rule)


def many(field: str, tag: str, schema: Schema) -> Group:
    return Group(field, tag, schema, repeated=True)


def optional(field: str, tag: str, schema: Schema) -> Group:
    return Group(field, tag, schema, repeated=False)


# ============ Mapping ============

def parse_document(xml: str, document: Document[M]) -> M:
    """Parse a raw response body into the document's record type."""
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as exc:
        raise DeserializeError(f"Malformed XML: {exc}") from exc

    tag = _local_name(root.tag)
    if tag != document.root:
        raise DeserializeError(f"Expected root element <{document.root}>, got <{tag}>")

    record = map_element(root, document.schema)
    logger.debug(
        "Mapped <%s> into %s (%s)",
        tag,
        document.schema.model.__name__,
        ", ".join(
            f"{g.field}={len(getattr(record, g.field))}"
            for g in document.schema.groups
            if g.repeated
        ),
    )
    return record


def map_element(node: ET.Element, schema: Schema[M]) -> M:
    """Map one element (and its nested groups) to a record."""
    values: dict[str, Any] = {}

    for leaf in schema.leaves:
        raw = _read_leaf(node, leaf)
        values[leaf.field] = _NORMALIZERS[leaf.rule](raw)

    for group in schema.groups:
        children = [child for child in node if _local_name(child.tag) == group.tag]
        if group.repeated:
            values[group.field] = [map_element(child, group.schema) for child in children]
        elif len(children) > 1:
            raise DeserializeError(
                f"<{_local_name(node.tag)}> has {len(children)} <{group.tag}> elements, expected at most 1"
            )
        else:
            values[group.field] = map_element(children[0], group.schema) if children else None

    try:
        return schema.model(**values)
    except ValidationError as exc:
        raise DeserializeError(f"Invalid <{_local_name(node.tag)}>: {exc}") from exc


def _read_leaf(node: ET.Element, leaf: Leaf) -> str | None:
    for source in leaf.sources:
        value = _read_source(node, source)
        if value is not None:
            return value

    if leaf.required:
        wanted = " or ".join(_describe(s) for s in leaf.sources)
        raise DeserializeError(f"<{_local_name(node.tag)}> is missing {wanted}")
    return None


def _read_source(node: ET.Element, source: str) -> str | None:
    if source == OWN_TEXT:
        return (node.text or "").strip()
    if source.startswith("@"):
        return node.get(source[1:])

    matches = [child for child in node if _local_name(child.tag) == source]
    if not matches:
        return None
    if len(matches) > 1:
        raise DeserializeError(
            f"<{_local_name(node.tag)}> has {len(matches)} <{source}> elements, expected 1"
        )
    return (matches[0].text or "").strip()


def _describe(source: str) -> str:
    if source.startswith("@"):
        return f"attribute {source[1:]!r}"
    return f"element <{source}>"


def _local_name(tag: str) -> str:
    """Strip namespace prefix from an XML tag."""
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag
