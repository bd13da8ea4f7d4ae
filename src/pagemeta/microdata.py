# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""WHATWG microdata extraction (microdata-to-JSON shape).

One top-level ``[itemscope]`` element in, one MicrodataItem out. Property
elements are gathered breadth-first from the item's children plus every
``itemref`` target, without descending into nested scopes, then ordered by
document position. Nested items recurse with the ancestor set extended
(frozenset copy per level); an item already on the ancestor path is a cycle
and yields no value.
"""

from __future__ import annotations

import functools
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Union

from pagemeta.dom import Document, Element
from pagemeta.entities import decode_entities

logger = logging.getLogger(__name__)

PropertyValue = Union[str, "MicrodataItem"]

_URL_ATTR_BY_TAG: dict[str, str] = {
    "a": "href",
    "area": "href",
    "link": "href",
    "audio": "src",
    "embed": "src",
    "iframe": "src",
    "img": "src",
    "source": "src",
    "track": "src",
    "video": "src",
    "object": "data",
    "data": "value",
    "meter": "value",
}


@dataclass(frozen=True, slots=True)
class MicrodataItem:
    """A microdata item. Single-valued properties hold the bare value."""

    type: list[str] | None = None
    id: str | None = None
    properties: dict[str, PropertyValue | list[PropertyValue]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """WHATWG JSON shape; ``type``/``id`` omitted when unset."""
        out: dict[str, Any] = {}
        if self.type is not None:
            out["type"] = list(self.type)
        if self.id is not None:
            out["id"] = self.id
        out["properties"] = {name: _value_to_plain(value) for name, value in self.properties.items()}
        return out


def _value_to_plain(value: Any) -> Any:
    if isinstance(value, MicrodataItem):
        return value.to_dict()
    if isinstance(value, list):
        return [_value_to_plain(v) for v in value]
    return value


def _tokens(value: str | None) -> list[str]:
    return value.split() if value else []


def _property_elements(root: Element, document: Document) -> list[Element]:
    """Collect ``itemprop`` elements belonging to ``root``, in document order."""
    queue: deque[Element] = deque(root.children)
    for ref_id in _tokens(root.get_attribute("itemref")):
        target = document.get_element_by_id(ref_id)
        if target is not None:
            queue.append(target)

    # Element hashing is identity-based
    seen: set[Element] = set()
    found: list[Element] = []
    while queue:
        el = queue.popleft()
        if el in seen:
            continue
        seen.add(el)
        if el.has_attribute("itemprop"):
            found.append(el)
        if not el.has_attribute("itemscope"):
            queue.extend(el.children)

    found.sort(key=functools.cmp_to_key(lambda a, b: a.compare_document_position(b)))
    return found


def _element_value(el: Element) -> str:
    tag = el.tag_name
    if tag == "meta":
        return decode_entities(el.get_attribute("content") or "")
    if tag == "time":
        dt = el.get_attribute("datetime")
        return dt if dt is not None else el.text_content
    attr = _URL_ATTR_BY_TAG.get(tag)
    if attr is not None:
        return el.get_attribute(attr) or ""
    return el.text_content


def extract_item(
    element: Element,
    document: Document,
    memory: frozenset[Element] = frozenset(),
) -> MicrodataItem | None:
    """Extract ``element`` as a microdata item.

    Returns None when ``element`` is already in ``memory`` (the ancestor
    items on the current path).
    """
    if element in memory:
        logger.debug("microdata cycle at %r, skipping", element)
        return None
    memory = memory | {element}

    item_types = _tokens(element.get_attribute("itemtype"))
    item_id = element.get_attribute("itemid")

    collected: dict[str, list[PropertyValue]] = {}
    for prop_el in _property_elements(element, document):
        value: PropertyValue | None
        if prop_el.has_attribute("itemscope"):
            value = extract_item(prop_el, document, memory)
            if value is None:
                continue
        else:
            value = _element_value(prop_el)
        for name in _tokens(prop_el.get_attribute("itemprop")):
            collected.setdefault(name, []).append(value)

    return MicrodataItem(
        type=item_types or None,
        id=item_id.strip() if item_id is not None else None,
        properties={name: values[0] if len(values) == 1 else values for name, values in collected.items()},
    )
