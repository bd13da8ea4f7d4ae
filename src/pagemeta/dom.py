# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Document capability interface and the lxml binding.

The extractor only talks to ``Document`` / ``Element``. Any DOM library can
be plugged in by implementing these protocols; ``LxmlDocument`` wraps an
``lxml.html`` tree.

Element identity: extraction keys visited sets on Python object identity,
so an implementation must hand out the same ``Element`` object for the same
node for as long as the document wrapper lives.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import lxml.html
from lxml import etree
from lxml.cssselect import CSSSelector

# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class Element(Protocol):
    """Read-only view of a single DOM element."""

    @property
    def tag_name(self) -> str: ...

    @property
    def children(self) -> Sequence[Element]: ...

    @property
    def text_content(self) -> str: ...

    def get_attribute(self, name: str) -> str | None: ...

    def has_attribute(self, name: str) -> bool: ...

    def compare_document_position(self, other: Element) -> int:
        """Negative if self precedes other, 0 if identical, positive otherwise."""
        ...


@runtime_checkable
class Document(Protocol):
    """Queryable document: CSS selection plus id lookup."""

    def query_selector_all(self, selector: str) -> Sequence[Element]: ...

    def query_selector(self, selector: str) -> Element | None: ...

    def get_element_by_id(self, element_id: str) -> Element | None: ...


# ---------------------------------------------------------------------------
# lxml binding
# ---------------------------------------------------------------------------


class LxmlElement:
    """Element adapter over an ``lxml.html.HtmlElement``."""

    __slots__ = ("_el", "_doc", "_index")

    def __init__(self, el: etree._Element, doc: LxmlDocument, index: int) -> None:
        self._el = el
        self._doc = doc
        self._index = index

    def __repr__(self) -> str:
        return f"<LxmlElement {self.tag_name} #{self._index}>"

    @property
    def tag_name(self) -> str:
        return str(self._el.tag).lower()

    @property
    def children(self) -> list[LxmlElement]:
        return [self._doc._wrap(child) for child in self._el if isinstance(child.tag, str)]

    @property
    def text_content(self) -> str:
        # string(.) skips comments and processing instructions
        return str(self._el.xpath("string()"))

    def get_attribute(self, name: str) -> str | None:
        return self._el.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._el.attrib

    def compare_document_position(self, other: Element) -> int:
        if not isinstance(other, LxmlElement):
            raise TypeError(f"cannot compare LxmlElement with {type(other).__name__}")
        return self._index - other._index


class LxmlDocument:
    """Document adapter over an lxml tree.

    Accepts an element (any node of the tree) or an ``ElementTree``; the
    whole tree is indexed in document order once at construction.
    """

    def __init__(self, root: etree._Element | etree._ElementTree) -> None:
        if isinstance(root, etree._ElementTree):
            root = root.getroot()
        self._root = root.getroottree().getroot()
        # Holding the lxml proxies keeps their identity stable
        self._wrappers: dict[etree._Element, LxmlElement] = {}
        self._ids: dict[str, LxmlElement] = {}
        for index, el in enumerate(self._root.iter(etree.Element)):
            wrapper = LxmlElement(el, self, index)
            self._wrappers[el] = wrapper
            el_id = el.get("id")
            if el_id is not None and el_id not in self._ids:
                self._ids[el_id] = wrapper
        self._selectors: dict[str, CSSSelector] = {}

    @classmethod
    def from_html(cls, html: str | bytes) -> LxmlDocument:
        """Parse ``html`` with lxml and wrap the resulting document."""
        return cls(lxml.html.document_fromstring(html))

    def _wrap(self, el: etree._Element) -> LxmlElement:
        return self._wrappers[el]

    def _compiled(self, selector: str) -> CSSSelector:
        compiled = self._selectors.get(selector)
        if compiled is None:
            compiled = CSSSelector(selector, translator="html")
            self._selectors[selector] = compiled
        return compiled

    def query_selector_all(self, selector: str) -> list[LxmlElement]:
        return [self._wrap(el) for el in self._compiled(selector)(self._root)]

    def query_selector(self, selector: str) -> LxmlElement | None:
        matches = self._compiled(selector)(self._root)
        return self._wrap(matches[0]) if matches else None

    def get_element_by_id(self, element_id: str) -> LxmlElement | None:
        return self._ids.get(element_id)
