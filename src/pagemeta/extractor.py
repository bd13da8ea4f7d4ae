# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Single-pass metadata extraction from a parsed document.

Order: favicons > meta tags (+ og:image / og:video records) > canonical >
<title> / <h1> > feeds > JSON-LD > microdata.

Only the upfront argument check raises. Missing attributes, malformed
JSON-LD and microdata cycles are dropped silently (debug log).
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from lxml import etree

from pagemeta.dom import Document, LxmlDocument
from pagemeta.entities import decode_entities
from pagemeta.errors import InvalidArgumentError
from pagemeta.microdata import extract_item
from pagemeta.records import Favicon, Feed, Image, Video
from pagemeta.snapshot import PageMeta

logger = logging.getLogger(__name__)

FEED_TYPES: frozenset[str] = frozenset(
    {
        "application/rss+xml",
        "application/atom+xml",
        "application/feed+json",
        "application/json",
    }
)

_INVALID_DOCUMENT = "Expected a DOM Document with querySelectorAll."

# og:image:<field> / og:video:<field> sub-properties
_STRUCTURED_FIELDS = frozenset({"secure_url", "type", "width", "height", "alt"})


# --- Helpers ---


def _as_document(document: Any) -> Document:
    if isinstance(document, (etree._Element, etree._ElementTree)):
        return LxmlDocument(document)
    if document is None or not callable(getattr(document, "query_selector_all", None)):
        raise InvalidArgumentError(_INVALID_DOCUMENT)
    return document


def _attr(el: Any, name: str) -> str:
    return el.get_attribute(name) or ""


# --- Links: favicons, canonical, feeds ---


def _extract_favicons(doc: Document, result: PageMeta) -> None:
    for link in doc.query_selector_all("link[rel]"):
        rel = _attr(link, "rel").strip().lower()
        href = _attr(link, "href")
        if not rel or not href or rel not in ("icon", "shortcut icon"):
            continue
        result.favicons.append(
            Favicon(
                href,
                rel=rel,
                type=link.get_attribute("type") or None,
                sizes=link.get_attribute("sizes") or None,
            )
        )
        if rel == "icon" and result.icon_href is None:
            result.icon_href = href
        elif rel == "shortcut icon" and result.shortcut_icon_href is None:
            result.shortcut_icon_href = href


def _extract_canonical(doc: Document, result: PageMeta) -> None:
    for link in doc.query_selector_all("link[rel]"):
        if _attr(link, "rel").strip().lower() != "canonical":
            continue
        href = _attr(link, "href")
        if href:
            result.canonical_url = href
            return


def _extract_feeds(doc: Document, result: PageMeta) -> None:
    for link in doc.query_selector_all("link[rel]"):
        if _attr(link, "rel").strip().lower() != "alternate":
            continue
        feed_type = _attr(link, "type")
        href = _attr(link, "href")
        if feed_type not in FEED_TYPES or not href:
            continue
        result.feeds.append(Feed(href, title=link.get_attribute("title") or None, type=feed_type))


# --- Meta tags ---


def _apply_media_property(key: str, content: str, result: PageMeta) -> None:
    """Route og:image* / og:video* keys into the images / videos records."""
    for kind, records, record_cls in (
        ("image", result.images, Image),
        ("video", result.videos, Video),
    ):
        base = f"og:{kind}"
        if key in (base, f"{base}:url"):
            records.append(record_cls(content))
            return
        if key.startswith(f"{base}:"):
            field_name = key[len(base) + 1 :]
            if field_name not in _STRUCTURED_FIELDS:
                return
            if not records:
                logger.debug("dropping %s without a preceding %s", key, base)
                return
            records[-1] = dataclasses.replace(records[-1], **{field_name: content})
            return


def _extract_meta(doc: Document, result: PageMeta) -> None:
    for tag in doc.query_selector_all("meta"):
        raw = tag.get_attribute("content")
        if not raw:
            continue
        content = decode_entities(raw)
        for attr in ("property", "name"):
            key = tag.get_attribute(attr)
            if not key:
                continue
            result.meta.setdefault(key, []).append(content)
            if attr == "property":
                _apply_media_property(key, content, result)


# --- Title / heading ---


def _extract_headings(doc: Document, result: PageMeta) -> None:
    title = doc.query_selector("title")
    if title is not None and title.text_content:
        result.title_text = title.text_content
    h1 = doc.query_selector("h1")
    if h1 is not None and h1.text_content:
        result.first_heading_text = h1.text_content


# --- JSON-LD ---


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _extract_jsonld(doc: Document, result: PageMeta) -> None:
    for script in doc.query_selector_all('script[type="application/ld+json"]'):
        text = script.text_content
        if not text:
            continue
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            logger.debug("skipping malformed JSON-LD: %s", e)
            continue
        if isinstance(data, list):
            result.jsonld.extend(data)
        else:
            result.jsonld.append(data)


# --- Microdata ---


def _extract_microdata(doc: Document, result: PageMeta) -> None:
    for el in doc.query_selector_all("[itemscope]:not([itemprop])"):
        item = extract_item(el, doc)
        if item is not None:
            result.microdata.append(item)


# --- Public API ---


def extract(document: Any) -> PageMeta:
    """Extract a PageMeta snapshot from ``document``.

    ``document`` is any ``pagemeta.dom.Document`` implementation, or an lxml
    element / element tree (wrapped in LxmlDocument).

    Raises:
        InvalidArgumentError: ``document`` is None or not queryable.
    """
    doc = _as_document(document)
    result = PageMeta()

    _extract_favicons(doc, result)
    _extract_meta(doc, result)
    _extract_canonical(doc, result)
    _extract_headings(doc, result)
    _extract_feeds(doc, result)
    _extract_jsonld(doc, result)
    _extract_microdata(doc, result)

    logger.debug(
        "extracted meta_keys=%d images=%d videos=%d favicons=%d feeds=%d jsonld=%d microdata=%d",
        len(result.meta),
        len(result.images),
        len(result.videos),
        len(result.favicons),
        len(result.feeds),
        len(result.jsonld),
        len(result.microdata),
    )
    return result


def extract_html(html: str | bytes) -> PageMeta:
    """Parse ``html`` with lxml and extract it."""
    return extract(LxmlDocument.from_html(html))
