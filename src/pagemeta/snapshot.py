# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""PageMeta — the metadata snapshot produced by one extract() call.

Plain fields are written by the extraction pass. Derived properties
(favicon, title, description, image, url, site_name, open_graph_object)
are recomputed from those fields on every access.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from pagemeta.microdata import MicrodataItem
from pagemeta.records import Favicon, Feed, Image, Video

DEFAULT_FAVICON = "/favicon.ico"

_SIZE_RE = re.compile(r"^(\d+)[xX](\d+)$")
_ICON_RELS = ("icon", "shortcut icon")


def _size_area(token: str) -> int | None:
    m = _SIZE_RE.match(token)
    if not m:
        return None
    return int(m.group(1)) * int(m.group(2))


def _largest_png(pngs: list[Favicon]) -> Favicon | None:
    """PNG with the largest declared W*H across all sizes tokens (first wins ties)."""
    best: Favicon | None = None
    best_area = 0
    for png in pngs:
        for token in (png.sizes or "").split():
            area = _size_area(token)
            if area is not None and area > best_area:
                best_area = area
                best = png
    return best


@dataclass
class PageMeta:
    """Metadata snapshot of one document."""

    meta: dict[str, list[str]] = field(default_factory=dict)
    icon_href: str | None = None
    shortcut_icon_href: str | None = None
    title_text: str | None = None
    first_heading_text: str | None = None
    canonical_url: str | None = None
    feeds: list[Feed] = field(default_factory=list)
    images: list[Image] = field(default_factory=list)
    videos: list[Video] = field(default_factory=list)
    favicons: list[Favicon] = field(default_factory=list)
    jsonld: list[Any] = field(default_factory=list)
    microdata: list[MicrodataItem] = field(default_factory=list)

    # --- Helpers ---

    def _first(self, *keys: str) -> str | None:
        """First value of the first key with any values, returned as is (may be "")."""
        for key in keys:
            values = self.meta.get(key)
            if values:
                return values[0]
        return None

    @property
    def other(self) -> dict[str, str]:
        """Fallback values under their source keys (icon, shortcut icon, title, firstHeading)."""
        pairs = (
            ("icon", self.icon_href),
            ("shortcut icon", self.shortcut_icon_href),
            ("title", self.title_text),
            ("firstHeading", self.first_heading_text),
        )
        return {key: value for key, value in pairs if value is not None}

    # --- Derived accessors ---

    @property
    def favicon(self) -> str:
        """Best favicon href: SVG > largest PNG > first PNG > ICO > icon links > /favicon.ico."""
        for fav in self.favicons:
            if fav.type == "image/svg+xml" or fav.extname == ".svg":
                return fav.href

        pngs = [f for f in self.favicons if f.type == "image/png" or f.extname == ".png"]
        largest = _largest_png(pngs)
        if largest is not None:
            return largest.href
        if pngs:
            return pngs[0].href

        for fav in self.favicons:
            if fav.type == "image/x-icon" or (fav.rel in _ICON_RELS and fav.extname == ".ico"):
                return fav.href

        return self.icon_href or self.shortcut_icon_href or DEFAULT_FAVICON

    @property
    def title(self) -> str | None:
        for candidate in (self._first("og:title", "twitter:title", "title"), self.title_text, self.first_heading_text):
            if candidate is not None:
                return candidate
        return None

    @property
    def description(self) -> str | None:
        return self._first("og:description", "twitter:description", "description")

    @property
    def image(self) -> str | None:
        return self._first("og:image", "twitter:image", "image")

    @property
    def url(self) -> str | None:
        return self._first("og:url", "twitter:url", "url")

    @property
    def site_name(self) -> str | None:
        # twitter:site is a handle, not a site name
        return self._first("og:site_name", "site_name")

    @property
    def open_graph_object(self) -> dict[str, str | list[str]]:
        """Properties of the current og:type, e.g. ``article:tag`` → ``tag``.

        The type is cut at its first dot ("video.other" → "video:" prefix).
        A property seen once maps to a string; several times, to a list.
        """
        og_type = self._first("og:type")
        if og_type is None:
            return {}
        prefix = og_type.split(".", 1)[0] + ":"
        result: dict[str, str | list[str]] = {}
        for key, values in self.meta.items():
            if not key.startswith(prefix):
                continue
            prop = key[len(prefix) :]
            if prop:
                result[prop] = values[0] if len(values) == 1 else list(values)
        return result
