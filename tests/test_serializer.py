# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for PageMeta serialization (serializer.py).

Fixture pairs under tests/fixtures: ``<name>.html`` is extracted and its
``to_dict`` output compared with ``<name>.json``.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pagemeta import Favicon, Image, MicrodataItem, PageMeta, extract_html
from pagemeta.serializer import to_dict, to_json

_FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"
_FIXTURE_NAMES = sorted(p.stem for p in _FIXTURES_DIR.glob("*.html"))


class TestFixtures:
    def test_fixtures_present(self):
        assert _FIXTURE_NAMES

    @pytest.mark.parametrize("name", _FIXTURE_NAMES)
    def test_snapshot_matches(self, name):
        html = (_FIXTURES_DIR / f"{name}.html").read_text("utf-8")
        expected = json.loads((_FIXTURES_DIR / f"{name}.json").read_text("utf-8"))
        assert to_dict(extract_html(html)) == expected


class TestToDict:
    def test_empty_snapshot(self):
        assert to_dict(PageMeta()) == {
            "meta": {},
            "other": {},
            "feeds": [],
            "images": [],
            "favicons": [],
            "videos": [],
            "jsonld": [],
            "microdata": [],
            "openGraphObject": {},
            "favicon": "/favicon.ico",
        }

    def test_meta_keys_sorted(self):
        data = to_dict(PageMeta(meta={"z": ["1"], "a": ["2"], "m": ["3"]}))
        assert list(data["meta"]) == ["a", "m", "z"]

    def test_records_and_accessors(self):
        meta = PageMeta(
            meta={"og:image": ["https://a/x.png"], "og:url": ["https://a/"]},
            images=[Image("https://a/x.png", secure_url="https://a/x.png")],
            favicons=[Favicon("/i.png", rel="icon")],
            canonical_url="https://a/canonical",
            microdata=[MicrodataItem(type=["T"])],
        )
        data = to_dict(meta)
        assert data["images"] == [{"url": "https://a/x.png", "secureUrl": "https://a/x.png"}]
        assert data["favicons"] == [{"href": "/i.png", "rel": "icon"}]
        assert data["microdata"] == [{"type": ["T"], "properties": {}}]
        assert data["canonicalUrl"] == "https://a/canonical"
        assert data["image"] == "https://a/x.png"
        assert data["url"] == "https://a/"
        assert data["favicon"] == "/i.png"

    def test_does_not_alias_snapshot_lists(self):
        meta = PageMeta(meta={"k": ["v"]})
        to_dict(meta)["meta"]["k"].append("x")
        assert meta.meta == {"k": ["v"]}


class TestToJson:
    def test_valid_json(self):
        meta = extract_html('<html><head><meta property="og:title" content="Café"></head></html>')
        parsed = json.loads(to_json(meta))
        assert parsed["title"] == "Café"

    def test_non_ascii_kept(self):
        meta = PageMeta(title_text="日本語")
        assert "日本語" in to_json(meta)

    def test_indent(self):
        assert to_json(PageMeta(), indent=None).startswith('{"meta": {}')
