# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for PageMeta derived accessors (snapshot.py)."""

from __future__ import annotations

import pytest

from pagemeta import DEFAULT_FAVICON, Favicon, PageMeta


class TestFavicon:
    def test_default_when_nothing_declared(self):
        assert PageMeta().favicon == DEFAULT_FAVICON == "/favicon.ico"

    def test_svg_beats_png(self):
        meta = PageMeta(
            favicons=[
                Favicon("/big.png", rel="icon", sizes="512x512"),
                Favicon("/vector.svg?v=3", rel="icon"),
            ]
        )
        assert meta.favicon == "/vector.svg?v=3"

    def test_svg_by_type(self):
        meta = PageMeta(favicons=[Favicon("/a.png", rel="icon"), Favicon("/icon", rel="icon", type="image/svg+xml")])
        assert meta.favicon == "/icon"

    def test_largest_png_wins(self):
        meta = PageMeta(
            favicons=[
                Favicon("/16.png", rel="icon", sizes="16x16"),
                Favicon("/64.png", rel="icon", sizes="64x64"),
                Favicon("/32.png", rel="icon", sizes="32x32"),
            ]
        )
        assert meta.favicon == "/64.png"

    def test_all_sizes_tokens_considered(self):
        meta = PageMeta(
            favicons=[
                Favicon("/64.png", rel="icon", sizes="64x64"),
                Favicon("/multi.png", rel="icon", sizes="16x16 128X128"),
            ]
        )
        assert meta.favicon == "/multi.png"

    def test_png_by_type(self):
        meta = PageMeta(
            favicons=[
                Favicon("/small", rel="icon", type="image/png", sizes="16x16"),
                Favicon("/large", rel="icon", type="image/png", sizes="96x96"),
            ]
        )
        assert meta.favicon == "/large"

    def test_first_png_without_sizes(self):
        meta = PageMeta(
            favicons=[
                Favicon("/x.ico", rel="icon"),
                Favicon("/first.png", rel="icon"),
                Favicon("/second.png", rel="icon", sizes="any"),
            ]
        )
        assert meta.favicon == "/first.png"

    def test_ico_by_extension(self):
        meta = PageMeta(favicons=[Favicon("/legacy.ico?v=2", rel="shortcut icon")], icon_href="/other")
        assert meta.favicon == "/legacy.ico?v=2"

    def test_ico_by_type(self):
        meta = PageMeta(favicons=[Favicon("/icon", rel="icon", type="image/x-icon")])
        assert meta.favicon == "/icon"

    def test_ico_needs_icon_rel(self):
        meta = PageMeta(favicons=[Favicon("/odd.ico")], shortcut_icon_href="/shortcut")
        assert meta.favicon == "/shortcut"

    def test_icon_href_before_shortcut(self):
        meta = PageMeta(icon_href="/icon.gif", shortcut_icon_href="/shortcut.gif")
        assert meta.favicon == "/icon.gif"


class TestTextAccessors:
    def test_title_precedence(self):
        meta = PageMeta(
            meta={"twitter:title": ["tw"], "title": ["meta"]},
            title_text="doc",
            first_heading_text="h1",
        )
        assert meta.title == "tw"
        meta.meta["og:title"] = ["og", "og2"]
        assert meta.title == "og"

    def test_title_falls_back_to_title_then_heading(self):
        assert PageMeta(title_text="doc", first_heading_text="h1").title == "doc"
        assert PageMeta(first_heading_text="h1").title == "h1"
        assert PageMeta().title is None

    @pytest.mark.parametrize(
        "attr,key,fallback",
        [
            ("title", "og:title", "twitter:title"),
            ("description", "og:description", "twitter:description"),
            ("image", "og:image", "twitter:image"),
            ("url", "og:url", "twitter:url"),
            ("site_name", "og:site_name", "site_name"),
        ],
    )
    def test_empty_first_value_is_returned(self, attr, key, fallback):
        meta = PageMeta(meta={key: ["", "later"], fallback: ["next"]}, title_text="doc")
        assert getattr(meta, attr) == ""

    def test_empty_list_falls_through(self):
        meta = PageMeta(meta={"og:title": [], "og:description": []}, title_text="doc")
        assert meta.title == "doc"
        assert meta.description is None

    @pytest.mark.parametrize(
        "attr,keys",
        [
            ("description", ("og:description", "twitter:description", "description")),
            ("image", ("og:image", "twitter:image", "image")),
            ("url", ("og:url", "twitter:url", "url")),
        ],
    )
    def test_precedence_order(self, attr, keys):
        values = {key: [f"v{i}"] for i, key in enumerate(keys)}
        for i in range(len(keys)):
            remaining = {k: v for k, v in values.items() if k not in keys[:i]}
            assert getattr(PageMeta(meta=remaining), attr) == f"v{i}"
        assert getattr(PageMeta(), attr) is None

    def test_site_name_ignores_twitter_site(self):
        assert PageMeta(meta={"twitter:site": ["@handle"]}).site_name is None
        assert PageMeta(meta={"site_name": ["Plain"]}).site_name == "Plain"
        assert PageMeta(meta={"og:site_name": ["OG"], "site_name": ["Plain"]}).site_name == "OG"


class TestOther:
    def test_only_set_values(self):
        meta = PageMeta(icon_href="/i.png", title_text="T")
        assert meta.other == {"icon": "/i.png", "title": "T"}

    def test_all_keys(self):
        meta = PageMeta(icon_href="/i", shortcut_icon_href="/s", title_text="T", first_heading_text="H")
        assert meta.other == {"icon": "/i", "shortcut icon": "/s", "title": "T", "firstHeading": "H"}


class TestOpenGraphObject:
    def test_no_type(self):
        assert PageMeta(meta={"article:tag": ["x"]}).open_graph_object == {}

    def test_article_properties(self):
        meta = PageMeta(
            meta={
                "og:type": ["article"],
                "article:tag": ["python", "html"],
                "article:author": ["Jane"],
                "article:": ["ignored"],
                "book:isbn": ["123"],
            }
        )
        assert meta.open_graph_object == {"tag": ["python", "html"], "author": "Jane"}

    def test_type_cut_at_first_dot(self):
        meta = PageMeta(
            meta={
                "og:type": ["video.other"],
                "video:duration": ["42"],
                "video.other:special": ["no"],
            }
        )
        assert meta.open_graph_object == {"duration": "42"}

    def test_nested_property_names_kept(self):
        meta = PageMeta(meta={"og:type": ["music.song"], "music:album:track": ["3"]})
        assert meta.open_graph_object == {"album:track": "3"}

    def test_returns_list_copy(self):
        tags = ["a", "b"]
        meta = PageMeta(meta={"og:type": ["article"], "article:tag": tags})
        meta.open_graph_object["tag"].append("c")
        assert tags == ["a", "b"]
